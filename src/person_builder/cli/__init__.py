"""
Command-line interface for person-builder.

Prints the demo person or builds one from command-line options.
"""

from .main import app, main

__all__ = ["main", "app"]
