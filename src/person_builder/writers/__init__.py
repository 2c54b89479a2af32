"""
Text writers for built records.
"""

from .json_writer import format_json_text, render_person

__all__ = [
    "format_json_text",
    "render_person",
]
