"""
Enums for person record metadata.

These enums define the facets a person's attributes are grouped into.
"""

from enum import Enum


class Facet(str, Enum):
    """Named groups of person attributes, each with its own builder."""

    ADDRESS = "address"
    EMPLOYMENT = "employment"
    COMMON_INFO = "common_info"
