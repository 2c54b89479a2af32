"""
Pydantic models for records populated by the faceted builders.
"""

from person_builder.enums import Facet
from person_builder.models.base import DataModel
from person_builder.models.person import Person

__all__ = [
    "DataModel",
    "Facet",
    "Person",
]
