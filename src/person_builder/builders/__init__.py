"""
Faceted builders for the person record.

The root ``PersonBuilder`` owns a new ``Person``; its ``employment``,
``address`` and ``common_info`` properties return facet builders bound
to that same person. Each facet builder re-exposes those properties and
``build()``, so a chain can switch facets at any point.
"""

from person_builder.builders.address import PersonAddressBuilder
from person_builder.builders.base import FacetAccessors, PersonBuilder
from person_builder.builders.common_info import PersonCommonInfoBuilder
from person_builder.builders.employment import PersonEmploymentBuilder

__all__ = [
    "FacetAccessors",
    "PersonBuilder",
    "PersonAddressBuilder",
    "PersonCommonInfoBuilder",
    "PersonEmploymentBuilder",
]
