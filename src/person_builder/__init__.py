"""
Person Builder - Faceted builder pattern demonstration.

This package builds a single ``Person`` record through several chained,
facet-specific builders (address, employment, common info) that all
share the same underlying instance.
"""

__version__ = "0.1.0"

from person_builder.builders import (
    PersonAddressBuilder,
    PersonBuilder,
    PersonCommonInfoBuilder,
    PersonEmploymentBuilder,
)
from person_builder.demo import build_demo_person
from person_builder.enums import Facet
from person_builder.models import Person
from person_builder.validation import PersonValidator, ValidationResult, validate_person
from person_builder.writers import format_json_text, render_person

__all__ = [
    # Models
    "Person",
    "Facet",
    # Builders
    "PersonBuilder",
    "PersonAddressBuilder",
    "PersonEmploymentBuilder",
    "PersonCommonInfoBuilder",
    # Driver
    "build_demo_person",
    # Validation
    "PersonValidator",
    "ValidationResult",
    "validate_person",
    # Writers
    "render_person",
    "format_json_text",
]
