"""
Common information facet builder.
"""

from person_builder.builders.base import FacetAccessors
from person_builder.models import Person


class PersonCommonInfoBuilder(FacetAccessors):
    """Sets age on a shared person."""

    def __init__(self, person: Person) -> None:
        self._person = person

    def with_age(self, age: int) -> "PersonCommonInfoBuilder":
        self._person.age = age
        return self
