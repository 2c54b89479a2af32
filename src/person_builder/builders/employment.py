"""
Employment facet builder.
"""

from person_builder.builders.base import FacetAccessors
from person_builder.models import Person


class PersonEmploymentBuilder(FacetAccessors):
    """Sets employer, position and annual income on a shared person."""

    def __init__(self, person: Person) -> None:
        self._person = person

    def at(self, employer: str) -> "PersonEmploymentBuilder":
        self._person.employer = employer
        return self

    def as_a(self, position: str) -> "PersonEmploymentBuilder":
        self._person.position = position
        return self

    def earning(self, amount: int) -> "PersonEmploymentBuilder":
        """Set annual income. Negative amounts are stored as given."""
        self._person.annual_income = amount
        return self
