"""
Address facet builder.
"""

from person_builder.builders.base import FacetAccessors
from person_builder.models import Person


class PersonAddressBuilder(FacetAccessors):
    """Sets street address, postal code and city on a shared person."""

    def __init__(self, person: Person) -> None:
        self._person = person

    def at(self, street_address: str) -> "PersonAddressBuilder":
        self._person.street_address = street_address
        return self

    def with_postal_code(self, postal_code: str) -> "PersonAddressBuilder":
        self._person.postal_code = postal_code
        return self

    def in_city(self, city: str) -> "PersonAddressBuilder":
        self._person.city = city
        return self
