"""
Root builder and the facet accessor surface shared by every builder.

Each builder holds a reference to one ``Person``. Facet accessors hand
out a new builder over that same instance, so values set through any
facet accumulate onto a single record.
"""

import logging
from typing import TYPE_CHECKING

from person_builder.models import Person

if TYPE_CHECKING:
    from person_builder.builders.address import PersonAddressBuilder
    from person_builder.builders.common_info import PersonCommonInfoBuilder
    from person_builder.builders.employment import PersonEmploymentBuilder

logger = logging.getLogger(__name__)


class FacetAccessors:
    """
    Facet switching and finalization over a shared ``Person``.

    Subclasses must set ``self._person`` before any accessor is used.
    """

    _person: Person

    @property
    def employment(self) -> "PersonEmploymentBuilder":
        """Builder for employer, position and income."""
        from person_builder.builders.employment import PersonEmploymentBuilder

        logger.debug("Switching to employment facet")
        return PersonEmploymentBuilder(self._person)

    @property
    def address(self) -> "PersonAddressBuilder":
        """Builder for street address, postal code and city."""
        from person_builder.builders.address import PersonAddressBuilder

        logger.debug("Switching to address facet")
        return PersonAddressBuilder(self._person)

    @property
    def common_info(self) -> "PersonCommonInfoBuilder":
        """Builder for age."""
        from person_builder.builders.common_info import PersonCommonInfoBuilder

        logger.debug("Switching to common info facet")
        return PersonCommonInfoBuilder(self._person)

    def build(self) -> Person:
        """
        Return the accumulated person.

        The record is neither copied nor reset, so repeated calls return
        the same instance with the values set so far.
        """
        logger.debug(f"Built person: {self._person.to_dict()}")
        return self._person


class PersonBuilder(FacetAccessors):
    """
    Entry point of a construction session.

    Usage:
        person = (
            PersonBuilder()
            .common_info.with_age(21)
            .address.at("Street Address").in_city("HCM City")
            .employment.at("MoMo").as_a("Backend Developer")
            .build()
        )
    """

    def __init__(self) -> None:
        self._person = Person()
