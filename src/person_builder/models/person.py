"""
Person model populated by the faceted builders.

A single flat record holding the address, employment and common
information facets.
"""

from typing import Optional, Union

from pydantic import Field

from person_builder.enums import Facet
from person_builder.models.base import DataModel


class Person(DataModel):
    """
    A person's identity, address and employment data.

    Every field is optional or defaulted so an empty record is valid.
    Values are not range-checked: negative income or age and empty
    strings are stored as given.

    Attributes:
        street_address: Street part of the address
        postal_code: Postal code, kept as text to preserve leading zeros
        city: City name
        position: Job title
        employer: Name of the employing company
        annual_income: Yearly income
        age: Age in years
    """

    # address
    street_address: Optional[str] = Field(
        default=None,
        description="Street part of the address",
        json_schema_extra={"facet": Facet.ADDRESS.value},
    )

    postal_code: Optional[str] = Field(
        default=None,
        description="Postal code",
        json_schema_extra={"facet": Facet.ADDRESS.value},
    )

    city: Optional[str] = Field(
        default=None,
        description="City name",
        json_schema_extra={"facet": Facet.ADDRESS.value},
    )

    # employment
    position: Optional[str] = Field(
        default=None,
        description="Job title",
        json_schema_extra={"facet": Facet.EMPLOYMENT.value},
    )

    employer: Optional[str] = Field(
        default=None,
        description="Name of the employing company",
        json_schema_extra={"facet": Facet.EMPLOYMENT.value},
    )

    annual_income: int = Field(
        default=0,
        description="Yearly income",
        json_schema_extra={"facet": Facet.EMPLOYMENT.value},
    )

    # common info
    age: int = Field(
        default=0,
        description="Age in years",
        json_schema_extra={"facet": Facet.COMMON_INFO.value},
    )

    @classmethod
    def facet_fields(cls, facet: Union[Facet, str]) -> tuple[str, ...]:
        """
        List the field names belonging to one facet.

        Args:
            facet: The facet, as enum member or its string value

        Returns:
            Field names in declaration order
        """
        facet = Facet(facet)
        return tuple(
            name
            for name, info in cls.model_fields.items()
            if (info.json_schema_extra or {}).get("facet") == facet.value
        )

    def __str__(self) -> str:
        """Indented JSON representation."""
        return self.to_json()
