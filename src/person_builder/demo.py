"""
The fixed demonstration chain run by the CLI.
"""

import logging

from person_builder.builders import PersonBuilder
from person_builder.models import Person

logger = logging.getLogger(__name__)


def build_demo_person() -> Person:
    """
    Build the demo person through every facet.

    Returns:
        Person aged 21 at "Street Address", 050822, HCM City, working at
        MoMo as a Backend Developer with zero income
    """
    logger.info("Building demo person")
    return (
        PersonBuilder()
        .common_info
            .with_age(21)
        .address
            .at("Street Address")
            .with_postal_code("050822")
            .in_city("HCM City")
        .employment
            .at("MoMo")
            .as_a("Backend Developer")
            .earning(0)
        .build()
    )
