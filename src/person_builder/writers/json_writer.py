"""
JSON rendering for built person records.

Produces the indented, human-readable text printed by the CLI. The
output is not meant to be parsed back.
"""

from __future__ import annotations

import json

from person_builder.models import Person


def render_person(person: Person, indent: int = 2) -> str:
    """
    Render a person as indented JSON.

    Unset optional fields are omitted; integer fields are always present.

    Args:
        person: The built person
        indent: Spaces per indentation level

    Returns:
        JSON text with keys in field declaration order
    """
    return person.to_json(indent=indent)


def format_json_text(json_string: str, indent: int = 2) -> str:
    """
    Re-indent an arbitrary JSON document.

    Args:
        json_string: JSON text, compact or already formatted
        indent: Spaces per indentation level

    Returns:
        The same document, indented

    Raises:
        json.JSONDecodeError: If the input is not valid JSON
    """
    document = json.loads(json_string)
    return json.dumps(document, indent=indent, ensure_ascii=False)
