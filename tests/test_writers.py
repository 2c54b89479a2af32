"""
Tests for the JSON text writers.
"""

import json

import pytest

from person_builder.builders import PersonBuilder
from person_builder.models import Person
from person_builder.writers import format_json_text, render_person


class TestRenderPerson:
    """Tests for render_person."""

    def test_empty_person(self):
        assert render_person(Person()) == '{\n  "annualIncome": 0,\n  "age": 0\n}'

    def test_custom_indent(self):
        text = render_person(Person(age=3), indent=4)
        assert '\n    "age": 3' in text

    def test_deterministic(self):
        builder = PersonBuilder().address.at("S").employment.at("E")
        assert render_person(builder.build()) == render_person(builder.build())

    def test_non_ascii_preserved(self):
        person = PersonBuilder().address.in_city("Hồ Chí Minh").build()
        assert "Hồ Chí Minh" in render_person(person)


class TestFormatJsonText:
    """Tests for format_json_text."""

    def test_reindent_compact(self):
        text = format_json_text('{"a":1,"b":[1,2]}')
        assert text == '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ]\n}'

    def test_roundtrip_person(self):
        person = Person(city="HCM City", age=21)
        compact = person.model_dump_json(by_alias=True, exclude_none=True)
        assert format_json_text(compact) == render_person(person)

    def test_malformed_input_raises(self):
        with pytest.raises(json.JSONDecodeError):
            format_json_text('{"a": 1,')


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
