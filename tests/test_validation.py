"""
Tests for advisory person validation.
"""

import pytest

from person_builder.builders import PersonBuilder
from person_builder.demo import build_demo_person
from person_builder.models import Person
from person_builder.validation import PersonValidator, ValidationResult, validate_person


class TestValidationResult:
    """Tests for ValidationResult bookkeeping."""

    def test_error_invalidates(self):
        result = ValidationResult(is_valid=True)
        result.add_error("age", "bad")
        assert not result.is_valid
        assert len(result.errors) == 1

    def test_warning_and_info_keep_valid(self):
        result = ValidationResult(is_valid=True)
        result.add_warning("age", "odd")
        result.add_info("city", "Not set")
        assert result.is_valid
        assert [i.field for i in result.warnings] == ["age"]
        assert [i.field for i in result.infos] == ["city"]


class TestPersonValidator:
    """Tests for PersonValidator."""

    def test_demo_person_is_clean(self):
        result = validate_person(build_demo_person())
        assert result.is_valid
        assert result.issues == []

    def test_negative_values_warn(self):
        person = PersonBuilder().employment.earning(-1).common_info.with_age(-2).build()
        result = PersonValidator(check_unset=False).validate(person)
        assert result.is_valid
        assert {i.field: i.value for i in result.warnings} == {"annual_income": -1, "age": -2}

    def test_empty_strings_warn(self):
        person = PersonBuilder().address.at("   ").employment.at("").build()
        result = PersonValidator(check_unset=False).validate(person)
        assert sorted(i.field for i in result.warnings) == ["employer", "street_address"]

    def test_unset_fields_reported(self):
        result = validate_person(Person())
        assert result.is_valid
        assert sorted(i.field for i in result.infos) == [
            "city",
            "employer",
            "position",
            "postal_code",
            "street_address",
        ]

    def test_unset_check_disabled(self):
        assert validate_person(Person(), check_unset=False).issues == []

    def test_schema_error_reported(self):
        """Test records built without validation are flagged."""
        person = Person.model_construct(age="twenty")
        result = PersonValidator(check_unset=False).validate(person)
        assert not result.is_valid
        assert [i.field for i in result.errors] == ["age"]

    def test_validation_does_not_mutate(self):
        person = PersonBuilder().employment.earning(-1).build()
        before = person.model_dump()
        validate_person(person)
        assert person.model_dump() == before


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
