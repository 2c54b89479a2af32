"""
Advisory validation for built person records.

The builders accept any value their field type can hold. This module
reports values that are probably mistakes without rejecting or
changing the record.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import ValidationError

from person_builder.models import Person

logger = logging.getLogger(__name__)


@dataclass
class ValidationIssue:
    """A single validation issue."""

    field: str
    message: str
    severity: str  # "error", "warning", "info"
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Result of validating a person."""

    is_valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get only error-level issues."""
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get only warning-level issues."""
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def infos(self) -> list[ValidationIssue]:
        """Get only info-level issues."""
        return [i for i in self.issues if i.severity == "info"]

    def add_error(self, field: str, message: str, value: Any = None) -> None:
        """Add an error issue."""
        self.issues.append(
            ValidationIssue(field=field, message=message, severity="error", value=value)
        )
        self.is_valid = False

    def add_warning(self, field: str, message: str, value: Any = None) -> None:
        """Add a warning issue."""
        self.issues.append(
            ValidationIssue(field=field, message=message, severity="warning", value=value)
        )

    def add_info(self, field: str, message: str, value: Any = None) -> None:
        """Add an info issue."""
        self.issues.append(
            ValidationIssue(field=field, message=message, severity="info", value=value)
        )


class PersonValidator:
    """
    Reports suspicious values on a built person.

    Checks:
    1. Schema validation - the record still satisfies the pydantic model
       (only fails for records created with ``model_construct``)
    2. Range checks - negative income or age
    3. Text checks - empty or whitespace-only strings
    4. Completeness - optional fields that were never set

    Usage:
        validator = PersonValidator()
        result = validator.validate(person)

        for issue in result.warnings:
            print(f"WARNING: {issue.field}: {issue.message}")
    """

    def __init__(self, check_unset: bool = True):
        """
        Initialize the validator.

        Args:
            check_unset: Whether to report unset optional fields as info
        """
        self.check_unset = check_unset

    def validate(self, person: Person) -> ValidationResult:
        """
        Validate a person.

        Args:
            person: The person to check

        Returns:
            ValidationResult with issues found
        """
        result = ValidationResult(is_valid=True)

        self._validate_schema(person, result)
        self._validate_ranges(person, result)
        self._validate_text(person, result)

        if self.check_unset:
            self._validate_completeness(person, result)

        logger.debug(
            f"Validated person: {len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return result

    def _validate_schema(self, person: Person, result: ValidationResult) -> None:
        """Re-run pydantic validation over the current field values."""
        try:
            Person.model_validate(person.model_dump(warnings=False))
        except ValidationError as e:
            for error in e.errors():
                loc = ".".join(str(part) for part in error["loc"])
                result.add_error(loc, error["msg"], error.get("input"))

    def _validate_ranges(self, person: Person, result: ValidationResult) -> None:
        """Flag negative numbers."""
        for name in ("annual_income", "age"):
            value = getattr(person, name)
            if isinstance(value, int) and value < 0:
                result.add_warning(name, f"Negative value: {value}", value)

    def _validate_text(self, person: Person, result: ValidationResult) -> None:
        """Flag empty or whitespace-only strings."""
        for name, value in person.model_dump(warnings=False).items():
            if isinstance(value, str) and not value.strip():
                result.add_warning(name, "Empty text value", value)

    def _validate_completeness(self, person: Person, result: ValidationResult) -> None:
        """Note optional fields that were never set."""
        for name, value in person.model_dump(warnings=False).items():
            if value is None:
                result.add_info(name, "Not set")


def validate_person(person: Person, check_unset: bool = True) -> ValidationResult:
    """
    Convenience function to validate a person.

    Args:
        person: The person to check
        check_unset: Whether to report unset optional fields as info

    Returns:
        ValidationResult with issues found
    """
    validator = PersonValidator(check_unset=check_unset)
    return validator.validate(person)
