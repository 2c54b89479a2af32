"""
Base model for all person builder records.

Provides the shared pydantic configuration and serialization helpers.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DataModel(BaseModel):
    """
    Base model for builder-populated records.

    Provides:
    - Type coercion on assignment (setters go through validation)
    - camelCase aliases for rendered keys
    - JSON serialization helpers
    """

    model_config = ConfigDict(
        # Use enum values in serialization
        use_enum_values=True,
        # Validate on assignment
        validate_assignment=True,
        # Populate by field name or alias
        populate_by_name=True,
        # Rendered keys are camelCase
        alias_generator=to_camel,
    )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self, indent: int = 2) -> str:
        """Convert to indented JSON string."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
