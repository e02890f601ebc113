"""
Validation result models.

These models report the outcome of applying several values to a form
at once with InputGroup.apply_values().
"""

from typing import Any

from pydantic import BaseModel, Field


class FieldValidationError(BaseModel):
    """Validation error for a specific field."""

    field_name: str = Field(..., description="Name of the field with error")
    error_type: str = Field(
        ...,
        description="Rule that failed: accepted_values, inclusion_filter, exclusion_filter or not_found",
    )
    message: str = Field(..., description="Error message configured on the field")
    expected: Any | None = Field(default=None, description="Accepted values or pattern")
    received: Any | None = Field(default=None, description="Received value")


class ValidationResult(BaseModel):
    """Result of applying values to a form."""

    is_valid: bool = Field(..., description="Whether every value was accepted")
    errors: list[FieldValidationError] = Field(
        default_factory=list, description="List of validation errors"
    )
    validated_data: dict[str, str] | None = Field(
        default=None, description="Values of all fields with input if valid"
    )

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def unknown_fields(self) -> list[str]:
        """Names that are not fields of the form."""
        return [e.field_name for e in self.errors if e.error_type == "not_found"]

    def error_for(self, field_name: str) -> FieldValidationError | None:
        """The error reported for a field, None if its value was accepted."""
        return next((e for e in self.errors if e.field_name == field_name), None)

    def messages(self) -> dict[str, str]:
        """Map of field name to the message to show for its rejected value."""
        messages: dict[str, str] = {}
        for error in self.errors:
            messages.setdefault(error.field_name, error.message)
        return messages
