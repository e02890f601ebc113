"""
Data models for input-forms.

This module contains Pydantic models for:
- Field attributes (builder input)
- Validation results of bulk value entry
- Form reference export
"""

from input_forms.models.field_attributes import (
    FieldAttributes,
    InputType,
)
from input_forms.models.form_schema import (
    FormFieldSchema,
    FormSchema,
)
from input_forms.models.validation_result import (
    FieldValidationError,
    ValidationResult,
)

__all__ = [
    # Builder input
    "FieldAttributes",
    "InputType",
    # Reference
    "FormFieldSchema",
    "FormSchema",
    # Validation
    "ValidationResult",
    "FieldValidationError",
]
