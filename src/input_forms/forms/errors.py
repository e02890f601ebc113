"""
Exception types raised by the input graph.

Errors fall into five families:
- construction errors raised while a form is being built
- binding errors raised when a field is attached to caller storage
- validation errors raised when a value is rejected by a field
- lookup errors raised for unknown field or group names
- hint resolution and cursor errors raised at traversal time
"""

from typing import Any


class InputFormError(Exception):
    """Base exception for all input form errors."""

    error_code: str = "FRM000"

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        error_code: str | None = None,
    ):
        """
        Initialize the error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional context.
            error_code: Optional error code override.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        if error_code:
            self.error_code = error_code

    def __str__(self) -> str:
        return self.message


# Construction errors


class FormBuildError(InputFormError):
    """Raised when a builder call cannot be applied to the form."""

    error_code = "BLD001"


class DuplicateFieldError(FormBuildError):
    """Raised when a field name is already used in the same tree."""

    error_code = "BLD002"

    def __init__(self, name: str):
        super().__init__(
            f"a field with name '{name}' has already been added",
            {"field": name},
        )
        self.name = name


class DuplicateGroupError(FormBuildError):
    """Raised when a collection group or container id is registered twice."""

    error_code = "BLD003"


class InvalidDependencyError(FormBuildError):
    """Raised when a dependency expression is not of the form name[=value]."""

    error_code = "BLD004"


class DependencyNotFoundError(FormBuildError):
    """Raised when one or more named prerequisites are not in the form."""

    error_code = "BLD005"

    def __init__(self, name: str, missing: list[str]):
        super().__init__(
            f"unable to add field '{name}' as one or more dependent fields "
            f"{missing} were not found",
            {"field": name, "missing": missing},
        )
        self.name = name
        self.missing = missing


class ContainerNotFoundError(FormBuildError):
    """Raised when a field references a group id with no registered container."""

    error_code = "BLD006"


class InvalidPatternError(FormBuildError):
    """Raised when an inclusion or exclusion filter is not a valid regex."""

    error_code = "BLD007"


class InvalidHintError(FormBuildError):
    """Raised when a hint URI does not match the accepted syntax."""

    error_code = "BLD008"


class InvalidAttributesError(FormBuildError):
    """Raised when the attributes of a new field are incomplete or out of range."""

    error_code = "BLD009"


# Binding errors


class BindingError(InputFormError):
    """Raised when a field cannot be bound to the given storage."""

    error_code = "BND001"


class FieldNotBoundError(BindingError):
    """Raised when a value is written to a field that has no storage."""

    error_code = "BND002"


# Validation errors


class InputValidationError(InputFormError):
    """
    Raised when a value is rejected by a field.

    The string form of the error is the message configured on the field
    so that it can be shown to the user as-is.
    """

    error_code = "VAL001"

    def __init__(self, field_name: str, message: str, error_type: str):
        super().__init__(message, {"field": field_name, "error_type": error_type})
        self.field_name = field_name
        self.error_type = error_type


# Lookup errors


class FieldNotFoundError(InputFormError, LookupError):
    """Raised when a field name is not part of the form."""

    error_code = "LKP001"

    def __init__(self, name: str):
        super().__init__(f"field '{name}' was not found in form", {"field": name})
        self.name = name


class GroupNotFoundError(InputFormError, LookupError):
    """Raised when a group name is not part of the collection."""

    error_code = "LKP002"

    def __init__(self, name: str):
        super().__init__(f"group '{name}' was not found in collection", {"group": name})
        self.name = name


# Traversal time errors


class HintResolutionError(InputFormError):
    """Raised when a field value hint cannot be resolved."""

    error_code = "HNT001"

    def __init__(self, hint: str, message: str):
        super().__init__(message, {"hint": hint})
        self.hint = hint


class CursorError(InputFormError):
    """Raised when input is given to a cursor that does not expect it."""

    error_code = "CUR001"


class CursorExhaustedError(CursorError):
    """Raised when the cursor has no current input."""

    error_code = "CUR002"
