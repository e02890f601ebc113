"""
input-forms: declarative input graphs with guided value collection.

Declare the inputs a program needs, how they depend on each other and
where their values can come from, then let a cursor decide what to ask
for next.

Simple Usage:
    from input_forms import InputCollection, collect_input

    form = InputCollection().new_group("db", "Database connection")
    form.new_input_field(name="host", env_vars=["DB_HOST"])
    form.new_input_field(name="port", default_value="5432", inclusion_filter="^[0-9]+$",
                         inclusion_filter_error_message="port must be a number")

    values: dict[str, str | None] = {}
    form.bind_values(values)

    collect_input(form, lambda prompt: input(f"{prompt.input.display_name}: ") or None)

Alternatives and dependencies:
    form.new_input_container("auth", "Authentication", "How to log in", group_id=1)
    form.new_input_field(name="token", group_id=1)
    form.new_input_field(name="user", group_id=1)
    form.new_input_field(name="password", depends_on=["user"], sensitive=True)

Driving the cursor directly:
    from input_forms import InputCursor

    cursor = InputCursor(form)
    node = cursor.advance()
    while node is not None:
        ...
        node = cursor.set_input(name, value)

Tracing:
    from input_forms.tracing import setup_tracing

    setup_tracing(console=True, verbose=True)
"""

from input_forms.collect import (
    InputPrompt,
    collect_input,
)
from input_forms.forms import (
    AttributeSlot,
    BindableSlot,
    EnvironmentProvider,
    Input,
    InputCollection,
    InputCursor,
    InputField,
    InputGroup,
    ItemSlot,
    MappingEnvironment,
    OptionalValueSlot,
    ProcessEnvironment,
    ValueSlot,
)
from input_forms.forms.errors import (
    BindingError,
    ContainerNotFoundError,
    CursorError,
    CursorExhaustedError,
    DependencyNotFoundError,
    DuplicateFieldError,
    DuplicateGroupError,
    FieldNotBoundError,
    FieldNotFoundError,
    FormBuildError,
    GroupNotFoundError,
    HintResolutionError,
    InputFormError,
    InputValidationError,
    InvalidDependencyError,
    InvalidAttributesError,
    InvalidHintError,
    InvalidPatternError,
)
from input_forms.models import (
    FieldAttributes,
    FieldValidationError,
    FormFieldSchema,
    FormSchema,
    InputType,
    ValidationResult,
)
from input_forms.tracing import (
    setup_tracing,
    disable_tracing,
    enable_tracing,
)

__all__ = [
    # Main interface
    "InputCollection",
    "InputGroup",
    "InputField",
    "Input",
    "InputCursor",
    "collect_input",
    "InputPrompt",
    # Models
    "FieldAttributes",
    "InputType",
    "FormSchema",
    "FormFieldSchema",
    "ValidationResult",
    "FieldValidationError",
    # Binding
    "BindableSlot",
    "ValueSlot",
    "OptionalValueSlot",
    "ItemSlot",
    "AttributeSlot",
    # Environment
    "EnvironmentProvider",
    "ProcessEnvironment",
    "MappingEnvironment",
    # Errors
    "InputFormError",
    "FormBuildError",
    "DuplicateFieldError",
    "DuplicateGroupError",
    "InvalidDependencyError",
    "DependencyNotFoundError",
    "ContainerNotFoundError",
    "InvalidPatternError",
    "InvalidAttributesError",
    "InvalidHintError",
    "BindingError",
    "FieldNotBoundError",
    "InputValidationError",
    "FieldNotFoundError",
    "GroupNotFoundError",
    "HintResolutionError",
    "CursorError",
    "CursorExhaustedError",
    # Tracing
    "setup_tracing",
    "disable_tracing",
    "enable_tracing",
]

__version__ = "0.1.0"
