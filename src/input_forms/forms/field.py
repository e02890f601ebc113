"""
Input fields.

An InputField describes a single value to collect: how it is displayed,
where its value is stored, how the value is validated and which other
fields decide whether it should be asked for at all.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from input_forms.config import get_config
from input_forms.forms.base import Input
from input_forms.forms.binding import BindableSlot
from input_forms.forms.errors import (
    BindingError,
    FieldNotBoundError,
    InputValidationError,
    InvalidPatternError,
)
from input_forms.models.field_attributes import FieldAttributes, InputType
from input_forms.tracing import trace_value

if TYPE_CHECKING:
    from input_forms.forms.group import FormIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostCondition:
    """
    Enablement condition of a field on one of its prerequisites.

    An empty values tuple means any value of the prerequisite enables
    the field.
    """

    field: "InputField"
    values: tuple[str, ...] = ()

    def evaluate(self) -> bool | None:
        """
        Evaluate the condition.

        Returns:
            None if the prerequisite has no value, otherwise whether the
            prerequisite value enables the dependent field.
        """
        value = self.field.value()
        if value is None:
            return None
        return not self.values or value in self.values


class InputField(Input):
    """
    A leaf input carrying a value.

    The value lives in caller owned storage attached with bind(). Fields
    that depend on this field are its child inputs.
    """

    def __init__(self, attributes: FieldAttributes, index: "FormIndex"):
        super().__init__(
            attributes.name,
            attributes.display_name,
            attributes.description,
            attributes.group_id,
            index,
        )
        self._type = attributes.input_type

        self._value_from_file = attributes.value_from_file
        self._env_vars = list(attributes.env_vars)
        self._default_value = attributes.default_value
        self._sensitive = attributes.sensitive
        self._tags = list(attributes.tags)

        self._slot: BindableSlot | None = None
        self._input_set = False
        # an empty string written by set_value() is a value, not an absent one
        self._empty_value_set = False

        self._post_conditions: list[PostCondition] = []

        self._accepted_values: list[str] | None = None
        self._accepted_values_error_message = ""

        self._inclusion_filter: re.Pattern | None = None
        self._inclusion_filter_error_message = ""
        self._exclusion_filter: re.Pattern | None = None
        self._exclusion_filter_error_message = ""

        if attributes.inclusion_filter:
            self.set_inclusion_filter(
                attributes.inclusion_filter,
                attributes.inclusion_filter_error_message,
            )
        if attributes.exclusion_filter:
            self.set_exclusion_filter(
                attributes.exclusion_filter,
                attributes.exclusion_filter_error_message,
            )
        if attributes.accepted_values is not None:
            self.set_accepted_values(
                attributes.accepted_values,
                attributes.accepted_values_error_message,
            )

    # Validation rules

    def set_inclusion_filter(self, pattern: str, error_message: str = "") -> None:
        """
        Require values to match a regex.

        Args:
            pattern: Regex the value must match (searched, not anchored).
            error_message: Message of the error raised when it does not.

        Raises:
            InvalidPatternError: If the pattern does not compile.
        """
        self._inclusion_filter = _compile(self._name, pattern)
        self._inclusion_filter_error_message = error_message

    def set_exclusion_filter(self, pattern: str, error_message: str = "") -> None:
        """
        Reject values matching a regex.

        Args:
            pattern: Regex the value must not match (searched, not anchored).
            error_message: Message of the error raised when it does.

        Raises:
            InvalidPatternError: If the pattern does not compile.
        """
        self._exclusion_filter = _compile(self._name, pattern)
        self._exclusion_filter_error_message = error_message

    def set_accepted_values(self, values: list[str] | None, error_message: str = "") -> None:
        """Restrict values to a list. An empty list or None lifts the restriction."""
        self._accepted_values = list(values) if values else None
        self._accepted_values_error_message = error_message

    # Attributes

    @property
    def input_type(self) -> InputType:
        return self._type

    @property
    def accepted_values(self) -> list[str] | None:
        return list(self._accepted_values) if self._accepted_values is not None else None

    @property
    def inclusion_filter(self) -> str | None:
        return self._inclusion_filter.pattern if self._inclusion_filter else None

    @property
    def exclusion_filter(self) -> str | None:
        return self._exclusion_filter.pattern if self._exclusion_filter else None

    @property
    def default_value(self) -> str | None:
        return self._default_value

    @property
    def sensitive(self) -> bool:
        return self._sensitive

    @property
    def optional(self) -> bool:
        """Whether the field can be left alone as it has a default value."""
        return self._default_value is not None

    @property
    def env_vars(self) -> list[str]:
        return list(self._env_vars)

    @property
    def tags(self) -> list[str]:
        return list(self._tags)

    @property
    def post_conditions(self) -> list[PostCondition]:
        return list(self._post_conditions)

    @property
    def is_bound(self) -> bool:
        return self._slot is not None

    @property
    def long_description(self) -> str:
        text = self._description
        if self._env_vars:
            plural = "s" if len(self._env_vars) > 1 else ""
            text += (
                f" It will be sourced from the environment variable{plural} "
                f"{', '.join(self._env_vars)} if not provided."
            )
        return text

    def _add_post_condition(self, condition: PostCondition) -> None:
        self._post_conditions.append(condition)

    # Enablement

    def enabled(self, evaluate: bool = False, *tags: str) -> bool:
        if tags and not set(tags).intersection(self._tags):
            return False
        if evaluate and self._post_conditions:
            # the first prerequisite holding a value decides
            for condition in self._post_conditions:
                result = condition.evaluate()
                if result is not None:
                    return result
            return False
        return True

    # Value binding

    def bind(self, slot: BindableSlot) -> None:
        """
        Bind the field to caller owned storage.

        If the storage holds no value and the field has a default, the
        default is written to the storage.

        Args:
            slot: Direct or optional slot pointing to the storage.

        Raises:
            BindingError: If slot is not a BindableSlot or the storage
                holds something other than a string.
        """
        if not isinstance(slot, BindableSlot):
            raise BindingError(
                f"the field '{self._name}' value reference must be a bindable slot, "
                f"got {type(slot).__name__}",
                {"field": self._name},
            )

        current = slot.read()
        if current is not None and not isinstance(current, str):
            raise BindingError(
                f"the field '{self._name}' value object being bound must be of type string or None",
                {"field": self._name},
            )
        if not slot.optional and current is None:
            raise BindingError(
                f"the field '{self._name}' is bound to a direct slot holding None",
                {"field": self._name},
            )

        if not _holds_value(slot, current) and self._default_value is not None:
            slot.write(self._default_value)
            trace_value(logger, "Input field '%s' initialized with its default value.", self._name)

        self._slot = slot
        self._empty_value_set = False
        trace_value(logger, "Binding input field '%s': %r", self._name, slot)

    def bound_value(self) -> str | None:
        """The value held by the bound storage, ignoring the environment."""
        if self._slot is None:
            return None
        current = self._slot.read()
        if _holds_value(self._slot, current):
            return current
        if self._empty_value_set and current == "":
            return current
        return None

    def has_bound_value(self) -> bool:
        return self.bound_value() is not None

    def has_value(self) -> bool:
        """Whether a value can be returned for this field."""
        if self.has_bound_value():
            return True
        env = self._index.environment
        return any(env.lookup(e) is not None for e in self._env_vars)

    def value(self) -> str | None:
        """
        The value of the field.

        Returns the bound value if there is one. Otherwise, unless the
        value comes from a file, the first set environment variable in
        declared order. None if neither applies.
        """
        value = self.bound_value()
        if value is None and not self._value_from_file:
            env = self._index.environment
            for name in self._env_vars:
                env_value = env.lookup(name)
                if env_value is not None:
                    trace_value(
                        logger,
                        "Value of input field '%s' has been sourced from the environment variable '%s'.",
                        self._name, name,
                    )
                    return env_value
        return value

    def set_value(self, value: str | None) -> None:
        """
        Validate a value and write it to the bound storage.

        For file sourced fields the value is a path and the file content
        becomes the value. None clears the storage.

        Raises:
            FieldNotBoundError: If the field has not been bound.
            InputValidationError: If the value is rejected.
            OSError: If the file of a file sourced field cannot be read.
        """
        if self._slot is None:
            raise FieldNotBoundError(
                f"field '{self._name}' has not been bound to a value instance",
                {"field": self._name},
            )

        if value is not None:
            if self._value_from_file:
                path = value
                value = Path(path).read_text(encoding=get_config().file_encoding)
                trace_value(
                    logger,
                    "Value of input field '%s' has been sourced from file '%s'.",
                    self._name, path,
                )
            self.validate(value)

        self._slot.write(value)
        self._empty_value_set = value == ""
        trace_value(logger, "Input field '%s' bound to %r has been updated.", self._name, self._slot)

    def validate(self, value: str) -> None:
        """
        Check a value against the accepted values and filters.

        Raises:
            InputValidationError: With the configured message of the
                first rule the value breaks.
        """
        if self._accepted_values is not None and value not in self._accepted_values:
            raise InputValidationError(
                self._name,
                self._accepted_values_error_message
                or f"'{value}' is not an accepted value for '{self._display_name}'",
                "accepted_values",
            )
        if self._inclusion_filter is not None and not self._inclusion_filter.search(value):
            raise InputValidationError(
                self._name,
                self._inclusion_filter_error_message
                or f"'{value}' is not a valid value for '{self._display_name}'",
                "inclusion_filter",
            )
        if self._exclusion_filter is not None and self._exclusion_filter.search(value):
            raise InputValidationError(
                self._name,
                self._exclusion_filter_error_message
                or f"'{value}' is not allowed for '{self._display_name}'",
                "exclusion_filter",
            )

    def value_from_file(self) -> tuple[bool, list[str]]:
        """
        File sourcing of the field.

        Returns:
            Whether the value is read from a file, and the paths named by
            the field's environment variables that point to existing
            files. A prompting layer offers these paths, plus the saved
            value label when the field already has a bound value.
        """
        paths = []
        env = self._index.environment
        for name in self._env_vars:
            env_value = env.lookup(name)
            if env_value is not None and Path(env_value).is_file():
                paths.append(env_value)
        return self._value_from_file, paths

    # Input tracking

    def set_input(self) -> None:
        """Flag the field as explicitly entered."""
        self._input_set = True

    @property
    def input_set(self) -> bool:
        return self._input_set


def _holds_value(slot: BindableSlot, current: object) -> bool:
    if slot.optional:
        return current is not None
    return bool(current)


def _compile(name: str, pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(
            f"field '{name}' has an invalid filter '{pattern}': {e}",
            {"field": name, "pattern": pattern},
        ) from e
