"""
Input cursor.

The cursor walks a form in declaration order and decides which input
should be asked for next:

- a field is presented when it is enabled for the cursor's tags and its
  dependency conditions hold
- a container with several enabled alternatives is presented so that
  one of them can be selected; with a single enabled alternative that
  field is presented directly; with none the container is skipped
- the fields depending on a field are only visited after input for it
  has been accepted

Usage:
    cursor = InputCursor(form)
    node = cursor.advance()
    while node is not None:
        if node.is_container:
            choice = pick_one(cursor.enabled_options())
            node = cursor.set_input(choice.name, ask(choice))
        else:
            node = cursor.set_input(node.name, ask(node))
"""

import logging
from collections import deque

from input_forms.forms.base import Input
from input_forms.forms.errors import CursorError, CursorExhaustedError
from input_forms.forms.field import InputField
from input_forms.forms.group import InputGroup

logger = logging.getLogger(__name__)


class InputCursor:
    """Traversal state over the inputs of a group."""

    def __init__(self, group: InputGroup, *tags: str):
        self._group = group
        self._tags = tags
        self._pending: deque[Input] = deque(group.inputs)
        self._visited: set[str] = set()
        self._current: Input | None = None

    @property
    def tags(self) -> tuple[str, ...]:
        return self._tags

    @property
    def exhausted(self) -> bool:
        """Whether no input is left to present."""
        return self._current is None and not self._pending

    @property
    def current_input(self) -> Input:
        """
        The input the cursor points to.

        Raises:
            CursorExhaustedError: If the cursor is not positioned on an input.
        """
        if self._current is None:
            raise CursorExhaustedError("the input cursor is not positioned on an input")
        return self._current

    def enabled_options(self) -> list[Input]:
        """The alternatives to select from when positioned on a container."""
        current = self.current_input
        if not current.is_container:
            return [current]
        return self._options(current)

    def _options(self, container: Input) -> list[Input]:
        return [
            i for i in container.enabled_inputs(True, *self._tags)
            if i.name not in self._visited
        ]

    def advance(self) -> Input | None:
        """
        Move to the next input to present.

        Inputs that depend on the current input are skipped unless input
        for it was accepted first.

        Returns:
            The new current input, or None when the form is exhausted.
        """
        self._current = None
        while self._pending:
            node = self._pending.popleft()

            if node.is_container:
                options = self._options(node)
                if len(options) == 1:
                    node = options[0]
                elif len(options) > 1:
                    self._current = node
                    return node
                else:
                    continue

            elif node.name in self._visited or not node.enabled(True, *self._tags):
                continue

            self._visited.add(node.name)
            self._current = node
            return node

        logger.debug("Input cursor over '%s' is exhausted.", self._group.name)
        return None

    def set_input(self, name: str, value: str | None) -> Input | None:
        """
        Accept input for a field and move to the next input.

        Args:
            name: The current field, or one of the current container's
                enabled alternatives.
            value: The raw value entered.

        Returns:
            The new current input, or None when the form is exhausted.

        Raises:
            CursorError: If name is not the input expected by the cursor.
            InputValidationError: If the field rejects the value. The
                cursor does not move.
        """
        input_field = self._expected_field(name)
        input_field.set_value(value)
        return self._accept(input_field)

    def set_default_input(self, name: str) -> Input | None:
        """
        Accept the value a field already holds and move to the next input.

        Used when a file sourced field keeps its saved value instead of
        reading a new file.

        Raises:
            CursorError: If name is not the input expected by the cursor
                or the field has no bound value.
        """
        input_field = self._expected_field(name)
        if not input_field.has_bound_value():
            raise CursorError(
                f"field '{name}' has no saved value to accept",
                {"field": name},
            )
        return self._accept(input_field)

    def _expected_field(self, name: str) -> InputField:
        current = self.current_input
        if current.is_container:
            for option in self.enabled_options():
                if option.name == name:
                    return option
            raise CursorError(
                f"field '{name}' is not an option of '{current.name}'",
                {"field": name, "container": current.name},
            )
        if current.name != name:
            raise CursorError(
                f"expected input for field '{current.name}' but got '{name}'",
                {"field": name, "expected": current.name},
            )
        return current

    def _accept(self, input_field: InputField) -> Input | None:
        input_field.set_input()
        self._visited.add(input_field.name)
        self._pending.extendleft(reversed(input_field.inputs))
        logger.debug("Accepted input for field '%s'.", input_field.name)
        return self.advance()
