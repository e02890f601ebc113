"""
Programmatic input collection.

collect_input() walks a form with an InputCursor and asks a responder
callable for every input the cursor presents. The responder is the
only part a front end has to provide:

    def responder(prompt: InputPrompt) -> str | None:
        if prompt.is_choice:
            return prompt.options[0].name      # pick an alternative
        return prompt.suggestions[-1] if prompt.suggestions else None

    values = collect_input(form, responder)

Returning None skips the presented input (and everything depending on
it). For a file sourced field returning the saved value label keeps the
value the field already holds.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from input_forms.config import get_config
from input_forms.forms.base import Input
from input_forms.forms.cursor import InputCursor
from input_forms.forms.errors import CursorError, HintResolutionError, InputValidationError
from input_forms.forms.field import InputField
from input_forms.forms.group import InputGroup
from input_forms.forms.hints import completion_values

logger = logging.getLogger(__name__)


@dataclass
class InputPrompt:
    """What the responder is asked for."""

    input: Input
    options: list[Input] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    value: str | None = None
    error: str | None = None  # message of the previously rejected value
    attempt: int = 1

    @property
    def is_choice(self) -> bool:
        """Whether an alternative must be selected by name."""
        return self.input.is_container


Responder = Callable[[InputPrompt], "str | None"]


def collect_input(
    group: InputGroup,
    responder: Responder,
    *tags: str,
    max_attempts: int | None = None,
) -> dict[str, str]:
    """
    Collect input for a form.

    Args:
        group: The form to collect input for. Its fields must be bound.
        responder: Callable returning the response to a prompt.
        *tags: Only fields having one of these tags are collected.
        max_attempts: Number of times a rejected value is asked for
            again. Defaults to config.max_input_attempts.

    Returns:
        The values of every field whose input was set.

    Raises:
        InputValidationError: If a field rejects max_attempts values.
        CursorError: If the responder selects an unknown alternative.
    """
    if max_attempts is None:
        max_attempts = get_config().max_input_attempts

    cursor = InputCursor(group, *tags)
    node = cursor.advance()

    while node is not None:
        if node.is_container:
            options = cursor.enabled_options()
            choice = responder(InputPrompt(
                input=node,
                options=options,
                suggestions=[o.name for o in options],
            ))
            if choice is None:
                node = cursor.advance()
                continue

            selected = next((o for o in options if o.name == choice), None)
            if selected is None:
                raise CursorError(
                    f"'{choice}' is not one of the options of '{node.name}'",
                    {"container": node.name, "choice": choice},
                )
            node = _collect_field(cursor, group, selected, responder, max_attempts)
        else:
            node = _collect_field(cursor, group, node, responder, max_attempts)

    return group.input_values()


def _collect_field(
    cursor: InputCursor,
    group: InputGroup,
    input_field: InputField,
    responder: Responder,
    max_attempts: int,
) -> Input | None:
    saved_label = get_config().saved_value_label
    value_from_file, _ = input_field.value_from_file()

    try:
        suggestions = completion_values(group, input_field)
    except HintResolutionError as e:
        logger.warning(
            "Error retrieving hint values for field '%s': %s",
            input_field.name, e,
        )
        suggestions = []

    error = None
    for attempt in range(1, max_attempts + 1):
        response = responder(InputPrompt(
            input=input_field,
            options=[input_field],
            suggestions=suggestions,
            value=input_field.value(),
            error=error,
            attempt=attempt,
        ))
        if response is None:
            return cursor.advance()

        if value_from_file and response == saved_label:
            return cursor.set_default_input(input_field.name)

        try:
            return cursor.set_input(input_field.name, response)
        except InputValidationError as e:
            if attempt == max_attempts:
                raise
            logger.info("Value for field '%s' rejected: %s", input_field.name, e)
            error = str(e)

    return cursor.advance()
