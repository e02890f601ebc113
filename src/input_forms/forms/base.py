"""
Input node interface.

Every node of an input graph is either an InputGroup (a container of
other inputs) or an InputField (a leaf carrying a value whose children
are the inputs that depend on it).
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from input_forms.models.field_attributes import InputType

if TYPE_CHECKING:
    from input_forms.forms.group import FormIndex


class Input(ABC):
    """Shared interface of input graph nodes."""

    def __init__(
        self,
        name: str,
        display_name: str,
        description: str,
        group_id: int,
        index: "FormIndex",
    ):
        self._name = name
        self._display_name = display_name
        self._description = description
        self._group_id = group_id
        self._index = index
        self._inputs: list[Input] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def description(self) -> str:
        return self._description

    @property
    def long_description(self) -> str:
        return self._description

    @property
    def group_id(self) -> int:
        return self._group_id

    @property
    def inputs(self) -> list["Input"]:
        """Child inputs in declaration order."""
        return list(self._inputs)

    @property
    @abstractmethod
    def input_type(self) -> InputType:
        ...

    @property
    def is_container(self) -> bool:
        return self.input_type == InputType.CONTAINER

    @abstractmethod
    def enabled(self, evaluate: bool = False, *tags: str) -> bool:
        """
        Whether the input should be presented.

        Args:
            evaluate: Whether to evaluate dependency conditions.
            *tags: Only inputs having one of these tags are enabled.
                No tags means no tag filtering.
        """

    def enabled_inputs(self, evaluate: bool = False, *tags: str) -> list["Input"]:
        """Child inputs that are currently enabled."""
        return [i for i in self._inputs if i.enabled(evaluate, *tags)]

    def _append_input(self, node: "Input") -> None:
        self._inputs.append(node)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"
