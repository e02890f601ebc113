"""
Input graph model and traversal.

This package contains:
- the input node types (InputGroup, InputField) and their shared index
- dependency wiring between fields
- value slots and environment providers
- hint resolution and the input cursor
"""

from input_forms.forms.base import Input
from input_forms.forms.binding import (
    AttributeSlot,
    BindableSlot,
    ItemSlot,
    OptionalValueSlot,
    ValueSlot,
)
from input_forms.forms.collection import InputCollection
from input_forms.forms.cursor import InputCursor
from input_forms.forms.environment import (
    EnvironmentProvider,
    MappingEnvironment,
    ProcessEnvironment,
)
from input_forms.forms.field import InputField, PostCondition
from input_forms.forms.group import FormIndex, InputGroup

__all__ = [
    # Nodes
    "Input",
    "InputField",
    "InputGroup",
    "FormIndex",
    "PostCondition",
    "InputCollection",
    "InputCursor",
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
]
