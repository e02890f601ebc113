"""
Bindable value slots.

A field never owns its value. It reads and writes through a slot that
points into caller owned storage. Slots come in two modes:

- direct: the storage always holds a string; an empty string means
  "no value" and clearing writes an empty string.
- optional: the storage holds a string or None; None means "no value".

Usage:
    from input_forms import ValueSlot, OptionalValueSlot, ItemSlot

    region = ValueSlot()
    field.bind(region)

    settings: dict[str, str | None] = {}
    field.bind(ItemSlot(settings, "region", optional=True))
"""

from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from typing import Any


class BindableSlot(ABC):
    """Storage location a field reads and writes its value through."""

    optional: bool = False

    @abstractmethod
    def read(self) -> Any:
        """Return the value currently held by the storage."""

    @abstractmethod
    def write(self, value: str | None) -> None:
        """Replace the value held by the storage."""


class ValueSlot(BindableSlot):
    """A direct string cell."""

    optional = False

    def __init__(self, value: str = ""):
        self.value = value

    def read(self) -> Any:
        return self.value

    def write(self, value: str | None) -> None:
        self.value = "" if value is None else value

    def __repr__(self) -> str:
        return f"ValueSlot({self.value!r})"


class OptionalValueSlot(BindableSlot):
    """A cell that is either a string or absent."""

    optional = True

    def __init__(self, value: str | None = None):
        self.value = value

    def read(self) -> Any:
        return self.value

    def write(self, value: str | None) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"OptionalValueSlot({self.value!r})"


class ItemSlot(BindableSlot):
    """A key of a caller owned mapping."""

    def __init__(self, store: MutableMapping[str, Any], key: str, optional: bool = False):
        self.store = store
        self.key = key
        self.optional = optional

    def read(self) -> Any:
        if self.optional:
            return self.store.get(self.key)
        return self.store.get(self.key, "")

    def write(self, value: str | None) -> None:
        if value is None and not self.optional:
            value = ""
        self.store[self.key] = value

    def __repr__(self) -> str:
        return f"ItemSlot({self.key!r}, optional={self.optional})"


class AttributeSlot(BindableSlot):
    """An attribute of a caller owned object."""

    def __init__(self, target: object, attribute: str, optional: bool = False):
        self.target = target
        self.attribute = attribute
        self.optional = optional

    def read(self) -> Any:
        if self.optional:
            return getattr(self.target, self.attribute, None)
        return getattr(self.target, self.attribute, "")

    def write(self, value: str | None) -> None:
        if value is None and not self.optional:
            value = ""
        setattr(self.target, self.attribute, value)

    def __repr__(self) -> str:
        return f"AttributeSlot({type(self.target).__name__}.{self.attribute}, optional={self.optional})"
