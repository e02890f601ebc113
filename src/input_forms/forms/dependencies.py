"""
Dependency wiring.

A field declaring depends_on entries is attached under each of the
named prerequisite fields and receives one post condition per entry.
Wiring is done in two phases so that a failed build call leaves the
form untouched:

1. resolve every prerequisite name against a flattened snapshot of the
   subtree the field is added to, reporting all missing names at once
2. register the post conditions and attach the field (done by the group)
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from input_forms.forms.constants import (
    DEPENDENCY_CHOICE_SEPARATOR,
    DEPENDENCY_VALUE_SEPARATOR,
)
from input_forms.forms.errors import DependencyNotFoundError, InvalidDependencyError

if TYPE_CHECKING:
    from input_forms.forms.base import Input
    from input_forms.forms.field import InputField


@dataclass(frozen=True)
class Dependency:
    """A parsed depends_on entry."""

    name: str
    values: tuple[str, ...] = ()


def parse_dependency(field_name: str, expression: str) -> Dependency:
    """
    Parse "name" or "name=value1|value2".

    Raises:
        InvalidDependencyError: If the expression has more than one "="
            or an empty name.
    """
    parts = expression.split(DEPENDENCY_VALUE_SEPARATOR)
    if len(parts) > 2 or not parts[0]:
        raise InvalidDependencyError(
            f"field '{field_name}' has a depends that does not conform to "
            f"format 'name[=value]': {expression!r}",
            {"field": field_name, "depends_on": expression},
        )
    if len(parts) == 1 or not parts[1]:
        return Dependency(parts[0])
    return Dependency(parts[0], tuple(parts[1].split(DEPENDENCY_CHOICE_SEPARATOR)))


def parse_dependencies(field_name: str, expressions: list[str]) -> list[Dependency]:
    dependencies = [parse_dependency(field_name, e) for e in expressions]
    names = [d.name for d in dependencies]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise InvalidDependencyError(
            f"field '{field_name}' depends more than once on {duplicates}",
            {"field": field_name, "duplicates": duplicates},
        )
    return dependencies


def walk_fields(root: "Input") -> Iterator["InputField"]:
    """
    Yield the fields below root depth first in declaration order.

    A field attached under several prerequisites is yielded once.
    """
    seen: set[str] = set()

    def walk(node: "Input") -> Iterator["InputField"]:
        for child in node.inputs:
            if child.is_container:
                yield from walk(child)
            elif child.name not in seen:
                seen.add(child.name)
                yield child
                yield from walk(child)

    yield from walk(root)


def resolve_dependencies(
    field_name: str,
    root: "Input",
    dependencies: list[Dependency],
) -> list[tuple["InputField", Dependency]]:
    """
    Match dependencies with the fields already added below root.

    Returns:
        (prerequisite field, dependency) pairs in declaration order.

    Raises:
        DependencyNotFoundError: Listing every unmatched name.
    """
    snapshot = {f.name: f for f in walk_fields(root)}
    missing = [d.name for d in dependencies if d.name not in snapshot]
    if missing:
        raise DependencyNotFoundError(field_name, missing)
    return [(snapshot[d.name], d) for d in dependencies]
