"""
Input groups.

An InputGroup is the root of an input form and also the node type used
for "pick one of" containers. All nodes created under one root share a
FormIndex, which gives the tree a single field namespace, a single
group id to container table and a single hint table.

Usage:
    from input_forms import InputCollection

    form = InputCollection().new_group("cloud", "Cloud credentials")

    form.new_input_container("auth", "Authentication", "How to authenticate", group_id=1)
    form.new_input_field(name="token", group_id=1, env_vars=["CLOUD_TOKEN"])
    form.new_input_field(name="user", group_id=1)
    form.new_input_field(name="password", depends_on=["user"], sensitive=True)

    values: dict[str, str | None] = {}
    form.bind_values(values)
"""

import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from input_forms.forms import hints
from input_forms.forms.base import Input
from input_forms.forms.binding import BindableSlot, ItemSlot
from input_forms.forms.dependencies import (
    parse_dependencies,
    resolve_dependencies,
    walk_fields,
)
from input_forms.forms.environment import EnvironmentProvider, ProcessEnvironment
from input_forms.forms.errors import (
    ContainerNotFoundError,
    DuplicateFieldError,
    DuplicateGroupError,
    FieldNotFoundError,
    FormBuildError,
    InputValidationError,
    InvalidAttributesError,
)
from input_forms.forms.field import InputField, PostCondition
from input_forms.models.field_attributes import FieldAttributes, InputType
from input_forms.models.form_schema import FormFieldSchema, FormSchema
from input_forms.models.validation_result import FieldValidationError, ValidationResult

logger = logging.getLogger(__name__)


@dataclass
class FormIndex:
    """Tables shared by every node of one input tree."""

    environment: EnvironmentProvider = field(default_factory=ProcessEnvironment)
    fields: dict[str, InputField] = field(default_factory=dict)
    containers: dict[int, "InputGroup"] = field(default_factory=dict)
    hints: dict[str, list[str]] = field(default_factory=dict)


class InputGroup(Input):
    """
    A container of inputs.

    As a form root it holds the top level inputs. As an alternatives
    container (group_id > 0) it holds the fields sharing that group id,
    only one of which is to be collected.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        display_name: str = "",
        group_id: int = 0,
        index: FormIndex | None = None,
        environment: EnvironmentProvider | None = None,
    ):
        if index is None:
            index = FormIndex(environment=environment or ProcessEnvironment())
        super().__init__(name, display_name or name, description, group_id, index)

    @property
    def input_type(self) -> InputType:
        return InputType.CONTAINER

    @property
    def environment(self) -> EnvironmentProvider:
        return self._index.environment

    def enabled(self, evaluate: bool = False, *tags: str) -> bool:
        return True

    # Building

    def new_input_container(
        self,
        name: str,
        display_name: str,
        description: str,
        group_id: int,
    ) -> "InputGroup":
        """
        Register the container collecting the fields of a group id.

        Must be called before any field declaring group_id is added.

        Raises:
            FormBuildError: If group_id is not positive.
            DuplicateGroupError: If a container is already registered
                for group_id.
        """
        if group_id <= 0:
            raise FormBuildError(
                f"container '{name}' must have a positive group id, got {group_id}",
                {"container": name, "group_id": group_id},
            )
        if group_id in self._index.containers:
            raise DuplicateGroupError(
                f"a container for group '{group_id}' has already been added",
                {"container": name, "group_id": group_id},
            )

        container = InputGroup(
            name,
            description=description,
            display_name=display_name,
            group_id=group_id,
            index=self._index,
        )
        self._index.containers[group_id] = container
        logger.debug("Registered container '%s' for group %d.", name, group_id)
        return container

    def new_input_field(
        self,
        attributes: FieldAttributes | None = None,
        **kwargs: Any,
    ) -> InputField:
        """
        Add a field to the form.

        Fields without dependencies are added to this group. Fields with
        dependencies are added under each prerequisite field found in
        this group's subtree. Fields with a group id are added through
        the container registered for it. Nothing is changed if the call
        fails.

        Args:
            attributes: The field attributes. Keyword arguments build
                the attributes when not given, and cannot be combined
                with an attribute model.

        Returns:
            The new field.

        Raises:
            InvalidAttributesError: If the attributes do not validate.
            DuplicateFieldError: If the name is already used in the form.
            ContainerNotFoundError: If no container is registered for
                the field's group id.
            InvalidDependencyError: If a depends_on entry is malformed.
            DependencyNotFoundError: If prerequisites are missing.
            InvalidPatternError: If a filter does not compile.
        """
        if attributes is None:
            try:
                attributes = FieldAttributes(**kwargs)
            except ValidationError as e:
                name = kwargs.get("name")
                problems = [f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()]
                raise InvalidAttributesError(
                    f"invalid attributes for field '{name}': {'; '.join(problems)}",
                    {"field": name, "errors": problems},
                ) from e
        elif kwargs:
            raise InvalidAttributesError(
                f"field '{attributes.name}' is given both an attribute model and "
                f"keyword attributes {sorted(kwargs)}",
                {"field": attributes.name, "keywords": sorted(kwargs)},
            )
        name = attributes.name

        if name in self._index.fields:
            raise DuplicateFieldError(name)
        if attributes.group_id > 0 and attributes.group_id not in self._index.containers:
            raise ContainerNotFoundError(
                f"unable to add field '{name}' as its group '{attributes.group_id}' was not found",
                {"field": name, "group_id": attributes.group_id},
            )

        dependencies = parse_dependencies(name, attributes.depends_on)
        prerequisites = resolve_dependencies(name, self, dependencies) if dependencies else []

        input_field = InputField(attributes, self._index)

        self._index.fields[name] = input_field
        if prerequisites:
            for prerequisite, dependency in prerequisites:
                input_field._add_post_condition(PostCondition(prerequisite, dependency.values))
                self._attach(prerequisite, input_field)
            logger.debug(
                "Added field '%s' depending on %s.",
                name, [p.name for p, _ in prerequisites],
            )
        else:
            self._attach(self, input_field)
            logger.debug("Added field '%s' to '%s'.", name, self._name)

        return input_field

    def _attach(self, parent: Input, input_field: InputField) -> None:
        if input_field.group_id > 0:
            container = self._index.containers[input_field.group_id]
            if input_field not in container._inputs:
                container._append_input(input_field)
            if container not in parent._inputs:
                parent._append_input(container)
        else:
            parent._append_input(input_field)

    # Field access

    def get_input_field(self, name: str) -> InputField:
        """
        Raises:
            FieldNotFoundError: If the form has no field with that name.
        """
        try:
            return self._index.fields[name]
        except KeyError:
            raise FieldNotFoundError(name) from None

    def get_field_value(self, name: str) -> str | None:
        return self.get_input_field(name).value()

    def set_field_value(self, name: str, value: str | None) -> None:
        self.get_input_field(name).set_value(value)

    def input_fields(self) -> list[InputField]:
        """All fields of the group in declaration order, each listed once."""
        return list(walk_fields(self))

    def input_values(self) -> dict[str, str]:
        """Map of name to value of every field whose input has been set."""
        values = {}
        for f in self.input_fields():
            if f.input_set:
                value = f.value()
                if value is not None:
                    values[f.name] = value
        return values

    # Binding

    def bind_fields(self, slots: Mapping[str, BindableSlot]) -> None:
        """Bind fields by name to the given slots."""
        for name, slot in slots.items():
            self.get_input_field(name).bind(slot)

    def bind_values(
        self,
        store: MutableMapping[str, Any],
        optional: bool = True,
    ) -> MutableMapping[str, Any]:
        """
        Bind every field of the group to a key of a mapping.

        Args:
            store: Mapping receiving the values, keyed by field name.
            optional: Whether absent values are stored as None (True) or
                as empty strings (False).

        Returns:
            The store, for chaining.
        """
        for f in self.input_fields():
            f.bind(ItemSlot(store, f.name, optional=optional))
        return store

    def apply_values(self, values: Mapping[str, str | None]) -> ValidationResult:
        """
        Set several field values, collecting every failure.

        Fields that accept their value are flagged as input. Errors
        other than validation and lookup errors propagate.
        """
        errors: list[FieldValidationError] = []
        for name, value in values.items():
            try:
                input_field = self.get_input_field(name)
                input_field.set_value(value)
            except FieldNotFoundError as e:
                errors.append(FieldValidationError(
                    field_name=name,
                    error_type="not_found",
                    message=str(e),
                    received=value,
                ))
                continue
            except InputValidationError as e:
                errors.append(FieldValidationError(
                    field_name=name,
                    error_type=e.error_type,
                    message=str(e),
                    expected=_expected_value(input_field, e.error_type),
                    received=value,
                ))
                continue
            input_field.set_input()

        return ValidationResult(
            is_valid=not errors,
            errors=errors,
            validated_data=self.input_values() if not errors else None,
        )

    # Hints

    def add_field_value_hint(self, name: str, hint: str) -> None:
        """
        Add a value hint to a field.

        Args:
            name: Name of the field.
            hint: One of
                * http(s)://<url> - list of values served at the url
                * file://<path> - list of values in a file
                * field://<name>/<path> - value at a path of the JSON
                  content of another field

        Raises:
            InvalidHintError: If the hint is not a valid hint URI.
            FieldNotFoundError: If the form has no field with that name.
        """
        hints.check_hint(hint)
        if name not in self._index.fields:
            raise FieldNotFoundError(name)
        self._index.hints.setdefault(name, []).append(hint)

    def get_field_value_hints(self, name: str) -> list[str]:
        """
        Resolve the value hints of a field.

        Raises:
            HintResolutionError: If a hint cannot be resolved.
        """
        return hints.resolve_hints(self, self._index.hints.get(name, []))

    def field_value_hint_uris(self, name: str) -> list[str]:
        return list(self._index.hints.get(name, []))

    # Reference

    def to_schema(self) -> FormSchema:
        """Describe the form's fields as a FormSchema."""
        containers = self._index.containers
        fields = []
        for f in self.input_fields():
            container = containers.get(f.group_id) if f.group_id > 0 else None
            default = f.default_value
            if default is not None and f.sensitive:
                default = "****"
            fields.append(FormFieldSchema(
                name=f.name,
                type=f.input_type.value,
                title=f.display_name,
                description=f.long_description or None,
                default=default,
                sensitive=f.sensitive,
                value_from_file=f.value_from_file()[0],
                enum_values=f.accepted_values,
                pattern=f.inclusion_filter,
                env_vars=f.env_vars,
                depends_on=[
                    _describe_condition(c) for c in f.post_conditions
                ],
                tags=f.tags,
                container=container.name if container else None,
            ))
        return FormSchema(
            form_id=self._name,
            title=self._display_name,
            description=self._description or None,
            fields=fields,
        )


def _describe_condition(condition: PostCondition) -> str:
    if condition.values:
        return f"{condition.field.name}={'|'.join(condition.values)}"
    return condition.field.name


def _expected_value(input_field: InputField, error_type: str) -> Any:
    if error_type == "accepted_values":
        return input_field.accepted_values
    if error_type == "inclusion_filter":
        return input_field.inclusion_filter
    return None
