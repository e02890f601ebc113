"""
Field value hints.

Hints are URIs naming where autocompletion values for a field can be
sourced from. Only field:// hints are resolved; they read the JSON
content of another field and extract the value at a path:

    field://credentials/projects     -> every element of the "projects" array
    field://credentials/owner/email  -> the nested "email" string
"""

import json
import logging
from typing import TYPE_CHECKING, Any

from input_forms.config import get_config
from input_forms.forms.constants import FIELD_SCHEME, FILE_SCHEMES, HINT_PATTERN, HTTP_SCHEMES
from input_forms.forms.errors import FieldNotFoundError, HintResolutionError, InvalidHintError

if TYPE_CHECKING:
    from input_forms.forms.field import InputField
    from input_forms.forms.group import InputGroup

logger = logging.getLogger(__name__)


def check_hint(hint: str) -> None:
    """
    Raises:
        InvalidHintError: If hint is not a valid hint URI.
    """
    if not HINT_PATTERN.match(hint):
        raise InvalidHintError(
            "hint must be a url with prefix http(s)://, file:// or field://",
            {"hint": hint},
        )


def resolve_hints(group: "InputGroup", uris: list[str]) -> list[str]:
    """
    Resolve hint URIs to hint values, in order.

    Raises:
        HintResolutionError: On the first hint that cannot be resolved.
    """
    values: list[str] = []
    for uri in uris:
        values.extend(resolve_hint(group, uri))
    return values


def resolve_hint(group: "InputGroup", uri: str) -> list[str]:
    match = HINT_PATTERN.match(uri)
    if match is None:
        raise HintResolutionError(uri, f"invalid hint '{uri}'")

    scheme = match.group("scheme")
    if scheme in HTTP_SCHEMES or scheme in FILE_SCHEMES:
        raise HintResolutionError(uri, f"hint scheme '{scheme}' is not implemented")
    if scheme != FIELD_SCHEME:
        raise HintResolutionError(uri, f"unknown hint scheme '{scheme}'")

    field_name = match.group("host")
    path = match.group("path") or ""

    try:
        value = group.get_field_value(field_name)
    except FieldNotFoundError as e:
        raise HintResolutionError(uri, str(e)) from e
    if value is None:
        return []

    try:
        data = json.loads(value)
    except json.JSONDecodeError as e:
        raise HintResolutionError(
            uri, f"error parsing json value of field '{field_name}': {e}"
        ) from e

    hint_data = value_at_path(uri, path, data)
    logger.debug("Resolved hint '%s'.", uri)

    if isinstance(hint_data, str):
        return [hint_data]
    if isinstance(hint_data, list):
        return [_to_text(v) for v in hint_data]
    return [_to_text(hint_data)]


def value_at_path(uri: str, path: str, data: Any) -> Any:
    """
    Walk a "/" separated path through decoded JSON.

    Object members are selected by key, array elements by index. An
    empty path selects the whole document.

    Raises:
        HintResolutionError: If a path segment does not exist.
    """
    current = data
    for key in [k for k in path.split("/") if k]:
        if isinstance(current, dict) and key in current:
            current = current[key]
        elif isinstance(current, list) and key.isdigit() and int(key) < len(current):
            current = current[int(key)]
        else:
            raise HintResolutionError(uri, f"path '{path}' was not found in field value")
    return current


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def completion_values(group: "InputGroup", field: "InputField") -> list[str]:
    """
    Candidate values a prompting layer offers for a field.

    - file sourced fields: paths from the environment, then the saved
      value label if the field already has a bound value
    - fields restricted to accepted values: those values
    - other fields: environment values and resolved hint values,
      without duplicates, then the current value

    Raises:
        HintResolutionError: If one of the field's hints cannot be resolved.
    """
    value_from_file, paths = field.value_from_file()
    if value_from_file:
        if field.has_bound_value():
            return paths + [get_config().saved_value_label]
        return paths

    accepted = field.accepted_values
    if accepted is not None:
        return accepted

    current = field.value()
    seen = {"", current}
    values: list[str] = []

    environment = group.environment
    for name in field.env_vars:
        env_value = environment.lookup(name)
        if env_value is not None and env_value not in seen:
            values.append(env_value)
            seen.add(env_value)

    for hint_value in group.get_field_value_hints(field.name):
        if hint_value not in seen:
            values.append(hint_value)
            seen.add(hint_value)

    if current:
        values.append(current)
    return values
