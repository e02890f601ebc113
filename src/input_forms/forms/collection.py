"""
Input collections.

An InputCollection is the registry of the input forms of an
application. Creating and looking up forms is safe from several
threads; building and traversing a single form is not.
"""

import logging
import threading

from input_forms.forms.environment import EnvironmentProvider, ProcessEnvironment
from input_forms.forms.errors import DuplicateGroupError, GroupNotFoundError
from input_forms.forms.group import InputGroup

logger = logging.getLogger(__name__)


class InputCollection:
    """Registry of named input groups."""

    def __init__(self, environment: EnvironmentProvider | None = None):
        """
        Initialize the collection.

        Args:
            environment: Environment provider handed to every group of
                the collection. Defaults to the process environment.
        """
        self._environment = environment or ProcessEnvironment()
        self._groups: dict[str, InputGroup] = {}
        self._lock = threading.Lock()

    def new_group(self, name: str, description: str = "") -> InputGroup:
        """
        Create a new input group.

        Raises:
            DuplicateGroupError: If a group with that name exists.
        """
        with self._lock:
            if name in self._groups:
                raise DuplicateGroupError(
                    f"a group with name '{name}' has already been added",
                    {"group": name},
                )
            group = InputGroup(name, description=description, environment=self._environment)
            self._groups[name] = group

        logger.debug("Created input group '%s'.", name)
        return group

    def has_group(self, name: str) -> bool:
        with self._lock:
            return name in self._groups

    def group(self, name: str) -> InputGroup:
        """
        Raises:
            GroupNotFoundError: If there is no group with that name.
        """
        with self._lock:
            try:
                return self._groups[name]
            except KeyError:
                raise GroupNotFoundError(name) from None

    def groups(self) -> list[InputGroup]:
        with self._lock:
            return list(self._groups.values())
