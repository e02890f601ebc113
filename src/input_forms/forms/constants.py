"""
Constants shared by the input graph.

Centralizes the hint URI syntax and the dependency expression
separators so builders, resolvers and tests agree on them.
"""

import re

# Hint URIs: http(s)://, file:// and field:// followed by a host-like
# token and an optional path. Field names may contain underscores and
# upper case letters.
HINT_PATTERN = re.compile(
    r"^(?P<scheme>https?://|file:///?|field://)"
    r"(?P<host>[A-Za-z0-9_]+([\-.][A-Za-z0-9_]+)*(\.[a-z]{2,5})*(:[0-9]{1,5})?)"
    r"(?P<path>/.*)?$"
)

HTTP_SCHEMES = ("http://", "https://")
FILE_SCHEMES = ("file://", "file:///")
FIELD_SCHEME = "field://"

# "name" or "name=value1|value2"
DEPENDENCY_VALUE_SEPARATOR = "="
DEPENDENCY_CHOICE_SEPARATOR = "|"
