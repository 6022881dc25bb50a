"""Placeholder substitution for node config strings.

Templates use ``{{key}}`` syntax where ``key`` is looked up directly on the
previous node's output. There is no nested path support, no escaping and no
re-substitution of inserted text.

Example:
    >>> interpolate("Hello {{name}}", {"name": "Ava"})
    'Hello Ava'
    >>> interpolate("Hello {{missing}}", {"name": "Ava"})
    'Hello {{missing}}'
"""

import json
import re
from typing import Any, Mapping

# Pattern to match {{identifier}} syntax
PATTERN = re.compile(r"\{\{(\w+)\}\}")


def to_display_string(value: Any) -> str:
    """Render a value the way the editor displays it inline.

    Args:
        value: Any output value

    Returns:
        String form used for substitution and comparisons
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def is_empty_value(value: Any) -> bool:
    """True for None, "", zero, NaN and False.

    Containers are never empty values, even when they hold nothing.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (bool, int, float)):
        return value == 0 or value != value
    return False


def interpolate(template: str, data: Any = None) -> str:
    """Replace ``{{key}}`` placeholders with values from ``data``.

    Args:
        template: Template string
        data: Previous node output; only mappings are searched

    Returns:
        The template with every known placeholder substituted
    """
    if not template or not data or not isinstance(data, Mapping):
        return template

    def replacer(match):
        key = match.group(1)
        if key in data:
            return to_display_string(data[key])
        return match.group(0)

    return PATTERN.sub(replacer, template)
