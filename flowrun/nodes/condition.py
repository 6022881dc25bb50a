"""Condition node handler.

Evaluates ``previous_output[condition] <operator> value`` and reports the
result. The result is informational: it does not decide which successors
run, every outgoing edge is still followed.

Supported operators:
    - equals: loose equality (``5`` equals ``"5"``)
    - notEquals: negation of equals
    - contains: substring test on the string forms
    - greaterThan / lessThan: numeric comparison; values that are not
      numbers compare as NaN, which is never greater or less than anything

A key that is absent from the previous output reads as *undefined*: it
equals nothing, so ``equals`` is False and ``notEquals`` is True.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Dict

from flowrun.core.graph import NodeType
from flowrun.core.state import Credentials
from flowrun.nodes.base import NodeHandler
from flowrun.utils.interpolation import is_empty_value, to_display_string


class _Undefined:
    def __repr__(self) -> str:
        return "undefined"


UNDEFINED = _Undefined()


def lookup(data: Any, key: str) -> Any:
    """Read ``key`` from a mapping or a sequence index, else UNDEFINED."""
    if isinstance(data, Mapping):
        return data[key] if key in data else UNDEFINED
    if isinstance(data, Sequence) and not isinstance(data, str) and key.isdigit():
        index = int(key)
        return data[index] if index < len(data) else UNDEFINED
    return UNDEFINED


def to_number(value: Any) -> float:
    """Numeric coercion; anything that is not a number becomes NaN."""
    if value is UNDEFINED:
        return math.nan
    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if "_" in text:
            return math.nan
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def to_text(value: Any) -> str:
    if value is UNDEFINED:
        return "undefined"
    return to_display_string(value)


def loose_equals(actual: Any, expected: Any) -> bool:
    """Equality that converts between numbers and numeric strings."""
    if actual is UNDEFINED or actual is None:
        return expected is None or expected is UNDEFINED
    if expected is None or expected is UNDEFINED:
        return False
    if isinstance(actual, str) and isinstance(expected, str):
        return actual == expected
    scalar = (str, bool, int, float)
    if isinstance(actual, scalar) and isinstance(expected, scalar):
        return to_number(actual) == to_number(expected)
    return actual == expected


OPERATORS: Dict[str, Callable[[Any, Any], bool]] = {
    "equals": loose_equals,
    "notEquals": lambda actual, expected: not loose_equals(actual, expected),
    "contains": lambda actual, expected: to_text(expected) in to_text(actual),
    "greaterThan": lambda actual, expected: to_number(actual) > to_number(expected),
    "lessThan": lambda actual, expected: to_number(actual) < to_number(expected),
}


def evaluate(previous_output: Any, condition: str, operator: str, value: Any) -> bool:
    """Evaluate one condition against the previous output.

    Args:
        previous_output: Output of the preceding node
        condition: Key to read from the previous output
        operator: One of OPERATORS
        value: Value to compare against

    Returns:
        Result of the comparison; False when the input is None, "", zero
        or False, when the key is empty, or for an unknown operator. An
        empty mapping or list is still evaluated.
    """
    if is_empty_value(previous_output) or not condition:
        return False
    compare = OPERATORS.get(operator)
    if compare is None:
        return False
    return bool(compare(lookup(previous_output, condition), value))


class ConditionHandler(NodeHandler):
    """Compare a field of the previous output with a configured value."""

    node_type = NodeType.CONDITION

    async def handle(
        self,
        config: Dict[str, Any],
        previous_output: Any,
        credentials: Credentials,
    ) -> Dict[str, Any]:
        condition = config.get("condition") or ""
        operator = config.get("operator") or "equals"
        value = config.get("value")
        if value is None:
            value = ""

        return {
            "result": evaluate(previous_output, condition, operator, value),
            "condition": condition,
            "operator": operator,
            "value": value,
        }

    def success_message(self, config: Dict[str, Any], output: Any) -> str:
        return f"Condition evaluated: {to_display_string(output['result'])}"
