"""Tests for condition evaluation."""

import pytest

from flowrun import Credentials
from flowrun.nodes import ConditionHandler
from flowrun.nodes.condition import UNDEFINED, evaluate, lookup, loose_equals, to_number


class TestEvaluate:
    """Tests for evaluate()."""

    def test_loose_equality_between_number_and_string(self):
        assert evaluate({"n": 5}, "n", "equals", "5") is True
        assert evaluate({"n": "5"}, "n", "equals", 5) is True

    def test_string_equality_is_exact(self):
        assert evaluate({"s": "ok"}, "s", "equals", "ok") is True
        assert evaluate({"s": "ok"}, "s", "equals", "OK") is False

    def test_not_equals(self):
        assert evaluate({"n": 5}, "n", "notEquals", "6") is True
        assert evaluate({"n": 5}, "n", "notEquals", "5") is False

    def test_missing_key_is_undefined(self):
        assert evaluate({"a": 1}, "b", "equals", "") is False
        assert evaluate({"a": 1}, "b", "notEquals", "") is True

    def test_contains_uses_string_forms(self):
        assert evaluate({"msg": "hello world"}, "msg", "contains", "world") is True
        assert evaluate({"n": 12345}, "n", "contains", "234") is True
        assert evaluate({"msg": "hello"}, "msg", "contains", "bye") is False

    def test_numeric_comparisons(self):
        assert evaluate({"n": 10}, "n", "greaterThan", "5") is True
        assert evaluate({"n": 10}, "n", "lessThan", "5") is False
        assert evaluate({"n": "3"}, "n", "lessThan", 4) is True

    def test_non_numeric_comparisons_are_false(self):
        assert evaluate({"n": "abc"}, "n", "greaterThan", "1") is False
        assert evaluate({"n": "abc"}, "n", "lessThan", "1") is False

    def test_missing_previous_output_is_false(self):
        assert evaluate(None, "a", "equals", "") is False
        assert evaluate("", "a", "notEquals", "x") is False
        assert evaluate(0, "a", "notEquals", "x") is False
        assert evaluate(False, "a", "notEquals", "x") is False

    def test_empty_containers_are_still_evaluated(self):
        assert evaluate({}, "a", "notEquals", "x") is True
        assert evaluate([], "0", "notEquals", "x") is True
        assert evaluate({}, "a", "equals", "x") is False

    def test_empty_condition_is_false(self):
        assert evaluate({"a": 1}, "", "equals", "1") is False

    def test_unknown_operator_is_false(self):
        assert evaluate({"a": 1}, "a", "between", "1") is False


class TestHelpers:
    """Tests for coercion helpers."""

    def test_lookup_on_sequences(self):
        assert lookup(["x", "y"], "1") == "y"
        assert lookup(["x"], "3") is UNDEFINED
        assert lookup("text", "0") is UNDEFINED

    def test_to_number(self):
        assert to_number("") == 0
        assert to_number(None) == 0
        assert to_number(True) == 1
        assert to_number(" 4.5 ") == 4.5
        assert to_number("1_000") != to_number("1_000")

    def test_loose_equals_null_handling(self):
        assert loose_equals(None, None) is True
        assert loose_equals(None, "") is False
        assert loose_equals(UNDEFINED, None) is True


class TestConditionHandler:
    """Tests for ConditionHandler."""

    @pytest.mark.asyncio
    async def test_output_shape(self):
        handler = ConditionHandler()
        config = {"condition": "status", "operator": "equals", "value": "ok"}

        output = await handler.handle(config, {"status": "ok"}, Credentials())

        assert output == {"result": True, "condition": "status", "operator": "equals", "value": "ok"}
        assert handler.success_message(config, output) == "Condition evaluated: true"

    @pytest.mark.asyncio
    async def test_defaults(self):
        handler = ConditionHandler()

        output = await handler.handle({}, {"a": 1}, Credentials())

        assert output == {"result": False, "condition": "", "operator": "equals", "value": ""}
        assert handler.success_message({}, output) == "Condition evaluated: false"

    @pytest.mark.asyncio
    async def test_none_value_becomes_empty_string(self):
        output = await ConditionHandler().handle(
            {"condition": "a", "operator": "equals", "value": None}, {"a": ""}, Credentials()
        )

        assert output["value"] == ""
        assert output["result"] is True

    @pytest.mark.asyncio
    async def test_missing_key_on_empty_output_matches_populated_output(self):
        handler = ConditionHandler()
        config = {"condition": "a", "operator": "notEquals", "value": "x"}

        empty = await handler.handle(config, {}, Credentials())
        populated = await handler.handle(config, {"b": 1}, Credentials())

        assert empty["result"] is True
        assert populated["result"] is True
