"""Tests for placeholder substitution."""

from flowrun.utils.interpolation import interpolate, is_empty_value, to_display_string


class TestInterpolate:
    """Tests for interpolate()."""

    def test_substitutes_known_keys(self):
        assert interpolate("Hello {{name}}", {"name": "Ava"}) == "Hello Ava"

    def test_unknown_keys_are_left_verbatim(self):
        assert interpolate("Hi {{x}}", {"y": 1}) == "Hi {{x}}"

    def test_repeated_placeholders(self):
        assert interpolate("{{a}}-{{a}}-{{b}}", {"a": 1, "b": 2}) == "1-1-2"

    def test_non_mapping_data_returns_template(self):
        assert interpolate("{{0}}", ["first"]) == "{{0}}"
        assert interpolate("{{a}}", "text") == "{{a}}"

    def test_empty_inputs(self):
        assert interpolate("", {"a": 1}) == ""
        assert interpolate("Hi {{a}}", None) == "Hi {{a}}"
        assert interpolate("Hi {{a}}", {}) == "Hi {{a}}"

    def test_inserted_text_is_not_resubstituted(self):
        assert interpolate("{{a}}", {"a": "{{b}}", "b": "no"}) == "{{b}}"

    def test_nested_paths_are_not_supported(self):
        assert interpolate("{{user.name}}", {"user": {"name": "Ava"}}) == "{{user.name}}"

    def test_whitespace_inside_braces_does_not_match(self):
        assert interpolate("{{ name }}", {"name": "Ava"}) == "{{ name }}"

    def test_value_rendering(self):
        data = {"flag": True, "none": None, "count": 3.0, "ratio": 0.5, "items": [1, "a"]}
        result = interpolate("{{flag}} {{none}} {{count}} {{ratio}} {{items}}", data)
        assert result == 'true null 3 0.5 [1,"a"]'


class TestToDisplayString:
    """Tests for to_display_string()."""

    def test_booleans(self):
        assert to_display_string(True) == "true"
        assert to_display_string(False) == "false"

    def test_numbers(self):
        assert to_display_string(5) == "5"
        assert to_display_string(2.0) == "2"
        assert to_display_string(2.5) == "2.5"

    def test_mappings_render_as_compact_json(self):
        assert to_display_string({"a": 1}) == '{"a":1}'


def test_is_empty_value():
    for value in (None, "", 0, 0.0, False, float("nan")):
        assert is_empty_value(value)
    for value in ({}, [], "0", 1, True, {"a": 1}):
        assert not is_empty_value(value)
