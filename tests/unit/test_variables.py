"""Unit tests for template variable extraction and substitution."""

import pytest

from prompt_render_sdk.core.templating import extract_template_variables, substitute_variables


@pytest.mark.unit
class TestExtractTemplateVariables:
    """Test placeholder discovery."""

    def test_distinct_names_in_first_occurrence_order(self):
        template = "{{b}} then {{ a }} then {{b}} again"
        assert extract_template_variables(template) == ["b", "a"]

    def test_empty_template(self):
        assert extract_template_variables("") == []

    def test_no_placeholders(self):
        assert extract_template_variables("Plain text with {single} braces") == []


@pytest.mark.unit
class TestSubstituteVariables:
    """Test single-pass placeholder substitution."""

    def test_unmatched_variables_are_preserved(self):
        result = substitute_variables("Hi {{name}}, {{missing}}", {"name": "Bob"})
        assert result == "Hi Bob, {{missing}}"

    def test_whitespace_inside_braces_is_tolerated(self):
        variables = {"name": "Ada"}
        assert substitute_variables("Hello {{ name }}", variables) == "Hello Ada"
        assert substitute_variables("Hello {{name}}", variables) == "Hello Ada"
        assert substitute_variables("Hello {{   name\t}}", variables) == "Hello Ada"

    def test_every_occurrence_is_replaced(self):
        assert substitute_variables("{{x}}-{{x}}-{{ x }}", {"x": "1"}) == "1-1-1"

    def test_substitution_is_idempotent(self):
        template = "{{a}} and {{b}}"
        variables = {"a": "first", "b": "second"}
        once = substitute_variables(template, variables)
        assert substitute_variables(once, variables) == once

    def test_substituted_values_are_not_expanded_again(self):
        result = substitute_variables("{{a}} {{b}}", {"a": "{{b}}", "b": "B"})
        assert result == "{{b}} B"

    def test_keys_with_regex_characters(self):
        result = substitute_variables("Value: {{price.usd}} / {{price}}", {"price.usd": "10", "price": "x"})
        assert result == "Value: 10 / x"

    def test_non_string_values_use_their_string_form(self):
        result = substitute_variables("{{count}} items at {{ratio}}", {"count": 3, "ratio": 0.5})
        assert result == "3 items at 0.5"

    def test_booleans_and_none_use_json_spelling(self):
        result = substitute_variables(
            "done={{done}} open={{open}} owner={{owner}}",
            {"done": True, "open": False, "owner": None}
        )
        assert result == "done=true open=false owner=null"

    def test_overlapping_key_prefixes(self):
        result = substitute_variables("{{name}} {{name_full}}", {"name": "A", "name_full": "A B"})
        assert result == "A A B"

    def test_no_variables_returns_template(self):
        assert substitute_variables("Hi {{name}}", {}) == "Hi {{name}}"
