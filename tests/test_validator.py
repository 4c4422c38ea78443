"""Unit tests for per-operation parameter validation."""

import pytest

from flowdocs.handlers import HANDLERS
from flowdocs.services.errors import ValidationError
from flowdocs.services.validator import MAX_STRING_LENGTH, VALIDATION_RULES, RequestValidator


@pytest.fixture
def validator() -> RequestValidator:
    return RequestValidator()


def test_every_handler_has_a_rule():
    assert set(VALIDATION_RULES) == set(HANDLERS)


def test_valid_params_are_returned(validator):
    assert validator.validate("get_component", {"componentName": "Handle"}) == {
        "componentName": "Handle"
    }


@pytest.mark.parametrize(
    "params",
    [
        {},
        {"componentName": ""},
        {"componentName": 42},
        {"componentName": None},
        {"componentName": "x" * (MAX_STRING_LENGTH + 1)},
    ],
)
def test_bad_component_name_rejected(validator, params):
    with pytest.raises(ValidationError) as exc_info:
        validator.validate("get_component", params)

    assert "get_component" in str(exc_info.value)
    assert "componentName" in str(exc_info.value)
    assert exc_info.value.operation == "get_component"


def test_max_length_is_inclusive(validator):
    name = "x" * MAX_STRING_LENGTH
    assert validator.validate("get_hook", {"hookName": name})["hookName"] == name


def test_absent_optional_category_defaults_to_none(validator):
    assert validator.validate("list_hooks", {}) == {"category": None}
    assert validator.validate("list_types", None) == {"category": None}


def test_wrong_type_for_optional_field_rejected(validator):
    with pytest.raises(ValidationError):
        validator.validate("list_components", {"category": ["core"]})


def test_values_are_not_trimmed(validator):
    assert validator.validate("search_examples", {"query": "  drag  "}) == {
        "query": "  drag  "
    }


def test_unknown_keys_are_dropped(validator):
    assert validator.validate("get_docs", {"topic": "concepts", "extra": 1}) == {
        "topic": "concepts"
    }


def test_non_mapping_params_rejected(validator):
    with pytest.raises(ValidationError):
        validator.validate("get_docs", ["concepts"])


def test_unknown_operation_passes_through(validator):
    assert validator.validate("future_operation", {"anything": 1}) == {"anything": 1}
    assert not validator.has_rule("future_operation")


def test_prompt_arguments_optional(validator):
    assert validator.validate("get_prompt", {"name": "flow_tutorial"}) == {
        "name": "flow_tutorial",
        "arguments": None,
    }
