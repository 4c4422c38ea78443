"""
RequestValidator - Per-operation parameter schemas.

Each known operation maps to a pydantic model. Validation rejects missing,
empty, oversized or mistyped fields before any lookup or cache work, and
resolves absent optional fields to None.
"""

from types import MappingProxyType
from typing import Annotated, Any, Mapping

import pydantic
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, StrictStr

from flowdocs.services.errors import ValidationError

MAX_STRING_LENGTH = 1000

RequiredString = Annotated[
    StrictStr, Field(min_length=1, max_length=MAX_STRING_LENGTH)
]
BoundedString = Annotated[StrictStr, Field(max_length=MAX_STRING_LENGTH)]


class OperationParams(BaseModel):
    """Base for operation schemas: unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class GetComponentParams(OperationParams):
    componentName: RequiredString


class ListComponentsParams(OperationParams):
    category: BoundedString | None = None


class GetHookParams(OperationParams):
    hookName: RequiredString


class ListHooksParams(OperationParams):
    category: BoundedString | None = None


class GetTypeParams(OperationParams):
    typeName: RequiredString


class ListTypesParams(OperationParams):
    category: BoundedString | None = None


class GetUtilityParams(OperationParams):
    utilityName: RequiredString


class ListUtilitiesParams(OperationParams):
    pass


class GetExampleParams(OperationParams):
    exampleType: RequiredString


class SearchExamplesParams(OperationParams):
    query: RequiredString


class GetDocsParams(OperationParams):
    topic: RequiredString


class ReadResourceParams(OperationParams):
    uri: RequiredString


class GetPromptParams(OperationParams):
    name: RequiredString
    arguments: dict[str, Any] | None = None


VALIDATION_RULES: Mapping[str, type[OperationParams]] = MappingProxyType(
    {
        "get_component": GetComponentParams,
        "list_components": ListComponentsParams,
        "get_hook": GetHookParams,
        "list_hooks": ListHooksParams,
        "get_type": GetTypeParams,
        "list_types": ListTypesParams,
        "get_utility": GetUtilityParams,
        "list_utilities": ListUtilitiesParams,
        "get_example": GetExampleParams,
        "search_examples": SearchExamplesParams,
        "get_docs": GetDocsParams,
        "read_resource": ReadResourceParams,
        "get_prompt": GetPromptParams,
    }
)


def _format_errors(exc: pydantic.ValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"]) or "params"
        parts.append(f"{field}: {error['msg']}")
    return ", ".join(parts)


class RequestValidator:
    """
    Validates raw operation parameters against the registered rules.

    Usage:
        validator = RequestValidator()
        params = validator.validate("get_component", {"componentName": "Handle"})
        # {"componentName": "Handle"}
    """

    def __init__(self, rules: Mapping[str, type[OperationParams]] = VALIDATION_RULES):
        self._rules = rules

    def has_rule(self, operation: str) -> bool:
        return operation in self._rules

    def validate(
        self, operation: str, raw_params: Mapping[str, Any] | None
    ) -> dict[str, Any]:
        """
        Validate and normalize parameters for an operation.

        Operations without a rule pass through unchanged with a warning.

        Raises:
            ValidationError: If the parameters violate the operation's rule
        """
        schema = self._rules.get(operation)
        if schema is None:
            logger.warning(f"No validation schema found for operation: {operation}")
            return dict(raw_params or {})

        if raw_params is not None and not isinstance(raw_params, Mapping):
            raise ValidationError(
                f"Validation failed for {operation}: params: must be an object",
                operation=operation,
            )

        try:
            model = schema.model_validate(dict(raw_params or {}))
        except pydantic.ValidationError as e:
            raise ValidationError(
                f"Validation failed for {operation}: {_format_errors(e)}",
                operation=operation,
            ) from e

        return model.model_dump()
