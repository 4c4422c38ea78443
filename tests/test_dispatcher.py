"""Tests for the request pipeline, including end-to-end lookups."""

import pytest

from flowdocs.handlers import HANDLERS, TOOL_OPERATIONS
from flowdocs.services.circuit_breaker import CircuitState
from flowdocs.services.dispatcher import RequestDispatcher, create_dispatcher
from flowdocs.services.errors import (
    CircuitOpenError,
    HandlerError,
    UnknownOperationError,
    ValidationError,
)
from flowdocs.settings import Settings


def text_of(payload: dict) -> str:
    return "".join(block["text"] for block in payload["content"])


class RecordingHandler:
    """Handler stand-in that records params and optionally raises."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[dict] = []

    async def __call__(self, params, cache):
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        return {"content": [{"type": "text", "text": f"ok {params}"}]}


@pytest.fixture
def recording_dispatcher(cache, breaker):
    handlers = {
        "get_component": RecordingHandler(),
        "get_hook": RecordingHandler(error=HandlerError("lookup exploded")),
    }
    return RequestDispatcher(cache=cache, breaker=breaker, handlers=handlers), handlers


# ============================================================================
# Pipeline composition
# ============================================================================


async def test_validation_failure_never_reaches_breaker_or_handler(recording_dispatcher):
    dispatcher, handlers = recording_dispatcher

    for _ in range(5):
        with pytest.raises(ValidationError):
            await dispatcher.dispatch("get_component", {"componentName": ""})

    assert handlers["get_component"].calls == []
    assert dispatcher.breaker.consecutive_failures == 0
    assert dispatcher.breaker.state == CircuitState.CLOSED


async def test_valid_request_reaches_handler_with_normalized_params(recording_dispatcher):
    dispatcher, handlers = recording_dispatcher

    payload = await dispatcher.dispatch(
        "get_component", {"componentName": "Handle", "ignored": True}
    )

    assert handlers["get_component"].calls == [{"componentName": "Handle"}]
    assert text_of(payload) == "ok {'componentName': 'Handle'}"


async def test_handler_error_propagates_unchanged_and_is_counted(recording_dispatcher):
    dispatcher, handlers = recording_dispatcher
    original = handlers["get_hook"].error

    with pytest.raises(HandlerError) as exc_info:
        await dispatcher.dispatch("get_hook", {"hookName": "useNodes"})

    assert exc_info.value is original
    assert dispatcher.breaker.consecutive_failures == 1


async def test_failures_in_one_operation_open_the_shared_breaker(recording_dispatcher):
    dispatcher, handlers = recording_dispatcher

    for _ in range(3):
        with pytest.raises(HandlerError):
            await dispatcher.dispatch("get_hook", {"hookName": "useNodes"})

    with pytest.raises(CircuitOpenError):
        await dispatcher.dispatch("get_component", {"componentName": "Handle"})
    assert handlers["get_component"].calls == []


async def test_breaker_recovers_after_cooldown(recording_dispatcher, clock):
    dispatcher, handlers = recording_dispatcher
    for _ in range(3):
        with pytest.raises(HandlerError):
            await dispatcher.dispatch("get_hook", {"hookName": "useNodes"})

    clock.advance(seconds=60)
    await dispatcher.dispatch("get_component", {"componentName": "Handle"})

    assert dispatcher.breaker.state == CircuitState.CLOSED
    assert len(handlers["get_component"].calls) == 1


async def test_unknown_operation_raises_and_is_not_counted(recording_dispatcher):
    dispatcher, _ = recording_dispatcher

    with pytest.raises(UnknownOperationError) as exc_info:
        await dispatcher.dispatch("delete_everything", {})

    assert exc_info.value.operation == "delete_everything"
    assert dispatcher.breaker.consecutive_failures == 0


def test_production_wiring_registers_every_operation():
    dispatcher = create_dispatcher(Settings())

    assert set(dispatcher.operations) == set(HANDLERS)
    assert dispatcher.breaker.config.failure_threshold == 5
    assert dispatcher.breaker.config.reset_timeout.total_seconds() == 60


# ============================================================================
# End-to-end lookups
# ============================================================================


async def test_get_component_renders_props(dispatcher):
    payload = await dispatcher.dispatch("get_component", {"componentName": "ReactFlow"})
    text = text_of(payload)

    assert "ReactFlow" in text
    assert "## Props" in text
    assert payload["content"][0]["type"] == "text"


async def test_list_hooks_filters_by_category(dispatcher):
    text = text_of(await dispatcher.dispatch("list_hooks", {"category": "viewport"}))

    assert "useViewport()" in text
    assert "useOnViewportChange()" in text
    assert "## Viewport Hooks" in text
    for other in ("useNodes()", "useReactFlow()", "useConnection()", "useStore()"):
        assert other not in text


async def test_search_requires_every_term(dispatcher):
    text = text_of(await dispatcher.dispatch("search_examples", {"query": "drag drop"}))

    assert "`drag-and-drop`" in text
    assert "Found 1 example(s)" in text
    assert "`basic-flow`" not in text


async def test_unknown_docs_topic_is_content_not_error(dispatcher):
    payload = await dispatcher.dispatch("get_docs", {"topic": "unknown-topic-xyz"})
    text = text_of(payload)

    assert 'Documentation topic "unknown-topic-xyz" not found' in text
    for topic in ("getting-started", "concepts", "performance", "typescript"):
        assert f"**{topic}**" in text
    assert dispatcher.breaker.consecutive_failures == 0


@pytest.mark.parametrize(
    "operation, params",
    [
        ("get_component", {"componentName": "Handle"}),
        ("list_components", {}),
        ("get_hook", {"hookName": "useReactFlow"}),
        ("list_hooks", {"category": "state"}),
        ("get_type", {"typeName": "Viewport"}),
        ("list_types", {}),
        ("get_utility", {"utilityName": "addEdge"}),
        ("list_utilities", {}),
        ("get_example", {"exampleType": "custom-node"}),
        ("search_examples", {"query": "layout"}),
        ("get_docs", {"topic": "concepts"}),
    ],
)
async def test_repeated_calls_are_identical(dispatcher, operation, params):
    first = await dispatcher.dispatch(operation, params)
    second = await dispatcher.dispatch(operation, params)
    await dispatcher.cache.clear()
    recomputed = await dispatcher.dispatch(operation, params)

    assert first == second == recomputed


async def test_every_tool_operation_returns_text_payload(dispatcher):
    samples = {
        "get_component": {"componentName": "Background"},
        "get_hook": {"hookName": "useNodes"},
        "get_type": {"typeName": "Position"},
        "get_utility": {"utilityName": "getBezierPath"},
        "get_example": {"exampleType": "basic-flow"},
        "search_examples": {"query": "custom"},
        "get_docs": {"topic": "getting-started"},
    }
    for operation in TOOL_OPERATIONS:
        payload = await dispatcher.dispatch(operation, samples.get(operation, {}))
        assert [block["type"] for block in payload["content"]] == ["text"]
        assert text_of(payload)


async def test_cache_hit_is_unaffected_by_caller_mutation(dispatcher):
    params = {"componentName": "ReactFlow"}
    first = await dispatcher.dispatch("get_component", params)
    expected = text_of(first)

    first["content"][0]["text"] = "changed by caller"
    second = await dispatcher.dispatch("get_component", params)

    assert text_of(second) == expected
    await dispatcher.cache.clear()
    assert await dispatcher.dispatch("get_component", params) == second
