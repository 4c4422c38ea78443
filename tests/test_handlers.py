"""Tests for lookup handlers: normalization, not-found text and caching."""

from datetime import timedelta

import pytest

from flowdocs.handlers.components import (
    get_component,
    list_components,
    normalize_component_name,
)
from flowdocs.handlers.docs import get_docs
from flowdocs.handlers.examples import (
    get_example,
    normalize_example_type,
    search_examples,
    search_index,
)
from flowdocs.handlers.hooks import get_hook, list_hooks, normalize_hook_name
from flowdocs.handlers.typedefs import get_type, list_types, normalize_type_name
from flowdocs.handlers.utilities import (
    UTILITIES_LIST_KEY,
    get_utility,
    list_utilities,
    normalize_utility_name,
)


def text_of(payload: dict) -> str:
    return "".join(block["text"] for block in payload["content"])


# ============================================================================
# Name normalization
# ============================================================================


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("ReactFlow", "reactflow"),
        ("<ReactFlow />", "reactflow"),
        ("  Handle ", "handle"),
        ("Node Resizer", "noderesizer"),
    ],
)
def test_normalize_component_name(raw, expected):
    assert normalize_component_name(raw) == expected


def test_normalize_hook_and_utility_names_strip_parentheses():
    assert normalize_hook_name("useReactFlow()") == "usereactflow"
    assert normalize_utility_name("addEdge()") == "addedge"


def test_normalize_type_name_keeps_generic_parameter():
    assert normalize_type_name("Viewport") == "viewport"
    assert normalize_type_name("Node<T>") == "nodet"


def test_normalize_example_type_hyphenates_whitespace():
    assert normalize_example_type("Drag and  Drop") == "drag-and-drop"


# ============================================================================
# Detail lookups
# ============================================================================


async def test_get_component_accepts_jsx_form(cache):
    plain = await get_component({"componentName": "Handle"}, cache)
    jsx = await get_component({"componentName": "<Handle />"}, cache)

    assert text_of(plain) == text_of(jsx)
    assert text_of(plain).startswith("# <Handle />")


async def test_unknown_component_lists_alternatives(cache):
    text = text_of(await get_component({"componentName": "Graph"}, cache))

    assert text.startswith('Component "Graph" not found. Available components: ')
    assert "<ReactFlow />" in text
    assert "<Handle />" in text


async def test_get_hook_renders_methods(cache):
    text = text_of(await get_hook({"hookName": "useReactFlow()"}, cache))

    assert text.startswith("# useReactFlow()")
    assert "## Methods" in text
    assert "- **getNodes()** → `Node[]`: Get all nodes" in text
    assert "## Returns\n\n`ReactFlowInstance`" in text


async def test_unknown_hook_lists_alternatives(cache):
    text = text_of(await get_hook({"hookName": "useMagic"}, cache))
    assert text.startswith('Hook "useMagic" not found. Available hooks: ')
    assert "useNodes()" in text


async def test_change_type_lists_variants(cache):
    text = text_of(await get_type({"typeName": "NodeChange"}, cache))

    assert "## Variants" in text
    assert '`{ type: "add", item: Node }`' in text


async def test_generic_type_name_is_not_found(cache):
    text = text_of(await get_type({"typeName": "Node<T>"}, cache))
    assert text.startswith('Type "Node<T>" not found. Available types: ')


async def test_get_utility_renders_signature(cache):
    text = text_of(await get_utility({"utilityName": "addEdge"}, cache))

    assert text.startswith("# addEdge")
    assert "**Signature:**\n```typescript\n" in text
    assert "## Parameters" in text


async def test_unknown_utility_lists_alternatives(cache):
    text = text_of(await get_utility({"utilityName": "nope"}, cache))
    assert text.startswith('Utility "nope" not found. Available utilities: ')


async def test_get_example_returns_code(cache):
    text = text_of(await get_example({"exampleType": "Basic Flow"}, cache))

    assert text.startswith("# Basic Flow")
    assert "## Code\n\n```tsx\n" in text
    assert "useNodesState" in text


async def test_unknown_example_lists_ids_with_descriptions(cache):
    text = text_of(await get_example({"exampleType": "spaceship"}, cache))

    assert text.startswith('Example "spaceship" not found. Available examples:')
    assert "- **drag-and-drop**: Adding nodes via drag and drop from a sidebar." in text


async def test_get_docs_accepts_spaces(cache):
    text = text_of(await get_docs({"topic": "Getting Started"}, cache))
    assert "not found" not in text.splitlines()[0]


# ============================================================================
# Listings and search
# ============================================================================


async def test_list_components_all_categories(cache):
    text = text_of(await list_components({"category": None}, cache))

    assert text.startswith("# React Flow Components")
    for section in ("Core", "Helper", "Node", "Edge"):
        assert f"## {section} Components" in text
    assert text.endswith(
        "Use `get_component` to get detailed information about a specific component.\n"
    )


async def test_list_category_is_case_insensitive(cache):
    text = text_of(await list_types({"category": "GEOMETRY"}, cache))

    assert "## Geometry Types" in text
    assert "## Core Types" not in text


async def test_unknown_category_lists_valid_categories(cache):
    text = text_of(await list_hooks({"category": "magic"}, cache))
    assert text == (
        'Category "magic" not found. Available categories: '
        "state, viewport, connection, selection, store, utility"
    )


async def test_list_utilities_keeps_group_names(cache):
    text = text_of(await list_utilities({}, cache))

    assert "## EdgeChanges Utilities" in text
    assert "## Validation Utilities" in text
    assert await cache.get(UTILITIES_LIST_KEY) is not None


def test_search_index_matches_tags():
    assert [e.id for e in search_index("elk")] == ["layout-elk"]
    assert search_index("zzz-nothing") == []


async def test_search_without_matches_suggests_terms(cache):
    text = text_of(await search_examples({"query": "quantum"}, cache))

    assert text.startswith('No examples found for "quantum". Try searching for:')
    assert "Or use `get_example` with a specific example type." in text


# ============================================================================
# Caching
# ============================================================================


async def test_detail_lookup_cached_for_thirty_minutes(cache, clock):
    await get_component({"componentName": "Handle"}, cache)
    key = "react-flow-component-handle"
    assert await cache.get(key) is not None

    clock.advance(minutes=29)
    assert await cache.get(key) is not None
    clock.advance(minutes=1)
    assert await cache.get(key) is None


async def test_not_found_results_are_cached(cache):
    payload = await get_hook({"hookName": "useMagic"}, cache)
    assert await cache.get("react-flow-hook-usemagic") == text_of(payload)


async def test_listing_keys_use_raw_category(cache, clock):
    await list_hooks({"category": "Viewport"}, cache)
    await list_hooks({"category": None}, cache)

    assert await cache.get("react-flow-hooks-list-Viewport") is not None
    assert await cache.get("react-flow-hooks-list-all") is not None

    clock.advance(minutes=59)
    assert await cache.get("react-flow-hooks-list-all") is not None
    clock.advance(minutes=1)
    assert await cache.get("react-flow-hooks-list-all") is None


async def test_search_cached_for_fifteen_minutes(cache, clock):
    await search_examples({"query": "Custom"}, cache)
    key = "react-flow-example-search-custom"

    clock.advance(minutes=14, seconds=59)
    assert await cache.get(key) is not None
    clock.advance(seconds=1)
    assert await cache.get(key) is None


async def test_cached_value_is_served_without_recompute(cache):
    await cache.set("react-flow-docs-concepts", "from cache", timedelta(minutes=60))

    assert await get_docs({"topic": "concepts"}, cache) == {
        "content": [{"type": "text", "text": "from cache"}]
    }


async def test_mutating_a_returned_payload_leaves_the_cache_intact(cache):
    first = await get_hook({"hookName": "useNodes"}, cache)
    first["content"][0]["text"] = "overwritten"
    first["content"].append({"type": "text", "text": "extra"})

    second = await get_hook({"hookName": "useNodes"}, cache)

    assert second is not first
    assert len(second["content"]) == 1
    assert second["content"][0]["text"].startswith("# useNodes()")
