"""Markdown formatters for catalog records."""

from typing import Iterable, Mapping

from flowdocs.catalog.models import (
    ComponentDoc,
    ExampleDoc,
    ExampleSummary,
    HookDoc,
    ListingEntry,
    ParamSpec,
    PropSpec,
    TypeDoc,
    UtilityDoc,
)
from flowdocs.handlers.base import capitalize_first


def _header(name: str, type_: str, description: str) -> list[str]:
    return [f"# {name}\n\n", f"**Type:** {type_}\n\n", f"**Description:** {description}\n\n"]


def _prop_lines(title: str, props: Iterable[PropSpec]) -> list[str]:
    lines = [f"## {title}\n\n"]
    for p in props:
        line = f"- **{p.name}** (`{p.type}`)"
        if p.required:
            line += " *required*"
        line += f": {p.description}"
        if p.default:
            line += f" - Default: `{p.default}`"
        lines.append(line + "\n")
    lines.append("\n")
    return lines


def _param_lines(params: Iterable[ParamSpec]) -> list[str]:
    lines = ["## Parameters\n\n"]
    for p in params:
        line = f"- **{p.name}** (`{p.type}`): {p.description}"
        if p.default:
            line += f" - Default: `{p.default}`"
        lines.append(line + "\n")
    lines.append("\n")
    return lines


def _example_block(code: str) -> str:
    return f"## Example\n\n```tsx\n{code}\n```\n"


# ============================================================================
# Detail pages
# ============================================================================


def format_component(doc: ComponentDoc) -> str:
    parts = _header(doc.name, doc.type, doc.description)
    if doc.props:
        parts += _prop_lines("Props", doc.props)
    if doc.example:
        parts.append(_example_block(doc.example))
    return "".join(parts)


def format_hook(doc: HookDoc) -> str:
    parts = _header(doc.name, doc.type, doc.description)
    if doc.parameters:
        parts += _param_lines(doc.parameters)
    if doc.returns:
        parts.append(f"## Returns\n\n`{doc.returns}`\n\n")
    if doc.methods:
        parts.append("## Methods\n\n")
        for m in doc.methods:
            parts.append(f"- **{m.name}** → `{m.returns}`: {m.description}\n")
        parts.append("\n")
    if doc.example:
        parts.append(_example_block(doc.example))
    return "".join(parts)


def format_type(doc: TypeDoc) -> str:
    parts = _header(doc.name, doc.type, doc.description)
    if doc.signature:
        parts.append(f"**Signature:** `{doc.signature}`\n\n")
    if doc.properties:
        parts += _prop_lines("Properties", doc.properties)
    if doc.variants:
        parts.append("## Variants\n\n")
        for v in doc.variants:
            parts.append(f"- **{v.name}**: {v.description}\n  - `{v.props}`\n")
        parts.append("\n")
    if doc.values:
        parts.append("## Values\n\n")
        for val in doc.values:
            line = f"- **{val.name}** = `{val.value}`"
            if val.description:
                line += f": {val.description}"
            parts.append(line + "\n")
        parts.append("\n")
    if doc.example:
        parts.append(_example_block(doc.example))
    return "".join(parts)


def format_utility(doc: UtilityDoc) -> str:
    parts = _header(doc.name, doc.type, doc.description)
    if doc.signature:
        parts.append(f"**Signature:**\n```typescript\n{doc.signature}\n```\n\n")
    if doc.parameters:
        parts += _param_lines(doc.parameters)
    if doc.returns:
        parts.append(f"## Returns\n\n{doc.returns}\n\n")
    if doc.example:
        parts.append(_example_block(doc.example))
    return "".join(parts)


def format_example(doc: ExampleDoc) -> str:
    return (
        f"# {doc.name}\n\n"
        f"**Description:** {doc.description}\n\n"
        f"**Tags:** {', '.join(doc.tags)}\n\n"
        f"## Code\n\n```tsx\n{doc.code}\n```\n"
    )


# ============================================================================
# Listings
# ============================================================================


def format_listing(
    title: str,
    section: str,
    item: str,
    groups: Mapping[str, Iterable[ListingEntry]],
    detail_tool: str,
) -> str:
    """Render grouped name/description entries.

    Example output:
    # React Flow Hooks

    ## Store Hooks

    - **useStore()**: Access internal zustand store with selector

    ---

    Use `get_hook` to get detailed information about a specific hook.
    """
    lines = [f"# {title}\n\n"]
    for group, entries in groups.items():
        lines.append(f"## {capitalize_first(group)} {section}\n\n")
        for e in entries:
            lines.append(f"- **{e.name}**: {e.description}\n")
        lines.append("\n")

    lines.append("\n---\n\n")
    lines.append(
        f"Use `{detail_tool}` to get detailed information about a specific {item}.\n"
    )
    return "".join(lines)


def format_search_results(query: str, matches: list[ExampleSummary]) -> str:
    lines = [
        f'# Search Results for "{query}"\n\n',
        f"Found {len(matches)} example(s):\n\n",
    ]
    for ex in matches:
        lines.append(f"## {ex.name}\n")
        lines.append(f"**ID:** `{ex.id}`\n")
        lines.append(f"**Description:** {ex.description}\n")
        lines.append(f"**Tags:** {', '.join(ex.tags)}\n\n")

    lines.append("---\n\n")
    lines.append("Use `get_example` with the example ID to get the full code.\n")
    return "".join(lines)


def format_no_search_results(query: str) -> str:
    return (
        f'No examples found for "{query}". Try searching for:\n\n'
        "- **Concepts**: nodes, edges, custom, layout, drag-drop\n"
        "- **Features**: validation, resize, toolbar, minimap\n"
        "- **Levels**: beginner, intermediate, advanced\n\n"
        "Or use `get_example` with a specific example type."
    )


# ============================================================================
# Not-found texts
# ============================================================================


def format_not_found(
    item: str, plural: str, requested: str, available: Iterable[str]
) -> str:
    """One-line not-found message listing display names."""
    return (
        f'{item.capitalize()} "{requested}" not found. '
        f"Available {plural}: {', '.join(available)}"
    )


def format_unknown_category(requested: str, categories: Iterable[str]) -> str:
    return (
        f'Category "{requested}" not found. '
        f"Available categories: {', '.join(categories)}"
    )
