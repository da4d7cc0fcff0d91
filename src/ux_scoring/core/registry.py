"""Registry query layer — read-only lookups over the static catalog.

The registry is built once at import time and never mutated, so it can be
shared by any number of rendering contexts without locking.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from .catalog import TOOLS
from .models import ScoringInput, ToolCategory, ToolDefinition, ToolResult, ToolType
from .scoring import default_unchecked, evaluate

logger = logging.getLogger(__name__)

DEFAULT_RELATED_LIMIT = 6


class ToolNotFoundError(LookupError):
    """Raised when a slug does not name a registered tool."""

    def __init__(self, slug: str):
        super().__init__(f"Unknown tool slug '{slug}'")
        self.slug = slug


def _index(tools: Iterable[ToolDefinition]) -> dict[str, ToolDefinition]:
    index: dict[str, ToolDefinition] = {}
    for tool in tools:
        if tool.slug in index:
            raise ValueError(f"Duplicate tool slug '{tool.slug}' in catalog")
        if tool.type == ToolType.CHECKLIST and not tool.has_checklist:
            raise ValueError(f"Checklist tool '{tool.slug}' declares no checklist items")
        index[tool.slug] = tool
    return index


_BY_SLUG = _index(TOOLS)


def all_tools() -> list[ToolDefinition]:
    return list(TOOLS)


def get_tool(slug: str) -> Optional[ToolDefinition]:
    tool = _BY_SLUG.get(slug)
    if tool is None:
        logger.debug("No tool registered for slug %r", slug)
    return tool


def require_tool(slug: str) -> ToolDefinition:
    tool = get_tool(slug)
    if tool is None:
        raise ToolNotFoundError(slug)
    return tool


def all_slugs() -> list[str]:
    """Every slug in registration order, for route enumeration."""
    return [t.slug for t in TOOLS]


def tools_by_category(category: ToolCategory) -> list[ToolDefinition]:
    return [t for t in TOOLS if t.category == category]


def categories() -> list[dict[str, Any]]:
    """Each category in declaration order with its tool count."""
    return [{"category": c.value, "count": len(tools_by_category(c))} for c in ToolCategory]


def related_tools(slug: str, limit: int = DEFAULT_RELATED_LIMIT) -> list[ToolDefinition]:
    """Same-category tools other than ``slug``, in registration order."""
    tool = get_tool(slug)
    if tool is None or limit <= 0:
        return []
    return [t for t in TOOLS if t.category == tool.category and t.slug != slug][:limit]


def search_tools(query: str = "", category: Optional[ToolCategory] = None) -> list[ToolDefinition]:
    """Case-insensitive match on name or description, optionally within one category."""
    needle = query.strip().lower()
    results = []
    for tool in TOOLS:
        if category is not None and tool.category != category:
            continue
        if needle and needle not in tool.name.lower() and needle not in tool.description.lower():
            continue
        results.append(tool)
    return results


def score_tool(
    slug: str,
    values: Optional[dict[str, Any]] = None,
    unchecked_ids: Optional[list[str]] = None,
) -> ToolResult:
    """Score a registered tool. ``unchecked_ids=None`` means a fresh form (nothing checked)."""
    tool = require_tool(slug)
    if unchecked_ids is None:
        unchecked_ids = default_unchecked(tool)
    return evaluate(ScoringInput(values=values or {}, unchecked_ids=unchecked_ids, tool=tool))
