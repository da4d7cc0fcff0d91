"""UX Scoring MCP Server.

FastMCP server exposing the tool catalog and the scoring engine as read-only tools.
Run: ux-scoring-mcp
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from . import __version__
from .core.models import ToolCategory, ToolDefinition
from .core.registry import (
    DEFAULT_RELATED_LIMIT,
    ToolNotFoundError,
    all_tools,
    categories,
    related_tools,
    require_tool,
    score_tool,
    search_tools,
    tools_by_category,
)
from .core.scoring import default_inputs, default_unchecked

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=False)


def _log_level() -> str:
    return os.environ.get("UX_SCORING_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def _related_limit() -> int:
    raw = os.environ.get("UX_SCORING_RELATED_LIMIT", "")
    if not raw:
        return DEFAULT_RELATED_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        logger.warning("UX_SCORING_RELATED_LIMIT=%r is not an integer — using %d", raw, DEFAULT_RELATED_LIMIT)
        return DEFAULT_RELATED_LIMIT
    if limit <= 0:
        logger.warning("UX_SCORING_RELATED_LIMIT must be positive — using %d", DEFAULT_RELATED_LIMIT)
        return DEFAULT_RELATED_LIMIT
    return limit


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Configure logging and report the catalog that will be served."""
    logging.basicConfig(level=_log_level(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info("UX Scoring %s serving %d tools in %d categories", __version__, len(all_tools()), len(ToolCategory))
    yield


mcp = FastMCP(
    "UX Scoring",
    instructions="Score a product's UX with checklists, calculators, validators and questionnaires. "
    "Each tool returns a 0-100 score, a verdict and a short list of recommended fixes.",
    lifespan=lifespan,
)


def _parse_category(category: str) -> Optional[ToolCategory]:
    if not category:
        return None
    for member in ToolCategory:
        if member.value.lower() == category.strip().lower():
            return member
    valid = ", ".join(c.value for c in ToolCategory)
    raise ValueError(f"Unknown category '{category}'. Valid categories: {valid}")


def _require(slug: str) -> ToolDefinition:
    try:
        return require_tool(slug)
    except ToolNotFoundError as exc:
        raise ValueError(f"{exc}. Call ux_list_tools to see the available slugs.") from exc


def _brief(tool: ToolDefinition) -> dict:
    return {
        "slug": tool.slug,
        "name": tool.name,
        "category": tool.category.value,
        "type": tool.type.value,
        "description": tool.description,
    }


# ─── Tool 1: List ────────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
def ux_list_tools(category: str = "") -> dict:
    """List the UX scoring tools, optionally limited to one category.

    Args:
        category: One of General, Conversion, Forms, Accessibility, Navigation,
                  Mobile, Onboarding, States. Leave empty for all tools.
    """
    selected = _parse_category(category)
    tools = tools_by_category(selected) if selected else all_tools()
    return {
        "title": "UX Scoring Tools",
        "category": selected.value if selected else None,
        "tools": [_brief(t) for t in tools],
        "categories": categories(),
        "count": len(tools),
        "summary": f"{len(tools)} tool(s)" + (f" in {selected.value}" if selected else " across all categories"),
    }


# ─── Tool 2: Search ──────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
def ux_search_tools(query: str, category: str = "") -> dict:
    """Search tools by name or description.

    Args:
        query: Search term (e.g., 'contrast', 'form', 'mobile').
        category: Optional category to search within.
    """
    results = search_tools(query, _parse_category(category))
    return {
        "query": query,
        "results": [_brief(t) for t in results],
        "count": len(results),
        "summary": f"Found {len(results)} tool(s) matching '{query}'",
    }


# ─── Tool 3: Details ─────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
def ux_tool_details(slug: str) -> dict:
    """Full definition of one tool: inputs, checklist items and their default state.

    Args:
        slug: Tool slug (e.g., 'contrast-calculator', 'form-ux-checklist').
    """
    tool = _require(slug)
    return {
        "tool": tool.summary(),
        "default_inputs": default_inputs(tool),
        "default_unchecked_ids": default_unchecked(tool),
        "summary": tool.how_it_works,
    }


# ─── Tool 4: Score ───────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
def ux_score_tool(slug: str, inputs: Optional[dict] = None, unchecked_ids: Optional[list[str]] = None) -> dict:
    """Score a tool from input values and the checklist items that are not yet done.

    Args:
        slug: Tool slug (e.g., 'cta-clarity-checker').
        inputs: Input id -> value. Missing inputs use their defaults.
        unchecked_ids: Checklist item ids that are NOT satisfied. Omit to score
                       a fresh form where nothing is checked yet.
    """
    tool = _require(slug)
    result = score_tool(tool.slug, inputs or {}, unchecked_ids)
    return {
        "title": tool.name,
        "slug": tool.slug,
        "result": result.model_dump(mode="json"),
        "summary": f"{tool.name}: {result.score}/100 ({result.label})",
    }


# ─── Tool 5: Related ─────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
def ux_related_tools(slug: str, limit: int = 0) -> dict:
    """Other tools in the same category as the given tool.

    Args:
        slug: Tool slug.
        limit: Maximum number of tools. 0 uses the server default.
    """
    tool = _require(slug)
    related = related_tools(tool.slug, limit if limit > 0 else _related_limit())
    return {
        "slug": tool.slug,
        "category": tool.category.value,
        "related": [_brief(t) for t in related],
        "count": len(related),
        "summary": f"{len(related)} related {tool.category.value} tool(s)",
    }


def main():
    """Entry point for the CLI command."""
    mcp.run()


if __name__ == "__main__":
    main()
