"""Shared scoring engine.

Score banding, checklist aggregation, the penalty pass used by the
checklist-plus-numbers tools, and the single evaluation entry point the
presentation layer calls on every input change. Every function here is pure.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, NamedTuple, Optional

from .models import ChecklistItem, ScoreColor, ScoringInput, ToolDefinition, ToolResult

logger = logging.getLogger(__name__)

MAX_FIXES = 5

# Highest threshold first.
SCORE_BANDS = [
    (85, "Excellent", ScoreColor.SUCCESS),
    (65, "Good", ScoreColor.ACCENT),
    (40, "Needs Work", ScoreColor.WARNING),
]
FLOOR_BAND = ("Critical Issues", ScoreColor.DANGER)


class ScoreBand(NamedTuple):
    label: str
    color: ScoreColor


class InvalidInputError(ValueError):
    """A user-supplied value could not be read as its declared kind."""

    def __init__(self, input_id: str, value: Any, message: str):
        super().__init__(message)
        self.input_id = input_id
        self.value = value


def band(score: float) -> ScoreBand:
    """Map any score, clamped or not, to its verdict label and color."""
    for threshold, label, color in SCORE_BANDS:
        if score >= threshold:
            return ScoreBand(label, color)
    return ScoreBand(*FLOOR_BAND)


def round_score(value: float) -> int:
    """Round halves up, so 62.5 scores 63 rather than 62."""
    return int(math.floor(value + 0.5))


def clamp_score(score: float) -> int:
    """Clamp to 0-100. Overflowed penalty arithmetic lands on the nearest bound."""
    if math.isnan(score):
        return 0
    if math.isinf(score):
        return 0 if score < 0 else 100
    return max(0, min(100, round_score(score)))


def banded_result(score: float, fixes: Optional[list[str]] = None, details: Optional[list[str]] = None) -> ToolResult:
    """Build a result whose label and color are derived from the clamped score."""
    clamped = clamp_score(score)
    label, color = band(clamped)
    return ToolResult(score=clamped, label=label, color=color, fixes=list(fixes or []), details=details)


def prioritized_texts(items: Iterable[ChecklistItem], limit: Optional[int] = None) -> list[str]:
    """Item texts ordered by priority, highest first.

    sorted() is stable, so equal priorities keep their registration order.
    """
    ordered = sorted(items, key=lambda item: item.priority.weight, reverse=True)
    if limit is not None:
        ordered = ordered[:limit]
    return [item.text for item in ordered]


def aggregate_checklist(total_items: int, unchecked_ids: Iterable[str], items: Iterable[ChecklistItem]) -> ToolResult:
    """Score a checklist from the share of checked items.

    Fixes are the unchecked items, highest priority first, capped at MAX_FIXES.
    """
    if total_items <= 0:
        raise ValueError("Checklist aggregation needs at least one item")

    unchecked = set(unchecked_ids)
    checked_count = total_items - len(unchecked)
    score = round_score(checked_count / total_items * 100)
    label, color = band(score)

    outstanding = [item for item in items if item.id in unchecked]
    fixes = prioritized_texts(outstanding, limit=MAX_FIXES)
    return ToolResult(score=clamp_score(score), label=label, color=color, fixes=fixes)


def checklist_score(unchecked_ids: Iterable[str], tool: ToolDefinition) -> ToolResult:
    """Aggregate a tool's own checklist, so the item count never drifts from the items."""
    if not tool.has_checklist:
        raise ValueError(f"Tool '{tool.slug}' has no checklist to aggregate")
    return aggregate_checklist(len(tool.checklist), unchecked_ids, tool.checklist)


def apply_penalties(base: ToolResult, penalties: list[tuple[float, str]]) -> ToolResult:
    """Subtract each (points, fix) penalty from a checklist result and re-band.

    Fix texts are appended after the checklist fixes in the order given.
    """
    score = base.score
    fixes = list(base.fixes)
    for points, fix in penalties:
        score -= points
        fixes.append(fix)
    return banded_result(score, fixes=fixes, details=base.details)


# ─── Input readers ────────────────────────────────────────────────────────────


def read_number(values: dict[str, Any], input_id: str) -> float:
    """Read a numeric field. Missing or blank values count as 0."""
    raw = values.get(input_id)
    if raw is None:
        return 0.0
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, (int, float)):
        try:
            number = float(raw)
        except OverflowError:
            raise InvalidInputError(input_id, raw, f"{input_id} must be a number") from None
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            raise InvalidInputError(input_id, raw, f"{input_id} must be a number") from None
    else:
        raise InvalidInputError(input_id, raw, f"{input_id} must be a number")

    if math.isnan(number) or math.isinf(number):
        raise InvalidInputError(input_id, raw, f"{input_id} must be a number")
    return number


def read_text(values: dict[str, Any], input_id: str) -> str:
    raw = values.get(input_id)
    if raw is None:
        return ""
    return str(raw).strip()


# ─── Defaults and evaluation ─────────────────────────────────────────────────


def default_inputs(tool: ToolDefinition) -> dict[str, Any]:
    """Initial value map for a fresh (or reset) form."""
    return {inp.id: inp.initial_value() for inp in tool.inputs}


def default_unchecked(tool: ToolDefinition) -> list[str]:
    """A fresh form has every checklist item unchecked."""
    return [item.id for item in tool.checklist]


def invalid_input_result(message: str) -> ToolResult:
    return ToolResult(score=0, label="Invalid Input", color=ScoreColor.DANGER, fixes=[message])


def evaluate(scoring_input: ScoringInput) -> ToolResult:
    """Run a tool's scoring function over the caller's form state.

    Missing values take their schema defaults and unchecked ids that the
    checklist does not declare are dropped. Unreadable user input becomes an
    "Invalid Input" result instead of an exception.
    """
    tool = scoring_input.tool
    values = default_inputs(tool)
    values.update(scoring_input.values)

    known_ids = {item.id for item in tool.checklist}
    unchecked = [item_id for item_id in scoring_input.unchecked_ids if item_id in known_ids]

    try:
        result = tool.calculate(values, unchecked, tool)
    except InvalidInputError as exc:
        field = tool.input_by_id(exc.input_id)
        message = f"{field.label if field else exc.input_id} must be a number"
        logger.warning("Invalid input for %s.%s: %r", tool.slug, exc.input_id, exc.value)
        return invalid_input_result(message)

    logger.debug("Scored %s: %d (%s)", tool.slug, result.score, result.label)
    return result
