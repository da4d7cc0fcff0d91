"""Per-tool scoring functions.

Each function has the catalog signature ``(values, unchecked_ids, tool)`` and
returns a ToolResult. Thresholds and penalty constants are catalog content and
are kept exactly as published on the tool pages.
"""

from __future__ import annotations

from typing import Any

from .contrast import score_contrast
from .models import ScoreColor, ToolDefinition, ToolResult
from .scoring import (
    apply_penalties,
    band,
    banded_result,
    checklist_score,
    clamp_score,
    read_number,
    read_text,
)

Values = dict[str, Any]


def standard_checklist(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    return checklist_score(unchecked_ids, tool)


# ─── General ─────────────────────────────────────────────────────────────────

MATURITY_MAX_ANSWER = 5
MATURITY_TIERS = [(80, "Advanced"), (60, "Mature"), (40, "Growing")]


def maturity_tier(score: int) -> str:
    for threshold, label in MATURITY_TIERS:
        if score > threshold:
            return label
    return "Starter"


def ux_maturity(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    """Sum the ten 1-5 answers, rescale to 0-100 and map to a maturity tier."""
    answers = {inp.id: read_number(values, inp.id) for inp in tool.inputs}
    max_total = MATURITY_MAX_ANSWER * len(tool.inputs)
    score = clamp_score(sum(answers.values()) / max_total * 100)

    lowest = min(answers.values())
    weakest = [inp.label for inp in tool.inputs if answers[inp.id] == lowest]
    return ToolResult(
        score=score,
        label=maturity_tier(score),
        color=band(score).color,
        fixes=["Focus on lowest rated areas first."],
        details=[f"Lowest rated ({lowest:g}/{MATURITY_MAX_ANSWER}): {', '.join(weakest)}"],
    )


ISSUE_WEIGHT = 8


def issues_prioritizer(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    """Checked items are issues the product has; list them as registered."""
    unchecked = set(unchecked_ids)
    present = [item for item in tool.checklist if item.id not in unchecked]
    return ToolResult(
        score=clamp_score(100 - len(present) * ISSUE_WEIGHT),
        label="Priority List",
        color=ScoreColor.NEUTRAL,
        fixes=[item.text for item in present],
    )


# ─── Conversion ──────────────────────────────────────────────────────────────

STRONG_VERBS = (
    "get", "start", "try", "book", "download", "join", "create", "run", "generate", "explore", "buy",
    "shop", "claim", "unlock", "discover", "launch", "build", "sign", "subscribe", "request", "access",
    "grab",
)
WEAK_WORDS = ("click", "submit", "continue", "here", "more", "learn")
GENERIC_LABELS = ("ok", "yes", "next", "go")

CTA_MAX_LENGTH = 25
CTA_IDEAL_LENGTH = 20


def cta_clarity(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    """Heuristic check of a call-to-action label."""
    text = read_text(values, "cta")
    if not text:
        return ToolResult(
            score=0,
            label="Enter CTA Text",
            color=ScoreColor.MUTED,
            fixes=["Enter your CTA button text above to analyze it."],
        )

    lower = text.lower()
    words = lower.split()
    first_word = words[0] if words else ""
    leads_with_verb = any(first_word.startswith(verb) for verb in STRONG_VERBS)

    fixes = []
    score = 100

    if len(text) > CTA_MAX_LENGTH:
        score -= 25
        fixes.append("Too long — aim for under 25 characters")
    elif len(text) > CTA_IDEAL_LENGTH:
        score -= 10
        fixes.append("Consider shortening — ideal length is under 20 characters")

    if any(word in lower for word in WEAK_WORDS):
        score -= 30
        fixes.append('Avoid weak words like "Click", "Submit", or "Learn more"')

    if not leads_with_verb:
        score -= 25
        fixes.append("Start with a strong action verb (Get, Start, Try, Join, etc.)")

    if len(words) == 1 and lower in GENERIC_LABELS:
        score -= 20
        fixes.append("Too generic — add specificity about what happens next")

    if len(text) > 3 and leads_with_verb and len(words) >= 2:
        score = min(100, score + 10)

    score = clamp_score(score)
    if not fixes and score >= 80:
        fixes.append("Great CTA! Clear action verb and appropriate length.")
    return banded_result(score, fixes)


def cta_count(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    primary = read_number(values, "primary")
    secondary = read_number(values, "secondary")
    score = 100
    fixes = []

    if primary > 1:
        score -= (primary - 1) * 20
        fixes.append("Only 1 primary CTA recommended per view")
    if secondary > 3:
        score -= (secondary - 3) * 10
        fixes.append("Too many secondary links distract users")
    return banded_result(score, fixes)


def funnel_friction(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    steps = read_number(values, "steps")
    signup = read_number(values, "signup")
    fields = read_number(values, "fields")
    score = 100
    fixes = []

    if steps > 3:
        score -= (steps - 3) * 8
        fixes.append("Reduce steps (combine or remove)")
    if signup == 1:
        score -= 15
        fixes.append("Delay signup until after value is shown")
    if fields > 5:
        score -= (fields - 5) * 5
        fixes.append("Reduce form fields")
    return banded_result(score, fixes)


# ─── Forms ───────────────────────────────────────────────────────────────────


def form_ux(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    """Checklist score minus capped penalties for long forms."""
    fields = read_number(values, "fields")
    optional = read_number(values, "optional")
    penalties = []
    if fields > 6:
        penalties.append((min((fields - 6) * 3, 20), "Reduce total field count"))
    if optional > 2:
        penalties.append((min((optional - 2) * 3, 15), "Remove optional fields"))
    return apply_penalties(checklist_score(unchecked_ids, tool), penalties)


def form_field_count(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    n = read_number(values, "fields")
    if n <= 3:
        return banded_result(100, ["Great length for high conversion."])
    if n <= 6:
        return banded_result(80, ["Acceptable, but ensure all are necessary."])
    if n <= 10:
        return banded_result(50, ["High friction. Remove optional fields."])
    result = banded_result(20, ["Very high friction. Split into steps or cut fields."])
    return result.model_copy(update={"label": "Very High Friction"})


# ─── Accessibility ───────────────────────────────────────────────────────────

MIN_BODY_TEXT_PX = 16
MIN_TOUCH_TARGET_PX = 44


def accessibility_quick_check(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    text_size = read_number(values, "text")
    button_height = read_number(values, "btn")
    penalties = []
    if text_size < MIN_BODY_TEXT_PX:
        penalties.append((10, "Increase body text to 16px"))
    if button_height < MIN_TOUCH_TARGET_PX:
        penalties.append((15, "Min button height 44px"))
    return apply_penalties(checklist_score(unchecked_ids, tool), penalties)


def button_size(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    height = read_number(values, "height")
    if height >= MIN_TOUCH_TARGET_PX:
        return banded_result(100, ["Passes WCAG AAA / Mobile standards"])
    if height >= 40:
        return banded_result(80, ["Acceptable desktop, risky mobile"])
    return banded_result(40, ["Too small for touch targets. Increase to 44px."])


def font_size(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    size = read_number(values, "size")
    if size >= MIN_BODY_TEXT_PX:
        return banded_result(100, ["Good readability."])
    if size >= 14:
        return banded_result(70, ["Acceptable minimum, prefer 16px."])
    return banded_result(30, ["Too small. Increase to at least 16px."])


def color_contrast(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    return score_contrast(read_text(values, "fg"), read_text(values, "bg"))


# ─── Navigation ──────────────────────────────────────────────────────────────


def navigation_complexity(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    links = read_number(values, "links")
    levels = read_number(values, "levels")
    score = 100
    fixes = []

    if links > 7:
        score -= (links - 7) * 5
        fixes.append("Reduce top-level items to 5-7 max")
    if levels > 2:
        score -= (levels - 2) * 15
        fixes.append("Flatten hierarchy (max 2 levels)")
    return banded_result(score, fixes)


# ─── Mobile ──────────────────────────────────────────────────────────────────


def thumb_reach(values: Values, unchecked_ids: list[str], tool: ToolDefinition) -> ToolResult:
    """Average the reachability of the primary action and the navigation."""
    primary = read_number(values, "primary")
    nav = read_number(values, "nav")
    score = clamp_score((primary + nav) / 2)
    fixes = ["Move primary actions to the bottom 1/3 of screen"] if score < 70 else []
    return banded_result(score, fixes)
