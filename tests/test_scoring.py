import math

import pytest

from ux_scoring.core.models import ChecklistItem, Priority, ScoreColor, ScoringInput, ToolResult
from ux_scoring.core.registry import require_tool, score_tool
from ux_scoring.core.scoring import (
    InvalidInputError,
    aggregate_checklist,
    apply_penalties,
    band,
    banded_result,
    checklist_score,
    clamp_score,
    default_inputs,
    default_unchecked,
    evaluate,
    read_number,
    read_text,
    round_score,
)


def _items(*priorities: Priority) -> list[ChecklistItem]:
    return [
        ChecklistItem(id=chr(ord("a") + n), text=f"item {chr(ord('a') + n)}", priority=p)
        for n, p in enumerate(priorities)
    ]


@pytest.mark.parametrize(
    "score, label, color",
    [
        (100, "Excellent", ScoreColor.SUCCESS),
        (85, "Excellent", ScoreColor.SUCCESS),
        (84, "Good", ScoreColor.ACCENT),
        (65, "Good", ScoreColor.ACCENT),
        (64, "Needs Work", ScoreColor.WARNING),
        (40, "Needs Work", ScoreColor.WARNING),
        (39, "Critical Issues", ScoreColor.DANGER),
        (0, "Critical Issues", ScoreColor.DANGER),
    ],
)
def test_band_boundaries_are_inclusive(score, label, color):
    assert band(score) == (label, color)


def test_band_is_total_outside_the_score_range():
    assert band(-25).label == "Critical Issues"
    assert band(250).label == "Excellent"


def test_round_score_rounds_halves_up():
    assert round_score(62.5) == 63
    assert round_score(12.5) == 13
    assert round_score(87.4) == 87


def test_banded_result_clamps_before_labelling():
    low = banded_result(-40, ["fix"])
    assert low.score == 0
    assert low.label == "Critical Issues"
    high = banded_result(130)
    assert high.score == 100
    assert high.label == "Excellent"


@pytest.mark.parametrize(
    "score, expected",
    [(-math.inf, 0), (math.inf, 100), (math.nan, 0), (-1e308, 0), (1e308, 100)],
)
def test_clamp_score_handles_overflowed_arithmetic(score, expected):
    assert clamp_score(score) == expected


def test_aggregate_scores_share_of_checked_items():
    items = _items(*[Priority.MEDIUM] * 8)
    result = aggregate_checklist(8, ["a", "b", "c"], items)

    assert result.score == 63
    assert result.label == "Needs Work"
    assert result.color == ScoreColor.WARNING
    assert result.fixes == ["item a", "item b", "item c"]


def test_aggregate_matches_formula_for_every_size():
    for total in range(1, 13):
        items = _items(*[Priority.LOW] * total)
        for unchecked in range(total + 1):
            ids = [item.id for item in items[:unchecked]]
            result = aggregate_checklist(total, ids, items)
            expected = math.floor((total - unchecked) / total * 100 + 0.5)
            assert result.score == expected
            assert result.label == band(expected).label
            assert len(result.fixes) == min(5, unchecked)


def test_aggregate_orders_fixes_by_priority_stably():
    items = _items(Priority.LOW, Priority.HIGH, Priority.HIGH, Priority.MEDIUM)
    result = aggregate_checklist(4, ["a", "b", "c", "d"], items)

    assert result.fixes == ["item b", "item c", "item d", "item a"]
    assert result.score == 0


def test_aggregate_truncates_fixes_to_five_highest_priority():
    items = _items(*([Priority.LOW] * 4 + [Priority.HIGH] * 4))
    result = aggregate_checklist(8, [i.id for i in items], items)

    assert result.fixes == ["item e", "item f", "item g", "item h", "item a"]


def test_aggregate_rejects_empty_checklist():
    with pytest.raises(ValueError):
        aggregate_checklist(0, [], [])


def test_checklist_score_requires_a_checklist():
    with pytest.raises(ValueError):
        checklist_score([], require_tool("cta-clarity-checker"))


def test_apply_penalties_rebands_and_appends_fixes():
    base = ToolResult(score=100, label="Excellent", color=ScoreColor.SUCCESS, fixes=["first"])
    result = apply_penalties(base, [(10, "smaller text"), (15, "taller buttons")])

    assert result.score == 75
    assert result.label == "Good"
    assert result.color == ScoreColor.ACCENT
    assert result.fixes == ["first", "smaller text", "taller buttons"]


def test_apply_penalties_floors_at_zero():
    base = ToolResult(score=10, label="Critical Issues", color=ScoreColor.DANGER)
    assert apply_penalties(base, [(25, "fix")]).score == 0


def test_read_number_coerces_missing_and_blank_to_zero():
    assert read_number({}, "n") == 0
    assert read_number({"n": None}, "n") == 0
    assert read_number({"n": "  "}, "n") == 0
    assert read_number({"n": " 12 "}, "n") == 12
    assert read_number({"n": 4.5}, "n") == 4.5
    assert read_number({"n": True}, "n") == 1


@pytest.mark.parametrize("value", ["abc", "12px", float("nan"), [1, 2]])
def test_read_number_rejects_non_numeric_values(value):
    with pytest.raises(InvalidInputError) as excinfo:
        read_number({"n": value}, "n")
    assert excinfo.value.input_id == "n"


def test_read_text_strips_and_tolerates_missing():
    assert read_text({}, "t") == ""
    assert read_text({"t": "  Get Started "}, "t") == "Get Started"


def test_default_inputs_follow_input_kinds():
    assert default_inputs(require_tool("funnel-friction-score")) == {"steps": 3, "signup": 1, "fields": 4}
    assert default_inputs(require_tool("contrast-calculator")) == {"fg": "", "bg": ""}
    maturity = default_inputs(require_tool("ux-maturity-score"))
    assert set(maturity.values()) == {1}
    assert len(maturity) == 10


def test_reset_rebuilds_identical_fresh_state():
    tool = require_tool("form-ux-checklist")
    first_inputs, second_inputs = default_inputs(tool), default_inputs(tool)
    first_unchecked, second_unchecked = default_unchecked(tool), default_unchecked(tool)

    assert first_inputs == second_inputs
    assert first_inputs is not second_inputs
    assert first_unchecked == second_unchecked == [str(n) for n in range(1, 10)]
    assert first_unchecked is not second_unchecked


def test_evaluate_fills_missing_values_from_defaults():
    tool = require_tool("navigation-complexity-checker")
    result = evaluate(ScoringInput(values={"links": 9}, tool=tool))

    assert result.score == 90
    assert result.fixes == ["Reduce top-level items to 5-7 max"]


def test_evaluate_turns_unreadable_numbers_into_an_error_result():
    result = score_tool("button-size-checker", {"height": "tall"})

    assert result.score == 0
    assert result.label == "Invalid Input"
    assert result.color == ScoreColor.DANGER
    assert result.fixes == ["Button Height (px) must be a number"]


def test_evaluate_ignores_unknown_unchecked_ids():
    result = score_tool("ia-checklist", {}, ["1", "not-an-item"])

    assert result.score == 83
    assert result.label == "Good"
    assert result.fixes == ["Categories match user mental model"]


@pytest.mark.parametrize(
    "slug, values, score",
    [
        ("cta-count-validator", {"primary": "1e308"}, 0),
        ("navigation-complexity-checker", {"links": 1e308}, 0),
        ("funnel-friction-score", {"fields": 1e308}, 0),
        ("thumb-reach-checker", {"primary": 1e308, "nav": 1e308}, 100),
        ("ux-maturity-score", {f"q{n}": 1e308 for n in range(1, 11)}, 100),
    ],
)
def test_huge_numbers_clamp_instead_of_overflowing(slug, values, score):
    result = score_tool(slug, values)

    assert result.score == score
    assert result.label


def test_integer_too_large_for_a_float_is_invalid_input():
    with pytest.raises(InvalidInputError):
        read_number({"n": 10**400}, "n")

    result = score_tool("button-size-checker", {"height": 10**400})
    assert result.label == "Invalid Input"
    assert result.fixes == ["Button Height (px) must be a number"]
