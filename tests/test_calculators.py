import pytest

from ux_scoring.core.calculators import maturity_tier
from ux_scoring.core.models import ScoreColor
from ux_scoring.core.registry import all_tools, score_tool
from ux_scoring.core.scoring import band

# Tools whose labels are not the generic verdict bands for at least one input.
CUSTOM_LABEL_TOOLS = {"ux-maturity-score", "ux-issues-prioritizer", "contrast-calculator", "cta-clarity-checker"}


def _answers(value: int) -> dict:
    return {f"q{n}": value for n in range(1, 11)}


# ─── CTA clarity ─────────────────────────────────────────────────────────────


def test_weak_cta_is_penalised_twice():
    result = score_tool("cta-clarity-checker", {"cta": "Click here"})

    assert result.score == 45
    assert result.label == "Needs Work"
    assert 'Avoid weak words like "Click", "Submit", or "Learn more"' in result.fixes
    assert "Start with a strong action verb (Get, Start, Try, Join, etc.)" in result.fixes


def test_strong_cta_gets_positive_feedback():
    result = score_tool("cta-clarity-checker", {"cta": "Get Started"})

    assert result.score >= 80
    assert result.fixes == ["Great CTA! Clear action verb and appropriate length."]


def test_generic_single_word_cta():
    result = score_tool("cta-clarity-checker", {"cta": "OK"})

    assert result.score == 55
    assert result.fixes[-1] == "Too generic — add specificity about what happens next"


def test_long_cta_loses_length_points_but_keeps_verb_bonus():
    result = score_tool("cta-clarity-checker", {"cta": "Get your free personalized trial today"})

    assert result.score == 85
    assert result.fixes == ["Too long — aim for under 25 characters"]


def test_slightly_long_cta():
    result = score_tool("cta-clarity-checker", {"cta": "Start your free trial now"})

    assert len("Start your free trial now") == 25
    assert result.score == 100
    assert result.fixes == ["Consider shortening — ideal length is under 20 characters"]


def test_empty_cta_asks_for_text():
    result = score_tool("cta-clarity-checker", {"cta": "   "})

    assert result.score == 0
    assert result.label == "Enter CTA Text"
    assert result.color == ScoreColor.MUTED


# ─── Calculators ─────────────────────────────────────────────────────────────


def test_cta_count_penalises_extra_primary_and_secondary():
    assert score_tool("cta-count-validator").score == 100

    result = score_tool("cta-count-validator", {"primary": 3, "secondary": 5})
    assert result.score == 40
    assert result.fixes == ["Only 1 primary CTA recommended per view", "Too many secondary links distract users"]


def test_funnel_friction_defaults_require_signup():
    result = score_tool("funnel-friction-score")

    assert result.score == 85
    assert result.fixes == ["Delay signup until after value is shown"]


def test_funnel_friction_floors_at_zero():
    result = score_tool("funnel-friction-score", {"steps": 10, "signup": 0, "fields": 20})

    assert result.score == 0
    assert result.label == "Critical Issues"
    assert result.fixes == ["Reduce steps (combine or remove)", "Reduce form fields"]


@pytest.mark.parametrize(
    "fields, score, label",
    [(3, 100, "Excellent"), (6, 80, "Good"), (10, 50, "Needs Work"), (11, 20, "Very High Friction")],
)
def test_form_field_count_bands(fields, score, label):
    result = score_tool("form-field-count-impact", {"fields": fields})

    assert result.score == score
    assert result.label == label


def test_very_high_friction_keeps_danger_color():
    assert score_tool("form-field-count-impact", {"fields": 30}).color == ScoreColor.DANGER


@pytest.mark.parametrize("height, score", [(44, 100), (48, 100), (40, 80), (39, 40)])
def test_button_size(height, score):
    assert score_tool("button-size-checker", {"height": height}).score == score


@pytest.mark.parametrize("size, score, label", [(16, 100, "Excellent"), (14, 70, "Good"), (13, 30, "Critical Issues")])
def test_font_size(size, score, label):
    result = score_tool("font-size-checker", {"size": size})

    assert result.score == score
    assert result.label == label


def test_navigation_complexity_penalties():
    result = score_tool("navigation-complexity-checker", {"links": 10, "levels": 4})

    assert result.score == 55
    assert result.fixes == ["Reduce top-level items to 5-7 max", "Flatten hierarchy (max 2 levels)"]


@pytest.mark.parametrize(
    "primary, nav, score, has_fix",
    [(100, 100, 100, False), (90, 50, 70, False), (70, 50, 60, True), (20, 50, 35, True)],
)
def test_thumb_reach_averages_positions(primary, nav, score, has_fix):
    result = score_tool("thumb-reach-checker", {"primary": primary, "nav": nav})

    assert result.score == score
    assert bool(result.fixes) is has_fix


def test_contrast_tool_reads_its_inputs():
    result = score_tool("contrast-calculator", {"fg": "#000", "bg": "#fff"})

    assert result.score == 100
    assert result.fixes[0] == "Contrast ratio: 21.00:1"


# ─── Checklist with penalties ────────────────────────────────────────────────


def test_form_ux_penalties_are_capped():
    result = score_tool("form-ux-checklist", {"fields": 10, "optional": 10}, [])

    assert result.score == 73
    assert result.label == "Good"
    assert result.fixes == ["Reduce total field count", "Remove optional fields"]

    capped = score_tool("form-ux-checklist", {"fields": 30, "optional": 3}, [])
    assert capped.score == 77


def test_accessibility_quick_check_rebands_after_penalties():
    result = score_tool("accessibility-quick-check", {"text": 12, "btn": 30}, [])

    assert result.score == 75
    assert result.label == "Good"
    assert result.fixes == ["Increase body text to 16px", "Min button height 44px"]


def test_accessibility_quick_check_never_goes_negative():
    result = score_tool("accessibility-quick-check", {"text": 12, "btn": 30})

    assert result.score == 0
    assert len(result.fixes) == 7


# ─── Questionnaires ──────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "answer, score, label",
    [(5, 100, "Advanced"), (4, 80, "Mature"), (3, 60, "Growing"), (1, 20, "Starter")],
)
def test_maturity_tiers(answer, score, label):
    result = score_tool("ux-maturity-score", _answers(answer))

    assert result.score == score
    assert result.label == label
    assert result.color == band(score).color
    assert result.fixes == ["Focus on lowest rated areas first."]


def test_maturity_details_name_weakest_areas():
    answers = _answers(4)
    answers.update({"q2": 2, "q7": 2})
    result = score_tool("ux-maturity-score", answers)

    assert result.score == 72
    assert result.label == "Mature"
    assert result.details == ["Lowest rated (2/5): Analytics Usage, Feedback Loop"]


def test_maturity_tier_thresholds_are_exclusive():
    assert maturity_tier(40) == "Starter"
    assert maturity_tier(41) == "Growing"
    assert maturity_tier(81) == "Advanced"


def test_issues_prioritizer_lists_checked_issues_in_catalog_order():
    fresh = score_tool("ux-issues-prioritizer")
    assert fresh.score == 100
    assert fresh.fixes == []

    result = score_tool("ux-issues-prioritizer", {}, [])
    assert result.score == 4
    assert result.label == "Priority List"
    assert result.color == ScoreColor.NEUTRAL
    assert len(result.fixes) == 12
    assert result.fixes[:3] == [
        "Too many CTAs (High Impact)",
        "Confusing nav labels (High Impact)",
        "Weak hierarchy (Med Impact)",
    ]
    assert result.fixes[-1] == "Mobile tap targets too small (High Impact)"

    some = score_tool("ux-issues-prioritizer", {}, [str(n) for n in range(1, 8)])
    assert some.score == 60
    assert some.fixes == [
        "No empty states (Low Impact)",
        "Unclear pricing (High Impact)",
        "No social proof (Med Impact)",
        "Hard to scan text (Med Impact)",
        "Mobile tap targets too small (High Impact)",
    ]


# ─── Catalog-wide properties ─────────────────────────────────────────────────


@pytest.mark.parametrize("tool", all_tools(), ids=lambda t: t.slug)
def test_default_state_scores_within_range(tool):
    result = score_tool(tool.slug)

    assert 0 <= result.score <= 100
    assert result.label
    if tool.slug not in CUSTOM_LABEL_TOOLS:
        assert (result.label, result.color) == band(result.score)


@pytest.mark.parametrize(
    "tool",
    [t for t in all_tools() if t.has_checklist and t.slug != "ux-issues-prioritizer"],
    ids=lambda t: t.slug,
)
def test_fully_checked_checklist_with_defaults_is_excellent(tool):
    result = score_tool(tool.slug, {}, [])

    assert result.score == 100
    assert result.label == "Excellent"
    assert result.fixes == []
