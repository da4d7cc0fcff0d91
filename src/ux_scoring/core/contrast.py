"""WCAG color contrast math.

Relative luminance and contrast ratio follow the WCAG 2.x definitions. The
ratio is banded against the AA/AAA thresholds rather than the generic score
bands, then the banded score is labelled with the generic bands.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional

from .models import ScoreColor, ToolResult
from .scoring import band

HEX_PATTERN = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# WCAG 2.x minimum ratios
AA_LARGE = 3.0
AA_NORMAL = 4.5
AAA_LARGE = 4.5
AAA_NORMAL = 7.0


class RGB(NamedTuple):
    r: int
    g: int
    b: int


def parse_hex(value: str) -> Optional[RGB]:
    """Parse #rgb / #rrggbb (the # is optional). Returns None for anything else."""
    cleaned = value.strip()
    if cleaned.startswith("#"):
        cleaned = cleaned[1:]
    if not HEX_PATTERN.match(cleaned):
        return None
    if len(cleaned) == 3:
        cleaned = "".join(ch * 2 for ch in cleaned)
    return RGB(int(cleaned[0:2], 16), int(cleaned[2:4], 16), int(cleaned[4:6], 16))


def _linear_channel(channel: int) -> float:
    s = channel / 255
    if s <= 0.03928:
        return s / 12.92
    return ((s + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    return 0.2126 * _linear_channel(rgb.r) + 0.7152 * _linear_channel(rgb.g) + 0.0722 * _linear_channel(rgb.b)


def contrast_ratio(l1: float, l2: float) -> float:
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def format_ratio(ratio: float) -> str:
    return f"{ratio:.2f}:1"


def _wcag_verdict(ratio: float) -> tuple[int, list[str]]:
    if ratio >= AAA_NORMAL:
        return 100, [
            "✓ Passes WCAG AAA (normal text)",
            "✓ Passes WCAG AAA (large text)",
            "✓ Passes WCAG AA (all text)",
        ]
    if ratio >= AA_NORMAL:
        return 85, [
            "✓ Passes WCAG AA (normal text)",
            "✓ Passes WCAG AAA (large text)",
            "✗ Fails WCAG AAA (normal text) — need 7:1",
        ]
    if ratio >= AA_LARGE:
        return 50, [
            "✓ Passes WCAG AA (large text only)",
            "✗ Fails WCAG AA (normal text) — need 4.5:1",
            "✗ Fails WCAG AAA — need 7:1",
        ]
    return 20, [
        "✗ Fails all WCAG levels",
        "Minimum for large text: 3:1",
        "Minimum for normal text: 4.5:1",
    ]


def score_contrast(fg_hex: Optional[str], bg_hex: Optional[str]) -> ToolResult:
    """Score a foreground/background pair against WCAG AA and AAA.

    Empty input and malformed hex are reported through the result, never raised.
    """
    fg_hex = (fg_hex or "").strip()
    bg_hex = (bg_hex or "").strip()

    if not fg_hex or not bg_hex:
        return ToolResult(
            score=0,
            label="Enter Colors",
            color=ScoreColor.MUTED,
            fixes=["Enter both foreground and background hex colors (e.g., #000000, #ffffff)"],
        )

    fg = parse_hex(fg_hex)
    bg = parse_hex(bg_hex)
    if fg is None or bg is None:
        return ToolResult(
            score=0,
            label="Invalid Hex",
            color=ScoreColor.DANGER,
            fixes=["Enter valid hex colors (e.g., #000000, #fff, #1a2b3c)"],
        )

    ratio = contrast_ratio(relative_luminance(fg), relative_luminance(bg))
    score, verdicts = _wcag_verdict(ratio)
    label, color = band(score)
    return ToolResult(
        score=score,
        label=label,
        color=color,
        fixes=[f"Contrast ratio: {format_ratio(ratio)}"] + verdicts,
    )
