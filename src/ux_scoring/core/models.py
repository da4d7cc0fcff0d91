"""Pydantic data models — the shared scoring objects.

Both the MCP server and any other presentation layer use these models as the
common interface for tool definitions, scoring input and results.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

InputValue = Union[int, float, str, bool, None]


class ToolCategory(str, Enum):
    """Closed set of catalog categories."""

    GENERAL = "General"
    CONVERSION = "Conversion"
    FORMS = "Forms"
    ACCESSIBILITY = "Accessibility"
    NAVIGATION = "Navigation"
    MOBILE = "Mobile"
    ONBOARDING = "Onboarding"
    STATES = "States"


class ToolType(str, Enum):
    """Descriptive widget type. Never drives scoring behavior."""

    CHECKLIST = "checklist"
    CALCULATOR = "calculator"
    VALIDATOR = "validator"
    QUESTIONNAIRE = "questionnaire"


class InputKind(str, Enum):
    """Kind of form field a ToolInput renders as."""

    NUMBER = "number"
    TEXT = "text"
    SELECT = "select"
    RADIO = "radio"

    @property
    def has_options(self) -> bool:
        return self in (InputKind.SELECT, InputKind.RADIO)


class Priority(str, Enum):
    """Checklist item priority, High > Medium > Low."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def weight(self) -> int:
        return _PRIORITY_WEIGHTS[self]


_PRIORITY_WEIGHTS = {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}


class ScoreColor(str, Enum):
    """Semantic severity tag rendered by the presentation layer."""

    SUCCESS = "success"
    ACCENT = "accent"
    WARNING = "warning"
    DANGER = "danger"
    MUTED = "muted"
    NEUTRAL = "neutral"


class InputOption(BaseModel):
    """One entry of a select/radio field."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: InputValue


class ToolInput(BaseModel):
    """One configurable field of a tool."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    kind: InputKind
    options: tuple[InputOption, ...] = ()
    default_value: InputValue = None
    placeholder: Optional[str] = None
    helper_text: Optional[str] = None

    @model_validator(mode="after")
    def _check_options(self) -> ToolInput:
        if not self.kind.has_options:
            return self
        if not self.options:
            raise ValueError(f"Input '{self.id}' is a {self.kind.value} field without options")
        if self.default_value is not None and self.default_value not in self.option_values:
            raise ValueError(f"Default for input '{self.id}' is not one of its option values")
        return self

    @property
    def option_values(self) -> list[InputValue]:
        return [o.value for o in self.options]

    def initial_value(self) -> InputValue:
        """Value a freshly rendered (or reset) form starts with."""
        if self.default_value is not None:
            return self.default_value
        if self.kind.has_options:
            return self.options[0].value
        if self.kind is InputKind.NUMBER:
            return 0
        return ""


class ChecklistItem(BaseModel):
    """One auditable yes/no statement."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    priority: Priority
    tooltip: Optional[str] = None


class ToolResult(BaseModel):
    """Output of a scoring function."""

    score: int = Field(ge=0, le=100, description="Score from 0 (critical) to 100 (excellent)")
    label: str = Field(description="Human-readable verdict")
    color: ScoreColor
    fixes: list[str] = Field(default_factory=list, description="Recommended fixes, most relevant first")
    details: Optional[list[str]] = Field(None, description="Supplementary detail lines")


# Called as calculate(values, unchecked_ids, tool).
ScoringFunction = Callable[..., ToolResult]


class ToolDefinition(BaseModel):
    """Static record describing one widget: content, schema and scoring function."""

    model_config = ConfigDict(frozen=True)

    id: str
    slug: str
    name: str
    category: ToolCategory
    description: str
    long_description: str = ""
    how_it_works: str
    type: ToolType
    inputs: tuple[ToolInput, ...] = ()
    checklist: tuple[ChecklistItem, ...] = ()
    calculate: ScoringFunction = Field(exclude=True)

    @model_validator(mode="after")
    def _check_schema(self) -> ToolDefinition:
        if not SLUG_PATTERN.match(self.slug):
            raise ValueError(f"Slug '{self.slug}' is not URL-safe")
        if not self.id:
            raise ValueError(f"Tool '{self.slug}' has an empty id")
        _ensure_unique([i.id for i in self.inputs], f"input ids of '{self.slug}'")
        _ensure_unique([c.id for c in self.checklist], f"checklist ids of '{self.slug}'")
        return self

    @property
    def has_checklist(self) -> bool:
        return bool(self.checklist)

    def input_by_id(self, input_id: str) -> Optional[ToolInput]:
        return next((i for i in self.inputs if i.id == input_id), None)

    def summary(self) -> dict:
        """JSON-safe view of the definition, without the scoring function."""
        data = self.model_dump(mode="json")
        data["input_count"] = len(self.inputs)
        data["checklist_count"] = len(self.checklist)
        return data


class ScoringInput(BaseModel):
    """The triple handed to a scoring function."""

    values: dict[str, Any] = Field(default_factory=dict, description="Input id -> current value")
    unchecked_ids: list[str] = Field(default_factory=list, description="Checklist ids not yet checked")
    tool: ToolDefinition


def _ensure_unique(ids: list[str], what: str) -> None:
    seen = set()
    for item_id in ids:
        if item_id in seen:
            raise ValueError(f"Duplicate id '{item_id}' in {what}")
        seen.add(item_id)
