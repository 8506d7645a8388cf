"""
Questionnaire answers and the fixed question sequence.

The questionnaire asks, in order::

    location     "City, REGION" free text (drives climate + pricing)
    budget       radio     budget | mid | premium
    priority     checkbox  energy | durability | maintenance | cost
    windowTypes  checkbox  Double-Hung | Casement | Sliding | Picture
    homeAge      radio     new | medium | old | historic

``Answers`` is immutable: every ``answer()`` call returns a new instance.
Checkbox answers toggle, so answering an already selected option removes it.

``Answers.from_mapping()`` accepts the loose dict shape a UI or test would
build (question ids as keys, strings or lists as values) and never raises:
unexpected value types are treated as "no preference".
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from window_advisor.taxonomy.region_taxonomy import parse_region
from window_advisor.taxonomy.window_taxonomy import (
    BudgetTier,
    HomeAge,
    Priority,
    QuestionType,
    WindowType,
)


@dataclass(frozen=True)
class QuestionOption:
    value: str
    label: str
    desc:  str


@dataclass(frozen=True)
class Question:
    """One step of the questionnaire."""

    id:          str
    title:       str
    explanation: str
    type:        QuestionType
    options:     tuple[QuestionOption, ...] = ()

    @property
    def option_values(self) -> tuple[str, ...]:
        return tuple(o.value for o in self.options)


# Window types offered by the questionnaire (Awning is catalog-only)
_WINDOW_TYPE_DESCS: dict[WindowType, str] = {
    WindowType.DOUBLE_HUNG: "Traditional, easy to clean",
    WindowType.CASEMENT:    "Maximum ventilation",
    WindowType.SLIDING:     "Simple operation",
    WindowType.PICTURE:     "Maximum light",
}

QUESTIONS: tuple[Question, ...] = (
    Question(
        id="location",
        title="What is your location?",
        explanation="Location determines your climate zone and energy efficiency requirements.",
        type=QuestionType.LOCATION,
    ),
    Question(
        id="budget",
        title="What is your budget range per window?",
        explanation="Budget determines available material options and features.",
        type=QuestionType.RADIO,
        options=(
            QuestionOption(BudgetTier.BUDGET.value,  "$300-600 (Budget-friendly)", "Quality vinyl options"),
            QuestionOption(BudgetTier.MID.value,     "$600-1,000 (Mid-range)", "Fiberglass and premium vinyl"),
            QuestionOption(BudgetTier.PREMIUM.value, "$1,000-2,000+ (Premium)", "Wood and luxury options"),
        ),
    ),
    Question(
        id="priority",
        title="What are your top priorities?",
        explanation="Select your most important factors for window selection.",
        type=QuestionType.CHECKBOX,
        options=(
            QuestionOption(Priority.ENERGY.value,      "Energy efficiency", "Lower utility bills"),
            QuestionOption(Priority.DURABILITY.value,  "Long-term durability", "20+ year lifespan"),
            QuestionOption(Priority.MAINTENANCE.value, "Low maintenance", "Minimal upkeep"),
            QuestionOption(Priority.COST.value,        "Lowest upfront cost", "Budget-conscious"),
        ),
    ),
    Question(
        id="windowTypes",
        title="What types of windows do you need?",
        explanation="Select all window styles you want to replace.",
        type=QuestionType.CHECKBOX,
        options=tuple(
            QuestionOption(window_type.value, window_type.value, desc)
            for window_type, desc in _WINDOW_TYPE_DESCS.items()
        ),
    ),
    Question(
        id="homeAge",
        title="How old is your home?",
        explanation="Home age affects installation requirements and costs.",
        type=QuestionType.RADIO,
        options=(
            QuestionOption(HomeAge.NEW.value,      "Less than 10 years", "Good frame condition"),
            QuestionOption(HomeAge.MEDIUM.value,   "10-30 years", "May need inspection"),
            QuestionOption(HomeAge.OLD.value,      "30+ years", "Possible frame replacement"),
            QuestionOption(HomeAge.HISTORIC.value, "50+ years (historic)", "Special considerations"),
        ),
    ),
)

QUESTIONS_BY_ID: dict[str, Question] = {q.id: q for q in QUESTIONS}

# Question id (and accepted aliases) -> Answers field name
_FIELD_FOR_KEY: dict[str, str] = {
    "location":     "location",
    "budget":       "budget",
    "priority":     "priority",
    "priorities":   "priority",
    "windowTypes":  "window_types",
    "window_types": "window_types",
    "homeAge":      "home_age",
    "home_age":     "home_age",
    "climate":      "climate",
}

_MULTI_FIELDS = frozenset({"priority", "window_types"})


class Answers(BaseModel):
    """Normalized questionnaire answers.

    Every field is optional; a missing field means "no preference".

    Attributes:
        location: Free-text ``"City, REGION"``.
        budget: Budget tier value (``"budget"``, ``"mid"``, ``"premium"``).
        priority: Selected priorities, in selection order.
        window_types: Desired window types, in selection order.  Empty means
            no type filter.
        home_age: Home age bracket value.
        climate: Explicit climate (``"cold"``, ``"hot"``, ``"mixed"``); used
            only when no location is available.
    """

    model_config = ConfigDict(frozen=True)

    location: Optional[str] = None
    budget: Optional[str] = None
    priority: tuple[str, ...] = ()
    window_types: tuple[str, ...] = ()
    home_age: Optional[str] = None
    climate: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "Answers":
        """Build ``Answers`` from a loose question-id keyed mapping.

        Unknown keys are ignored.  Single-choice values that are not strings
        become ``None``; multi-choice values may be a string, any iterable
        of strings, or ``None``.
        """
        if isinstance(data, Answers):
            return data
        if not isinstance(data, Mapping):
            return cls()

        fields: dict[str, Any] = {}
        for key, raw in data.items():
            name = _FIELD_FOR_KEY.get(key)
            if name is None:
                continue
            if name in _MULTI_FIELDS:
                fields[name] = _as_choices(raw)
            else:
                fields[name] = _as_choice(raw)
        return cls(**fields)

    def answer(self, question_id: str, value: str) -> "Answers":
        """Return a copy with ``value`` applied to ``question_id``.

        Checkbox questions toggle ``value`` in or out of the selection;
        other questions replace the previous answer.

        Raises:
            KeyError: If ``question_id`` is not a questionnaire question.
        """
        question = QUESTIONS_BY_ID[question_id]
        name = _FIELD_FOR_KEY[question_id]
        if question.type == QuestionType.CHECKBOX:
            current: tuple[str, ...] = getattr(self, name)
            if value in current:
                updated = tuple(v for v in current if v != value)
            else:
                updated = current + (value,)
            return self.model_copy(update={name: updated})
        return self.model_copy(update={name: _as_choice(value)})

    def is_answered(self, question_id: str) -> bool:
        """Whether the wizard may proceed past ``question_id``.

        Location needs "City, XX" with a two-letter region code; a region
        outside the climate table still counts and gets the default zone.
        Checkbox questions need at least one selection, radio questions a value.
        """
        question = QUESTIONS_BY_ID[question_id]
        if question.type == QuestionType.LOCATION:
            return parse_region(self.location) is not None
        value = getattr(self, _FIELD_FOR_KEY[question_id])
        return bool(value)

    def to_mapping(self) -> dict[str, Any]:
        """Question-id keyed dict (the inverse of ``from_mapping``)."""
        return {
            "location":    self.location,
            "budget":      self.budget,
            "priority":    list(self.priority),
            "windowTypes": list(self.window_types),
            "homeAge":     self.home_age,
            "climate":     self.climate,
        }


# ── Helpers ────────────────────────────────────────────────────────────────────

def _as_choice(raw: Any) -> Optional[str]:
    if isinstance(raw, str):
        raw = raw.strip()
        return raw or None
    return None


def _as_choices(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, Iterable):
        return ()
    seen: list[str] = []
    for item in raw:
        choice = _as_choice(item)
        if choice is not None and choice not in seen:
            seen.append(choice)
    return tuple(seen)
