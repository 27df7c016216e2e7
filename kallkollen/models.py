"""Core data types: stages, score categories, challenge content and feedback."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Stage(str, Enum):
    """Screens of one session, in the order they are visited."""

    WELCOME = "WELCOME"
    SYSTEM1V2 = "SYSTEM1V2"
    AI_DETECTION = "AI_DETECTION"
    CONFIRMATION_BIAS = "CONFIRMATION_BIAS"
    LATERAL_READING = "LATERAL_READING"
    TRUTH_EFFECT = "TRUTH_EFFECT"
    RESULTS = "RESULTS"

    @property
    def position(self) -> int:
        return STAGE_ORDER.index(self)

    def next(self) -> "Stage":
        """Return the following stage. RESULTS has no successor."""
        if self is Stage.RESULTS:
            raise ValueError("RESULTS is the last stage")
        return STAGE_ORDER[self.position + 1]


STAGE_ORDER: Tuple[Stage, ...] = tuple(Stage)

# Stages where the user answers a question and points are awarded
CHALLENGE_STAGES: Tuple[Stage, ...] = STAGE_ORDER[1:-1]


def stage_fraction(stage: Stage) -> float:
    """Share of the session completed at `stage`, 0.0 on WELCOME and 1.0 on RESULTS."""
    return stage.position / (len(STAGE_ORDER) - 1)


class Category(str, Enum):
    """Score categories. Values are the keys used in exported progress."""

    LOGIC = "logic"
    AI_AWARENESS = "aiAwareness"
    BIAS_RESISTANCE = "biasResistance"
    LATERAL_READING = "lateralReading"


@dataclass(frozen=True)
class ChallengeItem:
    """One generated (or fallback) news item used by the content-driven stages."""

    headline: str
    body: str
    source: str
    is_true: bool
    explanation: str
    clues: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChallengeItem":
        """
        Build an item from the JSON shape returned by the content service.
        Raises ValueError if a required field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Challenge item must be an object, got {type(data).__name__}")
        for key in ("headline", "body", "source", "explanation"):
            if not isinstance(data.get(key), str):
                raise ValueError(f"Challenge item field '{key}' must be a string")
        if not isinstance(data.get("isTrue"), bool):
            raise ValueError("Challenge item field 'isTrue' must be a boolean")
        clues = data.get("clues")
        if not isinstance(clues, list) or not all(isinstance(c, str) for c in clues):
            raise ValueError("Challenge item field 'clues' must be a list of strings")
        return cls(
            headline=data["headline"],
            body=data["body"],
            source=data["source"],
            is_true=data["isTrue"],
            explanation=data["explanation"],
            clues=tuple(clues),
        )


@dataclass(frozen=True)
class ChallengeResult:
    """Outcome of answering one challenge: what to award and what to tell the user."""

    points: int
    category: Category
    explanation: str
    correct: bool


@dataclass(frozen=True)
class Feedback:
    """Message shown after an answer, until the user moves on."""

    message: str
    correct: bool


@dataclass(frozen=True)
class Action:
    """
    One selectable button on a screen.

    `result` is what gets awarded when chosen; None for the WELCOME start action.
    `gated` actions stay disabled until the stage's impulse delay has elapsed.
    """

    key: str
    label: str
    result: Optional[ChallengeResult] = None
    gated: bool = False
    starts_session: bool = False


@dataclass(frozen=True)
class Screen:
    """Everything a UI needs to draw one stage."""

    stage: Stage
    badge: str
    title: str
    prompt: str
    actions: Tuple[Action, ...] = ()
    quote: str = ""
    quote_source: str = ""
    clues: Tuple[str, ...] = ()
    clues_available: bool = False

    def action(self, key: str) -> Action:
        """Look up an action by key."""
        for action in self.actions:
            if action.key == key:
                return action
        raise KeyError(f"No action '{key}' on {self.stage.value}")


def empty_categories() -> Dict[Category, int]:
    return {c: 0 for c in Category}

