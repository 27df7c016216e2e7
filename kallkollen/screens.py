"""One renderer per stage: turn a stage (and its content, if any) into a Screen of actions."""

from typing import Callable, Dict, Sequence

from . import challenge_content as text
from .models import Action, Category, ChallengeItem, ChallengeResult, Screen, Stage

FULL_POINTS = 10
LATERAL_BODY_PREVIEW = 100

# Which fetched item each content-driven stage shows
ITEM_INDEX = {
    Stage.AI_DETECTION: 0,
    Stage.LATERAL_READING: 1,
}


def _fixed(key: str, label: str, points: int, category: Category, explanation: str, *, gated: bool = False) -> Action:
    return Action(
        key=key,
        label=label,
        result=ChallengeResult(points=points, category=category, explanation=explanation, correct=points > 0),
        gated=gated,
    )


def _judged(key: str, label: str, item: ChallengeItem, claims_true: bool, category: Category) -> Action:
    """Action that is correct when its claim matches the item's isTrue label."""
    correct = claims_true == item.is_true
    return Action(
        key=key,
        label=label,
        result=ChallengeResult(
            points=FULL_POINTS if correct else 0,
            category=category,
            explanation=item.explanation,
            correct=correct,
        ),
    )


def _item_for(stage: Stage, items: Sequence[ChallengeItem]) -> ChallengeItem:
    index = ITEM_INDEX[stage]
    if len(items) <= index:
        raise ValueError(f"{stage.value} needs content item {index}, only {len(items)} loaded")
    return items[index]


def _welcome(items: Sequence[ChallengeItem], clues_visible: bool) -> Screen:
    return Screen(
        stage=Stage.WELCOME,
        badge=text.WELCOME["badge"],
        title=text.WELCOME["title"],
        prompt=text.WELCOME["prompt"],
        actions=(Action(key="start", label=text.WELCOME["start_label"], starts_session=True),),
    )


def _stress_test(items: Sequence[ChallengeItem], clues_visible: bool) -> Screen:
    t = text.STRESS_TEST
    return Screen(
        stage=Stage.SYSTEM1V2,
        badge=t["badge"],
        title=t["title"],
        prompt=t["prompt"],
        quote=t["quote"],
        actions=(
            _fixed("react", t["react_label"], 0, Category.LOGIC, t["react_explanation"]),
            _fixed("wait", t["wait_label"], FULL_POINTS, Category.LOGIC, t["wait_explanation"], gated=True),
        ),
    )


def _ai_detection(items: Sequence[ChallengeItem], clues_visible: bool) -> Screen:
    t = text.AI_DETECTION
    item = _item_for(Stage.AI_DETECTION, items)
    # "Human source" counts as the true answer, "AI-generated" as the false one
    return Screen(
        stage=Stage.AI_DETECTION,
        badge=t["badge"],
        title=t["title"],
        prompt=t["prompt"],
        quote=item.body,
        quote_source=item.source,
        actions=(
            _judged("human", t["human_label"], item, True, Category.AI_AWARENESS),
            _judged("ai", t["ai_label"], item, False, Category.AI_AWARENESS),
        ),
    )


def _confirmation_bias(items: Sequence[ChallengeItem], clues_visible: bool) -> Screen:
    t = text.CONFIRMATION_BIAS
    return Screen(
        stage=Stage.CONFIRMATION_BIAS,
        badge=t["badge"],
        title=t["title"],
        prompt=t["prompt"],
        actions=(
            _fixed("influencer", t["influencer_label"], 0, Category.BIAS_RESISTANCE, t["influencer_explanation"]),
            _fixed(
                "researcher", t["researcher_label"], FULL_POINTS, Category.BIAS_RESISTANCE, t["researcher_explanation"]
            ),
        ),
    )


def _lateral_reading(items: Sequence[ChallengeItem], clues_visible: bool) -> Screen:
    t = text.LATERAL_READING
    item = _item_for(Stage.LATERAL_READING, items)
    preview = item.body[:LATERAL_BODY_PREVIEW] + "..."
    return Screen(
        stage=Stage.LATERAL_READING,
        badge=t["badge"],
        title=t["title"],
        prompt=t["prompt"],
        quote=f"{item.headline}\n\n{preview}",
        quote_source=item.source,
        clues=item.clues if clues_visible else (),
        clues_available=True,
        actions=(
            _judged("true", t["true_label"], item, True, Category.LATERAL_READING),
            _judged("false", t["false_label"], item, False, Category.LATERAL_READING),
        ),
    )


def _truth_effect(items: Sequence[ChallengeItem], clues_visible: bool) -> Screen:
    t = text.TRUTH_EFFECT
    return Screen(
        stage=Stage.TRUTH_EFFECT,
        badge=t["badge"],
        title=t["title"],
        prompt=t["prompt"],
        quote=t["quote"],
        actions=(
            _fixed("question", t["question_label"], FULL_POINTS, Category.BIAS_RESISTANCE, t["question_explanation"]),
            _fixed("gut", t["gut_label"], 0, Category.BIAS_RESISTANCE, t["gut_explanation"]),
        ),
    )


def _results(items: Sequence[ChallengeItem], clues_visible: bool) -> Screen:
    return Screen(
        stage=Stage.RESULTS,
        badge=text.RESULTS["badge"],
        title=text.RESULTS["title"],
        prompt=text.RESULTS["prompt"],
    )


Renderer = Callable[[Sequence[ChallengeItem], bool], Screen]

RENDERERS: Dict[Stage, Renderer] = {
    Stage.WELCOME: _welcome,
    Stage.SYSTEM1V2: _stress_test,
    Stage.AI_DETECTION: _ai_detection,
    Stage.CONFIRMATION_BIAS: _confirmation_bias,
    Stage.LATERAL_READING: _lateral_reading,
    Stage.TRUTH_EFFECT: _truth_effect,
    Stage.RESULTS: _results,
}

_unhandled = [s.value for s in Stage if s not in RENDERERS]
if _unhandled:
    raise RuntimeError(f"No renderer for stages: {', '.join(_unhandled)}")


def render_screen(stage: Stage, items: Sequence[ChallengeItem], *, clues_visible: bool = False) -> Screen:
    """Build the screen for `stage`. Content-driven stages need the fetched items."""
    return RENDERERS[stage](items, clues_visible)
