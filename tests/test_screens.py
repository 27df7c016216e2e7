import pytest

from conftest import make_item

from kallkollen.models import CHALLENGE_STAGES, Category, Stage
from kallkollen.screens import RENDERERS, render_screen


@pytest.fixture
def items():
    return [make_item(False, explanation="AI-text"), make_item(True, headline="Sann rubrik", clues=["x", "y"])] + [
        make_item(True) for _ in range(4)
    ]


def test_every_stage_has_a_renderer() -> None:
    assert set(RENDERERS) == set(Stage)


def test_welcome_has_only_start(items) -> None:
    screen = render_screen(Stage.WELCOME, items)
    assert [a.key for a in screen.actions] == ["start"]
    assert screen.actions[0].starts_session
    assert screen.actions[0].result is None


def test_results_has_no_award_actions(items) -> None:
    assert render_screen(Stage.RESULTS, items).actions == ()


def test_challenge_stages_offer_one_correct_and_one_wrong_action(items) -> None:
    for stage in CHALLENGE_STAGES:
        results = [a.result for a in render_screen(stage, items).actions]
        assert sorted((r.points, r.correct) for r in results) == [(0, False), (10, True)]


def test_stress_test_only_gates_considered_answer(items) -> None:
    screen = render_screen(Stage.SYSTEM1V2, items)
    assert screen.action("react").gated is False
    assert screen.action("react").result.points == 0
    assert screen.action("wait").gated is True
    assert screen.action("wait").result.category is Category.LOGIC


def test_ai_detection_scores_against_item_zero(items) -> None:
    screen = render_screen(Stage.AI_DETECTION, items)
    assert screen.quote == items[0].body
    assert screen.quote_source == items[0].source
    assert screen.action("ai").result.correct is True
    assert screen.action("human").result.correct is False
    assert screen.action("ai").result.explanation == "AI-text"
    assert screen.action("ai").result.category is Category.AI_AWARENESS


def test_lateral_reading_uses_item_one(items) -> None:
    hidden = render_screen(Stage.LATERAL_READING, items)
    assert hidden.quote.startswith("Sann rubrik")
    assert hidden.clues == ()
    assert hidden.clues_available
    assert hidden.action("true").result.correct is True
    assert hidden.action("false").result.points == 0
    assert hidden.action("true").result.category is Category.LATERAL_READING

    shown = render_screen(Stage.LATERAL_READING, items, clues_visible=True)
    assert shown.clues == ("x", "y")
    assert shown.actions == hidden.actions


def test_lateral_reading_truncates_body(items) -> None:
    screen = render_screen(Stage.LATERAL_READING, items)
    preview = screen.quote.split("\n\n", 1)[1]
    assert preview == items[1].body[:100] + "..."


def test_static_stages_do_not_need_content() -> None:
    assert render_screen(Stage.CONFIRMATION_BIAS, []).action("researcher").result.correct is True
    assert render_screen(Stage.TRUTH_EFFECT, []).action("question").result.points == 10
    assert render_screen(Stage.TRUTH_EFFECT, []).action("gut").result.category is Category.BIAS_RESISTANCE


def test_content_stage_without_items_raises() -> None:
    with pytest.raises(ValueError):
        render_screen(Stage.LATERAL_READING, [make_item(True)])


def test_unknown_action_key_raises(items) -> None:
    with pytest.raises(KeyError):
        render_screen(Stage.WELCOME, items).action("nope")
