import datetime

import pytest

from kallkollen.certificate import DEFAULT_NAME, format_swedish_date, generate_certificate_html
from kallkollen.models import Category, ChallengeResult
from kallkollen.name_store import NAME_KEY, NameStore
from kallkollen.progress import Progress
from kallkollen.results import (
    build_results,
    can_export,
    export_certificate,
    is_above_threshold,
    load_results,
    render_certificate,
)

TODAY = datetime.date(2026, 10, 19)


def _progress(**points: int) -> Progress:
    progress = Progress()
    for key, value in points.items():
        progress.award(ChallengeResult(points=value, category=Category(key), explanation="", correct=value > 0))
    return progress


def test_threshold_is_strictly_above_thirty() -> None:
    assert not is_above_threshold(30)
    assert is_above_threshold(40)


def test_perfect_score_reports_above_threshold() -> None:
    view = build_results(_progress(logic=10, aiAwareness=10, biasResistance=20, lateralReading=10))
    assert view.score == 50
    assert view.above_threshold
    assert view.profile_label == "Expert"
    assert [row.category for row in view.rows] == list(Category)


def test_low_score_reports_below_threshold() -> None:
    view = build_results(_progress(logic=10, biasResistance=10))
    assert not view.above_threshold
    assert view.profile_label == "Analytiker"


def test_category_bar_fraction_is_clamped() -> None:
    view = build_results(_progress(biasResistance=20, logic=5))
    rows = {row.category: row for row in view.rows}
    assert rows[Category.BIAS_RESISTANCE].fraction == 1.0
    assert rows[Category.LOGIC].fraction == pytest.approx(0.5)
    assert rows[Category.AI_AWARENESS].fraction == 0.0


def test_missing_name_reads_as_empty(tmp_path) -> None:
    store = NameStore(tmp_path / "state.json")
    assert store.load() == ""
    assert load_results(Progress(), store).name == ""


def test_corrupt_state_file_reads_as_empty(tmp_path) -> None:
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")
    assert NameStore(path).load() == ""


def test_exported_name_round_trips_across_stores(tmp_path) -> None:
    path = tmp_path / "nested" / "state.json"
    html = export_certificate(_progress(logic=10), "Alva Andersson", NameStore(path), today=TODAY)

    assert "Alva Andersson" in html
    # A new store on the same file is what a later session sees
    assert NameStore(path).load() == "Alva Andersson"
    assert load_results(Progress(), NameStore(path)).name == "Alva Andersson"


def test_store_keeps_other_keys(tmp_path) -> None:
    path = tmp_path / "state.json"
    path.write_text('{"theme": "dark"}', encoding="utf-8")
    NameStore(path).save("Kim")
    assert NameStore(path).load() == "Kim"
    assert '"theme": "dark"' in path.read_text(encoding="utf-8")
    assert NAME_KEY in path.read_text(encoding="utf-8")


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_name_cannot_export(tmp_path, name) -> None:
    store = NameStore(tmp_path / "state.json")
    assert not can_export(name)
    with pytest.raises(ValueError):
        export_certificate(Progress(), name, store)
    assert not (tmp_path / "state.json").exists()


def test_certificate_defaults_name_when_nothing_stored(tmp_path) -> None:
    html = render_certificate(Progress(), NameStore(tmp_path / "state.json"), today=TODAY)
    assert DEFAULT_NAME in html
    assert "Analytiker" in html


def test_certificate_is_pure_function_of_inputs() -> None:
    first = generate_certificate_html(score=50, profile="Expert", name="Sam", date=TODAY)
    second = generate_certificate_html(score=50, profile="Expert", name="Sam", date=TODAY)
    assert first == second
    assert "19 oktober 2026" in first
    assert ">50<" in first


def test_certificate_escapes_name() -> None:
    html = generate_certificate_html(score=0, profile="Analytiker", name="<script>", date=TODAY)
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_swedish_date_format() -> None:
    assert format_swedish_date(datetime.date(2025, 1, 5)) == "5 januari 2025"
    assert format_swedish_date(datetime.date(2025, 12, 31)) == "31 december 2025"
