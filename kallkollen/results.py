"""Results summary derived from the final progress, and the certificate export action."""

import datetime
import logging
from dataclasses import dataclass
from typing import List, Optional

from .certificate import DEFAULT_NAME, generate_certificate_html
from .models import Category
from .name_store import NameStore
from .progress import Progress

logger = logging.getLogger(__name__)

# Scores strictly above this count as the expert profile
SCORE_THRESHOLD = 30
CATEGORY_MAX = 10

CATEGORY_ROWS = [
    (Category.LOGIC, "Logik (System 2)", "🐢"),
    (Category.AI_AWARENESS, "AI-Medvetenhet", "🤖"),
    (Category.BIAS_RESISTANCE, "Bias-Motstånd", "🛡️"),
    (Category.LATERAL_READING, "Lateralt Läsande", "🔍"),
]

CONCLUSION_ABOVE = (
    "Du är en mästare på att koppla ur System 1! Du tar dig tid att undersöka och "
    "ifrågasätta även det som ser snyggt ut."
)
CONCLUSION_BELOW = (
    "Din hjärna är väldigt effektiv på att ta genvägar. Det är bra för att spara energi, "
    "men farligt i ett digitalt flöde av desinformation."
)


@dataclass(frozen=True)
class CategoryRow:
    category: Category
    label: str
    emoji: str
    score: int
    max_score: int = CATEGORY_MAX

    @property
    def fraction(self) -> float:
        """Bar fill between 0 and 1."""
        if self.max_score <= 0:
            return 0.0
        return max(0.0, min(1.0, self.score / self.max_score))


@dataclass(frozen=True)
class ResultsView:
    score: int
    total_challenges: int
    rows: List[CategoryRow]
    above_threshold: bool
    conclusion: str
    profile_label: str
    name: str


def is_above_threshold(score: int) -> bool:
    return score > SCORE_THRESHOLD


def profile_label(score: int) -> str:
    return "Expert" if is_above_threshold(score) else "Analytiker"


def build_results(progress: Progress, name: str = "") -> ResultsView:
    """Project the final progress (and the remembered name) onto what the results screen shows."""
    above = is_above_threshold(progress.score)
    return ResultsView(
        score=progress.score,
        total_challenges=progress.total_challenges,
        rows=[
            CategoryRow(category=c, label=label, emoji=emoji, score=progress.category_score(c))
            for c, label, emoji in CATEGORY_ROWS
        ],
        above_threshold=above,
        conclusion=CONCLUSION_ABOVE if above else CONCLUSION_BELOW,
        profile_label=profile_label(progress.score),
        name=name,
    )


def load_results(progress: Progress, store: NameStore) -> ResultsView:
    """Results view with the name pre-filled from the store."""
    return build_results(progress, store.load())


def can_export(name: Optional[str]) -> bool:
    return bool(name and name.strip())


def export_certificate(
    progress: Progress,
    name: str,
    store: NameStore,
    today: Optional[datetime.date] = None,
) -> str:
    """
    Remember `name`, then build the printable certificate from the stored name.
    Raises ValueError for a blank name.
    """
    if not can_export(name):
        raise ValueError("A name is required to print the certificate")
    store.save(name)
    logger.info("Exporting certificate (score=%d)", progress.score)
    return render_certificate(progress, store, today)


def render_certificate(progress: Progress, store: NameStore, today: Optional[datetime.date] = None) -> str:
    """Certificate HTML for the stored name, or the default participant name if none is stored."""
    stored = store.load().strip()
    return generate_certificate_html(
        score=progress.score,
        profile=profile_label(progress.score),
        name=stored or DEFAULT_NAME,
        date=today or datetime.date.today(),
    )
