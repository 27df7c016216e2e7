"""Score accumulation across the four categories."""

from dataclasses import dataclass, field
from typing import Dict, Union

from .models import Category, ChallengeResult, Feedback, empty_categories


@dataclass
class Progress:
    """Running score for one session. `score` always equals the sum of `categories`."""

    score: int = 0
    categories: Dict[Category, int] = field(default_factory=empty_categories)
    total_challenges: int = 0

    def award(self, result: ChallengeResult) -> Feedback:
        """
        Add the result's points to the total and its category, count the challenge,
        and return the feedback to show. Points are not clamped here.
        """
        category = _as_category(result.category)
        self.score += result.points
        self.categories[category] += result.points
        self.total_challenges += 1
        return Feedback(message=result.explanation, correct=result.correct)

    def category_score(self, category: Union[Category, str]) -> int:
        return self.categories[_as_category(category)]

    def to_dict(self) -> dict:
        """Progress keyed by the wire category names."""
        return {
            "score": self.score,
            "categories": {c.value: v for c, v in self.categories.items()},
            "totalChallenges": self.total_challenges,
        }


def _as_category(value: Union[Category, str]) -> Category:
    # Unknown keys raise ValueError
    return value if isinstance(value, Category) else Category(value)
