from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from kallkollen.challenge_content import fallback_news_items  # noqa: E402
from kallkollen.models import ChallengeItem  # noqa: E402
from kallkollen.session import QuizSession  # noqa: E402


class ManualScheduler:
    """Timer scheduler driven by `advance()` instead of wall-clock time."""

    def __init__(self) -> None:
        self.now = 0.0
        self.pending: list[_ManualHandle] = []

    def clock(self) -> float:
        return self.now

    def __call__(self, delay: float, callback: Callable[[], None]) -> "_ManualHandle":
        handle = _ManualHandle(self.now + delay, callback)
        self.pending.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for handle in list(self.pending):
            if handle.cancelled or handle.fired or handle.due > self.now:
                continue
            handle.fired = True
            handle.callback()
        self.pending = [h for h in self.pending if not (h.cancelled or h.fired)]


class _ManualHandle:
    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class StubProvider:
    """Content provider returning fixed items (or raising) and counting calls."""

    def __init__(self, items=None, error: Exception | None = None) -> None:
        self.items = items if items is not None else [ChallengeItem.from_dict(d) for d in fallback_news_items()]
        self.error = error
        self.calls = 0

    def fetch(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.items)


class FakeGeminiClient:
    """Stands in for google.genai.Client; records generate_content calls."""

    def __init__(self, text: str | None = None, error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[dict] = []
        self.models = SimpleNamespace(generate_content=self._generate_content)

    def _generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def make_item(is_true: bool, **overrides) -> ChallengeItem:
    data = {
        "headline": "Rubrik",
        "body": "Brödtext " * 30,
        "source": "Källa.se",
        "isTrue": is_true,
        "explanation": "Förklaring",
        "clues": ["Ledtråd 1", "Ledtråd 2"],
    }
    data.update(overrides)
    return ChallengeItem.from_dict(data)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def provider() -> StubProvider:
    return StubProvider()


@pytest.fixture
def session(provider: StubProvider, scheduler: ManualScheduler) -> QuizSession:
    quiz = QuizSession(provider, impulse_delay=6.0, scheduler=scheduler, clock=scheduler.clock, strict=True)
    quiz.load_content()
    return quiz
