"""Session controller: the linear stage machine, progress and feedback for one user."""

import logging
import time
from typing import Callable, List, Optional, Union

from .challenge_content import fallback_news_items
from .content_provider import MIN_ITEMS, ContentProvider, load_fallback, pad_items
from .errors import InvalidTransitionError
from .impulse_timer import ImpulseTimer, Scheduler
from .models import CHALLENGE_STAGES, Action, ChallengeItem, ChallengeResult, Feedback, Screen, Stage
from .progress import Progress
from .screens import render_screen

logger = logging.getLogger(__name__)


class QuizSession:
    """
    Owns the current stage, the progress and the pending feedback.

    Transitions:
        start()        WELCOME -> SYSTEM1V2, once content has loaded
        award(result)  on a challenge stage with no pending feedback; sets feedback
        acknowledge()  clears feedback and moves to the next stage
        reset()        back to WELCOME with zero progress and fresh content

    Invalid calls raise InvalidTransitionError when `strict`, otherwise they are
    logged and ignored (returning None) without touching state.
    """

    def __init__(
        self,
        provider: ContentProvider,
        *,
        impulse_delay: float = 6.0,
        scheduler: Optional[Scheduler] = None,
        clock: Callable[[], float] = time.monotonic,
        strict: bool = False,
    ):
        self._provider = provider
        self.strict = strict
        self._timer = ImpulseTimer(impulse_delay, scheduler=scheduler, clock=clock)
        self._init_state()

    def _init_state(self) -> None:
        self.stage = Stage.WELCOME
        self.progress = Progress()
        self.feedback: Optional[Feedback] = None
        self.items: Optional[List[ChallengeItem]] = None
        self.clues_visible = False
        self.visited: List[Stage] = [Stage.WELCOME]

    # --- content -------------------------------------------------------------

    @property
    def is_loading(self) -> bool:
        """True until the content for this session has been fetched."""
        return self.items is None

    def load_content(self) -> List[ChallengeItem]:
        """Fetch content once; later calls return the cached list."""
        if self.items is not None:
            return self.items
        try:
            items = list(self._provider.fetch())
        except Exception as exc:
            logger.warning("Content provider failed, using fallback content: %s", exc)
            items = []
        if len(items) < MIN_ITEMS:
            items = pad_items(items, load_fallback(fallback_news_items()), MIN_ITEMS)
        self.items = items
        return items

    # --- read-only views -----------------------------------------------------

    @property
    def is_finished(self) -> bool:
        return self.stage is Stage.RESULTS

    @property
    def feedback_is_last(self) -> bool:
        """Whether acknowledging the pending feedback leads to the results."""
        return self.stage is CHALLENGE_STAGES[-1]

    @property
    def gate_open(self) -> bool:
        """Whether the delayed stress-test answer can be chosen."""
        return self.stage is Stage.SYSTEM1V2 and self._timer.is_open

    def gate_remaining(self) -> float:
        return self._timer.remaining() if self.stage is Stage.SYSTEM1V2 else 0.0

    def screen(self) -> Screen:
        if self.is_loading:
            raise InvalidTransitionError("Content is still loading; no stage can be rendered")
        return render_screen(self.stage, self.items or [], clues_visible=self.clues_visible)

    def is_available(self, action: Action) -> bool:
        return not action.gated or self.gate_open

    # --- transitions ---------------------------------------------------------

    def start(self) -> Optional[Stage]:
        if self.stage is not Stage.WELCOME:
            return self._reject(f"start() is only valid on WELCOME, not {self.stage.value}")
        if self.is_loading:
            return self._reject("start() called before content finished loading")
        return self._advance()

    def award(self, result: ChallengeResult) -> Optional[Feedback]:
        if self.stage not in CHALLENGE_STAGES:
            return self._reject(f"award() is not valid on {self.stage.value}")
        if self.feedback is not None:
            return self._reject("award() called while feedback is pending")
        self.feedback = self.progress.award(result)
        logger.debug(
            "Awarded %d to %s on %s (correct=%s)",
            result.points,
            getattr(result.category, "value", result.category),
            self.stage.value,
            result.correct,
        )
        return self.feedback

    def acknowledge(self) -> Optional[Stage]:
        if self.feedback is None:
            return self._reject(f"acknowledge() called with no pending feedback on {self.stage.value}")
        self.feedback = None
        return self._advance()

    def choose(self, action: Action) -> Union[Stage, Feedback, None]:
        """Apply a button from the current screen."""
        if self.is_loading or self.feedback is not None or action not in self.screen().actions:
            return self._reject(f"Action '{action.key}' is not selectable on {self.stage.value} right now")
        if not self.is_available(action):
            return self._reject(f"Action '{action.key}' is locked for another {self.gate_remaining():.1f}s")
        if action.starts_session:
            return self.start()
        if action.result is None:
            return self._reject(f"Action '{action.key}' has nothing to award")
        return self.award(action.result)

    def toggle_clues(self) -> bool:
        """Show or hide the lateral-reading clues. Never affects progress."""
        if self.stage is not Stage.LATERAL_READING or self.feedback is not None:
            self._reject(f"Clues are not available on {self.stage.value}")
            return self.clues_visible
        self.clues_visible = not self.clues_visible
        return self.clues_visible

    def reset(self) -> None:
        """Start over: zero progress, WELCOME, and a fresh content fetch."""
        self._timer.cancel()
        self._init_state()
        logger.info("Session reset")
        self.load_content()

    def _advance(self) -> Stage:
        leaving = self.stage
        if leaving is Stage.SYSTEM1V2:
            self._timer.cancel()
        self.stage = leaving.next()
        self.clues_visible = False
        self.visited.append(self.stage)
        if self.stage is Stage.SYSTEM1V2:
            self._timer.arm()
        logger.info("Stage %s -> %s", leaving.value, self.stage.value)
        return self.stage

    def _reject(self, message: str) -> None:
        if self.strict:
            raise InvalidTransitionError(message)
        logger.warning("Ignored invalid transition: %s", message)
        return None
