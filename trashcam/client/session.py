# trashcam/client/session.py
import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence

from ..config import settings
from ..utils.scoring import Prediction, Verdict, evaluate_predictions

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    AWAITING_NAME = "awaiting_name"


class GameSession:
    """
    One player's run of the photo game.

    A passing photo moves the session to AWAITING_NAME; the UI then calls
    `submit_name` (or `cancel`). With a backend attached, every submit is
    posted to the server and the local board is replaced by the server's.
    """

    def __init__(self, backend=None, target_label: str = None, threshold: float = None):
        self.backend = backend
        self.target_label = target_label or settings.TARGET_LABEL
        self.threshold = settings.CONFIDENCE_THRESHOLD if threshold is None else threshold
        self.leaderboard: Dict[str, int] = {}
        self.state = SessionState.IDLE

    def evaluate(self, predictions: Sequence[Prediction]) -> Verdict:
        verdict = evaluate_predictions(predictions, self.target_label, self.threshold)
        logger.debug("detected %s (%.4f) passed=%s", verdict.label, verdict.confidence, verdict.passed)
        self.state = SessionState.AWAITING_NAME if verdict.passed else SessionState.IDLE
        return verdict

    def submit_name(self, name: Optional[str]) -> List[str]:
        if self.state is not SessionState.AWAITING_NAME:
            raise RuntimeError("no passing photo is waiting for a name")
        self.state = SessionState.IDLE
        name = (name or "").strip()
        if not name:
            return self.render()

        if self.backend is None:
            self.increment(name)
        else:
            # server first; a failed post leaves the local board untouched
            self.backend.add_points(name, 1)
            self.refresh()
        return self.render()

    def cancel(self):
        self.state = SessionState.IDLE

    def increment(self, name: str) -> int:
        self.leaderboard[name] = self.leaderboard.get(name, 0) + 1
        return self.leaderboard[name]

    def refresh(self):
        if self.backend is None:
            return
        rows = self.backend.get_leaderboard()
        self.leaderboard = {r["name"]: int(r["points"]) for r in rows}

    def render(self) -> List[str]:
        ranked = sorted(self.leaderboard.items(), key=lambda kv: kv[1], reverse=True)
        return [f"{name}: {points} points" for name, points in ranked]
