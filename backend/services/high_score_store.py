"""
High score persistence.

The game persists exactly one integer. It is kept as a small JSON document,
`{"high_score": 12}`, at a configurable path (SNAKE_HIGHSCORE_PATH).
"""

import json
import logging
import os
from typing import Optional

from domain.game_state import GameState

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "high_score"


class HighScoreStore:
    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def load(self) -> int:
        """
        Read the stored high score.

        A missing, unreadable or malformed file counts as 0 so a bad file never
        stops the game from starting.
        """
        if not os.path.exists(self.path):
            return 0

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read high score from %s: %s", self.path, e)
            return 0

        value = data.get(HIGH_SCORE_KEY) if isinstance(data, dict) else data
        if isinstance(value, bool) or not isinstance(value, int):
            logger.warning("Ignoring malformed high score in %s: %r", self.path, value)
            return 0

        return max(0, value)

    def save(self, value: int) -> None:
        """Write the high score, replacing the file in one step."""
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump({HIGH_SCORE_KEY: max(0, int(value))}, f)
        os.replace(tmp_path, self.path)
        logger.info("Saved high score %s to %s", value, self.path)

    def record(self, state: GameState) -> bool:
        """
        Persist the end-of-run high score carried by a snapshot, if any.

        Suitable as a TickScheduler listener. Returns True when something was saved.
        """
        value: Optional[int] = state.high_score_to_persist
        if value is None:
            return False
        if value <= self.load():
            return False
        self.save(value)
        return True
