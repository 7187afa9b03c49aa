"""
Keyboard bindings and the input controller.

Arrow keys and WASD map to directions, P toggles pause/resume, R restarts.
Key names follow the browser convention ("ArrowUp", "w", "P", ...) so every
front-end translates its own key codes into these names first.
"""

from typing import Optional

from domain.constants import DOWN, LEFT, RIGHT, UP
from services.tick_scheduler import TickScheduler

PAUSE = "pause"
RESTART = "restart"

KEY_BINDINGS = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
    "p": PAUSE,
    "r": RESTART,
}


def resolve_key(key: Optional[str]):
    """Return the direction or command bound to `key`, or None."""
    if not key:
        return None
    if key in KEY_BINDINGS:
        return KEY_BINDINGS[key]
    if len(key) == 1:
        return KEY_BINDINGS.get(key.lower())
    return None


class InputController:
    """
    Routes key presses to the scheduler and engine.

    The first movement key starts a fresh game; later ones only queue a
    direction for the next tick.
    """

    def __init__(self, scheduler: TickScheduler):
        self.scheduler = scheduler

    @property
    def engine(self):
        return self.scheduler.engine

    def handle_key(self, key: Optional[str]) -> Optional[str]:
        """
        Apply one key press.

        Returns:
            "direction", PAUSE or RESTART for handled keys, None otherwise.
        """
        action = resolve_key(key)
        if action is None:
            return None

        if action == PAUSE:
            self.scheduler.toggle_pause()
            return PAUSE

        if action == RESTART:
            self.scheduler.restart()
            return RESTART

        if not self.engine.running and not self.engine.is_terminal:
            self.scheduler.start()
        self.engine.queue_direction(action)
        return "direction"
