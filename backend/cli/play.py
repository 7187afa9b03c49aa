"""
Terminal front-end: play Snake with curses.

Arrow keys / WASD move, P pauses, R restarts, T toggles wall wrapping,
Q or Esc quits. The board is redrawn whenever the scheduler hands over a
new snapshot.
"""

import curses
import os
import random
import sys
import time

# Ensure we can import the game modules from the project root
backend_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if backend_path not in sys.path:
    sys.path.insert(0, backend_path)

from config import GameSettings, load_settings  # noqa: E402
from controls import InputController  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from engine import GameEngine  # noqa: E402
from services.frame_renderer import status_text  # noqa: E402
from services.high_score_store import HighScoreStore  # noqa: E402
from services.tick_scheduler import TickScheduler  # noqa: E402

LOOP_SLEEP_SECONDS = 0.01
QUIT_KEYS = {ord("q"), ord("Q"), 27}
WRAP_KEYS = {ord("t"), ord("T")}

CURSES_KEY_NAMES = {
    curses.KEY_UP: "ArrowUp",
    curses.KEY_DOWN: "ArrowDown",
    curses.KEY_LEFT: "ArrowLeft",
    curses.KEY_RIGHT: "ArrowRight",
}


def key_name(code: int):
    """Translate a curses key code into the names used by controls.KEY_BINDINGS."""
    if code in CURSES_KEY_NAMES:
        return CURSES_KEY_NAMES[code]
    if 0 <= code < 256:
        return chr(code)
    return None


def required_size(grid_size: int):
    """(rows, cols) needed for the bordered board plus two HUD lines."""
    return grid_size + 4, grid_size * 2 + 2


def draw(stdscr, state: GameState, blink: bool) -> None:
    stdscr.erase()
    size = state.grid_size

    # curses raises on writes past the window edge, so never draw what does not fit
    rows, cols = stdscr.getmaxyx()
    need_rows, need_cols = required_size(size)
    if rows < need_rows or cols < need_cols:
        message = f"terminal too small (need {need_cols}x{need_rows})"
        if rows > 0 and cols > 1:
            stdscr.addstr(0, 0, message[:cols - 1])
        stdscr.refresh()
        return

    stdscr.addstr(0, 0, "+" + "--" * size + "+")
    for y in range(size):
        row = []
        for x in range(size):
            cell = (x, y)
            if cell == state.head:
                row.append("@@")
            elif cell in state.snake:
                row.append("[]")
            elif cell == state.food:
                row.append("()")
            else:
                row.append("  ")
        stdscr.addstr(y + 1, 0, "|" + "".join(row) + "|")
    stdscr.addstr(size + 1, 0, "+" + "--" * size + "+")

    high = f"High Score: {state.high_score}"
    attr = curses.A_BLINK | curses.A_BOLD if blink else curses.A_NORMAL
    stdscr.addstr(size + 2, 0, f"Score: {state.score}   ")
    stdscr.addstr(size + 2, 14, high, attr)
    wrap_text = f"Wrap: {'on' if state.wrap else 'off'}"
    if 32 + len(wrap_text) < cols:
        stdscr.addstr(size + 2, 32, wrap_text)
    # Last row: stay clear of the bottom-right cell
    stdscr.addstr(size + 3, 0, status_text(state)[:cols - 1])
    stdscr.refresh()


def _run(stdscr, settings: GameSettings, store: HighScoreStore) -> None:
    curses.curs_set(0)
    stdscr.nodelay(True)
    stdscr.keypad(True)

    engine = GameEngine(settings=settings, rng=random.Random(settings.seed), high_score=store.load())
    scheduler = TickScheduler(engine)
    controller = InputController(scheduler)

    blink_until = 0.0
    latest = {"state": engine.get_current_state()}

    def on_state(state: GameState):
        nonlocal blink_until
        latest["state"] = state
        # Flash the high score when beaten mid-run and again when it is saved
        if state.new_high_score or state.high_score_to_persist is not None:
            blink_until = time.monotonic() + 1.9

    scheduler.add_listener(store.record)
    scheduler.add_listener(on_state)

    while True:
        code = stdscr.getch()
        if code in QUIT_KEYS:
            break
        if code in WRAP_KEYS:
            settings.wrap = not settings.wrap
            latest["state"] = engine.get_current_state()
        elif code != -1:
            controller.handle_key(key_name(code))
            latest["state"] = engine.get_current_state()

        scheduler.run_pending()
        draw(stdscr, latest["state"], time.monotonic() < blink_until)
        time.sleep(LOOP_SLEEP_SECONDS)

    scheduler.stop()


def play(settings: GameSettings, store: HighScoreStore) -> None:
    """Run the interactive game until the player quits."""
    curses.wrapper(_run, settings, store)


if __name__ == "__main__":
    settings = load_settings()
    play(settings, HighScoreStore(settings.resolved_highscore_path))
