"""
Tests for controls.py - key bindings and the input controller.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameSettings  # noqa: E402
from controls import PAUSE, RESTART, InputController, resolve_key  # noqa: E402
from domain.constants import DOWN, LEFT, RIGHT, UP  # noqa: E402
from engine import GameEngine  # noqa: E402
from services.tick_scheduler import TickScheduler  # noqa: E402


class FirstCellRng:
    def choice(self, seq):
        return seq[0]


@pytest.fixture
def controller():
    engine = GameEngine(settings=GameSettings(), rng=FirstCellRng())
    return InputController(TickScheduler(engine))


class TestResolveKey:
    @pytest.mark.parametrize("key,expected", [
        ("ArrowUp", UP), ("ArrowDown", DOWN), ("ArrowLeft", LEFT), ("ArrowRight", RIGHT),
        ("w", UP), ("S", DOWN), ("a", LEFT), ("D", RIGHT),
        ("p", PAUSE), ("P", PAUSE), ("r", RESTART), ("R", RESTART),
    ])
    def test_bindings(self, key, expected):
        assert resolve_key(key) == expected

    @pytest.mark.parametrize("key", [None, "", "x", "Enter", "arrowup"])
    def test_unbound_keys(self, key):
        assert resolve_key(key) is None


class TestInputController:
    def test_first_direction_starts_game(self, controller):
        assert controller.handle_key("ArrowUp") == "direction"

        assert controller.engine.running is True
        assert controller.scheduler.active is True
        assert controller.engine.pending_direction == UP

    def test_later_directions_only_queue(self, controller):
        controller.handle_key("w")
        controller.handle_key("a")
        assert controller.engine.pending_direction == LEFT
        assert len(controller.scheduler._scheduler.jobs) == 1

    def test_pause_key_toggles(self, controller):
        controller.handle_key("d")
        assert controller.handle_key("p") == PAUSE
        assert controller.engine.status == "paused"

        controller.handle_key("P")
        assert controller.engine.status == "running"

    def test_direction_resumes_paused_game(self, controller):
        controller.handle_key("d")
        controller.handle_key("p")
        controller.handle_key("s")
        assert controller.engine.running is True

    def test_restart_key(self, controller):
        controller.handle_key("d")
        controller.scheduler.step()

        assert controller.handle_key("r") == RESTART
        assert controller.engine.tick_number == 0
        assert controller.engine.status == "ready"
        assert controller.scheduler.active is False

    def test_directions_ignored_after_game_over(self, controller):
        engine = controller.engine
        for _ in range(10):
            engine.tick()
        assert engine.is_terminal

        controller.handle_key("w")
        assert engine.running is False
        assert engine.pending_direction is None
        assert controller.scheduler.active is False

    def test_unknown_key_ignored(self, controller):
        assert controller.handle_key("x") is None
        assert controller.engine.status == "ready"
