"""
Tick scheduler: drives GameEngine.tick() at the engine's current speed.

Uses a private `schedule.Scheduler` holding a single job. After every tick the
job re-reads the engine interval and reschedules itself when the game sped up,
and cancels itself once the game reaches a terminal state. Tests call `step()`
to force a tick without waiting on the clock.
"""

import logging
import time
from typing import Callable, List, Optional

import schedule

from domain.game_state import GameState
from engine import GameEngine

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], object]

IDLE_SLEEP_CAP_SECONDS = 0.01


class TickScheduler:
    def __init__(self, engine: GameEngine, listeners: Optional[List[Listener]] = None):
        self.engine = engine
        self.listeners: List[Listener] = list(listeners or [])
        self._scheduler = schedule.Scheduler()
        self._job: Optional[schedule.Job] = None
        self._job_interval_ms: Optional[int] = None

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        """Register a callable receiving every snapshot (after ticks and resets)."""
        self.listeners.append(listener)

    def _notify(self, state: GameState) -> None:
        for listener in self.listeners:
            listener(state)

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    @property
    def active(self) -> bool:
        """True while a tick job is scheduled."""
        return self._job is not None

    @property
    def interval_ms(self) -> Optional[int]:
        return self._job_interval_ms

    def start(self) -> bool:
        """Start (or resume) ticking. Returns False if the game has already ended."""
        if not self.engine.start():
            return False
        if self._job is None:
            self._schedule_job()
        return True

    def pause(self) -> bool:
        """Stop ticking; the engine keeps its state exactly as it is."""
        if not self.engine.pause():
            return False
        self._cancel_job()
        self._notify(self.engine.get_current_state())
        return True

    def resume(self) -> bool:
        started = self.start()
        if started:
            self._notify(self.engine.get_current_state())
        return started

    def toggle_pause(self) -> bool:
        """Pause or resume; returns the engine's running flag afterwards."""
        if self.engine.is_terminal:
            return False
        if self.engine.running:
            self.pause()
        else:
            self.resume()
        return self.engine.running

    def restart(self) -> GameState:
        """Discard the current game and stop ticking until the next start."""
        self._cancel_job()
        state = self.engine.reset()
        self._notify(state)
        return state

    def stop(self) -> None:
        """Drop the tick job without touching the engine."""
        self._cancel_job()

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------

    def step(self) -> GameState:
        """Run one tick immediately, regardless of the clock."""
        return self._run_tick()

    def run_pending(self) -> None:
        """Run the tick job if it is due."""
        self._scheduler.run_pending()

    def run_forever(
        self,
        sleep: Callable[[float], None] = time.sleep,
        should_continue: Callable[[], bool] = lambda: True,
    ) -> GameState:
        """
        Blocking loop: tick at game speed until the game ends or the job is
        cancelled (pause) or `should_continue` returns False.
        """
        while self.active and should_continue():
            self._scheduler.run_pending()
            idle = self._scheduler.idle_seconds
            if idle is None:
                break
            sleep(max(0.0, min(idle, IDLE_SLEEP_CAP_SECONDS)))
        return self.engine.get_current_state()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _schedule_job(self) -> None:
        interval_ms = self.engine.interval_ms
        self._job = self._scheduler.every(interval_ms / 1000.0).seconds.do(self._run_tick)
        self._job_interval_ms = interval_ms
        logger.debug("Scheduled tick every %sms", interval_ms)

    def _cancel_job(self) -> None:
        if self._job is not None:
            self._scheduler.cancel_job(self._job)
        self._job = None
        self._job_interval_ms = None

    def _run_tick(self) -> GameState:
        state = self.engine.tick()
        self._notify(state)

        if state.is_terminal:
            logger.info("Stopping ticks: %s", state.status)
            self._cancel_job()
        elif self._job is not None and state.interval_ms != self._job_interval_ms:
            # Speed changes apply from the next scheduling cycle.
            self._cancel_job()
            self._schedule_job()

        return state
