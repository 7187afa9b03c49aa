import argparse
import json
import logging
import random
import time
from typing import Callable, Dict, Optional

from config import GameSettings, load_settings
from engine import GameEngine
from players import Player, RandomPlayer
from services.frame_renderer import save_frame
from services.high_score_store import HighScoreStore
from services.tick_scheduler import TickScheduler

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 2000


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def build_engine(settings: GameSettings, store: HighScoreStore) -> GameEngine:
    """Create an engine seeded from settings with the stored high score."""
    rng = random.Random(settings.seed)
    return GameEngine(settings=settings, rng=rng, high_score=store.load())


# -------------------------------
# Headless session
# -------------------------------

def run_session(
    engine: GameEngine,
    player: Player,
    store: Optional[HighScoreStore] = None,
    max_ticks: int = DEFAULT_MAX_TICKS,
    printer: Optional[Callable[[str], None]] = print,
    realtime: bool = False,
    sleep: Callable[[float], None] = time.sleep,
    scheduler: Optional[TickScheduler] = None,
) -> Dict:
    """
    Play one game with an automated player.

    Before every tick the player picks a direction from the latest snapshot.
    With `realtime` the ticks are paced by TickScheduler at game speed;
    otherwise they run back to back. A prepared `scheduler` for `engine` may be
    passed in; one is created otherwise.

    Returns:
        A dictionary summarizing the run.
    """
    if scheduler is None:
        scheduler = TickScheduler(engine)
    if store is not None:
        scheduler.add_listener(store.record)

    new_high_seen = False

    def feed_player(state):
        nonlocal new_high_seen
        new_high_seen = new_high_seen or state.new_high_score
        if printer is not None:
            printer(f"\nTick {state.tick_number} | score {state.score} | {state.status}")
            printer(state.print_board())
        if not state.is_terminal:
            engine.queue_direction(player.get_move(state))

    scheduler.add_listener(feed_player)

    engine.queue_direction(player.get_move(engine.get_current_state()))
    scheduler.start()

    if realtime:
        scheduler.run_forever(
            sleep=sleep,
            should_continue=lambda: engine.tick_number < max_ticks,
        )
    else:
        while not engine.is_terminal and engine.tick_number < max_ticks:
            scheduler.step()

    scheduler.stop()
    final = engine.get_current_state()

    if not final.is_terminal:
        logger.info("Stopped after %s ticks without a finish", final.tick_number)

    return {
        "score": final.score,
        "status": final.status,
        "death_reason": final.death_reason,
        "ticks": final.tick_number,
        "length": len(final.snake),
        "high_score": final.high_score,
        "new_high_score": new_high_seen,
    }


# -------------------------------
# Main Entry Point
# -------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal, or let a random autopilot play headless."
    )
    parser.add_argument("--autoplay", action="store_true",
                        help="Let the random autopilot play without a terminal UI")
    parser.add_argument("--wrap", action="store_true", default=None,
                        help="Wrap around the walls instead of dying on them")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the autopilot")
    parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS,
                        help="Stop an autoplay session after this many ticks")
    parser.add_argument("--realtime", action="store_true",
                        help="Pace autoplay ticks at game speed")
    parser.add_argument("--screenshot", type=str, default=None,
                        help="Save the final board as an image (e.g. final.png)")
    parser.add_argument("--highscore-path", type=str, default=None,
                        help="Where the high score is stored (overrides SNAKE_HIGHSCORE_PATH)")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the board every tick")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    settings = load_settings()
    if args.wrap is not None:
        settings.wrap = args.wrap
    if args.seed is not None:
        settings.seed = args.seed
    if args.highscore_path:
        settings.highscore_path = args.highscore_path

    configure_logging(settings.log_level)
    store = HighScoreStore(settings.resolved_highscore_path)

    if not args.autoplay:
        from cli.play import play
        play(settings, store)
        return None

    engine = build_engine(settings, store)
    player = RandomPlayer(rng=random.Random(settings.seed))

    result = run_session(
        engine,
        player,
        store=store,
        max_ticks=args.max_ticks,
        printer=None if args.quiet else print,
        realtime=args.realtime,
    )

    if args.screenshot:
        save_frame(engine.get_current_state(), args.screenshot)
        print(f"Saved final board to {args.screenshot}")

    print("\nSession Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
