"""
Runtime settings for Snake Arcade.

Values come from the environment (a local .env file is loaded first) and can
be overridden by CLI flags. `GameSettings.wrap` is read by the engine on every
tick, so front-ends may flip it mid-game the way the browser checkbox did.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_HIGHSCORE_PATH = os.path.join("~", ".snake_arcade", "highscore.json")
DEFAULT_LOG_LEVEL = "INFO"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class GameSettings:
    wrap: bool = False
    highscore_path: str = DEFAULT_HIGHSCORE_PATH
    log_level: str = DEFAULT_LOG_LEVEL
    seed: Optional[int] = None

    @property
    def resolved_highscore_path(self) -> str:
        return os.path.expanduser(self.highscore_path)


def parse_bool(name: str, raw: Optional[str], default: bool = False) -> bool:
    """Parse a boolean environment value; raises ValueError on junk."""
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name}={raw!r} is not a boolean (use true/false)")


def parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"SNAKE_SEED={raw!r} is not an integer") from None


def load_settings(use_dotenv: bool = True) -> GameSettings:
    """
    Build GameSettings from SNAKE_* environment variables.

    Args:
        use_dotenv: load a .env file from the working directory first

    Raises:
        ValueError: if a variable holds a malformed value
    """
    if use_dotenv:
        load_dotenv()

    return GameSettings(
        wrap=parse_bool("SNAKE_WRAP", os.getenv("SNAKE_WRAP")),
        highscore_path=os.getenv("SNAKE_HIGHSCORE_PATH") or DEFAULT_HIGHSCORE_PATH,
        log_level=(os.getenv("SNAKE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        seed=parse_seed(os.getenv("SNAKE_SEED")),
    )
