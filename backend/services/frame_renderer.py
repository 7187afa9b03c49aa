"""
Frame rendering for Snake Arcade snapshots.

Draws a GameState with Pillow:
- dark board with a subtle per-cell grid
- food square
- snake body, with the head in a distinct colour
- HUD strip under the board with score, high score and status
"""

import logging
import os
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.constants import STATUS_GAME_OVER, STATUS_PAUSED, STATUS_READY, STATUS_WIN
from domain.game_state import GameState

logger = logging.getLogger(__name__)

DEFAULT_CELL_SIZE = 24
HUD_HEIGHT = 28


class ColorScheme:
    """Colours of the browser version of the game"""

    BACKGROUND = "#071622"
    CELL = "#071a28"
    FOOD = "#ff6b6b"
    SNAKE_HEAD = "#7bed9f"
    SNAKE_BODY = "#2dd4bf"

    HUD_BACKGROUND = "#0b2233"
    HUD_TEXT = "#e5e7eb"
    HUD_HIGHLIGHT = "#facc15"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def status_text(state: GameState) -> str:
    """HUD status line, worded like the original on-page status."""
    if state.status == STATUS_WIN:
        return "You win! Board full."
    if state.status == STATUS_GAME_OVER:
        return f"Game Over - score {state.score}. Press R to play again."
    if state.status == STATUS_PAUSED:
        return "Paused"
    if state.status == STATUS_READY:
        return "Press Arrow keys or WASD to start"
    return "Running"


def render_frame(state: GameState, cell_size: int = DEFAULT_CELL_SIZE) -> Image.Image:
    """Render a single snapshot to an RGB image."""
    board_px = state.grid_size * cell_size
    img = Image.new('RGB', (board_px, board_px + HUD_HEIGHT), hex_to_rgb(ColorScheme.BACKGROUND))
    draw = ImageDraw.Draw(img)

    # Leaving a 1px gap per cell gives a crisp grid effect
    cell_color = hex_to_rgb(ColorScheme.CELL)
    for x in range(state.grid_size):
        for y in range(state.grid_size):
            px, py = x * cell_size, y * cell_size
            draw.rectangle([px + 1, py + 1, px + cell_size - 2, py + cell_size - 2], fill=cell_color)

    if state.food is not None:
        _fill_cell(draw, state.food, cell_size, ColorScheme.FOOD)

    # Tail first so the head is drawn on top
    for idx in range(len(state.snake) - 1, -1, -1):
        color = ColorScheme.SNAKE_HEAD if idx == 0 else ColorScheme.SNAKE_BODY
        _fill_cell(draw, state.snake[idx], cell_size, color)

    _draw_hud(draw, state, board_px)
    return img


def _fill_cell(draw: ImageDraw.ImageDraw, cell, cell_size: int, color: str) -> None:
    x, y = cell
    px, py = x * cell_size, y * cell_size
    draw.rectangle(
        [px + 2, py + 2, px + cell_size - 3, py + cell_size - 3],
        fill=hex_to_rgb(color),
    )


def score_color(state: GameState) -> str:
    """Highlight the score line on the tick a record falls and when it is saved."""
    if state.new_high_score or state.high_score_to_persist is not None:
        return ColorScheme.HUD_HIGHLIGHT
    return ColorScheme.HUD_TEXT


def _draw_hud(draw: ImageDraw.ImageDraw, state: GameState, board_px: int) -> None:
    font = ImageFont.load_default()
    draw.rectangle(
        [0, board_px, board_px, board_px + HUD_HEIGHT],
        fill=hex_to_rgb(ColorScheme.HUD_BACKGROUND),
    )

    score_line = f"Score: {state.score}  High Score: {state.high_score}"
    draw.text((6, board_px + 2), score_line, fill=hex_to_rgb(score_color(state)), font=font)
    draw.text((6, board_px + 14), status_text(state), fill=hex_to_rgb(ColorScheme.HUD_TEXT), font=font)


def save_frame(state: GameState, path: str, cell_size: int = DEFAULT_CELL_SIZE) -> str:
    """Render a snapshot and write it to `path` (format from the extension)."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    img = render_frame(state, cell_size=cell_size)
    img.save(path)
    logger.info("Saved frame for tick %s to %s", state.tick_number, path)
    return path
