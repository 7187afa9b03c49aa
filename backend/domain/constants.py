"""
Game constants for Snake Arcade.
"""

# Board
GRID_SIZE = 20
INITIAL_LENGTH = 3

# Movement directions as (dx, dy) deltas. Screen coordinates: y grows downward.
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

DIRECTION_NAMES = {
    "UP": UP,
    "DOWN": DOWN,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
}

# Speed progression (milliseconds per tick). Lower = faster.
START_INTERVAL_MS = 120
SPEED_STEP_MS = 8
MIN_INTERVAL_MS = 40
SPEEDUP_EVERY = 5

# Game status values exposed on snapshots
STATUS_READY = "ready"
STATUS_RUNNING = "running"
STATUS_PAUSED = "paused"
STATUS_GAME_OVER = "game_over"
STATUS_WIN = "win"
TERMINAL_STATUSES = {STATUS_GAME_OVER, STATUS_WIN}

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
