# config.py
from dataclasses import dataclass
from typing import Optional

# ----- Grid -----
MAX_X, MAX_Y = 35, 27
GRID_W, GRID_H = MAX_X + 1, MAX_Y + 1
BAR_ROWS = 2  # status bar height, in tile rows

# ----- Window -----
WIDTH, HEIGHT = 640, 480

# ----- Colors -----
EMPTY_COLOR  = (0, 0, 0)
SNAKE_COLOR  = (0, 128, 0)
PELLET_COLOR = (255, 0, 0)
DEAD_COLOR   = (0, 255, 0)
BAR_BG       = (0x33, 0x33, 0x33)
BAR_TEXT     = (255, 255, 255)
DIALOG_TEXT  = (211, 211, 211)
DIALOG_EDGE  = (0, 0, 0)

# ----- Dialog messages -----
MSG_BEGIN    = "Press an arrow key to begin..."
MSG_UNPAUSE  = "Press an arrow key to unpause..."
MSG_GAMEOVER = "Game Over. Press enter to start a new game..."
MSG_WIN      = "You filled the board! Press enter to start a new game..."

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = 70
    growth: int = 4
    queue_size: int = 3

CFG = Config()
