# src/tilesnake/__init__.py
"""Single-player Snake on a pygame surface."""

from tilesnake.config import CFG, Config
from tilesnake.controls import Direction, DirectionQueue
from tilesnake.game import GameState, SnakeGame, Status, new_game_state, step_game
from tilesnake.grid import Grid, TileState

__all__ = [
    "CFG", "Config",
    "Direction", "DirectionQueue",
    "GameState", "SnakeGame", "Status", "new_game_state", "step_game",
    "Grid", "TileState",
]
