# controls.py
"""Keyboard mapping and the anti-reversal direction queue."""
from collections import deque
from enum import Enum
from typing import Deque, Optional, Tuple

from .config import CFG


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def step(self, cell: Tuple[int, int]) -> Tuple[int, int]:
        return cell[0] + self.dx, cell[1] + self.dy


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.dx == -b.dx and a.dy == -b.dy


# Lower-cased key names: pygame.key.name() style and DOM KeyboardEvent.key style
KEY_TO_DIRECTION = {
    "up": Direction.UP,
    "arrowup": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "arrowdown": Direction.DOWN,
    "s": Direction.DOWN,
    "left": Direction.LEFT,
    "arrowleft": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "arrowright": Direction.RIGHT,
    "d": Direction.RIGHT,
}

CONFIRM_KEYS = frozenset({"return", "enter", "keypad enter"})


def direction_for_key(key: str) -> Optional[Direction]:
    """Map a key name to a direction, or None for a non-directional key."""
    return KEY_TO_DIRECTION.get(key.lower())


def is_confirm_key(key: str) -> bool:
    return key.lower() in CONFIRM_KEYS


class DirectionQueue:
    """
    FIFO of pending turns. A candidate is compared against the last queued
    direction (or the current one when nothing is queued) and dropped if it
    would reverse the snake onto itself.
    """

    def __init__(self, maxlen: int = CFG.queue_size):
        self.maxlen = maxlen
        self._pending: Deque[Direction] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def __iter__(self):
        return iter(self._pending)

    def preceding(self, current: Direction) -> Direction:
        return self._pending[-1] if self._pending else current

    def offer(self, direction: Direction, current: Direction) -> bool:
        """Enqueue `direction` unless it reverses the preceding one. Returns True if queued."""
        if len(self._pending) >= self.maxlen:
            return False
        if is_opposite(direction, self.preceding(current)):
            return False
        self._pending.append(direction)
        return True

    def pop(self) -> Optional[Direction]:
        """Take the oldest pending direction; None when empty."""
        if not self._pending:
            return None
        return self._pending.popleft()
