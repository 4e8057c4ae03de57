# game.py
import logging
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, List, Optional

from .config import (
    CFG, Config,
    MSG_BEGIN, MSG_UNPAUSE, MSG_GAMEOVER, MSG_WIN,
)
from .controls import Direction, DirectionQueue, direction_for_key, is_confirm_key
from .grid import Cell, Grid, TileState
from .render import Renderer
from .timer import Scheduler, TickHandle

logger = logging.getLogger(__name__)

ORIGIN: Cell = (0, 0)
START_DIRECTION = Direction.RIGHT
PELLET_ATTEMPTS = 64  # random probes before falling back to the empty-cell set


class Status(Enum):
    PAUSED = "paused"
    UNPAUSED = "unpaused"
    GAME_OVER = "gameover"


# ---------- Helpers ----------
def spawn_pellet(grid: Grid, rng: random.Random, attempts: int = PELLET_ATTEMPTS) -> Optional[Cell]:
    """
    Place a pellet on a uniformly random empty cell and return it.
    Returns None when the board has no empty cell left.
    """
    for _ in range(attempts):
        x = rng.randrange(grid.width)
        y = rng.randrange(grid.height)
        if grid.get(x, y) == TileState.EMPTY:
            grid.set(x, y, TileState.PELLET)
            return (x, y)

    # Crowded board: sample the explicit empty set instead of looping on
    empty = grid.empty_cells()
    if not empty:
        return None
    x, y = rng.choice(empty)
    grid.set(x, y, TileState.PELLET)
    return (x, y)


# ---------- State ----------
@dataclass
class GameState:
    grid: Grid
    segments: Deque[Cell]          # tail at index 0, head at -1
    length: int                    # target length; may run ahead of len(segments)
    direction: Direction
    queue: DirectionQueue
    status: Status = Status.PAUSED
    pellet: Optional[Cell] = None

    @property
    def head(self) -> Cell:
        return self.segments[-1]

    @property
    def tail(self) -> Cell:
        return self.segments[0]


@dataclass
class TickOutcome:
    moved: bool = False
    ate: bool = False
    reason: Optional[str] = None   # "wall", "self" or "full" once the round has ended
    changed: List[Cell] = field(default_factory=list)

    @property
    def game_over(self) -> bool:
        return self.reason is not None


def new_game_state(rng: random.Random, config: Config = CFG) -> GameState:
    grid = Grid()
    grid.set(*ORIGIN, TileState.SNAKE)
    state = GameState(
        grid=grid,
        segments=deque([ORIGIN]),
        length=1,
        direction=START_DIRECTION,
        queue=DirectionQueue(config.queue_size),
    )
    state.pellet = spawn_pellet(grid, rng)
    return state


def end_game(state: GameState, reason: str) -> TickOutcome:
    """Crash: move to GAME_OVER and mark the head cell as dead."""
    state.status = Status.GAME_OVER
    state.grid.set(*state.head, TileState.DEAD)
    return TickOutcome(reason=reason, changed=[state.head])


# ---------- Update ----------
def step_game(state: GameState, rng: random.Random, config: Config = CFG) -> TickOutcome:
    """
    Advance the snake one cell. Does nothing unless the game is running.
    The returned outcome lists every cell whose tile changed.
    """
    if state.status is not Status.UNPAUSED:
        return TickOutcome()

    # At most one turn per tick
    turn = state.queue.pop()
    if turn is not None:
        state.direction = turn

    nx, ny = state.direction.step(state.head)

    # Wall collision
    if not state.grid.in_bounds(nx, ny):
        return end_game(state, "wall")

    target = state.grid.get(nx, ny)

    # Self collision (the tail has not moved yet, so it still counts)
    if target in (TileState.SNAKE, TileState.DEAD):
        return end_game(state, "self")

    outcome = TickOutcome(moved=True)
    outcome.ate = target == TileState.PELLET
    if outcome.ate:
        state.length += config.growth

    # Growth is realised by keeping the tail until segments catch up with length
    if len(state.segments) >= state.length:
        tx, ty = state.segments.popleft()
        state.grid.set(tx, ty, TileState.EMPTY)
        outcome.changed.append((tx, ty))

    state.segments.append((nx, ny))
    state.grid.set(nx, ny, TileState.SNAKE)
    outcome.changed.append((nx, ny))

    if outcome.ate:
        state.pellet = spawn_pellet(state.grid, rng)
        if state.pellet is None:
            # Nowhere left to put a pellet: the board is full
            state.status = Status.GAME_OVER
            outcome.reason = "full"
            return outcome
        outcome.changed.append(state.pellet)

    return outcome


# ---------- Controller ----------
class SnakeGame:
    """
    Owns the current GameState and the single tick handle, and pushes
    every change out to the renderer.
    """

    def __init__(
        self,
        renderer: Renderer,
        scheduler: Scheduler,
        config: Config = CFG,
        rng: Optional[random.Random] = None,
    ):
        self.renderer = renderer
        self.scheduler = scheduler
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self._tick: Optional[TickHandle] = None
        self.state: GameState
        self.reset()

    @property
    def status(self) -> Status:
        return self.state.status

    def _stop_timer(self) -> None:
        if self._tick is not None:
            self._tick.cancel()
            self._tick = None

    # ----- Transitions -----
    def reset(self) -> None:
        self._stop_timer()
        self.state = new_game_state(self.rng, self.config)
        self.renderer.draw_board(self.state.grid)
        self.renderer.draw_status_bar(self.state.length)
        self.renderer.draw_dialog(self.state.grid, MSG_BEGIN)
        logger.info(f"New round, pellet at {self.state.pellet}")

    def pause(self) -> None:
        if self.state.status is not Status.UNPAUSED:
            return
        self._stop_timer()
        self.state.status = Status.PAUSED
        self.renderer.draw_dialog(self.state.grid, MSG_UNPAUSE)
        logger.info("Paused")

    def unpause(self) -> None:
        if self.state.status is not Status.PAUSED:
            return
        self.renderer.draw_dialog(self.state.grid)
        self.state.status = Status.UNPAUSED
        self._stop_timer()
        self._tick = self.scheduler.schedule(self.config.tick_ms, self.tick)
        logger.info(f"Unpaused, ticking every {self.config.tick_ms}ms")

    def gameover(self, reason: str) -> None:
        if self.state.status is not Status.GAME_OVER:
            outcome = end_game(self.state, reason)
            self.renderer.draw_cells(self.state.grid, outcome.changed)
        self._stop_timer()
        self.renderer.draw_dialog(self.state.grid, MSG_WIN if reason == "full" else MSG_GAMEOVER)
        logger.info(f"Game over ({reason}) at length {self.state.length}")

    # ----- Loop -----
    def tick(self) -> TickOutcome:
        outcome = step_game(self.state, self.rng, self.config)
        self.renderer.draw_cells(self.state.grid, outcome.changed)
        if outcome.ate:
            self.renderer.draw_status_bar(self.state.length)
        if outcome.game_over:
            self.gameover(outcome.reason)
        elif outcome.moved:
            logger.debug(f"Head at {self.state.head}, length {self.state.length}")
        return outcome

    def handle_key(self, key: str, repeat: bool = False) -> None:
        """Route a key-down event. Auto-repeat events are ignored."""
        if repeat:
            return

        state = self.state
        if state.status is Status.GAME_OVER:
            if is_confirm_key(key):
                self.reset()
            return

        direction = direction_for_key(key)
        if direction is not None:
            state.queue.offer(direction, state.direction)

        if state.status is Status.UNPAUSED and direction is None:
            self.pause()
        elif state.status is not Status.UNPAUSED and direction is not None:
            self.unpause()
