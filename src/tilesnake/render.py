# render.py
"""Pixel projection of the board, the dialog overlay and the status bar."""
import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Protocol, Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    GRID_W, GRID_H, MAX_X, MAX_Y, BAR_ROWS,
    EMPTY_COLOR, SNAKE_COLOR, PELLET_COLOR, DEAD_COLOR,
    BAR_BG, BAR_TEXT, DIALOG_TEXT, DIALOG_EDGE,
)
from .grid import Cell, Grid, TileState

TILE_COLORS = {
    TileState.EMPTY: EMPTY_COLOR,
    TileState.SNAKE: SNAKE_COLOR,
    TileState.PELLET: PELLET_COLOR,
    TileState.DEAD: DEAD_COLOR,
}

DIALOG_FONT_PX = 35
DIALOG_HALF_PX = 40  # half the dialog height before rounding to tiles
DIALOG_MARGIN = 4  # tiles between the board edge and the dialog box


class Renderer(Protocol):
    def draw_board(self, grid: Grid) -> None: ...
    def draw_cells(self, grid: Grid, cells: Iterable[Cell]) -> None: ...
    def draw_status_bar(self, length: int) -> None: ...
    def draw_dialog(self, grid: Grid, text: Optional[str] = None) -> None: ...


@dataclass(frozen=True)
class Layout:
    tile_w: int
    tile_h: int
    width: int
    height: int

    @classmethod
    def for_size(cls, width: int, height: int) -> "Layout":
        """
        Derive tile size from a requested surface size. The board takes
        GRID_H rows and the status bar BAR_ROWS more; the width is snapped
        up to an exact multiple of the tile width.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        tile_w = math.ceil(width / GRID_W)
        tile_h = math.ceil(height / (GRID_H + BAR_ROWS))
        return cls(tile_w=tile_w, tile_h=tile_h, width=tile_w * GRID_W, height=height)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def bar_top(self) -> int:
        return self.tile_h * GRID_H

    @property
    def bar_height(self) -> int:
        return self.tile_h * BAR_ROWS

    @property
    def dialog_cols(self) -> Tuple[int, int]:
        return DIALOG_MARGIN, MAX_X - DIALOG_MARGIN

    @property
    def dialog_rows(self) -> Tuple[int, int]:
        mid = math.ceil(MAX_Y / 2)
        half = math.ceil(DIALOG_HALF_PX / self.tile_h)
        return max(mid - half + 1, 0), min(mid + half + 1, MAX_Y)

    def tile_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(x * self.tile_w, y * self.tile_h, self.tile_w, self.tile_h)


class PygameRenderer:
    def __init__(self, surface: pygame.Surface):
        if not isinstance(surface, pygame.Surface):
            raise TypeError(
                f"First argument must be a pygame.Surface, got {type(surface).__name__}"
            )
        layout = Layout.for_size(*surface.get_size())
        if layout.size != surface.get_size():
            raise ValueError(
                f"Surface width {surface.get_width()} is not a multiple of the "
                f"tile width {layout.tile_w}; size it with Layout.for_size() first"
            )

        self.surface = surface
        self.layout = layout

        # One pre-filled tile per state, blitted as-is
        self.tiles: Dict[TileState, pygame.Surface] = {}
        for state, color in TILE_COLORS.items():
            tile = pygame.Surface((layout.tile_w, layout.tile_h))
            tile.fill(color)
            self.tiles[state] = tile

        if not pygame.font.get_init():
            pygame.font.init()
        self.bar_font = pygame.font.Font(None, max(layout.bar_height - 20, 10))
        self.dialog_font = pygame.font.Font(None, DIALOG_FONT_PX)
        self.dialog_font.set_bold(True)

        self._bar_drawn = False
        self._bar_text_w = 0

    # ---------- Tiles ----------
    def draw_tile(self, grid: Grid, x: int, y: int) -> None:
        self.surface.blit(self.tiles[grid.get(x, y)], self.layout.tile_rect(x, y))

    def draw_cells(self, grid: Grid, cells: Iterable[Cell]) -> None:
        for x, y in cells:
            self.draw_tile(grid, x, y)

    def draw_board(self, grid: Grid) -> None:
        tiles = grid.snapshot()
        for (x, y), state in np.ndenumerate(tiles):
            self.surface.blit(self.tiles[TileState(int(state))], self.layout.tile_rect(int(x), int(y)))

    # ---------- Status bar ----------
    def draw_status_bar(self, length: int) -> None:
        lay = self.layout
        txt = self.bar_font.render(f"Length: {length}", True, BAR_TEXT)

        if not self._bar_drawn:
            pygame.draw.rect(self.surface, BAR_BG, (0, lay.bar_top, lay.width, lay.bar_height))
            self._bar_drawn = True
        else:
            # Only the text area can have changed
            cover = min(max(self._bar_text_w, txt.get_width()) + 20, lay.width)
            pygame.draw.rect(self.surface, BAR_BG, (0, lay.bar_top, cover, lay.bar_height))

        baseline = math.ceil(lay.height - lay.bar_height * 0.25)
        self.surface.blit(txt, (10, baseline - txt.get_height()))
        self._bar_text_w = txt.get_width()

    # ---------- Dialog ----------
    def dialog_rect(self) -> pygame.Rect:
        (x0, x1), (y0, y1) = self.layout.dialog_cols, self.layout.dialog_rows
        return self.layout.tile_rect(x0, y0).union(self.layout.tile_rect(x1, y1))

    def draw_dialog(self, grid: Grid, text: Optional[str] = None) -> None:
        """Restore the board under the dialog region, then draw `text` centered over it."""
        (x0, x1), (y0, y1) = self.layout.dialog_cols, self.layout.dialog_rows
        for x in range(x0, x1 + 1):
            for y in range(y0, y1 + 1):
                self.draw_tile(grid, x, y)

        if not text:
            return

        label = self._outlined(text)
        region = self.dialog_rect()
        max_w = self.layout.tile_w * (x1 - x0)
        if label.get_width() > max_w:
            scale = max_w / label.get_width()
            label = pygame.transform.smoothscale(
                label, (max_w, max(1, int(label.get_height() * scale)))
            )
        self.surface.blit(label, label.get_rect(center=region.center))

    def _outlined(self, text: str) -> pygame.Surface:
        fill = self.dialog_font.render(text, True, DIALOG_TEXT)
        edge = self.dialog_font.render(text, True, DIALOG_EDGE)
        w, h = fill.get_width() + 2, fill.get_height() + 2
        out = pygame.Surface((w, h), pygame.SRCALPHA)
        for dx, dy in ((0, 1), (2, 1), (1, 0), (1, 2)):
            out.blit(edge, (dx, dy))
        out.blit(fill, (1, 1))
        return out
