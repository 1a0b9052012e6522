from __future__ import annotations

import pygame

from flapper.display.grid import BLANK, GlyphGrid
from flapper.utilities.env import Configuration
from flapper.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_TITLE = "Flapper"
FONT_NAME = "Courier New"


class PygamePresenter:
    """Draw a :class:`GlyphGrid` into a pygame window, one cell per glyph."""

    def __init__(self, cell_size: int | None = None) -> None:
        self.cell_size = cell_size or Configuration.cell_size()
        self.screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self._glyph_cache: dict[tuple[str, tuple[int, int, int]], pygame.Surface] = {}

    def initialize(self, width: int, height: int) -> None:
        pygame.init()
        size = (width * self.cell_size, height * self.cell_size)
        logger.info("Opening %dx%d window for a %dx%d grid", *size, width, height)
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_TITLE)
        self._font = pygame.font.SysFont(FONT_NAME, self.cell_size)

    def _glyph_surface(self, glyph: str, fg: tuple[int, int, int]) -> pygame.Surface:
        key = (glyph, fg)
        surface = self._glyph_cache.get(key)
        if surface is None:
            assert self._font is not None
            surface = self._font.render(glyph, True, fg)
            self._glyph_cache[key] = surface
        return surface

    def present(self, grid: GlyphGrid) -> None:
        if self.screen is None:
            raise RuntimeError("PygamePresenter.present called before initialize")

        cell = self.cell_size
        for row in range(grid.height):
            for col in range(grid.width):
                rect = pygame.Rect(col * cell, row * cell, cell, cell)
                self.screen.fill(tuple(int(c) for c in grid.background[row, col]), rect)
                glyph = str(grid.glyphs[row, col])
                if glyph == BLANK:
                    continue
                fg = tuple(int(c) for c in grid.foreground[row, col])
                self.screen.blit(self._glyph_surface(glyph, fg), rect)
        pygame.display.flip()

    def set_fps(self, fps: float) -> None:
        pygame.display.set_caption(f"{WINDOW_TITLE} ({fps:.0f} fps)")
