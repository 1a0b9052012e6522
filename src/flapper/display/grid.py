from __future__ import annotations

import numpy as np

from flapper.game.commands import (BLACK, WHITE, ClearBackground, ClearScreen,
                                   Color, PrintText, RenderCommands, SetGlyph)
from flapper.game.state import SCREEN_HEIGHT, SCREEN_WIDTH

BLANK = " "


class GlyphGrid:
    """Character cell surface that rasterizes :class:`RenderCommands`.

    Cells written outside the grid are dropped, matching a terminal that
    clips rather than scrolls.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Grid dimensions must be positive")
        self.width = width
        self.height = height
        self.glyphs = np.full((height, width), BLANK, dtype="<U1")
        self.foreground = np.zeros((height, width, 3), dtype=np.uint8)
        self.background = np.zeros((height, width, 3), dtype=np.uint8)
        self.clear(BLACK)

    def contains(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def clear(self, background: Color) -> None:
        self.glyphs.fill(BLANK)
        self.foreground[:, :] = WHITE.tuple()
        self.background[:, :] = background.tuple()

    def set(self, col: int, row: int, glyph: str, fg: Color, bg: Color) -> None:
        if not self.contains(col, row):
            return
        self.glyphs[row, col] = glyph
        self.foreground[row, col] = fg.tuple()
        self.background[row, col] = bg.tuple()

    def print(self, col: int, row: int, text: str) -> None:
        for offset, char in enumerate(text):
            self.set(col + offset, row, char, WHITE, BLACK)

    def apply(self, commands: RenderCommands) -> "GlyphGrid":
        for command in commands:
            match command:
                case ClearScreen():
                    self.clear(BLACK)
                case ClearBackground(color=color):
                    self.clear(color)
                case SetGlyph(col=col, row=row, glyph=glyph, fg=fg, bg=bg):
                    self.set(col, row, glyph, fg, bg)
                case PrintText(col=col, row=row, text=text):
                    self.print(col, row, text)
        return self

    def glyph_at(self, col: int, row: int) -> str:
        return str(self.glyphs[row, col])

    def row_text(self, row: int) -> str:
        return "".join(self.glyphs[row])

    def to_text(self) -> str:
        return "\n".join(self.row_text(row) for row in range(self.height))
