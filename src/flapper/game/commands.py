"""Draw instructions handed to whatever surface rasterizes a frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, TypeAlias


@dataclass(slots=True, frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for variant in self.tuple():
            assert 0 <= variant <= 255, (
                f"Expected all color values to be between 0 and 255. Found {self.tuple()}"
            )

    def tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __iter__(self) -> Iterator[int]:
        return iter(self.tuple())


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
YELLOW = Color(255, 255, 0)
RED = Color(255, 0, 0)
NAVY = Color(0, 0, 128)


@dataclass(slots=True, frozen=True)
class SetGlyph:
    col: int
    row: int
    glyph: str
    fg: Color
    bg: Color


@dataclass(slots=True, frozen=True)
class PrintText:
    col: int
    row: int
    text: str


@dataclass(slots=True, frozen=True)
class ClearScreen:
    pass


@dataclass(slots=True, frozen=True)
class ClearBackground:
    color: Color


DrawCommand: TypeAlias = SetGlyph | PrintText | ClearScreen | ClearBackground


@dataclass
class RenderCommands:
    commands: list[DrawCommand] = field(default_factory=list)
    request_exit: bool = False

    def __iter__(self) -> Iterator[DrawCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def add(self, command: DrawCommand) -> None:
        self.commands.append(command)

    def of_type(self, kind: type) -> list[DrawCommand]:
        return [command for command in self.commands if isinstance(command, kind)]

    def texts(self) -> list[str]:
        return [command.text for command in self.commands if isinstance(command, PrintText)]
