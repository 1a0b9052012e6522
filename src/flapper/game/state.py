from dataclasses import dataclass
from enum import StrEnum

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
FRAME_DURATION = 75.0

PLAYER_START_X = 5
PLAYER_START_Y = 25
GRAVITY = 1.0
TERMINAL_VELOCITY = 2.0
FLAP_VELOCITY = -2.0

MIN_GAP_SIZE = 2
GAP_SIZE_BASE = 20
GAP_MARGIN = 10


class GameMode(StrEnum):
    MENU = "menu"
    PLAYING = "playing"
    OVER = "over"


@dataclass
class Player:
    world_x: int = PLAYER_START_X
    y: int = PLAYER_START_Y
    velocity: float = 0.0

    def update(self) -> None:
        """Advance one physics step: gravity, fall, and a one column scroll."""

        if self.velocity < TERMINAL_VELOCITY:
            self.velocity += GRAVITY
        self.y += int(self.velocity)
        self.world_x += 1
        if self.y < 0:
            self.y = 0

    def flap(self) -> None:
        self.velocity = FLAP_VELOCITY


def gap_size_for(score: int) -> int:
    return max(MIN_GAP_SIZE, GAP_SIZE_BASE - score)


@dataclass(frozen=True, slots=True)
class Obstacle:
    world_x: int
    gap_center_y: int
    gap_size: int

    def __post_init__(self) -> None:
        assert self.gap_size >= MIN_GAP_SIZE, (
            f"Expected a gap of at least {MIN_GAP_SIZE} rows. Found {self.gap_size}"
        )

    def gap_bounds(self) -> tuple[int, int]:
        """Inclusive top and bottom rows of the passable gap."""

        half_size = self.gap_size // 2
        return self.gap_center_y - half_size, self.gap_center_y + half_size

    def blocks_row(self, row: int) -> bool:
        top, bottom = self.gap_bounds()
        return row < top or row > bottom

    def player_hit(self, player: Player) -> bool:
        return player.world_x == self.world_x and self.blocks_row(player.y)
