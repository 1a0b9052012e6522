from __future__ import annotations

from collections import deque
from typing import Iterator

from flapper.game.rng import RandomRange
from flapper.game.state import (GAP_MARGIN, GAP_SIZE_BASE, SCREEN_HEIGHT,
                                SCREEN_WIDTH, Obstacle, Player, gap_size_for)
from flapper.utilities.env import SpawnGapStrategy
from flapper.utilities.logging import get_logger

logger = get_logger(__name__)

MAX_SPAWN_SPACING = 20
MIN_SPAWN_SPACING = 10
SPAWN_SPACING_FLOOR = 1


def spawn_gap_bounds(score: int, strategy: SpawnGapStrategy) -> tuple[int, int]:
    """Return the ``[low, high)`` range of horizontal spacing for the next spawn."""

    low = min(MIN_SPAWN_SPACING, GAP_SIZE_BASE - score)
    if strategy == SpawnGapStrategy.CLAMP:
        low = max(SPAWN_SPACING_FLOOR, low)
    return low, MAX_SPAWN_SPACING


class ObstacleStream:
    """Obstacles ordered by ascending ``world_x``, nearest first."""

    def __init__(
        self,
        *,
        spawn_gap_strategy: SpawnGapStrategy = SpawnGapStrategy.CLAMP,
    ) -> None:
        self._obstacles: deque[Obstacle] = deque()
        self.spawn_gap_strategy = spawn_gap_strategy

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._obstacles)

    def __len__(self) -> int:
        return len(self._obstacles)

    def __getitem__(self, index: int) -> Obstacle:
        return self._obstacles[index]

    def clear(self) -> None:
        self._obstacles.clear()

    def append(self, obstacle: Obstacle) -> None:
        if self._obstacles and obstacle.world_x <= self._obstacles[-1].world_x:
            raise ValueError(
                f"Obstacle at {obstacle.world_x} must be ahead of {self._obstacles[-1].world_x}"
            )
        self._obstacles.append(obstacle)

    def evict_passed(self, player_x: int) -> bool:
        """Drop the front obstacle once the player is past it. At most one per call."""

        if self._obstacles and self._obstacles[0].world_x < player_x:
            passed = self._obstacles.popleft()
            logger.debug("Evicted obstacle at world_x=%d", passed.world_x)
            return True
        return False

    def spawn_ahead(self, player_x: int, score: int, rng: RandomRange) -> Obstacle | None:
        """Keep an obstacle queued within a screen width ahead. At most one per call."""

        horizon = player_x + SCREEN_WIDTH
        if not self._obstacles:
            world_x = horizon
        else:
            last = self._obstacles[-1]
            if not player_x <= last.world_x < horizon:
                return None
            low, high = spawn_gap_bounds(score, self.spawn_gap_strategy)
            world_x = max(horizon, last.world_x + rng.range(low, high))

        obstacle = Obstacle(
            world_x=world_x,
            gap_center_y=rng.range(GAP_MARGIN, SCREEN_HEIGHT - GAP_MARGIN),
            gap_size=gap_size_for(score),
        )
        self.append(obstacle)
        logger.debug(
            "Spawned obstacle at world_x=%d gap_center_y=%d gap_size=%d",
            obstacle.world_x,
            obstacle.gap_center_y,
            obstacle.gap_size,
        )
        return obstacle

    def hits(self, player: Player) -> bool:
        # Every obstacle is checked; simultaneous hits collapse into one.
        return any(obstacle.player_hit(player) for obstacle in self._obstacles)

    def visible(self, player_x: int) -> list[tuple[int, Obstacle]]:
        """Obstacles paired with their screen column, for columns in ``[0, SCREEN_WIDTH]``."""

        visible: list[tuple[int, Obstacle]] = []
        for obstacle in self._obstacles:
            screen_x = obstacle.world_x - player_x
            if 0 <= screen_x <= SCREEN_WIDTH:
                visible.append((screen_x, obstacle))
        return visible
