import os

from flapper.utilities.env.enums import SpawnGapStrategy
from flapper.utilities.env.parsing import _env_optional_int

DEFAULT_SPAWN_GAP_STRATEGY = SpawnGapStrategy.CLAMP


class GameConfiguration:
    @classmethod
    def seed(cls) -> int | None:
        return _env_optional_int("FLAPPER_SEED")

    @classmethod
    def spawn_gap_strategy(cls) -> SpawnGapStrategy:
        strategy = os.environ.get(
            "FLAPPER_SPAWN_GAP_STRATEGY", DEFAULT_SPAWN_GAP_STRATEGY.value
        ).strip().lower()
        try:
            return SpawnGapStrategy(strategy)
        except ValueError as exc:
            raise ValueError(
                "FLAPPER_SPAWN_GAP_STRATEGY must be 'clamp' or 'legacy'"
            ) from exc
