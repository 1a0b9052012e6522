from __future__ import annotations

import random
from typing import Protocol


class RandomRange(Protocol):
    def range(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from ``[low, high)``."""
        ...


class RandomNumberGenerator:
    """Session-owned generator backed by :class:`random.Random`."""

    def __init__(self, seed: int | None = None, *, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def range(self, low: int, high: int) -> int:
        if low >= high:
            raise ValueError(f"Random range requires low < high, got [{low}, {high})")
        return self._rng.randrange(low, high)
