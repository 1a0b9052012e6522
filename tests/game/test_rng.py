import random

import pytest

from flapper.game.rng import RandomNumberGenerator


class TestRandomNumberGenerator:
    """Guard the generator contract the obstacle stream relies on."""

    @pytest.mark.parametrize(("low", "high"), [(5, 5), (6, 5), (0, -3)])
    def test_rejects_empty_range(self, low: int, high: int) -> None:
        """An empty range is a contract violation, not a silent fallback."""
        with pytest.raises(ValueError, match="low < high"):
            RandomNumberGenerator(1).range(low, high)

    def test_values_stay_in_half_open_range(self) -> None:
        """Draws include the lower bound and exclude the upper one."""
        rng = RandomNumberGenerator(3)

        values = {rng.range(10, 13) for _ in range(500)}

        assert values == {10, 11, 12}

    def test_seed_reproduces_sequence(self) -> None:
        """Equal seeds give equal sequences so sessions can be replayed."""
        first = RandomNumberGenerator(42)
        second = RandomNumberGenerator(42)

        assert [first.range(0, 100) for _ in range(20)] == [
            second.range(0, 100) for _ in range(20)
        ]

    def test_accepts_existing_generator(self) -> None:
        """A caller-supplied random.Random is used as is."""
        source = random.Random(9)
        rng = RandomNumberGenerator(rng=source)

        assert rng.rng is source
