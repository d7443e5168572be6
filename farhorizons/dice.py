"""Seedable dice used by every random step of the game."""

from __future__ import annotations

import random


class Dice:
    """A reproducible source of die rolls."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def seed(self, seed: int | None) -> None:
        """Restart the sequence from the given seed."""
        self._rng.seed(seed)

    def roll(self, sides: int) -> int:
        """Roll a die with the given number of sides, giving 1 through sides."""
        if sides < 1:
            raise ValueError(f"a die needs at least one side, not {sides}")
        return self._rng.randint(1, sides)