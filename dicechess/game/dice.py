"""Dice sources for the movement budget."""

from __future__ import annotations

import random
from typing import Iterable, Optional, Protocol

DICE_MIN = 1
DICE_MAX = 6


class DiceSource(Protocol):
    def roll(self) -> int:
        ...


class RandomDice:
    """Uniform d6 backed by ``random.Random``."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def roll(self) -> int:
        return self.rng.randint(DICE_MIN, DICE_MAX)


class SequenceDice:
    """Replays a fixed sequence of values, cycling when it runs out."""

    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        if not self.values:
            raise ValueError("SequenceDice needs at least one value")
        for v in self.values:
            if not DICE_MIN <= v <= DICE_MAX:
                raise ValueError(
                    f"Dice value {v} outside [{DICE_MIN}, {DICE_MAX}]"
                )
        self._index = 0

    def roll(self) -> int:
        value = self.values[self._index % len(self.values)]
        self._index += 1
        return value

    @property
    def rolls_made(self) -> int:
        return self._index
