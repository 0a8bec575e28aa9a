from __future__ import annotations

import random
from collections.abc import Sequence
from enum import StrEnum
from typing import TypeVar

T = TypeVar("T")


class GameMode(StrEnum):
    CLASSIC = "classic"
    TIMED = "timed"
    ENDLESS = "endless"


class GamePhase(StrEnum):
    MENU = "menu"
    PLAYING = "playing"
    FINISHED = "finished"


class Feedback(StrEnum):
    CORRECT = "correct"
    WRONG = "wrong"


class SeededRng:
    """Simple seeded RNG wrapper to keep deterministic streams explicit."""

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(int(seed))

    def random(self) -> float:
        """Uniform float in [0.0, 1.0)."""
        return self._rng.random()

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)
