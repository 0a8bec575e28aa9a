from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .clock import Clock
from .game_core import SeededRng


class ColorName(StrEnum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


# Answer button order (keys 1-4).
COLORS: tuple[ColorName, ...] = (
    ColorName.RED,
    ColorName.BLUE,
    ColorName.GREEN,
    ColorName.YELLOW,
)


@dataclass(frozen=True, slots=True)
class Round:
    word: ColorName  # what the text says
    color: ColorName  # ink colour; the correct answer
    started_at_s: float

    @property
    def is_congruent(self) -> bool:
        return self.word == self.color


class RoundGenerator:
    """Deals (word, ink colour) pairs with a soft bias against congruent trials.

    Both values are drawn uniformly and independently. On a collision the ink
    colour is redrawn only while a fresh coin flip comes up above 0.5, so a
    congruent pair survives roughly half the time and the retry chain ends with
    probability one. For four colours the congruent rate settles near 1/7
    instead of the independent 1/4.
    """

    def __init__(self, rng: SeededRng, clock: Clock) -> None:
        self._rng = rng
        self._clock = clock

    def next_round(self) -> Round:
        word = self._rng.choice(COLORS)
        color = self._rng.choice(COLORS)

        # Coin first: it is consumed even when there is no collision.
        while self._rng.random() > 0.5 and color == word:
            color = self._rng.choice(COLORS)

        return Round(word=word, color=color, started_at_s=self._clock.now())


def congruent_rate(rounds: Iterable[Round]) -> float | None:
    total = 0
    congruent = 0
    for r in rounds:
        total += 1
        if r.is_congruent:
            congruent += 1
    return None if total == 0 else congruent / total
