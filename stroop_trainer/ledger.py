"""Per-session statistics and the per-mode best-score table.

Everything here is a pure function over frozen data; the session owns the
only mutable references and swaps in the returned values.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .game_core import GameMode


@dataclass(frozen=True, slots=True)
class SessionStats:
    correct: int = 0
    total: int = 0
    reaction_times_ms: tuple[float, ...] = ()

    @property
    def incorrect(self) -> int:
        return self.total - self.correct

    @property
    def avg_reaction_time_ms(self) -> float | None:
        # Recomputed from the full list each time so it never drifts.
        rts = self.reaction_times_ms
        return None if not rts else sum(rts) / len(rts)


@dataclass(frozen=True, slots=True)
class BestRecord:
    score: int
    accuracy_pct: float | None
    avg_time_ms: float | None


@dataclass(frozen=True, slots=True)
class BestRecords:
    classic: BestRecord | None = None
    timed: BestRecord | None = None
    endless: BestRecord | None = None

    def get(self, mode: GameMode) -> BestRecord | None:
        return getattr(self, GameMode(mode).value)

    def with_record(self, mode: GameMode, record: BestRecord) -> BestRecords:
        return replace(self, **{GameMode(mode).value: record})

    def items(self) -> list[tuple[GameMode, BestRecord | None]]:
        return [(m, self.get(m)) for m in GameMode]


@dataclass(frozen=True, slots=True)
class RecordUpdate:
    records: BestRecords
    improved: bool
    record: BestRecord | None


def record_answer(stats: SessionStats, *, is_correct: bool, reaction_time_ms: float) -> SessionStats:
    """Return ``stats`` with one more observation appended."""

    if reaction_time_ms < 0:
        raise ValueError("reaction_time_ms must be >= 0")
    return SessionStats(
        correct=stats.correct + (1 if is_correct else 0),
        total=stats.total + 1,
        reaction_times_ms=(*stats.reaction_times_ms, float(reaction_time_ms)),
    )


def accuracy_pct(stats: SessionStats) -> float | None:
    """Percentage of correct answers, or None when nothing was answered."""

    if stats.total == 0:
        return None
    return stats.correct / stats.total * 100.0


def maybe_update_record(records: BestRecords, mode: GameMode, final_stats: SessionStats) -> RecordUpdate:
    """Replace the mode's best record only on a strictly higher score.

    An empty slot loses to any score, including zero. Ties keep the old record.
    """

    score = final_stats.correct
    current = records.get(mode)
    if current is not None and score <= current.score:
        return RecordUpdate(records=records, improved=False, record=current)

    record = BestRecord(
        score=score,
        accuracy_pct=accuracy_pct(final_stats),
        avg_time_ms=final_stats.avg_reaction_time_ms,
    )
    return RecordUpdate(records=records.with_record(mode, record), improved=True, record=record)
