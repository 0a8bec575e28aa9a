from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .game_core import GameMode, GamePhase
from .ledger import accuracy_pct
from .round_generator import ColorName

if TYPE_CHECKING:
    from .session import StroopSession


@dataclass(frozen=True, slots=True)
class AnswerEvent:
    index: int
    word: ColorName
    color: ColorName
    response: ColorName
    is_correct: bool
    is_congruent: bool
    presented_at_s: float
    answered_at_s: float
    reaction_time_ms: float


@dataclass(frozen=True, slots=True)
class SessionResult:
    """Summary + event log for a finished session.

    Interference is the incongruent mean minus the congruent mean (the Stroop
    cost); it is None unless both kinds of trial were answered.
    """

    mode: GameMode
    seed: int

    attempted: int
    correct: int
    accuracy_pct: float | None
    mean_rt_ms: float | None
    median_rt_ms: float | None
    congruent_mean_rt_ms: float | None
    incongruent_mean_rt_ms: float | None
    interference_ms: float | None

    events: list[AnswerEvent]


def _mean(values: list[float]) -> float | None:
    return None if not values else sum(values) / len(values)


def _median(values: list[float]) -> float | None:
    if not values:
        return None
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 1:
        return float(ordered[mid])
    return (ordered[mid - 1] + ordered[mid]) / 2.0


def session_result_from_session(session: StroopSession) -> SessionResult:
    """Build a SessionResult from a finished StroopSession."""

    if session.phase is not GamePhase.FINISHED or session.mode is None:
        raise ValueError("session is not finished")

    stats = session.stats
    events = session.events()
    rts = list(stats.reaction_times_ms)
    congruent = [e.reaction_time_ms for e in events if e.is_congruent]
    incongruent = [e.reaction_time_ms for e in events if not e.is_congruent]

    congruent_mean = _mean(congruent)
    incongruent_mean = _mean(incongruent)
    interference = (
        None
        if congruent_mean is None or incongruent_mean is None
        else incongruent_mean - congruent_mean
    )

    return SessionResult(
        mode=session.mode,
        seed=int(session.seed),
        attempted=int(stats.total),
        correct=int(stats.correct),
        accuracy_pct=accuracy_pct(stats),
        mean_rt_ms=stats.avg_reaction_time_ms,
        median_rt_ms=_median(rts),
        congruent_mean_rt_ms=congruent_mean,
        incongruent_mean_rt_ms=incongruent_mean,
        interference_ms=interference,
        events=events,
    )
