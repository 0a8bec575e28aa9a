from __future__ import annotations

import pytest

from stroop_trainer.game_core import GameMode
from stroop_trainer.ledger import (
    BestRecord,
    BestRecords,
    SessionStats,
    accuracy_pct,
    maybe_update_record,
    record_answer,
)


def _stats(*answers: tuple[bool, float]) -> SessionStats:
    stats = SessionStats()
    for ok, rt in answers:
        stats = record_answer(stats, is_correct=ok, reaction_time_ms=rt)
    return stats


def test_record_answer_appends_one_observation() -> None:
    s0 = SessionStats()
    s1 = record_answer(s0, is_correct=True, reaction_time_ms=420.0)
    s2 = record_answer(s1, is_correct=False, reaction_time_ms=610.0)

    assert (s0.correct, s0.total, s0.reaction_times_ms) == (0, 0, ())
    assert (s1.correct, s1.total) == (1, 1)
    assert (s2.correct, s2.total, s2.incorrect) == (1, 2, 1)
    assert s2.reaction_times_ms == (420.0, 610.0)
    assert s2.total == len(s2.reaction_times_ms)


def test_average_is_fresh_arithmetic_mean() -> None:
    rts = [0.1, 0.2, 0.3, 1234.5678, 999.9, 17.0]
    stats = _stats(*[(True, rt) for rt in rts])

    assert stats.avg_reaction_time_ms == pytest.approx(sum(rts) / len(rts))
    assert SessionStats().avg_reaction_time_ms is None


def test_negative_reaction_time_is_rejected() -> None:
    with pytest.raises(ValueError):
        record_answer(SessionStats(), is_correct=True, reaction_time_ms=-1.0)


def test_accuracy_guards_empty_stats() -> None:
    assert accuracy_pct(SessionStats()) is None
    assert accuracy_pct(_stats((True, 1.0), (True, 1.0), (False, 1.0), (True, 1.0))) == pytest.approx(75.0)


def test_first_session_always_sets_record() -> None:
    stats = _stats((True, 500.0), (False, 700.0))
    update = maybe_update_record(BestRecords(), GameMode.CLASSIC, stats)

    assert update.improved is True
    assert update.records.classic == BestRecord(score=1, accuracy_pct=50.0, avg_time_ms=600.0)
    assert update.records.timed is None
    assert update.records.endless is None


def test_empty_session_sets_record_with_no_data_fields() -> None:
    update = maybe_update_record(BestRecords(), GameMode.TIMED, SessionStats())

    assert update.improved is True
    assert update.records.timed == BestRecord(score=0, accuracy_pct=None, avg_time_ms=None)


def test_ties_and_lower_scores_leave_record_untouched() -> None:
    best = BestRecords().with_record(GameMode.ENDLESS, BestRecord(score=2, accuracy_pct=100.0, avg_time_ms=300.0))

    tie = maybe_update_record(best, GameMode.ENDLESS, _stats((True, 900.0), (True, 900.0), (False, 1.0)))
    lower = maybe_update_record(best, GameMode.ENDLESS, _stats((True, 1.0)))

    assert tie.improved is False
    assert tie.records is best
    assert lower.improved is False
    assert lower.records.endless == BestRecord(score=2, accuracy_pct=100.0, avg_time_ms=300.0)


def test_record_scores_never_decrease() -> None:
    records = BestRecords()
    history: list[int] = []
    for correct in [3, 1, 5, 5, 2, 8, 0]:
        stats = _stats(*([(True, 100.0)] * correct), (False, 100.0))
        records = maybe_update_record(records, GameMode.CLASSIC, stats).records
        rec = records.get(GameMode.CLASSIC)
        assert rec is not None
        history.append(rec.score)

    assert history == [3, 3, 5, 5, 5, 8, 8]


def test_records_accept_mode_strings() -> None:
    records = BestRecords().with_record("timed", BestRecord(score=4, accuracy_pct=80.0, avg_time_ms=None))  # type: ignore[arg-type]
    assert records.get(GameMode.TIMED) is not None
    assert [m for m, _ in records.items()] == [GameMode.CLASSIC, GameMode.TIMED, GameMode.ENDLESS]
