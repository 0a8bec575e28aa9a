from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from .clock import Clock
from .game_core import Feedback, GameMode, GamePhase, SeededRng
from .ledger import (
    BestRecord,
    BestRecords,
    SessionStats,
    accuracy_pct,
    maybe_update_record,
    record_answer,
)
from .results import AnswerEvent
from .round_generator import ColorName, Round, RoundGenerator
from .scheduler import ClockScheduler, Scheduler, TimerHandle

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StroopConfig:
    classic_rounds: int = 20
    timed_duration_s: int = 60
    feedback_delay_s: float = 0.5
    tick_interval_s: float = 1.0

    def __post_init__(self) -> None:
        if self.classic_rounds < 1:
            raise ValueError("classic_rounds must be >= 1")
        if self.timed_duration_s < 1:
            raise ValueError("timed_duration_s must be >= 1")
        if self.feedback_delay_s < 0:
            raise ValueError("feedback_delay_s must be >= 0")
        if self.tick_interval_s <= 0:
            raise ValueError("tick_interval_s must be > 0")


class SessionEventKind(StrEnum):
    GAME_STARTED = "game_started"
    ROUND_DEALT = "round_dealt"
    ANSWER_SCORED = "answer_scored"
    TICK = "tick"
    GAME_FINISHED = "game_finished"
    NEW_RECORD = "new_record"
    RESET = "reset"


@dataclass(frozen=True, slots=True)
class SessionEvent:
    kind: SessionEventKind
    phase: GamePhase
    mode: GameMode | None


@dataclass(frozen=True, slots=True)
class NewRecord:
    mode: GameMode
    score: int
    record: BestRecord


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """View model for the UI (pure data)."""

    phase: GamePhase
    mode: GameMode | None
    round: Round | None
    stats: SessionStats
    rounds_left: int | None
    rounds_total: int | None
    time_left_s: int | None
    feedback: Feedback | None
    answer_locked: bool
    accuracy_pct: float | None
    best_records: BestRecords


class StroopSession:
    """Stroop game state machine: menu -> playing -> finished -> menu.

    - Deterministic: rounds come from an RNG seeded at construction.
    - Time is entirely via the injected Clock; deferred work (feedback delay,
      timed-mode countdown) goes through a scheduler pumped by ``update()``.
    - Best records live for the lifetime of the session object and survive
      restarts and returns to the menu.
    """

    def __init__(
        self,
        *,
        clock: Clock,
        seed: int,
        config: StroopConfig | None = None,
        scheduler: Scheduler | None = None,
        on_new_record: Callable[[NewRecord], None] | None = None,
    ) -> None:
        self._clock = clock
        self._config = StroopConfig() if config is None else config
        self._scheduler: Scheduler = ClockScheduler(clock) if scheduler is None else scheduler
        self._seed = int(seed)
        self._gen = RoundGenerator(SeededRng(self._seed), clock)
        self._on_new_record = on_new_record
        self._listeners: list[Callable[[SessionEvent], None]] = []

        self._phase = GamePhase.MENU
        self._mode: GameMode | None = None
        self._round: Round | None = None
        self._stats = SessionStats()
        self._events: list[AnswerEvent] = []
        self._final_accuracy_pct: float | None = None

        self._rounds_left: int | None = None
        self._time_left_s: int | None = None

        self._feedback: Feedback | None = None
        self._advance_timer: TimerHandle | None = None  # held == answer lock
        self._tick_timer: TimerHandle | None = None
        self._next_tick_at_s = 0.0

        self._records = BestRecords()

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def config(self) -> StroopConfig:
        return self._config

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def mode(self) -> GameMode | None:
        return self._mode

    @property
    def current_round(self) -> Round | None:
        return self._round

    @property
    def stats(self) -> SessionStats:
        return self._stats

    @property
    def rounds_left(self) -> int | None:
        return self._rounds_left

    @property
    def time_left_s(self) -> int | None:
        return self._time_left_s

    @property
    def feedback(self) -> Feedback | None:
        return self._feedback

    @property
    def answer_locked(self) -> bool:
        return self._advance_timer is not None

    @property
    def best_records(self) -> BestRecords:
        return self._records

    @property
    def final_accuracy_pct(self) -> float | None:
        """Accuracy frozen at the end of the last session (None = no data)."""
        return self._final_accuracy_pct

    def events(self) -> list[AnswerEvent]:
        return list(self._events)

    def add_listener(self, listener: Callable[[SessionEvent], None]) -> None:
        self._listeners.append(listener)

    def start_game(self, mode: GameMode | str) -> bool:
        """Begin a session in ``mode``. Ignored while a session is playing."""

        mode = GameMode(mode)
        if self._phase is GamePhase.PLAYING:
            return False

        self._cancel_timers()
        self._mode = mode
        self._stats = SessionStats()
        self._events = []
        self._feedback = None
        self._final_accuracy_pct = None
        self._rounds_left = self._config.classic_rounds if mode is GameMode.CLASSIC else None
        self._time_left_s = self._config.timed_duration_s if mode is GameMode.TIMED else None
        self._phase = GamePhase.PLAYING
        logger.debug("game started: mode=%s seed=%d", mode.value, self._seed)
        self._emit(SessionEventKind.GAME_STARTED)

        self._deal_new_round()
        if mode is GameMode.TIMED:
            self._next_tick_at_s = self._clock.now() + self._config.tick_interval_s
            self._tick_timer = self._scheduler.call_at(self._next_tick_at_s, self._on_tick)
        return True

    def submit_answer(self, color: ColorName | str) -> bool:
        """Answer the current round. Returns True if accepted."""

        response = ColorName(color)
        if self._phase is not GamePhase.PLAYING or self._round is None or self.answer_locked:
            return False

        current = self._round
        answered_at_s = self._clock.now()
        reaction_time_ms = max(0.0, (answered_at_s - current.started_at_s) * 1000.0)
        # Scored against the ink colour, never the word.
        is_correct = response == current.color

        self._stats = record_answer(self._stats, is_correct=is_correct, reaction_time_ms=reaction_time_ms)
        self._events.append(
            AnswerEvent(
                index=len(self._events),
                word=current.word,
                color=current.color,
                response=response,
                is_correct=is_correct,
                is_congruent=current.is_congruent,
                presented_at_s=current.started_at_s,
                answered_at_s=answered_at_s,
                reaction_time_ms=reaction_time_ms,
            )
        )
        self._feedback = Feedback.CORRECT if is_correct else Feedback.WRONG
        self._advance_timer = self._scheduler.call_later(self._config.feedback_delay_s, self._advance)
        self._emit(SessionEventKind.ANSWER_SCORED)
        return True

    def end_game(self) -> bool:
        """Finish the running session now (the only way out of endless mode)."""

        if self._phase is not GamePhase.PLAYING:
            return False
        self._finish()
        return True

    def reset_to_menu(self) -> None:
        self._cancel_timers()
        self._phase = GamePhase.MENU
        self._mode = None
        self._round = None
        self._feedback = None
        self._rounds_left = None
        self._time_left_s = None
        logger.debug("reset to menu")
        self._emit(SessionEventKind.RESET)

    def update(self) -> None:
        self._scheduler.run_due()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            phase=self._phase,
            mode=self._mode,
            round=self._round,
            stats=self._stats,
            rounds_left=self._rounds_left,
            rounds_total=self._config.classic_rounds if self._mode is GameMode.CLASSIC else None,
            time_left_s=self._time_left_s,
            feedback=self._feedback,
            answer_locked=self.answer_locked,
            accuracy_pct=accuracy_pct(self._stats),
            best_records=self._records,
        )

    def _deal_new_round(self) -> None:
        self._round = self._gen.next_round()
        self._emit(SessionEventKind.ROUND_DEALT)

    def _advance(self) -> None:
        self._advance_timer = None
        self._feedback = None
        if self._phase is not GamePhase.PLAYING:
            return

        if self._mode is GameMode.CLASSIC:
            assert self._rounds_left is not None
            if self._rounds_left <= 1:
                self._rounds_left = 0
                self._finish()
                return
            self._rounds_left -= 1

        self._deal_new_round()

    def _on_tick(self) -> None:
        self._tick_timer = None
        # Reads live phase/stats at fire time; a stale tick does nothing.
        if self._phase is not GamePhase.PLAYING or self._mode is not GameMode.TIMED:
            return
        assert self._time_left_s is not None

        self._time_left_s = max(0, self._time_left_s - 1)
        self._emit(SessionEventKind.TICK)
        if self._time_left_s == 0:
            self._finish()
            return

        # Absolute due times: late frames do not stretch the countdown.
        self._next_tick_at_s += self._config.tick_interval_s
        self._tick_timer = self._scheduler.call_at(self._next_tick_at_s, self._on_tick)

    def _finish(self) -> None:
        mode = self._mode
        assert mode is not None

        self._cancel_timers()
        self._feedback = None
        self._round = None
        self._phase = GamePhase.FINISHED
        self._final_accuracy_pct = accuracy_pct(self._stats)

        update = maybe_update_record(self._records, mode, self._stats)
        self._records = update.records
        logger.debug(
            "game finished: mode=%s correct=%d total=%d",
            mode.value,
            self._stats.correct,
            self._stats.total,
        )
        self._emit(SessionEventKind.GAME_FINISHED)

        if update.improved:
            assert update.record is not None
            logger.info("new %s record: %d", mode.value, update.record.score)
            self._emit(SessionEventKind.NEW_RECORD)
            if self._on_new_record is not None:
                self._on_new_record(NewRecord(mode=mode, score=update.record.score, record=update.record))

    def _cancel_timers(self) -> None:
        if self._advance_timer is not None:
            self._advance_timer.cancel()
            self._advance_timer = None
        if self._tick_timer is not None:
            self._tick_timer.cancel()
            self._tick_timer = None

    def _emit(self, kind: SessionEventKind) -> None:
        event = SessionEvent(kind=kind, phase=self._phase, mode=self._mode)
        for listener in list(self._listeners):
            listener(event)


def build_stroop_session(
    *,
    clock: Clock,
    seed: int,
    config: StroopConfig | None = None,
    on_new_record: Callable[[NewRecord], None] | None = None,
) -> StroopSession:
    return StroopSession(clock=clock, seed=seed, config=config, on_new_record=on_new_record)
