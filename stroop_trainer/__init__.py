"""Stroop-effect reaction trainer: deterministic game core + pygame UI."""

from .game_core import Feedback, GameMode, GamePhase
from .ledger import BestRecord, BestRecords, SessionStats, accuracy_pct, maybe_update_record, record_answer
from .round_generator import COLORS, ColorName, Round, RoundGenerator
from .session import GameSnapshot, NewRecord, StroopConfig, StroopSession, build_stroop_session

__all__ = [
    "COLORS",
    "BestRecord",
    "BestRecords",
    "ColorName",
    "Feedback",
    "GameMode",
    "GamePhase",
    "GameSnapshot",
    "NewRecord",
    "Round",
    "RoundGenerator",
    "SessionStats",
    "StroopConfig",
    "StroopSession",
    "accuracy_pct",
    "build_stroop_session",
    "maybe_update_record",
    "record_answer",
]
