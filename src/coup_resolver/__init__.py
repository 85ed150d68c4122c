"""Coup action resolution engine."""

__version__ = "0.1.0"

from .game import CoupGame
from .player import CoupPlayer
from .config import GameConfig
from .types import ActionType, CounterType, EntryType, Character, GamePhase
from .actions import ActionFactory, Declaration
from .mediator import ActionMediator, ResolutionError, EmptyChainError
from .reporter import OutcomeReporter, ResolutionRecord, RecordingObserver, LoggingObserver

__all__ = [
    "CoupGame",
    "CoupPlayer",
    "GameConfig",
    "ActionType",
    "CounterType",
    "EntryType",
    "Character",
    "GamePhase",
    "ActionFactory",
    "Declaration",
    "ActionMediator",
    "ResolutionError",
    "EmptyChainError",
    "OutcomeReporter",
    "ResolutionRecord",
    "RecordingObserver",
    "LoggingObserver",
]
