"""Type definitions for the Coup resolution engine."""

from enum import Enum
from typing import Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .reporter import ResolutionRecord


class Character(Enum):
    """Character types in Coup."""
    DUKE = "Duke"
    ASSASSIN = "Assassin"
    CAPTAIN = "Captain"
    CONTESSA = "Contessa"
    AMBASSADOR = "Ambassador"


class ActionType(Enum):
    """Types of actions available in the game."""
    INCOME = "Income"
    FOREIGN_AID = "Foreign Aid"
    COUP = "Coup"
    TAX = "Tax"
    ASSASSINATE = "Assassinate"
    EXCHANGE = "Exchange"
    STEAL = "Steal"


class CounterType(Enum):
    """Counter-actions (blocks) that nullify a preceding action."""
    COUNTER_FOREIGN_AID = "Counter Foreign Aid"
    COUNTER_ASSASSINATE = "Counter Assassinate"
    COUNTER_STEAL = "Counter Steal"


class EntryType(Enum):
    """Tag of a declaration on the pending chain."""
    ACTION = "Action"
    COUNTER_ACTION = "Counter Action"
    CHALLENGE = "Challenge"


class GamePhase(Enum):
    """Game phases."""
    WAITING_FOR_PLAYERS = "Waiting for Players"
    ACTIVE = "Active"
    FINISHED = "Finished"


class Player(Protocol):
    """Player interface."""
    name: str
    coins: int
    influence: int
    is_eliminated: bool


class ResolutionObserver(Protocol):
    """Observer interface for resolution events."""

    def on_step_resolved(self, record: 'ResolutionRecord') -> None:
        """Called once for every entry popped off the pending chain."""
        ...

    def on_round_aborted(self, reason: str) -> None:
        """Called when a resolution round cannot complete."""
        ...

    def on_player_eliminated(self, player: str) -> None:
        """Called when a player is eliminated."""
        ...
