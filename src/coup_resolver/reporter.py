"""
Outcome reporting for resolution rounds.

``OutcomeReporter.describe`` turns a resolved declaration into a
``ResolutionRecord``. It reads nothing but its arguments, so the same
inputs always produce an equal record and tests can assert on records
directly. Observers decide what to do with records: keep them in memory
or forward them to a logger.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple
from .types import EntryType
from .actions import Declaration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionRecord:
    """What happened to one entry of the pending chain."""
    entry_type: EntryType
    kind: str
    dispatcher: str
    success: bool
    message: str
    target: Optional[str] = None
    claimed: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "entry_type": self.entry_type.value,
            "kind": self.kind,
            "dispatcher": self.dispatcher,
            "target": self.target,
            "success": self.success,
            "claimed": list(self.claimed),
            "message": self.message,
        }


class OutcomeReporter:
    """Describes resolution steps without touching any state."""

    @classmethod
    def describe(cls, entry: Declaration, success: bool,
                 gated: Optional[Declaration] = None) -> ResolutionRecord:
        """Build the record for ``entry`` resolved with ``success``.

        ``gated`` is the entry a challenge or counter-action sits on; its
        dispatcher is reported as their target.
        """
        if entry.entry_type == EntryType.ACTION:
            target = entry.target.name if entry.target is not None else None
            message = cls._action_message(entry, success, target)
        else:
            if gated is None:
                raise ValueError(f"{entry.name} must be described with the entry it gates")
            target = gated.dispatcher.name
            if entry.entry_type == EntryType.CHALLENGE:
                message = cls._challenge_message(entry, success, gated)
            else:
                message = cls._counter_message(entry, success, gated)

        return ResolutionRecord(
            entry_type=entry.entry_type,
            kind=entry.name,
            dispatcher=entry.dispatcher.name,
            success=success,
            message=message,
            target=target,
            claimed=tuple(sorted(c.value for c in entry.claimed_characters)),
        )

    @staticmethod
    def _action_message(entry: Declaration, success: bool, target: Optional[str]) -> str:
        verb = "successfully performed" if success else "failed to perform"
        message = f"{entry.dispatcher.name} {verb} {entry.name}"
        if target is not None:
            message += f" on {target}"
        return message

    @staticmethod
    def _challenge_message(entry: Declaration, success: bool, gated: Declaration) -> str:
        verb = "succeeded in challenging" if success else "failed to challenge"
        return f"{entry.dispatcher.name} {verb} {gated.dispatcher.name}'s {gated.name}"

    @staticmethod
    def _counter_message(entry: Declaration, success: bool, gated: Declaration) -> str:
        verb = "successfully blocked" if success else "was not able to block"
        return f"{entry.dispatcher.name} {verb} {gated.dispatcher.name}'s {gated.name} ({entry.name})"


def format_records(records: Iterable[ResolutionRecord]) -> str:
    """Join record messages for console printing, one step per line."""
    return "\n".join(record.message for record in records)


@dataclass
class RecordingObserver:
    """Keeps every resolution event in memory."""
    records: List[ResolutionRecord] = field(default_factory=list)
    eliminated: List[str] = field(default_factory=list)
    aborted: List[str] = field(default_factory=list)

    def on_step_resolved(self, record: ResolutionRecord) -> None:
        self.records.append(record)

    def on_round_aborted(self, reason: str) -> None:
        self.aborted.append(reason)

    def on_player_eliminated(self, player: str) -> None:
        self.eliminated.append(player)


class LoggingObserver:
    """Forwards resolution events to a ``logging`` logger."""

    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self.logger = log or logger
        self.level = level

    def on_step_resolved(self, record: ResolutionRecord) -> None:
        self.logger.log(self.level, "%s", record.message, extra={"resolution": record.to_dict()})

    def on_round_aborted(self, reason: str) -> None:
        self.logger.warning("Resolution round aborted: %s", reason)

    def on_player_eliminated(self, player: str) -> None:
        self.logger.log(self.level, "%s was eliminated", player)
