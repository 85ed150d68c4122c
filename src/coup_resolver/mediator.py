"""
Mediator that resolves declared actions, blocks and challenges.

Declarations are pushed onto a pending chain and resolved last-in,
first-out. A challenge or counter-action exists only to decide the entry
beneath it, so resolving one also consumes that entry and resolves it with
the opposite outcome. A challenge against a block therefore decides the
block, and the block decides the original action.

Drivers push entries with ``declare`` and finish the round with exactly
one call to ``resolve_as_success`` or ``resolve_as_failure``; the outcome
passed there only applies to the top-most entry.
"""

import logging
from typing import List, Optional, Tuple
from .types import EntryType, ResolutionObserver
from .actions import ActionEffects, Declaration
from .game import CoupGame
from .reporter import OutcomeReporter, ResolutionRecord

logger = logging.getLogger(__name__)


class ResolutionError(Exception):
    """
    Base class for failures while resolving the pending chain.
    """
    pass


class EmptyChainError(ResolutionError):
    """
    Raised when a resolution step needs an entry but the chain is empty.
    """
    pass


class ActionMediator:
    """Pending chain of declarations and the rules for unwinding it."""

    def __init__(self, observers: Optional[List[ResolutionObserver]] = None) -> None:
        self._chain: List[Declaration] = []
        self.observers: List[ResolutionObserver] = list(observers or [])

    def declare(self, entry: Declaration) -> None:
        """Push a declaration onto the chain. Nothing is resolved."""
        self._chain.append(entry)
        logger.debug("Declared %s by %s (%d pending)", entry.name, entry.dispatcher.name, len(self._chain))

    def resolve_as_success(self, game: CoupGame) -> List[ResolutionRecord]:
        """Resolve the chain with the top-most entry succeeding."""
        return self._resolve(game, True)

    def resolve_as_failure(self, game: CoupGame) -> List[ResolutionRecord]:
        """Resolve the chain with the top-most entry failing."""
        return self._resolve(game, False)

    @property
    def pending(self) -> Tuple[Declaration, ...]:
        """Snapshot of the chain, bottom entry first."""
        return tuple(self._chain)

    def clear(self) -> None:
        """Drop every pending declaration without resolving it."""
        self._chain.clear()

    def __len__(self) -> int:
        return len(self._chain)

    def _resolve(self, game: CoupGame, success: bool) -> List[ResolutionRecord]:
        if not self._chain:
            raise EmptyChainError("No pending declarations to resolve")

        effects = ActionEffects(game)
        records: List[ResolutionRecord] = []
        entry = self._chain.pop()
        outcome = success

        try:
            while True:
                if entry.entry_type == EntryType.ACTION:
                    records.append(self._resolve_action(entry, outcome, effects))
                    break

                gated = self._pop_gated(entry)
                if entry.entry_type == EntryType.CHALLENGE:
                    self._apply_challenge(entry, gated, outcome, game)
                records.append(self._report(entry, outcome, gated))

                entry, outcome = gated, not outcome
        except EmptyChainError as exc:
            for observer in self.observers:
                observer.on_round_aborted(str(exc))
            raise

        if self._chain:
            logger.warning("Discarding %d declarations left beneath %s",
                           len(self._chain), entry.name)
            self._chain.clear()

        return records

    def _resolve_action(self, entry: Declaration, success: bool,
                        effects: ActionEffects) -> ResolutionRecord:
        if success and entry.executable:
            result = effects.execute(entry)
            logger.debug(result.message)
        return self._report(entry, success)

    def _pop_gated(self, entry: Declaration) -> Declaration:
        if not self._chain:
            raise EmptyChainError(f"{entry.name} by {entry.dispatcher.name} has no declaration beneath it")
        return self._chain.pop()

    @staticmethod
    def _apply_challenge(challenge: Declaration, disputed: Declaration,
                         success: bool, game: CoupGame) -> None:
        if challenge.target is not disputed.dispatcher:
            logger.warning("%s challenged %s, but the disputed %s was declared by %s",
                           challenge.dispatcher.name, challenge.target.name,
                           disputed.name, disputed.dispatcher.name)

        if success:
            game.remove_influence(disputed.dispatcher)
        else:
            game.remove_influence(challenge.dispatcher)

    def _report(self, entry: Declaration, success: bool,
                gated: Optional[Declaration] = None) -> ResolutionRecord:
        record = OutcomeReporter.describe(entry, success, gated)
        logger.debug("Resolved %s", record.to_dict())
        for observer in self.observers:
            observer.on_step_resolved(record)
        return record
