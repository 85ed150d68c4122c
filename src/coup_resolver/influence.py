"""Influence catalog: which character claims which action or block."""

from typing import FrozenSet, Set, Union
from .types import Character, ActionType, CounterType


class CharacterAbilities:
    """Defines what actions each character can perform or block."""

    _ABILITIES = {
        Character.DUKE: {
            'actions': {ActionType.TAX},
            'blocks': {CounterType.COUNTER_FOREIGN_AID}
        },
        Character.ASSASSIN: {
            'actions': {ActionType.ASSASSINATE},
            'blocks': set()
        },
        Character.CAPTAIN: {
            'actions': {ActionType.STEAL},
            'blocks': {CounterType.COUNTER_STEAL}
        },
        Character.CONTESSA: {
            'actions': set(),
            'blocks': {CounterType.COUNTER_ASSASSINATE}
        },
        Character.AMBASSADOR: {
            'actions': {ActionType.EXCHANGE},
            'blocks': {CounterType.COUNTER_STEAL}
        }
    }

    @classmethod
    def can_perform_action(cls, character: Character, action: ActionType) -> bool:
        """Check if a character can perform a specific action."""
        return action in cls._ABILITIES[character]['actions']

    @classmethod
    def can_block(cls, character: Character, counter: CounterType) -> bool:
        """Check if a character can declare a specific counter-action."""
        return counter in cls._ABILITIES[character]['blocks']

    @classmethod
    def get_actions(cls, character: Character) -> Set[ActionType]:
        """Get all actions a character can perform."""
        return cls._ABILITIES[character]['actions'].copy()

    @classmethod
    def get_blocks(cls, character: Character) -> Set[CounterType]:
        """Get all counter-actions a character can declare."""
        return cls._ABILITIES[character]['blocks'].copy()

    @classmethod
    def claimed_by(cls, kind: Union[ActionType, CounterType]) -> FrozenSet[Character]:
        """Characters whose influence a player claims by declaring ``kind``.

        An empty set means the declaration makes no claim and therefore
        cannot be challenged.
        """
        key = 'actions' if isinstance(kind, ActionType) else 'blocks'
        return frozenset(
            character for character, abilities in cls._ABILITIES.items()
            if kind in abilities[key]
        )
