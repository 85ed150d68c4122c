"""Action catalog and declarations for the Coup resolution engine."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Union, TYPE_CHECKING
from .types import ActionType, CounterType, EntryType, Character
from .player import CoupPlayer
from .influence import CharacterAbilities

if TYPE_CHECKING:
    from .game import CoupGame


@dataclass
class ActionResult:
    """Effect of an executed action on the game."""
    success: bool
    message: str
    coins_gained: int = 0
    coins_lost: int = 0
    influence_lost: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ActionSpec:
    """Capability flags of an action kind."""
    action_type: ActionType
    required_coins: int = 0
    targetable: bool = False
    executable: bool = True
    counters: FrozenSet[CounterType] = frozenset()

    @property
    def payable(self) -> bool:
        return self.required_coins > 0

    @property
    def counterable(self) -> bool:
        return bool(self.counters)

    @property
    def challengeable(self) -> bool:
        return bool(CharacterAbilities.claimed_by(self.action_type))


@dataclass(frozen=True)
class CounterSpec:
    """Capability flags of a counter-action kind."""
    counter_type: CounterType
    blocks: ActionType
    disputable: bool = True

    @property
    def challengeable(self) -> bool:
        return self.disputable and bool(CharacterAbilities.claimed_by(self.counter_type))


ACTION_CATALOG: Dict[ActionType, ActionSpec] = {
    ActionType.INCOME: ActionSpec(ActionType.INCOME),
    ActionType.FOREIGN_AID: ActionSpec(
        ActionType.FOREIGN_AID,
        counters=frozenset({CounterType.COUNTER_FOREIGN_AID}),
    ),
    ActionType.COUP: ActionSpec(ActionType.COUP, required_coins=7, targetable=True),
    ActionType.TAX: ActionSpec(ActionType.TAX),
    ActionType.ASSASSINATE: ActionSpec(
        ActionType.ASSASSINATE,
        required_coins=3,
        targetable=True,
        counters=frozenset({CounterType.COUNTER_ASSASSINATE}),
    ),
    ActionType.STEAL: ActionSpec(
        ActionType.STEAL,
        targetable=True,
        counters=frozenset({CounterType.COUNTER_STEAL}),
    ),
    ActionType.EXCHANGE: ActionSpec(ActionType.EXCHANGE),
}

COUNTER_CATALOG: Dict[CounterType, CounterSpec] = {
    # Foreign Aid is not a character action, so blocking it cannot be disputed
    # even though Duke is listed as its blocker.
    CounterType.COUNTER_FOREIGN_AID: CounterSpec(
        CounterType.COUNTER_FOREIGN_AID, ActionType.FOREIGN_AID, disputable=False,
    ),
    CounterType.COUNTER_ASSASSINATE: CounterSpec(CounterType.COUNTER_ASSASSINATE, ActionType.ASSASSINATE),
    CounterType.COUNTER_STEAL: CounterSpec(CounterType.COUNTER_STEAL, ActionType.STEAL),
}


@dataclass(frozen=True)
class Declaration:
    """A declared intent waiting on the pending chain.

    ``entry_type`` tags the variant: an action carries an ``ActionType``,
    a counter-action a ``CounterType`` and a challenge no kind at all.
    Declarations are never mutated; resolution only reads them.
    """
    entry_type: EntryType
    dispatcher: CoupPlayer
    kind: Optional[Union[ActionType, CounterType]] = None
    target: Optional[CoupPlayer] = None

    def __post_init__(self) -> None:
        if self.entry_type == EntryType.ACTION:
            if not isinstance(self.kind, ActionType):
                raise ValueError(f"Action declarations need an ActionType, got {self.kind!r}")
            spec = ACTION_CATALOG[self.kind]
            if spec.targetable and self.target is None:
                raise ValueError(f"{self.kind.value} requires a target")
            if not spec.targetable and self.target is not None:
                raise ValueError(f"{self.kind.value} does not take a target")
        elif self.entry_type == EntryType.COUNTER_ACTION:
            if not isinstance(self.kind, CounterType):
                raise ValueError(f"Counter declarations need a CounterType, got {self.kind!r}")
            if self.target is not None:
                raise ValueError("Counter-actions target the entry they block, not a player")
        else:
            if self.kind is not None:
                raise ValueError("Challenges do not carry a kind")
            if self.target is None:
                raise ValueError("Challenge requires a target")

    @property
    def name(self) -> str:
        return self.kind.value if self.kind is not None else self.entry_type.value

    @property
    def required_coins(self) -> int:
        if self.entry_type == EntryType.ACTION:
            return ACTION_CATALOG[self.kind].required_coins
        return 0

    @property
    def executable(self) -> bool:
        return self.entry_type == EntryType.ACTION and ACTION_CATALOG[self.kind].executable

    @property
    def targetable(self) -> bool:
        return self.target is not None

    @property
    def counterable(self) -> bool:
        return self.entry_type == EntryType.ACTION and ACTION_CATALOG[self.kind].counterable

    @property
    def challengeable(self) -> bool:
        if self.entry_type == EntryType.ACTION:
            return ACTION_CATALOG[self.kind].challengeable
        if self.entry_type == EntryType.COUNTER_ACTION:
            return COUNTER_CATALOG[self.kind].challengeable
        return False

    @property
    def claimed_characters(self) -> FrozenSet[Character]:
        if self.kind is None:
            return frozenset()
        return CharacterAbilities.claimed_by(self.kind)


class ActionFactory:
    """Factory for creating declarations."""

    @classmethod
    def create_action(cls, action_type: ActionType, dispatcher: CoupPlayer,
                      target: Optional[CoupPlayer] = None) -> Declaration:
        """Create an action declaration of the specified type."""
        if action_type not in ACTION_CATALOG:
            raise ValueError(f"Unknown action type: {action_type}")
        return Declaration(EntryType.ACTION, dispatcher, action_type, target)

    @classmethod
    def create_counter(cls, counter_type: CounterType, dispatcher: CoupPlayer) -> Declaration:
        """Create a counter-action declaration blocking the entry below it."""
        if counter_type not in COUNTER_CATALOG:
            raise ValueError(f"Unknown counter type: {counter_type}")
        return Declaration(EntryType.COUNTER_ACTION, dispatcher, counter_type)

    @classmethod
    def create_challenge(cls, dispatcher: CoupPlayer, target: CoupPlayer) -> Declaration:
        """Create a challenge disputing the entry below it, declared by ``target``."""
        return Declaration(EntryType.CHALLENGE, dispatcher, target=target)

    @classmethod
    def counters_for(cls, action_type: ActionType) -> FrozenSet[CounterType]:
        """Get the counter-actions that can block an action type."""
        return ACTION_CATALOG[action_type].counters


class ActionEffects:
    """Applies the game-state effect of a successful action."""

    def __init__(self, game: 'CoupGame') -> None:
        self.game = game
        self._effects = {
            ActionType.INCOME: self.execute_income,
            ActionType.FOREIGN_AID: self.execute_foreign_aid,
            ActionType.COUP: self.execute_coup,
            ActionType.TAX: self.execute_tax,
            ActionType.ASSASSINATE: self.execute_assassinate,
            ActionType.STEAL: self.execute_steal,
            ActionType.EXCHANGE: self.execute_exchange,
        }

    def execute(self, entry: Declaration) -> ActionResult:
        """Execute an action declaration against the game."""
        if not entry.executable:
            raise ValueError(f"{entry.name} has no game-state effect to execute")
        return self._effects[entry.kind](entry)

    def execute_income(self, entry: Declaration) -> ActionResult:
        """Execute income action (gain 1 coin)."""
        gained = self.game.award_coins(entry.dispatcher, 1)
        return ActionResult(True, f"{entry.dispatcher.name} gained {gained} coin from income", coins_gained=gained)

    def execute_foreign_aid(self, entry: Declaration) -> ActionResult:
        """Execute foreign aid action (gain 2 coins)."""
        gained = self.game.award_coins(entry.dispatcher, 2)
        return ActionResult(True, f"{entry.dispatcher.name} gained {gained} coins from foreign aid",
                            coins_gained=gained)

    def execute_coup(self, entry: Declaration) -> ActionResult:
        """Execute coup action (pay 7 coins, target loses an influence)."""
        return self._pay_and_remove_influence(entry, "couped")

    def execute_tax(self, entry: Declaration) -> ActionResult:
        """Execute tax action (gain 3 coins)."""
        gained = self.game.award_coins(entry.dispatcher, 3)
        return ActionResult(True, f"{entry.dispatcher.name} gained {gained} coins from tax", coins_gained=gained)

    def execute_assassinate(self, entry: Declaration) -> ActionResult:
        """Execute assassinate action (pay 3 coins, target loses an influence)."""
        return self._pay_and_remove_influence(entry, "assassinated")

    def execute_steal(self, entry: Declaration) -> ActionResult:
        """Execute steal action. The target pays up to 2 coins, the bank awards up to 2."""
        self.game.pay_coins(entry.target, 2)
        gained = self.game.award_coins(entry.dispatcher, 2)
        return ActionResult(True, f"{entry.dispatcher.name} stole {gained} coins from {entry.target.name}",
                            coins_gained=gained)

    def execute_exchange(self, entry: Declaration) -> ActionResult:
        # Drawing from and returning to the court deck is done by the caller.
        return ActionResult(True, f"{entry.dispatcher.name} exchanged cards with the deck")

    def _pay_and_remove_influence(self, entry: Declaration, verb: str) -> ActionResult:
        paid = self.game.pay_coins(entry.dispatcher, entry.required_coins)
        self.game.remove_influence(entry.target)
        return ActionResult(True, f"{entry.dispatcher.name} {verb} {entry.target.name}",
                            coins_lost=paid, influence_lost=[entry.target.name])
