"""Game state bookkeeping for Coup: bank, coins and influence."""

import logging
from typing import Any, Dict, List, Optional
from .types import GamePhase, ResolutionObserver
from .player import CoupPlayer
from .config import GameConfig

logger = logging.getLogger(__name__)


class GameState:
    """Manages the current state of the game."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self.phase = GamePhase.WAITING_FOR_PLAYERS
        self.players: List[CoupPlayer] = []
        self.bank = config.bank_coins
        self.action_log: List[str] = []

    def add_player(self, player: CoupPlayer) -> None:
        """Add a player to the game."""
        if self.phase != GamePhase.WAITING_FOR_PLAYERS:
            raise ValueError("Cannot add players after game has started")

        if len(self.players) >= self.config.max_players:
            raise ValueError(f"Maximum {self.config.max_players} players allowed")

        if any(p.name == player.name for p in self.players):
            raise ValueError(f"Player name already taken: {player.name}")

        self.players.append(player)

    def get_active_players(self) -> List[CoupPlayer]:
        """Get all non-eliminated players."""
        return [p for p in self.players if not p.is_eliminated]

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.phase != GamePhase.WAITING_FOR_PLAYERS and len(self.get_active_players()) <= 1

    def get_winner(self) -> Optional[CoupPlayer]:
        """Get the winner if game is over."""
        active = self.get_active_players()
        return active[0] if self.is_game_over() and len(active) == 1 else None

    def log_action(self, message: str) -> None:
        """Log an action to the game log."""
        self.action_log.append(message)
        logger.info(message)


class CoupGame:
    """Owns the players and the bank and applies every coin and influence change.

    This is the only object that mutates ``CoupPlayer`` instances. Transfers
    are clamped to what the paying side holds, so neither the bank nor a
    player can go negative.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 observers: Optional[List[ResolutionObserver]] = None) -> None:
        self.config = config or GameConfig()
        self.state = GameState(self.config)
        self.observers: List[ResolutionObserver] = list(observers or [])

    @property
    def bank(self) -> int:
        return self.state.bank

    def add_player(self, name: str) -> CoupPlayer:
        """Add a player to the game."""
        player = CoupPlayer(name)
        self.state.add_player(player)
        return player

    def start_game(self) -> None:
        """Start the game, dealing starting coins from the bank and influence."""
        if len(self.state.players) < self.config.min_players:
            raise ValueError(f"Need at least {self.config.min_players} players to start")

        for player in self.state.players:
            self.award_coins(player, self.config.starting_coins)
            player.add_influence(self.config.starting_influence)

        self.state.phase = GamePhase.ACTIVE
        self.state.log_action("Game started")

    def pay_coins(self, player: CoupPlayer, amount: int) -> int:
        """Move up to ``amount`` coins from a player to the bank. Returns coins moved."""
        if amount < 0:
            raise ValueError("Cannot pay a negative amount")

        coins = min(amount, player.coins)
        player.spend_coins(coins)
        self.state.bank += coins
        logger.debug("%s paid %d coins to the bank (requested %d)", player.name, coins, amount)
        return coins

    def award_coins(self, player: CoupPlayer, amount: int) -> int:
        """Move up to ``amount`` coins from the bank to a player. Returns coins moved."""
        if amount < 0:
            raise ValueError("Cannot award a negative amount")

        coins = min(amount, self.state.bank)
        player.add_coins(coins)
        self.state.bank -= coins
        logger.debug("%s received %d coins from the bank (requested %d)", player.name, coins, amount)
        return coins

    def remove_influence(self, player: CoupPlayer) -> None:
        """Remove one influence from a player, eliminating them at zero."""
        if player.is_eliminated:
            logger.warning("%s is already eliminated, no influence to remove", player.name)
            return

        eliminated = player.remove_influence()
        self.state.log_action(f"{player.name} lost an influence")

        if eliminated:
            self._handle_elimination(player)

    def is_eliminated(self, player: CoupPlayer) -> bool:
        """Check whether a player is out of the game."""
        return player.is_eliminated

    def get_active_players(self) -> List[CoupPlayer]:
        """Get all non-eliminated players."""
        return self.state.get_active_players()

    def get_player(self, name: str) -> CoupPlayer:
        """Look up a seated player by name."""
        for player in self.state.players:
            if player.name == name:
                return player
        raise KeyError(name)

    def _handle_elimination(self, player: CoupPlayer) -> None:
        self.state.log_action(f"{player.name} lost the game")
        for observer in self.observers:
            observer.on_player_eliminated(player.name)

        if self.state.is_game_over():
            self.state.phase = GamePhase.FINISHED
            winner = self.state.get_winner()
            if winner:
                self.state.log_action(f"{winner.name} wins the game")

    def get_game_state(self) -> Dict[str, Any]:
        """Get current game state as dictionary."""
        winner = self.state.get_winner()
        return {
            'phase': self.state.phase.value,
            'bank': self.state.bank,
            'players': [
                {
                    'name': p.name,
                    'coins': p.coins,
                    'influence': p.influence,
                    'eliminated': p.is_eliminated
                }
                for p in self.state.players
            ],
            'winner': winner.name if winner else None,
            'action_log': self.state.action_log[-10:]  # Last 10 actions
        }
