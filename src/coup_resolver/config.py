"""
config.py
Defines the GameConfig dataclass, which centralizes the numeric rules of a Coup game.
Related modules:
- game.py: CoupGame uses GameConfig to size the bank and deal starting coins and influence.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """
    Centralizes the numeric constraints for a Coup game.
    Fields:
        bank_coins (int): Coins held by the bank before setup.
        starting_coins (int): Coins each player is awarded from the bank on start.
        starting_influence (int): Influences each player starts with.
        min_players (int): Players required to start a game.
        max_players (int): Upper bound on seated players.
    """
    bank_coins: int = 50
    starting_coins: int = 2
    starting_influence: int = 2
    min_players: int = 2
    max_players: int = 6

    def __post_init__(self) -> None:
        if self.bank_coins < 0 or self.starting_coins < 0:
            raise ValueError("Coin amounts cannot be negative")
        if self.starting_influence < 1:
            raise ValueError("Players must start with at least one influence")
        if not 2 <= self.min_players <= self.max_players:
            raise ValueError("Player bounds must satisfy 2 <= min_players <= max_players")
