"""Player implementation for the Coup resolution engine."""


class CoupPlayer:
    """Represents a player in the Coup game.

    Coins and influence are only changed through ``CoupGame``, which keeps
    the bank balanced and tracks eliminations.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.coins = 0
        self.influence = 0
        self.is_eliminated = False

    def add_coins(self, amount: int) -> None:
        """Add coins to player's total."""
        self.coins += amount

    def spend_coins(self, amount: int) -> bool:
        """Spend coins. Returns True if player had enough coins."""
        if self.coins >= amount:
            self.coins -= amount
            return True
        return False

    def add_influence(self, amount: int) -> None:
        """Give the player additional influences."""
        self.influence += amount

    def remove_influence(self) -> bool:
        """Remove one influence. Returns True if the player was eliminated by it."""
        if self.influence == 0:
            return False
        self.influence -= 1
        if self.influence == 0:
            self.is_eliminated = True
        return self.is_eliminated

    def __str__(self) -> str:
        return f"{self.name} ({self.coins} coins, {self.influence} influence)"

    def __repr__(self) -> str:
        return f"CoupPlayer(name='{self.name}', coins={self.coins}, influence={self.influence})"
