from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class GameState(ABC):
    """Abstract representation of a game state for a 2-player turn-based game."""

    player1: str
    """Symbol of the player to move next."""

    player2: str
    """Symbol of the other player, i.e. the one who made the previous move."""

    @abstractmethod
    def legal_children(self) -> List[GameState]:
        """Return the states reachable in one move. Empty for terminal states."""
        pass

    @abstractmethod
    def is_win(self) -> bool:
        """Return True if one of the players has won."""
        pass

    @abstractmethod
    def is_draw(self) -> bool:
        """Return True if the game ended without a winner."""
        pass

    def is_terminal(self) -> bool:
        """Return True if the game has ended."""
        return self.is_win() or self.is_draw()

    @abstractmethod
    def canonical_key(self) -> str:
        """Return a string key identifying the position, used to deduplicate children."""
        pass
