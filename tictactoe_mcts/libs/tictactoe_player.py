# stdlib imports
import random
from abc import ABC, abstractmethod

# local imports
from ..mcts.gamestate_tictactoe import TicTacToeState
from ..mcts.mcts import MCTS
from ..mcts.mcts_errors import TerminalStateError
from ..mcts.mcts_params import MCTSParams


class TicTacToePlayer(ABC):
    """
    Base class for move choosers.
    """

    name = "player"
    """Short label used in match reports."""

    @abstractmethod
    def choose(self, state: TicTacToeState) -> TicTacToeState:
        """Return the state after the chosen move. Raises TerminalStateError if the game is over."""
        pass


class MCTSPlayer(TicTacToePlayer):
    name = "mcts"

    def __init__(self, params: MCTSParams | None = None, verbose: bool = False):
        self._mcts = MCTS(params=params, verbose=verbose)

    @property
    def params(self) -> MCTSParams:
        return self._mcts.params

    def reseed(self, seed: int | None) -> None:
        self._mcts.reseed(seed)

    def choose(self, state: TicTacToeState) -> TicTacToeState:
        best_state = self._mcts.search(state)
        assert isinstance(best_state, TicTacToeState)
        return best_state


class RandomPlayer(TicTacToePlayer):
    name = "random"

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def choose(self, state: TicTacToeState) -> TicTacToeState:
        children = state.legal_children()
        if not children:
            raise TerminalStateError(f"No legal move from {state.canonical_key()!r}")
        return self._rng.choice(children)
