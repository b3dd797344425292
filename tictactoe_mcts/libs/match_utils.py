# stdlib imports
import dataclasses

# pip imports
import numpy as np
from tqdm import tqdm

# local imports
from ..mcts.gamestate_tictactoe import TicTacToeState
from .tictactoe_player import TicTacToePlayer


@dataclasses.dataclass
class MatchReport:
    """
    Outcome counts of a series of games, seen from the evaluated player.
    """

    outcomes: np.ndarray
    """ One entry per game: 1 win, 0 draw, -1 loss. """

    @property
    def game_count(self) -> int:
        return int(self.outcomes.size)

    @property
    def win_count(self) -> int:
        return int(np.count_nonzero(self.outcomes == 1))

    @property
    def draw_count(self) -> int:
        return int(np.count_nonzero(self.outcomes == 0))

    @property
    def loss_count(self) -> int:
        return int(np.count_nonzero(self.outcomes == -1))

    def rates(self) -> dict[str, float]:
        if self.game_count == 0:
            return {"win": 0.0, "draw": 0.0, "loss": 0.0}
        return {
            "win": self.win_count / self.game_count,
            "draw": self.draw_count / self.game_count,
            "loss": self.loss_count / self.game_count,
        }

    def mean_outcome(self) -> float:
        return float(np.mean(self.outcomes)) if self.game_count > 0 else 0.0


class MatchUtils:
    @staticmethod
    def play_game(player_x: TicTacToePlayer, player_o: TicTacToePlayer, state: TicTacToeState | None = None) -> TicTacToeState:
        """
        Play a game to the end and return the final state.

        Args:
            player_x (TicTacToePlayer): Chooses the moves for 'x'.
            player_o (TicTacToePlayer): Chooses the moves for 'o'.
            state (TicTacToeState | None): Starting position, the empty board when None.
        """
        if state is None:
            state = TicTacToeState.initial()

        while not state.is_terminal():
            player = player_x if state.player1 == TicTacToeState.PLAYER_X else player_o
            state = player.choose(state)
        return state

    @staticmethod
    def evaluate(player: TicTacToePlayer, opponent: TicTacToePlayer, game_count: int, verbose: bool = True) -> MatchReport:
        """
        Play `game_count` games between `player` and `opponent`, alternating who plays 'x' (and so who starts).

        Returns:
            MatchReport: outcomes from `player`'s point of view.
        """
        outcomes = np.zeros(game_count, dtype=np.int8)
        for game_index in tqdm(range(game_count), ncols=80, desc="Playing", unit="games", disable=not verbose):
            player_symbol = TicTacToeState.PLAYER_X if game_index % 2 == 0 else TicTacToeState.PLAYER_O
            if player_symbol == TicTacToeState.PLAYER_X:
                final_state = MatchUtils.play_game(player, opponent)
            else:
                final_state = MatchUtils.play_game(opponent, player)

            winner = final_state.winner()
            if winner is None:
                outcomes[game_index] = 0
            elif winner == player_symbol:
                outcomes[game_index] = 1
            else:
                outcomes[game_index] = -1

        return MatchReport(outcomes=outcomes)
