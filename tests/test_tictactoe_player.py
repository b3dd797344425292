import pytest

from tictactoe_mcts.mcts.gamestate_tictactoe import TicTacToeState
from tictactoe_mcts.mcts.mcts_errors import TerminalStateError
from tictactoe_mcts.mcts.mcts_params import MCTSParams
from tictactoe_mcts.libs.tictactoe_player import MCTSPlayer, RandomPlayer, TicTacToePlayer
from tictactoe_mcts.libs.match_utils import MatchUtils


def test_random_player_picks_legal_children():
    player = RandomPlayer(seed=0)
    state = TicTacToeState.from_string("xo.x.o...")
    for _ in range(20):
        assert player.choose(state) in state.legal_children()


@pytest.mark.parametrize("player", [RandomPlayer(seed=0), MCTSPlayer(MCTSParams(iterations=10, seed=0))])
def test_players_reject_terminal_states(player):
    with pytest.raises(TerminalStateError):
        player.choose(TicTacToeState.from_string("xxxoo...."))


def test_mcts_player_takes_the_win():
    player = MCTSPlayer(MCTSParams(iterations=500, seed=4))
    state = TicTacToeState.from_string("xx.oo....")
    assert player.choose(state).is_win()


def test_play_game_reaches_a_terminal_state():
    final_state = MatchUtils.play_game(RandomPlayer(seed=1), RandomPlayer(seed=2))
    assert final_state.is_terminal()


def test_mcts_outplays_random_player():
    engine = MCTSPlayer(MCTSParams(iterations=400, seed=0))
    report = MatchUtils.evaluate(engine, RandomPlayer(seed=0), game_count=10, verbose=False)
    assert report.game_count == 10
    assert report.win_count + report.draw_count + report.loss_count == 10
    assert report.win_count > report.loss_count
    assert report.mean_outcome() > 0
    assert sum(report.rates().values()) == pytest.approx(1.0)


def test_player_base_class_is_abstract():
    with pytest.raises(TypeError):
        TicTacToePlayer()


def test_player_names():
    assert MCTSPlayer(MCTSParams(iterations=10)).name == "mcts"
    assert RandomPlayer().name == "random"
