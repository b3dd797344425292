import pytest

from tictactoe_mcts.mcts.gamestate_tictactoe import TicTacToeState
from tictactoe_mcts.utils.board_utils import BoardUtils


def test_board_to_string_plain():
    state = TicTacToeState.from_string("x...o....")
    text = BoardUtils.board_to_string(state, colorize=False)
    assert '"x" to move:' in text
    assert text.endswith(" x . .\n . o .\n . . .\n")


def test_board_to_string_colorized_keeps_symbols():
    state = TicTacToeState.from_string("xo.......")
    text = BoardUtils.board_to_string(state, colorize=True)
    assert "x" in text and "o" in text
    assert "\x1b[" in text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1,1", (0, 0)),
        ("3,1", (0, 2)),
        ("1,3", (2, 0)),
        (" 2 , 3 ", (2, 1)),
    ],
)
def test_parse_move(text, expected):
    assert BoardUtils.parse_move(text) == expected


@pytest.mark.parametrize("text", ["", "1", "1,2,3", "a,b", "0,1", "4,2", "2,-1"])
def test_parse_move_rejects_malformed_input(text):
    with pytest.raises(ValueError):
        BoardUtils.parse_move(text)


def test_move_to_string_is_the_inverse_of_parse_move():
    for row in range(3):
        for col in range(3):
            assert BoardUtils.parse_move(BoardUtils.move_to_string((row, col))) == (row, col)
