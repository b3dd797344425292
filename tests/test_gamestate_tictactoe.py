import pytest

from tictactoe_mcts.mcts.gamestate_tictactoe import IllegalMoveError, TicTacToeState


def test_initial_state():
    state = TicTacToeState.initial()
    assert state.canonical_key() == "........."
    assert state.player1 == "x"
    assert state.player2 == "o"
    assert not state.is_terminal()
    assert len(state.legal_children()) == 9


@pytest.mark.parametrize(
    "position",
    [
        "xxx......",  # rows
        "...xxx...",
        "......xxx",
        "x..x..x..",  # columns
        ".o..o..o.",
        "..x..x..x",
        "x...x...x",  # diagonals
        "..o.o.o..",
    ],
)
def test_every_line_is_a_win(position):
    state = TicTacToeState.from_string(position)
    assert state.is_win()
    assert state.is_terminal()
    assert state.legal_children() == []


def test_full_board_without_line_is_a_draw():
    state = TicTacToeState.from_string("xoxxoxoxo")
    assert not state.is_win()
    assert state.is_draw()
    assert state.is_terminal()
    assert state.winner() is None
    assert state.legal_children() == []


def test_partial_board_is_not_terminal():
    state = TicTacToeState.from_string("xo.x.o...")
    assert not state.is_win()
    assert not state.is_draw()
    assert not state.is_terminal()


def test_winner_is_the_player_who_just_moved():
    state = TicTacToeState.initial()
    for row, col in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        state = state.make_move(row, col)
    assert state.canonical_key() == "xxxoo...."
    assert state.is_win()
    assert state.player2 == "x"
    assert state.winner() == "x"


@pytest.mark.parametrize("position", [".........", "x........", "xo.......", "xo.x.o...", "xoxxoo.xo"])
def test_children_match_empty_cells(position):
    state = TicTacToeState.from_string(position)
    children = state.legal_children()
    assert len(children) == position.count(".")

    for child in children:
        diff = [i for i, (a, b) in enumerate(zip(state.cells, child.cells)) if a != b]
        assert len(diff) == 1
        assert state.cells[diff[0]] == "."
        assert child.cells[diff[0]] == state.player1
        # the mover marker flips
        assert child.player1 == state.player2
        assert child.player2 == state.player1


def test_children_are_in_row_major_order():
    state = TicTacToeState.from_string("x...o....")
    moves = [TicTacToeState.move_between(state, child) for child in state.legal_children()]
    assert moves == state.empty_cells()
    assert moves == sorted(moves)


def test_make_move_does_not_mutate():
    state = TicTacToeState.initial()
    child = state.make_move(1, 1)
    assert state.canonical_key() == "........."
    assert child.canonical_key() == "....x...."
    assert child.player1 == "o"


def test_make_move_on_occupied_cell_raises():
    state = TicTacToeState.initial().make_move(0, 0)
    with pytest.raises(IllegalMoveError):
        state.make_move(0, 0)


@pytest.mark.parametrize("row, col", [(-1, 0), (3, 0), (0, 3), (5, 5)])
def test_make_move_off_board_raises(row, col):
    with pytest.raises(IllegalMoveError):
        TicTacToeState.initial().make_move(row, col)


def test_illegal_move_error_is_a_value_error():
    assert issubclass(IllegalMoveError, ValueError)


def test_canonical_key_is_stable():
    state = TicTacToeState.from_string("x...o...x")
    assert state.canonical_key() == state.canonical_key()

    # same cells reached through different move orders
    a = TicTacToeState.initial().make_move(0, 0).make_move(1, 1).make_move(2, 2)
    b = TicTacToeState.initial().make_move(2, 2).make_move(1, 1).make_move(0, 0)
    assert a.canonical_key() == b.canonical_key() == "x...o...x"
    assert a == b
    assert hash(a) == hash(b)


def test_from_string_infers_player_to_move():
    assert TicTacToeState.from_string("x........").player1 == "o"
    assert TicTacToeState.from_string("xo.......").player1 == "x"
    assert TicTacToeState.from_string("xx.......", player_to_move="o").player2 == "x"


@pytest.mark.parametrize("position", ["", "xx", "xxxxxxxxxx", "xx.a....."])
def test_from_string_rejects_invalid_positions(position):
    with pytest.raises(ValueError):
        TicTacToeState.from_string(position)


def test_move_between_requires_a_single_difference():
    state = TicTacToeState.initial()
    grandchild = state.make_move(0, 0).make_move(0, 1)
    assert TicTacToeState.move_between(state, state.make_move(2, 1)) == (2, 1)
    with pytest.raises(ValueError):
        TicTacToeState.move_between(state, grandchild)
