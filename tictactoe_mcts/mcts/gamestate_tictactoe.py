from __future__ import annotations
from typing import List, Optional, Tuple
from .gamestate_abc import GameState


class IllegalMoveError(ValueError):
    """Raised when a move targets an occupied or off-board cell."""

    pass


class TicTacToeState(GameState):
    """GameState for 3x3 tic-tac-toe. Instances are immutable value objects."""

    PLAYER_X = "x"
    PLAYER_O = "o"
    EMPTY = "."
    SIZE = 3

    # 3 rows, 3 columns, 2 diagonals as row-major cell indices
    LINES: Tuple[Tuple[int, int, int], ...] = (
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        (0, 4, 8),
        (2, 4, 6),
    )

    cells: Tuple[str, ...]
    """The 9 cell symbols in row-major order."""

    def __init__(self, cells: Tuple[str, ...], player1: str = PLAYER_X, player2: str = PLAYER_O):
        if len(cells) != TicTacToeState.SIZE * TicTacToeState.SIZE:
            raise ValueError(f"Expected 9 cells, got {len(cells)}")
        allowed = (TicTacToeState.PLAYER_X, TicTacToeState.PLAYER_O, TicTacToeState.EMPTY)
        for cell in cells:
            if cell not in allowed:
                raise ValueError(f"Invalid cell symbol {cell!r}, expected one of {allowed}")
        if {player1, player2} != {TicTacToeState.PLAYER_X, TicTacToeState.PLAYER_O}:
            raise ValueError(f"Invalid players ({player1!r}, {player2!r})")

        self.cells = tuple(cells)
        self.player1 = player1
        self.player2 = player2

    @classmethod
    def initial(cls) -> TicTacToeState:
        """Return the empty board with 'x' to move."""
        return cls((cls.EMPTY,) * (cls.SIZE * cls.SIZE), cls.PLAYER_X, cls.PLAYER_O)

    @classmethod
    def from_string(cls, position: str, player_to_move: Optional[str] = None) -> TicTacToeState:
        """
        Build a state from a 9-character row-major string such as "xx.oo....".

        When `player_to_move` is None it is inferred from the piece counts:
        'x' moves when both sides have the same number of pieces, 'o' otherwise.
        """
        cells = tuple(position)
        if player_to_move is None:
            x_count = cells.count(cls.PLAYER_X)
            o_count = cells.count(cls.PLAYER_O)
            player_to_move = cls.PLAYER_X if x_count == o_count else cls.PLAYER_O
        other = cls.PLAYER_O if player_to_move == cls.PLAYER_X else cls.PLAYER_X
        return cls(cells, player_to_move, other)

    # =============================================================================
    # moves
    # =============================================================================

    def make_move(self, row: int, col: int) -> TicTacToeState:
        """
        Return the state after `player1` plays at (row, col), 0-based.

        Raises:
            IllegalMoveError: if the cell is off-board or already occupied.
        """
        if not (0 <= row < TicTacToeState.SIZE and 0 <= col < TicTacToeState.SIZE):
            raise IllegalMoveError(f"Cell ({row}, {col}) is off the board")
        index = row * TicTacToeState.SIZE + col
        if self.cells[index] != TicTacToeState.EMPTY:
            raise IllegalMoveError(f"Cell ({row}, {col}) is already occupied by {self.cells[index]!r}")

        new_cells = list(self.cells)
        new_cells[index] = self.player1
        # swap the players: the mover becomes player2
        return TicTacToeState(tuple(new_cells), self.player2, self.player1)

    def empty_cells(self) -> List[Tuple[int, int]]:
        """Return the (row, col) of every empty cell in row-major order."""
        return [divmod(index, TicTacToeState.SIZE) for index, cell in enumerate(self.cells) if cell == TicTacToeState.EMPTY]

    def legal_children(self) -> List[TicTacToeState]:
        if self.is_win():
            return []
        return [self.make_move(row, col) for row, col in self.empty_cells()]

    @staticmethod
    def move_between(parent: TicTacToeState, child: TicTacToeState) -> Tuple[int, int]:
        """Return the (row, col) of the single cell that differs between `parent` and `child`."""
        diff = [index for index, (a, b) in enumerate(zip(parent.cells, child.cells)) if a != b]
        if len(diff) != 1:
            raise ValueError(f"States differ in {len(diff)} cells, expected exactly 1")
        row, col = divmod(diff[0], TicTacToeState.SIZE)
        return row, col

    # =============================================================================
    # terminal state queries
    # =============================================================================

    def is_win(self) -> bool:
        for a, b, c in TicTacToeState.LINES:
            if self.cells[a] != TicTacToeState.EMPTY and self.cells[a] == self.cells[b] == self.cells[c]:
                return True
        return False

    def is_draw(self) -> bool:
        return TicTacToeState.EMPTY not in self.cells

    def winner(self) -> Optional[str]:
        """Return the winning symbol, or None. The winner always made the last move, so it sits in `player2`."""
        return self.player2 if self.is_win() else None

    # =============================================================================
    # identity
    # =============================================================================

    def canonical_key(self) -> str:
        return "".join(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TicTacToeState):
            return NotImplemented
        return self.cells == other.cells and self.player1 == other.player1

    def __hash__(self) -> int:
        return hash((self.cells, self.player1))

    def __repr__(self) -> str:
        return f"TicTacToeState({self.canonical_key()!r}, player1={self.player1!r})"

    def __str__(self) -> str:
        rows = [" ".join(self.cells[row * 3 : row * 3 + 3]) for row in range(TicTacToeState.SIZE)]
        return "\n".join(rows)
