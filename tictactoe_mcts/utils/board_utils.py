# local imports
from ..mcts.gamestate_tictactoe import TicTacToeState
from .termcolor_utils import TermcolorUtils


class BoardUtils:
    """
    Console helpers for tic-tac-toe boards: rendering and parsing of human moves.
    """

    MOVE_FORMAT_HELP = "Move format [x,y]: 1,2 where 1 is column and 2 is row"

    @staticmethod
    def board_to_string(state: TicTacToeState, colorize: bool = True) -> str:
        """
        Render the board with a header naming the side to move.

        Args:
            state (TicTacToeState): The position to render.
            colorize (bool): If True, colour the symbols with colorama.
        Returns:
            str: Multi-line string, header then one line per row of ` x o .` cells.
        """
        header = f"\n--------------\n \"{state.player1}\" to move:\n--------------\n\n"

        lines = []
        for row in range(TicTacToeState.SIZE):
            cells = state.cells[row * TicTacToeState.SIZE : (row + 1) * TicTacToeState.SIZE]
            if colorize:
                cells = tuple(TermcolorUtils.symbol(cell) for cell in cells)
            lines.append("".join(f" {cell}" for cell in cells))

        return header + "\n".join(lines) + "\n"

    @staticmethod
    def parse_move(text: str) -> tuple[int, int]:
        """
        Parse a human move "col,row" (1-based) into a 0-based (row, col).

        Raises:
            ValueError: if the text is not two comma-separated integers in 1..3.
        """
        parts = [part.strip() for part in text.split(",")]
        if len(parts) != 2:
            raise ValueError(f"Expected 'col,row', got {text!r}")

        col = int(parts[0]) - 1
        row = int(parts[1]) - 1
        if not (0 <= row < TicTacToeState.SIZE and 0 <= col < TicTacToeState.SIZE):
            raise ValueError(f"Column and row must be between 1 and {TicTacToeState.SIZE}, got {text!r}")
        return row, col

    @staticmethod
    def move_to_string(move: tuple[int, int]) -> str:
        """Format a 0-based (row, col) back into the 1-based "col,row" input format."""
        row, col = move
        return f"{col + 1},{row + 1}"
