#!/usr/bin/env python3

# stdlib imports
import argparse
import time

# pip imports
import dotenv

# local imports
from tictactoe_mcts.mcts.gamestate_tictactoe import TicTacToeState
from tictactoe_mcts.mcts.mcts_params import MCTSParams
from tictactoe_mcts.libs.tictactoe_player import MCTSPlayer
from tictactoe_mcts.utils.board_utils import BoardUtils
from tictactoe_mcts.utils.termcolor_utils import TermcolorUtils

# Init dotenv to load environment variables from .env file
dotenv.load_dotenv()


class PlayCommand:

    ###############################################################################
    ###############################################################################
    # 	 Play a game of tic-tac-toe between a human and the MCTS engine.
    ###############################################################################
    ###############################################################################

    @staticmethod
    def play_game(params: MCTSParams, engine_first: bool = False, verbose: bool = False) -> TicTacToeState:
        """
        Run the read-eval-print loop until the game ends or the human types "exit".

        Args:
            params (MCTSParams): Engine parameters.
            engine_first (bool): If True, the engine plays 'x' and moves first.
            verbose (bool): If True, prints the engine's root statistics and timing.
        Returns:
            TicTacToeState: The last position reached.
        """
        state = TicTacToeState.initial()
        engine = MCTSPlayer(params=params, verbose=verbose)

        print("\n  Tic Tac Toe - MCTS\n")
        print('  Type "exit" to quit the game')
        print(f"  {BoardUtils.MOVE_FORMAT_HELP}")
        print(BoardUtils.board_to_string(state))

        if engine_first:
            state = PlayCommand._engine_move(engine, state, verbose)
            print(BoardUtils.board_to_string(state))

        while True:
            user_input = input("> ").strip()

            if user_input == "exit":
                break

            if user_input == "":
                continue

            ###############################################################################
            #   Human move
            #
            try:
                row, col = BoardUtils.parse_move(user_input)
                state = state.make_move(row, col)
            except ValueError as error:
                print(f"  Error: {TermcolorUtils.red(error)}")
                print("  Illegal command!")
                print(f"  {BoardUtils.MOVE_FORMAT_HELP}")
                continue

            print(BoardUtils.board_to_string(state))
            if PlayCommand._is_game_over(state):
                break

            ###############################################################################
            #   Engine move
            #
            state = PlayCommand._engine_move(engine, state, verbose)
            print(BoardUtils.board_to_string(state))
            if PlayCommand._is_game_over(state):
                break

        return state

    @staticmethod
    def _engine_move(engine: MCTSPlayer, state: TicTacToeState, verbose: bool) -> TicTacToeState:
        time_start = time.perf_counter()
        next_state = engine.choose(state)
        time_elapsed = time.perf_counter() - time_start

        move = TicTacToeState.move_between(state, next_state)
        print(f"Engine plays {TermcolorUtils.cyan(BoardUtils.move_to_string(move))}")
        if verbose:
            iterations = engine.params.iterations
            print(f"Time taken for search: {time_elapsed:.2f} seconds. {iterations/time_elapsed:.2f} simulations/sec.")
        return next_state

    @staticmethod
    def _is_game_over(state: TicTacToeState) -> bool:
        if state.is_win():
            print(f'player "{TermcolorUtils.cyan(state.winner())}" has won the game!')
            return True
        if state.is_draw():
            print("Game is drawn!\n")
            return True
        return False


###############################################################################
###############################################################################
# 	 Main Entry Point
###############################################################################
###############################################################################

if __name__ == "__main__":

    ###############################################################################
    #   Parse command line arguments
    #
    argParser = argparse.ArgumentParser(
        description="Play a game of tic-tac-toe against the MCTS engine.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    argParser.add_argument(
        "--profile",
        "-p",
        type=str,
        choices=MCTSParams.get_supported_profiles(),
        default="default",
        help="Named engine parameter set. Explicit flags and TICTACTOE_MCTS_* variables override it.",
    )
    argParser.add_argument(
        "--iterations",
        "-i",
        type=int,
        default=None,
        help="Number of MCTS simulations per engine move.",
    )
    argParser.add_argument(
        "--exploration-constant",
        "-C",
        type=float,
        default=None,
        help="UCB1 exploration constant used during the search.",
    )
    argParser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Random seed for reproducible engine moves.",
    )
    argParser.add_argument(
        "--engine-first",
        "-e",
        action="store_true",
        help="Let the engine play 'x' and move first.",
    )
    argParser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print the engine's root statistics and timing.",
    )
    args = argParser.parse_args()

    if args.verbose is True:
        print(f"Arguments: {args}")

    params = MCTSParams.from_env(MCTSParams.from_profile(args.profile)).with_overrides(
        iterations=args.iterations,
        exploration_constant=args.exploration_constant,
        seed=args.seed,
    )

    ###############################################################################
    #   Start the game
    #
    PlayCommand.play_game(params=params, engine_first=args.engine_first, verbose=args.verbose)
