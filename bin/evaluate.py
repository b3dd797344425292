#!/usr/bin/env python3

# stdlib imports
import argparse
import time

# pip imports
import dotenv

# local imports
from tictactoe_mcts.mcts.mcts_params import MCTSParams
from tictactoe_mcts.libs.tictactoe_player import MCTSPlayer, RandomPlayer
from tictactoe_mcts.libs.match_utils import MatchUtils
from tictactoe_mcts.utils.termcolor_utils import TermcolorUtils

# Init dotenv to load environment variables from .env file
dotenv.load_dotenv()

###############################################################################
#   Main entry point
#
if __name__ == "__main__":
    argParser = argparse.ArgumentParser(
        description="Evaluate the MCTS engine against a uniformly random player.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    argParser.add_argument("--games", "-g", type=int, default=20, help="Number of games to play. The engine alternates between 'x' and 'o'.")
    argParser.add_argument(
        "--profile",
        "-p",
        type=str,
        choices=MCTSParams.get_supported_profiles(),
        default="fast",
        help="Named engine parameter set. Explicit flags and TICTACTOE_MCTS_* variables override it.",
    )
    argParser.add_argument("--iterations", "-i", type=int, default=None, help="Number of MCTS simulations per engine move.")
    argParser.add_argument("--exploration-constant", "-C", type=float, default=None, help="UCB1 exploration constant.")
    argParser.add_argument("--seed", "-s", type=int, default=None, help="Seed for both the engine and the random player.")
    argParser.add_argument("--quiet", "-q", action="store_true", help="Hide the progress bar.")
    args = argParser.parse_args()

    params = MCTSParams.from_env(MCTSParams.from_profile(args.profile)).with_overrides(
        iterations=args.iterations,
        exploration_constant=args.exploration_constant,
        seed=args.seed,
    )

    print("Evaluation parameters:")
    print(f"- Games: {args.games}")
    print(f"- MCTS params: {params}")

    ###############################################################################
    #   Play the games
    #
    engine = MCTSPlayer(params=params)
    opponent = RandomPlayer(seed=args.seed)

    time_start = time.perf_counter()
    report = MatchUtils.evaluate(engine, opponent, game_count=args.games, verbose=not args.quiet)
    time_elapsed = time.perf_counter() - time_start

    ###############################################################################
    #   Display the report
    #
    rates = report.rates()
    print(TermcolorUtils.magenta("-" * 50))
    print(f"After {report.game_count} games, {engine.name} vs {opponent.name} (MCTS iterations={params.iterations}) in {time_elapsed:.1f} seconds:")
    print(f"- Wins:   {TermcolorUtils.green(report.win_count)} ({rates['win']:.1%})")
    print(f"- Draws:  {TermcolorUtils.cyan(report.draw_count)} ({rates['draw']:.1%})")
    print(f"- Losses: {TermcolorUtils.red(report.loss_count)} ({rates['loss']:.1%})")
    print(f"- Mean outcome: {report.mean_outcome():+.3f}")
