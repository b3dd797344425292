from __future__ import annotations

# stdlib imports
import dataclasses
import os
from typing import ClassVar, Optional


@dataclasses.dataclass
class MCTSParams:
    """
    Parameters for the MCTS engine.
    """

    iterations: int = 1000
    """ Number of simulation passes per move decision. Must be at least the number of
    legal root moves for every move to be considered by the final choice. """
    exploration_constant: float = 2.0
    """ Exploration constant C of the UCB1 formula, used during in-tree selection only. """
    seed: Optional[int] = None
    """ Seed for the random generator used by rollouts and tie-breaks. None means unseeded. """
    reward_symbol: str = "x"
    """ Symbol whose presence in the `player2` slot of a won state scores +1. """

    PROFILE: ClassVar[dict[str, MCTSParams]] = {}
    """ Named parameter sets, filled in below the class. """

    def __post_init__(self):
        if self.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {self.iterations}")
        if self.exploration_constant < 0:
            raise ValueError(f"exploration_constant must be >= 0, got {self.exploration_constant}")
        if self.reward_symbol not in ("x", "o"):
            raise ValueError(f"reward_symbol must be 'x' or 'o', got {self.reward_symbol!r}")

    @staticmethod
    def get_supported_profiles() -> list[str]:
        return list(MCTSParams.PROFILE.keys())

    @staticmethod
    def from_profile(profile_name: str) -> MCTSParams:
        if profile_name not in MCTSParams.PROFILE:
            raise ValueError(f"Unknown profile {profile_name!r}, expected one of {MCTSParams.get_supported_profiles()}")
        return dataclasses.replace(MCTSParams.PROFILE[profile_name])

    def with_overrides(self, **overrides) -> MCTSParams:
        """Return a copy with every override that is not None applied, e.g. unset command line flags."""
        return dataclasses.replace(self, **{name: value for name, value in overrides.items() if value is not None})

    @staticmethod
    def from_env(base: MCTSParams | None = None) -> MCTSParams:
        """
        Return a copy of `base` (default parameters when None) with overrides read from the environment.

        Recognized variables:
        - TICTACTOE_MCTS_ITERATIONS (int)
        - TICTACTOE_MCTS_EXPLORATION_CONSTANT (float)
        - TICTACTOE_MCTS_SEED (int)

        Call `dotenv.load_dotenv()` beforehand to pick them up from a .env file.
        """
        params = base if base is not None else MCTSParams()
        overrides = {}

        iterations_str = os.getenv("TICTACTOE_MCTS_ITERATIONS")
        if iterations_str:
            overrides["iterations"] = int(iterations_str)

        exploration_str = os.getenv("TICTACTOE_MCTS_EXPLORATION_CONSTANT")
        if exploration_str:
            overrides["exploration_constant"] = float(exploration_str)

        seed_str = os.getenv("TICTACTOE_MCTS_SEED")
        if seed_str:
            overrides["seed"] = int(seed_str)

        return dataclasses.replace(params, **overrides)


MCTSParams.PROFILE = {
    "fast": MCTSParams(iterations=200),
    "default": MCTSParams(iterations=1000),
    "strong": MCTSParams(iterations=5000),
}
