class MCTSError(Exception):
    """Base class for errors raised by the MCTS engine."""

    pass


class TerminalStateError(MCTSError, ValueError):
    """A move was requested for a state where the game is already over."""

    pass


class InvariantError(MCTSError, RuntimeError):
    """The search tree reached a state that should be impossible by construction."""

    pass


class ExpansionError(InvariantError):
    """Expansion was attempted on a node with no unmaterialised child left."""

    pass
