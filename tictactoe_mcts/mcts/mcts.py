from __future__ import annotations

# stdlib imports
import math
import random
from typing import List, Optional, Tuple

# local imports
from .gamestate_abc import GameState
from .mcts_errors import ExpansionError, InvariantError, TerminalStateError
from .mcts_params import MCTSParams
from ..utils.termcolor_utils import TermcolorUtils


class MCTSNode:
    state: GameState
    """Game state this node represents."""

    parent: Optional[MCTSNode]
    """Parent node in the tree (None for the root). Non-owning back-reference used by backpropagation."""

    children: dict[str, MCTSNode]
    """Mapping from the child state's canonical key to the child node."""

    is_terminal: bool
    """True if the state is a win or a draw."""

    is_fully_expanded: bool
    """True if every legal child has been materialised. Terminal nodes start fully expanded."""

    visits: int
    """Number of backpropagation passes that went through this node."""

    score: float
    """Sum of the rollout outcomes backed up through this node. Outcomes are added
    unmodified at every level; `MCTS.child_scores` applies the side-to-move sign."""

    def __init__(self, state: GameState, parent: Optional[MCTSNode] = None):
        self.state = state
        self.parent = parent
        self.children: dict[str, MCTSNode] = {}

        self.is_terminal = state.is_terminal()
        self.is_fully_expanded = self.is_terminal

        self.visits = 0
        self.score = 0.0

    def mean_score(self) -> float:
        """
        Return `score / visits`, or 0.0 if the node has not been visited yet.
        """
        return 0.0 if self.visits == 0 else self.score / self.visits

    def __repr__(self) -> str:
        return f"MCTSNode({self.state.canonical_key()!r}, visits={self.visits}, score={self.score})"


class MCTS:
    """
    Monte Carlo Tree Search with UCB1 selection and uniformly random rollouts.

    Every call to `search` builds a fresh tree; nothing is kept between calls
    except the random generator.
    """

    def __init__(self, params: MCTSParams | None = None, rng: random.Random | None = None, verbose: bool = False):
        """
        Args:
            params (MCTSParams | None): Search parameters. Defaults to `MCTSParams()`.
            rng (random.Random | None): Generator for rollouts and tie-breaks. When None,
                a new one is created from `params.seed`.
            verbose (bool): If True, prints the root statistics after each search.
        """
        self.params = params if params is not None else MCTSParams()
        self.rng = rng if rng is not None else random.Random(self.params.seed)
        self.verbose = verbose

    def reseed(self, seed: int | None) -> None:
        """Reset the random generator. Same seed, same parameters, same root state => same move."""
        self.rng.seed(seed)

    # =============================================================================
    # public API
    # =============================================================================

    def search(self, root_state: GameState) -> GameState:
        """
        Run `params.iterations` simulations from `root_state` and return the state
        reached by the best move, scored without exploration bonus.

        Raises:
            TerminalStateError: if `root_state` is already a win or a draw.
        """
        root = self.build_tree(root_state)
        best_child = self._best_child(root, exploration_constant=0.0)

        if self.verbose:
            self._print_root_stats(root, best_child)

        return best_child.state

    def build_tree(self, root_state: GameState) -> MCTSNode:
        """
        Run the simulations and return the root of the resulting tree.

        The caller owns the returned tree; the engine keeps no reference to it.
        """
        if root_state.is_terminal():
            raise TerminalStateError(f"Cannot search from a terminal state: {root_state.canonical_key()!r}")

        root = MCTSNode(root_state, parent=None)
        for _ in range(self.params.iterations):
            node = self._select(root)
            outcome = self._rollout(node.state)
            self._backpropagate(node, outcome)
        return root

    def child_scores(self, node: MCTSNode, exploration_constant: float) -> List[Tuple[MCTSNode, float]]:
        """
        Score every materialised child of `node` with

            current_player * child.score / child.visits
                + exploration_constant * sqrt(ln(node.visits) / child.visits)

        where `current_player` is +1 if the child's `player2` is the reward symbol
        (the reward symbol made the move into the child) and -1 otherwise.

        Raises:
            InvariantError: if a child has never been visited.
        """
        scores: List[Tuple[MCTSNode, float]] = []
        for child in node.children.values():
            if child.visits == 0:
                raise InvariantError(f"Child {child.state.canonical_key()!r} scored before being visited")
            current_player = 1 if child.state.player2 == self.params.reward_symbol else -1
            exploitation = current_player * child.score / child.visits
            exploration = exploration_constant * math.sqrt(math.log(node.visits) / child.visits)
            scores.append((child, exploitation + exploration))
        return scores

    # =============================================================================
    # the four phases
    # =============================================================================

    def _select(self, node: MCTSNode) -> MCTSNode:
        """Descend through fully expanded nodes by UCB1 until a node can be expanded or a terminal is hit."""
        while not node.is_terminal:
            if node.is_fully_expanded:
                node = self._best_child(node, self.params.exploration_constant)
            else:
                return self._expand(node)
        return node

    def _expand(self, node: MCTSNode) -> MCTSNode:
        """Materialise the first legal child not yet in `node.children` and return it."""
        legal_children = node.state.legal_children()
        for child_state in legal_children:
            key = child_state.canonical_key()
            if key in node.children:
                continue
            child = MCTSNode(child_state, parent=node)
            node.children[key] = child
            if len(node.children) == len(legal_children):
                node.is_fully_expanded = True
            return child

        raise ExpansionError(f"No unexpanded child left for {node.state.canonical_key()!r}")

    def _rollout(self, state: GameState) -> float:
        """
        Play uniformly random moves until someone wins.

        Returns +1.0 if the winning state's `player2` is the reward symbol, -1.0 otherwise,
        and 0.0 if the moves run out first (a draw).
        """
        while not state.is_win():
            children = state.legal_children()
            if not children:
                return 0.0
            state = self.rng.choice(children)
        return 1.0 if state.player2 == self.params.reward_symbol else -1.0

    def _backpropagate(self, node: Optional[MCTSNode], outcome: float) -> None:
        # same outcome at every level, no sign flip
        while node is not None:
            node.visits += 1
            node.score += outcome
            node = node.parent

    def _best_child(self, node: MCTSNode, exploration_constant: float) -> MCTSNode:
        """Return the highest-scoring child, breaking exact ties uniformly at random."""
        best_score = -math.inf
        best_children: List[MCTSNode] = []
        for child, move_score in self.child_scores(node, exploration_constant):
            if move_score > best_score:
                best_score = move_score
                best_children = [child]
            elif move_score == best_score:
                best_children.append(child)

        if not best_children:
            raise InvariantError(f"No child to choose from for {node.state.canonical_key()!r}")
        return self.rng.choice(best_children)

    # =============================================================================
    # reporting
    # =============================================================================

    def _print_root_stats(self, root: MCTSNode, best_child: MCTSNode) -> None:
        scores = {id(child): move_score for child, move_score in self.child_scores(root, 0.0)}
        print(f"Searched {root.visits} iterations, {len(root.children)} root moves:")
        for child in sorted(root.children.values(), key=lambda c: c.visits, reverse=True):
            line = f"  {child.state.canonical_key()} | visits {child.visits:5d} | score {child.score:8.1f} | mean {child.mean_score():+.3f} | move score {scores[id(child)]:+.3f}"
            print(TermcolorUtils.green(line) if child is best_child else line)
