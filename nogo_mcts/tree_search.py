from typing import Optional, Dict, Iterable, List
from dataclasses import dataclass, field
import logging
import math
from nogo_mcts.context import SearchContext
from nogo_mcts.games.nogo import NoGoMove, NoGoState, Stone
from nogo_mcts.rollout import Rollout
from nogo_mcts.state import try_move


@dataclass(eq=False)
class SearchNode:
    """Node of the search tree: the position reached by `move`, with `mover` to act in it.

    `wins` always counts rollouts won by the searching side, whichever side moves here.
    Children are created once, by `expand`, and only go away with the whole tree.
    """
    position: NoGoState
    mover: Stone
    move: Optional[NoGoMove] = None
    visits: int = 0
    wins: int = 0
    children: Dict[NoGoMove, "SearchNode"] = field(default_factory=dict)
    expanded: bool = False

    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def is_exhausted(self) -> bool:
        """Expanded, but the mover had no legal move."""
        return self.expanded and not self.children

    @property
    def win_rate(self) -> Optional[float]:
        if self.visits == 0:
            return None
        return self.wins / self.visits

    def expand(self, candidates: Iterable[NoGoMove]) -> None:
        """Add one child per legal candidate, in candidate order. Illegal candidates are skipped."""
        for move in candidates:
            if move in self.children:
                continue
            position = try_move(self.position, move)
            if position is None:
                continue
            self.children[move] = SearchNode(position, self.mover.opponent, move)
        self.expanded = True


class UCTSearch:
    """UCT tree search for one side, rebuilt from scratch for every decision.

    A cycle selects a leaf with UCB1, expands it by one ply, runs a rollout from the first new
    child and backs the result up the visited path. Moves of the searching side on the path
    are also credited to the context's move ledger.
    """

    def __init__(
        self,
        context: SearchContext,
        rollout: Rollout,
        exploration_constant: float = 1.0,
        rave_equivalence: float = 0.0,
        minimax: bool = False,
        logger: logging.Logger = logging.getLogger(__name__),
    ):
        self.context = context
        self.rollout = rollout
        self.exploration_constant = exploration_constant
        self.rave_equivalence = rave_equivalence
        self.minimax = minimax
        self.logger = logger
        self.root: Optional[SearchNode] = None

    def reset(self, position: NoGoState) -> SearchNode:
        """Discard the current tree and start a new one at `position`."""
        if position.current_player != self.context.side:
            raise ValueError(f"Cannot search for {self.context.side.name} when {position.current_player.name} is to move")
        self.root = SearchNode(position, position.current_player)
        return self.root

    def clear(self) -> None:
        self.root = None

    def exploitation(self, node: SearchNode, child: SearchNode) -> float:
        """Win rate of `child` for the searching side, or for the side choosing at `node` with `minimax`."""
        value = child.wins / child.visits
        if self.rave_equivalence > 0 and child.move is not None:
            ledger_rate = self.context.ledger.win_rate(child.move)
            if ledger_rate is not None:
                beta = math.sqrt(self.rave_equivalence / (3 * child.visits + self.rave_equivalence))
                value = (1 - beta) * value + beta * ledger_rate
        if self.minimax and node.mover != self.context.side:
            value = 1.0 - value
        return value

    def uct_score(self, node: SearchNode, child: SearchNode) -> float:
        if child.visits == 0:
            return float('inf')  # Unvisited children are tried before any exploitation
        exploration = self.exploration_constant * math.sqrt(math.log(node.visits) / child.visits)
        return self.exploitation(node, child) + exploration

    def select(self, node: SearchNode) -> SearchNode:
        """Child with the highest UCB1 score; ties go to the earliest child."""
        return max(node.children.values(), key=lambda child: self.uct_score(node, child))

    def expand(self, node: SearchNode) -> Optional[SearchNode]:
        """Expand `node` in catalog order and return its first child, or None if it is exhausted."""
        node.expand(self.context.catalog.moves(node.mover))
        return next(iter(node.children.values()), None)

    def evaluate(self, node: SearchNode) -> bool:
        return self.rollout.simulate(node.position, node.mover)

    def backpropagate(self, path: List[SearchNode], outcome: bool) -> None:
        for node in path:
            node.visits += 1
            if outcome:
                node.wins += 1
            if node.move is not None and node.move.side == self.context.side:
                self.context.record_trial(node.move)
                if outcome:
                    self.context.record_success(node.move)

    def cycle(self) -> bool:
        """Run one selection / expansion / simulation / backpropagation pass and return the rollout result."""
        if self.root is None:
            raise ValueError("Search tree has not been initialised, call reset() first")
        node = self.root
        path = [node]

        # Selection
        while not node.is_leaf():
            node = self.select(node)
            path.append(node)

        # Expansion
        if not node.expanded:
            child = self.expand(node)
            if child is not None:
                node = child
                path.append(node)

        # Simulation
        outcome = self.evaluate(node)

        # Backpropagation, including the simulated node
        self.backpropagate(path, outcome)
        return outcome

    def run(self, num_cycles: int) -> SearchNode:
        for _ in range(num_cycles):
            self.cycle()
        assert self.root is not None
        self.logger.debug(
            f"Ran {num_cycles} cycles: root visits {self.root.visits}, wins {self.root.wins}, "
            f"{len(self.root.children)} children, {self.tree_size()} nodes"
        )
        return self.root

    def tree_size(self) -> int:
        if self.root is None:
            return 0
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    @property
    def total_visits(self) -> int:
        return 0 if self.root is None else self.root.visits
