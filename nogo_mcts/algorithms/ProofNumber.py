from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional
import logging
import math
from nogo_mcts.games.nogo import NoGoMove, NoGoState, Stone

INFINITY = math.inf


@dataclass(eq=False)
class ProofNode:
    """Node of the AND/OR tree built while solving.

    `proof` is the number of leaves still to prove for a forced win of the searching side,
    `disproof` the number still to prove for a forced loss. Nodes where the searching side
    moves are OR nodes, the others AND nodes.
    """
    position: NoGoState
    mover: Stone
    move: Optional[NoGoMove] = None
    proof: float = 1
    disproof: float = 1
    children: Dict[NoGoMove, "ProofNode"] = field(default_factory=dict)
    winning_move: Optional[NoGoMove] = None

    @property
    def is_proven(self) -> bool:
        return self.proof == 0

    @property
    def is_disproven(self) -> bool:
        return self.disproof == 0


class ProofNumberSolver:
    """Exact depth-first proof-number search for NoGo positions.

    Every legal continuation is expanded, so the cost is exponential in the number of
    remaining moves. The solver does not limit its own work: only call it near the end of
    the game, when both sides have few legal moves left.
    """

    def __init__(self, side: Stone, logger: logging.Logger = logging.getLogger(__name__)):
        self.side = side
        self.logger = logger
        self.nodes_expanded = 0

    def solve(self, position: NoGoState) -> ProofNode:
        self.nodes_expanded = 0
        root = ProofNode(position, position.current_player)
        self.evaluate(root)
        self.logger.debug(
            f"Solved position for {self.side.name}: proof={root.proof}, disproof={root.disproof}, "
            f"winning move {root.winning_move}, {self.nodes_expanded} nodes expanded"
        )
        return root

    def evaluate(self, node: ProofNode) -> None:
        """Compute proof and disproof numbers of `node` and its subtree."""
        self.nodes_expanded += 1
        is_or_node = node.mover == self.side
        moves = node.position.legal_moves(node.mover)

        if not moves:
            # The mover is out of moves and has lost
            if is_or_node:
                node.proof, node.disproof = INFINITY, 0
            else:
                node.proof, node.disproof = 0, INFINITY
            return

        if is_or_node:
            node.proof, node.disproof = INFINITY, 0
        else:
            node.proof, node.disproof = 0, INFINITY

        for move in moves:
            position = node.position.clone()
            position.place(move)
            child = ProofNode(position, node.mover.opponent, move)
            node.children[move] = child
            self.evaluate(child)

            if is_or_node:
                node.disproof += child.disproof
                if child.proof < node.proof:
                    node.proof = child.proof
                if child.proof == 0:
                    node.winning_move = move
                    node.disproof = INFINITY
                    return
            else:
                node.proof += child.proof
                if child.disproof < node.disproof:
                    node.disproof = child.disproof
                if child.disproof == 0:
                    node.proof = INFINITY
                    return

    def proof_line(self, root: ProofNode) -> Iterator[NoGoMove]:
        """Moves of a forced win: the winning move at OR nodes and any reply at AND nodes."""
        node = root
        while node.children:
            if node.mover == self.side:
                if node.winning_move is None:
                    return
                move = node.winning_move
            else:
                move = next(iter(node.children))
            yield move
            node = node.children[move]

    def solved_moves(self, root: ProofNode) -> List[NoGoMove]:
        """Children of the root proven to win for the searching side."""
        return [move for move, child in root.children.items() if child.proof == 0]
