from typing import Dict, Iterable, List, Optional
import numpy as np
from nogo_mcts.games.nogo import NoGoMove, NoGoState, Stone


class MoveCatalog:
    """Every candidate placement of both sides on a board of `num_cells` cells.

    The order of each side's list is reshuffled once per decision; it fixes the expansion
    order of the search tree and therefore how UCT ties are broken.
    """

    def __init__(self, num_cells: int, sides: Iterable[Stone] = (Stone.BLACK, Stone.WHITE)):
        self.num_cells = num_cells
        self._moves: Dict[Stone, List[NoGoMove]] = {
            side: [NoGoMove(cell, side) for cell in range(num_cells)] for side in sides
        }

    def moves(self, side: Stone) -> List[NoGoMove]:
        """Candidate moves of `side` in the current decision order."""
        return self._moves[side]

    def shuffle(self, rng: np.random.Generator) -> None:
        for side, moves in self._moves.items():
            self._moves[side] = [moves[i] for i in rng.permutation(len(moves))]

    def shuffled(self, side: Stone, rng: np.random.Generator) -> List[NoGoMove]:
        """A fresh random ordering of `side`'s moves, leaving the decision order untouched."""
        moves = self._moves[side]
        return [moves[i] for i in rng.permutation(len(moves))]

    def first_legal(self, state: NoGoState, side: Optional[Stone] = None) -> Optional[NoGoMove]:
        side = state.current_player if side is None else side
        for move in self._moves[side]:
            if state.is_legal(move):
                return move
        return None
