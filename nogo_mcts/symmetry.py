from typing import List, Optional
from nogo_mcts.games.nogo import NoGoMove, NoGoState, Stone


def point_reflection(state: NoGoState) -> NoGoState:
    """The board rotated by 180 degrees around its centre."""
    return state.reflect_horizontal().reflect_vertical()


def asymmetric_cells(state: NoGoState, side: Stone) -> List[int]:
    """Empty cells whose point reflection holds an opponent stone.

    These are the cells where the colour-swapped reflection of the position disagrees with
    the position itself in a way `side` can fix by playing there.
    """
    reflected = point_reflection(state)
    opponent = side.opponent
    return [
        cell for cell in range(state.num_cells)
        if state.occupant(cell) == Stone.EMPTY and reflected.occupant(cell) == opponent
    ]


def opening_symmetry_move(state: NoGoState, side: Stone) -> Optional[NoGoMove]:
    """First legal move of `side` on an asymmetric cell, if any."""
    for cell in asymmetric_cells(state, side):
        move = NoGoMove(cell, side)
        if state.is_legal(move):
            return move
    return None
