from typing import Protocol, List, Dict, Optional, Self, TypeVar

ActionType = TypeVar("ActionType")
PlayerType = TypeVar("PlayerType")


class State(Protocol[ActionType, PlayerType]):
    """Protocol for the positions searched by the engine.

    The search never changes a position it was handed: every hypothetical move is
    tried on a copy obtained from `clone()`.
    """
    current_player: PlayerType
    players: List[PlayerType]
    num_cells: int
    num_stones: int

    def check(self, move: ActionType, check_turn: bool = True) -> int:
        """Return the legality code of a move (0 when legal) without modifying the state."""
        ...

    def is_legal(self, move: ActionType) -> bool:
        ...

    def place(self, move: ActionType) -> int:
        """Apply the move in place if legal and report the result; illegal moves change nothing."""
        ...

    def apply_action(self, action: ActionType):
        """Apply action to state, modifying the state in place. Raises ValueError if illegal."""
        ...

    def legal_moves(self, side: Optional[PlayerType] = None) -> List[ActionType]:
        ...

    def count_legal(self, side: PlayerType) -> int:
        ...

    def has_legal_move(self, side: PlayerType) -> bool:
        ...

    def occupant(self, cell: int) -> PlayerType:
        ...

    def reflect_horizontal(self) -> Self:
        ...

    def reflect_vertical(self) -> Self:
        ...

    @property
    def is_terminal(self) -> bool:
        ...

    @property
    def winner(self) -> Optional[PlayerType]:
        ...

    def clone(self) -> Self:
        """Return a copy of the state."""
        ...

    def rewards(self) -> Dict[PlayerType, float]:
        ...

    def __eq__(self, other: Self) -> bool:
        ...

    def __hash__(self) -> int:
        ...

    def __str__(self) -> str:
        """Return a human-readable representation of the state."""
        ...


def try_move(state: State[ActionType, PlayerType], move: ActionType) -> Optional[State[ActionType, PlayerType]]:
    """Copy-on-apply: the position reached by `move`, or None if the move is illegal."""
    if not state.is_legal(move):
        return None
    child = state.clone()
    child.place(move)
    return child
