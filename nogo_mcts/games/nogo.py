from typing import List, Tuple, Optional, Dict, Iterable
from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache
import numpy as np


class Stone(IntEnum):
    """Occupant of a cell. BLACK and WHITE double as the two players."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> 'Stone':
        if self == Stone.BLACK:
            return Stone.WHITE
        if self == Stone.WHITE:
            return Stone.BLACK
        return Stone.EMPTY


class Legality(IntEnum):
    """Result of trying to place a stone, following the usual NoGo framework codes."""
    LEGAL = 0
    ILLEGAL_TURN = -1
    ILLEGAL_OUT_OF_RANGE = -2
    ILLEGAL_NOT_EMPTY = -3
    ILLEGAL_SUICIDE = -4
    ILLEGAL_TAKE = -5


@dataclass(frozen=True, order=True)
class NoGoMove:
    """Placement of a stone of `side` on the cell with flat index `cell` (row-major)."""
    cell: int
    side: Stone

    def coordinates(self, cols: int) -> Tuple[int, int]:
        return divmod(self.cell, cols)

    def __str__(self) -> str:
        return f"{'B' if self.side == Stone.BLACK else 'W'}@{self.cell}"


NoGoPlayer = Stone

_SYMBOLS = {Stone.EMPTY: '.', Stone.BLACK: 'X', Stone.WHITE: 'O'}


@lru_cache(maxsize=None)
def adjacency(rows: int, cols: int) -> Tuple[Tuple[int, ...], ...]:
    """Orthogonal neighbours of every flat cell index on a rows x cols grid."""
    neighbours = []
    for cell in range(rows * cols):
        r, c = divmod(cell, cols)
        adjacent = []
        if r > 0:
            adjacent.append(cell - cols)
        if r < rows - 1:
            adjacent.append(cell + cols)
        if c > 0:
            adjacent.append(cell - 1)
        if c < cols - 1:
            adjacent.append(cell + 1)
        neighbours.append(tuple(adjacent))
    return tuple(neighbours)


def _has_liberty(cells: List[int], start: int, neighbours: Tuple[Tuple[int, ...], ...]) -> bool:
    """Flood fill the group containing `start` and stop at the first empty neighbour."""
    color = cells[start]
    stack = [start]
    seen = {start}
    while stack:
        cell = stack.pop()
        for n in neighbours[cell]:
            occupant = cells[n]
            if occupant == Stone.EMPTY:
                return True
            if occupant == color and n not in seen:
                seen.add(n)
                stack.append(n)
    return False


class NoGoState:
    """Implements the game state for NoGo using a NumPy array.

    A stone may not be placed where it would leave its own group without liberties (suicide)
    or where it would remove the last liberty of an opponent group (take). The player to move
    who has no legal placement loses.
    """

    def __init__(
        self,
        rows: int = 9,
        cols: int = 9,
        board: Optional[np.ndarray] = None,
        current_player: Stone = Stone.BLACK,
    ):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Invalid board size {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.players = [Stone.BLACK, Stone.WHITE]
        if board is not None:
            if board.shape != (rows, cols):
                raise ValueError(f"Board shape {board.shape} does not match {rows}x{cols}")
            self.board = board.astype(np.int8, copy=True)
        else:
            self.board = np.zeros((rows, cols), dtype=np.int8)
        self.current_player = Stone(current_player)

    @classmethod
    def from_rows(cls, rows: Iterable[str], current_player: Stone = Stone.BLACK) -> 'NoGoState':
        """Build a state from strings like 'X.O' ('X' black, 'O' white, '.' empty)."""
        lines = [line.strip() for line in rows]
        symbols = {'.': Stone.EMPTY, 'X': Stone.BLACK, 'O': Stone.WHITE}
        board = np.array([[symbols[ch] for ch in line] for line in lines], dtype=np.int8)
        return cls(board.shape[0], board.shape[1], board, current_player)

    @property
    def num_cells(self) -> int:
        return self.rows * self.cols

    @property
    def num_stones(self) -> int:
        """Number of occupied cells, i.e. plies played when starting from an empty board."""
        return int(np.count_nonzero(self.board))

    def occupant(self, cell: int) -> Stone:
        return Stone(int(self.board.flat[cell]))

    def check(self, move: NoGoMove, check_turn: bool = True) -> Legality:
        """Return the legality of `move` without changing the state."""
        if move.side not in (Stone.BLACK, Stone.WHITE):
            return Legality.ILLEGAL_TURN
        if check_turn and move.side != self.current_player:
            return Legality.ILLEGAL_TURN
        if not 0 <= move.cell < self.num_cells:
            return Legality.ILLEGAL_OUT_OF_RANGE
        cells = self.board.ravel().tolist()
        if cells[move.cell] != Stone.EMPTY:
            return Legality.ILLEGAL_NOT_EMPTY

        neighbours = adjacency(self.rows, self.cols)
        cells[move.cell] = move.side
        if not _has_liberty(cells, move.cell, neighbours):
            return Legality.ILLEGAL_SUICIDE
        opponent = move.side.opponent
        for n in neighbours[move.cell]:
            if cells[n] == opponent and not _has_liberty(cells, n, neighbours):
                return Legality.ILLEGAL_TAKE
        return Legality.LEGAL

    def is_legal(self, move: NoGoMove) -> bool:
        return self.check(move) == Legality.LEGAL

    def place(self, move: NoGoMove) -> Legality:
        """Place a stone if legal, modifying the state in place. Illegal moves leave the state unchanged."""
        result = self.check(move)
        if result == Legality.LEGAL:
            self.board.flat[move.cell] = move.side
            self.current_player = move.side.opponent
        return result

    def apply_action(self, action: NoGoMove):
        """Apply action to state, modifying the state in place."""
        result = self.place(action)
        if result != Legality.LEGAL:
            raise ValueError(f"Illegal move {action}: {result.name}")

    def legal_moves(self, side: Optional[Stone] = None) -> List[NoGoMove]:
        """Legal placements for `side`, regardless of whose turn it is (defaults to the player to move)."""
        side = self.current_player if side is None else side
        moves = (NoGoMove(cell, side) for cell in range(self.num_cells))
        return [move for move in moves if self.check(move, check_turn=False) == Legality.LEGAL]

    def count_legal(self, side: Stone) -> int:
        return len(self.legal_moves(side))

    def has_legal_move(self, side: Stone) -> bool:
        return any(
            self.check(NoGoMove(cell, side), check_turn=False) == Legality.LEGAL
            for cell in range(self.num_cells)
        )

    @property
    def legal_actions(self) -> List[NoGoMove]:
        return self.legal_moves(self.current_player)

    @property
    def is_terminal(self) -> bool:
        return not self.has_legal_move(self.current_player)

    @property
    def winner(self) -> Optional[Stone]:
        """The opponent of the player to move, once that player is out of moves."""
        if self.is_terminal:
            return self.current_player.opponent
        return None

    def rewards(self) -> Dict[Stone, float]:
        winner = self.winner
        if winner is None:
            return {player: 0.0 for player in self.players}
        return {player: 1.0 if player == winner else -1.0 for player in self.players}

    def reflect_horizontal(self) -> 'NoGoState':
        """Mirror the board left to right."""
        return NoGoState(self.rows, self.cols, np.fliplr(self.board), self.current_player)

    def reflect_vertical(self) -> 'NoGoState':
        """Mirror the board top to bottom."""
        return NoGoState(self.rows, self.cols, np.flipud(self.board), self.current_player)

    def clone(self) -> 'NoGoState':
        return NoGoState(self.rows, self.cols, self.board, self.current_player)

    def __str__(self) -> str:
        lines = [''.join(_SYMBOLS[Stone(int(v))] for v in row) for row in self.board]
        lines.append(f"Current player: {self.current_player.name}")
        return '\n'.join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NoGoState):
            return False
        return np.array_equal(self.board, other.board) and self.current_player == other.current_player

    def __hash__(self) -> int:
        return hash((self.board.shape, self.board.tobytes(), int(self.current_player)))
