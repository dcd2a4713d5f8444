from typing import TypeVar

# Type variables for game-specific types
ActionType = TypeVar('ActionType')  # Type of moves in the game, hashable so it can key the move ledger
PlayerType = TypeVar('PlayerType')  # Type of player (side) in the game
