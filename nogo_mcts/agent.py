from typing import Dict, Optional, Protocol
from nogo_mcts.games.nogo import NoGoMove, NoGoState, Stone

_INVALID_NAME_CHARS = set("[]():; ")


def parse_agent_args(args: str = "") -> Dict[str, str]:
    """Parse a whitespace separated list of key=value pairs. Later keys override earlier ones.

    A token without '=' maps to itself, e.g. "verbose" -> {"verbose": "verbose"}.
    """
    meta: Dict[str, str] = {}
    for pair in args.split():
        key, sep, value = pair.partition("=")
        meta[key] = value if sep else key
    return meta


def side_from_role(role: str | Stone) -> Stone:
    """Resolve a role such as "black" or "white" to a side. Anything else is a configuration error."""
    if isinstance(role, Stone):
        if role == Stone.EMPTY:
            raise ValueError(f"invalid role: {role.name.lower()}")
        return role
    if role == "black":
        return Stone.BLACK
    if role == "white":
        return Stone.WHITE
    raise ValueError(f"invalid role: {role}")


class Agent(Protocol):
    """Protocol for players. An agent plays one side for the whole episode.

    Examples: RandomAgent, MCTS.
    """
    name: str
    side: Stone

    def open_episode(self) -> None:
        """Reset per-game state before the first move of a game."""
        ...

    def close_episode(self) -> None:
        ...

    def take_action(self, state: NoGoState) -> Optional[NoGoMove]:
        """Select a legal move for `self.side`, or None when there is none."""
        ...

    def on_opponent_move(self, move: NoGoMove) -> None:
        """Informational hook called after the opponent has moved."""
        ...

    def __call__(self, state: NoGoState) -> Optional[NoGoMove]:
        return self.take_action(state)


def validate_name(name: str) -> str:
    if not name or _INVALID_NAME_CHARS.intersection(name):
        raise ValueError(f"invalid name: {name}")
    return name
