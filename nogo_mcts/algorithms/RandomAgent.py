from typing import Optional
import numpy as np
from nogo_mcts.agent import parse_agent_args, side_from_role, validate_name
from nogo_mcts.games.nogo import NoGoMove, NoGoState, Stone


class RandomAgent:
    """Agent that places a stone on a uniformly random legal cell."""

    def __init__(self, side: Stone | str, name: str = "random", seed: Optional[int] = None):
        self.name = validate_name(name)
        self.side = side_from_role(side)
        self.rng = np.random.default_rng(seed)

    @classmethod
    def from_args(cls, args: str = "") -> "RandomAgent":
        meta = parse_agent_args("name=random role=unknown " + args)
        seed = int(meta["seed"]) if "seed" in meta else None
        return cls(meta["role"], meta["name"], seed)

    def open_episode(self) -> None:
        pass

    def close_episode(self) -> None:
        pass

    def take_action(self, state: NoGoState) -> Optional[NoGoMove]:
        moves = state.legal_moves(self.side)
        if not moves:
            return None
        return moves[int(self.rng.integers(len(moves)))]

    def on_opponent_move(self, move: NoGoMove) -> None:
        pass

    def __call__(self, state: NoGoState) -> Optional[NoGoMove]:
        return self.take_action(state)
