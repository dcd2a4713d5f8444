from typing import List
from nogo_mcts.context import SearchContext
from nogo_mcts.games.nogo import NoGoMove, NoGoState, Stone

DEFAULT_MAX_PLIES = 74


class Rollout:
    """Random playout used to evaluate tree leaves.

    Each side plays the first legal move of its own random ordering, drawn once per call.
    The playout ends when a side runs out of moves or after `max_plies` plies. The result is
    True iff the searching side's opponent ran out first: hitting the ply cap counts as a
    loss for the searching side rather than being scored.
    """

    def __init__(
        self,
        context: SearchContext,
        max_plies: int = DEFAULT_MAX_PLIES,
    ):
        if max_plies <= 0:
            raise ValueError(f"max_plies must be positive, got {max_plies}")
        self.context = context
        self.max_plies = max_plies

    def simulate(self, position: NoGoState, mover: Stone) -> bool:
        """Play out `position` with `mover` to move. `position` itself is never modified."""
        if mover != position.current_player:
            raise ValueError(f"Rollout mover {mover.name} is not the player to move ({position.current_player.name})")

        context = self.context
        orders = {
            context.side: context.catalog.shuffled(context.side, context.rng),
            context.opponent: context.catalog.shuffled(context.opponent, context.rng),
        }
        state = position.clone()
        played: List[NoGoMove] = []
        side = mover
        outcome = False
        for _ in range(self.max_plies):
            move = next((m for m in orders[side] if state.is_legal(m)), None)
            if move is None:
                outcome = side != context.side
                break
            state.place(move)
            if side == context.side:
                played.append(move)
                context.record_trial(move)
            side = side.opponent

        if outcome:
            for move in played:
                context.record_success(move)
        return outcome
