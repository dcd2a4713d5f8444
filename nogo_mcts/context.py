from dataclasses import dataclass, field
import numpy as np
from nogo_mcts.catalog import MoveCatalog
from nogo_mcts.games.nogo import NoGoMove, Stone
from nogo_mcts.ledger import MoveLedger


@dataclass
class SearchContext:
    """Mutable state owned by one agent and shared by its search components for one decision.

    Holds the agent's only random stream: catalog shuffles and rollout orderings both draw
    from `rng`, which is seeded once when the agent is built.
    """
    side: Stone
    catalog: MoveCatalog
    rng: np.random.Generator
    ledger: MoveLedger = field(default_factory=MoveLedger)
    rave: bool = True

    @property
    def opponent(self) -> Stone:
        return self.side.opponent

    def begin_decision(self) -> None:
        self.ledger.reset()
        self.catalog.shuffle(self.rng)

    def record_trial(self, move: NoGoMove) -> None:
        if self.rave:
            self.ledger.record_trial(move)

    def record_success(self, move: NoGoMove) -> None:
        if self.rave:
            self.ledger.record_success(move)
