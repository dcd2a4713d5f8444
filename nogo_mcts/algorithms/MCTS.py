from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
import logging
import numpy as np
from nogo_mcts.agent import parse_agent_args, side_from_role, validate_name
from nogo_mcts.budget import BudgetSchedule, SimulationBudget
from nogo_mcts.catalog import MoveCatalog
from nogo_mcts.context import SearchContext
from nogo_mcts.games.nogo import NoGoMove, NoGoState, Stone
from nogo_mcts.rollout import DEFAULT_MAX_PLIES, Rollout
from nogo_mcts.symmetry import opening_symmetry_move
from nogo_mcts.tree_search import SearchNode, UCTSearch
from .ProofNumber import ProofNode, ProofNumberSolver
from .utils import best_action_from_scores, parse_bool


class FinalSelection(str, Enum):
    """Statistic used to pick the move among the root children."""
    TREE = "tree"        # Win rate of the child node
    LEDGER = "ledger"    # Win rate of the move in the move ledger
    BLENDED = "blended"  # Node and ledger counts pooled together


class DecisionPhase(Enum):
    IDLE = "idle"
    STATISTICAL_SEARCH = "statistical_search"
    SOLVE_CHECK = "solve_check"
    COMMIT = "commit"


_BUDGET_KEYS = {
    "budget_initial": "initial",
    "budget_increment": "increment",
    "budget_ceiling": "ceiling",
    "budget_decrement": "decrement",
    "budget_floor": "floor",
    "budget_descend_after_ply": "descend_after_ply",
}


@dataclass
class MCTSConfig:
    exploration_constant: float = 1.0
    max_rollout_plies: int = DEFAULT_MAX_PLIES
    rave: bool = True  # Keep the move ledger
    rave_equivalence: float = 0.0  # > 0 blends ledger win rates into UCT selection
    minimax: bool = False  # Opponent nodes select by their own win rate instead of the searching side's
    final_selection: FinalSelection = FinalSelection.LEDGER
    solver_threshold: int = 6  # Solve when the agent has fewer legal moves than this...
    solver_opponent_threshold: int = 6  # ...and so does the opponent. 0 disables the solver.
    mirror_opening: bool = False
    mirror_opening_plies: int = 4
    budget: BudgetSchedule = field(default_factory=BudgetSchedule)
    seed: Optional[int] = None

    def __post_init__(self):
        self.final_selection = FinalSelection(self.final_selection)
        if self.exploration_constant < 0:
            raise ValueError(f"exploration_constant must be non-negative, got {self.exploration_constant}")
        if self.max_rollout_plies <= 0:
            raise ValueError(f"max_rollout_plies must be positive, got {self.max_rollout_plies}")
        if self.rave_equivalence < 0:
            raise ValueError(f"rave_equivalence must be non-negative, got {self.rave_equivalence}")
        if self.solver_threshold < 0 or self.solver_opponent_threshold < 0:
            raise ValueError("Solver thresholds must be non-negative")
        if self.mirror_opening_plies < 0:
            raise ValueError(f"mirror_opening_plies must be non-negative, got {self.mirror_opening_plies}")
        if not self.rave and (self.final_selection != FinalSelection.TREE or self.rave_equivalence > 0):
            raise ValueError("Ledger based selection requires rave=True")

    @property
    def solver_enabled(self) -> bool:
        return self.solver_threshold > 0 and self.solver_opponent_threshold > 0

    @classmethod
    def from_args(cls, args: str | Dict[str, str]) -> "MCTSConfig":
        """Build a config from "key=value" pairs. Keys are the field names, `budget_*` for the budget
        schedule and `solver` for both solver thresholds. Unknown keys (name, role, ...) are ignored.
        """
        meta = parse_agent_args(args) if isinstance(args, str) else dict(args)
        converters = {
            "exploration_constant": float,
            "max_rollout_plies": int,
            "rave": parse_bool,
            "rave_equivalence": float,
            "minimax": parse_bool,
            "final_selection": FinalSelection,
            "solver_threshold": int,
            "solver_opponent_threshold": int,
            "mirror_opening": parse_bool,
            "mirror_opening_plies": int,
            "seed": int,
        }
        kwargs: Dict[str, Any] = {}
        if "solver" in meta:
            kwargs["solver_threshold"] = kwargs["solver_opponent_threshold"] = int(meta["solver"])
        for key, convert in converters.items():
            if key in meta:
                kwargs[key] = convert(meta[key])
        budget = {name: int(meta[key]) for key, name in _BUDGET_KEYS.items() if key in meta}
        if budget:
            kwargs["budget"] = BudgetSchedule(**budget)
        return cls(**kwargs)


class MCTS:
    """NoGo player combining UCT search, a move ledger and a proof-number endgame solver.

    Every decision goes through three phases:
        - STATISTICAL_SEARCH: rebuild the search tree and run the budgeted number of cycles.
        - SOLVE_CHECK: when both sides are low on legal moves, try to prove a forced win.
        - COMMIT: return the proven move, else the best root child by `final_selection`.

    When playing White, an optional opening policy plays into the cell that breaks the point
    symmetry of the position before any search is done.
    """

    def __init__(
        self,
        side: Stone | str,
        config: Optional[MCTSConfig] = None,
        name: str = "mcts",
        logger: logging.Logger = logging.getLogger(__name__),
    ):
        self.name = validate_name(name)
        self.side = side_from_role(side)
        config = MCTSConfig() if config is None else config
        self.config = config
        self.logger = logger
        self.rng = np.random.default_rng(config.seed)
        self.budget = SimulationBudget(config.budget)
        self.solver = ProofNumberSolver(self.side, logger) if config.solver_enabled else None
        self.context: Optional[SearchContext] = None
        self.rollout: Optional[Rollout] = None
        self.search: Optional[UCTSearch] = None
        self.phase = DecisionPhase.IDLE
        self.last_proof: Optional[ProofNode] = None
        self.opponent_moves: List[NoGoMove] = []

    @classmethod
    def from_args(cls, args: str = "", logger: logging.Logger = logging.getLogger(__name__)) -> "MCTS":
        meta = parse_agent_args("name=mcts role=unknown " + args)
        return cls(meta["role"], MCTSConfig.from_args(meta), meta["name"], logger)

    def seed(self, seed: Optional[int]) -> None:
        """Restart the agent's random stream, e.g. to reproduce a game.

        The search components are dropped too, so the move catalog starts again from its
        unshuffled order and later decisions replay those of a freshly built agent.
        """
        self.rng = np.random.default_rng(seed)
        self.context = None
        self.rollout = None
        self.search = None

    def _prepare(self, state: NoGoState) -> UCTSearch:
        """Build the search components the first time a board of this size is seen."""
        if self.context is None or self.context.catalog.num_cells != state.num_cells:
            self.context = SearchContext(
                side=self.side,
                catalog=MoveCatalog(state.num_cells),
                rng=self.rng,
                rave=self.config.rave,
            )
            self.rollout = Rollout(self.context, self.config.max_rollout_plies)
            self.search = UCTSearch(
                self.context,
                self.rollout,
                exploration_constant=self.config.exploration_constant,
                rave_equivalence=self.config.rave_equivalence,
                minimax=self.config.minimax,
                logger=self.logger,
            )
        assert self.search is not None
        return self.search

    def open_episode(self) -> None:
        self.budget.reset()
        self.opponent_moves.clear()
        self.last_proof = None
        self.phase = DecisionPhase.IDLE
        if self.search is not None:
            self.search.clear()

    def close_episode(self) -> None:
        if self.search is not None:
            self.search.clear()
        self.last_proof = None
        self.phase = DecisionPhase.IDLE

    def on_opponent_move(self, move: NoGoMove) -> None:
        # The tree is rebuilt at every decision, so the move is only recorded
        self.opponent_moves.append(move)
        self.logger.debug(f"{self.name}: opponent played {move}")

    def solver_gate(self, state: NoGoState) -> bool:
        """True when both sides are low enough on legal moves for exhaustive solving."""
        if self.solver is None:
            return False
        return (
            state.count_legal(self.side) < self.config.solver_threshold
            and state.count_legal(self.side.opponent) < self.config.solver_opponent_threshold
        )

    def take_action(self, state: NoGoState) -> Optional[NoGoMove]:
        if state.current_player != self.side:
            raise ValueError(f"{self.name} plays {self.side.name} but {state.current_player.name} is to move")
        search = self._prepare(state)
        search.clear()
        self.last_proof = None
        assert self.context is not None

        if not state.has_legal_move(self.side):
            self.phase = DecisionPhase.COMMIT
            self.logger.debug(f"{self.name}: no legal move for {self.side.name}")
            return None

        self.context.begin_decision()
        ply = state.num_stones

        if self.config.mirror_opening and self.side == Stone.WHITE and ply <= self.config.mirror_opening_plies:
            move = opening_symmetry_move(state, self.side)
            if move is not None:
                self.phase = DecisionPhase.COMMIT
                self.logger.debug(f"{self.name}: opening move {move} breaks the point symmetry")
                return move

        self.phase = DecisionPhase.STATISTICAL_SEARCH
        num_cycles = self.budget.next(ply)
        search.reset(state)
        root = search.run(num_cycles)
        statistical = self.best_move(root, state)

        proven = None
        if self.solver_gate(state):
            self.phase = DecisionPhase.SOLVE_CHECK
            assert self.solver is not None
            self.last_proof = self.solver.solve(state)
            if self.last_proof.is_proven:
                proven = self.last_proof.winning_move

        self.phase = DecisionPhase.COMMIT
        move = proven or statistical or self.first_legal_child(root, state)
        if move is None:
            move = self.context.catalog.first_legal(state, self.side)
        self.logger.debug(
            f"{self.name}: ply {ply}, {num_cycles} cycles, "
            f"{'proven' if proven else 'statistical'} move {move}"
        )
        return move

    def move_scores(self, root: SearchNode, state: NoGoState) -> Dict[NoGoMove, Optional[float]]:
        """Score of each currently legal root child under the configured final selection."""
        ledger = self.context.ledger if self.context is not None else None
        scores: Dict[NoGoMove, Optional[float]] = {}
        for move, child in root.children.items():
            if not state.is_legal(move):
                continue
            if self.config.final_selection == FinalSelection.TREE or ledger is None:
                scores[move] = child.win_rate
            elif self.config.final_selection == FinalSelection.LEDGER:
                scores[move] = ledger.win_rate(move)
            else:
                entry = ledger[move]
                trials = child.visits + entry.trials
                scores[move] = (child.wins + entry.successes) / trials if trials else None
        return scores

    def best_move(self, root: SearchNode, state: NoGoState) -> Optional[NoGoMove]:
        return best_action_from_scores(self.move_scores(root, state))

    def first_legal_child(self, root: SearchNode, state: NoGoState) -> Optional[NoGoMove]:
        return next((move for move in root.children if state.is_legal(move)), None)

    def __call__(self, state: NoGoState) -> Optional[NoGoMove]:
        return self.take_action(state)
