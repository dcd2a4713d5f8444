# Public API for the nogo_mcts package ------------------------------------------
"""Top-level convenience imports.

Downstream code can simply do::

    import nogo_mcts as nogo
    agent = nogo.MCTS("black", nogo.MCTSConfig(seed=0))
    move = agent(nogo.NoGoState())

without having to navigate the internal module hierarchy.
"""

# ---------------------------------------------------------------------------
# Core protocols & utilities
# ---------------------------------------------------------------------------
from .agent import Agent, parse_agent_args, side_from_role
from .state import State, try_move

# ---------------------------------------------------------------------------
# Game
# ---------------------------------------------------------------------------
from .games.nogo import NoGoState, NoGoMove, NoGoPlayer, Stone, Legality

# ---------------------------------------------------------------------------
# Search components
# ---------------------------------------------------------------------------
from .catalog import MoveCatalog
from .ledger import MoveLedger, LedgerEntry
from .context import SearchContext
from .rollout import Rollout
from .tree_search import SearchNode, UCTSearch
from .budget import BudgetSchedule, SimulationBudget
from .symmetry import opening_symmetry_move

# ---------------------------------------------------------------------------
# Algorithms
# ---------------------------------------------------------------------------
from .algorithms.MCTS import MCTS, MCTSConfig, FinalSelection, DecisionPhase
from .algorithms.ProofNumber import ProofNumberSolver, ProofNode
from .algorithms.RandomAgent import RandomAgent

# ---------------------------------------------------------------------------
# Game simulation and evaluation
# ---------------------------------------------------------------------------
from .simulation import simulate_game, randomly_assign_players, benchmark
from .evaluation import Evaluator, WinLossEvaluator

__all__ = [
    # Core interfaces and protocols
    'Agent',
    'State',
    'parse_agent_args',
    'side_from_role',
    'try_move',

    # Game
    'NoGoState',
    'NoGoMove',
    'NoGoPlayer',
    'Stone',
    'Legality',

    # Search components
    'MoveCatalog',
    'MoveLedger',
    'LedgerEntry',
    'SearchContext',
    'Rollout',
    'SearchNode',
    'UCTSearch',
    'BudgetSchedule',
    'SimulationBudget',
    'opening_symmetry_move',

    # Algorithms
    'MCTS',
    'MCTSConfig',
    'FinalSelection',
    'DecisionPhase',
    'ProofNumberSolver',
    'ProofNode',
    'RandomAgent',

    # Game simulation and evaluation
    'simulate_game',
    'randomly_assign_players',
    'benchmark',
    'Evaluator',
    'WinLossEvaluator',
]
