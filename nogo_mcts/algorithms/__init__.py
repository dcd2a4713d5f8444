from .MCTS import MCTS, MCTSConfig, FinalSelection, DecisionPhase
from .ProofNumber import ProofNumberSolver, ProofNode
from .RandomAgent import RandomAgent

__all__ = [
    'MCTS',
    'MCTSConfig',
    'FinalSelection',
    'DecisionPhase',
    'ProofNumberSolver',
    'ProofNode',
    'RandomAgent'
]
