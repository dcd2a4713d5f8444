from typing import Dict, Callable, Protocol
from dataclasses import dataclass
import math
import logging
from nogo_mcts.agent import Agent
from nogo_mcts.games.nogo import NoGoState, Stone
from nogo_mcts.simulation import benchmark


class Evaluator(Protocol):
    """Protocol for evaluating agent performance against opponents."""

    def __call__(
        self,
        main_player_creator: Callable[[Stone], Agent],
        logger: logging.Logger | None = None
    ) -> Dict[str, Dict[str, float]]:
        """Evaluate the main player.

        Returns:
            Typically a dict mapping opponent names to their performance statistics.
        """
        ...


@dataclass
class WinLossEvaluator(Evaluator):
    """
    Evaluator for NoGo, where every game ends in a win or a loss.
    """
    initial_state_creator: Callable[[], NoGoState]
    opponents_creators: Dict[str, Callable[[Stone], Agent]]
    num_games: int

    def __call__(self,
        main_player_creator: Callable[[Stone], Agent],
        logger: logging.Logger | None = None
    ) -> Dict[str, Dict[str, float]]:
        if logger is not None:
            empirical_distributions = benchmark(self.initial_state_creator, main_player_creator, self.opponents_creators, self.num_games, logger)
        else:
            empirical_distributions = benchmark(self.initial_state_creator, main_player_creator, self.opponents_creators, self.num_games)
        results = {}
        for opponent_name, distribution in empirical_distributions.items():
            mean = sum(distribution) / len(distribution)
            std = math.sqrt(sum((x - mean) ** 2 for x in distribution) / len(distribution))
            results[opponent_name] = {
                "mean": mean,
                "std": std,
                "win_rate": sum(1 for x in distribution if x > 0) / len(distribution),
                "loss_rate": sum(1 for x in distribution if x < 0) / len(distribution),
            }
        return results
