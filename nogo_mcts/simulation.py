from typing import Dict, List, Callable, Optional, Tuple
import random
import logging
from nogo_mcts.agent import Agent
from nogo_mcts.games.nogo import NoGoMove, NoGoState, Stone


def simulate_game(
    state: NoGoState,
    players: Dict[Stone, Agent],
    logger: logging.Logger = logging.getLogger(__name__)
) -> Tuple[Optional[Stone], List[NoGoMove]]:
    """Play `state` out between `players` and return the winner with the moves played.

    A player that returns None or an illegal move loses on the spot.
    """
    logger.debug(f"Simulating game with players {[agent.name for agent in players.values()]}.")
    for agent in players.values():
        agent.open_episode()
    moves: List[NoGoMove] = []
    winner: Optional[Stone] = None
    try:
        while True:
            logger.debug(f"Game state:\n{state}")
            if state.is_terminal:
                winner = state.winner
                logger.debug(f"Game terminal state reached, winner {winner.name if winner else None}.")
                break

            mover = state.current_player
            move = players[mover](state)
            if move is None or not state.is_legal(move):
                logger.warning(f"Player {players[mover].name} ({mover.name}) returned invalid move {move}.")
                winner = mover.opponent
                break
            logger.debug(f"Player {mover.name} took action {move}")

            state.apply_action(move)
            moves.append(move)
            for side, agent in players.items():
                if side != mover:
                    agent.on_opponent_move(move)
    finally:
        for agent in players.values():
            agent.close_episode()
    return winner, moves


def randomly_assign_players(
    state: NoGoState,
    tracked_players: List[Callable[[Stone], Agent]],
    generic_players: List[Callable[[Stone], Agent]],
    logger: logging.Logger = logging.getLogger(__name__)
) -> Tuple[Dict[Stone, Agent], Stone]:
    """Randomly seat one tracked and one generic player. Returns the seating and the tracked side."""
    player_list = list(state.players)
    if len(player_list) != len(tracked_players) + len(generic_players):
        logger.warning(f"Number of players in state does not match number of tracked and generic players.")
    random.shuffle(player_list)
    players: Dict[Stone, Agent] = {}
    for i, player in enumerate(player_list[:len(tracked_players)]):
        players[player] = tracked_players[i](player)
    for i, player in enumerate(player_list[len(tracked_players):]):
        players[player] = generic_players[i](player)
    return players, player_list[0]


def benchmark(
    initial_state_creator: Callable[[], NoGoState],
    main_player_creator: Callable[[Stone], Agent],
    opponents_creators: Dict[str, Callable[[Stone], Agent]],
    num_games: int,
    logger: logging.Logger = logging.getLogger(__name__)
) -> Dict[str, List[float]]:
    """
    Benchmark the main player against a set of opponents. Each game scores 1.0 for a win of the main player, -1.0 for a loss.
    """
    results: Dict[str, List[float]] = {opponent_name: [] for opponent_name in opponents_creators.keys()}
    for opponent_name, opponent_creator in opponents_creators.items():
        for game in range(num_games):
            logger.debug(f"Simulating game {game + 1} of {num_games} against {opponent_name}...")
            state = initial_state_creator()
            players, main_side = randomly_assign_players(state, [main_player_creator], [opponent_creator], logger)
            winner, _ = simulate_game(state, players, logger)
            results[opponent_name].append(1.0 if winner == main_side else -1.0)
    return results
