from typing import Dict, Iterator, Optional, Tuple
from dataclasses import dataclass
from nogo_mcts.games.nogo import NoGoMove


@dataclass
class LedgerEntry:
    successes: int = 0
    trials: int = 0

    @property
    def win_rate(self) -> Optional[float]:
        if self.trials == 0:
            return None
        return self.successes / self.trials


class MoveLedger:
    """Success/trial counts per move, accumulated over every cycle of one decision.

    Unlike node statistics the counts ignore where in the game the move was played, which is
    what lets moves seen only in rollouts contribute to the final choice (RAVE).
    """

    def __init__(self):
        self._entries: Dict[NoGoMove, LedgerEntry] = {}

    def reset(self) -> None:
        self._entries.clear()

    def record_trial(self, move: NoGoMove) -> None:
        self._entries.setdefault(move, LedgerEntry()).trials += 1

    def record_success(self, move: NoGoMove) -> None:
        self._entries.setdefault(move, LedgerEntry()).successes += 1

    def record(self, move: NoGoMove, success: bool) -> None:
        self.record_trial(move)
        if success:
            self.record_success(move)

    def win_rate(self, move: NoGoMove) -> Optional[float]:
        entry = self._entries.get(move)
        return None if entry is None else entry.win_rate

    def __getitem__(self, move: NoGoMove) -> LedgerEntry:
        # Missing moves read as an empty entry without being inserted
        return self._entries.get(move, LedgerEntry())

    def __contains__(self, move: NoGoMove) -> bool:
        return move in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[NoGoMove]:
        return iter(self._entries)

    def items(self) -> Iterator[Tuple[NoGoMove, LedgerEntry]]:
        return iter(self._entries.items())

    @property
    def total_trials(self) -> int:
        return sum(entry.trials for entry in self._entries.values())
