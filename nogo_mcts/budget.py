from dataclasses import dataclass


@dataclass(frozen=True)
class BudgetSchedule:
    """Shape of the per-decision cycle budget over one game."""
    initial: int = 1000
    increment: int = 250
    ceiling: int = 4000
    decrement: int = 500
    floor: int = 250
    descend_after_ply: int = 40  # Stones on the board after which the budget only shrinks

    def __post_init__(self):
        if self.floor <= 0:
            raise ValueError(f"Budget floor must be positive, got {self.floor}")
        if not self.floor <= self.initial <= self.ceiling:
            raise ValueError(f"Budget must satisfy floor <= initial <= ceiling, got {self.floor}, {self.initial}, {self.ceiling}")
        if self.increment < 0 or self.decrement < 0:
            raise ValueError("Budget increment and decrement must be non-negative")


class SimulationBudget:
    """Number of UCT cycles per decision.

    The budget grows by `increment` each decision until it reaches the ceiling or the game
    passes `descend_after_ply`; from then on it only shrinks by `decrement`, down to the
    floor. `reset()` restarts the ramp for a new game.
    """

    def __init__(self, schedule: BudgetSchedule = BudgetSchedule()):
        self.schedule = schedule
        self.reset()

    def reset(self) -> None:
        self.current = self.schedule.initial
        self.rising = True

    def next(self, ply: int) -> int:
        """Budget for the decision at `ply`, advancing the ramp for the following one."""
        schedule = self.schedule
        if self.rising and ply >= schedule.descend_after_ply:
            self.rising = False
        budget = self.current
        if self.rising:
            self.current = min(schedule.ceiling, self.current + schedule.increment)
            if self.current == schedule.ceiling:
                self.rising = False
        else:
            self.current = max(schedule.floor, self.current - schedule.decrement)
        return budget
