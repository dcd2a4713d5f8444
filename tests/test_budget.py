import unittest
from nogo_mcts.budget import BudgetSchedule, SimulationBudget


class TestSimulationBudget(unittest.TestCase):
    def test_rises_to_ceiling_then_descends(self):
        budget = SimulationBudget(BudgetSchedule(initial=10, increment=5, ceiling=20, decrement=4, floor=6, descend_after_ply=100))
        self.assertEqual([budget.next(ply) for ply in range(0, 16, 2)], [10, 15, 20, 16, 12, 8, 6, 6])

    def test_descends_after_ply(self):
        budget = SimulationBudget(BudgetSchedule(initial=10, increment=5, ceiling=100, decrement=3, floor=4, descend_after_ply=4))
        self.assertEqual([budget.next(ply) for ply in (0, 2, 4, 6, 8)], [10, 15, 20, 17, 14])

    def test_never_rises_again(self):
        budget = SimulationBudget(BudgetSchedule(initial=10, increment=5, ceiling=100, decrement=3, floor=4, descend_after_ply=4))
        budget.next(4)
        self.assertEqual(budget.next(0), 7)

    def test_reset(self):
        budget = SimulationBudget(BudgetSchedule(initial=10, increment=5, ceiling=20, decrement=4, floor=6))
        for ply in range(5):
            budget.next(ply)
        budget.reset()
        self.assertEqual(budget.next(0), 10)

    def test_defaults(self):
        budget = SimulationBudget()
        self.assertEqual(budget.next(0), 1000)
        self.assertEqual(budget.next(2), 1250)

    def test_invalid_schedules(self):
        with self.assertRaises(ValueError):
            BudgetSchedule(floor=0)
        with self.assertRaises(ValueError):
            BudgetSchedule(initial=5000)
        with self.assertRaises(ValueError):
            BudgetSchedule(initial=100, floor=200)
        with self.assertRaises(ValueError):
            BudgetSchedule(increment=-1)


if __name__ == '__main__':
    unittest.main()
