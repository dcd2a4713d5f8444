import unittest
from nogo_mcts.symmetry import point_reflection, asymmetric_cells, opening_symmetry_move
from nogo_mcts.games.nogo import NoGoState, NoGoMove, Stone

# Black on cells 2 and 6, white on cell 18 (the reflection of 6), white to move
OPENING = [
    "..X..",
    ".X...",
    ".....",
    "...O.",
    ".....",
]


class TestSymmetry(unittest.TestCase):
    def test_point_reflection(self):
        state = NoGoState.from_rows(OPENING, Stone.WHITE)
        reflected = point_reflection(state)
        for cell in range(state.num_cells):
            self.assertEqual(reflected.occupant(cell), state.occupant(24 - cell))

    def test_asymmetric_cells(self):
        state = NoGoState.from_rows(OPENING, Stone.WHITE)
        self.assertEqual(asymmetric_cells(state, Stone.WHITE), [22])
        self.assertEqual(asymmetric_cells(state, Stone.BLACK), [])

    def test_opening_move(self):
        state = NoGoState.from_rows(OPENING, Stone.WHITE)
        self.assertEqual(opening_symmetry_move(state, Stone.WHITE), NoGoMove(22, Stone.WHITE))

    def test_symmetric_positions(self):
        self.assertIsNone(opening_symmetry_move(NoGoState(5, 5), Stone.BLACK))
        state = NoGoState(5, 5)
        state.apply_action(NoGoMove(0, Stone.BLACK))
        state.apply_action(NoGoMove(24, Stone.WHITE))
        self.assertIsNone(opening_symmetry_move(state, Stone.BLACK))


if __name__ == '__main__':
    unittest.main()
