import unittest
from nogo_mcts.algorithms.ProofNumber import ProofNumberSolver, INFINITY
from nogo_mcts.games.nogo import NoGoState, NoGoMove, Stone

ENDGAME = ["O.O", "X.X", "XXX"]


class TestProofNumberSolver(unittest.TestCase):
    def test_single_winning_move(self):
        solver = ProofNumberSolver(Stone.BLACK)
        root = solver.solve(NoGoState.from_rows(ENDGAME, Stone.BLACK))
        self.assertTrue(root.is_proven)
        self.assertEqual(root.disproof, INFINITY)
        self.assertEqual(root.winning_move, NoGoMove(4, Stone.BLACK))
        self.assertEqual(list(solver.proof_line(root)), [NoGoMove(4, Stone.BLACK)])

    def test_lost_position(self):
        solver = ProofNumberSolver(Stone.BLACK)
        root = solver.solve(NoGoState.from_rows(ENDGAME, Stone.WHITE))
        self.assertTrue(root.is_disproven)
        self.assertEqual(root.proof, INFINITY)
        self.assertIsNone(root.winning_move)

    def test_same_position_other_side(self):
        solver = ProofNumberSolver(Stone.WHITE)
        root = solver.solve(NoGoState.from_rows(ENDGAME, Stone.WHITE))
        self.assertTrue(root.is_proven)
        self.assertEqual(root.winning_move, NoGoMove(1, Stone.WHITE))

    def test_searching_side_without_moves(self):
        state = NoGoState.from_rows(ENDGAME, Stone.WHITE)
        state.apply_action(NoGoMove(1, Stone.WHITE))
        solver = ProofNumberSolver(Stone.BLACK)
        root = solver.solve(state)
        self.assertTrue(root.is_disproven)
        self.assertEqual(root.children, {})
        self.assertEqual(solver.nodes_expanded, 1)

    def test_skips_losing_first_move(self):
        # On a 1x3 strip the edge cells lose and the centre wins
        solver = ProofNumberSolver(Stone.BLACK)
        root = solver.solve(NoGoState(1, 3))
        self.assertTrue(root.is_proven)
        self.assertEqual(root.winning_move, NoGoMove(1, Stone.BLACK))
        self.assertTrue(root.children[NoGoMove(0, Stone.BLACK)].is_disproven)
        self.assertEqual(solver.solved_moves(root), [NoGoMove(1, Stone.BLACK)])
        # Remaining moves are not searched once a win is found
        self.assertNotIn(NoGoMove(2, Stone.BLACK), root.children)

    def test_second_player_wins_strip(self):
        state = NoGoState(1, 4)
        self.assertTrue(ProofNumberSolver(Stone.BLACK).solve(state).is_disproven)

        solver = ProofNumberSolver(Stone.WHITE)
        root = solver.solve(state)
        self.assertTrue(root.is_proven)
        self.assertEqual(len(root.children), 4)
        line = list(solver.proof_line(root))
        self.assertEqual(line, [NoGoMove(0, Stone.BLACK), NoGoMove(2, Stone.WHITE)])

        for move in line:
            state.apply_action(move)
        self.assertTrue(state.is_terminal)
        self.assertEqual(state.winner, Stone.WHITE)


if __name__ == '__main__':
    unittest.main()
