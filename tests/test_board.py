import unittest

from nqueens.board import Position, all_positions, row_for, column_for, diagonal_for, \
    blocked_positions_for_position, blocked_positions, possible_positions, attacks, is_solution


class TestPosition(unittest.TestCase):

    def test_structural_equality(self):
        self.assertEqual(Position(1, 2), Position(1, 2))
        self.assertEqual(Position(1, 2), (1, 2))
        self.assertNotEqual(Position(1, 2), Position(2, 1))
        self.assertEqual(len({Position(0, 0), Position(0, 0), (0, 0)}), 1)

    def test_order(self):
        self.assertEqual(sorted([Position(1, 0), Position(0, 3), Position(0, 1)]),
                         [(0, 1), (0, 3), (1, 0)])

    def test_repr(self):
        self.assertEqual(repr(Position(3, 1)), "(3, 1)")


class TestBlocking(unittest.TestCase):

    def test_all_positions(self):
        self.assertEqual(all_positions(0), [])
        self.assertEqual(all_positions(2), [(0, 0), (1, 0), (0, 1), (1, 1)])

    def test_row_column(self):
        self.assertEqual(row_for(3, (1, 2)), [(0, 2), (1, 2), (2, 2)])
        self.assertEqual(column_for(3, (1, 2)), [(1, 0), (1, 1), (1, 2)])

    def test_diagonal(self):
        self.assertEqual(diagonal_for(3, (1, 1)), [(0, 0), (2, 0), (1, 1), (0, 2), (2, 2)])
        self.assertEqual(diagonal_for(4, (0, 0)), [(0, 0), (1, 1), (2, 2), (3, 3)])

    def test_blocked_for_position(self):
        blocked = blocked_positions_for_position(4, (0, 0))
        self.assertEqual(len(blocked), len(set(blocked)))
        self.assertEqual(set(blocked), {(0, 0), (1, 0), (2, 0), (3, 0),
                                        (0, 1), (0, 2), (0, 3),
                                        (1, 1), (2, 2), (3, 3)})

    def test_blocked_union(self):
        self.assertEqual(blocked_positions(4, []), [])
        blocked = blocked_positions(4, [(0, 0), (3, 0)])
        self.assertEqual(len(blocked), len(set(blocked)))
        self.assertIn((3, 3), blocked)
        self.assertIn((0, 3), blocked)
        self.assertNotIn((1, 3), blocked)

    def test_possible_positions(self):
        self.assertEqual(possible_positions(2), all_positions(2))
        self.assertEqual(possible_positions(2, [(0, 0)]), [])
        self.assertEqual(possible_positions(4, [(1, 0)]), [(3, 1), (0, 2), (2, 2), (0, 3), (2, 3), (3, 3)])
        self.assertEqual(possible_positions(4, [(1, 0)], row=1), [(3, 1)])
        self.assertEqual(possible_positions(4, [(1, 0), (3, 1)], row=2), [(0, 2)])


class TestSolutionCheck(unittest.TestCase):

    def test_attacks(self):
        self.assertTrue(attacks((0, 0), (0, 3)))
        self.assertTrue(attacks((0, 2), (3, 2)))
        self.assertTrue(attacks((1, 1), (3, 3)))
        self.assertTrue(attacks((3, 0), (0, 3)))
        self.assertFalse(attacks((0, 0), (1, 2)))

    def test_is_solution(self):
        self.assertTrue(is_solution(0, []))
        self.assertTrue(is_solution(4, [(1, 0), (3, 1), (0, 2), (2, 3)]))
        self.assertFalse(is_solution(4, [(1, 0), (3, 1), (0, 2)]))
        self.assertFalse(is_solution(4, [(0, 0), (1, 2), (2, 4), (3, 1)]))
        self.assertFalse(is_solution(4, [(0, 0), (1, 1), (2, 3), (3, 2)]))


if __name__ == '__main__':
    unittest.main()
