import unittest

from hillclimb.util.data_generator import generate_random_board, generate_board_set


class TestDataGenerator(unittest.TestCase):

    def test_board_shape(self):
        for n in (1, 4, 8, 12):
            with self.subTest(n=n):
                board = generate_random_board(n, seed=7)
                self.assertEqual(board.n, n)
                self.assertTrue(all(0 <= row < n for row in board.rows))

    def test_same_seed_same_board(self):
        self.assertEqual(generate_random_board(8, seed=42), generate_random_board(8, seed=42))

    def test_board_set(self):
        boards = generate_board_set(8, count=5, seed=1)

        self.assertEqual(len(boards), 5)
        self.assertEqual(boards, generate_board_set(8, count=5, seed=1))

    def test_invalid_size_raises(self):
        with self.assertRaises(ValueError):
            generate_random_board(0)


if __name__ == '__main__':
    unittest.main()
