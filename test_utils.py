# 文件名: test_utils.py

import random
import unittest

import torch

import utils
from cube_rotate import Axis, Color, InvalidArgument, Side, new_solved_cube


class TestUtils(unittest.TestCase):

    def solved_6x9(self):
        return [
            ['w'] * 9,  # 上
            ['g'] * 9,  # 左
            ['r'] * 9,  # 前
            ['b'] * 9,  # 右
            ['o'] * 9,  # 后
            ['y'] * 9,  # 下
        ]

    def test_moves_pool(self):
        self.assertEqual(utils.MOVES_POOL,
                         ['X0', 'X1', 'X2', 'Y0', 'Y1', 'Y2', 'Z0', 'Z1', 'Z2'])
        self.assertEqual(utils.VOCAB_SIZE, utils.MASK_OR_NOMOVE_TOKEN + 1)

    def test_parse_move(self):
        self.assertEqual(utils.parse_move('Y2'), (Axis.Y, 2))
        for bad in ('W1', 'X3', 'x0', ''):
            with self.assertRaises(InvalidArgument):
                utils.parse_move(bad)

    def test_move_str_to_idx(self):
        self.assertEqual(utils.move_str_to_idx('X0'), 0)
        self.assertEqual(utils.move_str_to_idx('Y2'), 5)
        self.assertEqual(utils.move_str_to_idx('Z2'), 8)
        self.assertEqual(utils.move_str_to_idx("XYZ"), utils.MASK_OR_NOMOVE_TOKEN)

    def test_move_idx_to_str(self):
        self.assertEqual(utils.move_idx_to_str(0), 'X0')
        self.assertEqual(utils.move_idx_to_str(5), 'Y2')
        with self.assertRaises(KeyError):
            _ = utils.move_idx_to_str(999)

    def test_cube_to_6x9(self):
        self.assertEqual(utils.cube_to_6x9(new_solved_cube()), self.solved_6x9())

        cube = new_solved_cube()
        cube.rotate(Axis.X, 0)
        state = utils.cube_to_6x9(cube)
        front = state[utils.FACE_ORDER.index(Side.FRONT)]
        self.assertEqual(front, ['w', 'r', 'r'] * 3)

    def test_create_cube_from_6x9(self):
        cube = utils.create_cube_from_6x9(self.solved_6x9())
        self.assertTrue(cube.is_done())
        self.assertEqual(cube, new_solved_cube())
        self.assertEqual(cube.face(Side.LEFT), [Color.GREEN] * 9)

        bad_state = self.solved_6x9()
        bad_state[0][0] = 'X'
        with self.assertRaises(ValueError):
            utils.create_cube_from_6x9(bad_state)
        with self.assertRaises(ValueError):
            utils.create_cube_from_6x9(self.solved_6x9()[:5])

    def test_6x9_round_trip_after_scramble(self):
        cube, _ = utils.random_scramble_cube(30, random.Random(4))
        self.assertEqual(utils.create_cube_from_6x9(utils.cube_to_6x9(cube)), cube)

    def test_convert_state_to_tensor(self):
        tensor_54 = utils.convert_state_to_tensor(self.solved_6x9())
        self.assertEqual(tensor_54.shape, (54,))
        self.assertEqual(tensor_54.dtype, torch.long)
        self.assertTrue((tensor_54[:9] == int(Color.WHITE)).all())
        self.assertTrue((tensor_54[9:18] == int(Color.GREEN)).all())
        self.assertTrue((tensor_54[18:27] == int(Color.RED)).all())
        self.assertTrue((tensor_54[27:36] == int(Color.BLUE)).all())
        self.assertTrue((tensor_54[36:45] == int(Color.ORANGE)).all())
        self.assertTrue((tensor_54[45:] == int(Color.YELLOW)).all())

        for bad in ('X', utils.UNKNOWN_CHAR):
            bad_state = self.solved_6x9()
            bad_state[2][4] = bad
            with self.assertRaises(ValueError):
                _ = utils.convert_state_to_tensor(bad_state)

    def test_convert_tensor_to_state_6x9(self):
        tensor_54 = torch.tensor([0] * 9 + [3] * 9 + [1] * 9 + [4] * 9 + [5] * 9 + [2] * 9)
        state_6x9 = utils.convert_tensor_to_state_6x9(tensor_54)
        self.assertEqual(state_6x9, self.solved_6x9())

        bad_tensor = torch.tensor([0, 1, 2])
        with self.assertRaises(AssertionError):
            _ = utils.convert_tensor_to_state_6x9(bad_tensor)

    def test_random_scramble_cube(self):
        cube, moves = utils.random_scramble_cube(25, random.Random(0))
        self.assertEqual(len(moves), 25)
        self.assertTrue(all(m in utils.MOVES_POOL for m in moves))

        # 每个动作的逆是同一动作做三次
        undo = [m for mv in reversed(moves) for m in [mv] * 3]
        utils.apply_moves(cube, undo)
        self.assertTrue(cube.is_done())

    def test_random_scramble_is_reproducible(self):
        a, moves_a = utils.random_scramble_cube(40, random.Random(123))
        b, moves_b = utils.random_scramble_cube(40, random.Random(123))
        self.assertEqual(moves_a, moves_b)
        self.assertEqual(a, b)


if __name__ == '__main__':
    unittest.main()
