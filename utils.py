# utils.py
import random

import torch

from cube_rotate import Axis, Color, Cube, InvalidArgument, PLANES, Side, new_solved_cube

# 贴纸颜色字符，下标与 Color 的值一致；'u' 只出现在内部朝向上
COLOR_CHARS = ['w', 'r', 'y', 'g', 'b', 'o']
UNKNOWN_CHAR = 'u'

char_to_color = {c: Color(i) for i, c in enumerate(COLOR_CHARS)}
char_to_color[UNKNOWN_CHAR] = Color.UNKNOWN

# 6x9 表示中各行对应的面：上、左、前、右、后、下
FACE_ORDER = [Side.TOP, Side.LEFT, Side.FRONT, Side.RIGHT, Side.BACK, Side.BOTTOM]

# 9 种合法转动：轴名 + 层号
MOVES_POOL = [f"{axis.name}{plane}" for axis in Axis for plane in PLANES]
MOVE_TO_IDX = {m: i for i, m in enumerate(MOVES_POOL)}
IDX_TO_MOVE = {i: m for m, i in MOVE_TO_IDX.items()}

PAD_TOKEN = 9
EOS_TOKEN = 10
SOS_TOKEN = 11
MASK_OR_NOMOVE_TOKEN = 12

VOCAB_SIZE = 13  # 0..8(动作) + 9(PAD) + 10(EOS) + 11(SOS) + 12(MASK)


def parse_move(move_str):
    """把 'X0'、'Z2' 这样的动作字符串解析成 (Axis, plane)。"""
    if move_str not in MOVE_TO_IDX:
        raise InvalidArgument(f"未知动作: {move_str!r}")
    return Axis[move_str[0]], int(move_str[1])


def apply_moves(cube, moves):
    """依次在 cube 上执行 moves（动作字符串列表），原地修改并返回 cube。"""
    for mv in moves:
        axis, plane = parse_move(mv)
        cube.rotate(axis, plane)
    return cube


def move_str_to_idx(move_str):
    """把动作字符串 (如 'X0','Y2') -> 0..8 的整数标签"""
    if move_str not in MOVE_TO_IDX:
        return MASK_OR_NOMOVE_TOKEN
    return MOVE_TO_IDX[move_str]


def move_idx_to_str(move_idx):
    """把 0..8 -> 'X0'..'Z2'"""
    return IDX_TO_MOVE[move_idx]


def color_to_char(color):
    if color == Color.UNKNOWN:
        return UNKNOWN_CHAR
    return COLOR_CHARS[color]


def cube_to_6x9(cube):
    """
    将当前魔方 cube 序列化成 6x9 的二维数组，
    行顺序为 FACE_ORDER，每行 9 个颜色字符按行优先排列。
    """
    return [[color_to_char(c) for c in cube.face(side)] for side in FACE_ORDER]


def create_cube_from_6x9(state_6x9):
    """
    根据 6×9 颜色字符布局，构造一个 Cube 实例。

    假设 6×9 的行顺序与 FACE_ORDER 一致，
    且每行的 9 个字符按 row-major (3×3) 顺序排列。
    """
    if len(state_6x9) != 6:
        raise ValueError(f"需要 6 个面, 实际 {len(state_6x9)}")
    faces = {}
    for side, face_chars in zip(FACE_ORDER, state_6x9):
        try:
            faces[side] = [char_to_color[ch] for ch in face_chars]
        except KeyError as e:
            raise ValueError(f"未知颜色: {e.args[0]}") from None
    return Cube.from_faces(faces)


def convert_state_to_tensor(state_6x9, color_to_id=None):
    """
    state_6x9: 形如 [[c1..c9], [c1..c9], ..., 共6行], 每行9个字符
    color_to_id: dict, 把 'w','r','y','g','b','o' 映射到 0..5
    返回: 形如 (54,) 的 LongTensor
    """
    if color_to_id is None:
        color_to_id = {c: i for i, c in enumerate(COLOR_CHARS)}

    flat = []
    for face_row in state_6x9:
        for color_char in face_row:
            if color_char not in color_to_id:
                raise ValueError(f"未知颜色: {color_char}")
            flat.append(color_to_id[color_char])
    return torch.tensor(flat, dtype=torch.long)


def convert_tensor_to_state_6x9(tensor_54, id_to_color=None):
    """
    将形如 (54,) 的 LongTensor 转回 6×9 的颜色字符矩阵。

    Args:
        tensor_54: 形如 (54,) 的张量，每个元素是 0..5，对应某种颜色
        id_to_color: dict, 比如 {0:'w', 1:'r', 2:'y', 3:'g', 4:'b', 5:'o'}

    Returns:
        state_6x9: list[list[str]]，共 6 行，每行 9 个颜色字符
    """
    if id_to_color is None:
        id_to_color = {i: c for i, c in enumerate(COLOR_CHARS)}
    tensor_54 = tensor_54.view(-1)
    assert tensor_54.size(0) == 54, "输入张量必须长度为 54"

    values = tensor_54.tolist()
    return [[id_to_color[v] for v in values[i * 9:(i + 1) * 9]] for i in range(6)]


def random_scramble_cube(steps=100, rng=None):
    """随机打乱一个魔方并返回 (cube, moves)"""
    rng = rng or random
    moves = [rng.choice(MOVES_POOL) for _ in range(steps)]
    cube = apply_moves(new_solved_cube(), moves)
    return cube, moves


if __name__ == '__main__':
    cube, moves = random_scramble_cube(5)
    print(moves)
    state = cube_to_6x9(cube)
    print(state)
    print(convert_state_to_tensor(state))
    print(create_cube_from_6x9(state) == cube)
