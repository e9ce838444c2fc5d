# play_cube.py
import random

from omegaconf import OmegaConf

from cube_config import load_config
from cube_rotate import Side
from utils import color_to_char, parse_move, random_scramble_cube


def _rows(cube, side):
    face = [color_to_char(c) for c in cube.face(side)]
    return [''.join(face[r * 3:(r + 1) * 3]) for r in range(3)]


def render(cube):
    """
    把魔方画成展开图：
        上
      左前右后
        下
    顶部的 123 与左侧的 789 / 654 是按键提示。
    """
    top = _rows(cube, Side.TOP)
    band = [_rows(cube, s) for s in (Side.LEFT, Side.FRONT, Side.RIGHT, Side.BACK)]
    bottom = _rows(cube, Side.BOTTOM)

    lines = ["    123"]
    lines.append("    " + top[0])
    lines.append("    " + top[1])
    lines.append(" 789" + top[2])
    for i in range(3):
        lines.append(str(6 - i) + ''.join(rows[i] for rows in band))
    for i in range(3):
        lines.append("    " + bottom[i])
    return '\n'.join(lines)


def play(cube, bindings, read_key=input, write=print):
    """
    交互循环：读按键、转动、重画，直到魔方复原。
    未绑定的按键被忽略；输入结束 (EOFError) 时退出并返回 False。
    """
    moves = {str(k): parse_move(v) for k, v in bindings.items()}
    write(render(cube))
    while not cube.is_done():
        try:
            key = read_key().strip()
        except EOFError:
            return False
        if key in moves:
            axis, plane = moves[key]
            cube.rotate(axis, plane)
        write(render(cube))
    write("复原成功!")
    return True


def main(config_path="config.yaml"):
    config = load_config(config_path)
    rng = random.Random(config.scramble.seed)
    cube, _ = random_scramble_cube(config.scramble.steps, rng)
    bindings = OmegaConf.to_container(config.play.bindings, resolve=True)
    return play(cube, bindings)


if __name__ == '__main__':
    main()
