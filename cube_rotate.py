import copy
from enum import IntEnum


class Color(IntEnum):
    WHITE = 0
    RED = 1
    YELLOW = 2
    GREEN = 3
    BLUE = 4
    ORANGE = 5
    UNKNOWN = 6


class Side(IntEnum):
    FRONT = 0
    BACK = 1
    RIGHT = 2
    LEFT = 3
    TOP = 4
    BOTTOM = 5


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2


class InvalidArgument(ValueError):
    """非法的转动参数（轴或层号越界）。"""


# 复原态的配色：每个外表面一种颜色
SOLVED_COLORS = {
    Side.FRONT: Color.RED,
    Side.BACK: Color.ORANGE,
    Side.LEFT: Color.GREEN,
    Side.RIGHT: Color.BLUE,
    Side.BOTTOM: Color.YELLOW,
    Side.TOP: Color.WHITE,
}

# 小块绕某个轴自转时，4 个侧面的循环顺序（沿轴的两个面不动）
SPIN_LOOPS = {
    Axis.X: (Side.FRONT, Side.BOTTOM, Side.BACK, Side.TOP),
    Axis.Y: (Side.FRONT, Side.RIGHT, Side.BACK, Side.LEFT),
    Axis.Z: (Side.TOP, Side.LEFT, Side.BOTTOM, Side.RIGHT),
}

# X 轴方向一层的外圈 8 个位置 (x, y, z)，按环形顺序排列，中心块 (0, 1, 1) 不在环上
BASE_RING = (
    (0, 0, 0),
    (0, 1, 0), (0, 2, 0),
    (0, 2, 1), (0, 2, 2),
    (0, 1, 2), (0, 0, 2),
    (0, 0, 1),
)

PLANES = (0, 1, 2)


def rotate_slots(slots, keys):
    """
    把 slots 中 keys 对应位置上的值循环移动一格：
    keys[i] 上的值移到 keys[i+1]，最后一个 key 上的值回到 keys[0]。

    slots: 任意支持下标读写的容器（list、dict 等）
    keys: 有序的下标序列
    """
    last = slots[keys[-1]]
    for current, nxt in reversed(list(zip(keys[:-1], keys[1:]))):
        slots[nxt] = slots[current]
    slots[keys[0]] = last


def side_coord(side, row, col):
    """
    返回某个面第 row 行、第 col 列的贴纸所在小块的坐标 (x, y, z)。
    row 0 为展开图中该面的最上一行。
    """
    if side == Side.FRONT:
        return col, 2 - row, 2
    if side == Side.BACK:
        return 2 - col, 2 - row, 0
    if side == Side.LEFT:
        return 0, 2 - row, col
    if side == Side.RIGHT:
        return 2, 2 - row, 2 - col
    if side == Side.BOTTOM:
        return col, 0, 2 - row
    return col, 2, row


def side_coords(side):
    """某个面 9 个贴纸对应的坐标，按行优先排列。"""
    return [side_coord(side, r, c) for r in range(3) for c in range(3)]


def exterior_sides(x, y, z):
    """坐标 (x, y, z) 处的小块朝向魔方外部的那些面。"""
    sides = []
    if z == 2:
        sides.append(Side.FRONT)
    if z == 0:
        sides.append(Side.BACK)
    if x == 2:
        sides.append(Side.RIGHT)
    if x == 0:
        sides.append(Side.LEFT)
    if y == 2:
        sides.append(Side.TOP)
    if y == 0:
        sides.append(Side.BOTTOM)
    return sides


def _orient(axis, x, y, z):
    # 以 X 轴为基准的坐标，重新标号到目标轴上
    if axis == Axis.X:
        return x, y, z
    if axis == Axis.Y:
        return z, x, y
    return y, z, x


def layer_ring(axis, plane):
    """第 plane 层（沿 axis）外圈 8 个坐标，环形顺序。"""
    return [_orient(axis, x + plane, y, z) for x, y, z in BASE_RING]


def layer_center(axis, plane):
    """第 plane 层（沿 axis）的中心坐标。"""
    return _orient(axis, plane, 1, 1)


def _index(x, y, z):
    return x * 9 + y * 3 + z


class Block:
    """一个小块：6 个朝向各自的颜色，内部朝向为 Color.UNKNOWN。"""

    __slots__ = ('faces',)

    def __init__(self, faces=None):
        if faces is None:
            faces = [Color.UNKNOWN] * len(Side)
        self.faces = list(faces)

    def __getitem__(self, side):
        return self.faces[side]

    def __setitem__(self, side, color):
        self.faces[side] = color

    def rotate(self, axis):
        rotate_slots(self.faces, SPIN_LOOPS[axis])

    def copy(self):
        return Block(self.faces)

    def __eq__(self, other):
        if not isinstance(other, Block):
            return NotImplemented
        return self.faces == other.faces

    def __repr__(self):
        labels = ', '.join(f"{s.name}={Color(self.faces[s]).name}" for s in Side)
        return f"Block({labels})"


class Cube:
    """
    3×3×3 魔方状态。

    内部是一个长度为 27 的定长列表，下标由坐标 (x, y, z) ∈ [0,2]^3 计算；
    小块只会在转动时换位置，永远不会新增或删除。
    """

    def __init__(self, colors=None):
        if colors is None:
            colors = SOLVED_COLORS
        _check_scheme(colors)
        self.blocks = [Block() for _ in range(27)]
        for side, color in colors.items():
            for x, y, z in side_coords(Side(side)):
                self.blocks[_index(x, y, z)][side] = Color(color)

    @classmethod
    def from_faces(cls, faces):
        """
        根据 6 个面的颜色重建魔方。

        faces: dict，Side -> 长度为 9 的颜色序列（行优先，与 face() 顺序一致）
        未出现在任何面上的朝向保持 Color.UNKNOWN。
        """
        cube = cls.__new__(cls)
        cube.blocks = [Block() for _ in range(27)]
        for side in Side:
            if side not in faces:
                raise InvalidArgument(f"缺少面: {side.name}")
            colors = list(faces[side])
            if len(colors) != 9:
                raise InvalidArgument(f"{side.name} 面需要 9 个颜色, 实际 {len(colors)}")
            for (x, y, z), color in zip(side_coords(side), colors):
                cube.blocks[_index(x, y, z)][side] = Color(color)
        return cube

    def block(self, x, y, z):
        return self.blocks[_index(x, y, z)]

    def __iter__(self):
        for x in range(3):
            for y in range(3):
                for z in range(3):
                    yield (x, y, z), self.blocks[_index(x, y, z)]

    def face(self, side):
        """读取某个面的 9 个颜色，行优先，第 0 行为展开图中的最上一行。"""
        side = Side(side)
        return [self.block(*p)[side] for p in side_coords(side)]

    def faces(self):
        return {side: self.face(side) for side in Side}

    def rotate(self, axis, plane):
        """
        把沿 axis 的第 plane 层转动 90°。

        1. 外圈 8 个位置上的小块整体循环移动两格（8 个采样点上的两格即 90°）；
        2. 外圈和中心的小块各自绕 axis 自转，使贴纸朝向与新位置一致。
        参数非法时抛出 InvalidArgument，状态不变。
        """
        try:
            axis = Axis(axis)
        except ValueError:
            raise InvalidArgument(f"未知转轴: {axis!r}") from None
        if isinstance(plane, bool) or not isinstance(plane, int) or plane not in PLANES:
            raise InvalidArgument(f"层号必须是 0、1 或 2, 实际 {plane!r}")

        ring = [_index(*p) for p in layer_ring(axis, plane)]
        for _ in range(2):
            rotate_slots(self.blocks, ring)

        for i in ring + [_index(*layer_center(axis, plane))]:
            self.blocks[i].rotate(axis)

    def is_done(self):
        return all(len(set(self.face(side))) == 1 for side in Side)

    @property
    def done(self):
        return self.is_done()

    def copy(self):
        return copy.deepcopy(self)

    def __deepcopy__(self, memo):
        cube = Cube.__new__(Cube)
        cube.blocks = [b.copy() for b in self.blocks]
        return cube

    def __eq__(self, other):
        if not isinstance(other, Cube):
            return NotImplemented
        return self.blocks == other.blocks

    def __repr__(self):
        return f"Cube(done={self.is_done()})"


def _check_scheme(colors):
    if set(colors) != set(Side):
        raise InvalidArgument("配色方案必须为 6 个面各指定一种颜色")
    values = [Color(c) for c in colors.values()]
    if Color.UNKNOWN in values or len(set(values)) != 6:
        raise InvalidArgument("配色方案需要 6 种互不相同的真实颜色")


def new_solved_cube(colors=None):
    """创建一个复原状态的魔方。"""
    return Cube(colors)
