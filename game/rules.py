"""
Threes 规则：方向、合并规则、扫描顺序
Board.move 与 simulate_move 共用这里的定义，保证两者结果完全一致
"""

DIRECTIONS = ('up', 'down', 'left', 'right')


class InvalidDirection(ValueError):
    """方向不在 up/down/left/right 之内"""

    def __init__(self, direction):
        super().__init__(f"无效方向: {direction!r}，可选: {', '.join(DIRECTIONS)}")
        self.direction = direction


def validate_direction(direction):
    """检查方向是否合法，合法则原样返回"""
    if direction not in DIRECTIONS:
        raise InvalidDirection(direction)
    return direction


def is_tile_value(value):
    """瓦片只能是 1、2 或 3·2^k"""
    if value in (1, 2):
        return True
    if value < 3 or value % 3:
        return False
    base = value // 3
    return base & (base - 1) == 0


def can_merge(value1, value2):
    """
    判断两个瓦片能否合并
    1 和 2 合成 3（与顺序无关）；3 以上相同数字合并；其余不能合并
    """
    if (value1 == 1 and value2 == 2) or (value1 == 2 and value2 == 1):
        return True
    return value1 == value2 and value1 >= 3


def merged_value(value1, value2):
    """返回合并后的值，不能合并时返回 value1"""
    if (value1 == 1 and value2 == 2) or (value1 == 2 and value2 == 1):
        return 3
    if value1 == value2 and value1 >= 3:
        return value1 * 2
    return value1


def sweep_cells(direction, grid_size):
    """
    按处理顺序生成 ((row, col), (target_row, target_col))
    从靠近目标边的一侧开始，离目标边越远越晚处理
    """
    if direction == 'left':
        for row in range(grid_size):
            for col in range(1, grid_size):
                yield (row, col), (row, col - 1)
    elif direction == 'right':
        for row in range(grid_size):
            for col in range(grid_size - 2, -1, -1):
                yield (row, col), (row, col + 1)
    elif direction == 'up':
        for col in range(grid_size):
            for row in range(1, grid_size):
                yield (row, col), (row - 1, col)
    elif direction == 'down':
        for col in range(grid_size):
            for row in range(grid_size - 2, -1, -1):
                yield (row, col), (row + 1, col)
    else:
        raise InvalidDirection(direction)


def spawn_edge(direction, grid_size):
    """新瓦片出现的边：与移动方向相反的一侧"""
    last = grid_size - 1
    if direction == 'left':
        return [(row, last) for row in range(grid_size)]
    if direction == 'right':
        return [(row, 0) for row in range(grid_size)]
    if direction == 'up':
        return [(last, col) for col in range(grid_size)]
    if direction == 'down':
        return [(0, col) for col in range(grid_size)]
    raise InvalidDirection(direction)
