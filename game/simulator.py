import numpy as np

from game.rules import can_merge, merged_value, sweep_cells, validate_direction, DIRECTIONS


def simulate_move(board, direction):
    """
    模拟移动，不修改传入的棋盘
    与 Board.move 使用同一扫描顺序和合并规则

    参数:
    board: 数值棋盘（numpy 数组，空格为 0）
    direction: 'up' / 'down' / 'left' / 'right'

    返回:
    (new_board, score_gain)，没有任何瓦片移动或合并时返回 None
    """
    direction = validate_direction(direction)
    new_board = np.array(board, dtype=np.int64, copy=True)
    grid_size = new_board.shape[0]
    moved = False
    score_gain = 0

    for (row, col), (t_row, t_col) in sweep_cells(direction, grid_size):
        value = int(new_board[row, col])
        if value == 0:
            continue
        target = int(new_board[t_row, t_col])

        if target == 0:
            new_board[t_row, t_col] = value
            new_board[row, col] = 0
            moved = True
        elif can_merge(value, target):
            merged = merged_value(value, target)
            new_board[t_row, t_col] = merged
            new_board[row, col] = 0
            score_gain += merged
            moved = True

    if not moved:
        return None
    return new_board, score_gain


def valid_action_mask(board):
    """
    检查每个方向是否为有效移动

    返回:
    长度为4的数组，顺序为 up, down, left, right (0=无效, 1=有效)
    """
    mask = np.zeros(len(DIRECTIONS), dtype=np.int32)
    for action, direction in enumerate(DIRECTIONS):
        if simulate_move(board, direction) is not None:
            mask[action] = 1
    return mask


def board_key(board):
    """棋盘的规范哈希键：只取决于数值与位置"""
    return np.ascontiguousarray(board, dtype=np.int64).tobytes()
