"""
棋盘评估函数
六个特征加权求和，数值越大越好
"""

import numpy as np

from config import HeuristicConfig


DEFAULT_WEIGHTS = {
    'openness': HeuristicConfig.OPENNESS_WEIGHT,
    'monotonicity': HeuristicConfig.MONOTONICITY_WEIGHT,
    'smoothness': HeuristicConfig.SMOOTHNESS_WEIGHT,
    'adjacency': HeuristicConfig.ADJACENCY_WEIGHT,
    'corner': HeuristicConfig.CORNER_WEIGHT,
}


def openness(board):
    """空格数的平方"""
    empty_cells = int(np.sum(board == 0))
    return empty_cells ** 2


def snake_path(board):
    """蛇形路径：偶数行 左→右，奇数行 右→左"""
    path = np.array(board, dtype=np.int64, copy=True)
    path[1::2] = path[1::2, ::-1]
    return path.flatten()


def monotonicity(board):
    """蛇形路径上非递增（且前一个非空）的相邻对数"""
    path = snake_path(board)
    current, following = path[:-1], path[1:]
    return int(np.sum((current >= following) & (current > 0)))


def smoothness(board):
    """右侧、下方相邻瓦片的 log2 差值之和（取负）"""
    board = np.asarray(board)
    occupied = board > 0
    logs = np.zeros(board.shape, dtype=np.float64)
    logs[occupied] = np.log2(board[occupied])

    horizontal = occupied[:, :-1] & occupied[:, 1:]
    vertical = occupied[:-1, :] & occupied[1:, :]
    penalty = np.sum(np.abs(logs[:, :-1] - logs[:, 1:])[horizontal])
    penalty += np.sum(np.abs(logs[:-1, :] - logs[1:, :])[vertical])
    return -float(penalty)


def adjacency(board):
    """1 和 2 的配对：1-2 相邻加分，1-1 / 2-2 扣分，挨着 3 以上轻微扣分"""
    grid_size = len(board)
    score = 0
    for row in range(grid_size):
        for col in range(grid_size):
            value = int(board[row][col])
            if value not in (1, 2):
                continue

            neighbors = []
            if row > 0:
                neighbors.append(int(board[row - 1][col]))
            if row < grid_size - 1:
                neighbors.append(int(board[row + 1][col]))
            if col > 0:
                neighbors.append(int(board[row][col - 1]))
            if col < grid_size - 1:
                neighbors.append(int(board[row][col + 1]))

            for neighbor in neighbors:
                if neighbor == 0:
                    continue
                if value + neighbor == 3:
                    score += HeuristicConfig.PAIR_BONUS
                elif neighbor == value:
                    score -= HeuristicConfig.SAME_PENALTY
                elif neighbor >= 3:
                    score -= HeuristicConfig.BLOCKED_PENALTY
    return score


def corner_integrity(board):
    """最大瓦片（行优先的第一个）在左上角加大分，在边上加中等分，否则扣分"""
    board = np.asarray(board)
    max_value = int(board.max())
    if max_value <= 0:
        return 0
    row, col = divmod(int(np.argmax(board)), board.shape[1])

    if row == 0 and col == 0:
        return max_value * HeuristicConfig.CORNER_BONUS
    if row == 0 or col == 0:
        return max_value * HeuristicConfig.EDGE_BONUS
    return -max_value * HeuristicConfig.CENTER_PENALTY


def weighted_position(board):
    """梯度权重矩阵加权和"""
    weight_map = np.array(HeuristicConfig.WEIGHT_MAP, dtype=np.int64)
    return int(np.sum(np.asarray(board, dtype=np.int64) * weight_map))


def evaluate_board(board, weights=None):
    """
    评估棋盘

    参数:
    board: 数值棋盘（numpy 数组，空格为 0）
    weights: 覆盖默认权重的字典（可选）

    返回:
    浮点评分
    """
    w = dict(DEFAULT_WEIGHTS)
    if weights:
        w.update(weights)

    board = np.asarray(board)
    score = (w['openness'] * openness(board)
             + w['monotonicity'] * monotonicity(board)
             + w['smoothness'] * smoothness(board)
             + w['adjacency'] * adjacency(board)
             + w['corner'] * corner_integrity(board)
             + weighted_position(board))
    return float(score)
