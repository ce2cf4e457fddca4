import numpy as np

from agents.heuristic import evaluate_board
from config import SearchConfig
from game.rules import DIRECTIONS
from game.simulator import board_key, simulate_move


class ExpectimaxAgent:
    """
    Expectimax 智能体
    Max 节点（玩家移动）与 Chance 节点（新瓦片出现）交替，带置换表
    """
    def __init__(self, depth=SearchConfig.DEPTH, sample_cells=SearchConfig.SAMPLE_CELLS, weights=None):
        if depth < 1:
            raise ValueError(f"搜索深度至少为1: {depth}")
        if sample_cells < 1:
            raise ValueError(f"采样空格数至少为1: {sample_cells}")
        self.depth = depth
        self.sample_cells = sample_cells
        self.weights = weights

        # 置换表：每次决策前清空
        self.transposition_table = {}
        self.stats = {'nodes': 0, 'cache_hits': 0, 'evaluations': 0}

        # 当前决策使用的概率分布
        self.root_probabilities = None
        self.deep_probabilities = None

    def get_best_move(self, game):
        """
        根据游戏当前状态选择最佳方向

        返回:
        'up' / 'down' / 'left' / 'right'，没有有效移动时返回 None
        """
        return self.search(
            game.board.values(),
            game.tile_probabilities(use_preview=True),
            game.tile_probabilities(use_preview=False),
        )

    def search(self, board, root_probabilities, deep_probabilities=None):
        """
        在给定棋盘和概率分布下搜索最佳方向

        参数:
        board: 数值棋盘
        root_probabilities: 根节点下第一层 Chance 节点使用的分布（已知预告）
        deep_probabilities: 更深层 Chance 节点使用的分布（预告已消耗）
        """
        self.transposition_table.clear()
        self.stats = {'nodes': 0, 'cache_hits': 0, 'evaluations': 0}
        self.root_probabilities = list(root_probabilities)
        self.deep_probabilities = list(deep_probabilities if deep_probabilities is not None
                                       else root_probabilities)

        board = np.asarray(board, dtype=np.int64)
        best_score = -np.inf
        best_move = None

        for direction in DIRECTIONS:
            result = simulate_move(board, direction)
            if result is None:
                continue
            score = self.expectimax_chance(result[0], self.depth - 1)
            if score > best_score:
                best_score = score
                best_move = direction

        return best_move

    def evaluate(self, board):
        self.stats['evaluations'] += 1
        return evaluate_board(board, self.weights)

    def probabilities_for(self, depth):
        # 根节点正下方的 Chance 层可以使用预告信息
        if depth == self.depth - 1:
            return self.root_probabilities
        return self.deep_probabilities

    def expectimax_max(self, board, depth):
        """Max 节点（玩家回合）"""
        if depth == 0:
            return self.evaluate(board)

        self.stats['nodes'] += 1
        cache_key = ('max', board_key(board), depth)
        if cache_key in self.transposition_table:
            self.stats['cache_hits'] += 1
            return self.transposition_table[cache_key]

        max_score = -np.inf
        has_valid_move = False
        for direction in DIRECTIONS:
            result = simulate_move(board, direction)
            if result is None:
                continue
            has_valid_move = True
            max_score = max(max_score, self.expectimax_chance(result[0], depth - 1))

        # 没有有效移动时返回当前评估值
        if not has_valid_move:
            max_score = self.evaluate(board)

        self.transposition_table[cache_key] = max_score
        return max_score

    def expectimax_chance(self, board, depth):
        """Chance 节点（瓦片出现）"""
        if depth == 0:
            return self.evaluate(board)

        self.stats['nodes'] += 1
        cache_key = ('chance', board_key(board), depth)
        if cache_key in self.transposition_table:
            self.stats['cache_hits'] += 1
            return self.transposition_table[cache_key]

        # 行优先顺序的空格
        empty_cells = [tuple(cell) for cell in np.argwhere(board == 0)]
        if not empty_cells:
            score = self.evaluate(board)
            self.transposition_table[cache_key] = score
            return score

        probabilities = self.probabilities_for(depth)
        cell_probability = 1.0 / len(empty_cells)

        # 只采样前几个空格，全部展开计算量太大
        sample_size = min(self.sample_cells, len(empty_cells))
        expected_score = 0.0
        for row, col in empty_cells[:sample_size]:
            for value, probability in probabilities:
                new_board = board.copy()
                new_board[row, col] = value
                score = self.expectimax_max(new_board, depth - 1)
                expected_score += score * cell_probability * probability

        final_score = expected_score / sample_size
        self.transposition_table[cache_key] = final_score
        return final_score
