from collections import namedtuple

import numpy as np

from config import GameConfig
from game.rules import can_merge, is_tile_value, merged_value, sweep_cells, validate_direction, DIRECTIONS
from game.simulator import simulate_move


MoveResult = namedtuple('MoveResult', ('changed', 'score_delta', 'merges'))


class Tile:
    """棋盘上的一个瓦片，id 在一局内唯一且稳定"""
    def __init__(self, tile_id, value, row, col):
        self.id = tile_id
        self.value = value
        self.row = row
        self.col = col

    def to_dict(self):
        return {'id': self.id, 'value': self.value, 'row': self.row, 'col': self.col}

    def __repr__(self):
        return f"Tile(id={self.id}, value={self.value}, row={self.row}, col={self.col})"


class Board:
    """
    棋盘状态
    瓦片集合是唯一的数据来源，网格（格子 -> 瓦片 id）按需生成
    """
    def __init__(self, grid_size=GameConfig.GRID_SIZE):
        self.grid_size = grid_size
        self.tiles = {}
        self.next_tile_id = 0

    def clear(self):
        self.tiles = {}
        self.next_tile_id = 0

    def grid(self):
        """由瓦片数据生成网格，空格为 None"""
        grid = [[None] * self.grid_size for _ in range(self.grid_size)]
        for tile in self.tiles.values():
            grid[tile.row][tile.col] = tile.id
        return grid

    def values(self):
        """返回数值棋盘（numpy 数组），空格为 0"""
        board = np.zeros((self.grid_size, self.grid_size), dtype=np.int64)
        for tile in self.tiles.values():
            board[tile.row, tile.col] = tile.value
        return board

    def tile_list(self):
        return sorted(self.tiles.values(), key=lambda t: t.id)

    def tile_at(self, row, col):
        for tile in self.tiles.values():
            if tile.row == row and tile.col == col:
                return tile
        return None

    def empty_cells(self):
        """按行优先顺序返回所有空格"""
        grid = self.grid()
        return [(row, col)
                for row in range(self.grid_size)
                for col in range(self.grid_size)
                if grid[row][col] is None]

    def max_tile(self):
        return max((tile.value for tile in self.tiles.values()), default=0)

    def place_tile(self, value, row, col):
        """
        放置新瓦片，这是创建瓦片的唯一入口

        返回:
        新瓦片的 id
        """
        if not (0 <= row < self.grid_size and 0 <= col < self.grid_size):
            raise ValueError(f"格子 ({row}, {col}) 超出棋盘范围")
        if self.tile_at(row, col) is not None:
            raise ValueError(f"格子 ({row}, {col}) 已被占用")
        value = int(value)
        if not is_tile_value(value):
            raise ValueError(f"无效瓦片数值: {value}")
        tile_id = self.next_tile_id
        self.next_tile_id += 1
        self.tiles[tile_id] = Tile(tile_id, value, row, col)
        return tile_id

    def load_values(self, values):
        """根据数值棋盘重建瓦片（用于测试和回放）"""
        self.clear()
        for row, line in enumerate(values):
            for col, value in enumerate(line):
                if value:
                    self.place_tile(value, row, col)

    def move(self, direction):
        """
        按方向移动所有瓦片（每个瓦片最多移动一格）

        返回:
        MoveResult(changed, score_delta, merges)
        """
        direction = validate_direction(direction)
        grid = self.grid()
        changed = False
        score_delta = 0
        merges = 0

        for (row, col), (t_row, t_col) in sweep_cells(direction, self.grid_size):
            tile_id = grid[row][col]
            if tile_id is None:
                continue
            tile = self.tiles[tile_id]
            target_id = grid[t_row][t_col]

            if target_id is None:
                # 目标格为空：移动一格
                tile.row, tile.col = t_row, t_col
                grid[t_row][t_col] = tile_id
                grid[row][col] = None
                changed = True
            else:
                target = self.tiles[target_id]
                if can_merge(tile.value, target.value):
                    # 被吸收的瓦片移除，目标瓦片更新数值
                    target.value = merged_value(tile.value, target.value)
                    score_delta += target.value
                    merges += 1
                    del self.tiles[tile_id]
                    grid[row][col] = None
                    changed = True

        return MoveResult(changed, score_delta, merges)

    def has_adjacent_merge(self):
        grid = self.grid()
        for row in range(self.grid_size):
            for col in range(self.grid_size):
                current_id = grid[row][col]
                if current_id is None:
                    continue
                current = self.tiles[current_id].value
                if col < self.grid_size - 1 and grid[row][col + 1] is not None:
                    if can_merge(current, self.tiles[grid[row][col + 1]].value):
                        return True
                if row < self.grid_size - 1 and grid[row + 1][col] is not None:
                    if can_merge(current, self.tiles[grid[row + 1][col]].value):
                        return True
        return False

    def is_game_over(self):
        """棋盘已满且没有任何相邻可合并的瓦片"""
        if self.empty_cells():
            return False
        return not self.has_adjacent_merge()

    def valid_moves(self):
        board = self.values()
        return [direction for direction in DIRECTIONS
                if simulate_move(board, direction) is not None]
