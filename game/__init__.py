"""
游戏模块
包含 Threes 游戏规则、牌堆、棋盘与移动模拟
导入本包时注册 gymnasium 环境 threes/Threes-v0
"""

from .rules import DIRECTIONS, InvalidDirection, can_merge, is_tile_value, merged_value
from .deck import Deck
from .board import Board, Tile, MoveResult
from .simulator import simulate_move, valid_action_mask
from .probability import tile_probabilities
from .threes import ThreesGame
from .env import ThreesEnv

__all__ = ['DIRECTIONS', 'InvalidDirection', 'can_merge', 'is_tile_value', 'merged_value', 'Deck',
           'Board', 'Tile', 'MoveResult', 'simulate_move', 'valid_action_mask',
           'tile_probabilities', 'ThreesGame', 'ThreesEnv']
