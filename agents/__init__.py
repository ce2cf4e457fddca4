"""
智能体模块
包含 Expectimax 搜索与棋盘评估函数
"""

from .heuristic import evaluate_board
from .expectimax_agent import ExpectimaxAgent

__all__ = ['evaluate_board', 'ExpectimaxAgent']
