"""
工具模块
包含最高分存储和可视化工具
"""

from .score_store import BestScoreStore
from .visualization import plot_selfplay_results

__all__ = ['BestScoreStore', 'plot_selfplay_results']
