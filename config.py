"""
Threes 合并游戏 + Expectimax AI 配置文件
包含所有可调参数的默认值
"""


class GameConfig:
    """游戏规则配置"""

    GRID_SIZE = 4
    INITIAL_TILES = 9  # 开局放置的瓦片数量

    # 牌堆：1、2、3 各 4 张，共 12 张
    DECK_COMPOSITION = {1: 4, 2: 4, 3: 4}

    # 奖励牌（bonus）参数
    BONUS_THRESHOLD = 48       # 最大瓦片达到该值后才可能出现奖励牌
    BONUS_CHANCE = 1.0 / 21.0  # 抽到 3 时转换为奖励牌的概率
    BONUS_MIN_VALUE = 6
    BONUS_LIMIT_DIVISOR = 8    # 奖励牌上限 = floor(最大瓦片 / 8)

    # 最高分存储键
    BEST_SCORE_KEY = "threes-best-score"


class SearchConfig:
    """Expectimax 搜索配置"""

    DEPTH = 3         # 搜索深度
    SAMPLE_CELLS = 3  # Chance 节点最多采样的空格数量

    # 概率模型兜底分布
    FALLBACK_PROBABILITIES = [(1, 0.33), (2, 0.33), (3, 0.34)]


class HeuristicConfig:
    """评估函数权重配置"""

    OPENNESS_WEIGHT = 1000     # 空格数平方
    MONOTONICITY_WEIGHT = 800  # 蛇形路径单调性
    SMOOTHNESS_WEIGHT = 1500   # 相邻瓦片平滑度
    ADJACENCY_WEIGHT = 600     # 1 与 2 的配对
    CORNER_WEIGHT = 3000       # 最大瓦片固定在角落（最重要）

    # 角落奖励的倍数
    CORNER_BONUS = 1000
    EDGE_BONUS = 300
    CENTER_PENALTY = 500

    # 1/2 配对得分
    PAIR_BONUS = 10
    SAME_PENALTY = 5
    BLOCKED_PENALTY = 3

    # 以左上角为目标的梯度权重矩阵（不乘权重，直接相加）
    WEIGHT_MAP = [
        [4096, 1024, 256, 64],
        [16, 32, 64, 128],
        [8, 4, 2, 1],
        [0, 0, 0, 0],
    ]


class EnvConfig:
    """gymnasium 环境配置"""

    ENV_ID = "threes/Threes-v0"
    INVALID_MOVE_PENALTY = -10  # 无效移动的惩罚
    MAX_TILE_VALUE = 3 * 2 ** 16


class SelfPlayConfig:
    """自我对局参数"""

    EPISODES = 5
    MAX_STEPS = 5000
    SEED = 42
    RENDER_DEMO = True
    SAVE_LOGS = True
    SAVE_PLOT = False


class PathConfig:
    """路径配置"""

    # 对局日志保存路径
    LOG_DIR = "threes_logs"

    # 图表保存路径
    PLOT_DIR = "plots_selfplay"

    # 最高分文件
    BEST_SCORE_FILE = "threes_best_score.json"
