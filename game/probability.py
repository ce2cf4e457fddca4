"""
下一张瓦片的概率模型（牌堆计数 + 奖励牌）
"""

from config import GameConfig, SearchConfig


def bonus_candidates(max_tile):
    """
    奖励牌的候选值：6, 12, 24, ... 不超过 floor(max_tile / 8)
    没有候选时至少为 6
    """
    limit = max_tile // GameConfig.BONUS_LIMIT_DIVISOR
    candidates = []
    value = GameConfig.BONUS_MIN_VALUE
    while value <= limit:
        candidates.append(value)
        value *= 2
    if not candidates:
        candidates.append(GameConfig.BONUS_MIN_VALUE)
    return candidates


def draw_bonus_value(max_tile, rng):
    """从候选值中均匀随机选一个奖励牌数值（实际出牌用）"""
    candidates = bonus_candidates(max_tile)
    return candidates[rng.randrange(len(candidates))]


def bonus_possible(max_tile):
    return max_tile >= GameConfig.BONUS_THRESHOLD


def tile_probabilities(deck_counts, deck_size, max_tile, preview_value=None, preview_is_bonus=False):
    """
    计算下一张瓦片的概率分布

    参数:
    deck_counts: 牌堆剩余计数 {1: n1, 2: n2, 3: n3}
    deck_size: 牌堆剩余张数
    max_tile: 当前棋盘最大瓦片
    preview_value: 已确定的下一张瓦片（None 表示未知）
    preview_is_bonus: 预告是否为奖励牌

    返回:
    [(value, probability), ...]，概率之和为 1.0
    """
    # 预告已确定且不是奖励牌：确定性结果
    if preview_value is not None and not preview_is_bonus:
        return [(int(preview_value), 1.0)]

    # 牌堆刚好抽空时分母取整副牌的张数，计数全为 0，最终落到默认分布
    counts = deck_counts
    total = deck_size if deck_size > 0 else sum(GameConfig.DECK_COMPOSITION.values())

    probabilities = []
    bonus_probability = 0.0
    if bonus_possible(max_tile):
        bonus_probability = GameConfig.BONUS_CHANCE * (counts.get(3, 0) / total)
        if bonus_probability > 0:
            # 奖励牌数值均匀分布，展开为每个候选值各一项
            candidates = bonus_candidates(max_tile)
            share = bonus_probability / len(candidates)
            probabilities.extend((value, share) for value in candidates)

    normal_mass = 1.0 - bonus_probability
    for value in (1, 2, 3):
        probability = (counts.get(value, 0) / total) * normal_mass
        if probability > 0:
            probabilities.append((value, probability))

    if not probabilities:
        return list(SearchConfig.FALLBACK_PROBABILITIES)
    return probabilities
