import random

from config import GameConfig


class Deck:
    """
    12 张牌的牌堆（1、2、3 各 4 张）
    从末尾抽牌，抽空后自动补满并重新洗牌
    """
    def __init__(self, composition=None, rng=None):
        self.composition = dict(composition or GameConfig.DECK_COMPOSITION)
        self.rng = rng if rng is not None else random.Random()
        self.cards = []
        self.reset()

    def __len__(self):
        return len(self.cards)

    def reset(self):
        """补满一副新牌并洗牌"""
        self.cards = []
        for value, count in sorted(self.composition.items()):
            self.cards.extend([value] * count)
        self.shuffle()

    def shuffle(self):
        # Fisher-Yates
        for i in range(len(self.cards) - 1, 0, -1):
            j = self.rng.randint(0, i)
            self.cards[i], self.cards[j] = self.cards[j], self.cards[i]

    def draw(self):
        if not self.cards:
            self.reset()
        return self.cards.pop()

    def remaining_counts(self):
        """剩余牌中每个值的数量"""
        counts = {value: 0 for value in self.composition}
        for value in self.cards:
            counts[value] += 1
        return counts
