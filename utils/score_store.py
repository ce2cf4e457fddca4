import json
from pathlib import Path

from config import GameConfig, PathConfig


class BestScoreStore:
    """
    最高分存储（JSON 键值文件）
    文件不存在或损坏时视为 0
    """
    def __init__(self, path=PathConfig.BEST_SCORE_FILE, key=GameConfig.BEST_SCORE_KEY):
        self.path = Path(path)
        self.key = key

    def _read(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def load(self):
        try:
            return int(self._read().get(self.key, 0))
        except (TypeError, ValueError):
            return 0

    def save(self, score):
        data = self._read()
        data[self.key] = int(score)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def update(self, score):
        """分数超过记录时写入，返回当前最高分"""
        best = self.load()
        if score > best:
            self.save(score)
            return int(score)
        return best
