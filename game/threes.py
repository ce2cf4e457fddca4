import random

from config import GameConfig
from game.board import Board
from game.deck import Deck
from game.probability import bonus_possible, draw_bonus_value, tile_probabilities
from game.rules import spawn_edge, validate_direction


class ThreesGame:
    """
    Threes 游戏核心
    对外提供移动、快照、下一张预告、新游戏、AI 最佳移动
    """
    def __init__(self, grid_size=GameConfig.GRID_SIZE, seed=None, score_store=None):
        self.grid_size = grid_size
        self.rng = random.Random(seed)
        self.deck = Deck(rng=self.rng)
        self.board = Board(grid_size)
        self.score = 0

        # 下一张瓦片
        self.next_tile_value = None
        self.next_tile_is_bonus = False

        # 最高分（外部存储）
        self.score_store = score_store
        self.best_score = score_store.load() if score_store is not None else 0

        self.new_game()

    def new_game(self):
        """重置棋盘、牌堆、分数和预告"""
        self.board.clear()
        self.deck.reset()
        self.score = 0
        self.next_tile_value = None
        self.next_tile_is_bonus = False

        # 随机选 INITIAL_TILES 个格子放置初始瓦片
        positions = list(range(self.grid_size * self.grid_size))
        for _ in range(min(GameConfig.INITIAL_TILES, len(positions))):
            pos = positions.pop(self.rng.randrange(len(positions)))
            row, col = divmod(pos, self.grid_size)
            self.board.place_tile(self.deck.draw(), row, col)

        self.generate_next_tile()

    def generate_next_tile(self):
        """抽牌生成下一张预告；抽到 3 时有一定概率变为奖励牌"""
        base_card = self.deck.draw()
        max_tile = self.board.max_tile()

        if base_card == 3 and bonus_possible(max_tile) and self.rng.random() < GameConfig.BONUS_CHANCE:
            self.next_tile_value = draw_bonus_value(max_tile, self.rng)
            self.next_tile_is_bonus = True
        else:
            self.next_tile_value = base_card
            self.next_tile_is_bonus = False

    def spawn_tile(self, direction):
        """
        在移动方向的对侧边随机空格放置预告瓦片

        返回:
        新瓦片 id，对侧边已满时返回 None（预告保持不变）
        """
        empty_cells = [(row, col) for row, col in spawn_edge(direction, self.grid_size)
                       if self.board.tile_at(row, col) is None]
        if not empty_cells:
            return None

        row, col = self.rng.choice(empty_cells)
        tile_id = self.board.place_tile(self.next_tile_value, row, col)
        self.generate_next_tile()
        return tile_id

    def apply_move(self, direction):
        """
        执行一次移动

        返回:
        {'changed': bool, 'score_delta': int, 'game_over': bool}
        """
        direction = validate_direction(direction)
        result = self.board.move(direction)

        if result.changed:
            self.score += result.score_delta
            self.spawn_tile(direction)
            self.best_score = max(self.best_score, self.score)

        game_over = self.board.is_game_over()
        if game_over:
            self.end_game()

        return {
            'changed': result.changed,
            'score_delta': result.score_delta,
            'game_over': game_over,
        }

    def end_game(self):
        """一局结束时写入最高分（只在超过记录时写文件）"""
        if self.score_store is not None:
            self.best_score = self.score_store.update(self.score)
        return self.best_score

    def is_game_over(self):
        return self.board.is_game_over()

    def valid_moves(self):
        return self.board.valid_moves()

    def get_board_snapshot(self):
        """只读快照（用于渲染）"""
        grid = [[None] * self.grid_size for _ in range(self.grid_size)]
        tiles = []
        for tile in self.board.tile_list():
            grid[tile.row][tile.col] = (tile.id, tile.value)
            tiles.append(tile.to_dict())
        return {'grid': grid, 'tiles': tiles, 'score': self.score}

    def get_next_tile_preview(self):
        return self.next_tile_value, self.next_tile_is_bonus

    def tile_probabilities(self, use_preview=True):
        """
        下一张瓦片的概率分布
        use_preview=False 时视为预告已被消耗，只按牌堆计数
        """
        if use_preview:
            preview_value, preview_is_bonus = self.next_tile_value, self.next_tile_is_bonus
        else:
            preview_value, preview_is_bonus = None, False
        return tile_probabilities(self.deck.remaining_counts(), len(self.deck),
                                  self.board.max_tile(), preview_value, preview_is_bonus)

    def compute_best_move(self, agent=None):
        """AI 入口：返回最佳方向，没有有效移动时返回 None"""
        if agent is None:
            from agents.expectimax_agent import ExpectimaxAgent
            agent = ExpectimaxAgent()
        return agent.get_best_move(self)

    def render_text(self):
        """文本形式的棋盘"""
        board = self.board.values()
        width = max(3, len(str(int(board.max()))))
        lines = []
        for row in board:
            lines.append(' '.join(str(int(v)).rjust(width) if v else '.'.rjust(width) for v in row))
        value, is_bonus = self.get_next_tile_preview()
        lines.append(f"score={self.score} next={value}{'+' if is_bonus else ''}")
        return '\n'.join(lines)
