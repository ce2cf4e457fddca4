import numpy as np
import gymnasium as gym
from gymnasium import spaces

from config import EnvConfig, GameConfig
from game.rules import DIRECTIONS
from game.simulator import valid_action_mask
from game.threes import ThreesGame


class ThreesEnv(gym.Env):
    """
    Threes 的 gymnasium 环境
    动作: 0=up, 1=down, 2=left, 3=right
    观测: 数值棋盘，空格为 0
    """
    metadata = {"render_modes": ["ansi"]}

    def __init__(self, render_mode=None, grid_size=GameConfig.GRID_SIZE):
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"不支持的渲染模式: {render_mode}")
        self.render_mode = render_mode
        self.grid_size = grid_size

        self.observation_space = spaces.Box(
            low=0, high=EnvConfig.MAX_TILE_VALUE,
            shape=(grid_size, grid_size), dtype=np.int64
        )
        self.action_space = spaces.Discrete(len(DIRECTIONS))
        self.game = None

    def _get_obs(self):
        return self.game.board.values()

    def _get_info(self):
        value, is_bonus = self.game.get_next_tile_preview()
        return {
            'score': self.game.score,
            'valid_actions': valid_action_mask(self.game.board.values()),
            'next_tile': value,
            'next_tile_is_bonus': is_bonus,
        }

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        game_seed = int(self.np_random.integers(0, 2 ** 31 - 1))
        self.game = ThreesGame(self.grid_size, seed=game_seed)
        return self._get_obs(), self._get_info()

    def step(self, action):
        if self.game is None:
            raise RuntimeError("请先调用 reset()")
        if not self.action_space.contains(action):
            raise ValueError(f"无效动作: {action}")

        result = self.game.apply_move(DIRECTIONS[int(action)])
        if result['changed']:
            reward = float(result['score_delta'])
        else:
            reward = float(EnvConfig.INVALID_MOVE_PENALTY)

        info = self._get_info()
        info['changed'] = result['changed']
        return self._get_obs(), reward, result['game_over'], False, info

    def render(self):
        if self.render_mode == "ansi" and self.game is not None:
            return self.game.render_text()
        return None


gym.register(id=EnvConfig.ENV_ID, entry_point="game.env:ThreesEnv")
