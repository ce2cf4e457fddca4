import subprocess
import sys
from pathlib import Path

import gymnasium as gym
import numpy as np
import pytest

from config import EnvConfig
from game import ThreesEnv


ROOT = Path(__file__).resolve().parent.parent


def test_reset_returns_board_and_info():
    env = ThreesEnv()
    obs, info = env.reset(seed=0)
    assert obs.shape == (4, 4)
    assert np.count_nonzero(obs) == 9
    assert set(info) >= {'score', 'valid_actions', 'next_tile', 'next_tile_is_bonus'}
    assert info['score'] == 0


def test_reset_with_same_seed_is_reproducible():
    a, _ = ThreesEnv().reset(seed=21)
    b, _ = ThreesEnv().reset(seed=21)
    assert np.array_equal(a, b)


def test_valid_step():
    env = ThreesEnv()
    obs, info = env.reset(seed=1)
    action = int(np.flatnonzero(info['valid_actions'])[0])
    obs, reward, terminated, truncated, info = env.step(action)
    assert info['changed']
    assert reward >= 0
    assert not truncated
    assert obs.shape == (4, 4)


def test_noop_step_is_penalised():
    env = ThreesEnv()
    env.reset(seed=2)
    env.game.board.load_values([[3, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4])
    _, reward, terminated, _, info = env.step(0)  # up
    assert reward == EnvConfig.INVALID_MOVE_PENALTY
    assert not info['changed']
    assert not terminated


def test_invalid_action_raises():
    env = ThreesEnv()
    env.reset(seed=3)
    with pytest.raises(ValueError):
        env.step(7)


def test_ansi_render():
    env = ThreesEnv(render_mode="ansi")
    env.reset(seed=4)
    assert 'next=' in env.render()


def test_registered_with_gymnasium():
    env = gym.make(EnvConfig.ENV_ID)
    obs, _ = env.reset(seed=5)
    assert obs.shape == (4, 4)
    env.close()


def test_importing_game_package_registers_env():
    """新进程中只导入 game 包即可 gym.make"""
    code = (
        "import gymnasium as gym\n"
        "import game\n"
        "from config import EnvConfig\n"
        "env = gym.make(EnvConfig.ENV_ID)\n"
        "obs, _ = env.reset(seed=6)\n"
        "print(obs.shape)\n"
    )
    result = subprocess.run([sys.executable, "-c", code], cwd=ROOT,
                            capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
    assert "(4, 4)" in result.stdout
