import json
import time
from datetime import datetime
from pathlib import Path

import numpy as np

from agents.expectimax_agent import ExpectimaxAgent
from config import SelfPlayConfig, PathConfig
from game.threes import ThreesGame


def play_game(agent, seed=None, max_steps=SelfPlayConfig.MAX_STEPS, render=False, score_store=None):
    """
    用智能体完整地玩一局
    由调用方驱动：请求一次决策、执行、再请求下一次

    返回:
    (game, game_log)
    """
    game = ThreesGame(seed=seed, score_store=score_store)
    game_log = [{
        'step': 0,
        'board': game.board.values().tolist(),
        'score': 0,
        'action': None,
        'next_tile': game.get_next_tile_preview()[0],
    }]

    step_count = 0
    while step_count < max_steps:
        direction = agent.get_best_move(game)
        if direction is None:
            # 没有有效移动，游戏结束
            break

        result = game.apply_move(direction)
        step_count += 1

        game_log.append({
            'step': step_count,
            'board': game.board.values().tolist(),
            'score': game.score,
            'action': direction,
            'reward': result['score_delta'],
            'next_tile': game.get_next_tile_preview()[0],
        })

        if render:
            print(f"\nStep {step_count}: {direction}")
            print(game.render_text())
            time.sleep(0.05)

        if result['game_over']:
            break

    # 达到步数上限也算一局结束
    if not game.is_game_over():
        game.end_game()

    return game, game_log


def run_selfplay(episodes=SelfPlayConfig.EPISODES, seed=SelfPlayConfig.SEED, max_steps=SelfPlayConfig.MAX_STEPS,
                 agent=None, render=False, save_logs=SelfPlayConfig.SAVE_LOGS, log_dir=PathConfig.LOG_DIR,
                 score_store=None):
    """
    Expectimax 智能体自我对局

    参数:
        episodes: 对局数
        seed: 随机种子（第 i 局使用 seed + i）
        max_steps: 每局最大步数
        agent: 智能体，默认使用 ExpectimaxAgent
        render: 是否打印每一步
        save_logs: 是否保存日志
    """
    if agent is None:
        agent = ExpectimaxAgent()

    print("\n" + "=" * 60)
    print("Expectimax 自我对局")
    print(f"Episodes: {episodes}")
    print(f"Depth: {agent.depth}, Sample cells: {agent.sample_cells}")
    print(f"Seed: {seed}")
    print(f"Save logs: {'YES' if save_logs else 'NO'}")
    print("=" * 60)

    scores = []
    max_tiles = []
    steps_counts = []
    empty_cells_counts = []

    if save_logs:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    for episode in range(episodes):
        episode_seed = seed + episode
        start_time = time.time()
        game, game_log = play_game(agent, seed=episode_seed, max_steps=max_steps,
                                   render=render, score_store=score_store)
        elapsed = time.time() - start_time

        final_board = game.board.values()
        max_tile = int(np.max(final_board))
        empty_cells = int(np.sum(final_board == 0))
        step_count = len(game_log) - 1

        scores.append(game.score)
        max_tiles.append(max_tile)
        steps_counts.append(step_count)
        empty_cells_counts.append(empty_cells)

        print(f"Game {episode + 1}/{episodes}: "
              f"分数 = {game.score}, "
              f"最大瓦片 = {max_tile}, "
              f"步数 = {step_count}, "
              f"空位 = {empty_cells}, "
              f"用时 = {elapsed:.1f}s")

        if save_logs:
            episode_log_data = {
                'episode': episode + 1,
                'seed': episode_seed,
                'final_score': int(game.score),
                'steps': step_count,
                'max_tile': max_tile,
                'empty_cells': empty_cells,
                'game_over': bool(game.is_game_over()),
                'game_log': game_log,
                'timestamp': timestamp
            }
            episode_log_filename = f"threes_ep{episode + 1}_seed{episode_seed}_{timestamp}.json"
            with open(log_dir / episode_log_filename, 'w', encoding='utf-8') as f:
                json.dump(episode_log_data, f, ensure_ascii=False, indent=2)
            print(f"  Game {episode + 1} 日志已保存: {episode_log_filename}")

    summary = {
        'scores': scores,
        'max_tiles': max_tiles,
        'steps_counts': steps_counts,
        'empty_cells_counts': empty_cells_counts,
    }

    if episodes > 0:
        summary.update({
            'avg_score': float(np.mean(scores)),
            'std_score': float(np.std(scores)),
            'avg_max_tile': float(np.mean(max_tiles)),
            'avg_steps': float(np.mean(steps_counts)),
        })

        print("\n" + "=" * 60)
        print("对局完成！总体统计:")
        print(f"平均分数: {summary['avg_score']:.2f} ± {summary['std_score']:.2f}")
        print(f"平均最大瓦片: {summary['avg_max_tile']:.2f}")
        print(f"最高分数: {np.max(scores)}")
        print(f"最低分数: {np.min(scores)}")
        print(f"平均步数: {summary['avg_steps']:.1f}")
        print("=" * 60)

        if save_logs and episodes > 1:
            summary_data = {
                'config': {
                    'episodes': episodes,
                    'seed': seed,
                    'depth': agent.depth,
                    'sample_cells': agent.sample_cells,
                },
                'statistics': summary,
                'episode_logs': [f"threes_ep{ep + 1}_seed{seed + ep}_{timestamp}.json" for ep in range(episodes)],
                'timestamp': timestamp
            }
            summary_filename = f"threes_summary_{episodes}games_seed{seed}_{timestamp}.json"
            with open(log_dir / summary_filename, 'w', encoding='utf-8') as f:
                json.dump(summary_data, f, ensure_ascii=False, indent=2)
            print(f"\n汇总日志已保存: {summary_filename}")

    return summary
