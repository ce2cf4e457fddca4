#!/usr/bin/env python3
"""
Threes 合并游戏 + Expectimax AI 主入口文件
使用方法:
    python run.py play [episodes]   # AI 自我对局并统计结果
    python run.py demo              # 逐步打印一局 AI 对局
    python run.py help              # 显示帮助信息
"""

import os
import sys
import argparse
from pathlib import Path

# 添加项目根目录到Python路径
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from agents.expectimax_agent import ExpectimaxAgent
from config import SelfPlayConfig, SearchConfig, PathConfig
from selfplay import play_game, run_selfplay
from utils.score_store import BestScoreStore


def create_directories():
    """创建必要的目录"""
    for dir_path in [PathConfig.LOG_DIR, PathConfig.PLOT_DIR]:
        os.makedirs(dir_path, exist_ok=True)
        print(f"目录已创建/存在: {dir_path}")


def play_mode(episodes, depth, sample_cells, seed):
    """自我对局模式"""
    print("=" * 60)
    print("Threes AI 自我对局模式")
    print("=" * 60)

    create_directories()
    agent = ExpectimaxAgent(depth=depth, sample_cells=sample_cells)
    store = BestScoreStore()
    summary = run_selfplay(episodes=episodes, seed=seed, agent=agent, score_store=store)
    print(f"历史最高分: {store.load()}")

    if SelfPlayConfig.SAVE_PLOT and summary['scores']:
        from utils.visualization import plot_selfplay_results
        plot_selfplay_results(summary['scores'], summary['max_tiles'], summary['steps_counts'])


def demo_mode(depth, sample_cells, seed):
    """演示模式"""
    print("=" * 60)
    print("Threes AI 演示模式")
    print("=" * 60)

    agent = ExpectimaxAgent(depth=depth, sample_cells=sample_cells)
    game, game_log = play_game(agent, seed=seed, render=SelfPlayConfig.RENDER_DEMO)
    print(f"\n演示结束: 分数 = {game.score}, 步数 = {len(game_log) - 1}, "
          f"最大瓦片 = {game.board.max_tile()}")


def show_help():
    """显示帮助信息"""
    help_text = """
Threes 合并游戏 + Expectimax AI

使用方法:
    python run.py <命令> [选项]

命令:
    play [episodes]     AI 自我对局并输出统计(默认局数见 config.py)
    demo                逐步打印一局 AI 对局
    help                显示此帮助信息

选项:
    --depth N           搜索深度(默认 3)
    --sample-cells N    Chance 节点采样空格数(默认 3)
    --seed N            随机种子

配置:
    所有配置参数都在 config.py 文件中定义，可以修改该文件来调整参数。

输出目录:
    - threes_logs/: 保存对局日志
    - plots_selfplay/: 保存对局曲线图
    """
    print(help_text)


def main():
    """主函数"""
    parser = argparse.ArgumentParser(description="Threes 合并游戏 + Expectimax AI", add_help=False)
    parser.add_argument('command', nargs='?', default='help',
                        choices=['play', 'demo', 'help'],
                        help='要执行的命令')
    parser.add_argument('episodes', nargs='?', type=int, default=SelfPlayConfig.EPISODES,
                        help='对局数(用于play命令)')
    parser.add_argument('--depth', type=int, default=SearchConfig.DEPTH)
    parser.add_argument('--sample-cells', type=int, default=SearchConfig.SAMPLE_CELLS)
    parser.add_argument('--seed', type=int, default=SelfPlayConfig.SEED)

    args = parser.parse_args()

    if args.command == 'play':
        play_mode(args.episodes, args.depth, args.sample_cells, args.seed)
    elif args.command == 'demo':
        demo_mode(args.depth, args.sample_cells, args.seed)
    else:
        show_help()


if __name__ == '__main__':
    main()
