import json

from agents.expectimax_agent import ExpectimaxAgent
from selfplay import play_game, run_selfplay
from utils.score_store import BestScoreStore


def test_play_game_logs_each_step():
    agent = ExpectimaxAgent(depth=1)
    game, game_log = play_game(agent, seed=3, max_steps=15)
    assert game_log[0]['step'] == 0
    assert len(game_log) <= 16
    assert game_log[-1]['score'] == game.score
    for entry in game_log[1:]:
        assert entry['action'] in ('up', 'down', 'left', 'right')


def test_run_selfplay_writes_logs(tmp_path):
    agent = ExpectimaxAgent(depth=1)
    summary = run_selfplay(episodes=2, seed=10, max_steps=10, agent=agent,
                           save_logs=True, log_dir=tmp_path)
    assert len(summary['scores']) == 2
    files = sorted(p.name for p in tmp_path.glob('*.json'))
    assert len(files) == 3
    assert any(name.startswith('threes_summary_') for name in files)
    episode = json.loads((tmp_path / [n for n in files if n.startswith('threes_ep1_')][0]).read_text(encoding='utf-8'))
    assert episode['seed'] == 10
    assert episode['steps'] == len(episode['game_log']) - 1


def test_truncated_game_still_records_best_score(tmp_path):
    store = BestScoreStore(tmp_path / 'best.json')
    agent = ExpectimaxAgent(depth=1)
    game, _ = play_game(agent, seed=4, max_steps=20, score_store=store)
    assert not game.is_game_over()
    assert store.load() == game.score
    assert game.best_score == game.score
