import json

from utils.score_store import BestScoreStore


def test_missing_file_is_zero(tmp_path):
    assert BestScoreStore(tmp_path / 'missing.json').load() == 0


def test_save_and_load(tmp_path):
    store = BestScoreStore(tmp_path / 'best.json')
    store.save(120)
    assert store.load() == 120
    data = json.loads((tmp_path / 'best.json').read_text(encoding='utf-8'))
    assert data == {'threes-best-score': 120}


def test_update_only_raises_record(tmp_path):
    store = BestScoreStore(tmp_path / 'best.json')
    assert store.update(30) == 30
    assert store.update(10) == 30
    assert store.load() == 30


def test_corrupted_file_is_zero(tmp_path):
    path = tmp_path / 'best.json'
    path.write_text('not json', encoding='utf-8')
    assert BestScoreStore(path).load() == 0
    path.write_text('{"threes-best-score": "abc"}', encoding='utf-8')
    assert BestScoreStore(path).load() == 0


def test_other_keys_are_kept(tmp_path):
    path = tmp_path / 'best.json'
    path.write_text('{"other": 1}', encoding='utf-8')
    BestScoreStore(path).save(9)
    assert json.loads(path.read_text(encoding='utf-8')) == {'other': 1, 'threes-best-score': 9}
