import numpy as np
import pytest

from agents.heuristic import (adjacency, corner_integrity, evaluate_board, monotonicity,
                              openness, smoothness, snake_path, weighted_position)


def board_from(cells):
    board = np.zeros((4, 4), dtype=np.int64)
    for (row, col), value in cells.items():
        board[row, col] = value
    return board


def test_snake_path_alternates_direction():
    board = np.arange(16).reshape(4, 4)
    assert snake_path(board).tolist() == [0, 1, 2, 3, 7, 6, 5, 4, 8, 9, 10, 11, 15, 14, 13, 12]


def test_single_tile_in_corner():
    board = board_from({(0, 0): 3})
    assert openness(board) == 225
    assert monotonicity(board) == 1
    assert smoothness(board) == 0
    assert adjacency(board) == 0
    assert corner_integrity(board) == 3000
    assert weighted_position(board) == 3 * 4096
    assert evaluate_board(board) == 9238088.0


def test_one_two_pair_on_top_row():
    board = board_from({(0, 0): 1, (0, 1): 2})
    assert adjacency(board) == 20
    assert smoothness(board) == pytest.approx(-1.0)
    assert monotonicity(board) == 1
    assert corner_integrity(board) == 600
    assert evaluate_board(board) == pytest.approx(2013444.0)


def test_adjacency_penalties():
    assert adjacency(board_from({(1, 1): 1, (1, 2): 1})) == -10
    assert adjacency(board_from({(1, 1): 2, (2, 1): 2})) == -10
    assert adjacency(board_from({(1, 1): 2, (1, 2): 3})) == -3
    assert adjacency(board_from({(1, 1): 6, (1, 2): 12})) == 0


def test_corner_integrity_positions():
    assert corner_integrity(board_from({(2, 0): 24, (0, 0): 3})) == 24 * 300
    assert corner_integrity(board_from({(0, 3): 12})) == 12 * 300
    assert corner_integrity(board_from({(1, 1): 6, (0, 0): 3})) == -6 * 500
    # 并列最大值取行优先的第一个
    assert corner_integrity(board_from({(0, 1): 6, (1, 1): 6})) == 6 * 300
    assert corner_integrity(np.zeros((4, 4), dtype=np.int64)) == 0


def test_smoothness_only_counts_occupied_pairs():
    board = board_from({(0, 0): 3, (0, 2): 96, (1, 0): 6})
    # 只有 (0,0)-(1,0) 一对相邻
    assert smoothness(board) == pytest.approx(-1.0)


def test_monotonicity_counts_descending_steps():
    board = board_from({(0, 0): 48, (0, 1): 24, (0, 2): 12, (0, 3): 6, (1, 3): 3})
    # 48>=24, 24>=12, 12>=6, 6>=3, 3>=0
    assert monotonicity(board) == 5


def test_weight_override():
    board = board_from({(0, 0): 3})
    assert evaluate_board(board, weights={'corner': 0}) == 238088.0


def test_evaluation_is_deterministic():
    rng = np.random.default_rng(3)
    board = rng.choice([0, 1, 2, 3, 6, 12, 24], size=(4, 4))
    assert evaluate_board(board) == evaluate_board(board.copy())
    assert isinstance(evaluate_board(board), float)
