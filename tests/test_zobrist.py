"""
tests/test_zobrist.py

Тесты Zobrist хеширования: инкрементальное обновление должно
совпадать с полным пересчётом, в том числе для зеркальной доски.
"""

import random

import pytest

from core.board import Board
from core.config import DIRECTIONS
from core.pieces import PieceType, standard_pieces, mirror_pieces
from core.zobrist import ZobristHasher, MAX_BITSTRING
from conftest import make_piece


def _hashed_board(hasher: ZobristHasher, pieces, columns: int, rows: int) -> Board:
    board = Board.from_pieces(pieces, columns, rows)
    board.hash = hasher.full_hash(board)
    board.mirror_hash = hasher.full_hash(board, mirrored=True)
    return board


def _random_walk(hasher: ZobristHasher, board: Board, steps: int, rng: random.Random):
    """Случайная прогулка по легальным ходам; на каждом ходе сверяет хеши."""
    for _ in range(steps):
        moves = [(i, d) for i in range(len(board.pieces)) for d in DIRECTIONS
                 if board.can_move(i, d)]
        if not moves:
            return board
        piece_index, direction = rng.choice(moves)
        new_hash = hasher.delta_hash(board, piece_index, direction)
        new_mirror = hasher.delta_hash(board, piece_index, direction, mirrored=True)
        board = board.apply_move(piece_index, direction)
        assert new_hash == hasher.full_hash(board), "Инкрементальный хеш ≠ полному"
        assert new_mirror == hasher.full_hash(board, mirrored=True), \
            "Инкрементальный зеркальный хеш ≠ полному"
        board.hash, board.mirror_hash = new_hash, new_mirror
    return board


def test_table_values_in_range():
    """Все числа таблицы в [1, 2^63 - 1]: ноль зарезервирован."""
    hasher = ZobristHasher(4, 5, seed=1)
    values = [v for column in hasher.table for row in column for v in row]
    assert len(values) == 4 * 5 * 5
    assert all(1 <= v <= MAX_BITSTRING for v in values)


def test_seed_is_reproducible():
    assert ZobristHasher(4, 5, seed=42).table == ZobristHasher(4, 5, seed=42).table
    assert ZobristHasher(4, 5, seed=42).table != ZobristHasher(4, 5, seed=43).table


def test_delta_matches_full_for_every_first_move():
    hasher = ZobristHasher(4, 5, seed=3)
    board = _hashed_board(hasher, standard_pieces(), 4, 5)
    for piece_index in range(len(board.pieces)):
        for direction in DIRECTIONS:
            if not board.can_move(piece_index, direction):
                continue
            moved = board.apply_move(piece_index, direction)
            for mirrored in (False, True):
                assert hasher.delta_hash(board, piece_index, direction, mirrored) == \
                    hasher.full_hash(moved, mirrored)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_delta_matches_full_along_random_walk(seed):
    """Все типы фигур, все направления, обе версии хеша."""
    hasher = ZobristHasher(4, 5, seed=seed)
    board = _hashed_board(hasher, standard_pieces(), 4, 5)
    _random_walk(hasher, board, 300, random.Random(seed))


def test_delta_matches_full_on_open_board():
    """Доска с большим пустым пространством: горизонтальные ходы широких фигур."""
    pieces = [
        make_piece(PieceType.GENERAL, 0, 0),
        make_piece(PieceType.COMMANDER_HORIZONTAL, 3, 0),
        make_piece(PieceType.COMMANDER_VERTICAL, 4, 3),
        make_piece(PieceType.SOLDIER, 1, 4),
    ]
    hasher = ZobristHasher(6, 6, seed=5)
    board = _hashed_board(hasher, pieces, 6, 6)
    _random_walk(hasher, board, 200, random.Random(5))


def test_mirror_hash_equals_hash_of_mirrored_layout():
    """Зеркальный хеш доски = обычный хеш отражённой расстановки."""
    pieces = [
        make_piece(PieceType.GENERAL, 0, 0),
        make_piece(PieceType.COMMANDER_HORIZONTAL, 2, 0),
        make_piece(PieceType.SOLDIER, 3, 4),
    ]
    hasher = ZobristHasher(4, 5, seed=9)
    board = Board.from_pieces(pieces, 4, 5)
    mirrored = Board.from_pieces(mirror_pieces(pieces, 4), 4, 5)
    assert hasher.full_hash(board, mirrored=True) == hasher.full_hash(mirrored)
    assert hasher.full_hash(board) != hasher.full_hash(mirrored)


def test_symmetric_layout_hash_equals_mirror_hash():
    hasher = ZobristHasher(4, 5, seed=11)
    board = Board.from_pieces(standard_pieces(), 4, 5)
    assert hasher.full_hash(board) == hasher.full_hash(board, mirrored=True)


def test_hash_ignores_labels():
    """Одинаковые позиции с разными подписями дают одинаковый хеш."""
    hasher = ZobristHasher(4, 5, seed=13)
    a = [make_piece(PieceType.SOLDIER, 0, 0, "soldier_1"), make_piece(PieceType.SOLDIER, 1, 0, "soldier_2")]
    b = [make_piece(PieceType.SOLDIER, 1, 0, "soldier_2"), make_piece(PieceType.SOLDIER, 0, 0, "soldier_1")]
    assert hasher.full_hash(Board.from_pieces(a, 4, 5)) == hasher.full_hash(Board.from_pieces(b, 4, 5))
