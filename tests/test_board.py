"""
tests/test_board.py

Тесты состояния доски: сетка с рамкой, размещение, проверка хода.
"""

from core.board import Board
from core.config import DIRECTIONS
from core.pieces import PieceType, standard_pieces
from core.utils import BORDER, EMPTY
from conftest import make_piece

DOWN, RIGHT, UP, LEFT = DIRECTIONS


def test_empty_board_has_border():
    board = Board.empty(4, 5)
    assert len(board.grid) == 6 and len(board.grid[0]) == 7
    assert board.columns == 4 and board.rows == 5
    for x in range(6):
        assert board.grid[x][0] == BORDER
        assert board.grid[x][6] == BORDER
    for y in range(7):
        assert board.grid[0][y] == BORDER
        assert board.grid[5][y] == BORDER
    for x in range(4):
        for y in range(5):
            assert board.cell(x, y) == EMPTY


def test_from_pieces_fills_footprints():
    """Клетки каждой фигуры содержат её индекс + 1."""
    pieces = standard_pieces()
    board = Board.from_pieces(pieces, 4, 5)
    for index, piece in enumerate(pieces):
        for x, y in piece.cells():
            assert board.cell(x, y) == index + 1
    empty = [(x, y) for x in range(4) for y in range(5) if board.cell(x, y) == EMPTY]
    assert sorted(empty) == [(1, 4), (2, 4)]


def test_remove_clears_footprint():
    board = Board.from_pieces([make_piece(PieceType.GENERAL, 1, 1)], 4, 5)
    board.remove(PieceType.GENERAL, (1, 1))
    assert all(board.cell(x, y) == EMPTY for x in range(4) for y in range(5))


def test_can_move_standard_layout():
    """В стандартной расстановке двигаются только два солдата в нижнем ряду."""
    board = Board.from_pieces(standard_pieces(), 4, 5)
    movable = {(i, d) for i in range(10) for d in DIRECTIONS if board.can_move(i, d)}
    assert movable == {
        (6, RIGHT),  # soldier_1 (0,4) → (1,4)
        (7, DOWN),   # soldier_2 (1,3) → (1,4)
        (8, DOWN),   # soldier_3 (2,3) → (2,4)
        (9, LEFT),   # soldier_4 (3,4) → (2,4)
    }


def test_can_move_allows_self_overlap():
    """Клетки, занятые самой фигурой, не мешают ходу."""
    board = Board.from_pieces([make_piece(PieceType.GENERAL, 0, 0)], 3, 3)
    assert board.can_move(0, RIGHT)
    assert board.can_move(0, DOWN)
    assert not board.can_move(0, LEFT), "Рамка слева"
    assert not board.can_move(0, UP), "Рамка сверху"


def test_can_move_blocked_by_piece():
    pieces = [make_piece(PieceType.COMMANDER_HORIZONTAL, 0, 0),
              make_piece(PieceType.SOLDIER, 2, 0)]
    board = Board.from_pieces(pieces, 3, 2)
    assert not board.can_move(0, RIGHT)
    assert board.can_move(0, DOWN)
    assert board.can_move(1, DOWN)


def test_apply_move_does_not_touch_parent():
    board = Board.from_pieces(standard_pieces(), 4, 5)
    moved = board.apply_move(6, RIGHT)
    assert moved.pieces[6].position == (1, 4)
    assert moved.cell(1, 4) == 7 and moved.cell(0, 4) == EMPTY
    assert board.pieces[6].position == (0, 4), "Родительская доска не меняется"
    assert board.cell(0, 4) == 7 and board.cell(1, 4) == EMPTY


def test_clone_is_deep():
    board = Board.from_pieces(standard_pieces(), 4, 5)
    board.step, board.hash, board.mirror_hash, board.parent = 3, 11, 22, 5
    copy = board.clone()
    assert (copy.step, copy.hash, copy.mirror_hash, copy.parent) == (3, 11, 22, 5)
    copy.grid[1][1] = EMPTY
    copy.pieces[0] = copy.pieces[0].moved(0, 1)
    assert board.grid[1][1] == 1
    assert board.pieces[0].position == (0, 0)


def test_goal_reached():
    board = Board.from_pieces([make_piece(PieceType.GENERAL, 1, 3)], 4, 5)
    assert board.goal_reached(0, (1, 3))
    assert not board.goal_reached(0, (1, 2))
    assert not board.goal_reached(None, (1, 3)), "Без генерала цель недостижима"


def test_positions_follow_piece_order():
    board = Board.from_pieces(standard_pieces(), 4, 5)
    assert board.positions() == [p.position for p in standard_pieces()]
    assert Board.positions.__doc__, "Публичный метод должен быть описан"
