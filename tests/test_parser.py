"""
tests/test_parser.py

Тесты текстового формата расстановки и вывода решения.
"""

import pytest

from core.board import Board
from core.config import Configuration
from core.pieces import PieceType, standard_pieces
from core.utils import pos_to_index, index_to_pos
from huarong_io import parse_layout, create_standard_layout, display_board, format_solution
from huarong_io.visualizer import describe_move, format_moves
from conftest import make_piece

STANDARD_TEXT = "size=4x5 goal=B4 G=B1 V=A1,D1,A3,D3 H=B3 S=A5,B4,C4,D5"


def test_positions_notation():
    assert pos_to_index("A1") == (0, 0)
    assert pos_to_index("b4") == (1, 3)
    assert index_to_pos(3, 4) == "D5"
    with pytest.raises(ValueError):
        pos_to_index("4B")


def test_parse_standard_layout():
    """Текстовая запись стандартной расстановки даёт те же фигуры."""
    pieces, config = parse_layout(STANDARD_TEXT)
    assert (config.columns, config.rows) == (4, 5)
    assert config.goal_position == (1, 3)
    assert sorted((p.type, p.position) for p in pieces) == \
        sorted((p.type, p.position) for p in standard_pieces())


def test_parse_assigns_labels():
    pieces, _ = parse_layout("G=B1 V=A1,D1 S=A5,D5")
    assert [p.label for p in pieces] == [
        "general", "commander_vertical_1", "commander_vertical_2", "soldier_1", "soldier_2"
    ]


def test_parse_keeps_base_config():
    base = Configuration.standard().with_options(allow_different_direction_double_move=True)
    pieces, config = parse_layout("size=3x3 goal=B2 S=A1", base_config=base)
    assert len(pieces) == 1 and pieces[0].type == PieceType.SOLDIER
    assert (config.columns, config.rows, config.goal_position) == (3, 3, (1, 1))
    assert config.allow_different_direction_double_move


def test_parse_rejects_empty():
    with pytest.raises(ValueError):
        parse_layout("size=4x5 goal=B4")


def test_parse_rejects_bad_position():
    with pytest.raises(ValueError):
        parse_layout("G=11")


@pytest.mark.parametrize("text, message", [
    ("G=B1 S=A5 S=D5", "повторно"),
    ("G=B1 X=A1", "Неизвестный ключ"),
    ("G=B1 S=A5;D5", "Неверный список позиций"),
    ("size=4x5 G=B1 V=A1 D1", "Не разобран фрагмент"),
    ("G=B1 S=A5,,D5", "Неверный список позиций"),
    ("size=4by5 G=B1", "Неверный размер"),
])
def test_parse_rejects_malformed_input(text, message):
    """Ни одна фигура не теряется молча: любой непонятый фрагмент — ошибка."""
    with pytest.raises(ValueError, match=message):
        parse_layout(text)


def test_parse_tolerates_extra_whitespace():
    pieces, _ = parse_layout("  G=B1\tS=A5,D5  ")
    assert [p.position for p in pieces] == [(1, 0), (0, 4), (3, 4)]


def test_create_standard_layout():
    pieces, config = create_standard_layout()
    assert len(pieces) == 10
    assert config == Configuration.standard()


def test_display_board():
    text = display_board(Board.from_pieces(standard_pieces(), 4, 5))
    lines = text.split("\n")
    assert lines[0].split() == ["A", "B", "C", "D"]
    assert lines[1].split() == ["1", "V", "G", "G", "V"]
    assert lines[3].split() == ["3", "V", "H", "H", "V"]
    assert lines[5].split() == ["5", "S", ".", ".", "S"]


def test_format_solution():
    before = Board.from_pieces([make_piece(PieceType.GENERAL, 0, 0)], 2, 4)
    after = Board.from_pieces([make_piece(PieceType.GENERAL, 0, 2)], 2, 4)
    after.step = 1
    assert describe_move(before, after) == "general: A1 → A3"
    assert format_moves([before, after]) == ["general: A1 → A3"]

    text = format_solution([before, after], show_boards=True)
    assert "1 шагов" in text
    assert "general: A1 → A3" in text
    assert format_solution(None).startswith("❌")
