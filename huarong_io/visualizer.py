"""
huarong_io/visualizer.py

Текстовая визуализация доски и решений.
"""

from typing import Dict, List, Optional, Sequence

from core.board import Board
from core.pieces import PieceType
from core.utils import EMPTY, EMPTY_SYMBOL, index_to_pos

SYMBOL_FOR_TYPE: Dict[PieceType, str] = {
    PieceType.GENERAL: 'G',
    PieceType.COMMANDER_VERTICAL: 'V',
    PieceType.COMMANDER_HORIZONTAL: 'H',
    PieceType.SOLDIER: 'S',
}


def display_board(board: Board) -> str:
    """
    Красиво форматирует текстовое представление доски.

    Args:
        board: доска

    Returns:
        Строка для вывода
    """
    header = "   " + " ".join(chr(c + ord('A')) for c in range(board.columns))
    lines = [header]

    for y in range(board.rows):
        cells = []
        for x in range(board.columns):
            value = board.cell(x, y)
            if value == EMPTY:
                cells.append(EMPTY_SYMBOL)
            else:
                cells.append(SYMBOL_FOR_TYPE[board.pieces[value - 1].type])
        lines.append(f"{y + 1:<2} " + " ".join(cells))

    return "\n".join(lines)


def describe_move(prev: Board, cur: Board) -> Optional[str]:
    """Какая фигура сдвинулась между двумя досками: 'general: B1 → B2'."""
    for before, after in zip(prev.pieces, cur.pieces):
        if before.position != after.position:
            return (f"{after.label}: {index_to_pos(*before.position)} → "
                    f"{index_to_pos(*after.position)}")
    return None


def format_moves(path: Sequence[Board]) -> List[str]:
    """Список ходов пути в текстовом виде."""
    return [describe_move(prev, cur) or "-" for prev, cur in zip(path, path[1:])]


def format_solution(path: Optional[Sequence[Board]], show_boards: bool = False) -> str:
    """
    Форматирует решение для вывода.

    Args:
        path: доски пути или None
        show_boards: печатать доску после каждого шага

    Returns:
        Форматированная строка
    """
    if not path:
        return "❌ Решение не найдено"

    lines = [f"✅ Найдено решение за {path[-1].step - path[0].step} шагов:"]
    if show_boards:
        lines.append(display_board(path[0]))
    for prev, cur in zip(path, path[1:]):
        lines.append(f"  {cur.step:3}. {describe_move(prev, cur) or '-'}")
        if show_boards:
            lines.append(display_board(cur))
    return "\n".join(lines)
