"""
solutions/verify.py

Независимая проверка найденного пути: каждый шаг должен быть одним
логическим ходом по правилам конфигурации.
"""

from typing import List, Optional, Sequence, Set

from core.board import Board
from core.config import Configuration, is_reverse_direction
from core.pieces import Piece, find_general, fits
from core.utils import Position


def layout_is_legal(pieces: Sequence[Piece], columns: int, rows: int) -> bool:
    """Все фигуры на доске и не пересекаются."""
    placed: List[Piece] = []
    for piece in pieces:
        if not fits(piece, columns, rows, placed):
            return False
        placed.append(piece)
    return True


def reachable_in_one_step(board: Board, piece_index: int, config: Configuration) -> Set[Position]:
    """
    Позиции фигуры, достижимые за один логический шаг.

    Один шаг — это один сдвиг или два сдвига той же фигуры:
    в том же направлении, либо (если разрешено) в любом, кроме обратного.
    """
    directions = config.directions
    result: Set[Position] = set()
    for first, direction in enumerate(directions):
        if not board.can_move(piece_index, direction):
            continue
        after_first = board.apply_move(piece_index, direction)
        result.add(after_first.pieces[piece_index].position)

        if config.allow_different_direction_double_move:
            seconds = [d for d in range(len(directions))
                       if not is_reverse_direction(first, d, len(directions))]
        else:
            seconds = [first]
        for second in seconds:
            if after_first.can_move(piece_index, directions[second]):
                after_second = after_first.apply_move(piece_index, directions[second])
                result.add(after_second.pieces[piece_index].position)
    return result


def verify_path(path: Sequence[Board], config: Configuration,
                initial_pieces: Optional[Sequence[Piece]] = None) -> bool:
    """
    Проверяет корректность пути.

    Правила:
    - начальная расстановка легальна (и совпадает с initial_pieces, если задана);
    - соседние доски отличаются позицией ровно одной фигуры;
    - эта фигура перешла в новую позицию за один логический шаг;
    - шаг увеличивается ровно на 1;
    - на последней доске генерал стоит в цели.
    """
    if not path:
        return False

    first = path[0]
    if not layout_is_legal(first.pieces, config.columns, config.rows):
        return False
    if initial_pieces is not None:
        if first.positions() != [p.position for p in initial_pieces]:
            return False

    for prev, cur in zip(path, path[1:]):
        if len(prev.pieces) != len(cur.pieces):
            return False
        if cur.step != prev.step + 1:
            return False

        if any(a.type != b.type for a, b in zip(prev.pieces, cur.pieces)):
            return False
        changed = [i for i, (a, b) in enumerate(zip(prev.pieces, cur.pieces))
                   if a.position != b.position]
        if len(changed) != 1:
            return False
        index = changed[0]

        replay = Board.from_pieces(prev.pieces, config.columns, config.rows)
        if cur.pieces[index].position not in reachable_in_one_step(replay, index, config):
            return False

    last = path[-1]
    return last.goal_reached(find_general(last.pieces), config.goal_position)
