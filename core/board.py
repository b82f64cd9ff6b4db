"""
core/board.py

Состояние доски Huarong Dao: сетка занятости с рамкой + список фигур.
"""

from typing import List, Optional, Sequence

from .pieces import Piece, PieceType, footprint_cells
from .utils import BORDER, EMPTY, Position

Direction = Position


class Board:
    """
    Снимок головоломки.

    Сетка хранится по столбцам и включает рамку: клетка (x, y) игрового
    поля лежит в grid[x + 1][y + 1]. Значения: BORDER, EMPTY или
    индекс фигуры + 1.

    parent — индекс родительской доски в арене решателя (None для корня).
    """
    __slots__ = ('grid', 'pieces', 'step', 'hash', 'mirror_hash', 'parent')

    def __init__(self, grid: List[List[int]], pieces: List[Piece], step: int = 0,
                 hash: int = 0, mirror_hash: int = 0, parent: Optional[int] = None):
        self.grid = grid
        self.pieces = pieces
        self.step = step
        self.hash = hash
        self.mirror_hash = mirror_hash
        self.parent = parent

    @classmethod
    def empty(cls, columns: int, rows: int) -> 'Board':
        """Пустая доска с рамкой по периметру."""
        width, height = columns + 2, rows + 2
        grid = [[EMPTY] * height for _ in range(width)]
        for x in range(width):
            grid[x][0] = BORDER
            grid[x][height - 1] = BORDER
        for y in range(1, height - 1):
            grid[0][y] = BORDER
            grid[width - 1][y] = BORDER
        return cls(grid, [])

    @classmethod
    def from_pieces(cls, pieces: Sequence[Piece], columns: int, rows: int) -> 'Board':
        """Создаёт доску и расставляет фигуры в заданном порядке."""
        board = cls.empty(columns, rows)
        for index, piece in enumerate(pieces):
            board.place(piece.type, piece.position, index)
            board.pieces.append(piece)
        return board

    @property
    def columns(self) -> int:
        return len(self.grid) - 2

    @property
    def rows(self) -> int:
        return len(self.grid[0]) - 2

    def cell(self, x: int, y: int) -> int:
        """Значение клетки игрового поля (координаты без рамки)."""
        return self.grid[x + 1][y + 1]

    def place(self, piece_type: PieceType, anchor: Position, piece_index: int) -> None:
        """Записывает piece_index + 1 во все клетки фигуры."""
        value = piece_index + 1
        for x, y in footprint_cells(piece_type, anchor):
            self.grid[x + 1][y + 1] = value

    def remove(self, piece_type: PieceType, anchor: Position) -> None:
        """Очищает клетки фигуры (place с индексом EMPTY - 1)."""
        self.place(piece_type, anchor, EMPTY - 1)

    def can_move(self, piece_index: int, direction: Direction) -> bool:
        """
        Может ли фигура сдвинуться на одну клетку.

        Каждая клетка после сдвига должна быть пустой или уже
        принадлежать этой же фигуре.
        """
        piece = self.pieces[piece_index]
        dx, dy = direction
        own = piece_index + 1
        for x, y in footprint_cells(piece.type, piece.position):
            target = self.grid[x + dx + 1][y + dy + 1]
            if target != EMPTY and target != own:
                return False
        return True

    def goal_reached(self, general_index: Optional[int], goal_position: Position) -> bool:
        """Генерал стоит на целевой клетке."""
        if general_index is None:
            return False
        return self.pieces[general_index].position == tuple(goal_position)

    def clone(self) -> 'Board':
        """Глубокая копия сетки и списка фигур; остальные поля копируются как есть."""
        return Board([column[:] for column in self.grid], list(self.pieces),
                     self.step, self.hash, self.mirror_hash, self.parent)

    def apply_move(self, piece_index: int, direction: Direction) -> 'Board':
        """
        Возвращает новую доску после сдвига фигуры.

        step, hash, mirror_hash и parent не пересчитываются — это делает решатель.
        Проверку допустимости хода (can_move) выполняет вызывающий код.
        """
        new_board = self.clone()
        piece = new_board.pieces[piece_index]
        new_board.remove(piece.type, piece.position)
        moved = piece.moved(*direction)
        new_board.place(moved.type, moved.position, piece_index)
        new_board.pieces[piece_index] = moved
        return new_board

    def positions(self) -> List[Position]:
        """Позиции всех фигур в порядке индексов."""
        return [piece.position for piece in self.pieces]

    def __repr__(self) -> str:
        return f"Board({len(self.pieces)} pieces, step={self.step}, hash={self.hash:016x})"
