"""
core/zobrist.py

Zobrist Hashing — инкрементальное хеширование состояний доски.

Преимущества:
- Обновление хеша при ходе за O(размер фигуры), не больше 4 клеток
- Нет пересчёта всего состояния
- Хеш зеркальной доски считается той же таблицей
"""

import random
from typing import List, Optional

from .board import Board, Direction
from .pieces import CELL_STATES, footprint_cells
from .utils import EMPTY

# Диапазон случайных чисел: 0 зарезервирован как нейтральный элемент XOR
MIN_BITSTRING = 1
MAX_BITSTRING = 2 ** 63 - 1


class ZobristHasher:
    """
    Таблица случайных чисел columns × rows × cell_states и операции над ней.

    Для каждой клетки поля и каждого её состояния (пусто или тип фигуры)
    хранится случайное 63-bit число. Хеш доски — XOR чисел всех клеток.
    """
    __slots__ = ('columns', 'rows', 'cell_states', 'table')

    def __init__(self, columns: int, rows: int, cell_states: int = CELL_STATES,
                 seed: Optional[int] = None):
        """
        Args:
            columns, rows: размер игрового поля
            cell_states: количество состояний клетки
            seed: зерно генератора (для воспроизводимых тестов)
        """
        self.columns = columns
        self.rows = rows
        self.cell_states = cell_states
        rng = random.Random(seed)
        self.table: List[List[List[int]]] = [
            [
                [rng.randint(MIN_BITSTRING, MAX_BITSTRING) for _ in range(cell_states)]
                for _ in range(rows)
            ]
            for _ in range(columns)
        ]

    def _cell_type(self, board: Board, x: int, y: int) -> int:
        value = board.grid[x + 1][y + 1]
        index = value - 1
        if 0 <= index < len(board.pieces):
            return int(board.pieces[index].type)
        return EMPTY

    def full_hash(self, board: Board, mirrored: bool = False) -> int:
        """
        Полный пересчёт хеша доски.

        При mirrored=True считается хеш доски, отражённой слева направо:
        тип клетки берётся из столбца columns - 1 - col, а таблица
        индексируется исходным col.
        """
        h = 0
        for col in range(self.columns):
            source_col = self.columns - 1 - col if mirrored else col
            for row in range(self.rows):
                h ^= self.table[col][row][self._cell_type(board, source_col, row)]
        return h

    def delta_hash(self, board: Board, piece_index: int, direction: Direction,
                   mirrored: bool = False) -> int:
        """
        Хеш доски после сдвига фигуры, без полного пересчёта.

        Для каждой клетки старой позиции: XOR (тип фигуры, пусто).
        Для каждой клетки новой позиции: XOR (пусто, тип фигуры).
        Клетки, попавшие в обе позиции, взаимно сокращаются.

        При mirrored=True столбцы отражаются, что одновременно меняет
        знак горизонтальной составляющей хода.
        """
        h = board.mirror_hash if mirrored else board.hash
        piece = board.pieces[piece_index]
        piece_type = int(piece.type)
        x, y = piece.position
        dx, dy = direction
        last_col = self.columns - 1

        for cx, cy in footprint_cells(piece.type, (x, y)):
            col = last_col - cx if mirrored else cx
            h ^= self.table[col][cy][piece_type]
            h ^= self.table[col][cy][EMPTY]

        for cx, cy in footprint_cells(piece.type, (x + dx, y + dy)):
            col = last_col - cx if mirrored else cx
            h ^= self.table[col][cy][EMPTY]
            h ^= self.table[col][cy][piece_type]

        return h

    def __repr__(self) -> str:
        return f"ZobristHasher({self.columns}x{self.rows}, states={self.cell_states})"
