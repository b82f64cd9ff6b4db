"""
core - Ядро Huarong Dao

Базовые структуры данных и утилиты.
"""

from .board import Board
from .config import Configuration, DIRECTIONS, is_reverse_direction
from .pieces import (
    Piece, PieceType, CELL_STATES, SIZE_FOR_TYPE,
    footprint, footprint_cells, fits, find_general,
    assign_label, standard_pieces, mirror_pieces
)
from .zobrist import ZobristHasher
from .utils import BORDER, EMPTY, index_to_pos, pos_to_index

__all__ = [
    'Board', 'Configuration', 'ZobristHasher',
    'Piece', 'PieceType', 'CELL_STATES', 'SIZE_FOR_TYPE',
    'DIRECTIONS', 'is_reverse_direction',
    'footprint', 'footprint_cells', 'fits', 'find_general',
    'assign_label', 'standard_pieces', 'mirror_pieces',
    'BORDER', 'EMPTY', 'index_to_pos', 'pos_to_index'
]
