"""
core/pieces.py

Каталог фигур: типы, размеры и геометрические предикаты.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .utils import Position


class PieceType(IntEnum):
    """Тип фигуры. Числовое значение используется как состояние клетки в Zobrist таблице."""
    SOLDIER = 1                # 1×1
    COMMANDER_VERTICAL = 2     # 1×2
    COMMANDER_HORIZONTAL = 3   # 2×1
    GENERAL = 4                # 2×2


# Количество состояний клетки: типы фигур + пустая клетка
CELL_STATES = len(PieceType) + 1

# (ширина, высота) для каждого типа
SIZE_FOR_TYPE: Dict[PieceType, Tuple[int, int]] = {
    PieceType.SOLDIER: (1, 1),
    PieceType.COMMANDER_VERTICAL: (1, 2),
    PieceType.COMMANDER_HORIZONTAL: (2, 1),
    PieceType.GENERAL: (2, 2),
}


@dataclass(frozen=True)
class Piece:
    """
    Фигура на доске.

    Иммутабельна: каждый ход создаёт новый Piece, поэтому родительские
    состояния остаются корректными. Сравнение — только по позиции
    (фигуры на одинаковых позициях взаимозаменяемы для поиска).
    """
    label: str = field(compare=False)
    type: PieceType = field(compare=False)
    position: Position

    @property
    def size(self) -> Tuple[int, int]:
        return SIZE_FOR_TYPE[self.type]

    def moved(self, dx: int, dy: int) -> 'Piece':
        """Новая фигура, сдвинутая на (dx, dy)."""
        x, y = self.position
        return Piece(self.label, self.type, (x + dx, y + dy))

    def cells(self) -> List[Position]:
        return footprint_cells(self.type, self.position)

    def __repr__(self) -> str:
        return f"Piece({self.label}, {self.type.name}, {self.position})"


def footprint(piece_type: PieceType) -> Tuple[int, int]:
    """Размер фигуры (ширина, высота)."""
    return SIZE_FOR_TYPE[piece_type]


def footprint_cells(piece_type: PieceType, anchor: Position) -> List[Position]:
    """Все клетки, занимаемые фигурой с левым верхним углом в anchor."""
    x, y = anchor
    width, height = SIZE_FOR_TYPE[piece_type]
    return [(x + dx, y + dy) for dx in range(width) for dy in range(height)]


def _intersects(piece: Piece, others: Iterable[Piece]) -> bool:
    """Пересечение прямоугольников (полуоткрытые интервалы)."""
    x, y = piece.position
    w, h = piece.size
    for other in others:
        ox, oy = other.position
        ow, oh = other.size
        if not (x + w <= ox or y + h <= oy or ox + ow <= x or oy + oh <= y):
            return True
    return False


def fits(piece: Piece, columns: int, rows: int, other_pieces: Sequence[Piece]) -> bool:
    """
    Проверяет, помещается ли фигура на доску.

    Args:
        piece: проверяемая фигура
        columns, rows: размер доски
        other_pieces: уже размещённые фигуры

    Returns:
        True если фигура в пределах доски и не пересекает другие фигуры
    """
    x, y = piece.position
    w, h = piece.size
    if x < 0 or y < 0 or x + w > columns or y + h > rows:
        return False
    return not _intersects(piece, other_pieces)


def find_general(pieces: Sequence[Piece]) -> Optional[int]:
    """Индекс генерала в списке фигур или None."""
    for index, piece in enumerate(pieces):
        if piece.type == PieceType.GENERAL:
            return index
    return None


def assign_label(piece_type: PieceType, current_pieces: Sequence[Piece]) -> str:
    """
    Подбирает подпись для новой фигуры.

    Солдаты и вертикальные командиры нумеруются 1..4 по кругу.
    """
    if piece_type == PieceType.SOLDIER:
        count = sum(1 for p in current_pieces if p.type == PieceType.SOLDIER)
        return f"soldier_{count % 4 + 1}"
    if piece_type == PieceType.COMMANDER_VERTICAL:
        count = sum(1 for p in current_pieces if p.type == PieceType.COMMANDER_VERTICAL)
        return f"commander_vertical_{count % 4 + 1}"
    if piece_type == PieceType.COMMANDER_HORIZONTAL:
        return "commander_horizontal"
    return "general"


def standard_pieces() -> List[Piece]:
    """Классическая расстановка «横刀立马» для доски 4×5."""
    return [
        Piece("commander_vertical_1", PieceType.COMMANDER_VERTICAL, (0, 0)),
        Piece("general", PieceType.GENERAL, (1, 0)),
        Piece("commander_vertical_2", PieceType.COMMANDER_VERTICAL, (3, 0)),
        Piece("commander_vertical_3", PieceType.COMMANDER_VERTICAL, (0, 2)),
        Piece("commander_horizontal", PieceType.COMMANDER_HORIZONTAL, (1, 2)),
        Piece("commander_vertical_4", PieceType.COMMANDER_VERTICAL, (3, 2)),
        Piece("soldier_1", PieceType.SOLDIER, (0, 4)),
        Piece("soldier_2", PieceType.SOLDIER, (1, 3)),
        Piece("soldier_3", PieceType.SOLDIER, (2, 3)),
        Piece("soldier_4", PieceType.SOLDIER, (3, 4)),
    ]


def mirror_pieces(pieces: Sequence[Piece], columns: int) -> List[Piece]:
    """Отражение расстановки слева направо."""
    mirrored = []
    for piece in pieces:
        x, y = piece.position
        width, _ = piece.size
        mirrored.append(Piece(piece.label, piece.type, (columns - x - width, y)))
    return mirrored
