"""
core/utils.py

Общие константы и утилиты для Huarong Dao.
"""

from typing import Tuple

Position = Tuple[int, int]

# Значения клеток сетки доски
BORDER = -1     # Рамка вокруг игрового поля
EMPTY = 0       # Пустая клетка

# Символы для текстового отображения
EMPTY_SYMBOL = '.'


def index_to_pos(x: int, y: int) -> str:
    """Координаты (x, y) → шахматная нотация (A1, B2, ...)."""
    return f"{chr(x + ord('A'))}{y + 1}"


def pos_to_index(pos: str) -> Position:
    """Шахматная нотация → координаты (x, y)."""
    pos = pos.strip()
    if len(pos) < 2 or not pos[0].isalpha() or not pos[1:].isdigit():
        raise ValueError(f"Неверная позиция: '{pos}'")
    x = ord(pos[0].upper()) - ord('A')
    y = int(pos[1:]) - 1
    return x, y


def is_valid_position(x: int, y: int, columns: int, rows: int) -> bool:
    """Проверяет, находится ли клетка в пределах доски."""
    return 0 <= x < columns and 0 <= y < rows
