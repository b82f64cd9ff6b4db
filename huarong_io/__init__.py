"""
huarong_io - Ввод/вывод для Huarong Dao

Экспортирует:
- Парсинг текстовой расстановки
- Текстовую визуализацию доски и решения
"""

from .parser import parse_layout, create_standard_layout
from .visualizer import display_board, describe_move, format_moves, format_solution

__all__ = [
    'parse_layout',
    'create_standard_layout',
    'display_board',
    'describe_move',
    'format_moves',
    'format_solution',
]
