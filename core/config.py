"""
core/config.py

Параметры решения: размер доски, цель и правила подсчёта шагов.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from .utils import Position

Direction = Tuple[int, int]

# Направления движения (x вправо, y вниз): вниз, вправо, вверх, влево
DIRECTIONS: Tuple[Direction, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


def is_reverse_direction(first: int, second: int, count: int = len(DIRECTIONS)) -> bool:
    """Проверяет, противоположны ли два направления (по индексам в таблице)."""
    return (first + 2) % count == second


@dataclass(frozen=True)
class Configuration:
    """
    Иммутабельные параметры одного поиска.

    Attributes:
        columns, rows: размер игрового поля (без рамки)
        goal_position: клетка, в которую должен прийти левый верхний угол генерала
        exclude_mirror_states: считать зеркальные (слева направо) позиции одинаковыми
        allow_different_direction_double_move: двойной ход в разных направлениях = 1 шаг
        directions: таблица направлений
    """
    columns: int = 4
    rows: int = 5
    goal_position: Position = (1, 3)
    exclude_mirror_states: bool = True
    allow_different_direction_double_move: bool = False
    directions: Tuple[Direction, ...] = DIRECTIONS

    @classmethod
    def standard(cls) -> 'Configuration':
        """Стандартная доска 4×5, выход генерала в (1, 3)."""
        return cls()

    def with_options(self, **changes) -> 'Configuration':
        """Копия конфигурации с изменёнными полями."""
        return replace(self, **changes)

    def describe_double_move(self) -> str:
        """Текстовое описание действующего правила двойного хода."""
        if self.allow_different_direction_double_move:
            return "двойной ход в любых направлениях считается одним шагом"
        return "двойной ход считается одним шагом только в одном направлении"
