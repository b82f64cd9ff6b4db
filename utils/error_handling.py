"""
utils/error_handling.py

Исключения решателя и проверка входных данных.
"""

from typing import Any, List, Optional, Sequence

from core.config import Configuration
from core.pieces import Piece, PieceType, fits
from core.utils import is_valid_position

from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidConfigurationError(SolverError):
    """Невалидная доска, цель или расстановка фигур."""
    pass


class NoSolutionError(SolverError):
    """Поиск исчерпал все состояния, цель недостижима."""
    pass


class SearchCancelledError(SolverError):
    """Поиск был отменён вызывающим кодом."""
    pass


def validate_setup(pieces: Sequence[Piece], config: Configuration,
                   require_general: bool = False) -> bool:
    """
    Проверяет расстановку и конфигурацию перед поиском.

    Args:
        pieces: начальная расстановка
        config: параметры поиска
        require_general: требовать ровно одного генерала (а не «не больше одного»)

    Returns:
        True если всё корректно

    Raises:
        InvalidConfigurationError: если доска невалидна
    """
    if config.columns < 1 or config.rows < 1:
        raise InvalidConfigurationError(
            f"Размер доски должен быть положительным: {config.columns}x{config.rows}"
        )

    if len(config.directions) != 4:
        raise InvalidConfigurationError("Таблица направлений должна содержать 4 направления")

    if not pieces:
        raise InvalidConfigurationError("Добавьте фигуры на доску")

    generals = [p for p in pieces if p.type == PieceType.GENERAL]
    if len(generals) > 1:
        raise InvalidConfigurationError("На доске может быть только один генерал")
    if require_general and not generals:
        raise InvalidConfigurationError("Добавьте генерала на доску")

    gx, gy = config.goal_position
    if not is_valid_position(gx, gy, config.columns, config.rows):
        raise InvalidConfigurationError(
            f"Цель {config.goal_position} вне доски {config.columns}x{config.rows}"
        )
    if generals:
        at_goal = Piece(generals[0].label, PieceType.GENERAL, (gx, gy))
        if not fits(at_goal, config.columns, config.rows, []):
            raise InvalidConfigurationError(
                f"Генерал не помещается на доску в целевой позиции {config.goal_position}"
            )
        width, _ = at_goal.size
        if config.exclude_mirror_states and config.columns - gx - width != gx:
            raise InvalidConfigurationError(
                f"Цель {config.goal_position} несимметрична: отсечение зеркальных позиций недопустимо"
            )

    placed: List[Piece] = []
    for piece in pieces:
        if not fits(piece, config.columns, config.rows, placed):
            raise InvalidConfigurationError(
                f"Фигура {piece.label} в {piece.position} не помещается на доску"
            )
        placed.append(piece)

    return True


def safe_solve(solver, pieces: Sequence[Piece], default: Any = None) -> Optional[Any]:
    """
    Безопасное выполнение solve с обработкой ошибок.

    Args:
        solver: решатель
        pieces: начальная расстановка
        default: значение по умолчанию при ошибке

    Returns:
        Решение или default
    """
    try:
        return solver.solve(pieces)
    except SolverError as e:
        logger = get_logger()
        logger.error(f"Ошибка решателя {solver.__class__.__name__}: {str(e)}")
        return default


def require_solution(path, cancelled: bool = False):
    """
    Превращает результат поиска в путь или исключение.

    Raises:
        SearchCancelledError: если поиск был отменён
        NoSolutionError: если решения нет
    """
    if cancelled:
        raise SearchCancelledError("Поиск отменён")
    if path is None:
        raise NoSolutionError("Решение не найдено")
    return path
