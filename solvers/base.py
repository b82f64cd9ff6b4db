"""
solvers/base.py

Базовый класс для решателей.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from core.board import Board
from core.pieces import Piece
from utils.logging import get_logger


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    nodes_generated: int = 0
    nodes_pruned: int = 0
    double_moves: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0
    cancelled: bool = False

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Generated: {self.nodes_generated}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Наследники реализуют метод solve().
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()
        self.logger = get_logger()

    @abstractmethod
    def solve(self, pieces: Sequence[Piece]) -> Optional[List[Board]]:
        """
        Решает головоломку.

        Args:
            pieces: начальная расстановка

        Returns:
            Доски кратчайшего пути (от начальной до целевой) или None
        """
        pass

    def _log(self, message: str) -> None:
        """Пишет в лог: INFO если verbose=True, иначе DEBUG."""
        text = f"[{self.__class__.__name__}] {message}"
        if self.verbose:
            self.logger.info(text)
        else:
            self.logger.debug(text)
