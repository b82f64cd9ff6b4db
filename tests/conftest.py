"""
tests/conftest.py

Общие фикстуры и построители досок для тестов.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.config import Configuration
from core.pieces import Piece, PieceType, standard_pieces
from solvers.bfs import BFSSolver


def make_piece(piece_type: PieceType, x: int, y: int, label: str = None) -> Piece:
    """Фигура с подписью по умолчанию из имени типа."""
    return Piece(label or piece_type.name.lower(), piece_type, (x, y))


@pytest.fixture
def standard_config() -> Configuration:
    return Configuration.standard()


@pytest.fixture(scope="session")
def standard_solution():
    """Решение стандартной расстановки (считается один раз за сессию)."""
    solver = BFSSolver(Configuration.standard(), seed=7)
    path = solver.solve(standard_pieces())
    return solver, path


@pytest.fixture(scope="session")
def any_direction_solution():
    """Решение стандартной расстановки, двойной ход с поворотом = один шаг."""
    config = Configuration.standard().with_options(allow_different_direction_double_move=True)
    solver = BFSSolver(config, seed=7)
    path = solver.solve(standard_pieces())
    return solver, path
