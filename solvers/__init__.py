"""
solvers - Решатели Huarong Dao

Экспортирует:
- BFSSolver: синхронный поиск в ширину (кратчайший путь)
- HuarongEngine: фоновый запуск BFS с отменой
"""

from .base import BaseSolver, SolverStats
from .bfs import BFSSolver
from .engine import HuarongEngine

__all__ = [
    'BaseSolver',
    'SolverStats',
    'BFSSolver',
    'HuarongEngine',
]
