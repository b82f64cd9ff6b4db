"""
solvers/bfs.py

Поиск в ширину по графу ходов Huarong Dao.

Очередь — это список всех найденных досок (арена), который никогда
не укорачивается: курсор чтения двигается вперёд, а пройденные доски
остаются для восстановления пути по индексам parent.
"""

import threading
import time
from typing import List, Optional, Sequence, Set, Tuple

from .base import BaseSolver, SolverStats
from core.board import Board, Direction
from core.config import Configuration, is_reverse_direction
from core.pieces import Piece, find_general
from core.zobrist import ZobristHasher


class BFSSolver(BaseSolver):
    """
    BFS с Zobrist хешированием и отсечением зеркальных позиций.

    Особенности:
    - Первая найденная целевая доска лежит на минимальном шаге
    - Двойной ход одной фигуры считается одним шагом
    - Зеркальные позиции (слева направо) считаются одним узлом
    - Кооперативная отмена через threading.Event
    """

    def __init__(self, config: Configuration, seed: Optional[int] = None,
                 verbose: bool = False):
        """
        Args:
            config: параметры поиска
            seed: зерно для Zobrist таблицы
            verbose: выводить отладочную информацию
        """
        super().__init__(verbose)
        self.config = config
        self.seed = seed
        self.hasher: Optional[ZobristHasher] = None
        self.boards: List[Board] = []
        self.visited: Set[int] = set()
        self.general_index: Optional[int] = None

    def setup(self, pieces: Sequence[Piece]) -> Board:
        """Сбрасывает состояние и кладёт начальную доску в арену."""
        config = self.config
        self.stats = SolverStats()
        self.hasher = ZobristHasher(config.columns, config.rows, seed=self.seed)
        self.boards = []
        self.visited = set()
        self.general_index = find_general(pieces)

        root = Board.from_pieces(pieces, config.columns, config.rows)
        root.hash = self.hasher.full_hash(root)
        root.mirror_hash = self.hasher.full_hash(root, mirrored=True)
        self.boards.append(root)
        return root

    def solve(self, pieces: Sequence[Piece],
              cancel_event: Optional[threading.Event] = None) -> Optional[List[Board]]:
        """
        Ищет кратчайший путь генерала к цели.

        Args:
            pieces: начальная расстановка
            cancel_event: флаг отмены, проверяется на каждой итерации

        Returns:
            Доски пути (по одной на логический шаг) или None, если
            решения нет или поиск отменён (см. stats.cancelled)
        """
        start = time.time()
        self.setup(pieces)
        self._log(f"Starting BFS ({len(pieces)} pieces, "
                  f"{self.config.columns}x{self.config.rows}, goal={self.config.goal_position})")

        path = self._search(cancel_event)

        self.stats.time_elapsed = time.time() - start
        if self.stats.cancelled:
            self._log(f"Cancelled: {self.stats}")
        elif path is None:
            self._log(f"No solution. {self.stats}")
        else:
            self.stats.solution_length = path[-1].step
            self._log(f"Solution found: {path[-1].step} steps. {self.stats}")
        return path

    def _search(self, cancel_event: Optional[threading.Event]) -> Optional[List[Board]]:
        goal = self.config.goal_position
        index = 0
        while index < len(self.boards):
            if cancel_event is not None and cancel_event.is_set():
                self.stats.cancelled = True
                return None

            board = self.boards[index]
            current = index
            index += 1
            self._mark_visited(board)
            self.stats.nodes_visited += 1
            self.stats.max_depth = max(self.stats.max_depth, board.step)

            if board.goal_reached(self.general_index, goal):
                return self.reconstruct_path(current)
            self._expand(current)
        return None

    def _mark_visited(self, board: Board) -> None:
        self.visited.add(board.hash)
        if self.config.exclude_mirror_states:
            self.visited.add(board.mirror_hash)

    def _expand(self, board_index: int) -> None:
        """Перебирает все пары (фигура, направление) для доски."""
        board = self.boards[board_index]
        for piece_index in range(len(board.pieces)):
            for direction_index in range(len(self.config.directions)):
                self._try_move(board_index, piece_index, direction_index)

    def _try_move(self, board_index: int, piece_index: int, first_direction: int) -> None:
        """
        Первый ход фигуры и попытка второго хода той же фигурой.

        Второй ход пробуется и от уже встречавшейся промежуточной позиции.
        """
        board = self.boards[board_index]
        direction = self.config.directions[first_direction]
        if not board.can_move(piece_index, direction):
            return

        new_hash, mirror_hash = self._hashes(board, piece_index, direction)
        intermediate = self._derive(board, board_index, piece_index, direction,
                                    new_hash, mirror_hash)
        if self._is_new(new_hash, mirror_hash):
            first_index: Optional[int] = self._append(intermediate)
        else:
            self.stats.nodes_pruned += 1
            first_index = None

        for second_direction in self._second_directions(first_direction):
            self._try_move_again(intermediate, first_index, board_index,
                                 piece_index, second_direction)

    def _second_directions(self, first_direction: int) -> List[int]:
        if not self.config.allow_different_direction_double_move:
            return [first_direction]
        count = len(self.config.directions)
        return [d for d in range(count) if not is_reverse_direction(first_direction, d, count)]

    def _try_move_again(self, intermediate: Board, first_index: Optional[int],
                        board_index: int, piece_index: int, direction_index: int) -> None:
        direction = self.config.directions[direction_index]
        if not intermediate.can_move(piece_index, direction):
            return

        new_hash, mirror_hash = self._hashes(intermediate, piece_index, direction)
        if not self._is_new(new_hash, mirror_hash):
            self.stats.nodes_pruned += 1
            return

        # промежуточной доски нет в арене, ссылаемся на исходную
        parent = first_index if first_index is not None else board_index
        new_board = self._derive(intermediate, parent, piece_index, direction,
                                 new_hash, mirror_hash)
        # второй ход входит в тот же логический шаг
        new_board.step = intermediate.step
        self._append(new_board)
        self.stats.double_moves += 1

    def _hashes(self, board: Board, piece_index: int, direction: Direction) -> Tuple[int, int]:
        return (self.hasher.delta_hash(board, piece_index, direction),
                self.hasher.delta_hash(board, piece_index, direction, mirrored=True))

    def _is_new(self, new_hash: int, mirror_hash: int) -> bool:
        if new_hash in self.visited:
            return False
        return not (self.config.exclude_mirror_states and mirror_hash in self.visited)

    def _derive(self, board: Board, parent_index: int, piece_index: int, direction: Direction,
                new_hash: int, mirror_hash: int) -> Board:
        """Новая доска после хода, шаг на 1 больше, чем у board."""
        new_board = board.apply_move(piece_index, direction)
        new_board.step = board.step + 1
        new_board.parent = parent_index
        new_board.hash = new_hash
        new_board.mirror_hash = mirror_hash
        return new_board

    def _append(self, board: Board) -> int:
        """Кладёт доску в арену и сразу отмечает её посещённой."""
        self._mark_visited(board)
        self.boards.append(board)
        self.stats.nodes_generated += 1
        return len(self.boards) - 1

    def reconstruct_path(self, board_index: int) -> List[Board]:
        """
        Восстанавливает путь от корня до доски.

        Если шаг доски равен шагу родителя (второй ход двойного хода),
        родитель пропускается: в пути одна доска на логический шаг.
        """
        path: List[Board] = []
        current: Optional[int] = board_index
        while current is not None:
            board = self.boards[current]
            path.append(board)
            parent = board.parent
            if parent is not None and self.boards[parent].step == board.step:
                current = self.boards[parent].parent
            else:
                current = parent
        path.reverse()
        return path
