"""
solvers/engine.py

Асинхронный запуск поиска с кооперативной отменой.

Поиск выполняется в отдельном рабочем потоке; результат передаётся
через callback ровно один раз, если запуск не был отменён.
"""

import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from .base import SolverStats
from .bfs import BFSSolver
from core.board import Board
from core.config import Configuration
from core.pieces import Piece
from utils.error_handling import validate_setup
from utils.logging import get_logger

CompletionCallback = Callable[[Optional[List[Board]]], None]


@dataclass
class _SolveRun:
    """Состояние одного запуска."""
    run_id: int
    cancel_event: threading.Event = field(default_factory=threading.Event)
    future: Optional[Future] = None


class HuarongEngine:
    """
    Управляет решением головоломки в фоне.

    Особенности:
    - Один рабочий поток, внутри поиска параллелизма нет
    - solve() не блокирует вызывающий код
    - cancel() выставляет флаг, поиск останавливается на следующей итерации
    - После отмены callback не вызывается, движок сразу готов к новому solve()
    """

    def __init__(self, seed: Optional[int] = None, verbose: bool = False):
        """
        Args:
            seed: зерно для Zobrist таблицы (None — случайная таблица на каждый запуск)
            verbose: подробный лог решателя
        """
        self.seed = seed
        self.verbose = verbose
        self.logger = get_logger()
        self.last_stats: Optional[SolverStats] = None
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="huarong-solver")
        self._lock = threading.Lock()
        self._run: Optional[_SolveRun] = None
        self._run_counter = 0

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._run is not None

    def solve(self, pieces: Sequence[Piece], config: Configuration,
              on_complete: CompletionCallback,
              callback_executor: Optional[Executor] = None) -> Future:
        """
        Запускает поиск.

        Args:
            pieces: начальная расстановка
            config: параметры поиска
            on_complete: получает путь (список досок) или None, если решения нет
            callback_executor: где вызвать on_complete (по умолчанию — рабочий поток)

        Returns:
            Future с тем же результатом (None и для отменённого запуска)

        Raises:
            InvalidConfigurationError: если расстановка невалидна
        """
        validate_setup(pieces, config)

        with self._lock:
            self._run_counter += 1
            run = _SolveRun(self._run_counter)
            self._run = run

        self.logger.info(f"Solve #{run.run_id} started ({len(pieces)} pieces)")
        try:
            run.future = self._executor.submit(
                self._execute, run, list(pieces), config, on_complete, callback_executor
            )
        except RuntimeError:
            # движок уже остановлен
            with self._lock:
                if self._run is run:
                    self._run = None
            raise
        return run.future

    def cancel(self) -> None:
        """Просит текущий поиск остановиться. Без активного поиска ничего не делает."""
        with self._lock:
            run = self._run
            if run is None:
                return
            run.cancel_event.set()
            self._run = None
        self.logger.info(f"Solve #{run.run_id} cancelled")

    def shutdown(self, wait: bool = True) -> None:
        """Отменяет текущий поиск и останавливает рабочий поток."""
        self.cancel()
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> 'HuarongEngine':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def _execute(self, run: _SolveRun, pieces: List[Piece], config: Configuration,
                 on_complete: CompletionCallback,
                 callback_executor: Optional[Executor]) -> Optional[List[Board]]:
        solver = BFSSolver(config, seed=self.seed, verbose=self.verbose)
        try:
            path = solver.solve(pieces, cancel_event=run.cancel_event)
        except Exception:
            self.logger.error(f"Solve #{run.run_id} failed", exc_info=True)
            with self._lock:
                if self._run is run:
                    self._run = None
            raise

        with self._lock:
            if self._run is run:
                self._run = None
            if run.cancel_event.is_set():
                return None
            self.last_stats = solver.stats

        outcome = "no solution" if path is None else f"{path[-1].step} steps"
        self.logger.info(f"Solve #{run.run_id} completed: {outcome} ({solver.stats})")
        if callback_executor is not None:
            callback_executor.submit(self._deliver, run.run_id, on_complete, path)
        else:
            self._deliver(run.run_id, on_complete, path)
        return path

    def _deliver(self, run_id: int, on_complete: CompletionCallback,
                 path: Optional[List[Board]]) -> None:
        """Вызывает callback; его ошибка логируется и пробрасывается дальше."""
        try:
            on_complete(path)
        except Exception:
            self.logger.error(f"Solve #{run_id}: completion callback failed", exc_info=True)
            raise
