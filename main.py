#!/usr/bin/env python3
"""
main.py

Точка входа для Huarong Dao Solver.

Использование:
    python main.py                                   # стандартная расстановка «横刀立马»
    python main.py "size=4x5 goal=B4 G=B1 S=A1,D1"   # своя позиция
    python main.py --any-direction                   # двойной ход в разных направлениях = 1 шаг
"""

import argparse
import logging
import sys
import threading
import time

from core.board import Board
from huarong_io import parse_layout, create_standard_layout, display_board, format_solution
from solutions.verify import verify_path
from solvers import HuarongEngine
from utils.error_handling import InvalidConfigurationError, validate_setup
from utils.logging import get_logger, setup_file_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Huarong Dao (Klotski) Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                                  # стандартная доска
  python main.py "G=B1 V=A1,D1 H=B3 S=A5,D5"      # своя расстановка
  python main.py --any-direction --boards         # с печатью каждой доски
        """
    )
    parser.add_argument(
        'layout', nargs='?',
        help='Позиция в формате: size=4x5 goal=B4 G=B1 V=A1,... H=B3 S=A5,...'
    )
    parser.add_argument(
        '--any-direction', action='store_true',
        help='Двойной ход в разных направлениях считается одним шагом'
    )
    parser.add_argument(
        '--keep-mirrors', action='store_true',
        help='Не отсекать зеркальные позиции'
    )
    parser.add_argument('--seed', type=int, default=None, help='Зерно Zobrist таблицы')
    parser.add_argument('--boards', action='store_true', help='Печатать доску после каждого шага')
    parser.add_argument('--verbose', '-v', action='store_true', help='Подробный лог')
    parser.add_argument('--quiet', '-q', action='store_true', help='Только предупреждения в логе')
    parser.add_argument('--log-file', default=None, help='Дополнительно писать лог в файл')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger()
    if args.quiet:
        logger.set_level(logging.WARNING)
    elif args.verbose:
        logger.set_level(logging.DEBUG)
    if args.log_file:
        setup_file_logging(args.log_file)

    print("=" * 50)
    print("🎯 Huarong Dao Solver")
    print("=" * 50)

    try:
        if args.layout:
            pieces, config = parse_layout(args.layout)
        else:
            pieces, config = create_standard_layout()
        config = config.with_options(
            exclude_mirror_states=not args.keep_mirrors,
            allow_different_direction_double_move=args.any_direction,
        )
        validate_setup(pieces, config, require_general=True)
    except (ValueError, InvalidConfigurationError) as e:
        print(f"❌ Ошибка: {e}")
        return 1

    initial = Board.from_pieces(pieces, config.columns, config.rows)
    print(f"\nНачальная позиция ({len(pieces)} фигур, цель {config.goal_position}):")
    print(display_board(initial))
    print(f"\n🔧 Правило: {config.describe_double_move()}")
    print("-" * 50)

    done = threading.Event()
    result = {}

    def on_complete(path):
        result['path'] = path
        done.set()

    start = time.time()
    with HuarongEngine(seed=args.seed, verbose=args.verbose) as engine:
        future = engine.solve(pieces, config, on_complete)
        try:
            while not done.wait(0.1):
                if future.done():
                    break
        except KeyboardInterrupt:
            engine.cancel()
            print("\n⛔ Поиск отменён")
            return 1
        if not done.is_set() and future.exception() is not None:
            print(f"❌ Ошибка решателя: {future.exception()}")
            return 1
        stats = engine.last_stats
    elapsed = time.time() - start

    path = result.get('path')
    print(f"\n{format_solution(path, show_boards=args.boards)}")
    print(f"\n⏱ Время: {elapsed:.3f}с")
    if stats is not None:
        print(f"📊 Статистика: {stats}")

    if path is None:
        return 1

    if not verify_path(path, config, initial_pieces=pieces):
        print("❌ Найдено некорректное решение (валидация не пройдена)")
        return 1
    print("✅ Решение корректно!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
