#!/usr/bin/env python3
"""
main.py

Точка входа для Chomp Solver.

Использование:
    python main.py                              # решить 5x5 и показать полную доску
    python main.py --width 4 --height 3         # свои границы
    python main.py --position 4,4,3 --replay    # позиция и оптимальная партия
"""

import sys
import argparse
import logging
import time

from core.fast import get_implementation_info
from core.position import Position
from core.utils import DEFAULT_WIDTH, DEFAULT_HEIGHT
from chomp_io import (
    parse_position, parse_cut, display_position, format_cut, format_replay,
    summarize, format_summary, describe_position
)
from game import Game, play_optimal
from solvers import RetrogradeSolver
from utils.error_handling import SolverError
from utils.logging import get_logger, setup_file_logging
from utils.monitoring import get_monitor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Chomp Solver: ретроградный анализ всех позиций',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                          # доска 5x5
  python main.py -W 7 -H 4                # доска 7x4
  python main.py -p 3,2,2 --replay        # позиция и оптимальная партия
  python main.py -W 2 -H 2 --cut "2 2"    # разрез (строка, столбец) с единицы
        """
    )
    parser.add_argument('--width', '-W', type=int, default=DEFAULT_WIDTH,
                        help=f'Максимальная ширина (default: {DEFAULT_WIDTH})')
    parser.add_argument('--height', '-H', type=int, default=DEFAULT_HEIGHT,
                        help=f'Число строк (default: {DEFAULT_HEIGHT})')
    parser.add_argument('--position', '-p',
                        help='Позиция: заполненность строк начиная с нижней, например 4,4,3')
    parser.add_argument('--cut', '-c',
                        help='Разрез перед анализом: строка и столбец с единицы, например "2 3"')
    parser.add_argument('--replay', '-r', action='store_true',
                        help='Показать оптимальную партию из позиции')
    parser.add_argument('--log-file', help='Дублировать лог в файл')
    parser.add_argument('--verbose', '-v', action='store_true', help='Подробный лог решателя')
    parser.add_argument('--stats', action='store_true', help='Показать статистику производительности')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger()
    logger.set_level(logging.INFO if args.verbose else logging.WARNING)
    file_handler = setup_file_logging(args.log_file) if args.log_file else None

    print("=" * 50)
    print("🍫 Chomp Solver")
    print("=" * 50)
    print(f"🔧 Хеш: {get_implementation_info()}")

    try:
        if args.position:
            position = parse_position(args.position, height=args.height, max_width=args.width)
        else:
            position = Position.starting_rectangle(args.width, args.height)

        solver = RetrogradeSolver(verbose=args.verbose)
        start = time.time()
        cache = solver.solve(args.width, args.height)
        elapsed = time.time() - start

        print(f"\n{format_summary(summarize(cache))}")
        print(f"⏱ Время: {elapsed:.3f}с")

        game = Game(cache, position)
        if args.cut:
            cut = parse_cut(args.cut)
            game = game.apply_move(*cut)
            print(f"\n✂ Разрез {format_cut(cut)}")
        print("\nПозиция:")
        print(display_position(game.position, args.width))
        print()
        print(describe_position(game))

        if args.replay:
            print()
            print(format_replay(play_optimal(game)))
    except SolverError as e:
        print(f"❌ Ошибка: {e}")
        return 1
    finally:
        if file_handler is not None:
            logger.logger.removeHandler(file_handler)
            file_handler.close()

    if args.stats:
        print()
        print(get_monitor().format_stats())

    return 0


if __name__ == "__main__":
    sys.exit(main())
