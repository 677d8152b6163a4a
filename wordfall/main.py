#!/usr/bin/env python3
"""
WORDFALL - Terminal Typing Game
================================
Words fall from the top of the screen. Type one and press Enter
before it reaches the bottom to score a point; every word that gets
through costs one health.

Controls:
    a-z       - Type
    BACKSPACE - Delete last character
    ENTER     - Submit
    ESC       - Quit
"""

import argparse
import logging
import random
import sys
import time
from typing import Callable, List, Optional

from blessed import Terminal

from .config import (
    GameConfig, MIN_WIDTH, MIN_HEIGHT,
    TARGET_FPS, FALL_ROWS_PER_SECOND, MAX_ACTIVE_WORDS, STARTING_HEALTH,
)
from .errors import TerminalIOError, WordSourceError
from .game import Game
from .logging_config import setup_logging
from .renderer import max_health_markers
from .terminal import TerminalSurface
from .words import load_words

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wordfall',
        description='Type the falling words before they hit the bottom.',
    )
    parser.add_argument('--fps', type=int, default=TARGET_FPS,
                        help=f'frames per second (default: {TARGET_FPS})')
    parser.add_argument('--fall-rate', type=float, default=FALL_ROWS_PER_SECOND,
                        help=f'rows fallen per second (default: {FALL_ROWS_PER_SECOND})')
    parser.add_argument('--max-words', type=int, default=MAX_ACTIVE_WORDS,
                        help=f'words on screen at once (default: {MAX_ACTIVE_WORDS})')
    parser.add_argument('--health', type=int, default=STARTING_HEALTH,
                        help=f'starting health (default: {STARTING_HEALTH})')
    parser.add_argument('--words', metavar='PATH',
                        help='newline-delimited word list (default: bundled lexicon)')
    parser.add_argument('--seed', type=int, help='random seed for word placement')
    parser.add_argument('--log-file', metavar='PATH', help='write logs to this file')
    parser.add_argument('--debug', action='store_true', help='log at DEBUG level')
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        fps=args.fps,
        fall_rows_per_second=args.fall_rate,
        max_active_words=args.max_words,
        starting_health=args.health,
    )


def run(game: Game, config: GameConfig,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Optional[Callable[[float], None]] = None) -> None:
    """Fixed-rate frame loop: do one frame, sleep out the rest of its budget."""
    sleep = sleep or time.sleep
    game.intro()

    while not game.is_over:
        start = clock()
        try:
            game.step()
        except KeyboardInterrupt:
            game.request_quit()
            continue

        elapsed = clock() - start
        sleep_time = config.frame_time - elapsed
        if sleep_time > 0:
            sleep(sleep_time)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Sets up logging and the terminal, then runs the game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)

    try:
        words = load_words(args.words)
    except WordSourceError as e:
        logger.error(str(e))
        return 1

    surface = TerminalSurface(Terminal())
    try:
        width, height = surface.size()
        if width < MIN_WIDTH or height < MIN_HEIGHT:
            print(
                f'Terminal too small: {width}x{height}. '
                f'Minimum: {MIN_WIDTH}x{MIN_HEIGHT}'
            )
            return 1
        if config.starting_health > max_health_markers(width):
            print(
                f'Health {config.starting_health} does not fit a {width}-column '
                f'terminal. Maximum: {max_health_markers(width)}'
            )
            return 1

        rng = random.Random(args.seed)
        with surface.session():
            game = Game(surface, words, config, rng)
            run(game, config)
    except TerminalIOError as e:
        logger.error(f"Terminal failure, exiting: {e}")
        return 1
    except KeyboardInterrupt:
        return 130

    print(f'Final score: {game.score}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
