"""
Flashcards CLI.

Usage:
    python -m flashcards --sets-dir ./sets --set spanish
    python -m flashcards -f ./sets -s Spanish --capitalize --shuffle
    python -m flashcards -f ./sets -s spanish --reverse --log-file flashcards.log

Keys: n / right arrow = next, p / left arrow = previous, space = flip, q = quit.
"""

import sys
import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from flashcards.app import App
from flashcards.config import Settings
from flashcards.errors import FlashcardsError
from flashcards.session import run_session
from flashcards.sources import load_set
from flashcards.terminal import Terminal

logger = logging.getLogger("flashcards.cli")

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simple TUI flashcards.",
        prog="python -m flashcards",
    )
    parser.add_argument(
        '-f', '--sets-dir', default=None,
        help="Directory to find flashcard sets "
             "(default: $FLASHCARDS_SETS_DIR or ./sets)",
    )
    parser.add_argument(
        '-s', '--set', required=True, dest='set_name',
        help="Name of the set to run. Case insensitive, no file extension.",
    )
    parser.add_argument('-c', '--capitalize', action='store_true',
                        help="Show flashcard contents in all caps.")
    parser.add_argument('-r', '--shuffle', action='store_true',
                        help="Shuffle set before starting.")
    parser.add_argument('--reverse', action='store_true',
                        help="Start every card on its back side.")
    parser.add_argument('--log-file', default=None,
                        help="Write logs to this file (nothing is logged otherwise)")
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help="Log level for --log-file (default: INFO)")
    return parser


def setup_logging(log_file: Optional[str], level: str = 'INFO') -> None:
    """
    Send logs to a file. The curses screen owns the terminal, so there is no
    console handler; without a log file, logging stays unconfigured.
    """
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, args.log_level)
    err_console = Console(stderr=True)

    settings = Settings(sets_dir=args.sets_dir)

    try:
        flashcard_set = load_set(
            settings.sets_dir, args.set_name,
            capitalize=args.capitalize,
            reverse=args.reverse,
            shuffle=args.shuffle,
            extension=settings.extension,
        )
    except FlashcardsError as e:
        logger.error("Startup failed: %s", e)
        err_console.print(Text.assemble(("Error: ", "bold red"), str(e)))
        return 1

    app = App(flashcard_set)
    try:
        with Terminal(settings) as term:
            summary = run_session(app, term.draw, term.poll)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    logger.info("Session finished after %d message(s)", summary['messages'])
    return 0


if __name__ == '__main__':
    sys.exit(main())
