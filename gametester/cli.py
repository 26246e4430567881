"""
Console script for testing a four player game over a range of seeds.

Example:
    gametester alice bob carol dave --instances 500 --seed 1000 -g default.cnf
"""
import argparse
import logging
import shlex
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from gametester import __version__
from gametester.constants import (
    DEFAULT_GAME_COMMAND,
    DEFAULT_INSTANCES,
    DEFAULT_SEED,
    DEFAULT_SETTINGS_FILE,
    NUM_PLAYERS,
)
from gametester.errors import GameTesterError
from gametester.models.config import TestConfig
from gametester.runner.executor import run_tests
from gametester.ui.progress import GameProgress
from gametester.ui.report import ResultsReport

logger = logging.getLogger("gametester")


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gametester",
        description="A simple tester for four player games driven by a seed.",
    )
    for i in range(1, NUM_PLAYERS + 1):
        parser.add_argument(f"player{i}", help=f"Name of player {i}")
    parser.add_argument(
        "--instances", "-i",
        type=positive_int,
        default=DEFAULT_INSTANCES,
        help=f"Number of instances to run (default: {DEFAULT_INSTANCES})"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=DEFAULT_SEED,
        help=f"Initial seed to test (default: {DEFAULT_SEED})"
    )
    parser.add_argument(
        "--game-settings", "-g",
        default=DEFAULT_SETTINGS_FILE,
        help=f"Game settings file (default: {DEFAULT_SETTINGS_FILE})"
    )
    parser.add_argument(
        "--game", "-x",
        default=shlex.join(DEFAULT_GAME_COMMAND),
        help="Game program to run, may include leading arguments (default: %(default)s)"
    )
    parser.add_argument(
        "--jobs", "-j",
        type=positive_int,
        default=None,
        help="Number of games run in parallel (default: number of CPUs)"
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not show the progress bar"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every game run"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(console: Console, verbose: bool = False):
    handler = RichHandler(
        console=console, show_path=False, rich_tracebacks=True, log_time_format="[%X]"
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


def main(argv: Optional[List[str]] = None) -> int:
    """Console script entry point."""
    args = build_parser().parse_args(argv)

    err_console = Console(stderr=True)
    setup_logging(err_console, verbose=args.verbose)

    try:
        config = TestConfig.build(
            player_names=[args.player1, args.player2, args.player3, args.player4],
            seed=args.seed,
            instances=args.instances,
            settings_file=args.game_settings,
            game_command=shlex.split(args.game),
            jobs=args.jobs,
        )
        with GameProgress(config.instances, err_console, disable=args.no_progress) as progress:
            results = run_tests(config, on_outcome=progress.advance)
    except (GameTesterError, OSError) as e:
        logger.error("%s", e)
        return 1

    ResultsReport(Console()).print_results(config, results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
