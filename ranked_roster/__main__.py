"""
CLI entry point for the ranked roster.

Parses arguments, validates config, wires components and runs the
add/remove command loop.
"""

import argparse
import sys
from argparse import Namespace
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO, TypedDict

from .clocks.monotonic_clock import MonotonicClock
from .controller import RosterConfig, RosterController
from .exceptions import ConfigurationError, RosterError
from .interfaces import RosterSource
from .loaders.demo_source import DemoRosterSource
from .loaders.json_source import JSONRosterSource
from .logging_config import get_logger, setup_logging
from .presenters.table_presenter import TablePresenter, build_table
from .ranking.merge_ranker import MergeRanker

HELP_TEXT = """Commands:
  add <name> <score>   admit a player (the last token is the score)
  remove <id>          remove a player by id
  show                 print the current leaderboard
  help                 show this message
  quit                 exit"""


class CLIArgs(TypedDict):
    """Typed representation of parsed CLI arguments."""
    roster: str | None
    demo: bool
    commands: list[str]
    bar_width: int
    max_entries: int
    debug: bool
    log_level: str
    log_file: str | None


def parse_args(argv: list[str] | None = None) -> Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Ranked Roster - incrementally maintained leaderboard"
    )

    seed = parser.add_mutually_exclusive_group()
    _ = seed.add_argument(
        "--roster",
        help="JSON file with the starting roster: [{\"name\": ..., \"score\": ...}, ...]"
    )
    _ = seed.add_argument(
        "--demo",
        action="store_true",
        help="Start with the built-in five-player demo roster"
    )

    _ = parser.add_argument(
        "--command",
        dest="commands",
        action="append",
        default=[],
        help="Run a command non-interactively (repeatable); stdin is not read"
    )
    _ = parser.add_argument(
        "--bar-width",
        type=int,
        default=30,
        help="Width of the score bar for the leading player (default: 30)"
    )
    _ = parser.add_argument(
        "--max-entries",
        type=int,
        default=5000,
        help="Maximum number of players on the board (default: 5000)"
    )
    _ = parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)"
    )
    _ = parser.add_argument(
        "--log-file",
        help="Also write INFO-level logs to this rotating file"
    )

    return parser.parse_args(argv)


def args_to_typed(ns: Namespace) -> CLIArgs:
    """Convert argparse Namespace to typed CLIArgs."""
    return CLIArgs(
        roster=ns.roster,
        demo=ns.demo,
        commands=list(ns.commands),
        bar_width=ns.bar_width,
        max_entries=ns.max_entries,
        debug=ns.debug,
        log_level=ns.log_level,
        log_file=ns.log_file,
    )


def validate_config(args: CLIArgs) -> RosterConfig:
    """Validate configuration parameters and build the controller config."""
    logger = get_logger("validate_config")

    if args["roster"] is not None and not Path(args["roster"]).is_file():
        logger.error(f"Roster file does not exist or is not a file: {args['roster']}")
        raise ConfigurationError(f"roster file does not exist or is not a file: {args['roster']}")

    config = RosterConfig(
        max_entries=args["max_entries"],
        bar_width=args["bar_width"],
    )
    logger.info(f"Configuration: {config}")
    return config


def wire_components(args: CLIArgs, config: RosterConfig, stream: TextIO) -> tuple[
    RosterController,
    TablePresenter,
    RosterSource | None,
]:
    """Wire dependency injection components."""
    logger = get_logger("wire_components")

    presenter = TablePresenter(stream=stream, bar_width=config.bar_width)
    controller = RosterController(
        ranker=MergeRanker(),
        clock=MonotonicClock(),
        presenters=[presenter],
        config=config,
    )

    source: RosterSource | None = None
    if args["roster"] is not None:
        logger.info(f"Using JSON roster source: {args['roster']}")
        source = JSONRosterSource(Path(args["roster"]))
    elif args["demo"]:
        logger.info("Using demo roster source")
        source = DemoRosterSource()

    return controller, presenter, source


def run_command(line: str, controller: RosterController, presenter: TablePresenter, stream: TextIO) -> bool:
    """
    Execute one command line against the controller.

    Returns:
        False when the command asks to quit, True otherwise
    """
    tokens = line.split()
    if not tokens:
        return True

    command, rest = tokens[0].lower(), tokens[1:]

    try:
        if command in ("quit", "exit"):
            return False
        if command == "help":
            print(HELP_TEXT, file=stream)
        elif command == "show":
            if controller.entries:
                print(build_table(controller.entries, presenter.bar_width), file=stream)
            else:
                print("Leaderboard is empty.", file=stream)
        elif command == "add":
            if len(rest) < 2:
                print("Usage: add <name> <score>", file=stream)
                return True
            entry = controller.add(" ".join(rest[:-1]), rest[-1])
            print(
                f"Added {entry.display_name} as {entry.entry_id} at rank {controller.rank_of(entry.entry_id)}",
                file=stream,
            )
        elif command == "remove":
            if len(rest) != 1:
                print("Usage: remove <id>", file=stream)
                return True
            if controller.remove(rest[0]):
                print(f"Removed {rest[0]}", file=stream)
            else:
                print(f"No player with id {rest[0]}", file=stream)
        else:
            print(f"Unknown command: {command} (try 'help')", file=stream)
    except RosterError as e:
        print(f"Error: {e}", file=stream)

    return True


def command_loop(lines: Iterable[str], controller: RosterController, presenter: TablePresenter, stream: TextIO) -> None:
    """Run commands until one asks to quit or input runs out."""
    for line in lines:
        if not run_command(line, controller, presenter, stream):
            break


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Main CLI entry point."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    args = args_to_typed(parse_args(argv))
    setup_logging(level=args["log_level"], debug=args["debug"], log_file=args["log_file"])
    logger = get_logger("main")

    try:
        config = validate_config(args)
        controller, presenter, source = wire_components(args, config, stdout)
        if source is not None:
            controller.load(source.list_seeds())
    except (RosterError, FileNotFoundError) as e:
        logger.error(f"Startup failed: {e}")
        print(f"Error: {e}", file=stdout)
        return 1

    try:
        if args["commands"]:
            command_loop(args["commands"], controller, presenter, stdout)
        else:
            print(HELP_TEXT, file=stdout)
            command_loop(stdin, controller, presenter, stdout)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        print("\nInterrupted by user", file=stdout)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
