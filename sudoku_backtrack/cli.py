from __future__ import annotations

import logging
import time

import click

from .display import CursesDisplay, ProgressDisplay, TerminalDisplay
from .exceptions import ParseError, SudokuContradiction
from .grid import Grid
from .solver import solve

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_DATEFMT = "%H:%M:%S"

DISPLAYS = ["ansi", "curses", "progress", "none"]

_file_logger = logging.getLogger(__name__)


def configure_logging(filename=None, level="ERROR"):
    logging.basicConfig(
        filename=filename,
        filemode="w",
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        level=level.upper(),
        force=True,
    )


def timed_solve(grid, observer=None, strict=False):
    start = time.perf_counter()
    try:
        result = solve(grid, observer, raise_on_exhaustion=strict)
    except SudokuContradiction as err:
        raise click.ClickException(str(err)) from err
    return result, time.perf_counter() - start


@click.command()
@click.argument("puzzle", type=click.Path(exists=True, dir_okay=False))
@click.argument(
    "delay_ms", type=click.IntRange(min=0), default=0, required=False
)
@click.option(
    "--display",
    type=click.Choice(DISPLAYS),
    default="ansi",
    show_default=True,
    help="How to show the search while it runs.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Abort with 'Backtracked beyond the start' on unsolvable puzzles.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write log records here instead of stderr.",
)
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False
    ),
    default="ERROR",
    show_default=True,
)
def main(puzzle, delay_ms, display, strict, log_file, log_level):
    """Solve the 9x9 sudoku in PUZZLE, pausing DELAY_MS before each step.

    PUZZLE holds 81 digits, 0 for a blank; whitespace is ignored.
    """
    configure_logging(log_file, log_level)

    try:
        grid = Grid.from_file(puzzle)
    except ParseError as err:
        raise click.ClickException(str(err)) from err
    _file_logger.info("Loaded %s", puzzle)

    delay = delay_ms / 1000
    if display == "ansi":
        terminal = TerminalDisplay(delay)
        result, elapsed = timed_solve(grid, terminal, strict)
        if result.solved:
            terminal.finish(result.grid)
    elif display == "curses":
        result, elapsed = CursesDisplay.run(
            lambda screen: timed_solve(
                grid, CursesDisplay(screen, delay), strict
            )
        )
    elif display == "progress":
        progress = ProgressDisplay(delay)
        try:
            result, elapsed = timed_solve(grid, progress, strict)
        finally:
            progress.close()
    else:
        result, elapsed = timed_solve(grid, strict=strict)

    if not result.solved:
        raise click.ClickException("No solution exists for this puzzle")

    if display != "ansi":
        click.echo(str(result.grid), nl=False)
    click.echo(
        "\nFinished in {:.6f}s ({} steps)".format(elapsed, result.steps)
    )


if __name__ == "__main__":
    main()
