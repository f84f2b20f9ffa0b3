"""
Command-line front end for the backtracking Sudoku solver.

Reads a puzzle from the given files (or standard input), solves it and prints
the board as 9 lines of comma-separated digits.

Usage examples
--------------

    sudoku-solve puzzle.txt
    cat puzzle.txt | sudoku-solve --verbose
    sudoku-solve --example --format pretty

Input may use commas (`5,3,-,-,7,-,-,-,-` or `5,3,,,7,,,,`) or compact rows
(`53..7....`). Empty fields and non-digit placeholders mark empty cells.
Setting `SUDOKU_DEBUG=1` turns on verbose output unless `--no-verbose` is
given.
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, TextIO

from loguru import logger

from sudoku_grid import CellValueError, Grid, ShapeError, new_grid
from sudoku_solver import SolveError, SudokuSolver, create_example_board

DEBUG_ENV = "SUDOKU_DEBUG"
DIGITS = "0123456789"
TRUTHY = {"1", "true", "yes", "on"}

EXIT_OK = 0
EXIT_UNSOLVED = 1
EXIT_BAD_INPUT = 2


@dataclass(frozen=True)
class CliConfig:
    verbose: bool = False
    style: str = "csv"
    log_level: str = "WARNING"


def env_flag(name: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    environ = os.environ if environ is None else environ
    return environ.get(name, "").strip().lower() in TRUTHY


def parse_board(text: str) -> Grid:
    """Turn raw puzzle text into a grid.

    Lines containing commas are split on each comma: a field holding one digit
    keeps its value, while empty fields and placeholders such as `-` or `.`
    become 0. Lines without commas are compact rows, one cell per
    non-whitespace character.
    """
    cells: List[int] = []
    for line in text.splitlines():
        if "," in line:
            fields = [field.strip() for field in line.split(",")]
        else:
            fields = [char for char in line if not char.isspace()]

        for field in fields:
            if len(field) == 1 and field in DIGITS:
                cells.append(int(field))
            elif any(char in DIGITS for char in field):
                raise CellValueError(f"cell {field!r} is not a single digit")
            else:
                cells.append(0)
    return new_grid(cells)


def read_input(paths: Sequence[str], stdin: Optional[TextIO] = None) -> str:
    if not paths:
        paths = ["-"]

    chunks: List[str] = []
    for path in paths:
        if path == "-":
            chunks.append((stdin or sys.stdin).read())
        else:
            chunks.append(Path(path).read_text(encoding="utf-8"))
    return "\n".join(chunks)


def board_to_text(grid: Grid) -> str:
    """Draw the board with box separators, '.' marking empty cells."""

    lines = []
    for r, row in enumerate(grid.to_rows()):
        if r % 3 == 0 and r != 0:
            lines.append("------+-------+------")
        cells = []
        for c, value in enumerate(row):
            if c % 3 == 0 and c != 0:
                cells.append("|")
            cells.append(str(value) if value else ".")
        lines.append(" ".join(cells))
    return "\n".join(lines)


def render_board(grid: Grid, style: str = "csv") -> str:
    if style == "pretty":
        return board_to_text(grid)
    if style != "csv":
        raise ValueError(f"unknown output style: {style}")
    return "\n".join(",".join(str(value) for value in row) for row in grid.to_rows())


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format="{level}: {message}")


def parse_args(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Solve a 9x9 Sudoku puzzle by backtracking."
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="FILE",
        help="Puzzle file(s) to read; '-' or no file reads standard input.",
    )
    parser.add_argument(
        "--example",
        action="store_true",
        help="Solve the built-in example puzzle instead of reading input.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=env_flag(DEBUG_ENV, environ),
        help=f"Print the board before and after solving (default from ${DEBUG_ENV}).",
    )
    parser.add_argument(
        "--format",
        dest="style",
        default="csv",
        choices=["csv", "pretty"],
        help="Output style for the board (default: csv).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for diagnostics on stderr (default: WARNING).",
    )
    return parser.parse_args(argv)


def run(grid: Grid, config: CliConfig, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout

    if config.verbose:
        print("Input:", file=out)
        print(render_board(grid, config.style), file=out)

    solver = SudokuSolver(grid)
    try:
        solver.solve()
    except SolveError as exc:
        logger.error("{}", exc)
        return EXIT_UNSOLVED

    logger.info(
        "Solved in {} placement(s) with {} backtrack(s)",
        solver.placements,
        solver.backtracks,
    )

    if config.verbose:
        print("Output:", file=out)
    print(render_board(grid, config.style), file=out)
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    config = CliConfig(verbose=args.verbose, style=args.style, log_level=args.log_level)
    configure_logging(config.log_level)
    logger.debug("CLI configuration: {}", config)

    try:
        if args.example:
            grid = Grid.from_rows(create_example_board())
        else:
            grid = parse_board(read_input(args.inputs))
    except (ShapeError, CellValueError) as exc:
        logger.error("Invalid board: {}", exc)
        return EXIT_BAD_INPUT
    except OSError as exc:
        logger.error("Cannot read puzzle: {}", exc)
        return EXIT_BAD_INPUT

    return run(grid, config)


if __name__ == "__main__":
    sys.exit(main())
