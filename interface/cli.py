"""Interactive command line front end for the knight's tour search.

Usage
-----
    python -m interface.cli

Prompts for board size, search method and time limit (minutes), then prints
the tour and writes path.txt / board.txt / moves.txt to the output directory.
"""

import logging
import os
import sys
from typing import Callable, Tuple

from tour_engine.config import CONFIG, Config, MENU_OPTIONS
from tour_engine.core.board import BoardProblem
from tour_engine.core.search import OutcomeStatus, SearchEngine, SearchOutcome
from tour_engine.core.strategy import STRATEGIES, Strategy, parse_strategy
from tour_engine.core.utils import print_info
from tour_engine.diagnostics import memory_report_lines
from tour_engine.errors import ConfigurationError
from tour_engine.render import board_lines, path_lines

logger = logging.getLogger(__name__)

RULE = "+++===========================================================================+++"


def _banner(title: str) -> str:
    return f"+++{f' {title} ':=^75}+++"


def parse_method(choice: str) -> Strategy:
    """Menu letter (a-d) or a strategy name."""
    key = choice.strip().lower()
    if key in MENU_OPTIONS:
        return STRATEGIES[MENU_OPTIONS[key]]
    if key in STRATEGIES:
        return STRATEGIES[key]
    raise ConfigurationError("Invalid method. Please choose a valid option.")


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ConfigurationError(f"Invalid {what}: {text!r}") from None


def prompt_settings(read: Callable[[str], str] = input) -> Tuple[int, Strategy, int]:
    """Ask for board size, method and minutes; returns (n, strategy, time_limit_ms)."""
    print(_banner("Knight's Tour Problem"))
    print(RULE)
    n = _parse_int(read("Enter board size (n): "), "board size")
    print(RULE)

    print(RULE)
    print(_banner("Search Method Selection"))
    print("a: BFS (Breadth-First Search)")
    print("b: DFS (Depth-First Search)")
    print("c: DFS-H1B (Depth-First Search with heuristic h1b)")
    print("d: DFS-H2 (Depth-First Search with heuristic h2)")
    print(RULE)
    strategy = parse_method(read("Enter search method: "))
    print(RULE)

    print(_banner("Time Constraint Limit"))
    print(RULE)
    minutes = _parse_int(read("Enter time constraint in minutes: "), "time limit")
    print(RULE)
    if minutes < 0:
        raise ConfigurationError(f"Time limit must not be negative, got {minutes}")
    return n, strategy, minutes * 60 * 1000


def _write_lines(cfg: Config, filename: str, header: str, lines) -> None:
    if not cfg.output.write_files:
        return
    os.makedirs(cfg.output.output_dir, exist_ok=True)
    with open(os.path.join(cfg.output.output_dir, filename), "w", encoding="utf-8") as f:
        if header:
            f.write(header + "\n")
        for line in lines:
            f.write(line + "\n")


def report_outcome(outcome: SearchOutcome, cfg: Config = CONFIG) -> None:
    """Print the outcome and write the search report and, when solved, the tour files."""
    report = [f"Nodes Expanded: {outcome.nodes_expanded}"]
    if outcome.status is OutcomeStatus.SOLVED:
        report.append(f"Time spent: {outcome.elapsed_ms / 1000.0} seconds")
    elif outcome.status is OutcomeStatus.TIMED_OUT:
        report.append("Timeout.")
    else:
        report.insert(0, "No solution exists.")
    for line in report:
        print(line)
    _write_lines(cfg, cfg.output.log_file, "", report)
    print_info(outcome)

    if not outcome.solved:
        return

    path = outcome.path
    steps = path_lines(path)
    grid = board_lines(path, outcome.board_size)
    print("A solution found.")
    print("\nKnight Tour Path:")
    for line in steps:
        print(line)
    print("\nBoard Configuration:")
    for line in grid:
        print(line)
    _write_lines(cfg, cfg.output.path_file, "Knight Tour Path:", steps)
    _write_lines(cfg, cfg.output.board_file, "", grid)


def report_out_of_memory(cfg: Config = CONFIG) -> None:
    """Call only after the except block has ended, so the frontier is released."""
    lines = memory_report_lines()
    for line in lines:
        print(line)
    logger.error("Search ran out of memory: %s", "; ".join(lines[1:-1]))
    _write_lines(cfg, cfg.output.oom_file, "", lines)


def _setup_logging(cfg: Config) -> None:
    logging.basicConfig(
        level=getattr(logging, cfg.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(read: Callable[[str], str] = input, cfg: Config = CONFIG) -> int:
    _setup_logging(cfg)
    out_of_memory = False
    try:
        n, strategy, time_limit_ms = prompt_settings(read)
        problem = BoardProblem(n)
        engine = SearchEngine(strategy, time_limit_ms=time_limit_ms)
        outcome = engine.search(problem)
    except MemoryError:
        out_of_memory = True
    except ConfigurationError as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        return 2

    if out_of_memory:
        report_out_of_memory(cfg)
        return 1
    report_outcome(outcome, cfg)
    return 0


def run_configured(cfg: Config = CONFIG) -> int:
    """Non-interactive run using the [search] section of the config."""
    _setup_logging(cfg)
    out_of_memory = False
    try:
        problem = BoardProblem(cfg.search.board_size)
        engine = SearchEngine(parse_strategy(cfg.search.strategy), cfg.search.time_limit_ms)
        outcome = engine.search(problem)
    except MemoryError:
        out_of_memory = True
    except ConfigurationError as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        return 2

    if out_of_memory:
        report_out_of_memory(cfg)
        return 1
    report_outcome(outcome, cfg)
    return 0


if __name__ == "__main__":
    if "--from-config" in sys.argv[1:]:
        sys.exit(run_configured())
    sys.exit(main())
