import logging
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

from tour_engine.core.board import BoardProblem, KnightState
from tour_engine.core.heuristics import ChildOrdering
from tour_engine.core.strategy import FrontierKind, Strategy, parse_strategy
from tour_engine.errors import ConfigurationError

logger = logging.getLogger(__name__)


class OutcomeStatus(Enum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    TIMED_OUT = "timed_out"


@dataclass
class SearchOutcome:
    status: OutcomeStatus
    nodes_expanded: int
    elapsed_ms: float
    strategy: str = ""
    board_size: int = 0
    terminal: Optional[KnightState] = field(default=None, repr=False)

    @property
    def solved(self) -> bool:
        return self.status is OutcomeStatus.SOLVED

    @property
    def path(self) -> List[Tuple[int, int, int]]:
        """(row, col, depth) from the root to the terminal state; empty unless solved."""
        if self.terminal is None:
            return []
        return self.terminal.path()


class SearchEngine:
    def __init__(self, strategy: Union[str, Strategy] = "dfs-h2", time_limit_ms: Optional[int] = None):
        """
        strategy: one of bfs, dfs, dfs-h1b, dfs-h2 (or a Strategy).
        time_limit_ms: wall-clock budget; None searches until solved or exhausted.
        """
        self.strategy = parse_strategy(strategy)
        if time_limit_ms is not None and (isinstance(time_limit_ms, bool) or time_limit_ms < 0):
            raise ConfigurationError(f"Time limit must be >= 0 ms, got {time_limit_ms!r}")
        self.time_limit_ms = time_limit_ms
        self.nodes = 0

    def search(self, problem: BoardProblem,
               on_expand: Optional[Callable[[KnightState], None]] = None) -> SearchOutcome:
        """Run one tree search from the (0, 0) corner.

        on_expand, when given, is called with every state just before it is
        expanded.
        """
        strategy = self.strategy
        queue_mode = strategy.frontier is FrontierKind.QUEUE
        # a deque serves as both the FIFO queue and the LIFO stack
        frontier = deque([problem.root()])
        self.nodes = 0

        logger.info("Searching %dx%d board with %s (time limit: %s ms)",
                    problem.n, problem.n, strategy, self.time_limit_ms)
        start_time = time.monotonic()

        while True:
            elapsed_ms = (time.monotonic() - start_time) * 1000.0
            # reaching the limit counts as exceeding it, so a 0 ms budget never expands
            if self.time_limit_ms is not None and elapsed_ms >= self.time_limit_ms:
                return self._finish(OutcomeStatus.TIMED_OUT, problem, elapsed_ms)

            if not frontier:
                return self._finish(OutcomeStatus.EXHAUSTED, problem, elapsed_ms)

            node = frontier.popleft() if queue_mode else frontier.pop()

            if problem.is_goal(node):
                elapsed_ms = (time.monotonic() - start_time) * 1000.0
                return self._finish(OutcomeStatus.SOLVED, problem, elapsed_ms, node)

            if on_expand is not None:
                on_expand(node)
            children = problem.expand(node, strategy.ordering)
            self.nodes += 1

            if queue_mode or strategy.ordering is ChildOrdering.NONE:
                # plain dfs: the last generated child ends up on top
                frontier.extend(children)
            else:
                # most-preferred child on top of the stack
                frontier.extend(reversed(children))

    def _finish(self, status: OutcomeStatus, problem: BoardProblem, elapsed_ms: float,
                terminal: Optional[KnightState] = None) -> SearchOutcome:
        if status is OutcomeStatus.SOLVED:
            logger.info("A solution found. Nodes expanded: %d, time spent: %.3f seconds",
                        self.nodes, elapsed_ms / 1000.0)
        elif status is OutcomeStatus.EXHAUSTED:
            logger.info("No solution exists. Nodes expanded: %d", self.nodes)
        else:
            logger.info("Timeout. Nodes expanded: %d", self.nodes)
        return SearchOutcome(
            status=status,
            nodes_expanded=self.nodes,
            elapsed_ms=elapsed_ms,
            strategy=self.strategy.name,
            board_size=problem.n,
            terminal=terminal,
        )
