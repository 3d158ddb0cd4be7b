from typing import Optional, Union

from tour_engine.core.board import BoardProblem
from tour_engine.core.search import SearchEngine, SearchOutcome
from tour_engine.core.strategy import Strategy


def run_search(board_size: int, strategy: Union[str, Strategy] = "dfs-h2",
               time_budget_ms: Optional[int] = None) -> SearchOutcome:
    """Search for a knight's tour starting from the (0, 0) corner.

    Raises ConfigurationError before any search work for a bad board size,
    strategy token or budget. Timeouts and exhausted frontiers are returned
    as outcomes.
    """
    problem = BoardProblem(board_size)
    engine = SearchEngine(strategy, time_limit_ms=time_budget_ms)
    return engine.search(problem)
