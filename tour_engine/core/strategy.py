"""Search strategies: a frontier discipline paired with a child ordering."""
from dataclasses import dataclass
from enum import Enum
from typing import Union

from tour_engine.core.heuristics import ChildOrdering
from tour_engine.errors import ConfigurationError


class FrontierKind(Enum):
    QUEUE = "queue"  # FIFO, breadth-first
    STACK = "stack"  # LIFO, depth-first


@dataclass(frozen=True)
class Strategy:
    name: str
    frontier: FrontierKind
    ordering: ChildOrdering = ChildOrdering.NONE

    def __str__(self):
        return self.name


BFS = Strategy("bfs", FrontierKind.QUEUE)
DFS = Strategy("dfs", FrontierKind.STACK)
DFS_H1B = Strategy("dfs-h1b", FrontierKind.STACK, ChildOrdering.H1B)
DFS_H2 = Strategy("dfs-h2", FrontierKind.STACK, ChildOrdering.H2)

STRATEGIES = {s.name: s for s in (BFS, DFS, DFS_H1B, DFS_H2)}


def parse_strategy(token: Union[str, Strategy]) -> Strategy:
    """Resolve a strategy token (case-insensitive) such as 'DFS-H2'."""
    if isinstance(token, Strategy):
        return token
    if not isinstance(token, str):
        raise ConfigurationError(f"Invalid strategy: {token!r}")
    try:
        return STRATEGIES[token.strip().lower()]
    except KeyError:
        choices = ", ".join(STRATEGIES)
        raise ConfigurationError(f"Invalid strategy {token!r}. Choose one of: {choices}") from None
