"""Knight's tour board model: search states, legality and child generation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from tour_engine.core.heuristics import ChildOrdering, order_children
from tour_engine.errors import ConfigurationError

# Knight displacement vectors, in the order children are generated.
KNIGHT_OFFSETS = (
    (-2, -1), (-1, -2), (1, -2), (2, -1),
    (2, 1), (1, 2), (-1, 2), (-2, 1),
)


@dataclass(frozen=True, eq=False, slots=True)
class KnightState:
    """Tip of a knight path.

    The visited squares are never stored; they are the positions found by
    following ``predecessor`` back to the root.
    """
    row: int
    col: int
    depth: int = 1
    predecessor: Optional[KnightState] = field(default=None, repr=False)

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.col

    def __iter__(self) -> Iterator[KnightState]:
        """Walk the chain from this state back to the root."""
        current: Optional[KnightState] = self
        while current is not None:
            yield current
            current = current.predecessor

    def path(self) -> List[Tuple[int, int, int]]:
        """Return ``(row, col, depth)`` for every square, root first."""
        steps = [(s.row, s.col, s.depth) for s in self]
        steps.reverse()
        return steps


class BoardProblem:
    def __init__(self, n: int):
        """n is the side length of the square board."""
        if not isinstance(n, int) or isinstance(n, bool) or n < 1:
            raise ConfigurationError(f"Board size must be a positive integer, got {n!r}")
        self.n = n
        self.moves = KNIGHT_OFFSETS

    def root(self) -> KnightState:
        return KnightState(0, 0, 1, None)

    def is_goal(self, state: KnightState) -> bool:
        return state.depth == self.n * self.n

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.n and 0 <= y < self.n

    def is_valid(self, state: KnightState, x: int, y: int) -> bool:
        """True if (x, y) is on the board and not on the path ending at state."""
        if not self.in_bounds(x, y):
            return False

        # O(depth): the predecessor chain is the only record of visits
        current = state
        while current is not None:
            if current.row == x and current.col == y:
                return False
            current = current.predecessor

        return True

    def expand(self, state: KnightState,
               ordering: ChildOrdering = ChildOrdering.NONE) -> List[KnightState]:
        children = []
        for dx, dy in self.moves:
            x = state.row + dx
            y = state.col + dy
            if self.is_valid(state, x, y):
                children.append(KnightState(x, y, state.depth + 1, state))
        return order_children(self, children, ordering)

    def calculate_h1b(self, state: KnightState) -> int:
        """Number of onward moves from state; lower means more constrained."""
        count = 0
        for dx, dy in self.moves:
            if self.is_valid(state, state.row + dx, state.col + dy):
                count += 1
        return count

    def nearest_corner_distance(self, state: KnightState) -> int:
        last = self.n - 1
        x, y = state.row, state.col
        return min(
            x + y,                  # (0, 0)
            x + (last - y),         # (0, n-1)
            (last - x) + y,         # (n-1, 0)
            (last - x) + (last - y),  # (n-1, n-1)
        )
