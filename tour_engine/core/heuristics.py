"""Child ordering policies for heuristic depth-first search.

h1b  - fewest onward moves first (Warnsdorff-style most-constrained square).
h2   - h1b, ties broken by the smaller Manhattan distance to a board corner.

Both are greedy orderings only. ``sorted`` is stable, so children with equal
keys keep the knight-offset order they were generated in.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from tour_engine.core.board import BoardProblem, KnightState


class ChildOrdering(Enum):
    NONE = ""
    H1B = "h1b"
    H2 = "h2"


def order_children(problem: "BoardProblem", children: List["KnightState"],
                   ordering: ChildOrdering) -> List["KnightState"]:
    if ordering is ChildOrdering.H1B:
        return sorted(children, key=problem.calculate_h1b)
    if ordering is ChildOrdering.H2:
        return sorted(
            children,
            key=lambda child: (problem.calculate_h1b(child),
                               problem.nearest_corner_distance(child)),
        )
    return children
