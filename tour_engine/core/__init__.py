"""Core search components: board model, heuristics, strategies and search."""

from .board import BoardProblem, KnightState
from .heuristics import ChildOrdering
from .search import OutcomeStatus, SearchEngine, SearchOutcome
from .strategy import FrontierKind, Strategy, parse_strategy
