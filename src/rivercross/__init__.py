"""rivercross - Missionaries and cannibals state-space search.

rivercross finds a sequence of boat crossings that moves a party of
missionaries and cannibals across a river without missionaries ever being
outnumbered on either bank. The same problem is solved with four search
strategies that share one expansion discipline and differ only in the
order their frontier yields states.

Example:
    >>> from rivercross import Strategy, solve
    >>> result = solve("0 0 3 3 right", strategy=Strategy.ASTAR)
    >>> result.found
    True
    >>> result.move_count
    7
"""

from rivercross.errors import (
    ConfigValidationError,
    InvalidTotalError,
    ParseError,
    ProvenanceCycleError,
    RiverCrossError,
    SearchError,
)
from rivercross.exploration import Agent, SearchResult, SearchStatus, Strategy, solve
from rivercross.world import (
    DEFAULT_RULES,
    CrossingState,
    GoalMode,
    Rules,
    encode_state,
    parse_state,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Search
    "Agent",
    "solve",
    "Strategy",
    "SearchResult",
    "SearchStatus",
    # World
    "CrossingState",
    "Rules",
    "GoalMode",
    "DEFAULT_RULES",
    "parse_state",
    "encode_state",
    # Errors
    "RiverCrossError",
    "InvalidTotalError",
    "ParseError",
    "ConfigValidationError",
    "SearchError",
    "ProvenanceCycleError",
]
