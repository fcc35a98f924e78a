"""World Context - The river-crossing puzzle model.

The World is responsible for:
- Representing one configuration of both banks and the boat (CrossingState)
- Validating world totals at construction
- Enumerating legal crossings (the move table)
- Goal/failure classification and the search heuristic
- The five-token text encoding used for input and deduplication
"""

from rivercross.world.codec import encode_state, normalize, parse_state
from rivercross.world.moves import Load, load_combinations, move_table
from rivercross.world.rules import DEFAULT_RULES, GoalMode, Rules
from rivercross.world.state import Bank, BoatSide, CrossingState

__all__ = [
    # State
    "CrossingState",
    "Bank",
    "BoatSide",
    # Rules
    "Rules",
    "GoalMode",
    "DEFAULT_RULES",
    # Moves
    "Load",
    "load_combinations",
    "move_table",
    # Encoding
    "parse_state",
    "encode_state",
    "normalize",
]
