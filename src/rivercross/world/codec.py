"""Text encoding of a state as five whitespace-separated tokens.

Format::

    <left cannibals> <left missionaries> <right cannibals> <right missionaries> <left|right>

Examples:
    ``"1 1 2 2 right"`` - left: 1 cannibal and 1 missionary; right: 2 and 2 plus the boat.
    ``"1 0 2 3 left"``  - left: 1 cannibal and the boat; right: 2 cannibals and 3 missionaries.
"""

from __future__ import annotations

from rivercross.errors import ParseError
from rivercross.world.rules import DEFAULT_RULES, Rules
from rivercross.world.state import BoatSide, CrossingState

TOKEN_COUNT = 5


def normalize(text: str) -> str:
    """Collapse whitespace and keep the first five tokens."""
    return " ".join(text.split()[:TOKEN_COUNT])


def _parse_count(token: str, text: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise ParseError(f"Expected a non-negative integer, got {token!r}", text=text)
    return int(token)


def _parse_side(token: str, text: str) -> BoatSide:
    try:
        return BoatSide(token)
    except ValueError:
        raise ParseError(
            f"Boat side must be 'left' or 'right', got {token!r}", text=text
        ) from None


def parse_state(text: str, rules: Rules = DEFAULT_RULES) -> CrossingState:
    """Parse the five-token encoding into a validated state.

    Tokens past the fifth are ignored.

    Raises:
        ParseError: Fewer than five tokens, a non-numeric count, or an
            unknown boat side.
        InvalidTotalError: The counts do not match the world totals.
    """
    tokens = text.split()
    if len(tokens) < TOKEN_COUNT:
        raise ParseError(
            f"Expected {TOKEN_COUNT} tokens, got {len(tokens)}", text=text
        )

    lc, lm, rc, rm = (_parse_count(token, text) for token in tokens[:4])
    boat = _parse_side(tokens[4], text)
    return CrossingState.from_counts(lc, lm, rc, rm, boat, rules=rules)


def encode_state(state: CrossingState) -> str:
    """Inverse of parse_state; identical to the state's canonical key."""
    return state.canonical_key()


__all__ = ["TOKEN_COUNT", "normalize", "parse_state", "encode_state"]
