"""Combo tiers: which operators are unlocked and how much a hit is worth."""

from evenodd.challenge import Operator

# combo thresholds, inclusive lower bound
TIER_PLUS_MINUS = 10
TIER_TIMES = 20
TIER_ALL_OPS = 30
TIER_THREE_TERMS = 40

SCORE_GAINS = [
    (TIER_THREE_TERMS, 5),
    (TIER_ALL_OPS, 4),
    (TIER_TIMES, 3),
    (TIER_PLUS_MINUS, 2),
]


def unlocked_operators(combo: int) -> tuple[Operator, ...]:
    """Operators available to expressions at this combo (empty below 10)."""
    if combo >= TIER_ALL_OPS:
        return tuple(Operator)
    if combo >= TIER_TIMES:
        return (Operator.ADD, Operator.SUBTRACT, Operator.MULTIPLY)
    if combo >= TIER_PLUS_MINUS:
        return (Operator.ADD, Operator.SUBTRACT)
    return ()


def score_gain(combo: int) -> int:
    """Points for a correct guess, looked up on the post-increment combo."""
    for threshold, gain in SCORE_GAINS:
        if combo >= threshold:
            return gain
    return 1


def term_count(combo: int) -> int:
    return 3 if combo >= TIER_THREE_TERMS else 2
