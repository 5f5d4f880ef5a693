"""Challenge generator.

Randomness comes from an injected source with the ``random.Random``
surface (``randint``, ``random``, ``choice``). The ``random`` module itself
is the default; tests pass a seeded ``random.Random`` or a scripted stub.
"""

import random

from evenodd.challenge import Challenge, ExpressionChallenge, NumberChallenge
from evenodd.difficulty import TIER_PLUS_MINUS, term_count, unlocked_operators

EXPRESSION_CHANCE = 0.5


def random_digit(rng=random) -> int:
    return rng.randint(0, 9)


def generate_challenge(combo: int, rng=random) -> Challenge:
    """One fresh challenge for the given combo.

    Below combo 10 only plain digits appear. From there on it is a coin
    flip between a digit and an expression built from the unlocked tier.
    """
    if combo < TIER_PLUS_MINUS:
        return NumberChallenge(random_digit(rng))

    if rng.random() < EXPRESSION_CHANCE:
        return NumberChallenge(random_digit(rng))

    operators = unlocked_operators(combo)
    n = term_count(combo)
    terms = tuple(random_digit(rng) for _ in range(n))
    ops = tuple(rng.choice(operators) for _ in range(n - 1))
    return ExpressionChallenge(terms=terms, operators=ops)
