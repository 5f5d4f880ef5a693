"""Tests for challenge generation."""

import random


def test_low_combo_always_numbers():
    """Below combo 10 every challenge is a plain digit."""
    from evenodd.challenge import NumberChallenge
    from evenodd.generator import generate_challenge

    rng = random.Random(1)
    for combo in range(10):
        for _ in range(50):
            c = generate_challenge(combo, rng)
            assert isinstance(c, NumberChallenge)
            assert 0 <= c.value <= 9


def test_random_digit_range():
    """random_digit covers exactly 0-9."""
    from evenodd.generator import random_digit

    rng = random.Random(7)
    digits = {random_digit(rng) for _ in range(500)}
    assert digits == set(range(10))


def test_coin_below_half_gives_number(scripted):
    """A coin under 0.5 yields a digit even at combo 15."""
    from evenodd.challenge import NumberChallenge
    from evenodd.generator import generate_challenge

    rng = scripted(digits=[6], coins=[0.2])
    assert generate_challenge(15, rng) == NumberChallenge(6)


def test_coin_at_half_gives_expression(scripted):
    """A coin of 0.5 or more yields a two-term expression."""
    from evenodd.challenge import ExpressionChallenge, Operator
    from evenodd.generator import generate_challenge

    rng = scripted(digits=[4, 7], coins=[0.5], picks=[1])
    c = generate_challenge(15, rng)
    assert c == ExpressionChallenge(terms=(4, 7), operators=(Operator.SUBTRACT,))


def test_three_terms_from_forty(scripted):
    """At combo 40 expressions carry three terms and two operators."""
    from evenodd.challenge import Operator
    from evenodd.generator import generate_challenge

    rng = scripted(digits=[1, 2, 3], coins=[0.9], picks=[3, 4])
    c = generate_challenge(40, rng)
    assert c.terms == (1, 2, 3)
    assert c.operators == (Operator.DIVIDE, Operator.MODULO)


def test_expression_shape_and_operators_follow_tier():
    """Generated expressions only use the tier's operators and term count."""
    from evenodd.challenge import NumberChallenge
    from evenodd.difficulty import unlocked_operators
    from evenodd.generator import generate_challenge

    rng = random.Random(42)
    for combo in (10, 25, 35, 39, 40, 55):
        allowed = set(unlocked_operators(combo))
        seen_expression = False
        for _ in range(200):
            c = generate_challenge(combo, rng)
            if isinstance(c, NumberChallenge):
                continue
            seen_expression = True
            assert len(c.terms) == (3 if combo >= 40 else 2)
            assert len(c.operators) == len(c.terms) - 1
            assert set(c.operators) <= allowed
            assert all(0 <= t <= 9 for t in c.terms)
        assert seen_expression


def test_seeded_generation_is_reproducible():
    """Two generators with the same seed produce the same sequence."""
    from evenodd.generator import generate_challenge

    a_rng, b_rng = random.Random(99), random.Random(99)
    a = [generate_challenge(45, a_rng) for _ in range(20)]
    b = [generate_challenge(45, b_rng) for _ in range(20)]
    assert a == b
