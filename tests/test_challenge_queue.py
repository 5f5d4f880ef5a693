"""Tests for the lookahead queue."""

import random


def test_fill_has_five_numbers_at_combo_zero():
    """A fresh queue holds five plain digits."""
    from evenodd.challenge import NumberChallenge
    from evenodd.challenge_queue import QUEUE_LENGTH, fill_queue

    q = fill_queue(0, random.Random(3))
    assert len(q) == QUEUE_LENGTH == 5
    assert all(isinstance(c, NumberChallenge) for c in q)


def test_advance_drops_front_and_appends(scripted):
    """advance shifts everything forward and adds one at the back."""
    from evenodd.challenge import NumberChallenge
    from evenodd.challenge_queue import advance_queue

    q = tuple(NumberChallenge(v) for v in range(5))
    q2 = advance_queue(q, 0, scripted(digits=[9]))
    assert q2 == tuple(NumberChallenge(v) for v in (1, 2, 3, 4, 9))


def test_advance_uses_new_combo(scripted):
    """The appended challenge is generated at the combo passed in."""
    from evenodd.challenge import NumberChallenge
    from evenodd.challenge_queue import advance_queue

    q = tuple(NumberChallenge(v) for v in range(5))
    # combo 12 flips a coin before picking; a 0.9 coin means an expression
    q2 = advance_queue(q, 12, scripted(digits=[2, 5], coins=[0.9], picks=[0]))
    assert q2[-1].terms == (2, 5)


def test_length_preserved_over_many_advances():
    """Length stays at five across a long run of advances."""
    from evenodd.challenge_queue import QUEUE_LENGTH, advance_queue, fill_queue

    rng = random.Random(11)
    q = fill_queue(0, rng)
    for combo in range(60):
        q = advance_queue(q, combo, rng)
        assert len(q) == QUEUE_LENGTH
