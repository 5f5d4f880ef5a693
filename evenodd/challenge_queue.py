"""Lookahead queue. The front is active, the other four are the preview."""

import random

from evenodd.challenge import Challenge
from evenodd.generator import generate_challenge

QUEUE_LENGTH = 5


def fill_queue(combo: int, rng=random) -> tuple[Challenge, ...]:
    return tuple(generate_challenge(combo, rng) for _ in range(QUEUE_LENGTH))


def advance_queue(queue: tuple[Challenge, ...], new_combo: int,
                  rng=random) -> tuple[Challenge, ...]:
    """Drop the answered front and append one challenge made at new_combo."""
    assert len(queue) == QUEUE_LENGTH, f"queue length {len(queue)}"
    return queue[1:] + (generate_challenge(new_combo, rng),)
