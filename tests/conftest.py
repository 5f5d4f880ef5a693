"""Shared fixtures: scripted randomness for challenge generation."""

import pytest


class ScriptedRng:
    """Stands in for random.Random with canned answers.

    digits feed randint, coins feed random, picks are indexes for choice.
    """

    def __init__(self, digits=(), coins=(), picks=()):
        self.digits = list(digits)
        self.coins = list(coins)
        self.picks = list(picks)

    def randint(self, a, b):
        value = self.digits.pop(0)
        assert a <= value <= b
        return value

    def random(self):
        return self.coins.pop(0)

    def choice(self, seq):
        return seq[self.picks.pop(0)]


@pytest.fixture
def scripted():
    return ScriptedRng
