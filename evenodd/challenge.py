"""Challenges: a bare digit or a small left-to-right expression."""

import math
from dataclasses import dataclass
from enum import Enum


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"

    @property
    def glyph(self) -> str:
        return GLYPHS[self]


GLYPHS = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "−",
    Operator.MULTIPLY: "×",
    Operator.DIVIDE: "÷",
    Operator.MODULO: "%",
}


@dataclass(frozen=True)
class NumberChallenge:
    value: int


@dataclass(frozen=True)
class ExpressionChallenge:
    terms: tuple[int, ...]
    operators: tuple[Operator, ...]

    def __post_init__(self):
        assert len(self.terms) in (2, 3), f"bad term count: {self.terms}"
        assert len(self.operators) == len(self.terms) - 1, (
            f"{len(self.terms)} terms need {len(self.terms) - 1} operators, "
            f"got {len(self.operators)}"
        )


Challenge = NumberChallenge | ExpressionChallenge


def _apply(op: Operator, left: int, right: int) -> int:
    if op is Operator.ADD:
        return left + right
    if op is Operator.SUBTRACT:
        return left - right
    if op is Operator.MULTIPLY:
        return left * right
    if op is Operator.DIVIDE:
        return 0 if right == 0 else left // right
    if op is Operator.MODULO:
        # remainder keeps the sign of the dividend: -5 % 3 == -2
        return 0 if right == 0 else int(math.fmod(left, right))
    raise ValueError(f"unknown operator: {op!r}")


def evaluate(expr: ExpressionChallenge) -> int:
    """Fold operators left to right over the terms.

    Division floors; division or modulo by zero yields 0 for that step.
    """
    result = expr.terms[0]
    for i, op in enumerate(expr.operators):
        result = _apply(op, result, expr.terms[i + 1])
    return result


def is_even(challenge: Challenge) -> bool:
    if isinstance(challenge, NumberChallenge):
        return challenge.value % 2 == 0
    if isinstance(challenge, ExpressionChallenge):
        return evaluate(challenge) % 2 == 0
    raise TypeError(f"not a challenge: {challenge!r}")


def describe(challenge: Challenge) -> str:
    """Display text, e.g. "7" or "3+4×2"."""
    if isinstance(challenge, NumberChallenge):
        return str(challenge.value)
    if isinstance(challenge, ExpressionChallenge):
        parts = [str(challenge.terms[0])]
        for op, term in zip(challenge.operators, challenge.terms[1:]):
            parts.append(op.glyph)
            parts.append(str(term))
        return "".join(parts)
    raise TypeError(f"not a challenge: {challenge!r}")
