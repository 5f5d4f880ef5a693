"""Round state machine (Ended / Playing) with a lock after a miss.

Every transition is a pure function ``GameState -> GameState``. The
``ParityRound`` facade keeps the current state for a host and serialises
transitions, since hosts fire ticks and lock expiry from timer threads.

Lock expiry is scheduled by the host. Each miss (and each restart) bumps
``lock_token``; an expiry carrying an older token is stale and ignored, so
a restart cancels whatever expiry was pending.
"""

import random
import threading
from dataclasses import dataclass, replace
from enum import Enum

from evenodd.challenge import Challenge, is_even
from evenodd.challenge_queue import advance_queue, fill_queue
from evenodd.difficulty import score_gain

ROUND_SECONDS = 60
LOCK_SECONDS = 2
WRONG_FEEDBACK = "Wrong!"


class Status(Enum):
    ENDED = "ended"
    PLAYING = "playing"


class Direction(Enum):
    EVEN = "even"
    ODD = "odd"


class Outcome(Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    IGNORED = "ignored"


@dataclass(frozen=True)
class GameState:
    queue: tuple[Challenge, ...]
    score: int = 0
    combo: int = 0
    time_left: int = ROUND_SECONDS
    status: Status = Status.ENDED
    locked: bool = False
    feedback: str | None = None
    lock_token: int = 0

    @property
    def active(self) -> Challenge:
        return self.queue[0]

    @property
    def preview(self) -> tuple[Challenge, ...]:
        """Upcoming challenges, nearest first."""
        return self.queue[1:]

    @property
    def playing(self) -> bool:
        return self.status is Status.PLAYING


# ── transitions ──────────────────────────────────────────────────────

def initial_state(rng=random) -> GameState:
    """Ended, with a combo-0 queue so the preview shows before play."""
    return GameState(queue=fill_queue(0, rng))


def start(state: GameState, rng=random) -> GameState:
    return GameState(
        queue=fill_queue(0, rng),
        status=Status.PLAYING,
        lock_token=state.lock_token + 1,
    )


def tick(state: GameState) -> GameState:
    if not state.playing:
        return state
    time_left = state.time_left - 1
    if time_left <= 0:
        return replace(state, time_left=0, status=Status.ENDED)
    return replace(state, time_left=time_left)


def guess(state: GameState, direction: Direction,
          rng=random) -> tuple[GameState, Outcome]:
    if not state.playing or state.locked:
        return state, Outcome.IGNORED

    correct = (direction is Direction.EVEN) == is_even(state.active)
    if correct:
        combo = state.combo + 1
        gain = score_gain(combo)
        return replace(
            state,
            score=state.score + gain,
            combo=combo,
            feedback=f"+{gain}",
            queue=advance_queue(state.queue, combo, rng),
        ), Outcome.CORRECT

    # the missed challenge stays up until the lock expires
    return replace(
        state,
        combo=0,
        locked=True,
        feedback=WRONG_FEEDBACK,
        lock_token=state.lock_token + 1,
    ), Outcome.WRONG


def expire_lock(state: GameState, token: int, rng=random) -> GameState:
    if not state.playing or not state.locked or token != state.lock_token:
        return state
    return replace(
        state,
        locked=False,
        feedback=None,
        queue=advance_queue(state.queue, 0, rng),
    )


# ── host facade ──────────────────────────────────────────────────────

class ParityRound:
    """Current round state plus the transitions a host may fire."""

    def __init__(self, rng=random):
        self.rng = rng
        self.lock = threading.Lock()
        self._state = initial_state(rng)

    @property
    def state(self) -> GameState:
        return self._state

    def get_state(self) -> GameState:
        return self._state

    @property
    def pending_lock_token(self) -> int:
        """Token the host hands to its lock-expiry timer after a miss."""
        return self._state.lock_token

    def start(self) -> GameState:
        with self.lock:
            self._state = start(self._state, self.rng)
            return self._state

    def tick(self) -> GameState:
        with self.lock:
            self._state = tick(self._state)
            return self._state

    def submit_guess(self, direction: Direction) -> Outcome:
        with self.lock:
            self._state, outcome = guess(self._state, direction, self.rng)
            return outcome

    def expire_lock(self, token: int) -> GameState:
        with self.lock:
            self._state = expire_lock(self._state, token, self.rng)
            return self._state
