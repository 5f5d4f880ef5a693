"""Config loader — YAML to dataclasses.

Only host settings live here. Round length, lock time, queue length and
the combo tiers are fixed game constants.
"""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from evenodd.engine import Direction

# fixed deck layout; controls may not land on these
KEY_COUNT = 32
HUD_KEYS = list(range(0, 8))
PREVIEW_KEYS = [10, 11, 12, 13]
ACTIVE_KEY = 19
FINAL_SCORE_KEY = 21
LAYOUT_KEYS = set(HUD_KEYS) | set(PREVIEW_KEYS) | {ACTIVE_KEY, FINAL_SCORE_KEY}


@dataclass
class DeckConfig:
    brightness: int = 80


@dataclass
class SoundConfig:
    enabled: bool = True
    volume: float = 0.3
    player: str = "afplay"


@dataclass
class ControlsConfig:
    even_keys: list[int] = field(default_factory=lambda: [25, 26])
    odd_keys: list[int] = field(default_factory=lambda: [29, 30])
    start_key: int = 20

    def __post_init__(self):
        for key in [*self.even_keys, *self.odd_keys, self.start_key]:
            if not 0 <= key < KEY_COUNT:
                raise ValueError(f"key {key} is off the deck (0-{KEY_COUNT - 1})")
            if key in LAYOUT_KEYS:
                raise ValueError(f"key {key} is taken by the game layout")
        both = set(self.even_keys) & set(self.odd_keys)
        if both:
            raise ValueError(f"keys bound to both EVEN and ODD: {sorted(both)}")
        if self.start_key in self.even_keys or self.start_key in self.odd_keys:
            raise ValueError(f"start key {self.start_key} is also a guess key")

    def direction_for(self, key: int) -> Direction | None:
        if key in self.even_keys:
            return Direction.EVEN
        if key in self.odd_keys:
            return Direction.ODD
        return None


@dataclass
class AppConfig:
    deck: DeckConfig = field(default_factory=DeckConfig)
    sound: SoundConfig = field(default_factory=SoundConfig)
    controls: ControlsConfig = field(default_factory=ControlsConfig)


def default_config() -> AppConfig:
    return AppConfig()


def load_config(path: Path) -> AppConfig:
    """Load config from YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    deck = DeckConfig(**(raw.get("deck") or {}))
    sound = SoundConfig(**(raw.get("sound") or {}))
    controls = ControlsConfig(**(raw.get("controls") or {}))

    return AppConfig(deck=deck, sound=sound, controls=controls)
