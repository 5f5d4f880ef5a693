"""Tests for config loader — YAML to dataclasses."""

import tempfile
from pathlib import Path

import pytest
import yaml


def write_yaml(raw) -> Path:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump(raw, f)
        return Path(f.name)


def test_load_config_parses_sections():
    """load_config should parse every section into its dataclass."""
    raw = {
        "deck": {"brightness": 50},
        "sound": {"enabled": False, "volume": 0.5, "player": "aplay"},
        "controls": {"even_keys": [24], "odd_keys": [31], "start_key": 22},
    }
    from evenodd.config import load_config

    cfg = load_config(write_yaml(raw))
    assert cfg.deck.brightness == 50
    assert cfg.sound.enabled is False
    assert cfg.sound.volume == 0.5
    assert cfg.sound.player == "aplay"
    assert cfg.controls.even_keys == [24]
    assert cfg.controls.odd_keys == [31]
    assert cfg.controls.start_key == 22


def test_load_config_defaults():
    """Missing sections and fields should get defaults."""
    from evenodd.config import load_config

    cfg = load_config(write_yaml({"deck": {}}))
    assert cfg.deck.brightness == 80
    assert cfg.sound.enabled is True
    assert cfg.sound.player == "afplay"
    assert cfg.controls.even_keys == [25, 26]
    assert cfg.controls.odd_keys == [29, 30]
    assert cfg.controls.start_key == 20


def test_load_empty_file(tmp_path):
    """An empty YAML file gives the default config."""
    from evenodd.config import default_config, load_config

    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == default_config()


def test_unknown_key_rejected():
    """A misspelled field is rejected by the dataclass."""
    from evenodd.config import load_config

    with pytest.raises(TypeError):
        load_config(write_yaml({"deck": {"brightnes": 10}}))


def test_overlapping_keys_rejected():
    """A key cannot be both EVEN and ODD, or both a guess and START."""
    from evenodd.config import ControlsConfig

    with pytest.raises(ValueError):
        ControlsConfig(even_keys=[25, 26], odd_keys=[26, 27])
    with pytest.raises(ValueError):
        ControlsConfig(start_key=25)


def test_keys_on_layout_rejected():
    """Guess and start keys may not sit on HUD, preview, active or score keys."""
    from evenodd.config import ControlsConfig

    with pytest.raises(ValueError, match="layout"):
        ControlsConfig(even_keys=[19, 26])
    with pytest.raises(ValueError, match="layout"):
        ControlsConfig(start_key=10)
    for key in (0, 7, 13, 21):
        with pytest.raises(ValueError):
            ControlsConfig(odd_keys=[key])


def test_keys_off_the_deck_rejected():
    """Keys outside 0-31 are a configuration error."""
    from evenodd.config import ControlsConfig

    with pytest.raises(ValueError, match="off the deck"):
        ControlsConfig(even_keys=[32])
    with pytest.raises(ValueError, match="off the deck"):
        ControlsConfig(start_key=-1)


def test_layout_rejection_from_yaml():
    """A YAML file binding a layout key fails to load."""
    from evenodd.config import load_config

    with pytest.raises(ValueError):
        load_config(write_yaml({"controls": {"start_key": 10}}))


def test_direction_for_two_aliases_each():
    """Both aliases map to their direction; other keys map to None."""
    from evenodd.config import ControlsConfig
    from evenodd.engine import Direction

    controls = ControlsConfig()
    assert controls.direction_for(25) is Direction.EVEN
    assert controls.direction_for(26) is Direction.EVEN
    assert controls.direction_for(29) is Direction.ODD
    assert controls.direction_for(30) is Direction.ODD
    assert controls.direction_for(20) is None


def test_sample_config_loads():
    """The shipped config.yaml matches the defaults."""
    from evenodd.config import default_config, load_config

    path = Path(__file__).parent.parent / "config.yaml"
    assert load_config(path) == default_config()
