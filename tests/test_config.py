# tests/test_config.py
import dataclasses
import logging

import pytest

from torchwalls.config import DEFAULT_SETTINGS, GameConfig
from torchwalls.logging_utils import parse_level

def test_default_playfield():
    cfg = DEFAULT_SETTINGS.game.validate()
    assert (cfg.map_width, cfg.map_height) == (32, 22)
    assert cfg.player_start == (64, 64)

@pytest.mark.parametrize("bad", [
    dict(width=0),
    dict(tile_size=5),
    dict(hud_rows=23),
    dict(max_frame_ms=10.0),
])
def test_invalid_configs_are_rejected(bad):
    with pytest.raises(ValueError):
        dataclasses.replace(GameConfig(), **bad).validate()

def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SETTINGS.game.width = 10

def test_parse_level():
    assert parse_level("debug") == logging.DEBUG
    with pytest.raises(ValueError):
        parse_level("chatty")
