# tests/test_hud.py
import pytest

from torchwalls.ui.hud import HUD_HEIGHT, draw_hud, heart_rect, level_label, percent_label

class Recorder:
    width = 128
    height = 96

    def __init__(self):
        self.calls = []

    def clear(self, x=0, y=0, w=None, h=None):
        self.calls.append(("clear", x, y, w, h))

    def line(self, *args):
        self.calls.append(("line",) + args)

    def rect(self, *args):
        self.calls.append(("rect",) + args)

    def text(self, *args):
        self.calls.append(("text",) + args)

def test_percent_label_rounds():
    assert percent_label(0, 32) == "0%"
    assert percent_label(1, 3) == "33%"
    assert percent_label(2, 3) == "67%"
    assert percent_label(32, 32) == "100%"
    assert percent_label(0, 0) == "100%"

def test_level_label():
    assert level_label(7) == "level 7"
    with pytest.raises(ValueError):
        level_label(-1)

def test_heart_is_centred():
    x, y, w, h = heart_rect(128, 4, 8)
    assert (x, y, w, h) == (62, 2, 4, 4)

def test_draw_hud_layout():
    r = Recorder()
    draw_hud(r, seen=16, total=32, level=3, heart_size=6, max_heart=8)
    assert r.calls[0] == ("clear", 0, 0, 128, HUD_HEIGHT)
    assert ("text", "50%", 2, 2) in r.calls
    assert ("text", "level 3", 126, 2, "right") in r.calls
    assert ("rect", 61.0, 1.0, 6, 6) in r.calls
