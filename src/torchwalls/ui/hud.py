# src/torchwalls/ui/hud.py
from typing import Tuple

HUD_HEIGHT = 9


def percent_label(seen: int, total: int) -> str:
    """Explored percentage as shown top-left; an empty target counts as done."""
    if total <= 0:
        return "100%"
    return f"{round(seen / total * 100)}%"


def level_label(level: int) -> str:
    if level < 0:
        raise ValueError("level must be >= 0")
    return f"level {level}"


def heart_rect(screen_width: float, heart_size: float, max_heart: float) -> Tuple[float, float, float, float]:
    """Heart square centred horizontally, centred on the max heart's box vertically."""
    x = screen_width / 2 - heart_size / 2
    y = max_heart / 2 - heart_size / 2
    return (x, y, heart_size, heart_size)


def draw_hud(r, *, seen: int, total: int, level: int, heart_size: float, max_heart: float) -> None:
    r.clear(0, 0, r.width, HUD_HEIGHT)
    r.line(0, HUD_HEIGHT, r.width, HUD_HEIGHT)
    r.text(percent_label(seen, total), 2, 2)
    r.text(level_label(level), r.width - 2, 2, "right")
    r.rect(*heart_rect(r.width, heart_size, max_heart))
