# Capabilities the game consumes from its host: drawing, input and time.
# The engine only depends on these protocols; pygame implementations live in
# torchwalls.render.canvas and torchwalls.input.

from __future__ import annotations

from typing import Optional, Protocol, Tuple

# Logical action names the game queries.
ACTIONS = ("up", "down", "left", "right", "j", "k")


class Renderer(Protocol):
    width: int
    height: int

    def clear(self, x: float = 0, y: float = 0, w: Optional[float] = None, h: Optional[float] = None) -> None: ...

    def line(self, x0: float, y0: float, x1: float, y1: float, dotted: bool = False) -> None: ...

    def rect(self, x: float, y: float, w: float, h: float, outline: bool = False) -> None: ...

    def text(self, text: str, x: float, y: float, *attrs: str) -> None: ...

    def translate(self, x: float, y: float) -> None: ...

    def rotate(self, angle: float) -> None: ...

    def reset_transform(self) -> None: ...

    def push(self) -> None: ...

    def pop(self) -> None: ...

    def transform_point(self, x: float, y: float) -> Tuple[float, float]: ...


class InputSource(Protocol):
    def is_down(self, action: str) -> bool: ...


class Clock(Protocol):
    update_rate_ms: float

    def seconds_to_ticks(self, seconds: float) -> int: ...

    def add_elapsed(self, elapsed_ms: float) -> None: ...

    def drain(self) -> int: ...
