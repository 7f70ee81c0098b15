# src/torchwalls/input.py
# Held-key input source. Key names follow pygame.key.name() ("w", "up", "j"...),
# so the runner can feed events straight in and tests can drive it by hand.

from __future__ import annotations

from typing import Dict, Iterable, Set, Tuple

KEY_MAP: Dict[str, Tuple[str, ...]] = {
    "up": ("w", "up"),
    "down": ("s", "down"),
    "left": ("a", "left"),
    "right": ("d", "right"),
    "j": ("j", "space"),
    "k": ("k",),
}


class HeldKeys:
    def __init__(self, held: Iterable[str] = (), key_map: Dict[str, Tuple[str, ...]] = KEY_MAP) -> None:
        self.key_map = key_map
        self.keys: Set[str] = set()
        for k in held:
            self.press(k)

    def press(self, key: str) -> None:
        self.keys.add(key.lower())

    def release(self, key: str) -> None:
        self.keys.discard(key.lower())

    def clear(self) -> None:
        self.keys.clear()

    def is_down(self, action: str) -> bool:
        try:
            keys = self.key_map[action]
        except KeyError:
            raise KeyError(f"unknown action {action!r}") from None
        return any(k in self.keys for k in keys)


class ActionState:
    """Input source that answers by action name directly (scripted play, tests)."""

    def __init__(self, *held: str) -> None:
        self.held: Set[str] = set()
        for a in held:
            self.hold(a)

    def hold(self, action: str) -> None:
        if action not in KEY_MAP:
            raise KeyError(f"unknown action {action!r}")
        self.held.add(action)

    def let_go(self, action: str) -> None:
        self.held.discard(action)

    def is_down(self, action: str) -> bool:
        if action not in KEY_MAP:
            raise KeyError(f"unknown action {action!r}")
        return action in self.held
