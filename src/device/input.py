"""Per-tick button snapshot consumed by apps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Button(str, Enum):
    """Logical buttons on the handheld."""
    POV_DOWN = "POV_DOWN"
    POV_UP = "POV_UP"
    POV_LEFT = "POV_LEFT"
    POV_RIGHT = "POV_RIGHT"
    BUMPER_L = "BUMPER_L"
    BUMPER_R = "BUMPER_R"
    MENU_L = "MENU_L"
    MENU_R = "MENU_R"
    ACTION_H = "ACTION_H"
    ACTION_V = "ACTION_V"
    ACTION_B = "ACTION_B"
    ACTION_A = "ACTION_A"


@dataclass
class ButtonState:
    pressed: bool = False
    previous: bool = False

    @property
    def just_pressed(self) -> bool:
        return self.pressed and not self.previous

    @property
    def just_released(self) -> bool:
        return not self.pressed and self.previous

    @property
    def just_changed(self) -> bool:
        return self.pressed != self.previous


class InputSnapshot:
    """
    Button state for the current tick.

    Whoever feeds input calls ``event`` as presses arrive, hands the snapshot
    to the app for one tick, then calls ``update`` so that "just pressed" is
    true for exactly one tick per physical press.
    """

    def __init__(self):
        self._buttons: dict[Button, ButtonState] = {b: ButtonState() for b in Button}

    @classmethod
    def pressing(cls, *buttons: Button) -> "InputSnapshot":
        """A snapshot where ``buttons`` were pressed this tick and nothing else is held."""
        snapshot = cls()
        for button in buttons:
            snapshot.event(button, True)
        return snapshot

    def update(self) -> None:
        """Roll this tick's state into the previous state."""
        for state in self._buttons.values():
            state.previous = state.pressed

    def event(self, button: Button, value: bool) -> None:
        self._buttons[button].pressed = value

    def set_held(self, held: Iterable[Button]) -> None:
        """Mark exactly ``held`` as pressed and everything else as released."""
        held = set(held)
        for button, state in self._buttons.items():
            state.pressed = button in held

    def pressed(self, button: Button) -> bool:
        return self._buttons[button].pressed

    def just_pressed(self, button: Button) -> bool:
        return self._buttons[button].just_pressed

    def just_released(self, button: Button) -> bool:
        return self._buttons[button].just_released

    def just_changed(self, button: Button) -> bool:
        return self._buttons[button].just_changed
