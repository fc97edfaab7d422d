"""Narrow interfaces between apps and the handheld (or a simulator)."""

from .input import Button, ButtonState, InputSnapshot
from .frame import BLACK, RED, WHITE, Color, DrawCall, DrawText, FillRect, Frame

__all__ = [
    "Button", "ButtonState", "InputSnapshot",
    "Color", "BLACK", "RED", "WHITE",
    "DrawCall", "DrawText", "FillRect", "Frame",
]
