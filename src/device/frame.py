"""Drawing surface that records draw calls for a rendering backend."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)


class FillRect(BaseModel):
    """Fill a solid rectangle."""
    kind: Literal["fill_rect"] = "fill_rect"
    x: int
    y: int
    width: int
    height: int
    color: Color


class DrawText(BaseModel):
    """Draw a line of text with its baseline origin at (x, y)."""
    kind: Literal["text"] = "text"
    x: int
    y: int
    size: float
    color: Color
    text: str


DrawCall = FillRect | DrawText


class Frame:
    """An ordered list of draw calls for one tick. Owns no pixels."""

    def __init__(self, width: int = 640, height: int = 480):
        self.width = width
        self.height = height
        self.calls: list[DrawCall] = []

    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        self.calls.append(FillRect(x=x, y=y, width=width, height=height, color=color))

    def text(self, x: int, y: int, size: float, color: Color, text: str) -> None:
        self.calls.append(DrawText(x=x, y=y, size=size, color=color, text=text))

    def texts(self) -> list[str]:
        """Just the strings drawn this tick, in order."""
        return [call.text for call in self.calls if isinstance(call, DrawText)]
