"""Clickable rectangular button with a centred text label."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
GREEN: Color = (0, 255, 0, 255)
RED: Color = (255, 0, 0, 255)
TRANSPARENT: Color = (0, 0, 0, 0)

LABEL_FONT_SIZE = 16


class _Canvas(Protocol):
    def rectangle(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        *,
        fill: Color,
        outline: Optional[Color] = None,
        thickness: float = 0.0,
    ) -> None: ...

    def text(
        self,
        x: float,
        y: float,
        string: str,
        *,
        size: int,
        color: Color,
        anchor: str = "center",
    ) -> None: ...


@dataclass
class Button:
    """Rectangle with an outline and a label drawn at its centre."""

    x: float
    y: float
    width: float
    height: float
    label: str
    fill: Color = WHITE
    outline: Color = BLACK
    outline_thickness: float = 1.0

    def contains(self, x: float, y: float) -> bool:
        """Return whether the point lies within the button, outline included."""
        left = self.x - self.outline_thickness
        top = self.y - self.outline_thickness
        right = self.x + self.width + self.outline_thickness
        bottom = self.y + self.height + self.outline_thickness
        return left <= x < right and top <= y < bottom

    def draw(self, canvas: _Canvas) -> None:
        """Draw the button shape and then its label onto ``canvas``."""
        canvas.rectangle(
            self.x,
            self.y,
            self.width,
            self.height,
            fill=self.fill,
            outline=self.outline,
            thickness=self.outline_thickness,
        )
        canvas.text(
            self.x + self.width / 2.0,
            self.y + self.height / 2.0,
            self.label,
            size=LABEL_FONT_SIZE,
            color=BLACK,
            anchor="center",
        )