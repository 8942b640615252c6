"""Enlarged grey-scale view of a single 28x28 input sample."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Protocol

from .button import BLACK, TRANSPARENT, Color

GRID_SIZE = 28
PIXEL_COUNT = GRID_SIZE * GRID_SIZE
CELL_SIZE = 10.0
ORIGIN_X = 10.0
ORIGIN_Y = 50.0
BORDER_THICKNESS = 2.0


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


def _shade(value: float) -> int:
    """Grey level for a normalised pixel: 0.0 is white, 1.0 is black."""
    return min(255, max(0, int((1.0 - value) * 255)))


class InputDisplay:
    """Grid of square cells showing the current sample, dark on light."""

    def __init__(self) -> None:
        self._sample: tuple[float, ...] = (0.0,) * PIXEL_COUNT
        self._shades: tuple[int, ...] = (255,) * PIXEL_COUNT

    @property
    def sample(self) -> tuple[float, ...]:
        """Pixel values currently shown."""
        return self._sample

    @property
    def shades(self) -> tuple[int, ...]:
        """Grey level of every cell, row by row."""
        return self._shades

    @staticmethod
    def cell_rect(index: int) -> tuple[float, float, float, float]:
        """Return ``(x, y, width, height)`` of the cell for pixel ``index``."""
        if not 0 <= index < PIXEL_COUNT:
            raise IndexError("Pixel index out of range")
        row, column = divmod(index, GRID_SIZE)
        return (
            ORIGIN_X + column * CELL_SIZE,
            ORIGIN_Y + row * CELL_SIZE,
            CELL_SIZE,
            CELL_SIZE,
        )

    def set_sample(self, sample: Sequence[float]) -> None:
        """Show ``sample``, which must hold exactly 784 normalised pixels."""
        if len(sample) != PIXEL_COUNT:
            raise ValueError(f"Sample must have {PIXEL_COUNT} pixel values")
        self._sample = tuple(sample)
        self._shades = tuple(_shade(value) for value in self._sample)

    def draw(self, canvas: _Canvas) -> None:
        """Draw the border and then every cell onto ``canvas``."""
        side = GRID_SIZE * CELL_SIZE
        canvas.rectangle(
            ORIGIN_X,
            ORIGIN_Y,
            side,
            side,
            fill=TRANSPARENT,
            outline=BLACK,
            thickness=BORDER_THICKNESS,
        )
        for index, shade in enumerate(self._shades):
            x, y, width, height = self.cell_rect(index)
            canvas.rectangle(x, y, width, height, fill=(shade, shade, shade, 255))