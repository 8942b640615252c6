"""Editable network architecture laid out as columns of neurons."""

from __future__ import annotations

from typing import Optional

from .dataset import PIXELS_PER_SAMPLE

LAYER_WIDTH = 60.0
LAYER_HEIGHT = 400.0
NEURON_RADIUS = 6.0
LAYER_X_START = 350.0
LAYER_Y = 50.0
LAYER_SPACING = 120.0
LAYER_OUTLINE = 1.0
NEURON_PADDING = 20.0
COUNT_LABEL_GAP = 10.0

Point = tuple[float, float]
Segment = tuple[Point, Point]


class ArchitectureEditor:
    """Layers with neuron counts, a selected layer, and their on-screen layout."""

    def __init__(self) -> None:
        self.layer_sizes: list[int] = []
        self.selected_layer: Optional[int] = None

    def __len__(self) -> int:
        return len(self.layer_sizes)

    def _check_layer(self, layer: int) -> None:
        if not 0 <= layer < len(self.layer_sizes):
            raise IndexError("Layer index out of range")

    def layer_rect(self, layer: int) -> tuple[float, float, float, float]:
        """Return ``(x, y, width, height)`` of the column for ``layer``."""
        self._check_layer(layer)
        return (LAYER_X_START + layer * LAYER_SPACING, LAYER_Y, LAYER_WIDTH, LAYER_HEIGHT)

    def count_label_position(self, layer: int) -> Point:
        """Top-centre point of the neuron-count label below ``layer``."""
        x, y, width, height = self.layer_rect(layer)
        return (x + width / 2.0, y + height + COUNT_LABEL_GAP)

    def add_layer(self) -> int:
        """Append an empty layer, select it and return its index."""
        self.layer_sizes.append(0)
        self.selected_layer = len(self.layer_sizes) - 1
        return self.selected_layer

    def add_neuron(self) -> int:
        """Add a neuron to the selected layer and return its new size."""
        if self.selected_layer is None or not 0 <= self.selected_layer < len(self.layer_sizes):
            raise RuntimeError("Invalid selected layer")
        self.layer_sizes[self.selected_layer] += 1
        return self.layer_sizes[self.selected_layer]

    def select_layer(self, x: float, y: float) -> Optional[int]:
        """Select the layer under the point, or clear the selection if none."""
        self.selected_layer = None
        for layer in range(len(self.layer_sizes)):
            left, top, width, height = self.layer_rect(layer)
            if (
                left - LAYER_OUTLINE <= x < left + width + LAYER_OUTLINE
                and top - LAYER_OUTLINE <= y < top + height + LAYER_OUTLINE
            ):
                self.selected_layer = layer
                break
        return self.selected_layer

    def neuron_positions(self, layer: int) -> list[Point]:
        """Top-left corners of the neuron circles in ``layer``, top to bottom."""
        self._check_layer(layer)
        count = self.layer_sizes[layer]
        x = LAYER_X_START + layer * LAYER_SPACING + LAYER_WIDTH / 2 - NEURON_RADIUS
        if count == 0:
            return []
        if count == 1:
            return [(x, LAYER_Y + LAYER_HEIGHT / 2 - NEURON_RADIUS)]
        first = LAYER_Y + NEURON_PADDING + NEURON_RADIUS
        last = LAYER_Y + LAYER_HEIGHT - NEURON_PADDING - NEURON_RADIUS
        spacing = (last - first) / (count - 1)
        return [(x, LAYER_Y + NEURON_PADDING + i * spacing) for i in range(count)]

    def connections(self) -> list[list[Segment]]:
        """Line segments joining every neuron to every neuron of the next layer."""
        result: list[list[Segment]] = []
        for layer in range(len(self.layer_sizes) - 1):
            sources = self.neuron_positions(layer)
            targets = self.neuron_positions(layer + 1)
            result.append(
                [
                    (
                        (sx + NEURON_RADIUS * 2, sy + NEURON_RADIUS),
                        (tx, ty + NEURON_RADIUS),
                    )
                    for sx, sy in sources
                    for tx, ty in targets
                ]
            )
        return result

    def network_sizes(self) -> list[int]:
        """Layer sizes for a network, with the input layer in front."""
        if not self.layer_sizes:
            raise ValueError("No layers to build!")
        return [PIXELS_PER_SAMPLE, *self.layer_sizes]