"""Interactive training session: edit an architecture, build, train and test it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Optional, Protocol

from .button import BLACK, GREEN, RED, WHITE, Button, Color
from .dataset import Dataset, load_dataset
from .editor import LAYER_OUTLINE, NEURON_RADIUS, ArchitectureEditor, Point
from .input_display import InputDisplay
from .network import Network

DEFAULT_LEARNING_RATE = 0.01
DEFAULT_EPOCHS = 50
DISPLAY_UPDATE_INTERVAL = 100

LAYER_FILL: Color = (100, 100, 255, 200)
SELECTED_OUTLINE = 2.0
COUNT_FONT_SIZE = 16

BUTTON_Y = 520.0
BUTTON_WIDTH = 100.0
BUTTON_HEIGHT = 40.0
BUTTON_LAYOUT = (
    (300.0, "Add Layer"),
    (410.0, "Add Neuron"),
    (520.0, "Build"),
    (630.0, "Train"),
    (740.0, "Test"),
)

_BUILD_FIRST = "Please build the network first!"


class Canvas(Protocol):
    """Drawing surface the session renders onto."""

    is_open: bool

    def clear(self, color: Color) -> None: ...

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

    def circle(self, x: float, y: float, radius: float, *, fill: Color) -> None: ...

    def line(self, start: Point, end: Point, *, color: Color) -> None: ...

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

    def present(self) -> None: ...


class _HeadlessCanvas:
    """Canvas without a display that only tallies what each frame contains."""

    def __init__(self) -> None:
        self.is_open = True
        self.background: Optional[Color] = None
        self.frames = 0
        self.pending = 0
        self.last_frame_size = 0

    def clear(self, color: Color) -> None:
        self.background = color
        self.pending = 0

    def rectangle(self, x, y, width, height, *, fill, outline=None, thickness=0.0) -> None:
        self.pending += 1

    def circle(self, x, y, radius, *, fill) -> None:
        self.pending += 1

    def line(self, start, end, *, color) -> None:
        self.pending += 1

    def text(self, x, y, string, *, size, color, anchor="center") -> None:
        self.pending += 1

    def present(self) -> None:
        self.frames += 1
        self.last_frame_size = self.pending
        self.pending = 0


class SimulationApp:
    """Ties the architecture editor, input view and network to a canvas."""

    def __init__(
        self,
        canvas: Canvas,
        train_data: Dataset,
        test_data: Dataset,
        learning_rate: float = DEFAULT_LEARNING_RATE,
        epochs: int = DEFAULT_EPOCHS,
    ) -> None:
        self.canvas = canvas
        self.train_data = train_data
        self.test_data = test_data
        self.learning_rate = learning_rate
        self.epochs = epochs
        self.editor = ArchitectureEditor()
        self.input_display = InputDisplay()
        self.network: Optional[Network] = None
        self.is_built = False
        self._connections: list[list[tuple[Point, Point]]] = []
        self.buttons = [
            Button(x, BUTTON_Y, BUTTON_WIDTH, BUTTON_HEIGHT, label, fill=GREEN)
            for x, label in BUTTON_LAYOUT
        ]
        self._actions: list[Callable[[], None]] = [
            self._on_add_layer,
            self._on_add_neuron,
            self._on_build,
            self._on_train,
            self._on_test,
        ]

    def _on_add_layer(self) -> None:
        self.editor.add_layer()

    def _on_add_neuron(self) -> None:
        if self.editor.selected_layer is None:
            print("Please select a layer first!")
        else:
            self.editor.add_neuron()

    def _on_build(self) -> None:
        self.build_network()

    def _on_train(self) -> None:
        if self.is_built:
            self.train_network()
        else:
            print(_BUILD_FIRST)

    def _on_test(self) -> None:
        if self.is_built:
            self.test_network()
        else:
            print(_BUILD_FIRST)

    def handle_click(self, x: float, y: float) -> None:
        """React to a mouse click at ``(x, y)``."""
        for button, action in zip(self.buttons, self._actions):
            if button.contains(x, y):
                action()
                return
        self.editor.select_layer(x, y)

    def build_network(self) -> None:
        """Create a network from the current architecture and lay out its links."""
        if not self.editor.layer_sizes:
            print("No layers to build!")
            return
        self._connections = self.editor.connections()
        sizes = self.editor.network_sizes()
        self.network = Network(sizes, self.learning_rate)
        self.is_built = True
        print("Network built with architecture: " + "".join(f"{size} " for size in sizes))

    def _require_network(self) -> Network:
        if not self.is_built or self.network is None:
            raise RuntimeError(_BUILD_FIRST)
        return self.network

    def train_network(self) -> list[float]:
        """Train on the training data, redrawing periodically; return epoch losses.

        Training stops early, returning the losses gathered so far, once the
        canvas has been closed.
        """
        network = self._require_network()
        if len(self.train_data) == 0:
            raise ValueError("Cannot train on an empty dataset")
        print("Starting training...")
        history: list[float] = []
        for epoch in range(1, self.epochs + 1):
            total = 0.0
            for index, (label, sample) in enumerate(self.train_data):
                if index % DISPLAY_UPDATE_INTERVAL == 0:
                    if not self.canvas.is_open:
                        return history
                    self.input_display.set_sample(sample)
                    self.draw()
                total += network.compute_loss(network.forward(sample), label)
                network.backpropagate(sample, label)
            mean = total / len(self.train_data)
            history.append(mean)
            print(f"Epoch {epoch}, Loss: {mean:g}")
            self.input_display.set_sample(self.train_data.sample(len(self.train_data) - 1))
            self.draw()
        return history

    def test_network(self) -> float:
        """Evaluate on the test data and return the accuracy as a fraction."""
        network = self._require_network()
        print("Starting testing...")
        accuracy = network.test(self.test_data)
        print(f"Final Test Accuracy: {accuracy * 100:g}%")
        return accuracy

    def draw(self) -> None:
        """Render the whole interface onto the canvas."""
        canvas = self.canvas
        canvas.clear(WHITE)
        self.input_display.draw(canvas)

        for layer in range(len(self.editor)):
            x, y, width, height = self.editor.layer_rect(layer)
            selected = layer == self.editor.selected_layer
            canvas.rectangle(
                x,
                y,
                width,
                height,
                fill=LAYER_FILL,
                outline=RED if selected else BLACK,
                thickness=SELECTED_OUTLINE if selected else LAYER_OUTLINE,
            )

        for layer in range(len(self.editor)):
            for nx, ny in self.editor.neuron_positions(layer):
                canvas.circle(nx, ny, NEURON_RADIUS, fill=GREEN)

        if self.is_built:
            for segments in self._connections:
                for start, end in segments:
                    canvas.line(start, end, color=BLACK)

        for layer, size in enumerate(self.editor.layer_sizes):
            lx, ly = self.editor.count_label_position(layer)
            canvas.text(lx, ly, str(size), size=COUNT_FONT_SIZE, color=BLACK, anchor="top")

        for button in self.buttons:
            button.draw(canvas)

        canvas.present()


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mnistlab",
        description="Build, train and test a small digit classifier.",
    )
    parser.add_argument("train", help="CSV file with training samples")
    parser.add_argument("test", help="CSV file with test samples")
    parser.add_argument(
        "--layers",
        type=_positive_int,
        nargs="+",
        default=[10],
        help="neurons per layer after the input layer",
    )
    parser.add_argument("--learning-rate", type=float, default=DEFAULT_LEARNING_RATE)
    parser.add_argument("--epochs", type=int, default=DEFAULT_EPOCHS)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a session without a display: build the given layers, train and test."""
    args = _parse_args(argv)
    try:
        train_data = load_dataset(args.train)
        test_data = load_dataset(args.test)
        print(f"Training samples: {len(train_data)}")
        print(f"Test samples: {len(test_data)}")

        app = SimulationApp(
            _HeadlessCanvas(), train_data, test_data, args.learning_rate, args.epochs
        )
        for size in args.layers:
            app.editor.add_layer()
            for _ in range(size):
                app.editor.add_neuron()
        app.build_network()
        app.train_network()
        app.test_network()
    except (OSError, ValueError, RuntimeError, IndexError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())