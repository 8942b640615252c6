"""A fully connected layer of neurons."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .neuron import Neuron


class Layer:
    """Group of neurons that all read the same input vector."""

    def __init__(
        self,
        num_neurons: int,
        input_size: int,
        use_relu: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.input_size = input_size
        self.use_relu = use_relu
        self._rng = rng
        self.neurons: list[Neuron] = [
            Neuron(input_size, use_relu, rng) for _ in range(num_neurons)
        ]

    def __len__(self) -> int:
        return len(self.neurons)

    @property
    def weights(self) -> list[list[float]]:
        """Weight vectors of every neuron, one row per neuron."""
        return [list(neuron.weights) for neuron in self.neurons]

    @property
    def gradients(self) -> list[float]:
        """Current gradient of every neuron."""
        return [neuron.gradient for neuron in self.neurons]

    @property
    def outputs(self) -> list[float]:
        """Most recent output of every neuron."""
        return [neuron.output for neuron in self.neurons]

    def add_neuron(self) -> None:
        """Append a freshly initialised neuron."""
        self.neurons.append(Neuron(self.input_size, self.use_relu, self._rng))

    def forward(self, inputs: Sequence[float]) -> list[float]:
        """Return the outputs of all neurons for ``inputs``."""
        if len(inputs) != self.input_size:
            raise ValueError("Input size does not match layer's input size")
        return [neuron.forward(inputs) for neuron in self.neurons]

    def compute_gradients(
        self,
        next_gradients: Sequence[float],
        next_weights: Sequence[Sequence[float]],
        is_output_layer: bool,
    ) -> None:
        """Set each neuron's gradient with respect to its pre-activation.

        For the output layer ``next_gradients`` already holds dL/da per neuron
        and the activation is linear. For hidden layers the gradient is pulled
        back through ``next_weights`` and masked by the ReLU derivative.
        """
        if is_output_layer:
            if len(next_gradients) != len(self.neurons):
                raise ValueError("Gradient count does not match number of neurons")
            for neuron, grad in zip(self.neurons, next_gradients):
                neuron.gradient = grad
            return

        if len(next_weights) != len(next_gradients):
            raise ValueError("Weight rows do not match gradient count")
        for i, neuron in enumerate(self.neurons):
            pulled = sum(row[i] * grad for row, grad in zip(next_weights, next_gradients))
            neuron.gradient = pulled * (1.0 if neuron.output > 0 else 0.0)

    def update_weights(self, learning_rate: float) -> None:
        """Take one gradient-descent step on every neuron."""
        for neuron in self.neurons:
            neuron.update_weights(learning_rate)