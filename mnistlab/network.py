"""Feed-forward classifier trained with softmax cross-entropy."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from itertools import pairwise

from .dataset import Dataset
from .layer import Layer

_LOG_EPSILON = 1e-10


def softmax(values: Sequence[float]) -> list[float]:
    """Numerically stable softmax of ``values``."""
    if not values:
        raise ValueError("softmax of an empty sequence")
    peak = max(values)
    exps = [math.exp(v - peak) for v in values]
    total = sum(exps)
    return [e / total for e in exps]


def _argmax(values: Sequence[float]) -> int:
    return max(range(len(values)), key=values.__getitem__)


class Network:
    """Stack of layers: ReLU hidden layers and a linear output layer."""

    def __init__(
        self,
        layer_sizes: Sequence[int],
        learning_rate: float,
        rng: random.Random | None = None,
    ) -> None:
        sizes = list(layer_sizes)
        if len(sizes) < 2:
            raise ValueError("Network must have at least two layers (input and output)")
        self.input_size = sizes[0]
        self.output_size = sizes[-1]
        self.learning_rate = learning_rate
        self._rng = rng
        last = len(sizes) - 1
        self.layers: list[Layer] = [
            Layer(num_neurons, input_size, use_relu=index < last, rng=rng)
            for index, (input_size, num_neurons) in enumerate(pairwise(sizes), start=1)
        ]

    def add_layer(self, num_neurons: int, input_size: int) -> None:
        """Append a ReLU layer to the end of the network."""
        self.layers.append(Layer(num_neurons, input_size, rng=self._rng))

    def _logits(self, sample: Sequence[float]) -> list[float]:
        activations = list(sample)
        for layer in self.layers:
            activations = layer.forward(activations)
        return activations

    def forward(self, sample: Sequence[float]) -> list[float]:
        """Return class probabilities for ``sample``."""
        if len(sample) != self.input_size:
            raise ValueError("Input size does not match network input size")
        return softmax(self._logits(sample))

    def compute_loss(self, output: Sequence[float], label: int) -> float:
        """Cross-entropy loss of the probabilities ``output`` against ``label``."""
        if not 0 <= label < self.output_size:
            raise ValueError("Invalid label for loss computation")
        return -math.log(output[label] + _LOG_EPSILON)

    def backpropagate(self, sample: Sequence[float], label: int) -> None:
        """Run one stochastic gradient-descent step on a single sample."""
        probabilities = softmax(self._logits(sample))
        gradients = [p - (1.0 if i == label else 0.0) for i, p in enumerate(probabilities)]

        following: Layer | None = None
        for layer in reversed(self.layers):
            if following is None:
                layer.compute_gradients(gradients, [], True)
            else:
                layer.compute_gradients(gradients, following.weights, False)
            gradients = layer.gradients
            following = layer

        for layer in self.layers:
            layer.update_weights(self.learning_rate)

    def train(self, dataset: Dataset, epochs: int) -> list[float]:
        """Train for ``epochs`` passes and return the mean loss of each."""
        if len(dataset) == 0:
            raise ValueError("Cannot train on an empty dataset")
        history: list[float] = []
        for epoch in range(1, epochs + 1):
            total = 0.0
            for label, sample in dataset:
                total += self.compute_loss(self.forward(sample), label)
                self.backpropagate(sample, label)
            mean = total / len(dataset)
            history.append(mean)
            print(f"Epoch {epoch}, Loss: {mean:g}")
        return history

    def test(self, dataset: Dataset) -> float:
        """Return the fraction of samples whose most probable class is correct."""
        if len(dataset) == 0:
            raise ValueError("Cannot test on an empty dataset")
        correct = sum(
            1 for label, sample in dataset if _argmax(self.forward(sample)) == label
        )
        accuracy = correct / len(dataset)
        print(f"Test Accuracy: {accuracy:g}")
        return accuracy