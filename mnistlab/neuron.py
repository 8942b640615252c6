"""A single neuron: weighted sum plus bias with an optional ReLU activation."""

from __future__ import annotations

import random
from collections.abc import Sequence

# Shared generator used when no explicit one is given, so that every
# neuron created without a generator draws from one deterministic stream.
_shared_rng = random.Random(1)


def _relu(x: float) -> float:
    return max(0.0, x)


class Neuron:
    """Neuron with weights and bias drawn uniformly from [-1, 1]."""

    def __init__(
        self,
        num_inputs: int,
        use_relu: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        if num_inputs < 0:
            raise ValueError("Number of inputs cannot be negative")
        generator = rng if rng is not None else _shared_rng
        self.use_relu = use_relu
        self.weights: list[float] = [generator.uniform(-1.0, 1.0) for _ in range(num_inputs)]
        self.bias: float = generator.uniform(-1.0, 1.0)
        self.inputs: list[float] = []
        self.output: float = 0.0
        self.gradient: float = 0.0

    @property
    def num_inputs(self) -> int:
        """Number of inputs the neuron expects."""
        return len(self.weights)

    def forward(self, inputs: Sequence[float]) -> float:
        """Compute, store and return the neuron's activation for ``inputs``."""
        if len(inputs) != self.num_inputs:
            raise ValueError("Input size does not match number of weights")
        self.inputs = list(inputs)
        total = sum((w * x for w, x in zip(self.weights, self.inputs)), self.bias)
        self.output = _relu(total) if self.use_relu else total
        return self.output

    def update_weights(self, learning_rate: float) -> None:
        """Take one gradient-descent step using the stored gradient and inputs."""
        if len(self.inputs) != self.num_inputs:
            raise RuntimeError("forward must be called before update_weights")
        step = learning_rate * self.gradient
        self.weights = [w - step * x for w, x in zip(self.weights, self.inputs)]
        self.bias -= step