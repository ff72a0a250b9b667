"""Small fully connected regression network with manual backpropagation."""

from dataclasses import dataclass

import numpy as np


def relu(x: np.ndarray) -> np.ndarray:
    return np.maximum(0.0, x)


def relu_derivative(x: np.ndarray) -> np.ndarray:
    return (x > 0).astype(np.float64)


def sigmoid(x):
    return 1.0 / (1.0 + np.exp(-np.clip(x, -500.0, 500.0)))


@dataclass
class ForwardPass:
    """Intermediate values of one forward pass, kept for backpropagation."""

    inputs: np.ndarray
    z1: np.ndarray
    a1: np.ndarray
    z2: np.ndarray
    a2: np.ndarray
    output: np.ndarray


class FeedForwardNetwork:
    """Two ReLU hidden layers and a linear output, trained by SGD with momentum.

    Weights are drawn from ``uniform(-1, 1) * sqrt(2 / fan_in)``; biases and
    velocities start at zero.
    """

    def __init__(
        self,
        input_size: int = 50,
        hidden_sizes: tuple[int, int] = (32, 16),
        output_size: int = 1,
        learning_rate: float = 0.01,
        momentum: float = 0.9,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.learning_rate = learning_rate
        self.momentum = momentum
        rng = rng if rng is not None else np.random.default_rng()

        sizes = (input_size, *hidden_sizes, output_size)
        self.weights = [
            rng.uniform(-1.0, 1.0, size=(fan_in, fan_out)) * np.sqrt(2.0 / fan_in)
            for fan_in, fan_out in zip(sizes[:-1], sizes[1:])
        ]
        self.biases = [np.zeros(fan_out) for fan_out in sizes[1:]]
        self._weight_velocity = [np.zeros_like(w) for w in self.weights]
        self._bias_velocity = [np.zeros_like(b) for b in self.biases]

    def forward(self, inputs: np.ndarray) -> ForwardPass:
        w1, w2, w3 = self.weights
        b1, b2, b3 = self.biases
        z1 = inputs @ w1 + b1
        a1 = relu(z1)
        z2 = a1 @ w2 + b2
        a2 = relu(z2)
        output = a2 @ w3 + b3
        return ForwardPass(inputs=inputs, z1=z1, a1=a1, z2=z2, a2=a2, output=output)

    def backward(self, result: ForwardPass, target: np.ndarray) -> None:
        """Apply one momentum update for a single sample under squared error."""
        _, w2, w3 = self.weights
        dz3 = 2.0 * (result.output - target)
        dz2 = (w3 @ dz3) * relu_derivative(result.z2)
        dz1 = (w2 @ dz2) * relu_derivative(result.z1)

        gradients = (
            (np.outer(result.inputs, dz1), dz1),
            (np.outer(result.a1, dz2), dz2),
            (np.outer(result.a2, dz3), dz3),
        )
        for layer, (grad_w, grad_b) in enumerate(gradients):
            self._weight_velocity[layer] = (
                self.momentum * self._weight_velocity[layer] + self.learning_rate * grad_w
            )
            self._bias_velocity[layer] = (
                self.momentum * self._bias_velocity[layer] + self.learning_rate * grad_b
            )
            self.weights[layer] = self.weights[layer] - self._weight_velocity[layer]
            self.biases[layer] = self.biases[layer] - self._bias_velocity[layer]

    def train_step(self, inputs: np.ndarray, target: np.ndarray) -> float:
        """Forward, update, and return the sample's squared error before the update."""
        result = self.forward(inputs)
        loss = float(np.sum((result.output - target) ** 2))
        self.backward(result, target)
        return loss

    def score(self, inputs: np.ndarray) -> float:
        """Linear output squashed into [0, 1]."""
        return float(sigmoid(self.forward(inputs).output[0]))
