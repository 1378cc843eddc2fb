"""
unit.py
~~~~~~~

A single computational node: weighted sum of its inputs plus a bias,
passed through the network's activation function.
"""

from typing import List, Optional, Sequence

import numpy as np

from feedforward.activations import Activation
from feedforward.exceptions import DimensionMismatchError

# Random weights are drawn from Uniform[INIT_LOW, INIT_HIGH)
INIT_LOW = -1.0
INIT_HIGH = 1.0


class Unit:
    """
    Holds the incoming weights and bias of one unit.

    The number of weights is fixed at construction and equals the width of
    the layer feeding this unit. Values are mutated in place by training.
    """

    def __init__(self, weights: Sequence[float], bias: float = 0.0):
        self.weights: List[float] = [float(w) for w in weights]
        self.bias = float(bias)

    @classmethod
    def random(
        cls,
        fan_in: int,
        rng: Optional[np.random.Generator] = None
    ) -> 'Unit':
        """
        Create a unit with random weights and a zero bias.

        Each weight is drawn independently from Uniform[-1, 1).

        Args:
            fan_in: Number of incoming connections
            rng: Generator to draw from; seed it for reproducible weights

        Returns:
            Unit: The new unit
        """
        if rng is None:
            rng = np.random.default_rng()
        weights = rng.uniform(INIT_LOW, INIT_HIGH, size=fan_in)
        return cls(weights.tolist(), 0.0)

    @property
    def fan_in(self) -> int:
        return len(self.weights)

    def weighted_sum(self, inputs: Sequence[float]) -> float:
        """Return ``bias + sum(weights[k] * inputs[k])``."""
        if len(inputs) != len(self.weights):
            raise DimensionMismatchError(
                'Unit input', len(self.weights), len(inputs)
            )
        z = self.bias
        for w, x in zip(self.weights, inputs):
            z += w * x
        return z

    def fire(self, inputs: Sequence[float], activation: Activation) -> float:
        """Compute this unit's output for the given inputs."""
        return activation.apply(self.weighted_sum(inputs))

    def adjust(
        self,
        delta: float,
        upstream: Sequence[float],
        learn_rate: float
    ) -> None:
        """
        Apply one gradient-descent step in place.

        Args:
            delta: Error signal of this unit
            upstream: Activations that fed this unit's weights
            learn_rate: Step size
        """
        step = learn_rate * delta
        for j, x in enumerate(upstream):
            self.weights[j] -= step * x
        self.bias -= step

    def __repr__(self) -> str:
        return f"Unit(weights={self.weights}, bias={self.bias})"
