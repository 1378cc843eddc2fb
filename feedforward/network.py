"""
network.py
~~~~~~~~~~

Feed-forward neural network trained with stochastic gradient descent.

A network is an ordered sequence of hidden layers followed by an output
layer. Every layer is a tuple of :class:`~feedforward.unit.Unit` objects and
every unit in layer ``i`` takes the outputs of layer ``i - 1`` as inputs
(the raw input vector for the first layer). A single activation function
is shared by all units.

Training walks the examples in order, one at a time, and updates weights
by plain backpropagation of the squared-error cost.
"""

import time
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from feedforward.activations import (
    Activation,
    activation_from_dict,
    get_activation,
)
from feedforward.exceptions import ConfigurationError, DimensionMismatchError
from feedforward.unit import Unit

# Configure module logger
logger = logging.getLogger(__name__)

Layer = Tuple[Unit, ...]
Report = Dict[str, Any]


class Network:
    """
    Layered network of units.

    Build it either with random weights::

        net = Network(2, 1, 3, seed=42)          # 2 inputs, 3 hidden, 1 output

    or from explicit weights, ordered hidden layers first and the output
    layer last (``weights[layer][unit][incoming]``)::

        net = Network(2, 1, activation=Step(1.5), weights=[[[1, 1]]])
    """

    def __init__(
        self,
        input_width: int,
        output_width: int,
        *hidden_widths: int,
        activation: Union[str, Activation, None] = None,
        weights: Optional[Sequence[Sequence[Sequence[float]]]] = None,
        biases: Optional[Sequence[Sequence[float]]] = None,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Build the network.

        Args:
            input_width: Length of the input vector
            output_width: Number of output units
            *hidden_widths: Number of units in each hidden layer
            activation: Activation instance or registry name (sigmoid
                by default)
            weights: Explicit weights, one entry per hidden layer plus one
                for the output layer. Random when omitted.
            biases: Explicit biases shaped like ``weights`` without the
                innermost level. Zero when omitted.
            seed: Seed for random initialization
            rng: Generator for random initialization (overrides ``seed``)

        Raises:
            ConfigurationError: If a width is not a positive integer or the
                explicit weights/biases don't match the topology
        """
        widths = [input_width, *hidden_widths, output_width]
        for width in widths:
            if isinstance(width, bool) or not isinstance(width, (int, np.integer)) or width < 1:
                raise ConfigurationError(
                    f"Layer widths must be positive integers, got {widths}"
                )
        widths = [int(width) for width in widths]

        if weights is not None and len(hidden_widths) != len(weights) - 1:
            raise ConfigurationError(
                f"Got weights for {len(weights)} layer(s) but "
                f"{len(hidden_widths)} hidden layer(s) plus an output layer"
            )
        if biases is not None and len(biases) != len(widths) - 1:
            raise ConfigurationError(
                f"Got biases for {len(biases)} layer(s), "
                f"expected {len(widths) - 1}"
            )

        activation = get_activation(activation)
        if weights is None and rng is None:
            rng = np.random.default_rng(seed)

        # Build everything locally first so a failure leaves nothing behind
        layers: List[Layer] = []
        for index in range(1, len(widths)):
            fan_in = widths[index - 1]
            width = widths[index]
            layers.append(self._build_layer(
                index - 1, width, fan_in,
                None if weights is None else weights[index - 1],
                None if biases is None else biases[index - 1],
                rng
            ))

        self.activation: Activation = activation
        self._input_width = widths[0]
        self._hidden_layers: Tuple[Layer, ...] = tuple(layers[:-1])
        self._output_layer: Layer = layers[-1]

        logger.debug(f"Created network {self.sizes} with {activation!r}")

    @staticmethod
    def _build_layer(
        layer_index: int,
        width: int,
        fan_in: int,
        weights: Optional[Sequence[Sequence[float]]],
        biases: Optional[Sequence[float]],
        rng: Optional[np.random.Generator]
    ) -> Layer:
        """Create the units of one layer, checking explicit shapes."""
        if biases is not None and len(biases) != width:
            raise ConfigurationError(
                f"Layer {layer_index} has {width} unit(s) but "
                f"{len(biases)} bias(es) were given"
            )

        if weights is None:
            units = [Unit.random(fan_in, rng) for _ in range(width)]
        else:
            if len(weights) != width:
                raise ConfigurationError(
                    f"Layer {layer_index} has {width} unit(s) but weights "
                    f"for {len(weights)} were given"
                )
            units = []
            for unit_index, unit_weights in enumerate(weights):
                if len(unit_weights) != fan_in:
                    raise ConfigurationError(
                        f"Unit {unit_index} of layer {layer_index} needs "
                        f"{fan_in} weight(s), got {len(unit_weights)}"
                    )
                units.append(Unit(unit_weights))

        if biases is not None:
            for unit, bias in zip(units, biases):
                unit.bias = float(bias)
        return tuple(units)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def input_width(self) -> int:
        return self._input_width

    @property
    def output_width(self) -> int:
        return len(self._output_layer)

    @property
    def hidden_widths(self) -> List[int]:
        return [len(layer) for layer in self._hidden_layers]

    @property
    def sizes(self) -> List[int]:
        """Widths of every layer: ``[input, *hidden, output]``."""
        return [self._input_width, *self.hidden_widths, self.output_width]

    @property
    def hidden_layers(self) -> Tuple[Layer, ...]:
        return self._hidden_layers

    @property
    def output_layer(self) -> Layer:
        return self._output_layer

    @property
    def layers(self) -> Tuple[Layer, ...]:
        """Hidden layers followed by the output layer."""
        return self._hidden_layers + (self._output_layer,)

    def get_weights(self) -> List[List[List[float]]]:
        """Return a copy of all weights as ``[layer][unit][incoming]``."""
        return [[list(unit.weights) for unit in layer] for layer in self.layers]

    def get_biases(self) -> List[List[float]]:
        """Return a copy of all biases as ``[layer][unit]``."""
        return [[unit.bias for unit in layer] for layer in self.layers]

    def to_dict(self) -> Dict[str, Any]:
        """Describe the network with plain JSON-serializable values."""
        return {
            'sizes': self.sizes,
            'activation': self.activation.to_dict(),
            'weights': self.get_weights(),
            'biases': self.get_biases()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Network':
        """Rebuild a network from the output of :meth:`to_dict`."""
        try:
            sizes = data['sizes']
            weights = data['weights']
        except KeyError as e:
            raise ConfigurationError(f"Missing network field: {e}") from e
        if weights is None:
            raise ConfigurationError('Stored network has no weights')
        if len(sizes) < 2:
            raise ConfigurationError(
                f"Need at least input and output widths, got {sizes}"
            )

        return cls(
            sizes[0],
            sizes[-1],
            *sizes[1:-1],
            activation=activation_from_dict(data.get('activation')),
            weights=weights,
            biases=data.get('biases')
        )

    # ------------------------------------------------------------------
    # Forward propagation
    # ------------------------------------------------------------------

    def forward(self, input: Sequence[float]) -> List[List[float]]:
        """
        Run forward propagation and keep every layer's output.

        Args:
            input: Input vector of length ``input_width``

        Returns:
            list: The input vector followed by the output vector of each
            hidden layer and finally of the output layer

        Raises:
            DimensionMismatchError: If the input has the wrong length
        """
        self._check_input(input)

        activations = [[float(x) for x in input]]
        for layer in self.layers:
            previous = activations[-1]
            activations.append(
                [unit.fire(previous, self.activation) for unit in layer]
            )
        return activations

    def compute(self, input: Sequence[float]) -> List[float]:
        """Return the output-layer activations for ``input``."""
        return self.forward(input)[-1]

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------

    @staticmethod
    def cost(output: Sequence[float], label: Sequence[float]) -> float:
        """Sum of squared errors between output and label."""
        return sum((o - y) ** 2 for o, y in zip(output, label))

    @staticmethod
    def correct(output: Sequence[float], label: Sequence[float]) -> bool:
        """True when output and label peak at the same index."""
        # np.argmax breaks ties towards the lowest index
        return int(np.argmax(output)) == int(np.argmax(label))

    def _check_input(self, input: Sequence[float]) -> None:
        if len(input) != self._input_width:
            raise DimensionMismatchError(
                'Input', self._input_width, len(input)
            )

    def _check_label(self, label: Sequence[float]) -> None:
        if len(label) != self.output_width:
            raise DimensionMismatchError(
                'Label', self.output_width, len(label)
            )

    def evaluate(
        self,
        inputs: Sequence[Sequence[float]],
        labels: Sequence[Sequence[float]]
    ) -> Tuple[float, int]:
        """
        Measure the network on a dataset without changing it.

        Returns:
            tuple: (total cost, number of correct predictions)
        """
        if len(inputs) != len(labels):
            raise DimensionMismatchError('Labels', len(inputs), len(labels))

        total_cost = 0.0
        correct = 0
        for x, label in zip(inputs, labels):
            output = self.compute(x)
            self._check_label(label)
            total_cost += self.cost(output, label)
            correct += 1 if self.correct(output, label) else 0
        return total_cost, correct

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def train(
        self,
        inputs: Sequence[Sequence[float]],
        labels: Sequence[Sequence[float]],
        repetitions: int,
        learn_rate: float,
        callback: Optional[Callable[[Report], Optional[bool]]] = None
    ) -> List[Report]:
        """
        Train the network with stochastic gradient descent.

        Each repetition walks the whole training set in order and updates
        the weights after every example.

        Args:
            inputs: Input vectors
            labels: Target vectors, one per input
            repetitions: Number of passes over the training set
            learn_rate: Gradient-descent step size
            callback: Called with the report of each repetition. Returning
                True stops training after that repetition.

        Returns:
            list: One report per completed repetition, with keys
            ``repetition``, ``total_repetitions``, ``cost``, ``correct``,
            ``total``, ``accuracy`` and ``elapsed_time``

        Raises:
            DimensionMismatchError: On the first input or label with the
                wrong length, or if inputs and labels differ in count
            ValueError: If repetitions or learn_rate is invalid
        """
        if len(inputs) != len(labels):
            raise DimensionMismatchError('Labels', len(inputs), len(labels))
        if isinstance(repetitions, bool) or not isinstance(repetitions, (int, np.integer)) or repetitions < 0:
            raise ValueError('repetitions must be a non-negative integer')
        if isinstance(learn_rate, bool) or not isinstance(learn_rate, (int, float)) or learn_rate <= 0:
            raise ValueError('learn_rate must be a positive number')
        repetitions = int(repetitions)

        # Reject malformed examples before any weight changes
        for x, label in zip(inputs, labels):
            self._check_input(x)
            self._check_label(label)

        history: List[Report] = []
        total = len(inputs)
        start_time = time.time()

        for repetition in range(1, repetitions + 1):
            total_cost = 0.0
            correct = 0

            for x, label in zip(inputs, labels):
                activations = self.forward(x)
                output = activations[-1]

                total_cost += self.cost(output, label)
                correct += 1 if self.correct(output, label) else 0

                self._backpropagate(activations, label, learn_rate)

            report = {
                'repetition': repetition,
                'total_repetitions': repetitions,
                'cost': total_cost,
                'correct': correct,
                'total': total,
                'accuracy': correct / total if total else 0.0,
                'elapsed_time': time.time() - start_time
            }
            history.append(report)

            logger.info(
                f"Repetition {repetition}/{repetitions}: "
                f"cost={total_cost:.6f}, correct={correct} of {total}"
            )

            if callback is not None and callback(report):
                logger.info(f"Training stopped early after repetition {repetition}")
                break

        return history

    def _backpropagate(
        self,
        activations: List[List[float]],
        label: Sequence[float],
        learn_rate: float
    ) -> None:
        """
        Update every weight and bias from one example.

        ``activations[i]`` is the vector feeding ``self.layers[i]`` and
        ``activations[i + 1]`` is that layer's output. All error signals
        are computed from the current weights before any weight changes.
        """
        layers = self.layers
        derivative = self.activation.derivative

        output = activations[-1]
        deltas: List[List[float]] = [[] for _ in layers]
        deltas[-1] = [
            2.0 * (o - y) * derivative(o) for o, y in zip(output, label)
        ]

        for index in range(len(layers) - 2, -1, -1):
            following = layers[index + 1]
            following_deltas = deltas[index + 1]
            layer_output = activations[index + 1]
            deltas[index] = [
                derivative(layer_output[j]) * sum(
                    unit.weights[j] * delta
                    for unit, delta in zip(following, following_deltas)
                )
                for j in range(len(layers[index]))
            ]

        for index, layer in enumerate(layers):
            upstream = activations[index]
            for unit, delta in zip(layer, deltas[index]):
                unit.adjust(delta, upstream, learn_rate)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Network(sizes={self.sizes}, activation={self.activation!r})"

    def __str__(self) -> str:
        lines = [repr(self)]
        for index, layer in enumerate(self.layers):
            kind = 'Output' if index == len(self.layers) - 1 else 'Hidden'
            lines.append(f"{kind} layer {index} ({len(layer)} units):")
            for unit_index, unit in enumerate(layer):
                weights = ', '.join(f"{w:.4f}" for w in unit.weights)
                lines.append(
                    f"  unit {unit_index}: weights=[{weights}] "
                    f"bias={unit.bias:.4f}"
                )
        return '\n'.join(lines)
