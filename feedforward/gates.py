"""
gates.py
~~~~~~~~

Logic gates as small networks.

Hand-wired step networks for AND, OR and XOR, plus a helper that trains a
fresh network on any of the truth tables below.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from feedforward.activations import Activation, Step
from feedforward.network import Network, Report

logger = logging.getLogger(__name__)

# name -> (inputs, labels)
TRUTH_TABLES: Dict[str, Tuple[List[List[float]], List[List[float]]]] = {
    'and': (
        [[0, 0], [0, 1], [1, 0], [1, 1]],
        [[0], [0], [0], [1]],
    ),
    'or': (
        [[0, 0], [0, 1], [1, 0], [1, 1]],
        [[0], [1], [1], [1]],
    ),
    'xor': (
        [[0, 0], [0, 1], [1, 0], [1, 1]],
        [[0], [1], [1], [0]],
    ),
    'or3': (
        [[0, 0, 0], [0, 0, 1], [0, 1, 0], [0, 1, 1],
         [1, 0, 0], [1, 0, 1], [1, 1, 0], [1, 1, 1]],
        [[0], [1], [1], [1], [1], [1], [1], [1]],
    ),
}


def and_gate() -> Network:
    """Two inputs summed against a step threshold of 1.5."""
    return Network(2, 1, activation=Step(1.5), weights=[[[1, 1]]])


def or_gate() -> Network:
    """Two inputs summed against a step threshold of 0.5."""
    return Network(2, 1, activation=Step(0.5), weights=[[[1, 1]]])


def xor_gate() -> Network:
    """
    XOR as AND(OR(a, b), NAND(a, b)).

    All units share a step at 0, so the gate thresholds live in the biases.
    """
    return Network(
        2, 1, 2,
        activation=Step(0.0),
        weights=[
            [[1, 1], [-1, -1]],   # OR, NAND
            [[1, 1]],             # AND
        ],
        biases=[
            [-0.5, 1.5],
            [-1.5],
        ]
    )


def train_gate(
    name: str,
    repetitions: int,
    learn_rate: float,
    hidden_widths: Sequence[int] = (),
    seed: Optional[int] = None,
    activation: Union[str, Activation] = 'sigmoid',
    callback: Optional[Callable[[Report], Optional[bool]]] = None
) -> Tuple[Network, List[Report]]:
    """
    Train a randomly initialized network on one of ``TRUTH_TABLES``.

    Args:
        name: Truth table name ('and', 'or', 'xor', 'or3')
        repetitions: Passes over the truth table
        learn_rate: Gradient-descent step size
        hidden_widths: Widths of the hidden layers
        seed: Seed for the initial weights
        activation: Activation instance or registry name
        callback: Forwarded to ``Network.train``

    Returns:
        tuple: (trained network, training history)

    Raises:
        KeyError: If the truth table is unknown
    """
    if name not in TRUTH_TABLES:
        raise KeyError(
            f"Unknown gate '{name}'. Choose one of: {', '.join(TRUTH_TABLES)}"
        )
    inputs, labels = TRUTH_TABLES[name]

    net = Network(
        len(inputs[0]), len(labels[0]), *hidden_widths,
        activation=activation,
        seed=seed
    )
    logger.info(f"Training '{name}' gate on network {net.sizes}")
    history = net.train(inputs, labels, repetitions, learn_rate, callback=callback)
    return net, history
