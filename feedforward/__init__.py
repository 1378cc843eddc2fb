"""
feedforward package
~~~~~~~~~~~~~~~~~~~

Minimal feed-forward neural network engine.
Contains the unit and network implementation, activation functions,
SQLite model persistence and training reports.
"""

from feedforward.activations import (
    Activation,
    Identity,
    ReLU,
    Sigmoid,
    Step,
    Tanh,
    get_activation,
)
from feedforward.exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    NetworkError,
)
from feedforward.network import Network
from feedforward.unit import Unit

__version__ = "1.0.0"

__all__ = [
    "Activation", "Identity", "ReLU", "Sigmoid", "Step", "Tanh",
    "get_activation",
    "ConfigurationError", "DimensionMismatchError", "NetworkError",
    "Network", "Unit",
]
