"""
activations.py
~~~~~~~~~~~~~~

Activation functions shared by every unit of a network.

Each activation supplies the function itself and its derivative. The
derivative is evaluated at the unit's *output* (the already activated
value), so the sigmoid derivative is ``y * (1 - y)``.

Activations are identified by a registry name so that persistence can store
and restore the choice, together with any parameters (e.g. a step
threshold).
"""

import math
from typing import Any, Dict, Optional, Type, Union

from feedforward.exceptions import ConfigurationError


class Activation:
    """Base class for activation functions."""

    name = ''

    def apply(self, z: float) -> float:
        raise NotImplementedError

    def derivative(self, y: float) -> float:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable description of this activation."""
        return {'name': self.name}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Activation):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.to_dict().items())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Sigmoid(Activation):
    """Logistic sigmoid, squashes values into (0, 1)."""

    name = 'sigmoid'

    def apply(self, z: float) -> float:
        # Clip to keep math.exp in range
        z = max(-500.0, min(500.0, z))
        return 1.0 / (1.0 + math.exp(-z))

    def derivative(self, y: float) -> float:
        return y * (1.0 - y)


class Step(Activation):
    """
    Unit step: fires 1.0 when the weighted sum reaches ``threshold``.

    The derivative is taken as 1.0 everywhere, which turns training into
    the classic perceptron rule.
    """

    name = 'step'

    def __init__(self, threshold: float = 0.0):
        self.threshold = float(threshold)

    def apply(self, z: float) -> float:
        return 1.0 if z >= self.threshold else 0.0

    def derivative(self, y: float) -> float:
        return 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'threshold': self.threshold}

    def __repr__(self) -> str:
        return f"Step(threshold={self.threshold})"


class Tanh(Activation):
    """Hyperbolic tangent."""

    name = 'tanh'

    def apply(self, z: float) -> float:
        return math.tanh(z)

    def derivative(self, y: float) -> float:
        return 1.0 - y * y


class ReLU(Activation):
    """Rectified linear unit."""

    name = 'relu'

    def apply(self, z: float) -> float:
        return z if z > 0.0 else 0.0

    def derivative(self, y: float) -> float:
        return 1.0 if y > 0.0 else 0.0


class Identity(Activation):
    name = 'identity'

    def apply(self, z: float) -> float:
        return z

    def derivative(self, y: float) -> float:
        return 1.0


ACTIVATIONS: Dict[str, Type[Activation]] = {
    cls.name: cls for cls in (Sigmoid, Step, Tanh, ReLU, Identity)
}


def get_activation(
    activation: Union[str, Activation, None] = None,
    **params: Any
) -> Activation:
    """
    Resolve an activation from a registry name or instance.

    Args:
        activation: Activation instance, registry name, or None for sigmoid
        **params: Constructor parameters when a name is given
            (e.g. ``threshold`` for ``'step'``)

    Returns:
        Activation: The resolved activation

    Raises:
        ConfigurationError: If the name is unknown or the parameters
            don't fit the activation
    """
    if activation is None:
        activation = Sigmoid.name
    if isinstance(activation, Activation):
        return activation

    cls = ACTIVATIONS.get(str(activation).lower())
    if cls is None:
        raise ConfigurationError(
            f"Unknown activation '{activation}'. "
            f"Choose one of: {', '.join(sorted(ACTIVATIONS))}"
        )
    try:
        return cls(**params)
    except TypeError as e:
        raise ConfigurationError(
            f"Invalid parameters for activation '{activation}': {e}"
        ) from e


def activation_from_dict(data: Optional[Dict[str, Any]]) -> Activation:
    """Rebuild an activation from the output of ``Activation.to_dict``."""
    if not data:
        return get_activation()
    params = {k: v for k, v in data.items() if k != 'name'}
    return get_activation(data.get('name'), **params)
