"""
test_activations.py
~~~~~~~~~~~~~~~~~~~

Unit tests for activation functions and their registry.
"""

import math

import pytest

from feedforward.activations import (
    ACTIVATIONS,
    Identity,
    ReLU,
    Sigmoid,
    Step,
    Tanh,
    activation_from_dict,
    get_activation,
)
from feedforward.exceptions import ConfigurationError


@pytest.mark.unit
class TestActivations:
    """Test each activation and its derivative."""

    def test_sigmoid(self):
        sigmoid = Sigmoid()
        assert sigmoid.apply(0.0) == 0.5
        assert sigmoid.apply(2.0) == pytest.approx(1 / (1 + math.exp(-2.0)))

    def test_sigmoid_derivative_uses_output(self):
        """Test that the derivative takes the activated value, not z."""
        sigmoid = Sigmoid()
        y = sigmoid.apply(0.7)
        assert sigmoid.derivative(y) == pytest.approx(y * (1 - y))
        assert sigmoid.derivative(0.5) == 0.25

    def test_sigmoid_extreme_inputs(self):
        sigmoid = Sigmoid()
        assert sigmoid.apply(-1e6) == pytest.approx(0.0)
        assert sigmoid.apply(1e6) == pytest.approx(1.0)

    def test_step_threshold(self):
        step = Step(1.5)
        assert step.apply(1.49) == 0.0
        assert step.apply(1.5) == 1.0
        assert step.apply(2.0) == 1.0
        assert step.derivative(0.0) == 1.0

    def test_tanh(self):
        tanh = Tanh()
        y = tanh.apply(0.3)
        assert y == pytest.approx(math.tanh(0.3))
        assert tanh.derivative(y) == pytest.approx(1 - y * y)

    def test_relu(self):
        relu = ReLU()
        assert relu.apply(-2.0) == 0.0
        assert relu.apply(3.0) == 3.0
        assert relu.derivative(0.0) == 0.0
        assert relu.derivative(3.0) == 1.0

    def test_identity(self):
        identity = Identity()
        assert identity.apply(-4.2) == -4.2
        assert identity.derivative(10.0) == 1.0


@pytest.mark.unit
class TestRegistry:
    """Test resolving and serializing activations."""

    def test_default_is_sigmoid(self):
        assert isinstance(get_activation(), Sigmoid)

    @pytest.mark.parametrize('name', sorted(ACTIVATIONS))
    def test_lookup_by_name(self, name):
        assert get_activation(name).name == name

    def test_lookup_is_case_insensitive(self):
        assert isinstance(get_activation('Sigmoid'), Sigmoid)

    def test_instance_passes_through(self):
        step = Step(0.5)
        assert get_activation(step) is step

    def test_params_forwarded(self):
        assert get_activation('step', threshold=2.0).threshold == 2.0

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError) as exc_info:
            get_activation('softsign')
        assert 'softsign' in str(exc_info.value)

    def test_bad_params(self):
        with pytest.raises(ConfigurationError):
            get_activation('sigmoid', threshold=1.0)

    @pytest.mark.parametrize('activation', [Sigmoid(), Step(1.5), Tanh(), ReLU(), Identity()])
    def test_dict_round_trip(self, activation):
        rebuilt = activation_from_dict(activation.to_dict())
        assert rebuilt == activation
        assert type(rebuilt) is type(activation)

    def test_equality_includes_parameters(self):
        assert Step(0.5) != Step(1.5)
        assert Step(0.5) == Step(0.5)

    def test_from_empty_dict(self):
        assert isinstance(activation_from_dict(None), Sigmoid)
