"""
test_reporting.py
~~~~~~~~~~~~~~~~~

Tests for rendering training history.
"""

import base64

import pytest

from feedforward.network import Network
from feedforward.reporting import create_history_image


@pytest.mark.unit
class TestHistoryImage:

    def test_renders_png(self):
        net = Network(2, 1, seed=0)
        history = net.train([[0, 1], [1, 0]], [[1], [1]], 5, 0.5)

        image = create_history_image(history, title='or')

        assert base64.b64decode(image).startswith(b'\x89PNG')

    def test_single_report(self):
        history = [{'repetition': 1, 'cost': 0.5, 'accuracy': 0.25}]
        assert create_history_image(history)

    def test_empty_history(self):
        with pytest.raises(ValueError):
            create_history_image([])
