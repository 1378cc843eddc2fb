"""
test_train_gates_script.py
~~~~~~~~~~~~~~~~~~~~~~~~~~

Tests for the gate training demo script.
"""

import os
import runpy
import sys

import pytest

SCRIPT = os.path.join(os.path.dirname(__file__), '..', 'scripts', 'train_gates.py')


def _run_script(monkeypatch, *args):
    monkeypatch.setattr(sys, 'argv', [SCRIPT, *args])
    runpy.run_path(SCRIPT, run_name='__main__')


@pytest.mark.unit
class TestTrainGatesScript:

    @pytest.mark.parametrize('repetitions', ['0', '-3'])
    def test_rejects_too_few_repetitions(self, monkeypatch, capsys, repetitions):
        with pytest.raises(SystemExit) as exc_info:
            _run_script(monkeypatch, 'or', repetitions)

        assert exc_info.value.code == 1
        assert 'Repetitions must be at least 1' in capsys.readouterr().out

    def test_rejects_unknown_gate(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run_script(monkeypatch, 'nor')

        assert exc_info.value.code == 1
        assert "Unknown gate 'nor'" in capsys.readouterr().out
