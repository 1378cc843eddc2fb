"""
exceptions.py
~~~~~~~~~~~~~

Errors raised by the network engine.

Both concrete errors subclass ``ValueError`` so callers that already guard
against bad arguments keep working.
"""


class NetworkError(Exception):
    """Base class for all network engine errors."""


class ConfigurationError(NetworkError, ValueError):
    """Raised when a network cannot be built from the given topology."""


class DimensionMismatchError(NetworkError, ValueError):
    """Raised when an input or label vector has the wrong length."""

    def __init__(self, kind: str, expected: int, actual: int):
        self.kind = kind
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{kind} has length {actual}, expected {expected}"
        )
