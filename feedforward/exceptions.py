"""Exceptions raised by the feedforward package.

All of these are programmer errors detected at call time.  They subclass
the built-in exception a caller would naturally expect (``ValueError`` for
bad shapes or arguments, ``NotImplementedError`` for missing operations) so
that generic ``except ValueError`` handlers keep working.
"""

from __future__ import annotations


class NetworkError(Exception):
    """Base class for every error raised by this package."""


class ShapeMismatchError(NetworkError, ValueError):
    """An input vector does not have the width a component expects.

    Parameters
    ----------
    where    : object — the component that rejected the input, or its name;
               formatted with ``str`` only here, when the error is raised.
    expected : int | None — expected vector length (``None`` = any length).
    actual   : int | tuple — received length, or the full shape when the
               input is not one-dimensional.
    """

    def __init__(
        self,
        where: object,
        expected: int | None,
        actual: int | tuple,
    ) -> None:
        self.where = str(where)
        self.expected = expected
        self.actual = actual
        if expected is None:
            msg = f"{self.where}: expected a 1-D vector, got shape {actual}"
        else:
            msg = f"{self.where}: expected a vector of length {expected}, got {actual}"
        super().__init__(msg)


class UnsupportedOperationError(NetworkError, NotImplementedError):
    """The requested operation is not defined for this component."""


class ConstructionError(NetworkError, ValueError):
    """A layer or pipeline was assembled incorrectly."""


class ConfigError(ConstructionError):
    """A configuration document is malformed or names unknown components."""


class NonFiniteInputError(NetworkError, ValueError):
    """An input holds ``inf`` or ``nan`` where a finite vector is required."""
