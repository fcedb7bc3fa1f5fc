"""
Activation Functions — Activate & Derivative
============================================

Every activation is a stateless value object with:
  • activate(z)   → a          (element-wise or vector-wide transform)
  • derivative(z) → f'(z)      (local derivative, same length as z)
  • kind                       (``ActivationType`` tag)

Mathematical conventions
------------------------
  z : pre-activation vector   (shape: n)
  a : post-activation vector  (shape: n)

Activations never cache anything between calls, so one instance can be
shared by any number of layers and threads.
"""

from __future__ import annotations

from enum import Enum

import numpy as np
from numpy.typing import NDArray

from ..exceptions import ConfigError, NonFiniteInputError, UnsupportedOperationError
from .vector import VectorLike, as_vector


class ActivationType(Enum):
    """Tag identifying which activation function an instance is."""

    RELU = "relu"
    SIGMOID = "sigmoid"
    SOFTMAX = "softmax"


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------
class Activation:
    """Abstract activation.

    Two instances of the same concrete class are interchangeable: they
    compare equal and share a hash.
    """

    __slots__ = ()

    kind: ActivationType

    def activate(self, z: VectorLike) -> NDArray:
        raise NotImplementedError

    def derivative(self, z: VectorLike) -> NDArray:
        raise NotImplementedError

    def __call__(self, z: VectorLike) -> NDArray:
        return self.activate(z)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


# ---------------------------------------------------------------------------
# ReLU
# ---------------------------------------------------------------------------
class ReLU(Activation):
    r"""Rectified Linear Unit.

    Activate
    --------
    .. math::
        a_i = \max(0, z_i)

    Derivative
    ----------
    .. math::
        \frac{\partial a_i}{\partial z_i} =
            \begin{cases}
                1 & \text{if } z_i > 0 \\
                0 & \text{otherwise}
            \end{cases}

    The derivative at exactly 0 is 0.
    """

    __slots__ = ()

    kind = ActivationType.RELU

    def activate(self, z: VectorLike) -> NDArray:
        """Compute a = max(0, z)."""
        z = as_vector(z, "ReLU")
        return np.maximum(0.0, z)

    def derivative(self, z: VectorLike) -> NDArray:
        """Compute the indicator 𝟙(z > 0)."""
        z = as_vector(z, "ReLU")
        return (z > 0).astype(np.float64)


# ---------------------------------------------------------------------------
# Sigmoid
# ---------------------------------------------------------------------------
class Sigmoid(Activation):
    r"""Logistic sigmoid function.

    Activate
    --------
    .. math::
        a_i = \sigma(z_i) = \frac{1}{1 + e^{-z_i}}

    Derivative
    ----------
    .. math::
        \sigma'(z_i) = \sigma(z_i) \cdot (1 - \sigma(z_i))

    ``derivative`` calls ``activate`` again rather than taking a cached
    output, so it costs one extra pass over the input.
    """

    __slots__ = ()

    kind = ActivationType.SIGMOID

    def activate(self, z: VectorLike) -> NDArray:
        """Compute a = σ(z) with numerical stability.

        Uses clipping to avoid overflow in exp(-z).
        """
        z = as_vector(z, "Sigmoid")
        z_safe: NDArray = np.clip(z, -500, 500)
        return 1.0 / (1.0 + np.exp(-z_safe))

    def derivative(self, z: VectorLike) -> NDArray:
        """Compute σ(z) ⊙ (1 − σ(z))."""
        s = self.activate(z)
        return s * (1.0 - s)


# ---------------------------------------------------------------------------
# Softmax
# ---------------------------------------------------------------------------
class Softmax(Activation):
    r"""Softmax over the whole vector (not element-wise).

    Activate
    --------
    .. math::
        a_i = \frac{e^{z_i - \max_k z_k}}{\sum_j e^{z_j - \max_k z_k}}

    The max subtraction is for numerical stability and does not change
    the result (shift-invariance of softmax).  The output is a probability
    distribution: every entry lies in [0, 1] and the entries sum to 1.

    Derivative
    ----------
    Not supported.  The Jacobian of softmax is a full matrix rather than a
    vector of the input's length, and a training extension would use the
    combined softmax / cross-entropy gradient  ``a − y``  instead.
    """

    __slots__ = ()

    kind = ActivationType.SOFTMAX

    def activate(self, z: VectorLike) -> NDArray:
        """Numerically stable softmax: subtract the max before exp.

        Raises
        ------
        NonFiniteInputError
            If ``z`` holds ``inf`` or ``nan``; no distribution is defined
            for such input.
        """
        z = as_vector(z, "Softmax")
        if z.size == 0:
            return z
        if not np.all(np.isfinite(z)):
            raise NonFiniteInputError(f"Softmax input must be finite, got {z}")

        exp_z: NDArray = np.exp(z - np.max(z))
        return exp_z / np.sum(exp_z)

    def derivative(self, z: VectorLike) -> NDArray:
        raise UnsupportedOperationError(
            "Softmax.derivative is not supported; pair softmax with a "
            "cross-entropy loss and use the combined gradient instead"
        )


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------
_ACTIVATIONS: dict[ActivationType, Activation] = {
    ActivationType.RELU: ReLU(),
    ActivationType.SIGMOID: Sigmoid(),
    ActivationType.SOFTMAX: Softmax(),
}


def get_activation(activation: str | ActivationType | Activation) -> Activation:
    """Resolve a name, tag or instance to an ``Activation``.

    >>> get_activation("ReLU")
    ReLU()
    """
    if isinstance(activation, Activation):
        return activation
    if isinstance(activation, ActivationType):
        return _ACTIVATIONS[activation]
    try:
        return _ACTIVATIONS[ActivationType(str(activation).strip().lower())]
    except ValueError:
        known = ", ".join(t.value for t in ActivationType)
        raise ConfigError(
            f"Unknown activation {activation!r} (expected one of: {known})"
        ) from None
