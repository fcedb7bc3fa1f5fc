"""
Weight Initializers
===================

All initializers follow the pattern:

    W = init_fn(fan_in, fan_out, rng) → ndarray, shape (fan_out, fan_in)

The row-per-output-neuron layout matches ``DenseLayer``, which computes
``W @ x + b`` on a single input vector.

Terminology
-----------
  fan_in  (n_in)  : dimensionality of the input
  fan_out (n_out) : dimensionality of the output
  rng             : numpy.random.Generator for reproducibility
"""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import NDArray

from ..exceptions import ConfigError

Initializer = Callable[[int, int, "np.random.Generator | None"], NDArray]


def uniform_init(
    fan_in: int,
    fan_out: int,
    rng: np.random.Generator | None = None,
    low: float = -0.5,
    high: float = 0.5,
) -> NDArray:
    r"""Plain uniform initialization (the default).

    .. math::
        W \sim \mathcal{U}[-0.5,\; 0.5)

    Parameters
    ----------
    fan_in  : int — number of input neurons.
    fan_out : int — number of output neurons.
    rng     : Generator, optional — PRNG for reproducibility.
    low, high : float — half-open sampling interval.

    Returns
    -------
    W : ndarray, shape (fan_out, fan_in)
    """
    if rng is None:
        rng = np.random.default_rng()

    W: NDArray = rng.uniform(low, high, size=(fan_out, fan_in))
    return W.astype(np.float64)


def xavier_init(
    fan_in: int,
    fan_out: int,
    rng: np.random.Generator | None = None,
) -> NDArray:
    r"""Glorot / Xavier uniform initialization.

    .. math::
        W \sim \mathcal{U}\!\left[
            -\sqrt{\frac{6}{n_{\text{in}} + n_{\text{out}}}},\;
             \sqrt{\frac{6}{n_{\text{in}} + n_{\text{out}}}}
        \right]

    Reference: Glorot & Bengio, 2010.
    """
    if rng is None:
        rng = np.random.default_rng()

    limit: float = np.sqrt(6.0 / (fan_in + fan_out))
    W: NDArray = rng.uniform(-limit, limit, size=(fan_out, fan_in))
    return W.astype(np.float64)


def he_init(
    fan_in: int,
    fan_out: int,
    rng: np.random.Generator | None = None,
) -> NDArray:
    r"""He (Kaiming) normal initialization.

    .. math::
        W \sim \mathcal{N}\!\left(0,\; \sqrt{\frac{2}{n_{\text{in}}}}\right)

    Reference: He et al., 2015.
    """
    if rng is None:
        rng = np.random.default_rng()

    std: float = np.sqrt(2.0 / fan_in)
    W: NDArray = rng.normal(0.0, std, size=(fan_out, fan_in))
    return W.astype(np.float64)


def zeros_init(size: int) -> NDArray:
    """All-zeros bias vector of length ``size``."""
    return np.zeros(size, dtype=np.float64)


_INITIALIZERS: dict[str, Initializer] = {
    "uniform": uniform_init,
    "xavier": xavier_init,
    "he": he_init,
}


def get_initializer(name: str | Initializer) -> Initializer:
    """Resolve an initializer by name (``uniform``, ``xavier``, ``he``)."""
    if callable(name):
        return name
    try:
        return _INITIALIZERS[str(name).strip().lower()]
    except KeyError:
        known = ", ".join(_INITIALIZERS)
        raise ConfigError(
            f"Unknown weight initializer {name!r} (expected one of: {known})"
        ) from None
