"""Scalar activation helpers.

Plain-float counterparts of the activation classes, plus ``tanh`` and
``leaky_relu`` which have no layer-level class.  Useful for quick checks
on a single number without building a vector; available as
``feedforward.core.functional``.
"""

from __future__ import annotations

import math
from typing import Sequence

LEAKY_SLOPE: float = 0.01


def relu(x: float) -> float:
    return max(x, 0.0)


def relu_derivative(x: float) -> float:
    return 1.0 if x > 0.0 else 0.0


def sigmoid(x: float) -> float:
    # exp(-x) overflows a float for x < -709
    if x < -500.0:
        x = -500.0
    return 1.0 / (1.0 + math.exp(-x))


def sigmoid_derivative(x: float) -> float:
    s = sigmoid(x)
    return s * (1.0 - s)


def tanh(x: float) -> float:
    return math.tanh(x)


def tanh_derivative(x: float) -> float:
    return 1.0 - math.tanh(x) ** 2


def leaky_relu(x: float) -> float:
    return x if x > 0.0 else LEAKY_SLOPE * x


def leaky_relu_derivative(x: float) -> float:
    return 1.0 if x > 0.0 else LEAKY_SLOPE


def softmax(xs: Sequence[float]) -> list[float]:
    """Softmax over a plain sequence; returns a list of the same length."""
    if not xs:
        return []
    m = max(xs)
    exps = [math.exp(x - m) for x in xs]
    total = sum(exps)
    return [e / total for e in exps]
