"""
Layer Abstractions — Input, Dense (Fully-Connected) & Output Layers
===================================================================

A *layer* transforms one input vector x into one output vector y.  Layers
are built once and never change afterwards: parameters are stored as
read-only arrays and ``forward`` keeps no cache.

Notation
--------
  x : input          — shape (n_in,)
  y : output         — shape (n_out,)
  W : weight matrix  — shape (n_out, n_in)
  b : bias vector    — shape (n_out,)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np
from loguru import logger
from numpy.typing import NDArray

from ..exceptions import ConstructionError
from .activations import Activation, get_activation
from .initializers import Initializer, uniform_init, zeros_init
from .vector import VectorLike, as_vector


class LayerKind(Enum):
    INPUT = "input"
    DENSE = "dense"
    OUTPUT = "output"


@dataclass(frozen=True)
class LayerSpec:
    """Shape description of a layer: its kind, width and activation.

    The input width is not part of a LayerSpec; ``SequentialBuilder`` derives
    it from the previous layer.
    """

    kind: LayerKind
    units: int
    activation: Activation

    def __repr__(self) -> str:
        return f"{self.kind.value}({self.units}, {self.activation!r})"


def _check_width(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ConstructionError(f"{name} must be an int, got {value!r}")
    if value <= 0:
        raise ConstructionError(f"{name} must be positive, got {value}")
    return int(value)


def _frozen(arr: NDArray) -> NDArray:
    arr.flags.writeable = False
    return arr


# ────────────────────────────────────────────────────────────────────
# Base class
# ────────────────────────────────────────────────────────────────────
class Layer:
    """Abstract layer interface.

    Every concrete layer must implement ``forward`` and ``output_size``
    and set ``input_size`` and ``activation``.
    """

    kind: LayerKind
    input_size: int
    activation: Activation

    def forward(self, x: VectorLike) -> NDArray:
        raise NotImplementedError

    def output_size(self) -> int:
        raise NotImplementedError

    @property
    def spec(self) -> LayerSpec:
        return LayerSpec(self.kind, self.output_size(), self.activation)

    @property
    def params(self) -> dict[str, NDArray]:
        """Return dict of (read-only) parameters."""
        return {}

    def count_params(self) -> int:
        return sum(p.size for p in self.params.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


# ────────────────────────────────────────────────────────────────────
# Input layer
# ────────────────────────────────────────────────────────────────────
class InputLayer(Layer):
    """Entry point of a pipeline: applies its activation, nothing else.

    Parameters
    ----------
    size : int
        Width of both the accepted input and the produced output.
    activation : Activation | str
        Applied directly to the raw input.
    output_size : int | None
        Optional explicit output width; must equal ``size``.
    """

    kind = LayerKind.INPUT

    def __init__(
        self,
        size: int,
        activation: Activation | str,
        output_size: int | None = None,
    ) -> None:
        self.size = _check_width("size", size)
        if output_size is not None and output_size != self.size:
            raise ConstructionError(
                f"InputLayer output size ({output_size}) must match its "
                f"input size ({self.size})"
            )
        self.input_size = self.size
        self.activation = get_activation(activation)
        logger.debug(f"Created {self!r}")

    def forward(self, x: VectorLike) -> NDArray:
        """Compute y = f(x).

        Parameters
        ----------
        x : vector, shape (size,)

        Returns
        -------
        y : ndarray, shape (size,)
        """
        x = as_vector(x, self, self.size)
        return self.activation.activate(x)

    def output_size(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"InputLayer({self.size}, activation={self.activation.__class__.__name__})"


# ────────────────────────────────────────────────────────────────────
# Dense (fully-connected) layer
# ────────────────────────────────────────────────────────────────────
class DenseLayer(Layer):
    r"""Fully-connected (dense / linear) layer followed by an activation.

    Forward pass
    -------------
    Step 1 — affine transform:

    .. math::
        z = W \cdot x + b

    Step 2 — activation:

    .. math::
        y = f(z)

    Parameters
    ----------
    n_in : int
        Number of input features.
    n_out : int
        Number of output neurons.
    activation : Activation | str
        Activation function applied after the affine transform.
    weight_init : callable
        Initialization function for W (default: uniform on [-0.5, 0.5)).
    rng : numpy.random.Generator | None
        Source of randomness for the weights; takes precedence over ``seed``.
    seed : int | None
        Random seed for reproducibility when no ``rng`` is given.
    """

    kind = LayerKind.DENSE

    def __init__(
        self,
        n_in: int,
        n_out: int,
        activation: Activation | str,
        weight_init: Initializer = uniform_init,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        self.n_in = _check_width("n_in", n_in)
        self.n_out = _check_width("n_out", n_out)
        self.input_size = self.n_in
        self.activation = get_activation(activation)

        if rng is None:
            rng = np.random.default_rng(seed)

        # W: (n_out, n_in)   b: (n_out,)
        self.W: NDArray = _frozen(weight_init(self.n_in, self.n_out, rng))
        self.b: NDArray = _frozen(zeros_init(self.n_out))

        if self.W.shape != (self.n_out, self.n_in):
            raise ConstructionError(
                f"weight_init returned shape {self.W.shape}, "
                f"expected {(self.n_out, self.n_in)}"
            )
        logger.debug(f"Created {self!r}")

    def forward(self, x: VectorLike) -> NDArray:
        """Compute y = f(W · x + b).

        Parameters
        ----------
        x : vector, shape (n_in,)

        Returns
        -------
        y : ndarray, shape (n_out,)

        Raises
        ------
        ShapeMismatchError
            If ``len(x) != n_in``.
        """
        x = as_vector(x, self, self.n_in)
        z: NDArray = self.W @ x + self.b
        return self.activation.activate(z)

    def output_size(self) -> int:
        return self.n_out

    @property
    def params(self) -> dict[str, NDArray]:
        return {"W": self.W, "b": self.b}

    def __repr__(self) -> str:
        act = self.activation.__class__.__name__
        return f"{self.__class__.__name__}({self.n_in}, {self.n_out}, activation={act})"


# ────────────────────────────────────────────────────────────────────
# Output layer
# ────────────────────────────────────────────────────────────────────
class OutputLayer(DenseLayer):
    """Terminal dense layer of a pipeline.

    Computes exactly what ``DenseLayer`` computes; the separate class only
    marks the end of the network.
    """

    kind = LayerKind.OUTPUT
