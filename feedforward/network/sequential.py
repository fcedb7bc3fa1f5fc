"""
Sequential Container
====================

A ``Sequential`` pipeline chains layers in order, forwarding the output of
each layer as input to the next.

Architecture diagram
--------------------
::

    x ─→ [Layer 0] ─→ [Layer 1] ─→ ... ─→ [Layer N-1] ─→ ŷ

The layer tuple is fixed at construction.  Nothing in a forward pass
writes to shared state, so one pipeline can serve concurrent callers.
"""

from __future__ import annotations

from typing import Iterator

from numpy.typing import NDArray

from ..core.layer import Layer
from ..core.vector import VectorLike, as_vector


class Sequential:
    """Immutable ordered collection of layers.

    Parameters
    ----------
    *layers : Layer
        Layers in evaluation order.  Prefer ``SequentialBuilder``, which
        derives every layer's input width from its predecessor; layers
        passed here directly are not width-checked until ``forward``.

    Example
    -------
    >>> from feedforward.core import DenseLayer, InputLayer, ReLU, Softmax
    >>> net = Sequential(
    ...     InputLayer(4, activation=ReLU()),
    ...     DenseLayer(4, 3, activation=Softmax(), seed=0),
    ... )
    >>> y_hat = net.forward([0.1, 0.2, 0.3, 0.4])
    """

    def __init__(self, *layers: Layer) -> None:
        self._layers: tuple[Layer, ...] = tuple(layers)

    @property
    def layers(self) -> tuple[Layer, ...]:
        return self._layers

    @property
    def input_size(self) -> int | None:
        return self._layers[0].input_size if self._layers else None

    @property
    def output_size(self) -> int | None:
        return self._layers[-1].output_size() if self._layers else None

    # ── forward ──────────────────────────────────────────────────
    def forward(self, x: VectorLike) -> NDArray:
        """Forward pass: pipe x through every layer.

        Parameters
        ----------
        x : vector, shape (n_features,)

        Returns
        -------
        y_hat : ndarray — output of the last layer.

        Raises
        ------
        ShapeMismatchError
            From the first layer whose expected width disagrees with the
            vector it receives.
        """
        out: NDArray = as_vector(x, "Sequential")
        for layer in self._layers:
            out = layer.forward(out)
        return out

    def predict(self, x: VectorLike) -> NDArray:
        """Alias for ``forward``."""
        return self.forward(x)

    # ── utilities ────────────────────────────────────────────────
    def count_params(self) -> int:
        """Total number of scalar parameters."""
        return sum(layer.count_params() for layer in self._layers)

    def summary(self) -> str:
        """Return a Keras-style model summary."""
        lines: list[str] = []
        header = f"{'Layer':<45} {'Output Shape':<15} {'# Params':>10}"
        lines.append(header)
        lines.append("=" * len(header))
        for layer in self._layers:
            out_shape = f"({layer.output_size()},)"
            lines.append(f"{str(layer):<45} {out_shape:<15} {layer.count_params():>10,}")
        lines.append("=" * len(header))
        lines.append(f"Total params: {self.count_params():,}")
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __repr__(self) -> str:
        inner = ",\n  ".join(repr(l) for l in self._layers)
        return f"Sequential(\n  {inner}\n)"
