"""
Sequential Builder
==================

Accumulates layer specifications in order and derives each new layer's
input width from the previous layer's output width, so an assembled
pipeline is always shape-consistent.

Construction rules
------------------
  • the first layer must be an Input layer
  • an Input layer may only be the first layer
  • nothing may follow an Output layer
  • ``build()`` needs at least one layer and consumes the builder
"""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np
from loguru import logger

from ..core.activations import Activation
from ..core.initializers import Initializer, get_initializer
from ..core.layer import DenseLayer, InputLayer, Layer, LayerKind, LayerSpec, OutputLayer
from ..exceptions import ConstructionError
from ..utils.config import parse_layer_specs, parse_seed
from .sequential import Sequential


class SequentialBuilder:
    """Chainable builder for ``Sequential`` pipelines.

    Parameters
    ----------
    seed : int | None
        Seed of the generator shared by every Dense/Output layer.  ``None``
        draws fresh entropy.
    weight_init : str | callable
        Weight initializer name (``uniform``, ``xavier``, ``he``) or function.

    Example
    -------
    >>> net = (
    ...     SequentialBuilder(seed=0)
    ...     .add_input(3, Sigmoid())
    ...     .add_dense(5, ReLU())
    ...     .add_output(2, Softmax())
    ...     .build()
    ... )
    """

    def __init__(
        self,
        seed: int | None = None,
        weight_init: str | Initializer = "uniform",
    ) -> None:
        self._layers: list[Layer] = []
        self._rng = np.random.default_rng(seed)
        self._weight_init: Initializer = get_initializer(weight_init)
        self._built = False

    # ── internal helpers ─────────────────────────────────────────
    def _check_open(self) -> None:
        if self._built:
            raise ConstructionError("SequentialBuilder has already been built")
        if self._layers and self._layers[-1].kind is LayerKind.OUTPUT:
            raise ConstructionError("No layer may be added after an output layer")

    def _previous_width(self, what: str) -> int:
        if not self._layers:
            raise ConstructionError(
                f"Cannot add {what} layer first: add an input layer before it"
            )
        return self._layers[-1].output_size()

    def _append(self, layer: Layer) -> "SequentialBuilder":
        self._layers.append(layer)
        logger.debug(f"Layer {len(self._layers) - 1}: {layer!r}")
        return self

    # ── layer management ─────────────────────────────────────────
    def add_input(self, size: int, activation: Activation | str) -> "SequentialBuilder":
        """Append the input layer (must be the first layer)."""
        self._check_open()
        if self._layers:
            raise ConstructionError("The input layer must be the first layer")
        return self._append(InputLayer(size, activation))

    def add_dense(self, neurons: int, activation: Activation | str) -> "SequentialBuilder":
        """Append a hidden dense layer fed by the previous layer."""
        self._check_open()
        n_in = self._previous_width("a dense")
        return self._append(
            DenseLayer(n_in, neurons, activation, weight_init=self._weight_init, rng=self._rng)
        )

    def add_output(self, size: int, activation: Activation | str) -> "SequentialBuilder":
        """Append the terminal output layer fed by the previous layer."""
        self._check_open()
        n_in = self._previous_width("an output")
        return self._append(
            OutputLayer(n_in, size, activation, weight_init=self._weight_init, rng=self._rng)
        )

    def add(self, spec: LayerSpec) -> "SequentialBuilder":
        """Append a layer described by a ``LayerSpec``."""
        if spec.kind is LayerKind.INPUT:
            return self.add_input(spec.units, spec.activation)
        if spec.kind is LayerKind.DENSE:
            return self.add_dense(spec.units, spec.activation)
        return self.add_output(spec.units, spec.activation)

    def build(self) -> Sequential:
        """Finalize the pipeline.  The builder cannot be used afterwards."""
        if self._built:
            raise ConstructionError("SequentialBuilder has already been built")
        if not self._layers:
            raise ConstructionError("Cannot build a pipeline without layers")
        self._built = True
        net = Sequential(*self._layers)
        self._layers = []
        logger.debug(
            f"Built pipeline with {len(net)} layers "
            f"({net.input_size} → {net.output_size}, {net.count_params():,} params)"
        )
        return net

    def __len__(self) -> int:
        return len(self._layers)


def build_from_config(cfg: Mapping[str, Any]) -> Sequential:
    """Fold an architecture config into a pipeline.

    Expected keys::

        seed: 42            # optional
        weight_init: uniform  # optional
        layers:
          - {type: input,  units: 3, activation: sigmoid}
          - {type: dense,  units: 5, activation: relu}
          - {type: output, units: 2, activation: softmax}
    """
    specs = parse_layer_specs(cfg)
    builder = SequentialBuilder(
        seed=parse_seed(cfg),
        weight_init=cfg.get("weight_init", "uniform"),
    )
    for spec in specs:
        builder.add(spec)
    return builder.build()
