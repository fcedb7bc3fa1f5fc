r"""
Perceptron — Single-Neuron Binary Classifier
============================================

Rosenblatt's perceptron with the online update rule.  It is a standalone
toy and shares nothing with the layer pipeline.

Decision rule
-------------
.. math::
    \hat{y} = \begin{cases} 1 & \text{if } w \cdot x + b \ge 0 \\
                              0 & \text{otherwise} \end{cases}

Update rule (one sample)
------------------------
.. math::
    e = y - \hat{y}, \qquad w \leftarrow w + \eta\, e\, x, \qquad
    b \leftarrow b + \eta\, e
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from loguru import logger
from numpy.typing import NDArray

from .core.vector import VectorLike, as_vector
from .exceptions import ConstructionError


class Perceptron:
    """Single-neuron linear classifier over ``{0, 1}`` targets.

    Parameters
    ----------
    input_size    : int — number of input features.
    learning_rate : float — step size η of the update rule.
    """

    def __init__(self, input_size: int, learning_rate: float) -> None:
        if isinstance(input_size, bool) or not isinstance(input_size, int) or input_size <= 0:
            raise ConstructionError(f"input_size must be a positive int, got {input_size!r}")
        self.input_size = input_size
        self.learning_rate = float(learning_rate)
        self._weights: NDArray = np.zeros(input_size, dtype=np.float64)
        self._bias: float = 0.0

    @property
    def weights(self) -> NDArray:
        return self._weights.copy()

    @property
    def bias(self) -> float:
        return self._bias

    def predict(self, inputs: VectorLike) -> int:
        """Return 1 if ``w · x + b >= 0`` else 0 (ties go to 1)."""
        x = as_vector(inputs, "Perceptron", self.input_size)
        return 1 if float(self._weights @ x) + self._bias >= 0.0 else 0

    def train(self, inputs: VectorLike, target: int) -> int:
        """Apply one online update and return the error ``target - prediction``."""
        if target not in (0, 1):
            raise ValueError(f"target must be 0 or 1, got {target!r}")
        x = as_vector(inputs, "Perceptron", self.input_size)
        error = target - self.predict(x)
        self._weights = self._weights + self.learning_rate * error * x
        self._bias += self.learning_rate * error
        return error

    def fit(
        self,
        X: Sequence[VectorLike],
        y: Sequence[int],
        epochs: int = 100,
    ) -> list[int]:
        """Run online epochs until one epoch makes no mistakes.

        Parameters
        ----------
        X      : sequence of input vectors.
        y      : matching ``{0, 1}`` targets.
        epochs : int — upper bound on the number of passes.

        Returns
        -------
        history : list[int] — number of misclassified samples per epoch.
        """
        if len(X) != len(y):
            raise ValueError(f"X and y differ in length: {len(X)} vs {len(y)}")

        history: list[int] = []
        for epoch in range(1, epochs + 1):
            mistakes = sum(1 for x, t in zip(X, y) if self.train(x, t) != 0)
            history.append(mistakes)
            if mistakes == 0:
                logger.debug(f"Perceptron converged after {epoch} epochs")
                break
        else:
            logger.warning(f"Perceptron did not converge in {epochs} epochs")
        return history

    def __repr__(self) -> str:
        return f"Perceptron(input_size={self.input_size}, learning_rate={self.learning_rate})"
