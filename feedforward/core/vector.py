"""Input coercion shared by activations, layers and the perceptron."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from ..exceptions import ShapeMismatchError

VectorLike = Sequence[float] | NDArray


def as_vector(
    x: VectorLike,
    where: object,
    expected: int | None = None,
) -> NDArray:
    """Return ``x`` as a 1-D float64 array, checking its length.

    Parameters
    ----------
    x        : sequence of floats or ndarray.
    where    : object — component (or its name) named in the error message;
               only formatted when the check fails.
    expected : int | None — required length; ``None`` accepts any length.

    Raises
    ------
    ShapeMismatchError
        If ``x`` is not one-dimensional or its length differs from
        ``expected``.  The input is never reshaped, truncated or padded.
    """
    arr: NDArray = np.asarray(x, dtype=np.float64)
    if arr.ndim != 1:
        raise ShapeMismatchError(where, None, arr.shape)
    if expected is not None and arr.shape[0] != expected:
        raise ShapeMismatchError(where, expected, arr.shape[0])
    return arr
