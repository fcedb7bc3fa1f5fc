"""
Perceptron Example — Learning the AND Gate
==========================================

AND is linearly separable, so the perceptron convergence theorem
guarantees the online rule finds a separating line in finitely many
epochs.

Truth table
-----------
::

    X1  X2  |  Y
    0   0   |  0
    0   1   |  0
    1   0   |  0
    1   1   |  1
"""

from __future__ import annotations

import sys
from pathlib import Path

# ── project imports ──
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from feedforward.perceptron import Perceptron
from feedforward.utils.logger import setup_logging


def main() -> None:
    setup_logging("DEBUG")

    X = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
    y = [0, 0, 0, 1]

    p = Perceptron(2, 0.1)
    history = p.fit(X, y, epochs=100)

    print("=" * 50)
    print("Perceptron Example — AND gate")
    print("=" * 50)
    print(f"Epochs: {len(history)}   mistakes per epoch: {history}")
    print(f"Weights: {p.weights}   bias: {p.bias:.2f}")
    for x, t in zip(X, y):
        print(f"  {x} → {p.predict(x)}  (target: {t})")


if __name__ == "__main__":
    main()
