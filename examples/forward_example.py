"""
Forward Example — Hand-Assembled 3 → 5 → 2 Network
==================================================

Builds Input(3, Sigmoid) → Dense(5, ReLU) → Output(2, Softmax) with the
builder and runs one input vector through it.  The weights are random and
untrained, so the two output probabilities are arbitrary; they always sum
to 1.
"""

from __future__ import annotations

import sys
from pathlib import Path

# ── project imports ──
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from feedforward.core.activations import ReLU, Sigmoid, Softmax
from feedforward.network.builder import SequentialBuilder
from feedforward.utils.logger import setup_logging


def main() -> None:
    setup_logging("DEBUG")

    net = (
        SequentialBuilder(seed=42)
        .add_input(3, Sigmoid())
        .add_dense(5, ReLU())
        .add_output(2, Softmax())
        .build()
    )

    print("=" * 50)
    print("Forward Example — Feedforward")
    print("=" * 50)
    print(net.summary())
    print()

    x = [0.5, 0.2, 0.1]
    y = net.forward(x)
    print(f"Input:  {x}")
    print(f"Output: {y}")
    print(f"Sum:    {y.sum():.6f}")
    print()
    print(repr(net))


if __name__ == "__main__":
    main()
