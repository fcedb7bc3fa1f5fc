"""
CLI Entry Point — Run One Forward Pass
======================================

Usage examples::

    feedforward-run
    feedforward-run --config my_net.yaml --input 0.5 0.2 0.1
    feedforward-run --seed 7 --summary --log-level DEBUG
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

import numpy as np
from loguru import logger

from .exceptions import NetworkError
from .network.builder import build_from_config
from .utils.config import load_config, parse_input
from .utils.logger import setup_logging

EXIT_USAGE = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="feedforward-run",
        description="Build a feedforward network from a YAML architecture and run one input through it.",
    )
    parser.add_argument("--config", type=Path, default=None,
                        help="Architecture YAML (default: the bundled configs/default.yaml).")
    parser.add_argument("--input", type=float, nargs="+", default=None,
                        help="Input vector; overrides the config's 'input'.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Weight seed; overrides the config's 'seed'.")
    parser.add_argument("--summary", action="store_true",
                        help="Print the layer summary before the output.")
    parser.add_argument("--log-level", default="WARNING",
                        help="Console log level (DEBUG, INFO, WARNING, ...).")
    parser.add_argument("--log-file", type=Path, default=None,
                        help="Optional rotating DEBUG log file.")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        cfg = load_config(args.config)
        if args.seed is not None:
            cfg["seed"] = args.seed
        net = build_from_config(cfg)

        x = args.input if args.input is not None else parse_input(cfg)
        if x is None:
            logger.error("No input vector: pass --input or set 'input' in the config")
            return EXIT_USAGE

        y = net.forward(x)
    except (NetworkError, OSError) as exc:
        logger.error(str(exc))
        return EXIT_USAGE

    if args.summary:
        print(net.summary())
        print()
    print(f"Input:  {np.array2string(np.asarray(x, dtype=np.float64), precision=6)}")
    print(f"Output: {np.array2string(y, precision=6)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
