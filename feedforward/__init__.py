"""Feedforward — minimal forward-only neural-network evaluation with NumPy."""

from .core import DenseLayer, InputLayer, OutputLayer, ReLU, Sigmoid, Softmax
from .exceptions import (
    ConfigError,
    ConstructionError,
    NetworkError,
    NonFiniteInputError,
    ShapeMismatchError,
    UnsupportedOperationError,
)
from .network import Sequential, SequentialBuilder, build_from_config
from .perceptron import Perceptron

__version__ = "1.0.0"

__all__ = [
    "ReLU", "Sigmoid", "Softmax",
    "InputLayer", "DenseLayer", "OutputLayer",
    "Sequential", "SequentialBuilder", "build_from_config",
    "Perceptron",
    "NetworkError", "NonFiniteInputError", "ShapeMismatchError", "UnsupportedOperationError",
    "ConstructionError", "ConfigError",
]
