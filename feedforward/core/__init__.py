"""Core building blocks: activations, layers, initializers."""

from .activations import Activation, ActivationType, ReLU, Sigmoid, Softmax, get_activation
from .layer import DenseLayer, InputLayer, Layer, LayerKind, LayerSpec, OutputLayer
from .initializers import get_initializer, he_init, uniform_init, xavier_init, zeros_init
from . import functional

__all__ = [
    "Activation", "ActivationType", "ReLU", "Sigmoid", "Softmax", "get_activation",
    "Layer", "InputLayer", "DenseLayer", "OutputLayer", "LayerKind", "LayerSpec",
    "uniform_init", "xavier_init", "he_init", "zeros_init", "get_initializer",
    "functional",
]
