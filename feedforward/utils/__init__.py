"""Utility functions: configuration loading, logging setup."""

from .config import load_config, parse_input, parse_layer_specs, parse_seed
from .config import default_config_path, package_root
from .logger import setup_logging

__all__ = [
    "load_config", "parse_input", "parse_layer_specs", "parse_seed",
    "default_config_path", "package_root",
    "setup_logging",
]
