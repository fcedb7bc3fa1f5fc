"""Network containers and the pipeline builder."""

from .sequential import Sequential
from .builder import SequentialBuilder, build_from_config

__all__ = ["Sequential", "SequentialBuilder", "build_from_config"]
