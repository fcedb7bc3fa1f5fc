"""Configuration loading: YAML architecture files → layer specs."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml
from loguru import logger

from ..core.activations import get_activation
from ..core.layer import LayerKind, LayerSpec
from ..exceptions import ConfigError


def package_root() -> Path:
    """Return the installed ``feedforward`` package directory (holds ``configs/``)."""
    return Path(__file__).resolve().parent.parent


def default_config_path() -> Path:
    return package_root() / "configs" / "default.yaml"


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    """Load a YAML config.  Defaults to the bundled ``configs/default.yaml``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ConfigError
        If the file is not UTF-8, is not valid YAML, or does not hold a
        mapping at top level.
    """
    if path is None:
        path = default_config_path()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(path, encoding="utf-8") as f:
        try:
            cfg = yaml.safe_load(f)
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Config {path} is not valid UTF-8: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config {path} must contain a mapping at top level")
    logger.info(f"Loaded config from {path}")
    return cfg


def _parse_layer(index: int, entry: Any) -> LayerSpec:
    if not isinstance(entry, Mapping):
        raise ConfigError(f"layers[{index}] must be a mapping, got {entry!r}")

    try:
        kind = LayerKind(str(entry["type"]).strip().lower())
    except KeyError:
        raise ConfigError(f"layers[{index}] is missing 'type'") from None
    except ValueError:
        known = ", ".join(k.value for k in LayerKind)
        raise ConfigError(
            f"layers[{index}] has unknown type {entry['type']!r} (expected one of: {known})"
        ) from None

    units = entry.get("units")
    if isinstance(units, bool) or not isinstance(units, int) or units <= 0:
        raise ConfigError(f"layers[{index}] needs a positive integer 'units', got {units!r}")

    if "activation" not in entry:
        raise ConfigError(f"layers[{index}] is missing 'activation'")

    return LayerSpec(kind, units, get_activation(entry["activation"]))


def parse_layer_specs(cfg: Mapping[str, Any]) -> List[LayerSpec]:
    """Turn the ``layers`` list of a config into ``LayerSpec`` objects.

    Raises
    ------
    ConfigError
        If ``layers`` is missing or empty, or any entry is malformed.
    """
    layers = cfg.get("layers")
    if not isinstance(layers, list) or not layers:
        raise ConfigError("Config needs a non-empty 'layers' list")

    return [_parse_layer(i, entry) for i, entry in enumerate(layers)]


def parse_seed(cfg: Mapping[str, Any]) -> int | None:
    """Return the optional integer ``seed`` of a config."""
    seed = cfg.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ConfigError(f"'seed' must be an integer, got {seed!r}")
    return seed


def parse_input(cfg: Mapping[str, Any]) -> List[float] | None:
    """Return the optional ``input`` vector of a config as floats."""
    values = cfg.get("input")
    if values is None:
        return None
    if not isinstance(values, list) or not all(
        isinstance(v, (int, float)) and not isinstance(v, bool) for v in values
    ):
        raise ConfigError(f"'input' must be a list of numbers, got {values!r}")
    return [float(v) for v in values]
