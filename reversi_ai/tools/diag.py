from __future__ import annotations

import logging
import os
import pathlib
import time
from typing import Any, Dict, Optional, Union

import orjson

CONFIG_HOME = pathlib.Path(os.path.expanduser("~/.reversi_ai"))
CONFIG_PATH = CONFIG_HOME / "config.toml"
DEFAULTS_PATH = pathlib.Path(__file__).resolve().parents[1] / "config" / "defaults.toml"

logger = logging.getLogger(__name__)


def ensure_config() -> bool:
    """Create the user config from the shipped defaults; True if it was created."""
    try:
        CONFIG_HOME.mkdir(parents=True, exist_ok=True)
        if not CONFIG_PATH.exists():
            CONFIG_PATH.write_text(DEFAULTS_PATH.read_text(encoding="utf-8"), encoding="utf-8")
            logger.info("Initialised configuration at %s", CONFIG_PATH)
            return True
    except OSError as exc:
        logger.warning("could not create %s: %s", CONFIG_PATH, exc)
    return False


def _read_toml(path: pathlib.Path) -> Dict[str, Any]:
    # Parse TOML config; prefer stdlib tomllib (3.11+), else tomli
    try:
        import tomllib  # type: ignore[attr-defined]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_config(path: Optional[Union[str, pathlib.Path]] = None) -> Dict[str, Any]:
    """Shipped defaults overlaid with the user file (or `path`).

    A file that is missing or does not parse is logged and ignored.
    """
    config = _read_toml(DEFAULTS_PATH)
    target = pathlib.Path(path) if path is not None else CONFIG_PATH
    if not target.exists():
        if path is not None:
            logger.warning("config file %s not found, using defaults", target)
        return config
    try:
        user = _read_toml(target)
    except (OSError, ValueError) as exc:
        logger.warning("ignoring config file %s: %s", target, exc)
        return config
    return _merge(config, user)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def log_event(module: str, event: str, **kwargs) -> None:
    """Structured event logging through the central logger.

    Emits a single JSON line via the Python logging system so it reaches the
    central log file configured by logging_setup.setup_logging().
    """
    payload = {"ts": time.time(), "module": module, "event": event}
    payload.update(kwargs)
    try:
        line = orjson.dumps(payload).decode("utf-8")
    except TypeError:
        logging.getLogger("event").exception("failed to log event: %s", {"module": module, "event": event})
        return
    logging.getLogger(f"event.{module}").info(line)
