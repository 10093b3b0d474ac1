# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads default-value maps for the parser from TOML, YAML or properties files.

The parse engine only ever receives an in-memory `dict[str, str]`; this module is
the front-end side that turns a file into one. Keys name options (with or without
dashes); values are converted to strings. Nested tables are rejected.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml

from optscan.logger import logger

PROPERTY_SEPARATORS = ("=", ":")
COMMENT_PREFIXES = ("#", "!")


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _normalize(raw: Any, path: Path) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Defaults file '{path}' must contain a mapping of options.")
    defaults: dict[str, str] = {}
    for key, value in raw.items():
        if isinstance(value, (dict, list, tuple)):
            raise ValueError(
                f"Default for '{key}' in '{path}' must be a scalar, "
                f"got {type(value).__name__}."
            )
        defaults[str(key)] = _stringify(value)
    return defaults


def parse_properties(text: str) -> dict[str, str]:
    """Parse `key=value` / `key: value` lines, skipping blanks and comments."""
    properties: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue
        positions = [line.find(sep) for sep in PROPERTY_SEPARATORS if sep in line]
        if not positions:
            properties[line] = ""
            continue
        index = min(positions)
        properties[line[:index].strip()] = line[index + 1 :].strip()
    return properties


def load_defaults(path: str | Path) -> dict[str, str]:
    """
    Load a default map from `path`.

    The suffix selects the format: `.toml`, `.yaml`/`.yml`, anything else is read
    as a properties file.

    Raises:
        FileNotFoundError: If `path` does not exist.
        ValueError: If the file does not hold a flat mapping.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Defaults file '{path}' not found.")

    suffix = path.suffix.lower()
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix == ".toml":
            raw = toml.load(config_file)
        elif suffix in (".yaml", ".yml"):
            raw = yaml.safe_load(config_file)
        else:
            raw = parse_properties(config_file.read())

    defaults = _normalize(raw, path)
    logger.debug("Loaded %d defaults from '%s'", len(defaults), path)
    return defaults
