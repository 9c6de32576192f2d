"""Config discovery and decoding for the CLI."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import cast

import msgspec

from symscan.cli.config_models import ScanConfig
from symscan.serde_msgspec import validation_error_payload

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "symscan.toml"
PYPROJECT_FILENAME = "pyproject.toml"
TOOL_KEY = "symscan"


class ConfigError(ValueError):
    """Raised when a config file is missing or invalid."""


def load_scan_config(config_file: str | None, *, cwd: Path | None = None) -> ScanConfig:
    """Load scan defaults from ``--config`` or the nearest config file.

    Without an explicit file, ``symscan.toml`` is searched from ``cwd``
    upwards, then ``[tool.symscan]`` in the nearest ``pyproject.toml``.

    Parameters
    ----------
    config_file
        Optional explicit config file path.
    cwd
        Directory to start discovery from (defaults to the process cwd).

    Returns
    -------
    ScanConfig
        Decoded configuration; all fields unset when no config is found.

    Raises
    ------
    ConfigError
        Raised when an explicit file is missing or a config fails validation.
    """
    if config_file:
        path = Path(config_file)
        if not path.exists():
            msg = f"Config file not found: {config_file!r}."
            raise ConfigError(msg)
        raw, location = _resolve_explicit_payload(path)
        return _decode_scan_config(raw, location=location)

    start = cwd or Path.cwd()
    symscan_path = _find_in_parents(CONFIG_FILENAME, start)
    if symscan_path is not None:
        return _decode_scan_config(_read_toml(symscan_path), location=str(symscan_path))

    pyproject_path = _find_in_parents(PYPROJECT_FILENAME, start)
    if pyproject_path is not None:
        nested = _extract_tool_config(_read_toml(pyproject_path))
        if nested is not None:
            return _decode_scan_config(nested, location=f"{pyproject_path}:tool.{TOOL_KEY}")
    return ScanConfig()


def _find_in_parents(filename: str, start: Path) -> Path | None:
    path = start
    while True:
        candidate = path / filename
        if candidate.exists():
            return candidate
        if path.parent == path:
            return None
        path = path.parent


def _read_toml(path: Path) -> dict[str, object]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Unable to read config file {path}: {exc}"
        raise ConfigError(msg) from exc
    try:
        payload = msgspec.toml.decode(text, type=object, strict=True)
    except msgspec.DecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(payload, dict):
        msg = f"Expected TOML mapping in {path}, got {type(payload).__name__}."
        raise ConfigError(msg)
    return cast("dict[str, object]", payload)


def _decode_scan_config(raw: Mapping[str, object], *, location: str) -> ScanConfig:
    try:
        config = msgspec.convert(dict(raw), type=ScanConfig, strict=True)
    except msgspec.ValidationError as exc:
        details = validation_error_payload(exc)
        msg = f"Config validation failed for {location}: {details}"
        raise ConfigError(msg) from exc
    logger.debug("Loaded scan config from %s", location)
    return config


def _resolve_explicit_payload(path: Path) -> tuple[Mapping[str, object], str]:
    raw = _read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        nested = _extract_tool_config(raw)
        if nested is None:
            msg = f"Config validation failed for {path}: missing [tool.{TOOL_KEY}] section."
            raise ConfigError(msg)
        return nested, f"{path}:tool.{TOOL_KEY}"
    return raw, str(path)


def _extract_tool_config(raw: Mapping[str, object]) -> dict[str, object] | None:
    tool_section = raw.get("tool")
    if not isinstance(tool_section, dict):
        return None
    nested = tool_section.get(TOOL_KEY)
    if not isinstance(nested, dict):
        return None
    return cast("dict[str, object]", nested)


__all__ = ["CONFIG_FILENAME", "ConfigError", "load_scan_config"]
