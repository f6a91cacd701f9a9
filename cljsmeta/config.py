"""Configuration loading for cljsmeta (.cljsmeta.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".cljsmeta.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ReaderConfig:
    """Settings read from ``.cljsmeta.yml`` at the source root."""

    root: Path
    adapter: Optional[str] = None
    fail_fast: bool = False
    output: Optional[Path] = None


def load_config(config_path: Path) -> ReaderConfig:
    """Load configuration for a source directory (or an explicit config file)."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ReaderConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    fail_fast = _as_bool(data.get("fail_fast"))
    if data.get("fail_fast") is not None and fail_fast is None:
        raise ConfigError("fail_fast must be a boolean")

    output_str = _as_str(data.get("output"))
    return ReaderConfig(
        root=root,
        adapter=_as_str(data.get("adapter")),
        fail_fast=bool(fail_fast),
        output=root / output_str if output_str else None,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "ReaderConfig", "load_config"]
