"""Configuration loading for docinject (.docinject.yml)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .extraction import DEFAULT_COMMAND, DEFAULT_RESOLVER

CONFIG_FILENAME = ".docinject.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class InjectConfig:
    """Settings for one docinject pass.

    ``collection_name`` and the legacy ``global_name`` both name the global
    registry object; ``collection_name`` wins when both are set.
    """

    root: Path = field(default_factory=lambda: Path(".").resolve())
    resolver: str = DEFAULT_RESOLVER
    include_methods: bool = False
    collection_name: Optional[str] = None
    global_name: Optional[str] = None
    extractor_command: List[str] = field(default_factory=lambda: list(DEFAULT_COMMAND))

    @property
    def registry_name(self) -> Optional[str]:
        return self.collection_name or self.global_name or None

    @classmethod
    def from_options(cls, options: Mapping[str, Any], *, root: Path | None = None) -> "InjectConfig":
        """Build a config from plugin-style option keys.

        Understands ``resolver``, ``includeMethods``,
        ``DOC_GEN_COLLECTION_NAME`` and the legacy ``DOC_GEN_GLOBAL``.
        """
        config = cls()
        if root is not None:
            config.root = root.resolve()
        resolver = _as_str(options.get("resolver"))
        if resolver:
            config.resolver = resolver
        config.include_methods = _as_bool(options.get("includeMethods")) or False
        config.collection_name = _as_str(options.get("DOC_GEN_COLLECTION_NAME"))
        config.global_name = _as_str(options.get("DOC_GEN_GLOBAL"))
        return config


def load_config(config_path: Path) -> InjectConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    base = config_file.parent.resolve()

    if not config_file.exists():
        return InjectConfig(root=base)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = InjectConfig(root=base)

    root_str = _as_str(data.get("root"))
    if root_str:
        config.root = (base / root_str).resolve()

    resolver = _as_str(data.get("resolver"))
    if resolver:
        config.resolver = resolver

    include_methods = _as_bool(data.get("include_methods"))
    if include_methods is not None:
        config.include_methods = include_methods

    config.collection_name = _as_str(data.get("collection_name"))
    config.global_name = _as_str(data.get("global_name"))

    extractor_data = _as_dict(data.get("extractor"))
    command = _as_str_list(extractor_data.get("command")) if extractor_data else []
    if command:
        config.extractor_command = command

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
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


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (str, int, float)):
        text = str(value).strip()
        return text or None
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


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "InjectConfig", "load_config"]
