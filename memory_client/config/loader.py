"""YAML file layer for memory client config.

Precedence (last wins): base.yaml → overrides.local.yaml.

The selected section is handed to ``normalize`` unchanged, so unknown keys
and placeholder rules apply exactly as for in-process callers. No caching:
each call reads the files again.
"""
from __future__ import annotations

import logging
import os
import pathlib
from collections.abc import Mapping
from typing import Any, Dict, Optional

import yaml
from yaml import YAMLError

from memory_client import metrics
from memory_client.errors import ConfigFileError

from .normalizer import count_failure, normalize
from .schemas.memory import MemoryConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = "configs"
CONFIG_DIR_ENV = "MEMORY_CLIENT_CONFIG_DIR"
CONFIG_FILES = ("base.yaml", "overrides.local.yaml")


def _load_yaml_if_exists(path: pathlib.Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (YAMLError, UnicodeDecodeError) as e:
        raise count_failure(
            ConfigFileError(f"Invalid config file {path.name}: {e}")
        ) from e
    if not isinstance(data, dict):
        raise count_failure(
            ConfigFileError(
                f"Invalid config file {path.name}: top level must be a mapping"
            )
        )
    logger.info("[config-load] file=%s", path.name)
    metrics.inc("config_file_loaded_total", {"file": path.name})
    return data


def _merge_dict(
    base: Dict[str, Any], override: Dict[str, Any]
) -> Dict[str, Any]:
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            base[k] = _merge_dict(base[k], v)
        else:
            base[k] = v
    return base


def _resolve_config_dir() -> pathlib.Path:
    """Resolve config directory each call honoring env var changes."""
    return pathlib.Path(os.getenv(CONFIG_DIR_ENV, DEFAULT_CONFIG_DIR))


def load_memory_config(
    config_dir: str | pathlib.Path | None = None,
    section: Optional[str] = "memory",
    env: Optional[Mapping[str, str]] = None,
) -> MemoryConfig:
    """Read layered YAML files and normalize the ``section`` mapping.

    ``section=None`` treats the whole merged document as the memory config.
    A missing section normalizes as ``{}`` (all defaults).
    """
    cfg_dir = (
        pathlib.Path(config_dir) if config_dir is not None
        else _resolve_config_dir()
    )
    merged: Dict[str, Any] = {}
    for name in CONFIG_FILES:
        merged = _merge_dict(merged, _load_yaml_if_exists(cfg_dir / name))
    raw = merged if section is None else merged.get(section, {})
    if raw is None:
        raw = {}
    return normalize(raw, env=env)
