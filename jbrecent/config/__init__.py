"""
Load configuration from YAML.
Default: jbrecent/config/default.yaml. Override: --config <file> or JBRECENT_CONFIG.
"""
import os
from pathlib import Path
from typing import Any

import yaml

from jbrecent.core.config import (
    BUNDLE_PATTERN,
    ENV_CONFIG,
    ENV_PROJECTS_ROOT,
    ENV_TOOLBOX_ROOT,
)
from jbrecent.core.exceptions import ConfigError

_CACHE: dict[str, Any] | None = None
_CONFIG_DIR = Path(__file__).resolve().parent

_PATH_KEYS = ("projects_root", "toolbox_root", "home_dir")


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge override into base (recursive). base is not mutated."""
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return data


def default_projects_root() -> Path:
    """Where JetBrains IDEs keep per-application options on macOS."""
    return Path.home() / "Library" / "Application Support" / "JetBrains"


def _defaults() -> dict:
    """Built-in defaults (no file)."""
    return {
        "projects_root": str(default_projects_root()),
        "toolbox_root": None,  # None: the Toolbox directory found under projects_root
        "home_dir": None,  # None: current user's home
        "bundle_pattern": BUNDLE_PATTERN,
        "merge_applications": False,
    }


def _expand_paths(cfg: dict) -> dict:
    for key in _PATH_KEYS:
        value = cfg.get(key)
        if value:
            cfg[key] = str(Path(os.path.expandvars(str(value))).expanduser())
    return cfg


def load_config(override_path: str | Path | None = None) -> dict:
    """
    Load config: default.yaml + env JBRECENT_CONFIG + optional override file.
    Returns merged dict. Cached after first call unless override_path is given.
    """
    global _CACHE
    if override_path is not None:
        _CACHE = None

    if _CACHE is not None:
        return _CACHE

    base = _defaults()
    default_file = _CONFIG_DIR / "default.yaml"
    if default_file.exists():
        base = _deep_merge(base, _load_yaml(default_file))

    env_path = os.environ.get(ENV_CONFIG)
    if env_path and Path(env_path).exists():
        base = _deep_merge(base, _load_yaml(Path(env_path)))

    if override_path is not None:
        p = Path(override_path)
        if not p.exists():
            raise ConfigError(f"Config file not found: {p}")
        base = _deep_merge(base, _load_yaml(p))

    # Roots from env win over files
    for key, env_name in (("projects_root", ENV_PROJECTS_ROOT), ("toolbox_root", ENV_TOOLBOX_ROOT)):
        value = os.environ.get(env_name, "").strip()
        if value:
            base[key] = value

    base["merge_applications"] = bool(base.get("merge_applications"))
    base["bundle_pattern"] = str(base.get("bundle_pattern") or BUNDLE_PATTERN)

    _CACHE = _expand_paths(base)
    return _CACHE


def get_config(override_path: str | Path | None = None) -> dict:
    """Alias for load_config; use for read-only access."""
    return load_config(override_path)


def reset_config() -> None:
    """Clear cache (e.g. for tests)."""
    global _CACHE
    _CACHE = None
