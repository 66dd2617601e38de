from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from dotenv import load_dotenv

from pageopts.adapters.defaults.static import StaticDefaults
from pageopts.domain.errors import SettingsError
from pageopts.domain.schema import DEFAULT_META_PREFIX, ENV_META_PREFIX, ENV_SETTINGS_PATH
from pageopts.utils.mappings import freeze_options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration. Loaded once at startup, immutable afterwards.
    """
    defaults: Mapping[str, Any] = field(default_factory=dict)
    meta_prefix: str = DEFAULT_META_PREFIX

    def __post_init__(self) -> None:
        object.__setattr__(self, "defaults", freeze_options(self.defaults))

    def defaults_provider(self) -> StaticDefaults:
        return StaticDefaults(self.defaults)


def _read_raw(path: Path) -> Any:
    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            with path.open("rb") as f:
                return tomllib.load(f)
        if suffix in (".yaml", ".yml"):
            with path.open("r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as e:
        raise SettingsError(f"Could not parse settings file {path}: {e}") from e
    raise SettingsError(f"Unsupported settings format: {path} (expected .toml, .yaml or .yml)")


def load_settings(path: str | Path = "pageopts.toml", *, meta_prefix: Optional[str] = None) -> Settings:
    """
    Load settings from a TOML or YAML file:

        [meta]
        prefix = "grover-"

        [options]
        cache = false
        quality = 95

        [options.viewport]
        width = 1280

    Both tables are optional. `meta_prefix`, when given, wins over the file.
    """
    path = Path(os.path.expandvars(os.path.expanduser(str(path))))

    if not path.exists():
        raise FileNotFoundError(f"Missing settings file: {path}")

    raw = _read_raw(path)
    if not isinstance(raw, Mapping):
        raise SettingsError(f"Settings file {path} must contain a table at the top level")

    options = raw.get("options", {})
    if not isinstance(options, Mapping):
        raise SettingsError(f"'options' in {path} must be a table, got {type(options).__name__}")

    meta = raw.get("meta", {})
    if not isinstance(meta, Mapping):
        raise SettingsError(f"'meta' in {path} must be a table, got {type(meta).__name__}")

    prefix = meta_prefix if meta_prefix is not None else meta.get("prefix", DEFAULT_META_PREFIX)
    if not isinstance(prefix, str) or not prefix:
        raise SettingsError(f"'meta.prefix' in {path} must be a non-empty string")

    logger.debug("Loaded settings from %s (%d default options)", path, len(options))
    return Settings(defaults=options, meta_prefix=prefix)


def settings_from_env() -> Settings:
    """
    Build Settings from the environment (a .env file is honoured):
      PAGEOPTS_SETTINGS     path to a settings file (optional)
      PAGEOPTS_META_PREFIX  overrides the meta tag prefix (optional)
    """
    load_dotenv()

    prefix = os.getenv(ENV_META_PREFIX) or None
    settings_path = os.getenv(ENV_SETTINGS_PATH)
    if settings_path:
        return load_settings(settings_path, meta_prefix=prefix)

    if prefix is not None:
        return Settings(meta_prefix=prefix)
    return Settings()
