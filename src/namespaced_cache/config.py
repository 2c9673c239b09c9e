from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from namespaced_cache.exceptions import ConfigError


class AppConfig(Protocol):
    def __getitem__(self, key: str) -> object: ...


_DEFAULTS: dict[str, object] = {
    "cache": {
        "default_ttl": 300,
    },
}


@dataclass(frozen=True)
class CacheSettings:
    default_ttl: int


def create_config(
    yaml_path: str = "nscache.yaml",
    env_prefix: str = "NSCACHE",
    defaults: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file. A missing file is ignored.
        env_prefix: Prefix for environment variables, e.g. ``NSCACHE__CACHE__DEFAULT_TTL``.
        defaults: Default configuration values.
    """
    if defaults is None:
        defaults = _DEFAULTS

    return ConfigurationSet(
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    )


def load_cache_settings(cfg: AppConfig | None = None) -> CacheSettings:
    if cfg is None:
        cfg = create_config()
    raw = cfg["cache.default_ttl"]
    # env vars arrive as strings
    try:
        default_ttl = int(str(raw))
    except ValueError:
        raise ConfigError(f"cache.default_ttl must be an integer, got {raw!r}") from None
    if default_ttl < 0:
        raise ConfigError(f"cache.default_ttl must not be negative, got {default_ttl}")
    return CacheSettings(default_ttl=default_ttl)
