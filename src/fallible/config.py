from __future__ import annotations

import logging
from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from fallible.exceptions import ConfigurationError

_PACKAGE_LOGGER = "fallible"

_DEFAULTS: dict[str, object] = {
    "logging": {
        "level": "WARNING",
        "format": "%(name)s: %(message)s",
    },
}


class _FallibleHandler(logging.StreamHandler):
    pass


@dataclass(frozen=True)
class LoggingSettings:
    level: int
    format: str


def create_config(
    yaml_path: str = "fallible.yaml",
    env_prefix: str = "FALLIBLE",
    defaults: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file. A missing file is ignored.
        env_prefix: Prefix for environment variables, e.g. ``FALLIBLE__LOGGING__LEVEL``.
        defaults: Default configuration values.
    """
    if defaults is None:
        defaults = _DEFAULTS

    return ConfigurationSet(
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    )


def _parse_level(raw: object) -> int:
    if isinstance(raw, int):
        return raw
    name = str(raw).strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelNamesMapping().get(name)
    if level is None:
        raise ConfigurationError(f"Unknown logging level '{raw}'")
    return level


def load_logging_settings(cfg: ConfigurationSet | None = None) -> LoggingSettings:
    """Read the logging section of the configuration into LoggingSettings."""
    if cfg is None:
        cfg = create_config()
    return LoggingSettings(
        level=_parse_level(cfg["logging.level"]),
        format=str(cfg["logging.format"]),
    )


def configure_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """Apply logging settings to the ``fallible`` logger.

    Installs one StreamHandler on first call; later calls update its level and format.
    """
    if settings is None:
        settings = load_logging_settings()

    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(settings.level)

    handler = next((h for h in logger.handlers if isinstance(h, _FallibleHandler)), None)
    if handler is None:
        handler = _FallibleHandler()
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(settings.format))
    return logger
