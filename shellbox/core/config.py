"""
Configuration loading for shellbox.

Settings come from a YAML file (``config/shellbox.yaml`` by default, or the
path in ``SHELLBOX_CONFIG``) and can be overridden by environment variables,
which may themselves be supplied through a ``.env`` file.
"""
import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), '..', '..', 'config', 'shellbox.yaml')


@dataclass
class ProcessSettings:
    grace_period: float = 10.0


@dataclass
class TimerSettings:
    interval_seconds: float = 60.0
    channels: List[str] = field(default_factory=lambda: ["console"])
    webhook_url: Optional[str] = None
    log_path: str = "timer_events.log"


@dataclass
class LoggingSettings:
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class ApiSettings:
    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class Settings:
    process: ProcessSettings = field(default_factory=ProcessSettings)
    timer: TimerSettings = field(default_factory=TimerSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    api: ApiSettings = field(default_factory=ApiSettings)


_SECTIONS = {
    "process": ProcessSettings,
    "timer": TimerSettings,
    "logging": LoggingSettings,
    "api": ApiSettings,
}

# env var -> (section, key, converter)
_ENV_OVERRIDES = {
    "SHELLBOX_GRACE_PERIOD": ("process", "grace_period", float),
    "SHELLBOX_TIMER_INTERVAL": ("timer", "interval_seconds", float),
    "SHELLBOX_WEBHOOK_URL": ("timer", "webhook_url", str),
    "SHELLBOX_LOG_LEVEL": ("logging", "level", str),
    "SHELLBOX_LOG_FILE": ("logging", "log_file", str),
    "SHELLBOX_API_PORT": ("api", "port", int),
}


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, 'r') as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning(f"Config file not found at {path}. Using defaults.")
        return {}
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file {path}: {e}")
        return {}

    if not raw:
        return {}
    if not isinstance(raw, dict):
        logger.error(f"Config file {path} must contain a mapping, got {type(raw).__name__}.")
        return {}
    return raw


def _coerce(value: Any, annotation):
    if annotation == Optional[str]:
        return None if value is None else _coerce(value, str)
    if annotation == List[str]:
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ValueError(f"expected a list of strings, got {value!r}")
        return list(value)
    if isinstance(value, bool):
        raise ValueError(f"expected {annotation.__name__}, got {value!r}")
    if annotation is str:
        if not isinstance(value, (str, int, float)):
            raise ValueError(f"expected str, got {value!r}")
        return str(value)
    if annotation is int:
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"expected int, got {value!r}")
        return int(value)
    return annotation(value)


def _build_section(name: str, values: Any):
    section_class = _SECTIONS[name]
    if not isinstance(values, dict):
        logger.error(f"Config section '{name}' must be a mapping. Using defaults.")
        return section_class()

    known = {f.name: f.type for f in fields(section_class)}
    unknown = set(values) - set(known)
    if unknown:
        logger.error(f"Invalid keys in config section '{name}': {sorted(unknown)}. Using defaults.")
        return section_class()

    try:
        coerced = {key: _coerce(value, known[key]) for key, value in values.items()}
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid value in config section '{name}': {e}. Using defaults.")
        return section_class()
    return section_class(**coerced)


def _apply_env_overrides(settings: Settings, environ) -> None:
    for env_name, (section_name, key, convert) in _ENV_OVERRIDES.items():
        raw_value = environ.get(env_name)
        if raw_value is None or raw_value == "":
            continue
        try:
            value = convert(raw_value)
        except ValueError:
            logger.error(f"Ignoring {env_name}={raw_value!r}: expected {convert.__name__}.")
            continue
        setattr(getattr(settings, section_name), key, value)


def load_settings(path: Optional[str] = None, environ=None, use_dotenv: bool = True) -> Settings:
    """
    Load settings from YAML, then apply environment overrides.

    :param path: Explicit config path. Falls back to ``SHELLBOX_CONFIG`` and
                 then to the bundled ``config/shellbox.yaml``.
    :param environ: Mapping used for overrides, ``os.environ`` by default.
    :param use_dotenv: Load a ``.env`` file into the process environment first.
    :return: A fully populated ``Settings`` instance.
    """
    if use_dotenv:
        load_dotenv()
    if environ is None:
        environ = os.environ

    config_path = path or environ.get("SHELLBOX_CONFIG") or DEFAULT_CONFIG_PATH
    raw = _read_yaml(config_path)

    settings = Settings()
    for name in _SECTIONS:
        if name in raw:
            setattr(settings, name, _build_section(name, raw[name]))

    unknown = set(raw) - set(_SECTIONS)
    if unknown:
        logger.warning(f"Ignoring unknown config sections: {sorted(unknown)}")

    _apply_env_overrides(settings, environ)
    return settings
