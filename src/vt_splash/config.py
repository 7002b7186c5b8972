"""Runtime configuration resolution.

Precedence, highest first: explicit arguments, JSON config file,
environment variables, built-in defaults.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from vt_splash.content.model import Template
from vt_splash.content.providers import DEFAULT_PROVIDER, get_provider
from vt_splash.errors import ConfigError

ENV_PREFIX = "VT_SPLASH_"

POLL_INTERVAL = 0.25
HEADER_HEIGHT = 11
FOOTER_HEIGHT = 3
INNER_MARGIN = 1
SECTION_MIN_HEIGHT = 4

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class SplashConfig:
    """Resolved settings for one splash session."""
    provider: str = DEFAULT_PROVIDER
    template: Optional[Template] = None  # None = provider's own template
    poll_interval: float = POLL_INTERVAL
    header_height: int = HEADER_HEIGHT
    footer_height: int = FOOTER_HEIGHT
    margin: int = INNER_MARGIN
    section_min_height: int = SECTION_MIN_HEIGHT
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.poll_interval <= 0:
            raise ConfigError(f"poll_interval must be positive, got {self.poll_interval}")
        for name in ("header_height", "footer_height", "margin", "section_min_height"):
            value = getattr(self, name)
            if value < 0:
                raise ConfigError(f"{name} must not be negative, got {value}")
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(f"unknown log level: {self.log_level!r}")

    def resolve_template(self) -> Template:
        """Configured template, falling back to the provider's preference."""
        if self.template is not None:
            return self.template
        return get_provider(self.provider).template


def load_config_file(path: str | Path | None) -> dict[str, Any]:
    if not path:
        return {}

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise ConfigError(f"config path not found: {config_path}")

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"could not read config {config_path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON config: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be an object: {config_path}")
    return data


def _from_env(env: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for name in ("provider", "template", "log_level", "log_file"):
        raw = env.get(ENV_PREFIX + name.upper())
        if raw:
            values[name] = raw
    return values


def _coerce(values: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(SplashConfig)}
    unknown = set(values) - known
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(sorted(unknown))}")

    coerced: dict[str, Any] = {}
    for key, value in values.items():
        if value is None:
            continue
        try:
            if key == "template":
                coerced[key] = Template.parse(value)
            elif key == "log_file":
                coerced[key] = Path(value).expanduser()
            elif key == "log_level":
                coerced[key] = str(value).upper()
            elif key == "poll_interval":
                coerced[key] = float(value)
            elif key == "provider":
                coerced[key] = str(value)
            else:
                coerced[key] = int(value)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"invalid value for {key}: {value!r}") from exc
    return coerced


def resolve_config(
    provider: Optional[str] = None,
    template: Optional[str] = None,
    config_path: str | Path | None = None,
    env: Optional[Mapping[str, str]] = None,
) -> SplashConfig:
    """
    Build a SplashConfig from all configuration sources.

    Args:
        provider: Content provider name (CLI override)
        template: Template name (CLI override)
        config_path: JSON config file; defaults to $VT_SPLASH_CONFIG
        env: Environment mapping (defaults to os.environ)

    Raises:
        ConfigError: on unknown keys, unknown names or invalid values
    """
    env = os.environ if env is None else env
    config_path = config_path or env.get(ENV_PREFIX + "CONFIG")

    merged: dict[str, Any] = {}
    merged.update(_from_env(env))
    merged.update(load_config_file(config_path))
    explicit = {"provider": provider, "template": template}
    merged.update({k: v for k, v in explicit.items() if v is not None})

    config = replace(SplashConfig(), **_coerce(merged))
    get_provider(config.provider)
    return config
