"""Environment-driven settings for the weather client."""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timezone, tzinfo
from pathlib import Path
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import ConfigurationError

DEFAULT_CITY = "palo alto,ca"
DEFAULT_UNITS = "metric"
DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_PREFS_PATH = Path.home() / ".cityweather" / "prefs.json"


def env(name: str, default: str | None = None, environ: Mapping[str, str] | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    source = os.environ if environ is None else environ
    value = source.get(name, default)
    if value is None:
        raise ConfigurationError(f"Environment variable {name} is required")
    return value


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str]
    default_city: str
    units: str
    base_url: str
    timeout: float
    tz: tzinfo
    prefs_path: Path

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError("Environment variable OPENWEATHER_API_KEY is required")
        return self.api_key


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    source = os.environ if environ is None else environ

    timeout_raw = env("WEATHER_TIMEOUT", "10", source)
    try:
        timeout = float(timeout_raw)
    except ValueError as exc:
        raise ConfigurationError(f"WEATHER_TIMEOUT must be a number, got {timeout_raw!r}") from exc
    if timeout <= 0:
        raise ConfigurationError("WEATHER_TIMEOUT must be positive")

    return Settings(
        api_key=source.get("OPENWEATHER_API_KEY") or None,
        default_city=env("WEATHER_DEFAULT_CITY", DEFAULT_CITY, source),
        units=env("WEATHER_UNITS", DEFAULT_UNITS, source),
        base_url=env("WEATHER_BASE_URL", DEFAULT_BASE_URL, source),
        timeout=timeout,
        tz=_timezone(env("WEATHER_TIMEZONE", "UTC", source)),
        prefs_path=Path(env("WEATHER_PREFS_PATH", str(DEFAULT_PREFS_PATH), source)).expanduser(),
    )


def _timezone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"Unknown time zone {name!r}") from exc


__all__ = ["Settings", "load_settings", "env", "DEFAULT_CITY", "DEFAULT_UNITS"]
