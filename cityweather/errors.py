from __future__ import annotations

from typing import Optional


class WeatherError(RuntimeError):
    """Base error for the fetch-and-parse pipeline."""


class FetchError(WeatherError):
    """Raised (or returned) when the provider could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(WeatherError):
    """Raised (or returned) when a response body is not a usable weather document."""


class ConfigurationError(WeatherError):
    """Raised when a required setting is missing or malformed."""


__all__ = ["WeatherError", "FetchError", "ParseError", "ConfigurationError"]
