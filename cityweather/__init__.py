"""Current-conditions weather client for OpenWeatherMap."""
from __future__ import annotations

from .entities import UnitSuffixes, WeatherRecord, WeatherRequest
from .errors import ConfigurationError, FetchError, ParseError, WeatherError
from .parser import parse_weather
from .providers.openweathermap import OpenWeatherMapFetcher
from .services.weather import WeatherService
from .validation import is_valid_location_input

__all__ = [
    "ConfigurationError",
    "FetchError",
    "OpenWeatherMapFetcher",
    "ParseError",
    "UnitSuffixes",
    "WeatherError",
    "WeatherRecord",
    "WeatherRequest",
    "WeatherService",
    "is_valid_location_input",
    "parse_weather",
]
