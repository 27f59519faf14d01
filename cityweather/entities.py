from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherRequest:
    """Parameters of a single current-weather lookup."""

    location: str
    units: str
    api_key: str

    def __repr__(self) -> str:
        return f"WeatherRequest(location={self.location!r}, units={self.units!r}, api_key='***')"


@dataclass(frozen=True)
class UnitSuffixes:
    """Labels appended to formatted values.

    The defaults reproduce the labels shown by the mobile app regardless of
    the unit system that was requested.
    """

    temperature: str = "°C"
    pressure: str = " inHg"
    humidity: str = "%"
    wind_speed: str = "mph"


@dataclass(frozen=True)
class WeatherRecord:
    """Display-ready snapshot of the current conditions for one location.

    Every text field is already formatted for rendering. Sunrise and sunset
    stay as UNIX seconds; turning them into clock strings is up to the
    renderer.
    """

    address: str
    updated_at_text: str
    temp: str
    temp_min: str
    temp_max: str
    feels_like: str
    pressure: str
    humidity: str
    wind_speed: str
    weather_description: str
    weather_icon: str
    sunrise: int
    sunset: int


__all__ = ["WeatherRequest", "UnitSuffixes", "WeatherRecord"]
