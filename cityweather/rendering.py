from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import List

from .entities import WeatherRecord
from .parser import clock_text

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{code}@2x.png"
NO_RESULTS_MESSAGE = "Sorry, no results."
INVALID_LOCATION_MESSAGE = "Please enter valid location"


def format_clock(epoch: int, tz: tzinfo = timezone.utc) -> str:
    return clock_text(datetime.fromtimestamp(epoch, tz=tz))


def icon_url(code: str) -> str:
    return ICON_URL_TEMPLATE.format(code=code)


def render_lines(record: WeatherRecord, tz: tzinfo = timezone.utc) -> List[str]:
    """Lay the record out top to bottom the way the app screen shows it."""
    return [
        record.address,
        record.updated_at_text,
        record.weather_description,
        record.temp,
        f"{record.temp_min}  {record.temp_max}",
        f"Sunrise: {format_clock(record.sunrise, tz)}",
        f"Sunset: {format_clock(record.sunset, tz)}",
        f"Wind: {record.wind_speed}",
        f"Pressure: {record.pressure}",
        f"Humidity: {record.humidity}",
        f"Feels like: {record.feels_like}",
        f"Icon: {icon_url(record.weather_icon)}",
    ]


__all__ = [
    "format_clock",
    "icon_url",
    "render_lines",
    "ICON_URL_TEMPLATE",
    "NO_RESULTS_MESSAGE",
    "INVALID_LOCATION_MESSAGE",
]
