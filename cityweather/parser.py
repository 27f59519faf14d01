"""Turn an OpenWeatherMap current-weather document into a ``WeatherRecord``.

The provider's schema is a third-party contract, so nothing is assumed: every
key the record needs is looked up explicitly and any absent, null or
mistyped value fails the whole parse. Numbers are accepted either as JSON
numbers or as plain numeric strings. JSON floats are decoded as ``JsonNumber``,
a ``Decimal`` that remembers its source token, so the pass-through fields
(pressure, humidity, wind speed) keep the exact text the provider sent.
"""
from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone, tzinfo
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, Optional, Union

from .entities import UnitSuffixes, WeatherRecord
from .errors import ParseError


logger = logging.getLogger(__name__)

UPDATED_AT_PREFIX = "Updated at: "
MIN_TEMP_PREFIX = "Min Temp: "
MAX_TEMP_PREFIX = "Max Temp: "

# Largest decimal exponent accepted for any numeric field.
MAX_EXPONENT = 100

_NUMBER_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class JsonNumber(Decimal):
    """Decimal decoded from a JSON float, keeping the token it was read from."""

    def __new__(cls, token: str) -> "JsonNumber":
        number = super().__new__(cls, token)
        number.token = token
        return number


def parse_weather(
    body: Union[str, bytes, None],
    *,
    suffixes: Optional[UnitSuffixes] = None,
    tz: tzinfo = timezone.utc,
) -> Union[WeatherRecord, ParseError]:
    """Parse ``body`` into a record, or return the ``ParseError`` explaining why not."""
    try:
        document = _load(body)
        return _build_record(document, suffixes or UnitSuffixes(), tz)
    except ParseError as exc:
        logger.warning("Could not parse weather response: %s", exc)
        return exc


def clock_text(moment: datetime) -> str:
    """``hh:mm a`` with English AM/PM markers, independent of the process locale."""
    marker = "AM" if moment.hour < 12 else "PM"
    return f"{moment:%I:%M} {marker}"


def format_updated_at(epoch: int, tz: tzinfo = timezone.utc) -> str:
    moment = _from_epoch(epoch, tz, "dt")
    return f"{UPDATED_AT_PREFIX}{moment:%d/%m/%Y} {clock_text(moment)}"


def format_temperature(value: Decimal, suffix: str = "°C") -> str:
    rounded = int(value.to_integral_value(rounding=ROUND_HALF_UP))
    return f"{rounded}{suffix}"


# builders -------------------------------------------------------------
def _load(body: Union[str, bytes, None]) -> Dict[str, Any]:
    if body is None:
        raise ParseError("empty response body")
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError("response body is not valid UTF-8") from exc
    if not body.strip():
        raise ParseError("empty response body")
    try:
        document = json.loads(body, parse_float=JsonNumber)
    except (ValueError, RecursionError) as exc:
        raise ParseError(f"response body is not JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise ParseError("response body is not a JSON object")
    return document


def _build_record(document: Dict[str, Any], suffixes: UnitSuffixes, tz: tzinfo) -> WeatherRecord:
    main = _object(document, "main")
    sys_block = _object(document, "sys")
    wind = _object(document, "wind")
    weather = _first_condition(document)

    temp = _decimal(main, "temp", "main")
    temp_min = _decimal(main, "temp_min", "main")
    temp_max = _decimal(main, "temp_max", "main")
    feels_like = _decimal(main, "feels_like", "main")

    return WeatherRecord(
        address=f"{_text(document, 'name')}, {_text(sys_block, 'country', 'sys')}",
        updated_at_text=format_updated_at(_epoch(document, "dt"), tz),
        temp=format_temperature(temp, suffixes.temperature),
        temp_min=MIN_TEMP_PREFIX + format_temperature(temp_min, suffixes.temperature),
        temp_max=MAX_TEMP_PREFIX + format_temperature(temp_max, suffixes.temperature),
        feels_like=format_temperature(feels_like, suffixes.temperature),
        pressure=_number_text(main, "pressure", "main") + suffixes.pressure,
        humidity=_number_text(main, "humidity", "main") + suffixes.humidity,
        wind_speed=_number_text(wind, "speed", "wind") + suffixes.wind_speed,
        weather_description=_text(weather, "description", "weather[0]"),
        weather_icon=_text(weather, "icon", "weather[0]"),
        sunrise=_epoch(sys_block, "sunrise", "sys"),
        sunset=_epoch(sys_block, "sunset", "sys"),
    )


# field helpers --------------------------------------------------------
def _path(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


def _value(container: Dict[str, Any], key: str, parent: str = "") -> Any:
    if key not in container:
        raise ParseError(f"missing key {_path(parent, key)!r}")
    value = container[key]
    if value is None:
        raise ParseError(f"{_path(parent, key)!r} is null")
    return value


def _object(container: Dict[str, Any], key: str, parent: str = "") -> Dict[str, Any]:
    value = _value(container, key, parent)
    if not isinstance(value, dict):
        raise ParseError(f"{_path(parent, key)!r} is not an object")
    return value


def _first_condition(document: Dict[str, Any]) -> Dict[str, Any]:
    conditions = _value(document, "weather")
    if not isinstance(conditions, list):
        raise ParseError("'weather' is not a list")
    if not conditions:
        raise ParseError("'weather' is empty")
    first = conditions[0]
    if not isinstance(first, dict):
        raise ParseError("'weather[0]' is not an object")
    return first


def _text(container: Dict[str, Any], key: str, parent: str = "") -> str:
    value = _value(container, key, parent)
    if not isinstance(value, str):
        raise ParseError(f"{_path(parent, key)!r} is not a string")
    return value


def _decimal(container: Dict[str, Any], key: str, parent: str = "") -> Decimal:
    value = _value(container, key, parent)
    path = _path(parent, key)
    if isinstance(value, bool) or not isinstance(value, (int, Decimal, str)):
        raise ParseError(f"{path!r} is not a number")
    if isinstance(value, str) and not _NUMBER_PATTERN.fullmatch(value.strip()):
        raise ParseError(f"{path!r} is not a number: {value!r}")
    try:
        number = Decimal(value.strip() if isinstance(value, str) else value)
    except InvalidOperation as exc:
        raise ParseError(f"{path!r} is not a number: {value!r}") from exc
    if not number.is_finite():
        raise ParseError(f"{path!r} is not a finite number")
    if number and number.adjusted() > MAX_EXPONENT:
        raise ParseError(f"{path!r} is out of range: {value!r}")
    return number


def _number_text(container: Dict[str, Any], key: str, parent: str = "") -> str:
    _decimal(container, key, parent)
    value = container[key]
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, JsonNumber):
        return value.token
    return str(value)


def _epoch(container: Dict[str, Any], key: str, parent: str = "") -> int:
    number = _decimal(container, key, parent)
    path = _path(parent, key)
    if number != number.to_integral_value():
        raise ParseError(f"{path!r} is not a whole number of seconds")
    epoch = int(number)
    _from_epoch(epoch, timezone.utc, path)
    return epoch


def _from_epoch(epoch: int, tz: tzinfo, path: str) -> datetime:
    try:
        return datetime.fromtimestamp(epoch, tz=tz)
    except (OverflowError, OSError, ValueError) as exc:
        raise ParseError(f"{path!r} is out of range: {epoch}") from exc


__all__ = [
    "parse_weather",
    "clock_text",
    "format_updated_at",
    "format_temperature",
    "JsonNumber",
    "UPDATED_AT_PREFIX",
    "MIN_TEMP_PREFIX",
    "MAX_TEMP_PREFIX",
]
