"""Command line front end: fetch and print the current weather for a city."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Mapping, Optional, Sequence

from .entities import WeatherRequest
from .errors import ConfigurationError, WeatherError
from .preferences import LocationPreferences
from .providers.base import RequestConfig
from .providers.openweathermap import OpenWeatherMapFetcher
from .rendering import INVALID_LOCATION_MESSAGE, NO_RESULTS_MESSAGE, icon_url, render_lines
from .services.weather import WeatherService
from .settings import load_settings
from .validation import is_valid_location_input


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cityweather", description="Show current weather for a city")
    parser.add_argument("location", nargs="?", help="City name; defaults to the last successful lookup")
    parser.add_argument("--units", help="Unit system passed to the provider (default: metric)")
    parser.add_argument("--api-key", help="OpenWeatherMap API key (default: $OPENWEATHER_API_KEY)")
    parser.add_argument("--json", action="store_true", help="Print the record as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log requests and failure details")
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    service: Optional[WeatherService] = None,
) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(environ)
        api_key = args.api_key or settings.require_api_key()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    preferences = LocationPreferences(settings.prefs_path)
    if args.location is not None:
        if not is_valid_location_input(args.location):
            print(INVALID_LOCATION_MESSAGE, file=sys.stderr)
            return 2
        location = args.location
    else:
        location = preferences.load(settings.default_city)

    request = WeatherRequest(location=location, units=args.units or settings.units, api_key=api_key)
    if service is None:
        fetcher = OpenWeatherMapFetcher(
            base_url=settings.base_url,
            request_config=RequestConfig(timeout=settings.timeout),
        )
        service = WeatherService(fetcher=fetcher, tz=settings.tz)

    result = service.get_current(request)
    if isinstance(result, WeatherError):
        print(NO_RESULTS_MESSAGE, file=sys.stderr)
        if args.verbose:
            print(f"{type(result).__name__}: {result}", file=sys.stderr)
        return 1

    preferences.save(location)
    if args.json:
        payload = asdict(result)
        payload["icon_url"] = icon_url(result.weather_icon)
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for line in render_lines(result, settings.tz):
            print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
