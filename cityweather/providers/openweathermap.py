"""OpenWeatherMap current weather fetcher."""
from __future__ import annotations

from typing import Dict, Optional, Union

from .base import HttpProvider
from ..entities import WeatherRequest
from ..errors import FetchError

COUNTRY_QUALIFIER = "us"


def build_query(request: WeatherRequest) -> Dict[str, str]:
    return {
        "q": f"{request.location},{COUNTRY_QUALIFIER}",
        "units": request.units,
        "appid": request.api_key,
    }


class OpenWeatherMapFetcher(HttpProvider):
    """Fetch the raw "current weather by city name" document."""

    base_url = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url

    def fetch(self, request: WeatherRequest) -> Union[str, FetchError]:
        """Return the response body as text, or the ``FetchError`` describing the failure.

        The body is not inspected here; an error page served with a 200 status
        is handed to the parser like any other document.
        """
        try:
            response = self._request("GET", self.base_url, params=build_query(request))
        except FetchError as exc:
            return exc
        self._log.debug("Fetched %d bytes for %r", len(response.content), request.location)
        return response.text


__all__ = ["OpenWeatherMapFetcher", "build_query", "COUNTRY_QUALIFIER"]
