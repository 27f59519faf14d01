from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import timezone, tzinfo
from threading import Lock
from typing import Optional, Union

from ..entities import UnitSuffixes, WeatherRecord, WeatherRequest
from ..errors import FetchError, WeatherError
from ..parser import parse_weather
from ..providers.openweathermap import OpenWeatherMapFetcher


class WeatherService:
    """Fetch-then-parse pipeline returning a record or a typed error.

    Each call is independent: the request travels as an argument and the
    result is a fresh value, so the service can be shared between threads.
    """

    def __init__(
        self,
        *,
        fetcher: Optional[OpenWeatherMapFetcher] = None,
        suffixes: Optional[UnitSuffixes] = None,
        tz: tzinfo = timezone.utc,
        max_workers: int = 2,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.fetcher = fetcher or OpenWeatherMapFetcher()
        self.suffixes = suffixes or UnitSuffixes()
        self.tz = tz
        self._max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = Lock()
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def get_current(self, request: WeatherRequest) -> Union[WeatherRecord, WeatherError]:
        body = self.fetcher.fetch(request)
        if isinstance(body, FetchError):
            return body
        result = parse_weather(body, suffixes=self.suffixes, tz=self.tz)
        if isinstance(result, WeatherError):
            return result
        self._log.info("Weather for %r: %s, %s", request.location, result.temp, result.weather_description)
        return result

    def submit(self, request: WeatherRequest) -> "Future[Union[WeatherRecord, WeatherError]]":
        """Run :meth:`get_current` on a worker thread."""
        return self._get_executor().submit(self.get_current, request)

    def close(self) -> None:
        with self._executor_lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)

    def __enter__(self) -> "WeatherService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Helpers ------------------------------------------------------------
    def _get_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix="weather",
                )
            return self._executor


__all__ = ["WeatherService"]
