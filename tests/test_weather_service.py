from __future__ import annotations

import json
import logging

import requests

from cityweather.entities import WeatherRecord, WeatherRequest
from cityweather.errors import FetchError, ParseError, WeatherError
from cityweather.providers.openweathermap import OpenWeatherMapFetcher
from cityweather.services.weather import WeatherService


BASE_URL = "https://owm.test/data/2.5/weather"
REQUEST = WeatherRequest(location="Palo Alto", units="metric", api_key="secret")


def make_service() -> WeatherService:
    return WeatherService(fetcher=OpenWeatherMapFetcher(base_url=BASE_URL))


def test_service_returns_record(requests_mock, payload):
    requests_mock.get(BASE_URL, json=payload)

    result = make_service().get_current(REQUEST)

    assert isinstance(result, WeatherRecord)
    assert result.address == "Palo Alto, US"
    assert result.temp == "17°C"


def test_service_keeps_fetch_error_type(requests_mock):
    requests_mock.get(BASE_URL, status_code=401, json={"cod": 401, "message": "Invalid API key"})

    result = make_service().get_current(REQUEST)

    assert isinstance(result, FetchError)
    assert result.status_code == 401


def test_service_keeps_parse_error_type(requests_mock, payload):
    del payload["main"]
    requests_mock.get(BASE_URL, json=payload)

    result = make_service().get_current(REQUEST)

    assert isinstance(result, ParseError)
    assert not isinstance(result, FetchError)


def test_service_transport_failure_is_a_value(requests_mock):
    requests_mock.get(BASE_URL, exc=requests.exceptions.ConnectionError)

    result = make_service().get_current(REQUEST)

    assert isinstance(result, WeatherError)


def test_service_requests_are_independent(requests_mock, payload):
    other = json.loads(json.dumps(payload))
    other["name"] = "Reno"
    other["sys"]["country"] = "US"
    requests_mock.get(BASE_URL, [{"json": payload}, {"json": other}])
    service = make_service()

    first = service.get_current(REQUEST)
    second = service.get_current(WeatherRequest(location="Reno", units="metric", api_key="secret"))

    assert first.address == "Palo Alto, US"
    assert second.address == "Reno, US"
    assert first is not second


def test_submit_resolves_to_typed_result(requests_mock, payload):
    requests_mock.get(BASE_URL, json=payload)

    with make_service() as service:
        future = service.submit(REQUEST)
        result = future.result(timeout=5)

    assert isinstance(result, WeatherRecord)
    assert result.weather_description == "scattered clouds"


def test_submit_failure_resolves_to_error(requests_mock):
    requests_mock.get(BASE_URL, text="")

    with make_service() as service:
        result = service.submit(REQUEST).result(timeout=5)

    assert isinstance(result, ParseError)


def test_close_without_submit_is_noop():
    service = make_service()
    service.close()
    service.close()


def _warnings(caplog):
    return [record for record in caplog.records if record.levelno >= logging.WARNING]


def test_fetch_failure_is_logged_once(requests_mock, caplog):
    caplog.set_level(logging.DEBUG)
    requests_mock.get(BASE_URL, status_code=500, text="boom")

    make_service().get_current(REQUEST)

    assert len(_warnings(caplog)) == 1


def test_parse_failure_is_logged_once(requests_mock, caplog):
    caplog.set_level(logging.DEBUG)
    requests_mock.get(BASE_URL, text="not json")

    make_service().get_current(REQUEST)

    assert len(_warnings(caplog)) == 1
