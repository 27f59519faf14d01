from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import requests

from cityweather.entities import WeatherRequest
from cityweather.errors import FetchError
from cityweather.providers.base import RequestConfig
from cityweather.providers.openweathermap import OpenWeatherMapFetcher, build_query


BASE_URL = "https://owm.test/data/2.5/weather"


def make_request(location: str = "palo alto,ca") -> WeatherRequest:
    return WeatherRequest(location=location, units="metric", api_key="secret")


def test_build_query_appends_country_qualifier():
    assert build_query(make_request("Palo Alto")) == {
        "q": "Palo Alto,us",
        "units": "metric",
        "appid": "secret",
    }


def test_fetch_returns_raw_body(requests_mock):
    requests_mock.get(BASE_URL, text='{"anything": true}')
    fetcher = OpenWeatherMapFetcher(base_url=BASE_URL)

    body = fetcher.fetch(make_request())

    assert body == '{"anything": true}'
    assert requests_mock.call_count == 1


def test_fetch_encodes_query_parameters(requests_mock):
    requests_mock.get(BASE_URL, text="{}")
    fetcher = OpenWeatherMapFetcher(base_url=BASE_URL)

    fetcher.fetch(make_request("San José & Co"))

    query = parse_qs(urlsplit(requests_mock.last_request.url).query)
    assert query == {
        "q": ["San José & Co,us"],
        "units": ["metric"],
        "appid": ["secret"],
    }
    assert " " not in requests_mock.last_request.url


def test_fetch_does_not_validate_body(requests_mock):
    requests_mock.get(BASE_URL, text="<html>maintenance</html>")
    fetcher = OpenWeatherMapFetcher(base_url=BASE_URL)

    assert fetcher.fetch(make_request()) == "<html>maintenance</html>"


def test_fetch_uses_configured_timeout(requests_mock):
    requests_mock.get(BASE_URL, text="{}")
    fetcher = OpenWeatherMapFetcher(base_url=BASE_URL, request_config=RequestConfig(timeout=2.5))

    fetcher.fetch(make_request())

    assert requests_mock.last_request.timeout == 2.5


def test_fetch_http_error_returns_fetch_error(requests_mock):
    requests_mock.get(BASE_URL, status_code=404, json={"cod": "404", "message": "city not found"})
    fetcher = OpenWeatherMapFetcher(base_url=BASE_URL)

    result = fetcher.fetch(make_request("Atlantis"))

    assert isinstance(result, FetchError)
    assert result.status_code == 404


def test_fetch_server_error_is_not_retried(requests_mock):
    requests_mock.get(BASE_URL, status_code=503, text="unavailable")
    fetcher = OpenWeatherMapFetcher(base_url=BASE_URL)

    result = fetcher.fetch(make_request())

    assert isinstance(result, FetchError)
    assert requests_mock.call_count == 1


def test_fetch_timeout_returns_fetch_error(requests_mock):
    requests_mock.get(BASE_URL, exc=requests.exceptions.ConnectTimeout)
    fetcher = OpenWeatherMapFetcher(base_url=BASE_URL)

    result = fetcher.fetch(make_request())

    assert isinstance(result, FetchError)
    assert str(result) == "timeout"
    assert result.status_code is None


def test_fetch_connection_error_returns_fetch_error(requests_mock):
    requests_mock.get(BASE_URL, exc=requests.exceptions.ConnectionError)
    fetcher = OpenWeatherMapFetcher(base_url=BASE_URL)

    result = fetcher.fetch(make_request())

    assert isinstance(result, FetchError)
    assert str(result) == "request failed"


def test_default_endpoint():
    assert OpenWeatherMapFetcher().base_url == "https://api.openweathermap.org/data/2.5/weather"


def test_request_repr_hides_api_key():
    assert "secret" not in repr(make_request())
