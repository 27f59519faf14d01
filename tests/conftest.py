from __future__ import annotations

import copy

import pytest

from requests_mock import Mocker


PALO_ALTO_PAYLOAD = {
    "main": {
        "temp": "17",
        "temp_min": "10",
        "temp_max": "20",
        "pressure": "1016",
        "humidity": "75",
        "feels_like": "16",
    },
    "sys": {"sunrise": 1650867640, "sunset": 1650911222, "country": "US"},
    "wind": {"speed": "3"},
    "weather": [{"description": "scattered clouds", "icon": "03d"}],
    "dt": 1650867640,
    "name": "Palo Alto",
}


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def payload():
    return copy.deepcopy(PALO_ALTO_PAYLOAD)
