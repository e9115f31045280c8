from __future__ import annotations

import json

import pytest
import requests

from garden_weather.providers.base import QuotaExceeded, TransportFailure
from garden_weather.providers.worldweatheronline import WorldWeatherOnlineTransport
from weather_fixtures import make_payload


WWO_URL = "https://api.worldweatheronline.com/premium/v1/weather.ashx"


@pytest.fixture
def transport() -> WorldWeatherOnlineTransport:
    return WorldWeatherOnlineTransport(api_key="secret")


def test_current_weather_request_parameters(requests_mock, transport) -> None:
    requests_mock.get(WWO_URL, text=json.dumps(make_payload()))

    payload = transport.fetch_current("London")

    assert json.loads(payload)["data"]["nearest_area"][0]["areaName"][0]["value"] == "London"
    query = requests_mock.last_request.qs
    assert query["q"] == ["london"]
    assert query["key"] == ["secret"]
    assert query["num_of_days"] == ["1"]
    assert query["aqi"] == ["yes"]
    assert query["alerts"] == ["yes"]
    assert "tp" not in query


def test_forecast_by_coordinates_formats_query(requests_mock, transport) -> None:
    requests_mock.get(WWO_URL, text="{}")

    transport.fetch_forecast_by_coordinates(51.5, -0.12, 5)

    query = requests_mock.last_request.qs
    assert query["q"] == ["51.500000,-0.120000"]
    assert query["num_of_days"] == ["5"]
    assert query["tp"] == ["24"]


@pytest.mark.parametrize("days", [0, 15, 20, -1])
def test_out_of_range_forecast_days_default_to_seven(requests_mock, transport, days) -> None:
    requests_mock.get(WWO_URL, text="{}")

    transport.fetch_forecast("Paris", days)

    assert requests_mock.last_request.qs["num_of_days"] == ["7"]


def test_quota_exceeded(requests_mock, transport) -> None:
    requests_mock.get(WWO_URL, status_code=429, text="quota exceeded")

    with pytest.raises(QuotaExceeded):
        transport.fetch_current("London")


def test_server_error_raises_transport_failure(requests_mock, transport) -> None:
    requests_mock.get(WWO_URL, status_code=500, text="server error")

    with pytest.raises(TransportFailure, match="HTTP 500"):
        transport.fetch_forecast("London", 3)


def test_timeout_raises_transport_failure(requests_mock, transport) -> None:
    requests_mock.get(WWO_URL, exc=requests.exceptions.ConnectTimeout)

    with pytest.raises(TransportFailure, match="timeout"):
        transport.fetch_current("London")


def test_connection_error_raises_transport_failure(requests_mock, transport) -> None:
    requests_mock.get(WWO_URL, exc=requests.exceptions.ConnectionError)

    with pytest.raises(TransportFailure, match="request failed"):
        transport.fetch_current_by_coordinates(10.0, 10.0)


def test_untrusted_base_url_is_refused(requests_mock) -> None:
    transport = WorldWeatherOnlineTransport(api_key="secret", base_url="https://evil.example.com/v1")

    with pytest.raises(TransportFailure, match="untrusted"):
        transport.fetch_current("London")

    assert requests_mock.call_count == 0


@pytest.mark.parametrize("location", ["", "   ", "<script>", "London; DROP", "http://x"])
def test_invalid_locations_are_rejected(transport, location) -> None:
    with pytest.raises(ValueError):
        transport.fetch_current(location)


@pytest.mark.parametrize("latitude, longitude", [(91.0, 0.0), (-90.5, 0.0), (0.0, 181.0)])
def test_invalid_coordinates_are_rejected(transport, latitude, longitude) -> None:
    with pytest.raises(ValueError):
        transport.fetch_current_by_coordinates(latitude, longitude)
