from __future__ import annotations

import pytest

from garden_weather.providers.base import TransportFailure
from weather_fixtures import FIXED_NOW, FakeTransport


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def failing_transport() -> FakeTransport:
    return FakeTransport(error=TransportFailure("HTTP 503"))
