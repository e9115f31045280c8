from __future__ import annotations

import pytest

from garden_weather.config import ThresholdConfig
from garden_weather.services.advice import (
    DRAINAGE_ADVICE,
    FAVORABLE_ADVICE,
    FUNGAL_RISK_ADVICE,
    HEAT_ADVICE,
    AdviceSynthesizer,
)
from weather_fixtures import make_snapshot


THRESHOLDS = ThresholdConfig()


@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({"humidity": 81.0, "temperature": 35.0, "precipitation": 20.0}, FUNGAL_RISK_ADVICE),
        ({"humidity": 81.0}, FUNGAL_RISK_ADVICE),
        ({"humidity": 80.0, "temperature": 30.5, "precipitation": 20.0}, HEAT_ADVICE),
        ({"temperature": 30.0, "precipitation": 10.5}, DRAINAGE_ADVICE),
        ({"temperature": 30.0, "precipitation": 10.0}, FAVORABLE_ADVICE),
    ],
)
def test_advice_priority(overrides, expected) -> None:
    assert AdviceSynthesizer().synthesize(make_snapshot(**overrides), THRESHOLDS) == expected


def test_advice_uses_configured_thresholds() -> None:
    thresholds = ThresholdConfig(high_humidity_advice=40.0)

    assert AdviceSynthesizer().synthesize(make_snapshot(humidity=45.0), thresholds) == FUNGAL_RISK_ADVICE
