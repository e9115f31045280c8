from __future__ import annotations

import math

import pytest

from garden_weather.config import ConfigurationError, ThresholdConfig


def test_defaults_match_documented_thresholds() -> None:
    config = ThresholdConfig()

    assert config.garden_weather_forecast_days == 3
    assert config.heat_stress_temperature == 28.0
    assert config.frost_risk_temperature == 5.0
    assert config.high_humidity == 85.0
    assert config.high_uv_index == 7.0
    assert config.pm25_threshold == 35.0


def test_from_env_reads_prefixed_overrides() -> None:
    config = ThresholdConfig.from_env(
        {
            "WEATHER_THRESHOLDS_HEAT_STRESS_TEMPERATURE": "31.5",
            "WEATHER_THRESHOLDS_GARDEN_WEATHER_FORECAST_DAYS": "5",
            "WEATHER_THRESHOLDS_HIGH_HUMIDITY": "",
            "UNRELATED": "x",
        }
    )

    assert config.heat_stress_temperature == 31.5
    assert config.garden_weather_forecast_days == 5
    assert config.high_humidity == 85.0


def test_from_env_rejects_non_numeric_values() -> None:
    with pytest.raises(ConfigurationError, match="WEATHER_THRESHOLDS_FROST_RISK_TEMPERATURE"):
        ThresholdConfig.from_env({"WEATHER_THRESHOLDS_FROST_RISK_TEMPERATURE": "chilly"})


def test_descending_temperature_bands_are_rejected() -> None:
    with pytest.raises(ConfigurationError, match="ideal_temperature_max"):
        ThresholdConfig(cold_temperature=20.0, ideal_temperature_max=18.0)


def test_uv_bands_include_the_high_uv_rule_threshold() -> None:
    with pytest.raises(ConfigurationError, match="high_uv_index"):
        ThresholdConfig(moderate_uv_index=8.0, high_uv_index=7.0)


def test_equal_band_boundaries_are_allowed() -> None:
    config = ThresholdConfig(very_dry_humidity=50.0, comfortable_humidity_max=50.0)

    assert config.very_dry_humidity == config.comfortable_humidity_max


def test_thresholds_of_different_rules_are_independent() -> None:
    config = ThresholdConfig(heat_stress_temperature=2.0, frost_risk_temperature=10.0)

    assert config.heat_stress_temperature < config.frost_risk_temperature


@pytest.mark.parametrize("value", [math.inf, math.nan, "28"])
def test_non_finite_or_non_numeric_thresholds_are_rejected(value) -> None:
    with pytest.raises(ConfigurationError):
        ThresholdConfig(heat_stress_temperature=value)


def test_garden_horizon_must_be_positive() -> None:
    with pytest.raises(ConfigurationError):
        ThresholdConfig(garden_weather_forecast_days=0)


@pytest.mark.parametrize("value", [2.5, 3.0])
def test_garden_horizon_must_be_an_integer(value) -> None:
    with pytest.raises(ConfigurationError, match="integer"):
        ThresholdConfig(garden_weather_forecast_days=value)
