from __future__ import annotations

import pytest

from garden_weather.conditions import (
    AirQuality,
    CloudType,
    PrecipitationType,
    air_quality_from,
    cloud_type_from,
    precipitation_type_from,
)


@pytest.mark.parametrize(
    "cloud_cover, expected",
    [
        (0, CloudType.CLEAR),
        (19, CloudType.CLEAR),
        (20, CloudType.CUMULUS),
        (49, CloudType.CUMULUS),
        (50, CloudType.STRATOCUMULUS),
        (79, CloudType.STRATOCUMULUS),
        (80, CloudType.STRATUS),
        (100, CloudType.STRATUS),
    ],
)
def test_cloud_type_boundaries(cloud_cover: int, expected: CloudType) -> None:
    assert cloud_type_from(cloud_cover) is expected


def test_cloud_type_clamps_out_of_range_values() -> None:
    assert cloud_type_from(-15) is CloudType.CLEAR
    assert cloud_type_from(250) is CloudType.STRATUS


def test_every_percentage_has_a_cloud_type() -> None:
    assert {cloud_type_from(value) for value in range(0, 101)} == set(CloudType)


@pytest.mark.parametrize(
    "temperature, expected",
    [
        (-0.1, PrecipitationType.SNOW),
        (0.0, PrecipitationType.SLEET),
        (3.9, PrecipitationType.SLEET),
        (4.0, PrecipitationType.RAIN),
        (34.0, PrecipitationType.RAIN),
    ],
)
def test_precipitation_type_from_temperature(temperature: float, expected: PrecipitationType) -> None:
    assert precipitation_type_from(temperature) is expected


def test_air_quality_maps_known_indexes() -> None:
    assert [air_quality_from(index) for index in range(1, 7)] == [
        AirQuality.GOOD,
        AirQuality.MODERATE,
        AirQuality.UNHEALTHY_SENSITIVE,
        AirQuality.UNHEALTHY,
        AirQuality.VERY_UNHEALTHY,
        AirQuality.HAZARDOUS,
    ]


@pytest.mark.parametrize("index", [-3, 0, 7, 42])
def test_unknown_air_quality_index_fails_toward_moderate(index: int) -> None:
    assert air_quality_from(index) is AirQuality.MODERATE


def test_air_quality_display_names() -> None:
    assert AirQuality.UNHEALTHY_SENSITIVE.display_name == "Unhealthy for Sensitive Groups"
    assert AirQuality.HAZARDOUS.epa_index == 6
    assert AirQuality.UNHEALTHY.is_worse_than(AirQuality.MODERATE)
    assert not AirQuality.MODERATE.is_worse_than(AirQuality.MODERATE)
