"""Semantic classification of raw weather measurements."""
from __future__ import annotations

from enum import Enum


class CloudType(Enum):
    CLEAR = "Clear"
    CUMULUS = "Cumulus"
    STRATOCUMULUS = "Stratocumulus"
    STRATUS = "Stratus"

    @property
    def display_name(self) -> str:
        return self.value


class PrecipitationType(Enum):
    SNOW = "Snow"
    SLEET = "Sleet"
    RAIN = "Rain"

    @property
    def display_name(self) -> str:
        return self.value


class AirQuality(Enum):
    """Air quality tiers keyed by the provider's US EPA index (1-6)."""

    GOOD = 1
    MODERATE = 2
    UNHEALTHY_SENSITIVE = 3
    UNHEALTHY = 4
    VERY_UNHEALTHY = 5
    HAZARDOUS = 6

    @property
    def epa_index(self) -> int:
        return self.value

    @property
    def display_name(self) -> str:
        return _AIR_QUALITY_NAMES[self]

    def is_worse_than(self, other: "AirQuality") -> bool:
        return self.epa_index > other.epa_index


_AIR_QUALITY_NAMES = {
    AirQuality.GOOD: "Good",
    AirQuality.MODERATE: "Moderate",
    AirQuality.UNHEALTHY_SENSITIVE: "Unhealthy for Sensitive Groups",
    AirQuality.UNHEALTHY: "Unhealthy",
    AirQuality.VERY_UNHEALTHY: "Very Unhealthy",
    AirQuality.HAZARDOUS: "Hazardous",
}

_AIR_QUALITY_BY_INDEX = {quality.epa_index: quality for quality in AirQuality}


def cloud_type_from(cloud_cover: int) -> CloudType:
    """Bucket a cloud-cover percentage; out-of-range values land in the edge buckets."""
    if cloud_cover < 20:
        return CloudType.CLEAR
    if cloud_cover < 50:
        return CloudType.CUMULUS
    if cloud_cover < 80:
        return CloudType.STRATOCUMULUS
    return CloudType.STRATUS


def precipitation_type_from(temperature_c: float) -> PrecipitationType:
    if temperature_c < 0:
        return PrecipitationType.SNOW
    if temperature_c < 4:
        return PrecipitationType.SLEET
    return PrecipitationType.RAIN


def air_quality_from(epa_index: int) -> AirQuality:
    """Map an EPA index to a tier. Unknown indexes map to MODERATE, not GOOD."""
    return _AIR_QUALITY_BY_INDEX.get(epa_index, AirQuality.MODERATE)


__all__ = [
    "AirQuality",
    "CloudType",
    "PrecipitationType",
    "air_quality_from",
    "cloud_type_from",
    "precipitation_type_from",
]
