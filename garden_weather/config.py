"""Threshold configuration for the garden advisory rules."""
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional, Sequence, Tuple


logger = logging.getLogger(__name__)

ENV_PREFIX = "WEATHER_THRESHOLDS_"


class ConfigurationError(ValueError):
    """Raised when thresholds are missing, non-numeric or inconsistent."""


@dataclass(frozen=True)
class ThresholdConfig:
    """Process-wide thresholds, validated on construction."""

    garden_weather_forecast_days: int = 3

    # Air quality
    pm25_threshold: float = 35.0
    pm10_threshold: float = 150.0
    ozone_threshold: float = 100.0
    no2_threshold: float = 100.0

    # Plant hazards
    heat_stress_temperature: float = 28.0
    frost_risk_temperature: float = 5.0
    high_humidity: float = 85.0
    high_uv_index: float = 7.0
    strong_wind_speed: float = 20.0
    heavy_rain_precipitation: float = 15.0

    # Gardening advice
    high_humidity_advice: float = 80.0
    high_temperature_advice: float = 30.0
    heavy_rain_advice: float = 10.0

    # Temperature bands
    cold_temperature: float = 15.0
    ideal_temperature_max: float = 32.0
    high_heat_temperature: float = 36.0

    # Humidity bands
    very_dry_humidity: float = 30.0
    comfortable_humidity_max: float = 70.0

    # UV bands, topped by high_uv_index
    low_uv_index: float = 2.0
    moderate_uv_index: float = 5.0

    def __post_init__(self) -> None:
        for field_ in fields(self):
            value = getattr(self, field_.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{field_.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigurationError(f"{field_.name} must be finite, got {value!r}")
        if not isinstance(self.garden_weather_forecast_days, int):
            raise ConfigurationError(
                f"garden_weather_forecast_days must be an integer, got {self.garden_weather_forecast_days!r}"
            )
        if self.garden_weather_forecast_days < 1:
            raise ConfigurationError("garden_weather_forecast_days must be at least 1")
        for names in self.bands():
            _check_ascending(self, names)

    @staticmethod
    def bands() -> Sequence[Tuple[str, ...]]:
        """Boundary names per banded category, lowest first."""
        return (
            ("cold_temperature", "ideal_temperature_max", "high_heat_temperature"),
            ("very_dry_humidity", "comfortable_humidity_max"),
            ("low_uv_index", "moderate_uv_index", "high_uv_index"),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ThresholdConfig":
        """Build thresholds from ``WEATHER_THRESHOLDS_<FIELD>`` variables."""
        environ = os.environ if environ is None else environ
        overrides = {}
        for field_ in fields(cls):
            name = ENV_PREFIX + field_.name.upper()
            raw = environ.get(name)
            if raw is None or raw.strip() == "":
                continue
            try:
                if field_.name == "garden_weather_forecast_days":
                    overrides[field_.name] = int(raw)
                else:
                    overrides[field_.name] = float(raw)
            except ValueError as exc:
                raise ConfigurationError(f"{name} must be numeric, got {raw!r}") from exc
        if overrides:
            logger.info("Loaded threshold overrides: %s", sorted(overrides))
        return cls(**overrides)


def _check_ascending(config: ThresholdConfig, names: Sequence[str]) -> None:
    for lower, upper in zip(names, names[1:]):
        if getattr(config, lower) > getattr(config, upper):
            raise ConfigurationError(
                f"{lower} ({getattr(config, lower)}) must not exceed {upper} ({getattr(config, upper)})"
            )


__all__ = ["ConfigurationError", "ThresholdConfig", "ENV_PREFIX"]
