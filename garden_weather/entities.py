from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from .conditions import AirQuality, CloudType, PrecipitationType


@dataclass(frozen=True)
class ForecastItem:
    """A single hourly forecast entry.

    ``forecast_time`` is naive and expressed in the forecast location's local
    time, as reported by the provider.
    """

    forecast_time: datetime
    temperature: float
    humidity: float
    cloud_cover: int
    precipitation: float
    conditions: str
    alerts: Tuple[str, ...] = ()


@dataclass(frozen=True)
class WeatherSnapshot:
    """Normalized weather for one query.

    Units:
    - temperature in Celsius
    - wind speed in kilometres per hour
    - precipitation in millimetres (mm)

    ``plant_hazards`` and ``gardening_advice`` are filled in by the advisory
    services; enrichment always produces a new snapshot.
    """

    location: str
    timestamp: datetime
    temperature: float
    humidity: float
    wind_speed: float
    wind_direction: str
    cloud_cover: int
    cloud_type: CloudType
    precipitation: float
    precipitation_type: PrecipitationType
    uv_index: float
    air_quality: AirQuality
    air_hazards: Tuple[str, ...] = ()
    plant_hazards: Tuple[str, ...] = ()
    forecast: Tuple[ForecastItem, ...] = ()
    weather_alert: Optional[str] = None
    gardening_advice: Optional[str] = None
    temperature_unit: str = "Celsius"
    wind_speed_unit: str = "km/h"


__all__ = ["ForecastItem", "WeatherSnapshot"]
