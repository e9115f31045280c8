"""Map raw World Weather Online payloads onto :class:`WeatherSnapshot`."""
from __future__ import annotations

import json
import logging
import math
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..conditions import AirQuality, air_quality_from, cloud_type_from, precipitation_type_from
from ..config import ThresholdConfig
from ..entities import ForecastItem, WeatherSnapshot
from ..providers.base import RawPayload


logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 20.0
DEFAULT_HUMIDITY = 70.0
DEFAULT_WIND_SPEED = 10.0
DEFAULT_CLOUD_COVER = 30
DEFAULT_PRECIPITATION = 0.0
DEFAULT_UV_INDEX = 0.0
DATE_FORMAT = "%Y-%m-%d"
NO_SEVERE_WEATHER = "no severe weather"

AIR_QUALITY_MESSAGES: Dict[AirQuality, Tuple[str, ...]] = {
    AirQuality.GOOD: ("Air quality is good. Great day for outdoor gardening!",),
    AirQuality.MODERATE: (
        "Mild pollen and low-level particulates",
        "Moderate air quality. Sensitive individuals should take light precautions.",
    ),
    AirQuality.UNHEALTHY_SENSITIVE: ("May cause respiratory symptoms in sensitive individuals",),
    AirQuality.UNHEALTHY: ("Increased likelihood of adverse respiratory effects in general population",),
    AirQuality.VERY_UNHEALTHY: ("Significant respiratory effects can be expected in general population",),
    AirQuality.HAZARDOUS: ("Serious respiratory effects and health impacts for all",),
}

# (payload key, threshold attribute, warning)
POLLUTANT_WARNINGS = (
    ("pm2_5", "pm25_threshold", "High PM2.5 (fine particulate matter) levels"),
    ("pm10", "pm10_threshold", "High PM10 (coarse particulate matter) levels"),
    ("o3", "ozone_threshold", "High ozone levels"),
    ("no2", "no2_threshold", "High nitrogen dioxide levels"),
)


class DataUnavailable(RuntimeError):
    """Raised when a payload is unreadable or lacks current conditions."""


class WeatherNormalizer:
    """Turn a provider payload into a snapshot, defaulting bad fields."""

    def __init__(
        self,
        thresholds: Optional[ThresholdConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.thresholds = thresholds or ThresholdConfig()
        self._clock = clock or (lambda: datetime.now(tz=timezone.utc))
        self._log = logging.getLogger(self.__class__.__name__)

    def normalize(self, raw_payload: RawPayload, requested_days: int, fallback_location: str) -> WeatherSnapshot:
        data = self._load(raw_payload)
        current = self._current_condition(data)

        temperature = _parse_float(current.get("temp_C"), DEFAULT_TEMPERATURE, "temp_C")
        cloud_cover = _parse_int(current.get("cloudcover"), DEFAULT_CLOUD_COVER, "cloudcover")
        air_quality, air_hazards = self._air_quality(current.get("air_quality"))

        return WeatherSnapshot(
            location=self._location_name(data, fallback_location),
            timestamp=self._clock(),
            temperature=temperature,
            humidity=_parse_float(current.get("humidity"), DEFAULT_HUMIDITY, "humidity"),
            wind_speed=_parse_float(current.get("windspeedKmph"), DEFAULT_WIND_SPEED, "windspeedKmph"),
            wind_direction=str(current.get("winddir16Point") or ""),
            cloud_cover=cloud_cover,
            cloud_type=cloud_type_from(cloud_cover),
            precipitation=_parse_float(current.get("precipMM"), DEFAULT_PRECIPITATION, "precipMM"),
            precipitation_type=precipitation_type_from(temperature),
            uv_index=_parse_float(current.get("uvIndex"), DEFAULT_UV_INDEX, "uvIndex"),
            air_quality=air_quality,
            air_hazards=air_hazards,
            forecast=self._forecast(data, requested_days),
            weather_alert=self._weather_alert(data),
        )

    # Document shape -----------------------------------------------------
    def _load(self, raw_payload: RawPayload) -> Mapping[str, Any]:
        if isinstance(raw_payload, (bytes, bytearray)):
            try:
                raw_payload = raw_payload.decode("utf-8")
            except UnicodeDecodeError as exc:
                self._log.error("Payload is not valid UTF-8", exc_info=exc)
                raise DataUnavailable("weather payload is not valid UTF-8") from exc
        if isinstance(raw_payload, str):
            try:
                document = json.loads(raw_payload)
            except ValueError as exc:
                self._log.error("Failed to decode JSON", exc_info=exc)
                raise DataUnavailable("weather payload is not valid JSON") from exc
        else:
            document = raw_payload

        if not isinstance(document, Mapping):
            raise DataUnavailable("weather payload must be a JSON object")
        data = document.get("data")
        if not isinstance(data, Mapping):
            raise DataUnavailable("weather payload has no data block")
        errors = data.get("error")
        if errors:
            message = _first_value(errors, "msg") or "provider reported an error"
            self._log.error("Provider reported error: %s", message)
            raise DataUnavailable(message)
        return data

    def _current_condition(self, data: Mapping[str, Any]) -> Mapping[str, Any]:
        conditions = data.get("current_condition")
        if not isinstance(conditions, list) or not conditions:
            raise DataUnavailable("weather payload has no current conditions")
        current = conditions[0]
        if not isinstance(current, Mapping):
            raise DataUnavailable("current conditions are malformed")
        return current

    def _location_name(self, data: Mapping[str, Any], fallback_location: str) -> str:
        areas = data.get("nearest_area")
        if isinstance(areas, list) and areas and isinstance(areas[0], Mapping):
            name = _first_value(areas[0].get("areaName"))
            if name:
                return name
        return fallback_location

    # Air quality --------------------------------------------------------
    def _air_quality(self, block: Any) -> Tuple[AirQuality, Tuple[str, ...]]:
        if not isinstance(block, Mapping):
            return AirQuality.GOOD, ()

        raw_index = block.get("us-epa-index")
        epa_index = 1
        if raw_index is not None:
            try:
                epa_index = int(str(raw_index).strip())
            except ValueError:
                self._log.warning("Invalid EPA air quality index: %r", raw_index)
        air_quality = air_quality_from(epa_index)

        hazards: List[str] = list(AIR_QUALITY_MESSAGES[air_quality])
        for key, threshold_name, message in POLLUTANT_WARNINGS:
            raw_value = block.get(key)
            if raw_value is None or raw_value == "":
                continue
            value = _to_float(raw_value)
            if value is None:
                self._log.warning("Invalid %s value: %r", key, raw_value)
                continue
            if value > getattr(self.thresholds, threshold_name):
                hazards.append(message)
        return air_quality, tuple(hazards)

    # Forecast -----------------------------------------------------------
    def _forecast(self, data: Mapping[str, Any], requested_days: int) -> Tuple[ForecastItem, ...]:
        days = data.get("weather")
        if not isinstance(days, list) or not days:
            return ()
        alerts = tuple(self._alert_headlines(data))
        items: List[ForecastItem] = []
        for day in days[: max(requested_days, 0)]:
            if not isinstance(day, Mapping):
                self._log.error("Skipping malformed forecast day: %r", day)
                continue
            items.extend(self._hourly_items(day, alerts))
        return tuple(items)

    def _hourly_items(self, day: Mapping[str, Any], alerts: Tuple[str, ...]) -> List[ForecastItem]:
        hourly = day.get("hourly")
        if not isinstance(hourly, list) or not hourly:
            return []
        forecast_date = self._forecast_date(day.get("date"))

        items: List[ForecastItem] = []
        for entry in hourly:
            try:
                hour = int(str(entry["time"]).strip()) // 100
                forecast_time = datetime.combine(forecast_date, datetime.min.time()).replace(hour=hour)
            except (KeyError, TypeError, ValueError, OverflowError) as exc:
                self._log.error("Error parsing hourly forecast %r: %s", entry, exc)
                continue
            items.append(
                ForecastItem(
                    forecast_time=forecast_time,
                    temperature=_parse_float(entry.get("tempC"), DEFAULT_TEMPERATURE, "tempC"),
                    humidity=_parse_float(entry.get("humidity"), DEFAULT_HUMIDITY, "humidity"),
                    cloud_cover=_parse_int(entry.get("cloudcover"), DEFAULT_CLOUD_COVER, "cloudcover"),
                    precipitation=_parse_float(entry.get("precipMM"), DEFAULT_PRECIPITATION, "precipMM"),
                    conditions=_first_value(entry.get("weatherDesc")) or "",
                    alerts=alerts,
                )
            )
        return items

    def _forecast_date(self, value: Any) -> date:
        try:
            return datetime.strptime(str(value), DATE_FORMAT).date()
        except (TypeError, ValueError):
            self._log.error("Error parsing forecast date: %r", value)
            return self._clock().date()

    # Alerts -------------------------------------------------------------
    def _alerts(self, data: Mapping[str, Any]) -> List[Mapping[str, Any]]:
        block = data.get("alerts")
        if not isinstance(block, Mapping):
            return []
        raw_alerts = block.get("alert")
        if not isinstance(raw_alerts, list):
            return []
        alerts = [alert for alert in raw_alerts if isinstance(alert, Mapping)]
        for alert in alerts:
            text = f"{alert.get('headline') or ''} {alert.get('desc') or ''}".lower()
            if NO_SEVERE_WEATHER in text:
                return []
        return alerts

    def _alert_headlines(self, data: Mapping[str, Any]) -> List[str]:
        return [str(alert["headline"]) for alert in self._alerts(data) if alert.get("headline")]

    def _weather_alert(self, data: Mapping[str, Any]) -> Optional[str]:
        alerts = self._alerts(data)
        if not alerts:
            return None
        headline = alerts[0].get("headline")
        return str(headline) if headline else None


def _first_value(values: Any, key: str = "value") -> Optional[str]:
    """Return ``values[0][key]`` from the provider's ``[{"value": ...}]`` lists."""
    if not isinstance(values, list) or not values or not isinstance(values[0], Mapping):
        return None
    value = values[0].get(key)
    return str(value) if value else None


def _to_float(value: Any) -> Optional[float]:
    """Finite float for ``value``, or None when it cannot be represented as one."""
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return result if math.isfinite(result) else None


def _parse_float(value: Any, default: float, name: str) -> float:
    if value is None or value == "":
        return default
    result = _to_float(value)
    if result is None:
        logger.warning("Failed to parse %s value %r, using %s", name, value, default)
        return default
    return result


def _parse_int(value: Any, default: int, name: str) -> int:
    if value is None or value == "":
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        logger.warning("Failed to parse %s value %r, using %s", name, value, default)
        return default


__all__ = ["DataUnavailable", "WeatherNormalizer", "AIR_QUALITY_MESSAGES"]
