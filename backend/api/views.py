"""REST API views for garden weather information."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Tuple

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from garden_weather.entities import ForecastItem, WeatherSnapshot
from garden_weather.providers.base import RequestConfig, TransportFailure
from garden_weather.providers.worldweatheronline import WorldWeatherOnlineTransport, validate_location
from garden_weather.services.normalizer import DataUnavailable
from garden_weather.services.weather import WeatherOrchestrator


logger = logging.getLogger(__name__)

DEFAULT_FORECAST_DAYS = 3


@lru_cache(maxsize=1)
def get_weather_orchestrator() -> WeatherOrchestrator:
    transport = WorldWeatherOnlineTransport(
        api_key=settings.WEATHER_API_KEY,
        base_url=settings.WEATHER_API_BASE_URL,
        request_config=RequestConfig(
            timeout=settings.WEATHER_API_TIMEOUT,
            retries=settings.WEATHER_API_RETRIES,
        ),
    )
    return WeatherOrchestrator(transport, settings.WEATHER_THRESHOLDS)


def serialize_snapshot(snapshot: WeatherSnapshot) -> Dict[str, Any]:
    timestamp = snapshot.timestamp.astimezone(settings.DEFAULT_TIMEZONE)
    return {
        "location": snapshot.location,
        "timestamp": timestamp.isoformat().replace("+00:00", "Z"),
        "temperature": snapshot.temperature,
        "temperatureUnit": snapshot.temperature_unit,
        "humidity": snapshot.humidity,
        "windSpeed": snapshot.wind_speed,
        "windSpeedUnit": snapshot.wind_speed_unit,
        "windDirection": snapshot.wind_direction,
        "cloudCover": snapshot.cloud_cover,
        "cloudType": snapshot.cloud_type.display_name,
        "precipitation": snapshot.precipitation,
        "precipitationType": snapshot.precipitation_type.display_name,
        "uvIndex": snapshot.uv_index,
        "airQualityIndex": snapshot.air_quality.display_name,
        "airHazards": list(snapshot.air_hazards),
        "plantHazards": list(snapshot.plant_hazards),
        "forecast": [_serialize_forecast_item(item) for item in snapshot.forecast],
        "weatherAlert": snapshot.weather_alert,
        "gardeningAdvice": snapshot.gardening_advice,
    }


def _serialize_forecast_item(item: ForecastItem) -> Dict[str, Any]:
    return {
        "forecastTime": item.forecast_time.isoformat(),
        "temperature": item.temperature,
        "humidity": item.humidity,
        "cloudCover": item.cloud_cover,
        "precipitation": item.precipitation,
        "conditions": item.conditions,
        "alerts": list(item.alerts),
    }


def _parse_coordinate(raw_value: Optional[str], name: str) -> float:
    if raw_value is None:
        raise ValueError(f"{name} query parameter is required")
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a valid floating point number") from exc
    if name == "lat" and not -90.0 <= value <= 90.0:
        raise ValueError("Latitude must be between -90 and 90")
    if name == "lon" and not -180.0 <= value <= 180.0:
        raise ValueError("Longitude must be between -180 and 180")
    return value


def _parse_coordinates(params: Mapping[str, str]) -> Tuple[float, float]:
    return _parse_coordinate(params.get("lat"), "lat"), _parse_coordinate(params.get("lon"), "lon")


def _parse_days(params: Mapping[str, str]) -> int:
    raw_value = params.get("days")
    if raw_value is None or raw_value == "":
        return DEFAULT_FORECAST_DAYS
    try:
        return int(raw_value)
    except ValueError as exc:
        raise ValueError("days must be an integer") from exc


class WeatherQueryView(APIView):
    """Shared request handling; subclasses implement :meth:`query`."""

    permission_classes = [AllowAny]

    def query(self, params: Mapping[str, str], orchestrator: WeatherOrchestrator) -> Any:
        raise NotImplementedError

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the requested weather view for the query parameters."""
        try:
            payload = self.query(request.query_params, get_weather_orchestrator())
        except ValueError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except TransportFailure as exc:
            logger.warning("Weather provider failed: %s", exc)
            return Response({"detail": "Failed to retrieve weather data"}, status=status.HTTP_502_BAD_GATEWAY)
        except DataUnavailable as exc:
            logger.warning("Weather data unavailable: %s", exc)
            return Response({"detail": "Weather data unavailable"}, status=status.HTTP_502_BAD_GATEWAY)
        return Response(payload, status=status.HTTP_200_OK)


class CurrentWeatherView(WeatherQueryView):
    def query(self, params, orchestrator):
        location = validate_location(params.get("location"))
        return serialize_snapshot(orchestrator.get_current_weather(location))


class CurrentWeatherByCoordinatesView(WeatherQueryView):
    def query(self, params, orchestrator):
        latitude, longitude = _parse_coordinates(params)
        return serialize_snapshot(orchestrator.get_current_weather_by_coordinates(latitude, longitude))


class ForecastView(WeatherQueryView):
    def query(self, params, orchestrator):
        location = validate_location(params.get("location"))
        return serialize_snapshot(orchestrator.get_forecast(location, _parse_days(params)))


class ForecastByCoordinatesView(WeatherQueryView):
    def query(self, params, orchestrator):
        latitude, longitude = _parse_coordinates(params)
        days = _parse_days(params)
        return serialize_snapshot(orchestrator.get_forecast_by_coordinates(latitude, longitude, days))


class GardenWeatherView(WeatherQueryView):
    def query(self, params, orchestrator):
        location = validate_location(params.get("location"))
        snapshot = orchestrator.get_garden_weather(location, params.get("gardenPlanId"))
        return serialize_snapshot(snapshot)


class GardenWeatherByCoordinatesView(WeatherQueryView):
    def query(self, params, orchestrator):
        latitude, longitude = _parse_coordinates(params)
        snapshot = orchestrator.get_garden_weather_by_coordinates(latitude, longitude, params.get("gardenPlanId"))
        return serialize_snapshot(snapshot)


class PlantHazardsView(WeatherQueryView):
    """Plant hazards derived from current conditions."""

    def query(self, params, orchestrator):
        snapshot = orchestrator.get_current_weather(validate_location(params.get("location")))
        return {"location": snapshot.location, "plantHazards": list(snapshot.plant_hazards)}


class PlantHazardsByCoordinatesView(WeatherQueryView):
    def query(self, params, orchestrator):
        latitude, longitude = _parse_coordinates(params)
        snapshot = orchestrator.get_current_weather_by_coordinates(latitude, longitude)
        return {"location": snapshot.location, "plantHazards": list(snapshot.plant_hazards)}
