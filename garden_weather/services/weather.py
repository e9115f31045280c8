from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from ..config import ThresholdConfig
from ..entities import WeatherSnapshot
from ..providers.base import RawPayload, TransportFailure, WeatherTransport, format_coordinates
from .advice import AdviceSynthesizer
from .hazards import HazardRuleEngine
from .normalizer import DataUnavailable, WeatherNormalizer


class WeatherOrchestrator:
    CURRENT_DAYS = 1

    def __init__(
        self,
        transport: WeatherTransport,
        thresholds: Optional[ThresholdConfig] = None,
        *,
        normalizer: Optional[WeatherNormalizer] = None,
        hazards: Optional[HazardRuleEngine] = None,
        advisor: Optional[AdviceSynthesizer] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.transport = transport
        self.thresholds = thresholds or ThresholdConfig()
        self.normalizer = normalizer or WeatherNormalizer(self.thresholds)
        self.hazards = hazards or HazardRuleEngine()
        self.advisor = advisor or AdviceSynthesizer()
        self._log = logger or logging.getLogger(self.__class__.__name__)

    @property
    def garden_days(self) -> int:
        return self.thresholds.garden_weather_forecast_days

    # Public API ---------------------------------------------------------
    def get_current_weather(self, location: str) -> WeatherSnapshot:
        self._log.info("Fetching current weather for location: %s", location)
        return self._query(lambda: self.transport.fetch_current(location), self.CURRENT_DAYS, location)

    def get_current_weather_by_coordinates(self, latitude: float, longitude: float) -> WeatherSnapshot:
        self._log.info("Fetching current weather for coordinates: %s, %s", latitude, longitude)
        return self._query(
            lambda: self.transport.fetch_current_by_coordinates(latitude, longitude),
            self.CURRENT_DAYS,
            format_coordinates(latitude, longitude),
        )

    def get_forecast(self, location: str, days: int) -> WeatherSnapshot:
        self._log.info("Fetching weather forecast for location: %s for %s days", location, days)
        return self._query(lambda: self.transport.fetch_forecast(location, days), days, location)

    def get_forecast_by_coordinates(self, latitude: float, longitude: float, days: int) -> WeatherSnapshot:
        self._log.info("Fetching weather forecast for coordinates: %s, %s for %s days", latitude, longitude, days)
        return self._query(
            lambda: self.transport.fetch_forecast_by_coordinates(latitude, longitude, days),
            days,
            format_coordinates(latitude, longitude),
        )

    def get_garden_weather(self, location: str, garden_plan_id: Optional[str] = None) -> WeatherSnapshot:
        self._log.info(
            "Fetching garden weather for location: %s, garden plan ID: %s",
            location,
            garden_plan_id or "not provided",
        )
        days = self.garden_days
        return self._query(lambda: self.transport.fetch_forecast(location, days), days, location, advise=True)

    def get_garden_weather_by_coordinates(
        self, latitude: float, longitude: float, garden_plan_id: Optional[str] = None
    ) -> WeatherSnapshot:
        self._log.info(
            "Fetching garden weather for coordinates: %s, %s, garden plan ID: %s",
            latitude,
            longitude,
            garden_plan_id or "not provided",
        )
        days = self.garden_days
        return self._query(
            lambda: self.transport.fetch_forecast_by_coordinates(latitude, longitude, days),
            days,
            format_coordinates(latitude, longitude),
            advise=True,
        )

    # Helpers ------------------------------------------------------------
    def _query(
        self,
        fetch: Callable[[], RawPayload],
        days: int,
        location: str,
        *,
        advise: bool = False,
    ) -> WeatherSnapshot:
        try:
            payload = fetch()
        except TransportFailure as exc:
            self._log.error("Error fetching weather for %s: %s", location, exc)
            raise
        try:
            snapshot = self.normalizer.normalize(payload, days, location)
        except DataUnavailable as exc:
            self._log.error("Weather data unavailable for %s: %s", location, exc)
            raise

        snapshot = replace(snapshot, plant_hazards=tuple(self.hazards.evaluate(snapshot, self.thresholds)))
        if advise:
            snapshot = replace(snapshot, gardening_advice=self.advisor.synthesize(snapshot, self.thresholds))
        return snapshot


__all__ = ["WeatherOrchestrator"]
