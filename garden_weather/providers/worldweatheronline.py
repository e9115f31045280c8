from __future__ import annotations

import logging
from typing import Dict, Optional
from urllib.parse import urlparse

from .base import HttpTransport, TransportFailure, format_coordinates


MIN_FORECAST_DAYS = 1
MAX_FORECAST_DAYS = 14
DEFAULT_FORECAST_DAYS = 7

TRUSTED_DOMAINS = ("worldweatheronline.com", "wttr.in")
_FORBIDDEN_LOCATION_TOKENS = ("<", ">", '"', "'", ";", "--", "://")


def validate_location(location: Optional[str]) -> str:
    if location is None or not location.strip():
        raise ValueError("Location parameter is required")
    if any(token in location for token in _FORBIDDEN_LOCATION_TOKENS):
        raise ValueError("Invalid characters in location parameter")
    return location


class WorldWeatherOnlineTransport(HttpTransport):
    """Raw payload access to the World Weather Online premium API."""

    base_url = "https://api.worldweatheronline.com/premium/v1"
    endpoint = "/weather.ashx"

    def __init__(self, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = (base_url or self.base_url).rstrip("/")
        self._log = logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def fetch_current(self, location: str) -> str:
        return self._fetch(validate_location(location), days=1, forecast=False)

    def fetch_current_by_coordinates(self, latitude: float, longitude: float) -> str:
        return self._fetch(format_coordinates(latitude, longitude), days=1, forecast=False)

    def fetch_forecast(self, location: str, days: int) -> str:
        return self._fetch(validate_location(location), days=self._coerce_days(days), forecast=True)

    def fetch_forecast_by_coordinates(self, latitude: float, longitude: float, days: int) -> str:
        query = format_coordinates(latitude, longitude)
        return self._fetch(query, days=self._coerce_days(days), forecast=True)

    # Helpers ------------------------------------------------------------
    def _coerce_days(self, days: int) -> int:
        if MIN_FORECAST_DAYS <= days <= MAX_FORECAST_DAYS:
            return days
        self._log.warning("Invalid days parameter: %s. Using default value of %s", days, DEFAULT_FORECAST_DAYS)
        return DEFAULT_FORECAST_DAYS

    def _fetch(self, query: str, *, days: int, forecast: bool) -> str:
        url = self.base_url + self.endpoint
        self._ensure_trusted(url)
        params: Dict[str, str] = {
            "key": self.api_key,
            "q": query,
            "format": "json",
            "num_of_days": str(days),
            "fx": "yes",
            "cc": "yes",
            "aqi": "yes",
            "alerts": "yes",
        }
        if forecast:
            params["tp"] = "24"
        self._log.debug("Requesting %s for %s (%s days)", url, query, days)
        response = self._request("GET", url, params=params)
        return response.text

    def _ensure_trusted(self, url: str) -> None:
        host = urlparse(url).hostname
        if not host or not any(host == domain or host.endswith("." + domain) for domain in TRUSTED_DOMAINS):
            self._log.error("Refusing to call untrusted host %s", host)
            raise TransportFailure("untrusted domain for external API")


__all__ = [
    "WorldWeatherOnlineTransport",
    "format_coordinates",
    "validate_location",
    "DEFAULT_FORECAST_DAYS",
]
