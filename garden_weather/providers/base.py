from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Protocol, Union

import requests
from requests import Response
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


logger = logging.getLogger(__name__)

RawPayload = Union[str, bytes, Mapping[str, Any]]


class TransportFailure(RuntimeError):
    """Raised when the weather provider cannot be reached or rejects the call."""


class QuotaExceeded(TransportFailure):
    """Raised when a provider reports a quota/usage limit issue."""


def format_coordinates(latitude: float, longitude: float) -> str:
    """Render a coordinate pair as the `lat,lon` query string providers expect."""
    if not -90.0 <= latitude <= 90.0:
        raise ValueError("Latitude must be between -90 and 90")
    if not -180.0 <= longitude <= 180.0:
        raise ValueError("Longitude must be between -180 and 180")
    return f"{latitude:f},{longitude:f}"


class WeatherTransport(Protocol):
    """Fetches raw provider payloads for the weather engine."""

    def fetch_current(self, location: str) -> RawPayload:
        ...

    def fetch_current_by_coordinates(self, latitude: float, longitude: float) -> RawPayload:
        ...

    def fetch_forecast(self, location: str, days: int) -> RawPayload:
        ...

    def fetch_forecast_by_coordinates(self, latitude: float, longitude: float, days: int) -> RawPayload:
        ...


@dataclass
class RequestConfig:
    timeout: float = 5.0
    retries: int = 2
    backoff_factor: float = 0.3
    status_forcelist: Iterable[int] = (429, 500, 502, 503, 504)


class HttpTransport:
    """Base class that adds retry/timeouts for HTTP transports."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or self._build_session(self.request_config)
        self._log = logging.getLogger(self.__class__.__name__)

    def _build_session(self, config: RequestConfig) -> requests.Session:
        session = requests.Session()
        retry = Retry(
            total=config.retries,
            backoff_factor=config.backoff_factor,
            status_forcelist=tuple(config.status_forcelist),
            allowed_methods=frozenset({"GET"}),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("Quota exceeded: %s", response.text)
            raise QuotaExceeded("quota exceeded")
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            raise TransportFailure(f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise TransportFailure("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise TransportFailure("request failed") from exc
        return self._handle_response(response)


__all__ = [
    "HttpTransport",
    "QuotaExceeded",
    "RawPayload",
    "RequestConfig",
    "TransportFailure",
    "WeatherTransport",
    "format_coordinates",
]
