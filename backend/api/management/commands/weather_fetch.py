"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api import views
from garden_weather.providers.base import TransportFailure
from garden_weather.services.normalizer import DataUnavailable


class Command(BaseCommand):
    help = "Fetch weather, forecast or garden weather for a location or coordinates"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--location", type=str, help="Location name, postcode or IP")
        parser.add_argument("--lat", type=float, help="Latitude")
        parser.add_argument("--lon", type=float, help="Longitude")
        parser.add_argument("--days", type=int, help="Forecast horizon in days")
        parser.add_argument("--garden", action="store_true", help="Include gardening advice")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        location = options.get("location")
        latitude = options.get("lat")
        longitude = options.get("lon")
        days = options.get("days")
        garden = options.get("garden")

        if not location and (latitude is None or longitude is None):
            raise CommandError("--location or both --lat and --lon are required")

        orchestrator = views.get_weather_orchestrator()
        try:
            if location:
                if garden:
                    snapshot = orchestrator.get_garden_weather(location)
                elif days:
                    snapshot = orchestrator.get_forecast(location, days)
                else:
                    snapshot = orchestrator.get_current_weather(location)
            elif garden:
                snapshot = orchestrator.get_garden_weather_by_coordinates(latitude, longitude)
            elif days:
                snapshot = orchestrator.get_forecast_by_coordinates(latitude, longitude, days)
            else:
                snapshot = orchestrator.get_current_weather_by_coordinates(latitude, longitude)
        except ValueError as exc:
            raise CommandError(str(exc)) from exc
        except TransportFailure as exc:
            raise CommandError("Weather provider request failed") from exc
        except DataUnavailable as exc:
            raise CommandError(f"Weather data unavailable: {exc}") from exc

        self.stdout.write(json.dumps(views.serialize_snapshot(snapshot), ensure_ascii=False))
