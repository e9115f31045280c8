from __future__ import annotations

from pathlib import Path

from django.apps import AppConfig


class ApiConfig(AppConfig):
    name = "backend.api"
    label = "weather_api"
    # Namespace package: pin the path so Django does not have to guess it.
    path = str(Path(__file__).resolve().parent)
