"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from backend.api import views

urlpatterns = [
    path("weather/current", views.CurrentWeatherView.as_view(), name="weather-current"),
    path(
        "weather/current/coordinates",
        views.CurrentWeatherByCoordinatesView.as_view(),
        name="weather-current-coordinates",
    ),
    path("weather/forecast", views.ForecastView.as_view(), name="weather-forecast"),
    path(
        "weather/forecast/coordinates",
        views.ForecastByCoordinatesView.as_view(),
        name="weather-forecast-coordinates",
    ),
    path("weather/garden", views.GardenWeatherView.as_view(), name="weather-garden"),
    path(
        "weather/garden/coordinates",
        views.GardenWeatherByCoordinatesView.as_view(),
        name="weather-garden-coordinates",
    ),
    path("weather/hazards", views.PlantHazardsView.as_view(), name="weather-hazards"),
    path(
        "weather/hazards/coordinates",
        views.PlantHazardsByCoordinatesView.as_view(),
        name="weather-hazards-coordinates",
    ),
]
