"""Threshold-driven plant hazard rules and banded care tips."""
from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from ..conditions import AirQuality
from ..config import ThresholdConfig
from ..entities import WeatherSnapshot


Predicate = Callable[[WeatherSnapshot, ThresholdConfig], bool]

THRESHOLD_RULES: Sequence[Tuple[Predicate, str]] = (
    (lambda w, t: w.temperature > t.heat_stress_temperature, "Heat stress risk for sensitive plants"),
    (lambda w, t: w.temperature < t.frost_risk_temperature, "Frost risk for outdoor plants"),
    (lambda w, t: w.humidity > t.high_humidity, "High humidity may increase fungal disease risk"),
    (lambda w, t: w.uv_index > t.high_uv_index, "High UV may cause leaf scorching on sensitive plants"),
    (lambda w, t: w.wind_speed > t.strong_wind_speed, "Strong winds may damage tall or unstaked plants"),
    (
        lambda w, t: w.precipitation > t.heavy_rain_precipitation,
        "Heavy rain may lead to soil erosion and waterlogging",
    ),
    (
        lambda w, t: w.air_quality.is_worse_than(AirQuality.MODERATE),
        "Poor air quality may affect sensitive plant species",
    ),
)

PLANT_CATEGORY_TIPS = (
    "🌵 Succulents: Thriving in sunny, dry weather. Minimal watering needed.",
    "🌺 Flowering Plants: Great time to deadhead and fertilize to encourage blooms.",
    "🍅 Vegetables: Consistent watering critical. Monitor for heat or pest stress.",
    "🌿 Herbs: Harvest early in the day for maximum flavor and aroma.",
)

AIR_QUALITY_TIPS = {
    AirQuality.GOOD: "🌍 Air quality is good. Great day for outdoor gardening!",
    AirQuality.MODERATE: "🌍 Moderate air quality. Sensitive individuals should take light precautions.",
    AirQuality.UNHEALTHY_SENSITIVE: (
        "🚫 Air quality is unhealthy for sensitive groups. Limit heavy outdoor gardening."
    ),
}
SEVERE_AIR_QUALITY_TIP = "⚡️ Very unhealthy air quality. Prefer indoor gardening activities today."


class HazardRuleEngine:
    """Evaluate hazards for a snapshot. Stateless; safe to share between threads."""

    rules = THRESHOLD_RULES

    def evaluate(self, snapshot: WeatherSnapshot, thresholds: ThresholdConfig) -> List[str]:
        hazards = [message for predicate, message in self.rules if predicate(snapshot, thresholds)]
        hazards.append(temperature_tip(snapshot.temperature, thresholds))
        hazards.append(humidity_tip(snapshot.humidity, thresholds))
        hazards.append(uv_tip(snapshot.uv_index, thresholds))
        hazards.append(precipitation_tip(snapshot.precipitation))
        hazards.append(air_quality_tip(snapshot.air_quality))
        hazards.extend(PLANT_CATEGORY_TIPS)
        return hazards


def temperature_tip(temperature: float, thresholds: ThresholdConfig) -> str:
    if temperature < thresholds.cold_temperature:
        return "❄️ Cold stress possible. Protect delicate plants, especially young seedlings."
    if temperature <= thresholds.ideal_temperature_max:
        return "🌿 Ideal temperature range for healthy plant growth."
    if temperature <= thresholds.high_heat_temperature:
        return "☀️ High heat today. Water early in the morning to prevent heat stress."
    return "⚡️ Extreme heat warning! Provide shade and monitor plants closely."


def humidity_tip(humidity: float, thresholds: ThresholdConfig) -> str:
    if humidity < thresholds.very_dry_humidity:
        return "💧 Very dry conditions. Mist indoor plants and check soil moisture more often."
    if humidity <= thresholds.comfortable_humidity_max:
        return "🌧️ Comfortable humidity range for most plants."
    return "💧 High humidity detected. Watch for fungal diseases and avoid overhead watering."


def uv_tip(uv_index: float, thresholds: ThresholdConfig) -> str:
    if uv_index <= thresholds.low_uv_index:
        return "🌞 Low UV exposure. Good for all outdoor plants."
    if uv_index <= thresholds.moderate_uv_index:
        return "⚡️ Moderate UV levels. Shade delicate plants if possible."
    if uv_index <= thresholds.high_uv_index:
        return "🔥 High UV levels. Protect sensitive plants during peak hours."
    return "🌞 Very high UV! Ensure shade for vulnerable plants and avoid midday gardening."


def precipitation_tip(precipitation: float) -> str:
    if precipitation == 0.0:
        return "💧 No rain today. Ensure manual watering, especially rooftop and container gardens."
    return "🌧️ Some rain expected. Check drainage to avoid waterlogged soil."


def air_quality_tip(air_quality: AirQuality) -> str:
    return AIR_QUALITY_TIPS.get(air_quality, SEVERE_AIR_QUALITY_TIP)


__all__ = ["HazardRuleEngine", "THRESHOLD_RULES", "PLANT_CATEGORY_TIPS"]
