from __future__ import annotations

from ..config import ThresholdConfig
from ..entities import WeatherSnapshot


FUNGAL_RISK_ADVICE = "High humidity may promote fungal growth. Consider fungicide application."
HEAT_ADVICE = "High temperatures expected. Ensure plants are well watered."
DRAINAGE_ADVICE = "Heavy rain expected. Check drainage systems and protect sensitive plants."
FAVORABLE_ADVICE = "Weather conditions are favorable for gardening activities."


class AdviceSynthesizer:
    """Pick the single most pressing gardening advice sentence."""

    def synthesize(self, snapshot: WeatherSnapshot, thresholds: ThresholdConfig) -> str:
        if snapshot.humidity > thresholds.high_humidity_advice:
            return FUNGAL_RISK_ADVICE
        if snapshot.temperature > thresholds.high_temperature_advice:
            return HEAT_ADVICE
        if snapshot.precipitation > thresholds.heavy_rain_advice:
            return DRAINAGE_ADVICE
        return FAVORABLE_ADVICE


__all__ = [
    "AdviceSynthesizer",
    "DRAINAGE_ADVICE",
    "FAVORABLE_ADVICE",
    "FUNGAL_RISK_ADVICE",
    "HEAT_ADVICE",
]
