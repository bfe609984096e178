"""Mock weather forecast generation.

The dashboard shows a multi-day forecast next to the stored current
conditions. No forecast provider is wired in yet, so this module
synthesises plausible values: the shape of the response is fixed and
every number is drawn at random. Nothing here is persisted or related
to the stored ``WeatherReading`` rows.
"""
from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Optional

CONDITIONS = ["Sunny", "Cloudy", "Rainy", "Stormy", "Windy", "Partly Cloudy"]
DEFAULT_DAYS = 5
MAX_DAYS = 14


def _day_label(offset: int, day: date) -> str:
    if offset == 0:
        return "Today"
    if offset == 1:
        return "Tomorrow"
    return day.strftime("%A")


def generate_forecast(
    days: int = DEFAULT_DAYS,
    rng: Optional[random.Random] = None,
    start: Optional[date] = None,
) -> list[dict]:
    """Return ``days`` forecast entries starting at ``start`` (today by default).

    Parameters
    ----------
    days: int, default 5
        Number of days to generate.
    rng: random.Random, optional
        Source of randomness; pass a seeded instance for repeatable output.
    start: date, optional
        First forecast day.
    """
    rng = rng or random.Random()
    start = start or date.today()
    forecast = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        forecast.append({
            "date": day.isoformat(),
            "day": _day_label(offset, day),
            "temperature": {
                "min": rng.randint(18, 27),
                "max": rng.randint(28, 37),
                "avg": rng.randint(23, 32),
            },
            "conditions": rng.choice(CONDITIONS),
            "humidity": rng.randint(60, 89),
            "windSpeed": rng.randint(10, 49),
            "precipitation": rng.randint(0, 79),
        })
    return forecast
