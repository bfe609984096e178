"""
Routes for weather readings and the mock forecast.

``/weather/current`` serves the most recent stored reading and accepts
new readings; ``/weather/readings`` lists the stored history. The
forecast endpoint is generated on the fly and never touches the
database.
"""

from __future__ import annotations

import logging

from flask import Blueprint, request

from .. import db
from ..errors import NotFoundError, ValidationError
from ..models import WeatherReading
from ..responses import collection, created, utc_now_iso
from ..schemas import WeatherReadingSchema
from ..services import contains, generate_forecast, get_or_404, paginate
from ..services.forecast_service import DEFAULT_DAYS, MAX_DAYS
from ..util.params import json_payload, pagination_args, requested_id


weather_bp = Blueprint("weather", __name__)
logger = logging.getLogger(__name__)


def _readings_query():
    query = WeatherReading.query
    location = request.args.get("location")
    if location:
        query = query.filter(contains(WeatherReading.location, text=location))
    return query.order_by(WeatherReading.timestamp.desc(), WeatherReading.id.desc())


@weather_bp.route("/current", methods=["GET"])
def get_current_weather() -> tuple[dict, int]:
    """Return the latest reading, optionally for a ``location``.

    With ``id`` the stored reading is returned as a bare row.
    """
    reading_id = requested_id(required=False)
    if reading_id is not None:
        reading = get_or_404(WeatherReading, reading_id, "Weather reading")
        return WeatherReadingSchema().dump(reading), 200

    reading = _readings_query().first()
    if reading is None:
        raise NotFoundError("No weather data found")
    row = WeatherReadingSchema().dump(reading)
    return {
        "success": True,
        "data": {
            "location": row["location"],
            "timestamp": row["timestamp"],
            "current": {
                "temperature": row["temperature"],
                "humidity": row["humidity"],
                "windSpeed": row["windSpeed"],
                "conditions": row["conditions"],
            },
        },
    }, 200


@weather_bp.route("/readings", methods=["GET"])
def list_weather_readings() -> tuple[dict, int]:
    """Return a page of stored readings, newest first."""
    limit, offset = pagination_args()
    readings = paginate(_readings_query(), limit, offset)
    return collection("readings", WeatherReadingSchema(many=True).dump(readings)), 200


@weather_bp.route("/current", methods=["POST"])
def create_weather_reading() -> tuple[dict, int]:
    """Store a new reading.

    Requires ``temperature`` (-50 to 60), ``windSpeed`` (>= 0),
    ``humidity`` (0 to 100), ``conditions`` and ``location``.
    """
    schema = WeatherReadingSchema()
    reading = schema.validated_load(json_payload())
    db.session.add(reading)
    db.session.commit()
    logger.info("Stored weather reading %s for %s", reading.id, reading.location)
    return created("Weather data", schema.dump(reading))


@weather_bp.route("/current", methods=["PUT"])
def update_weather_reading() -> tuple[dict, int]:
    reading = get_or_404(WeatherReading, requested_id(), "Weather reading")
    schema = WeatherReadingSchema()
    schema.validated_load(json_payload(), instance=reading)
    db.session.commit()
    logger.info("Updated weather reading %s", reading.id)
    return schema.dump(reading), 200


@weather_bp.route("/forecast", methods=["GET"])
def get_forecast() -> tuple[dict, int]:
    """Return a generated forecast.

    Accepts ``location`` (echoed back) and ``days`` (1 to 14, default 5).
    """
    location = request.args.get("location") or "Default Location"
    try:
        days = int(request.args.get("days", DEFAULT_DAYS))
    except ValueError:
        raise ValidationError("days must be an integer", "INVALID_FIELD_VALUE") from None
    days = max(1, min(days, MAX_DAYS))
    return {
        "success": True,
        "data": {
            "location": location,
            "forecast": generate_forecast(days),
            "lastUpdated": utc_now_iso(),
        },
    }, 200
