"""
Serialization and validation schemas using Marshmallow.

These schemas convert SQLAlchemy models to the camelCase JSON the
dashboard consumes, and load request payloads back into model
instances. Loading enforces the field-level rules of each resource
(required fields, enum membership, numeric ranges, phone format) and
trims incoming strings.

A failed load is translated into a single ``ValidationError`` with a
stable ``code``: missing fields take precedence, then the first
invalid field in the order listed in ``field_errors``.
"""

from __future__ import annotations

from datetime import timezone

from marshmallow import EXCLUDE, fields, pre_load, validate
from marshmallow import ValidationError as MarshmallowValidationError
from marshmallow_sqlalchemy import SQLAlchemySchema, auto_field

from .errors import ValidationError
from .models import (
    Alert,
    EmergencyContact,
    EvacuationRoute,
    RouteStatus,
    Severity,
    Shelter,
    ShelterStatus,
    Stats,
    Traffic,
    WeatherReading,
    enum_values,
)
from .util.sanitization import strip_tags

MISSING_MESSAGE = fields.Field.default_error_messages["required"]

# Optional leading "+", then 10-20 digits, spaces, dashes, dots or parentheses
PHONE_REGEX = r"^[\+]?[\d\s\-\(\)\.]{10,20}$"


class StrictFloat(fields.Float):
    """Float field that only accepts JSON numbers, never numeric strings."""

    def _validated(self, value):
        if isinstance(value, str):
            raise self.make_error("invalid", input=value)
        return super()._validated(value)


class UtcDateTime(fields.DateTime):
    """DateTime field that dumps naive database values as UTC."""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return super()._serialize(value, attr, obj, **kwargs)


class ResourceSchema(SQLAlchemySchema):
    """Base schema shared by every dashboard resource."""

    missing_code = "MISSING_REQUIRED_FIELDS"
    required_message: str | None = None
    # data key -> (code, message); order decides which error is reported
    field_errors: dict[str, tuple[str, str]] = {}
    # free-text fields that have HTML tags stripped on load
    text_fields: tuple[str, ...] = ()

    class Meta:
        load_instance = True
        transient = True
        unknown = EXCLUDE

    @pre_load
    def clean_input(self, data, **kwargs):
        """Trim strings and treat blank values as absent.

        ``null`` sent for a numeric or boolean field is kept so the field
        reports its own invalid-value error.
        """
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = strip_tags(value) if key in self.text_fields else value.strip()
            cleaned[key] = value
        for name, field in self.load_fields.items():
            key = field.data_key or name
            if key not in cleaned or cleaned[key] not in (None, ""):
                continue
            if field.allow_none:
                cleaned[key] = None
            elif cleaned[key] is None and isinstance(field, (fields.Number, fields.Boolean)):
                continue
            else:
                del cleaned[key]
        return cleaned

    def _load_keys(self) -> list[str]:
        return [field.data_key or name for name, field in self.load_fields.items()]

    def missing_message(self, missing: list[str]) -> str:
        if self.required_message:
            return self.required_message
        return f"Missing required fields: {', '.join(missing)}"

    def describe_errors(self, messages: dict) -> tuple[str, str]:
        """Pick the code and message reported for a failed load."""
        missing = [
            key for key in self._load_keys()
            if isinstance(messages.get(key), list) and MISSING_MESSAGE in messages[key]
        ]
        if missing:
            return self.missing_code, self.missing_message(missing)
        for key, (code, message) in self.field_errors.items():
            if key in messages:
                return code, message
        if "_schema" in messages:
            return "INVALID_REQUEST_BODY", "Request body must be a JSON object"
        return "INVALID_FIELD_VALUE", f"Invalid value for: {', '.join(sorted(messages))}"

    def validated_load(self, data, instance=None):
        """Load ``data`` into a new model, or into ``instance`` as a partial update.

        Raises
        ------
        ValidationError
            When any field fails validation.
        """
        try:
            return self.load(data, instance=instance, partial=instance is not None)
        except MarshmallowValidationError as err:
            messages = err.normalized_messages()
            code, message = self.describe_errors(messages)
            raise ValidationError(message, code, fields=messages) from err


class AlertSchema(ResourceSchema):
    """Schema for ``Alert`` rows."""

    required_message = "Type, location, severity, and description are required"
    field_errors = {
        "severity": ("INVALID_SEVERITY", "Severity must be one of: critical, warning, advisory"),
        "isActive": ("INVALID_FIELD_VALUE", "isActive must be a boolean"),
    }
    text_fields = ("description",)

    id = auto_field(dump_only=True)
    type = auto_field(required=True)
    location = auto_field(required=True)
    severity = auto_field(required=True, validate=validate.OneOf(enum_values(Severity)))
    description = auto_field(required=True)
    timestamp = UtcDateTime(dump_only=True)
    is_active = auto_field(data_key="isActive")

    class Meta(ResourceSchema.Meta):
        model = Alert


class WeatherReadingSchema(ResourceSchema):
    """Schema for ``WeatherReading`` rows."""

    required_message = "Temperature, windSpeed, humidity, conditions, and location are required"
    field_errors = {
        "temperature": (
            "INVALID_TEMPERATURE",
            "Temperature must be a number between -50 and 60 degrees Celsius",
        ),
        "windSpeed": ("INVALID_WIND_SPEED", "Wind speed must be a number >= 0"),
        "humidity": ("INVALID_HUMIDITY", "Humidity must be a number between 0 and 100"),
    }

    id = auto_field(dump_only=True)
    temperature = StrictFloat(required=True, validate=validate.Range(min=-50, max=60))
    wind_speed = StrictFloat(data_key="windSpeed", required=True, validate=validate.Range(min=0))
    humidity = StrictFloat(required=True, validate=validate.Range(min=0, max=100))
    conditions = auto_field(required=True)
    location = auto_field(required=True)
    timestamp = UtcDateTime(dump_only=True)

    class Meta(ResourceSchema.Meta):
        model = WeatherReading


class StatsSchema(ResourceSchema):
    """Schema for the aggregate ``Stats`` row."""

    required_message = (
        "activeIncidents, peopleAssisted, sheltersActive, and coverageAreas are required"
    )
    field_errors = {
        key: ("INVALID_FIELD_VALUE", f"{key} must be a number >= 0")
        for key in ("activeIncidents", "peopleAssisted", "sheltersActive", "coverageAreas")
    }
    counter_keys = tuple(field_errors)

    id = auto_field(dump_only=True)
    active_incidents = auto_field(
        data_key="activeIncidents", required=True, strict=True, validate=validate.Range(min=0)
    )
    people_assisted = auto_field(
        data_key="peopleAssisted", required=True, strict=True, validate=validate.Range(min=0)
    )
    shelters_active = auto_field(
        data_key="sheltersActive", required=True, strict=True, validate=validate.Range(min=0)
    )
    coverage_areas = auto_field(
        data_key="coverageAreas", required=True, strict=True, validate=validate.Range(min=0)
    )
    last_updated = UtcDateTime(data_key="lastUpdated", dump_only=True)

    class Meta(ResourceSchema.Meta):
        model = Stats


class ShelterSchema(ResourceSchema):
    """Schema for ``Shelter`` rows.

    ``amenities`` may be sent as a single string; it is stored as a
    one-element list. ``available`` is not compared with ``capacity``.
    """

    required_message = (
        "Name, address, latitude, longitude, capacity, available, amenities, "
        "contact, and status are required"
    )
    field_errors = {
        "status": ("INVALID_STATUS", "Status must be one of: open, limited, closed"),
        "capacity": ("INVALID_CAPACITY", "Capacity must be a number >= 0"),
        "available": ("INVALID_AVAILABLE", "Available must be a number >= 0"),
        "latitude": ("INVALID_LATITUDE", "Latitude must be a number between -90 and 90"),
        "longitude": ("INVALID_LONGITUDE", "Longitude must be a number between -180 and 180"),
    }

    id = auto_field(dump_only=True)
    name = auto_field(required=True)
    address = auto_field(required=True)
    latitude = StrictFloat(required=True, validate=validate.Range(min=-90, max=90))
    longitude = StrictFloat(required=True, validate=validate.Range(min=-180, max=180))
    capacity = auto_field(required=True, strict=True, validate=validate.Range(min=0))
    available = auto_field(required=True, strict=True, validate=validate.Range(min=0))
    amenities = fields.List(fields.String(), required=True)
    contact = auto_field(required=True)
    status = auto_field(required=True, validate=validate.OneOf(enum_values(ShelterStatus)))
    distance = auto_field(allow_none=True)

    class Meta(ResourceSchema.Meta):
        model = Shelter

    @pre_load
    def wrap_amenities(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("amenities"), str):
            data = dict(data, amenities=[data["amenities"].strip()])
        return data


class EvacuationRouteSchema(ResourceSchema):
    """Schema for ``EvacuationRoute`` rows."""

    required_message = "Name, routeFrom, routeTo, status, traffic, and distance are required"
    field_errors = {
        "status": ("INVALID_STATUS", "Status must be one of: open, congested, closed"),
        "traffic": ("INVALID_TRAFFIC", "Traffic must be one of: light, moderate, heavy"),
    }
    text_fields = ("description",)

    id = auto_field(dump_only=True)
    name = auto_field(required=True)
    route_from = auto_field(data_key="routeFrom", required=True)
    route_to = auto_field(data_key="routeTo", required=True)
    status = auto_field(required=True, validate=validate.OneOf(enum_values(RouteStatus)))
    traffic = auto_field(required=True, validate=validate.OneOf(enum_values(Traffic)))
    distance = auto_field(required=True)
    description = auto_field(allow_none=True)

    class Meta(ResourceSchema.Meta):
        model = EvacuationRoute


class EmergencyContactSchema(ResourceSchema):
    """Schema for ``EmergencyContact`` rows.

    Missing fields are reported one at a time, naming the first absent
    field (``"Name is required"``).
    """

    missing_code = "MISSING_REQUIRED_FIELD"
    labels = {"category": "Category", "name": "Name", "number": "Number", "iconName": "Icon name"}
    field_errors = {
        "number": ("INVALID_PHONE_NUMBER", "Invalid phone number format"),
    }

    id = auto_field(dump_only=True)
    category = auto_field(required=True)
    name = auto_field(required=True)
    number = auto_field(required=True, validate=validate.Regexp(PHONE_REGEX))
    icon_name = auto_field(data_key="iconName", required=True)

    class Meta(ResourceSchema.Meta):
        model = EmergencyContact

    def missing_message(self, missing: list[str]) -> str:
        first = missing[0]
        return f"{self.labels.get(first, first)} is required"
