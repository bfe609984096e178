"""
Database models for the Disaster Management Dashboard.

Each dashboard resource is a flat table with no relationships between
entities. Column names are snake_case; the camelCase names used by the
dashboard's JSON are applied by the schemas in ``schemas.py``.

Alerts are never removed from the table. Deleting an alert clears its
``is_active`` flag and list queries only return active alerts.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Optional, List

from . import db


class Severity(enum.Enum):
    """Severity levels an alert can carry."""
    CRITICAL = "critical"
    WARNING = "warning"
    ADVISORY = "advisory"


class ShelterStatus(enum.Enum):
    OPEN = "open"
    LIMITED = "limited"
    CLOSED = "closed"


class RouteStatus(enum.Enum):
    OPEN = "open"
    CONGESTED = "congested"
    CLOSED = "closed"


class Traffic(enum.Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"


def enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    """Return the string values of ``enum_cls`` in declaration order."""
    return [member.value for member in enum_cls]


class Alert(db.Model):
    """An emergency alert shown on the dashboard."""
    __allow_unmapped__ = True
    __tablename__ = "alerts"

    id: int = db.Column(db.Integer, primary_key=True)
    type: str = db.Column(db.String(100), nullable=False)
    location: str = db.Column(db.String(255), nullable=False)
    # Stored as plain strings; membership is checked by AlertSchema
    severity: str = db.Column(db.String(20), nullable=False)
    description: str = db.Column(db.Text, nullable=False)
    timestamp: datetime = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    # Soft delete flag; inactive alerts are hidden from list queries
    is_active: bool = db.Column(db.Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<Alert {self.id} {self.type} ({self.severity})>"


class WeatherReading(db.Model):
    """A weather observation for a location."""
    __allow_unmapped__ = True
    __tablename__ = "weather_data"

    id: int = db.Column(db.Integer, primary_key=True)
    temperature: float = db.Column(db.Float, nullable=False)
    wind_speed: float = db.Column(db.Float, nullable=False)
    humidity: float = db.Column(db.Float, nullable=False)
    conditions: str = db.Column(db.String(100), nullable=False)
    location: str = db.Column(db.String(255), nullable=False)
    timestamp: datetime = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<WeatherReading {self.location} {self.timestamp}>"


class Stats(db.Model):
    """Aggregate counters displayed on the dashboard home page.

    In practice a single row exists; ``GET /api/stats`` returns the
    first one.
    """
    __allow_unmapped__ = True
    __tablename__ = "stats"

    id: int = db.Column(db.Integer, primary_key=True)
    active_incidents: int = db.Column(db.Integer, nullable=False, default=0)
    people_assisted: int = db.Column(db.Integer, nullable=False, default=0)
    shelters_active: int = db.Column(db.Integer, nullable=False, default=0)
    coverage_areas: int = db.Column(db.Integer, nullable=False, default=0)
    last_updated: datetime = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<Stats {self.id} updated={self.last_updated}>"


class Shelter(db.Model):
    """An emergency shelter and its current occupancy."""
    __allow_unmapped__ = True
    __tablename__ = "shelters"

    id: int = db.Column(db.Integer, primary_key=True)
    name: str = db.Column(db.String(255), nullable=False)
    address: str = db.Column(db.String(255), nullable=False)
    latitude: float = db.Column(db.Float, nullable=False)
    longitude: float = db.Column(db.Float, nullable=False)
    capacity: int = db.Column(db.Integer, nullable=False)
    # Not checked against capacity
    available: int = db.Column(db.Integer, nullable=False)
    amenities: List[str] = db.Column(db.JSON, nullable=False, default=list)
    contact: str = db.Column(db.String(100), nullable=False)
    status: str = db.Column(db.String(20), nullable=False)
    # Free-form display string such as "0.8 miles"
    distance: Optional[str] = db.Column(db.String(50))

    def __repr__(self) -> str:
        return f"<Shelter {self.name} ({self.status})>"


class EvacuationRoute(db.Model):
    """A named evacuation route between two places."""
    __allow_unmapped__ = True
    __tablename__ = "evacuation_routes"

    id: int = db.Column(db.Integer, primary_key=True)
    name: str = db.Column(db.String(255), nullable=False)
    route_from: str = db.Column(db.String(255), nullable=False)
    route_to: str = db.Column(db.String(255), nullable=False)
    status: str = db.Column(db.String(20), nullable=False)
    traffic: str = db.Column(db.String(20), nullable=False)
    distance: str = db.Column(db.String(50), nullable=False)
    description: Optional[str] = db.Column(db.Text)

    def __repr__(self) -> str:
        return f"<EvacuationRoute {self.name} {self.route_from} -> {self.route_to}>"


class EmergencyContact(db.Model):
    """A phone number listed in the emergency directory."""
    __allow_unmapped__ = True
    __tablename__ = "emergency_contacts"

    id: int = db.Column(db.Integer, primary_key=True)
    category: str = db.Column(db.String(100), nullable=False)
    name: str = db.Column(db.String(255), nullable=False)
    number: str = db.Column(db.String(20), nullable=False)
    icon_name: str = db.Column(db.String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<EmergencyContact {self.name} {self.number}>"
