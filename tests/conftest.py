"""Shared pytest fixtures.

Each test gets a fresh application built with the ``create_app``
factory and an in-memory SQLite database, so tests never share rows.
"""
from __future__ import annotations

import pytest

from disaster_dashboard import create_app, db
from disaster_dashboard.models import Alert, EmergencyContact, EvacuationRoute, Shelter, Stats, WeatherReading


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "JWT_SECRET_KEY": "test-secret-key-with-enough-length-for-hs256",
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


def _add(row):
    db.session.add(row)
    db.session.commit()
    return row


@pytest.fixture
def make_alert(app):
    def factory(**overrides):
        values = dict(type="Flood Warning", location="Zone 1", severity="warning", description="Rising water")
        values.update(overrides)
        return _add(Alert(**values))
    return factory


@pytest.fixture
def make_shelter(app):
    def factory(**overrides):
        values = dict(
            name="Central Community Shelter",
            address="123 Main Street, Downtown",
            latitude=40.7589,
            longitude=-73.9851,
            capacity=500,
            available=320,
            amenities=["Food", "Medical"],
            contact="(555) 123-4567",
            status="open",
            distance="0.8 miles",
        )
        values.update(overrides)
        return _add(Shelter(**values))
    return factory


@pytest.fixture
def make_route(app):
    def factory(**overrides):
        values = dict(
            name="Route A - Coastal Exit",
            route_from="Coastal Areas",
            route_to="Highland Safety Zone",
            status="open",
            traffic="light",
            distance="15 km",
        )
        values.update(overrides)
        return _add(EvacuationRoute(**values))
    return factory


@pytest.fixture
def make_contact(app):
    def factory(**overrides):
        values = dict(category="Emergency Services", name="Fire Department", number="(555) 123-4567", icon_name="phone")
        values.update(overrides)
        return _add(EmergencyContact(**values))
    return factory


@pytest.fixture
def make_reading(app):
    def factory(**overrides):
        values = dict(temperature=22.2, wind_speed=24.1, humidity=65, conditions="Partly Cloudy", location="Metropolitan Area")
        values.update(overrides)
        return _add(WeatherReading(**values))
    return factory


@pytest.fixture
def make_stats(app):
    def factory(**overrides):
        values = dict(active_incidents=12, people_assisted=1234, shelters_active=8, coverage_areas=25)
        values.update(overrides)
        return _add(Stats(**values))
    return factory
