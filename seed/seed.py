"""Seed script for demonstration data.

Running this script populates an empty database with sample alerts,
shelters, evacuation routes, emergency contacts, weather readings and
a stats row so the dashboard has something to display. Tables that
already contain rows are left alone. Invoke it with
``python -m seed.seed`` from the repository root.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta

from disaster_dashboard import create_app, db
from disaster_dashboard.models import (
    Alert,
    EmergencyContact,
    EvacuationRoute,
    Shelter,
    Stats,
    WeatherReading,
)

logger = logging.getLogger(__name__)


def _sample_rows(now: datetime) -> dict[type, list]:
    return {
        Alert: [
            Alert(type="Hurricane Warning", location="Coastal Region A", severity="critical",
                  description="Category 3 hurricane approaching coast. Evacuation orders in effect for zones 1-3.",
                  timestamp=now - timedelta(hours=2)),
            Alert(type="Flood Advisory", location="River Valley B", severity="warning",
                  description="Heavy rainfall causing river levels to rise. Avoid low-lying areas.",
                  timestamp=now - timedelta(hours=1)),
            Alert(type="Wildfire Alert", location="Forest Area C", severity="critical",
                  description="Fast-moving wildfire spreading east. Immediate evacuation required for Mountain Ridge.",
                  timestamp=now - timedelta(minutes=30)),
            Alert(type="Earthquake Warning", location="Metropolitan Area", severity="advisory",
                  description="Seismic activity detected. Be prepared for aftershocks in the next 24 hours.",
                  timestamp=now - timedelta(minutes=15)),
        ],
        Shelter: [
            Shelter(name="Central Community Shelter", address="123 Main Street, Downtown",
                    latitude=40.7589, longitude=-73.9851, capacity=500, available=320,
                    amenities=["Food", "Medical", "WiFi", "Security"], contact="(555) 123-4567",
                    status="open", distance="0.8 miles"),
            Shelter(name="North District Emergency Center", address="456 North Avenue, North Side",
                    latitude=40.7831, longitude=-73.9712, capacity=350, available=180,
                    amenities=["Food", "Medical", "Bedding", "Showers"], contact="(555) 234-5678",
                    status="open", distance="2.1 miles"),
            Shelter(name="Riverside Evacuation Hub", address="789 River Road, Riverside",
                    latitude=40.7505, longitude=-74.0134, capacity=600, available=450,
                    amenities=["Food", "Medical", "WiFi", "Showers", "Pet Friendly"], contact="(555) 345-6789",
                    status="open", distance="1.5 miles"),
            Shelter(name="East Side Support Center", address="987 East Street, East Side",
                    latitude=40.7614, longitude=-73.9776, capacity=450, available=120,
                    amenities=["Food", "Medical", "Security", "Childcare"], contact="(555) 567-8901",
                    status="limited", distance="1.8 miles"),
        ],
        EvacuationRoute: [
            EvacuationRoute(name="Route A - Coastal Exit", route_from="Coastal Areas", route_to="Highland Safety Zone",
                            status="open", traffic="light", distance="15 km",
                            description="Primary coastal evacuation route via Highway 1"),
            EvacuationRoute(name="Route B - Highway 45", route_from="City Center", route_to="Mountain Refuge",
                            status="congested", traffic="heavy", distance="22 km",
                            description="Main highway route to mountain safe zone"),
            EvacuationRoute(name="Route C - Valley Road", route_from="Valley Region", route_to="Northern Safe Zone",
                            status="closed", traffic="heavy", distance="18 km",
                            description="CLOSED: Bridge damage from recent flooding"),
        ],
        EmergencyContact: [
            EmergencyContact(category="Emergency Services", name="Fire Department",
                             number="(555) 123-4567", icon_name="phone"),
            EmergencyContact(category="Emergency Services", name="Police Department",
                             number="(555) 234-5678", icon_name="shield"),
            EmergencyContact(category="Disaster Response", name="FEMA Regional Office",
                             number="1-800-621-3362", icon_name="building"),
            EmergencyContact(category="Disaster Response", name="Red Cross Emergency",
                             number="1-800-733-2767", icon_name="heart"),
            EmergencyContact(category="Support Services", name="Crisis Counseling",
                             number="1-800-985-5990", icon_name="user-heart"),
        ],
        WeatherReading: [
            WeatherReading(temperature=22.2, wind_speed=24.1, humidity=65, conditions="Partly Cloudy",
                           location="Metropolitan Area", timestamp=now),
            WeatherReading(temperature=18.5, wind_speed=12.8, humidity=72, conditions="Cloudy",
                           location="Downtown District", timestamp=now - timedelta(hours=1)),
            WeatherReading(temperature=20.1, wind_speed=32.4, humidity=78, conditions="Light Rain",
                           location="Coastal Region", timestamp=now - timedelta(hours=3)),
        ],
        Stats: [
            Stats(active_incidents=12, people_assisted=1234, shelters_active=8, coverage_areas=25,
                  last_updated=now),
        ],
    }


def run_seeds() -> None:
    """Insert the sample rows into every empty table."""
    app = create_app()
    with app.app_context():
        db.create_all()
        for model, rows in _sample_rows(datetime.utcnow()).items():
            if db.session.query(model.id).first() is not None:
                logger.info("Skipping %s: table already has rows", model.__tablename__)
                continue
            db.session.add_all(rows)
            logger.info("Seeding %d rows into %s", len(rows), model.__tablename__)
        db.session.commit()
        logger.info("Seed data inserted successfully.")


if __name__ == "__main__":
    run_seeds()
