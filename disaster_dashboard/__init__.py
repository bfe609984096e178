"""
Application factory for the Disaster Management Dashboard API.

This module provides a function to create and configure the Flask
application. All extensions (SQLAlchemy, Migrate, JWT, CORS) are
initialised here. Each resource family (alerts, shelters, evacuation
routes, emergency contacts, weather, stats) lives in its own blueprint
and is registered inside the factory.

Environment variables control the database connection, the JWT secret,
the allowed CORS origins and the log level. A default configuration is
provided for development, using SQLite when no database URL is
available.
"""

from __future__ import annotations

import logging
import os
from datetime import timedelta

from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager

# instantiate extensions without binding them to an app yet.  They will
# be bound in create_app().
from .db import db  # use shared db object from db.py
migrate = Migrate()
jwt = JWTManager()
cors = CORS()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _split_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def configure_logging(level_name: str) -> None:
    """Configure root logging for the service.

    ``logging.basicConfig`` is a no-op once handlers exist, so the level
    is also applied explicitly to keep repeated factory calls (tests)
    consistent.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[logging.StreamHandler()])
    logging.getLogger().setLevel(level)


def create_app(test_config: dict | None = None) -> Flask:
    """Create and configure a Flask application.

    Parameters
    ----------
    test_config: dict | None, optional
        Optional configuration overrides used when running tests.

    Returns
    -------
    Flask
        A configured Flask application instance.
    """
    app = Flask(__name__)

    # Default configuration. Override using environment variables or
    # by passing a ``test_config`` mapping.
    app.config.update(
        SQLALCHEMY_DATABASE_URI=os.environ.get("DATABASE_URL", "sqlite:///disaster_dashboard.db"),
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
        JWT_SECRET_KEY=os.environ.get("JWT_SECRET_KEY", "please-change-this-secret-key"),
        JWT_ACCESS_TOKEN_EXPIRES=timedelta(days=1),
        CORS_ORIGINS=_split_origins(os.environ.get("CORS_ORIGINS", "*")),
        LOG_LEVEL=os.environ.get("LOG_LEVEL", "INFO"),
        PAGE_SIZE_DEFAULT=10,
        PAGE_SIZE_MAX=100,
        ADMIN_EMAIL="admin@dms.gov",
        ADMIN_PASSWORD="admin123",
    )

    if test_config:
        app.config.update(test_config)

    configure_logging(app.config["LOG_LEVEL"])

    # Initialise extensions with the app
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    # Register custom error handlers
    from .errors import register_error_handlers
    register_error_handlers(app)

    # Register blueprints. Importing here avoids circular imports.
    from .routes.alerts import alerts_bp
    from .routes.auth import auth_bp
    from .routes.contacts import contacts_bp
    from .routes.evacuation_routes import evacuation_routes_bp
    from .routes.shelters import shelters_bp
    from .routes.stats import stats_bp
    from .routes.weather import weather_bp

    app.register_blueprint(alerts_bp, url_prefix="/api")
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(contacts_bp, url_prefix="/api")
    app.register_blueprint(shelters_bp, url_prefix="/api/resources")
    app.register_blueprint(evacuation_routes_bp, url_prefix="/api/resources")
    app.register_blueprint(stats_bp, url_prefix="/api")
    app.register_blueprint(weather_bp, url_prefix="/api/weather")

    # Provide a simple health check route
    @app.route("/api/health")
    def health_check() -> dict[str, str]:
        """Return a simple health check response.

        This endpoint can be used by deployment platforms to verify
        that the application has started correctly.
        """
        return {"status": "ok"}

    return app
