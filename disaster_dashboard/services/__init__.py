"""Service layer for the Disaster Management Dashboard.

This package contains the logic that sits between the Flask route
handlers and the database models: row lookups and list filters, alert
soft deletion, the mock forecast generator and the mock auth stubs.

Nothing in this package should perform any HTTP handling. Instead,
services return simple Python data structures or database objects, and
raise exceptions defined in ``disaster_dashboard.errors`` when
something goes wrong.
"""

from .auth_service import mock_login, mock_register
from .forecast_service import generate_forecast
from .query_service import contains, get_or_404, paginate
from .soft_delete_service import soft_delete_alert

__all__ = [
    "contains",
    "generate_forecast",
    "get_or_404",
    "mock_login",
    "mock_register",
    "paginate",
    "soft_delete_alert",
]
