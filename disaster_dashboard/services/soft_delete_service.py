"""Soft delete utilities.

Alerts are never removed from the database. Deleting an alert clears
its ``is_active`` flag instead; list queries only return active
alerts, while fetching an alert by id still returns it. Reactivating
is an ordinary update that sets ``isActive`` back to true.
"""
from __future__ import annotations

import logging

from ..db import db
from ..models import Alert

logger = logging.getLogger(__name__)


def soft_delete_alert(alert: Alert) -> Alert:
    """Deactivate ``alert``.

    The change is flushed to the session but not committed, allowing
    the caller to decide when to commit. Deactivating an already
    inactive alert is a no-op.

    Parameters
    ----------
    alert: Alert
        The alert to deactivate.
    """
    if alert.is_active:
        alert.is_active = False
        logger.info("Deactivated alert %s", alert.id)
    db.session.flush()
    return alert
