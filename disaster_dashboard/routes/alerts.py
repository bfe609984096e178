"""
Routes for emergency alerts.

Alerts are listed newest first and can be filtered by severity and
location. Deleting an alert only deactivates it: the row stays in the
table, disappears from list results, and can still be fetched by id.
"""

from __future__ import annotations

import logging

from flask import Blueprint, request

from .. import db
from ..models import Alert
from ..responses import collection, created
from ..schemas import AlertSchema
from ..services import contains, get_or_404, paginate, soft_delete_alert
from ..util.params import json_payload, pagination_args, requested_id


alerts_bp = Blueprint("alerts", __name__)
logger = logging.getLogger(__name__)


@alerts_bp.route("/alerts", methods=["GET"])
def get_alerts() -> tuple[dict, int]:
    """Return one alert by ``id`` or a page of active alerts.

    Accepts ``severity`` (exact match), ``location`` (substring),
    ``limit`` and ``offset``.
    """
    alert_id = requested_id(required=False)
    if alert_id is not None:
        return AlertSchema().dump(get_or_404(Alert, alert_id, "Alert")), 200

    limit, offset = pagination_args()
    query = Alert.query.filter_by(is_active=True)
    severity = request.args.get("severity")
    if severity:
        query = query.filter_by(severity=severity)
    location = request.args.get("location")
    if location:
        query = query.filter(contains(Alert.location, text=location))
    alerts = paginate(query.order_by(Alert.timestamp.desc(), Alert.id.desc()), limit, offset)
    return collection("alerts", AlertSchema(many=True).dump(alerts)), 200


@alerts_bp.route("/alerts", methods=["POST"])
def create_alert() -> tuple[dict, int]:
    """Create a new alert.

    Requires ``type``, ``location``, ``severity`` and ``description``.
    New alerts are always active; the timestamp is assigned here.
    """
    schema = AlertSchema()
    alert = schema.validated_load(json_payload())
    alert.is_active = True
    db.session.add(alert)
    db.session.commit()
    logger.info("Created alert %s (%s)", alert.id, alert.severity)
    return created("Alert", schema.dump(alert))


@alerts_bp.route("/alerts", methods=["PUT"])
def update_alert() -> tuple[dict, int]:
    """Update the provided fields of an alert.

    ``isActive`` may be sent to reactivate a deactivated alert.
    """
    alert = get_or_404(Alert, requested_id(), "Alert")
    schema = AlertSchema()
    schema.validated_load(json_payload(), instance=alert)
    db.session.commit()
    logger.info("Updated alert %s", alert.id)
    return schema.dump(alert), 200


@alerts_bp.route("/alerts", methods=["DELETE"])
def delete_alert() -> tuple[dict, int]:
    """Deactivate an alert without removing it."""
    alert = get_or_404(Alert, requested_id(), "Alert")
    soft_delete_alert(alert)
    db.session.commit()
    return {"message": "Alert deactivated successfully", "data": AlertSchema().dump(alert)}, 200
