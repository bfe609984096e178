"""
Routes for the aggregate dashboard counters.

A single stats row normally exists (created by the seed script or by
``POST /stats``). Updating any counter refreshes ``lastUpdated``.
"""

from __future__ import annotations

import logging
from datetime import datetime

from flask import Blueprint

from .. import db
from ..errors import NotFoundError, ValidationError
from ..models import Stats
from ..responses import created
from ..schemas import StatsSchema
from ..services import get_or_404
from ..util.params import json_payload, requested_id


stats_bp = Blueprint("stats", __name__)
logger = logging.getLogger(__name__)


@stats_bp.route("/stats", methods=["GET"])
def get_stats() -> tuple[dict, int]:
    """Return the stats row with ``id``, or the first one."""
    stats_id = requested_id(required=False)
    if stats_id is not None:
        stats = get_or_404(Stats, stats_id, "Stats record")
    else:
        stats = Stats.query.order_by(Stats.id.asc()).first()
        if stats is None:
            raise NotFoundError("Stats record not found")
    return StatsSchema().dump(stats), 200


@stats_bp.route("/stats", methods=["POST"])
def create_stats() -> tuple[dict, int]:
    """Create a stats row; all four counters are required."""
    schema = StatsSchema()
    stats = schema.validated_load(json_payload())
    db.session.add(stats)
    db.session.commit()
    logger.info("Created stats record %s", stats.id)
    return created("Stats record", schema.dump(stats))


@stats_bp.route("/stats", methods=["PUT"])
def update_stats() -> tuple[dict, int]:
    """Update one or more counters.

    At least one of ``activeIncidents``, ``peopleAssisted``,
    ``sheltersActive`` or ``coverageAreas`` must be provided.
    """
    stats = get_or_404(Stats, requested_id(), "Stats record")
    data = json_payload()
    schema = StatsSchema()
    if not any(key in data for key in schema.counter_keys):
        raise ValidationError("At least one field must be provided for update", "NO_UPDATE_FIELDS")
    schema.validated_load(data, instance=stats)
    stats.last_updated = datetime.utcnow()
    db.session.commit()
    logger.info("Updated stats record %s", stats.id)
    return schema.dump(stats), 200
