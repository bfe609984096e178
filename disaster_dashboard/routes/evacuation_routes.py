"""
Routes for evacuation routes.

Routes can be listed (optionally by status), created and updated.
"""

from __future__ import annotations

import logging

from flask import Blueprint, request

from .. import db
from ..models import EvacuationRoute
from ..responses import collection, created
from ..schemas import EvacuationRouteSchema
from ..services import get_or_404, paginate
from ..util.params import json_payload, pagination_args, requested_id


evacuation_routes_bp = Blueprint("evacuation_routes", __name__)
logger = logging.getLogger(__name__)


@evacuation_routes_bp.route("/evacuation-routes", methods=["GET"])
def get_evacuation_routes() -> tuple[dict, int]:
    """Return one route by ``id`` or a page of routes filtered by ``status``."""
    route_id = requested_id(required=False)
    if route_id is not None:
        route = get_or_404(EvacuationRoute, route_id, "Evacuation route")
        return EvacuationRouteSchema().dump(route), 200

    limit, offset = pagination_args()
    query = EvacuationRoute.query
    status = request.args.get("status")
    if status:
        query = query.filter_by(status=status)
    routes = paginate(query.order_by(EvacuationRoute.id.asc()), limit, offset)
    return collection("routes", EvacuationRouteSchema(many=True).dump(routes)), 200


@evacuation_routes_bp.route("/evacuation-routes", methods=["POST"])
def create_evacuation_route() -> tuple[dict, int]:
    """Create a new evacuation route; ``description`` is optional."""
    schema = EvacuationRouteSchema()
    route = schema.validated_load(json_payload())
    db.session.add(route)
    db.session.commit()
    logger.info("Created evacuation route %s", route.id)
    return created("Evacuation route", schema.dump(route))


@evacuation_routes_bp.route("/evacuation-routes", methods=["PUT"])
def update_evacuation_route() -> tuple[dict, int]:
    route = get_or_404(EvacuationRoute, requested_id(), "Evacuation route")
    schema = EvacuationRouteSchema()
    schema.validated_load(json_payload(), instance=route)
    db.session.commit()
    logger.info("Updated evacuation route %s", route.id)
    return schema.dump(route), 200
