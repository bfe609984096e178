"""
Routes for emergency shelters.

Shelters can be listed, filtered by status or by a location fragment
matched against the shelter's name and address, created and updated.
There is no delete endpoint; a shelter that stops operating is set to
``closed``.
"""

from __future__ import annotations

import logging

from flask import Blueprint, request

from .. import db
from ..models import Shelter
from ..responses import collection, created
from ..schemas import ShelterSchema
from ..services import contains, get_or_404, paginate
from ..util.params import json_payload, pagination_args, requested_id


shelters_bp = Blueprint("shelters", __name__)
logger = logging.getLogger(__name__)


@shelters_bp.route("/shelters", methods=["GET"])
def get_shelters() -> tuple[dict, int]:
    """Return one shelter by ``id`` or a page of shelters.

    Accepts ``status``, ``location``, ``limit`` and ``offset``.
    """
    shelter_id = requested_id(required=False)
    if shelter_id is not None:
        return ShelterSchema().dump(get_or_404(Shelter, shelter_id, "Shelter")), 200

    limit, offset = pagination_args()
    query = Shelter.query
    status = request.args.get("status")
    if status:
        query = query.filter_by(status=status)
    location = request.args.get("location")
    if location:
        query = query.filter(contains(Shelter.name, Shelter.address, text=location))
    shelters = paginate(query.order_by(Shelter.id.asc()), limit, offset)
    return collection("shelters", ShelterSchema(many=True).dump(shelters)), 200


@shelters_bp.route("/shelters", methods=["POST"])
def create_shelter() -> tuple[dict, int]:
    """Create a new shelter.

    Every field except ``distance`` is required.
    """
    schema = ShelterSchema()
    shelter = schema.validated_load(json_payload())
    db.session.add(shelter)
    db.session.commit()
    logger.info("Created shelter %s", shelter.id)
    return created("Shelter", schema.dump(shelter))


@shelters_bp.route("/shelters", methods=["PUT"])
def update_shelter() -> tuple[dict, int]:
    """Update the provided fields of a shelter.

    ``available`` is accepted even when it exceeds ``capacity``.
    """
    shelter = get_or_404(Shelter, requested_id(), "Shelter")
    schema = ShelterSchema()
    schema.validated_load(json_payload(), instance=shelter)
    db.session.commit()
    logger.info("Updated shelter %s", shelter.id)
    return schema.dump(shelter), 200
