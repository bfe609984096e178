"""
Routes for the emergency contact directory.

Unlike the other resources, these endpoints return bare rows and bare
arrays rather than ``{"success", "data"}`` envelopes, and deleting a
contact removes it permanently.
"""

from __future__ import annotations

import logging

from flask import Blueprint, request

from .. import db
from ..models import EmergencyContact
from ..schemas import EmergencyContactSchema
from ..services import contains, get_or_404, paginate
from ..util.params import json_payload, pagination_args, requested_id


contacts_bp = Blueprint("contacts", __name__)
logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "name": EmergencyContact.name,
    "category": EmergencyContact.category,
    "number": EmergencyContact.number,
}


@contacts_bp.route("/emergency-contacts", methods=["GET"])
def get_contacts() -> tuple[list[dict] | dict, int]:
    """Return one contact by ``id`` or a page of contacts.

    Accepts ``category`` (exact), ``search`` (substring of name,
    category or number), ``sort`` (``name``, ``category`` or
    ``number``; anything else sorts by name), ``order`` (``asc`` or
    ``desc``), ``limit`` and ``offset``.
    """
    contact_id = requested_id(required=False)
    if contact_id is not None:
        contact = get_or_404(EmergencyContact, contact_id, "Emergency contact")
        return EmergencyContactSchema().dump(contact), 200

    limit, offset = pagination_args()
    query = EmergencyContact.query
    category = request.args.get("category")
    if category:
        query = query.filter_by(category=category)
    search = request.args.get("search")
    if search:
        query = query.filter(
            contains(EmergencyContact.name, EmergencyContact.category, EmergencyContact.number, text=search)
        )
    column = SORT_COLUMNS.get(request.args.get("sort", "name"), EmergencyContact.name)
    ordering = column.desc() if request.args.get("order") == "desc" else column.asc()
    contacts = paginate(query.order_by(ordering, EmergencyContact.id.asc()), limit, offset)
    return EmergencyContactSchema(many=True).dump(contacts), 200


@contacts_bp.route("/emergency-contacts", methods=["POST"])
def create_contact() -> tuple[dict, int]:
    """Create a contact.

    Requires ``category``, ``name``, ``number`` and ``iconName``. The
    number must look like a phone number (10-20 digits, spaces,
    dashes, dots or parentheses, optional leading ``+``).
    """
    schema = EmergencyContactSchema()
    contact = schema.validated_load(json_payload())
    db.session.add(contact)
    db.session.commit()
    logger.info("Created emergency contact %s", contact.id)
    return schema.dump(contact), 201


@contacts_bp.route("/emergency-contacts", methods=["PUT"])
def update_contact() -> tuple[dict, int]:
    contact = get_or_404(EmergencyContact, requested_id(), "Emergency contact")
    schema = EmergencyContactSchema()
    schema.validated_load(json_payload(), instance=contact)
    db.session.commit()
    logger.info("Updated emergency contact %s", contact.id)
    return schema.dump(contact), 200


@contacts_bp.route("/emergency-contacts", methods=["DELETE"])
def delete_contact() -> tuple[dict, int]:
    """Permanently delete a contact and return the removed row."""
    contact = get_or_404(EmergencyContact, requested_id(), "Emergency contact")
    deleted = EmergencyContactSchema().dump(contact)
    db.session.delete(contact)
    db.session.commit()
    logger.info("Deleted emergency contact %s", deleted["id"])
    return {"message": "Emergency contact deleted successfully", "deleted": deleted}, 200
