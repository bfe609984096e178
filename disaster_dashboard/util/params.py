"""Query-string and request-body parsing helpers.

Every resource endpoint addresses single rows through an ``id`` query
parameter and pages through lists with ``limit`` and ``offset``. The
helpers here turn those raw strings into integers and raise
``ValidationError`` with the shared codes when they are malformed.
"""
from __future__ import annotations

from flask import current_app, request

from ..errors import ValidationError


def parse_id(raw: str | None, required: bool = True) -> int | None:
    """Parse the ``id`` query parameter.

    Returns ``None`` when the parameter is absent and not ``required``.
    """
    if raw is None or raw == "":
        if not required:
            return None
        raise ValidationError("Valid ID is required", "INVALID_ID")
    try:
        return int(raw)
    except ValueError:
        raise ValidationError("Valid ID is required", "INVALID_ID") from None


def requested_id(required: bool = True) -> int | None:
    return parse_id(request.args.get("id"), required=required)


def pagination_args() -> tuple[int, int]:
    """Return ``(limit, offset)`` from the query string.

    ``limit`` is clamped to ``PAGE_SIZE_MAX`` whatever the client asks
    for.
    """
    try:
        limit = int(request.args.get("limit", current_app.config["PAGE_SIZE_DEFAULT"]))
        offset = int(request.args.get("offset", 0))
    except ValueError:
        raise ValidationError("Invalid pagination parameters.", "INVALID_PAGINATION") from None
    if limit < 0 or offset < 0:
        raise ValidationError("Invalid pagination parameters.", "INVALID_PAGINATION")
    return min(limit, current_app.config["PAGE_SIZE_MAX"]), offset


def json_payload() -> dict:
    """Return the JSON request body, which must be an object."""
    data = request.get_json()
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object", "INVALID_REQUEST_BODY")
    return data
