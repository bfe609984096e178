"""
Mock authentication routes.

``/auth/login`` and ``/auth/register`` stand in for a future identity
backend. They validate the shape of the request and return a signed
token and a fabricated user record; nothing is stored.
"""

from __future__ import annotations

from flask import Blueprint

from ..services import mock_login, mock_register
from ..util.params import json_payload


auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["POST"])
def login() -> tuple[dict, int]:
    """Return a token for any ``email`` and ``password`` pair."""
    data = json_payload()
    session = mock_login((data.get("email") or "").strip(), data.get("password") or "")
    return {"success": True, "message": "Login successful", "data": session}, 200


@auth_bp.route("/register", methods=["POST"])
def register() -> tuple[dict, int]:
    """Validate a registration request and return a token.

    Expects JSON with ``name``, ``email`` and ``password`` (at least
    six characters).
    """
    data = json_payload()
    session = mock_register(
        (data.get("name") or "").strip(),
        (data.get("email") or "").strip().lower(),
        data.get("password") or "",
    )
    return {"success": True, "message": "Registration successful", "data": session}, 200
