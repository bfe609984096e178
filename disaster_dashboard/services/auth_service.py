"""Mock authentication.

Login and registration are placeholders for a future identity
backend. No credentials are stored or verified: every well-formed
request succeeds. The one configured admin account is recognised so
the dashboard can exercise its admin views.

Tokens are real signed JWTs so the frontend can store and send them,
but no endpoint requires one yet.
"""
from __future__ import annotations

import random
import re
from datetime import datetime

from flask import current_app
from flask_jwt_extended import create_access_token

from ..errors import ValidationError

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


def _issue_token(user: dict) -> str:
    return create_access_token(identity=str(user["id"]), additional_claims={"role": user["role"]})


def mock_login(email: str, password: str) -> dict:
    """Fabricate a session for ``email``.

    The configured admin credentials yield the admin user; anything
    else yields an ordinary user named after the email's local part.
    """
    if not email or not password:
        raise ValidationError("Email and password are required", "MISSING_REQUIRED_FIELDS")
    if email == current_app.config["ADMIN_EMAIL"] and password == current_app.config["ADMIN_PASSWORD"]:
        user = {"id": 1, "email": email, "name": "Admin User", "role": "admin"}
    else:
        user = {
            "id": random.randint(0, 999),
            "email": email,
            "name": email.split("@")[0],
            "role": "user",
        }
    return {"token": _issue_token(user), "user": user}


def mock_register(name: str, email: str, password: str) -> dict:
    """Validate a registration request and fabricate the new user."""
    if not name or not email or not password:
        raise ValidationError("Name, email, and password are required", "MISSING_REQUIRED_FIELDS")
    if not EMAIL_RE.match(email):
        raise ValidationError("Invalid email format", "INVALID_EMAIL")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters", "INVALID_PASSWORD"
        )
    user = {
        "id": random.randint(0, 999),
        "name": name,
        "email": email,
        "role": "user",
        "createdAt": datetime.utcnow().isoformat(),
    }
    return {"token": _issue_token(user), "user": user}
