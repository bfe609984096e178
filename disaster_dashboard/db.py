"""Database setup utilities.

This module centralises the SQLAlchemy extension object used by the
models of the disaster dashboard. Every resource table lives in the
same database and is reached through the same scoped session.

Import ``db`` from ``disaster_dashboard`` rather than from this module
directly. The application factory initialises ``db`` with the Flask
app.
"""
from __future__ import annotations

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
