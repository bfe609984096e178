"""Query helpers shared by the resource blueprints.

Each resource endpoint performs the same three store operations:
fetch one row by primary key, narrow a list with substring filters,
and page through the result. Keeping them here lets the route
handlers read as a list of filters.
"""
from __future__ import annotations

from typing import Type

from sqlalchemy import or_

from ..db import db
from ..errors import NotFoundError


def get_or_404(model: Type[db.Model], row_id: int, entity_name: str):
    """Return the ``model`` row with ``row_id`` or raise ``NotFoundError``.

    The error message reads ``"<entity_name> not found"``.
    """
    row = db.session.get(model, row_id)
    if row is None:
        raise NotFoundError(f"{entity_name} not found")
    return row


def contains(*columns, text: str):
    """Build a case-insensitive substring filter across ``columns``."""
    pattern = f"%{text}%"
    clauses = [column.ilike(pattern) for column in columns]
    return clauses[0] if len(clauses) == 1 else or_(*clauses)


def paginate(query, limit: int, offset: int) -> list:
    """Apply ``limit`` and ``offset`` to ``query`` and return the rows."""
    return query.limit(limit).offset(offset).all()
