"""Response envelopes.

The dashboard frontend expects different shapes from different
endpoints: collection reads are wrapped in ``{"success", "data"}``,
single-row reads and updates return the bare row, and most creates
return ``{"success", "message", "data"}``. The emergency contacts
endpoints return bare rows and arrays throughout. The shapes are built
here so the convention is visible in one place.
"""
from __future__ import annotations

from datetime import datetime, timezone


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def collection(name: str, rows: list[dict]) -> dict:
    """Wrap a page of dumped rows under ``data.<name>``."""
    return {
        "success": True,
        "data": {
            name: rows,
            "total": len(rows),
            "lastUpdated": utc_now_iso(),
        },
    }


def created(entity_name: str, row: dict) -> tuple[dict, int]:
    return {
        "success": True,
        "message": f"{entity_name} created successfully",
        "data": row,
    }, 201
