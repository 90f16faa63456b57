"""Small helpers shared by the storage functions."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable

VALID_TABLES = (
    "users",
    "faculty",
    "classes",
    "schedules",
    "rooms",
    "features",
    "room_features",
    "preferences",
    "class_schedule_rooms",
    "faculty_rooms",
    "reports",
)


def to_str_list(items: Iterable[str]) -> str:
    """Join strings into a comma separated list; empty input gives ''."""
    return ",".join(items)


def validate_names(table_name: str) -> bool:
    """Whether ``table_name`` is one of the known tables."""
    return table_name in VALID_TABLES


def check_written(cursor: sqlite3.Cursor) -> bool | None:
    """Whether the statement run on ``cursor`` wrote any rows, or None if unknown."""
    rows = cursor.rowcount
    if rows is None or rows < 0:
        return None
    return rows > 0