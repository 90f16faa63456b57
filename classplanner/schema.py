"""Creation of the scheduling database tables."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field

from .errors import SQLError, SQLFailure

_NAME = "VARCHAR(255)"


@dataclass(frozen=True)
class _Table:
    name: str
    columns: tuple[tuple[str, str], ...]
    references: tuple[tuple[str, str], ...] = field(default=())

    def statement(self) -> str:
        parts = [f"`id` INTEGER PRIMARY KEY"]
        parts.extend(f"`{column}` {kind}" for column, kind in self.columns)
        parts.extend(
            f"FOREIGN KEY (`{column}`) REFERENCES `{target}` (`id`)"
            for column, target in self.references
        )
        return f"CREATE TABLE `{self.name}` ({', '.join(parts)});"


_TABLES = (
    _Table("users", (("username", f"{_NAME} UNIQUE"), ("password", _NAME), ("role", _NAME))),
    _Table("faculty", (("name", _NAME), ("email", _NAME), ("department", _NAME))),
    _Table(
        "classes",
        (
            ("name", _NAME),
            ("description", "TEXT"),
            ("capacity", "INTEGER"),
            ("code", f"{_NAME} UNIQUE"),
            ("class_type", _NAME),
            ("section", _NAME),
            ("term", _NAME),
        ),
    ),
    _Table(
        "schedules",
        (
            ("start_hour", "INTEGER"),
            ("start_minute", "INTEGER"),
            ("end_hour", "INTEGER"),
            ("end_minute", "INTEGER"),
            ("days", "VARCHAR(50)"),
        ),
    ),
    _Table("rooms", (("room_number", _NAME), ("capacity", "INTEGER"), ("room_type", _NAME))),
    _Table("features", (("name", _NAME), ("description", "TEXT"))),
    _Table(
        "room_features",
        (("room_id", "INTEGER"), ("feature_id", "INTEGER")),
        (("room_id", "rooms"), ("feature_id", "features")),
    ),
    _Table(
        "preferences",
        (("faculty_id", "INTEGER"), ("preference_type", _NAME), ("value", _NAME)),
        (("faculty_id", "faculty"),),
    ),
    _Table(
        "class_schedule_rooms",
        (("class_id", "INTEGER"), ("schedule_id", "INTEGER"), ("room_id", "INTEGER")),
        (("class_id", "classes"), ("schedule_id", "schedules"), ("room_id", "rooms")),
    ),
    _Table(
        "class_faculty",
        (("class_id", "INTEGER"), ("faculty_id", "INTEGER")),
        (("class_id", "classes"), ("faculty_id", "faculty")),
    ),
    _Table("reports", (("report_type", _NAME), ("description", "TEXT"))),
)

SCHEMA = "\n".join(table.statement() for table in _TABLES) + "\n"


def define_db(database: sqlite3.Connection) -> None:
    """Create every table; raises SQLError if any statement fails."""
    try:
        database.executescript(SCHEMA)
    except sqlite3.Error as exc:
        raise SQLError(SQLFailure.QUERY_FAILURE) from exc