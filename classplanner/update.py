"""Changes to single columns of rows in the scheduling tables."""

from __future__ import annotations

import sqlite3

from .errors import SQLFailure, UpdateError
from .util import validate_names


def update(database: sqlite3.Connection, table_name: str, column_name: str, new_value: str, id: int) -> None:
    """Set ``column_name`` of row ``id`` in ``table_name`` to ``new_value``.

    The column name is not checked against the table.
    """
    if not validate_names(table_name):
        raise UpdateError("InvalidTableName")

    sql = f"UPDATE {table_name} SET {column_name} = ? WHERE id = ?;"
    try:
        database.execute(sql, (new_value, id))
    except (sqlite3.ProgrammingError, sqlite3.InterfaceError) as exc:
        raise UpdateError(SQLFailure.BIND_FAILURE) from exc
    except sqlite3.Error as exc:
        raise UpdateError(SQLFailure.QUERY_FAILURE) from exc
    database.commit()


def update_user(database, column_name, new_value, id):
    update(database, "users", column_name, new_value, id)


def update_faculty(database, column_name, new_value, id):
    update(database, "faculty", column_name, new_value, id)


def update_class(database, column_name, new_value, id):
    update(database, "classes", column_name, new_value, id)


def update_schedule(database, column_name, new_value, id):
    update(database, "schedules", column_name, new_value, id)


def update_room(database, column_name, new_value, id):
    update(database, "rooms", column_name, new_value, id)


def update_feature(database, column_name, new_value, id):
    update(database, "features", column_name, new_value, id)


def update_preference(database, column_name, new_value, id):
    update(database, "preferences", column_name, new_value, id)


def update_class_schedule_room(database, column_name, new_value, id):
    update(database, "class_schedule_rooms", column_name, new_value, id)


def update_class_faculty(database, column_name, new_value, id):
    update(database, "class_faculty", column_name, new_value, id)


def update_room_feature(database, column_name, new_value, id):
    update(database, "room_features", column_name, new_value, id)


def update_report(database, column_name, new_value, id):
    update(database, "reports", column_name, new_value, id)