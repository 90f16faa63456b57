"""Removal of rows from the scheduling tables by id."""

from __future__ import annotations

import sqlite3

from .errors import DeleteError, SQLFailure
from .util import validate_names


def _execute_delete_by_id_query(database: sqlite3.Connection, table_name: str, id: object) -> None:
    if not validate_names(table_name):
        raise DeleteError("InvalidTableName")

    sql = f"DELETE FROM {table_name} WHERE id = ?;"
    try:
        database.execute(sql, (str(id),))
    except (sqlite3.ProgrammingError, sqlite3.InterfaceError) as exc:
        raise DeleteError(SQLFailure.BIND_FAILURE) from exc
    except sqlite3.Error as exc:
        raise DeleteError(SQLFailure.QUERY_FAILURE) from exc
    database.commit()


def delete_user(database, id):
    _execute_delete_by_id_query(database, "users", id)


def delete_faculty(database, id):
    _execute_delete_by_id_query(database, "faculty", id)


def delete_class(database, id):
    _execute_delete_by_id_query(database, "classes", id)


def delete_schedule(database, id):
    _execute_delete_by_id_query(database, "schedules", id)


def delete_room(database, id):
    _execute_delete_by_id_query(database, "rooms", id)


def delete_feature(database, id):
    _execute_delete_by_id_query(database, "features", id)


def delete_preference(database, id):
    _execute_delete_by_id_query(database, "preferences", id)


def delete_class_schedule_room(database, id):
    _execute_delete_by_id_query(database, "class_schedule_rooms", id)


def delete_class_faculty(database, id):
    _execute_delete_by_id_query(database, "class_faculty", id)


def delete_room_feature(database, id):
    _execute_delete_by_id_query(database, "room_features", id)


def delete_report(database, id):
    _execute_delete_by_id_query(database, "reports", id)