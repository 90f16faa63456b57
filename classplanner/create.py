"""Insertion of rows into the scheduling tables."""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence

from .errors import CreateError, SQLFailure
from .util import to_str_list, validate_names


def _execute_insert_query(
    database: sqlite3.Connection,
    table_name: str,
    columns: Sequence[str],
    values: Sequence[object],
) -> None:
    if len(columns) != len(values):
        raise CreateError("DataIntegrityError")
    if not validate_names(table_name):
        raise CreateError("InvalidTableName")

    placeholders = ", ".join(["?"] * len(values))
    sql = f"INSERT INTO {table_name} ({to_str_list(columns)}) VALUES ({placeholders});"
    try:
        database.execute(sql, [str(value) for value in values])
    except (sqlite3.ProgrammingError, sqlite3.InterfaceError) as exc:
        raise CreateError(SQLFailure.BIND_FAILURE) from exc
    except sqlite3.Error as exc:
        raise CreateError(SQLFailure.QUERY_FAILURE) from exc
    database.commit()


def create_user(database, username, password, role):
    _execute_insert_query(database, "users", ("username", "password", "role"), (username, password, role))


def create_faculty(database, name, email, department):
    _execute_insert_query(database, "faculty", ("name", "email", "department"), (name, email, department))


def create_class(database, name, description, capacity, code, class_type, section, term):
    _execute_insert_query(
        database,
        "classes",
        ("name", "description", "capacity", "code", "class_type", "section", "term"),
        (name, description, capacity, code, class_type, section, term),
    )


def create_schedule(database, start_hour, start_minute, end_hour, end_minute, days):
    _execute_insert_query(
        database,
        "schedules",
        ("start_hour", "start_minute", "end_hour", "end_minute", "days"),
        (start_hour, start_minute, end_hour, end_minute, days),
    )


def create_room(database, room_number, capacity, room_type):
    _execute_insert_query(
        database, "rooms", ("room_number", "capacity", "room_type"), (room_number, capacity, room_type)
    )


def create_feature(database, name, description):
    _execute_insert_query(database, "features", ("name", "description"), (name, description))


def create_room_feature(database, room_id, feature_id):
    _execute_insert_query(database, "room_features", ("room_id", "feature_id"), (room_id, feature_id))


def create_preference(database, faculty_id, preference_type, value):
    _execute_insert_query(
        database,
        "preferences",
        ("faculty_id", "preference_type", "value"),
        (faculty_id, preference_type, value),
    )


def create_class_schedule_room(database, class_id, schedule_id, room_id):
    _execute_insert_query(
        database,
        "class_schedule_rooms",
        ("class_id", "schedule_id", "room_id"),
        (class_id, schedule_id, room_id),
    )


def create_class_faculty(database, class_id, faculty_id):
    _execute_insert_query(database, "class_faculty", ("class_id", "faculty_id"), (class_id, faculty_id))


def create_report(database, report_type, description):
    _execute_insert_query(database, "reports", ("report_type", "description"), (report_type, description))