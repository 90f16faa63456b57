"""Lookup of rows in the scheduling tables."""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence
from dataclasses import fields
from typing import TypeVar

from .errors import ReadError, SQLFailure
from .records import (
    Class,
    ClassFaculty,
    ClassScheduleRoom,
    Faculty,
    Feature,
    Preference,
    Report,
    Room,
    RoomFeature,
    Schedule,
    User,
)
from .util import validate_names

RecordT = TypeVar("RecordT")


def _run(database: sqlite3.Connection, sql: str, params: Sequence[object]) -> sqlite3.Cursor:
    try:
        return database.execute(sql, tuple(params))
    except (sqlite3.ProgrammingError, sqlite3.InterfaceError) as exc:
        raise ReadError(SQLFailure.BIND_FAILURE) from exc
    except sqlite3.Error as exc:
        raise ReadError(SQLFailure.QUERY_FAILURE) from exc


def _to_record(record_type: type[RecordT], cursor: sqlite3.Cursor, row: Sequence[object]) -> RecordT:
    columns = [description[0] for description in cursor.description]
    mapping = dict(zip(columns, row))
    try:
        return record_type(**{field.name: mapping[field.name] for field in fields(record_type)})
    except (KeyError, TypeError) as exc:
        raise ReadError(SQLFailure.QUERY_FAILURE) from exc


def _first(record_type: type[RecordT], database: sqlite3.Connection, sql: str, params: Sequence[object]) -> RecordT:
    cursor = _run(database, sql, params)
    try:
        row = cursor.fetchone()
    except sqlite3.Error as exc:
        raise ReadError(SQLFailure.QUERY_FAILURE) from exc
    if row is None:
        raise ReadError("NotFoundError")
    return _to_record(record_type, cursor, row)


def _read_by_id(record_type: type[RecordT], database: sqlite3.Connection, table_name: str, id: int) -> RecordT:
    if not validate_names(table_name):
        raise ReadError("InvalidTableName")
    return _first(record_type, database, f"SELECT * FROM {table_name} WHERE id = ?;", (id,))


def _read_all(record_type: type[RecordT], database: sqlite3.Connection, table_name: str) -> list[RecordT]:
    cursor = _run(database, f"SELECT * FROM {table_name};", ())
    try:
        rows = cursor.fetchall()
    except sqlite3.Error as exc:
        raise ReadError(SQLFailure.QUERY_FAILURE) from exc
    return [_to_record(record_type, cursor, row) for row in rows]


def read_from_user_with_username(database: sqlite3.Connection, username: str) -> User:
    """The user with the given username; raises ReadError if there is none."""
    return _first(User, database, "SELECT * FROM users WHERE username = ?;", (username,))


def read_from_user(database, user_id) -> User:
    return _read_by_id(User, database, "users", user_id)


def read_from_faculty(database, faculty_id) -> Faculty:
    return _read_by_id(Faculty, database, "faculty", faculty_id)


def read_from_class(database, class_id) -> Class:
    return _read_by_id(Class, database, "classes", class_id)


def read_from_schedule(database, schedule_id) -> Schedule:
    return _read_by_id(Schedule, database, "schedules", schedule_id)


def read_from_room(database, room_id) -> Room:
    return _read_by_id(Room, database, "rooms", room_id)


def read_from_feature(database, feature_id) -> Feature:
    return _read_by_id(Feature, database, "features", feature_id)


def read_from_preference(database, preference_id) -> Preference:
    return _read_by_id(Preference, database, "preferences", preference_id)


def read_from_class_schedule_room(database, class_schedule_room_id) -> ClassScheduleRoom:
    return _read_by_id(ClassScheduleRoom, database, "class_schedule_rooms", class_schedule_room_id)


def read_from_class_faculty(database, class_faculty_id) -> ClassFaculty:
    return _read_by_id(ClassFaculty, database, "class_faculty", class_faculty_id)


def read_from_report(database, report_id) -> Report:
    return _read_by_id(Report, database, "reports", report_id)


def read_from_room_feature(database, room_feature_id) -> RoomFeature:
    return _read_by_id(RoomFeature, database, "room_features", room_feature_id)


def read_all_from_classes(database) -> list[Class]:
    return _read_all(Class, database, "classes")


def read_all_from_schedule(database) -> list[Schedule]:
    return _read_all(Schedule, database, "schedules")


def read_all_from_faculty(database) -> list[Faculty]:
    return _read_all(Faculty, database, "faculty")


def read_all_from_preferences(database) -> list[Preference]:
    return _read_all(Preference, database, "preferences")


def read_all_from_rooms(database) -> list[Room]:
    return _read_all(Room, database, "rooms")


def read_all_from_features(database) -> list[Feature]:
    return _read_all(Feature, database, "features")