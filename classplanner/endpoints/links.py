"""The /csr, /cf and /rf resources linking classes, schedules, rooms, faculty and features."""

from __future__ import annotations

import json
from dataclasses import dataclass

from .. import records
from ..auth import UserPerms
from ..create import create_class_faculty, create_class_schedule_room, create_room_feature
from ..errors import CreateError, ReadError, UpdateError
from ..read import read_from_class_faculty, read_from_class_schedule_room, read_from_room_feature
from ..update import update_class_schedule_room
from .common import Response, error, ok, parse_body, parse_id


def _dump(value: object) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class ClassScheduleRoomPayload:
    """A class placed at a schedule in a room; sent as ``class``, ``room``, ``schedule``."""

    class_: int
    room: int
    schedule: int

    @classmethod
    def from_record(cls, record: records.ClassScheduleRoom) -> ClassScheduleRoomPayload:
        return cls(class_=record.class_id, room=record.room_id, schedule=record.schedule_id)

    @classmethod
    def from_body(cls, body: str) -> ClassScheduleRoomPayload:
        data = parse_body(body, {"class": int, "room": int, "schedule": int})
        return cls(class_=data["class"], room=data["room"], schedule=data["schedule"])

    def to_json(self) -> str:
        return _dump({"class": self.class_, "room": self.room, "schedule": self.schedule})


@dataclass(frozen=True)
class ClassFacultyPayload:
    """A faculty member teaching a class; sent as ``class``, ``faculty``."""

    class_: int
    faculty: int

    @classmethod
    def from_record(cls, record: records.ClassFaculty) -> ClassFacultyPayload:
        return cls(class_=record.class_id, faculty=record.faculty_id)

    @classmethod
    def from_body(cls, body: str) -> ClassFacultyPayload:
        data = parse_body(body, {"class": int, "faculty": int})
        return cls(class_=data["class"], faculty=data["faculty"])

    def to_json(self) -> str:
        return _dump({"class": self.class_, "faculty": self.faculty})


@dataclass(frozen=True)
class RoomFeaturePayload:
    """A feature present in a room; sent as ``room``, ``feature``."""

    room: int
    feature: int

    @classmethod
    def from_record(cls, record: records.RoomFeature) -> RoomFeaturePayload:
        return cls(room=record.room_id, feature=record.feature_id)

    @classmethod
    def from_body(cls, body: str) -> RoomFeaturePayload:
        data = parse_body(body, {"room": int, "feature": int})
        return cls(room=data["room"], feature=data["feature"])

    def to_json(self) -> str:
        return _dump({"room": self.room, "feature": self.feature})


def csr_get(database, user, query, body) -> Response:
    """Read one class placement."""
    user.require_perm(UserPerms.GENERAL)
    entry_id = parse_id(query)
    try:
        record = read_from_class_schedule_room(database, entry_id)
    except ReadError as exc:
        return error(str(exc), 500)
    return ok(ClassScheduleRoomPayload.from_record(record).to_json())


def csr_post(database, user, query, body) -> Response:
    """Create a class placement."""
    user.require_perm(UserPerms.HIGH)
    request = ClassScheduleRoomPayload.from_body(body)
    try:
        create_class_schedule_room(database, request.class_, request.schedule, request.room)
    except CreateError as exc:
        return error(str(exc), 500)
    return ok("")


def csr_put(database, user, query, body) -> Response:
    """Change one column of a class placement; the body names ``column`` and ``value``."""
    user.require_perm(UserPerms.HIGH)
    request = parse_body(body, {"column": str, "value": str})
    entry_id = parse_id(query)
    try:
        update_class_schedule_room(database, request["column"], request["value"], entry_id)
    except UpdateError as exc:
        return error(str(exc), 500)
    return ok("")


def cf_get(database, user, query, body) -> Response:
    """Read one class teaching assignment."""
    user.require_perm(UserPerms.GENERAL)
    entry_id = parse_id(query)
    try:
        record = read_from_class_faculty(database, entry_id)
    except ReadError as exc:
        return error(str(exc), 500)
    return ok(ClassFacultyPayload.from_record(record).to_json())


def cf_post(database, user, query, body) -> Response:
    """Create a class teaching assignment."""
    user.require_perm(UserPerms.HIGH)
    request = ClassFacultyPayload.from_body(body)
    try:
        create_class_faculty(database, request.class_, request.faculty)
    except CreateError as exc:
        return error(str(exc), 500)
    return ok("")


def rf_get(database, user, query, body) -> Response:
    """Read one room feature link."""
    user.require_perm(UserPerms.GENERAL)
    entry_id = parse_id(query)
    try:
        record = read_from_room_feature(database, entry_id)
    except ReadError as exc:
        return error(str(exc), 500)
    return ok(RoomFeaturePayload.from_record(record).to_json())


def rf_post(database, user, query, body) -> Response:
    """Create a room feature link."""
    user.require_perm(UserPerms.HIGH)
    request = RoomFeaturePayload.from_body(body)
    try:
        create_room_feature(database, request.room, request.feature)
    except CreateError as exc:
        return error(str(exc), 500)
    return ok("")