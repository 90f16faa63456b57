"""The /faculty resource."""

from __future__ import annotations

from dataclasses import dataclass

from .. import records
from ..auth import UserPerms
from ..create import create_faculty
from ..errors import CreateError, ReadError
from ..read import read_all_from_faculty, read_from_faculty
from .common import Response, error, group_payload, ok, parse_body, parse_id

_FIELDS = {"name": str, "email": str, "department": str}


@dataclass(frozen=True)
class FacultyPayload:
    """A faculty member as sent over the wire."""

    name: str
    email: str
    department: str

    @classmethod
    def from_record(cls, record: records.Faculty) -> FacultyPayload:
        return cls(name=record.name, email=record.email, department=record.department)


def get(database, user, query, body) -> Response:
    """Read one faculty member, or all of them with ``scope=all``."""
    user.require_perm(UserPerms.GENERAL)
    match query.consume("scope"):
        case None | "single":
            faculty_id = parse_id(query)
            try:
                record = read_from_faculty(database, faculty_id)
            except ReadError as exc:
                return error(str(exc), 500)
            return ok(FacultyPayload.from_record(record))
        case "all":
            try:
                rows = read_all_from_faculty(database)
            except ReadError as exc:
                return error(str(exc), 500)
            return ok(group_payload((row.id, FacultyPayload.from_record(row)) for row in rows))
        case _:
            return error("Invalid scope parameter", 400)


def post(database, user, query, body) -> Response:
    """Create a faculty member."""
    user.require_perm(UserPerms.HIGH)
    request = FacultyPayload(**parse_body(body, _FIELDS))
    try:
        create_faculty(database, request.name, request.email, request.department)
    except CreateError as exc:
        return error(str(exc), 500)
    return ok("")