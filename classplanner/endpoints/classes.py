"""The /class resource."""

from __future__ import annotations

from dataclasses import dataclass

from .. import records
from ..auth import UserPerms
from ..create import create_class
from ..errors import CreateError, ReadError
from ..read import read_all_from_classes, read_from_class
from .common import Response, error, group_payload, ok, parse_body, parse_id

_FIELDS = {
    "name": str,
    "description": str,
    "capacity": int,
    "code": str,
    "kind": str,
    "section": str,
    "term": str,
}


@dataclass(frozen=True)
class ClassPayload:
    """A class as sent over the wire."""

    name: str
    description: str
    capacity: int
    code: str
    kind: str
    section: str
    term: str

    @classmethod
    def from_record(cls, record: records.Class) -> ClassPayload:
        return cls(
            name=record.name,
            description=record.description,
            capacity=record.capacity,
            code=record.code,
            kind=record.class_type,
            section=record.section,
            term=record.term,
        )


def get(database, user, query, body) -> Response:
    """Read one class, or all of them with ``scope=all``."""
    user.require_perm(UserPerms.GENERAL)
    match query.consume("scope"):
        case None | "single":
            class_id = parse_id(query)
            try:
                record = read_from_class(database, class_id)
            except ReadError as exc:
                return error(str(exc), 500)
            return ok(ClassPayload.from_record(record))
        case "all":
            try:
                rows = read_all_from_classes(database)
            except ReadError as exc:
                return error(str(exc), 500)
            return ok(group_payload((row.id, ClassPayload.from_record(row)) for row in rows))
        case _:
            return error("Invalid scope parameter", 400)


def post(database, user, query, body) -> Response:
    """Create a class."""
    user.require_perm(UserPerms.HIGH)
    request = ClassPayload(**parse_body(body, _FIELDS))
    try:
        create_class(
            database,
            request.name,
            request.description,
            request.capacity,
            request.code,
            request.kind,
            request.section,
            request.term,
        )
    except CreateError as exc:
        return error(str(exc), 500)
    return ok("")