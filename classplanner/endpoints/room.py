"""The /room resource."""

from __future__ import annotations

from dataclasses import dataclass

from .. import records
from ..auth import UserPerms
from ..create import create_room
from ..errors import CreateError, ReadError
from ..read import read_all_from_rooms, read_from_room
from .common import Response, error, group_payload, ok, parse_body, parse_id

_FIELDS = {"number": str, "capacity": int, "kind": str}


@dataclass(frozen=True)
class RoomPayload:
    """A room as sent over the wire."""

    number: str
    capacity: int
    kind: str

    @classmethod
    def from_record(cls, record: records.Room) -> RoomPayload:
        return cls(number=record.room_number, capacity=record.capacity, kind=record.room_type)


def get(database, user, query, body) -> Response:
    """Read one room, or all of them with ``scope=all``."""
    user.require_perm(UserPerms.GENERAL)
    match query.consume("scope"):
        case None | "single":
            room_id = parse_id(query)
            try:
                record = read_from_room(database, room_id)
            except ReadError as exc:
                return error(str(exc), 500)
            return ok(RoomPayload.from_record(record))
        case "all":
            try:
                rows = read_all_from_rooms(database)
            except ReadError as exc:
                return error(str(exc), 500)
            return ok(group_payload((row.id, RoomPayload.from_record(row)) for row in rows))
        case _:
            return error("Invalid scope parameter", 400)


def post(database, user, query, body) -> Response:
    """Create a room."""
    user.require_perm(UserPerms.HIGH)
    request = RoomPayload(**parse_body(body, _FIELDS))
    try:
        create_room(database, request.number, request.capacity, request.kind)
    except CreateError as exc:
        return error(str(exc), 500)
    return ok("")