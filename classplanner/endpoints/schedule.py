"""The /schedule resource."""

from __future__ import annotations

from dataclasses import dataclass

from .. import records
from ..auth import UserPerms
from ..create import create_schedule
from ..errors import CreateError, ReadError
from ..read import read_all_from_schedule, read_from_schedule
from .common import Response, error, group_payload, ok, parse_body, parse_id

_TIME_FIELDS = {"hour": int, "minute": int}
_FIELDS = {"start": _TIME_FIELDS, "end": _TIME_FIELDS, "days": str}


@dataclass(frozen=True)
class Time:
    """A time of day."""

    hour: int
    minute: int


@dataclass(frozen=True)
class SchedulePayload:
    """A schedule as sent over the wire."""

    start: Time
    end: Time
    days: str

    @classmethod
    def from_record(cls, record: records.Schedule) -> SchedulePayload:
        return cls(
            start=Time(hour=record.start_hour, minute=record.start_minute),
            end=Time(hour=record.end_hour, minute=record.end_minute),
            days=record.days,
        )


def get(database, user, query, body) -> Response:
    """Read one schedule, or all of them with ``scope=all``."""
    user.require_perm(UserPerms.GENERAL)
    match query.consume("scope"):
        case None | "single":
            schedule_id = parse_id(query)
            try:
                record = read_from_schedule(database, schedule_id)
            except ReadError as exc:
                return error(str(exc), 500)
            return ok(SchedulePayload.from_record(record))
        case "all":
            try:
                rows = read_all_from_schedule(database)
            except ReadError as exc:
                return error(str(exc), 500)
            return ok(group_payload((row.id, SchedulePayload.from_record(row)) for row in rows))
        case _:
            return error("Invalid scope parameter", 400)


def post(database, user, query, body) -> Response:
    """Create a schedule."""
    user.require_perm(UserPerms.HIGH)
    data = parse_body(body, _FIELDS)
    request = SchedulePayload(start=Time(**data["start"]), end=Time(**data["end"]), days=data["days"])
    try:
        create_schedule(
            database,
            request.start.hour,
            request.start.minute,
            request.end.hour,
            request.end.minute,
            request.days,
        )
    except CreateError as exc:
        return error(str(exc), 500)
    return ok("")