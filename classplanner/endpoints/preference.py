"""The /pref resource."""

from __future__ import annotations

from dataclasses import dataclass

from .. import records
from ..auth import UserPerms
from ..create import create_preference
from ..errors import CreateError, ReadError
from ..read import read_all_from_preferences, read_from_preference
from .common import Response, error, group_payload, ok, parse_body, parse_id

_FIELDS = {"faculty": int, "kind": str, "value": str}


@dataclass(frozen=True)
class PreferencePayload:
    """A faculty preference as sent over the wire."""

    faculty: int
    kind: str
    value: str

    @classmethod
    def from_record(cls, record: records.Preference) -> PreferencePayload:
        return cls(faculty=record.faculty_id, kind=record.preference_type, value=record.value)


def get(database, user, query, body) -> Response:
    """Read one preference, or all of them with ``scope=all``."""
    user.require_perm(UserPerms.GENERAL)
    match query.consume("scope"):
        case None | "single":
            preference_id = parse_id(query)
            try:
                record = read_from_preference(database, preference_id)
            except ReadError as exc:
                return error(str(exc), 500)
            return ok(PreferencePayload.from_record(record))
        case "all":
            try:
                rows = read_all_from_preferences(database)
            except ReadError as exc:
                return error(str(exc), 500)
            return ok(group_payload((row.id, PreferencePayload.from_record(row)) for row in rows))
        case _:
            return error("Invalid scope parameter", 400)


def post(database, user, query, body) -> Response:
    """Create a preference."""
    user.require_perm(UserPerms.HIGH)
    request = PreferencePayload(**parse_body(body, _FIELDS))
    try:
        create_preference(database, request.faculty, request.kind, request.value)
    except CreateError as exc:
        return error(str(exc), 500)
    return ok("")