"""The /user resource."""

from __future__ import annotations

from dataclasses import dataclass

from .. import records
from ..create import create_user
from ..errors import CreateError, ReadError
from ..read import read_from_user
from .common import Response, error, ok, parse_body, parse_id

_FIELDS = {"username": str, "password": str, "role": str}


@dataclass(frozen=True)
class UserPayload:
    """A user as sent over the wire."""

    username: str
    password: str
    role: str

    @classmethod
    def from_record(cls, record: records.User) -> UserPayload:
        return cls(username=record.username, password=record.password, role=record.role)


def get(database, user, query, body) -> Response:
    """Read one user; non-admins may only read themselves."""
    user_id = parse_id(query)
    try:
        record = read_from_user(database, user_id)
    except ReadError as exc:
        return error(str(exc), 500)
    user.require_name(record.username)
    return ok(UserPayload.from_record(record))


def post(database, user, query, body) -> Response:
    """Create a user."""
    request = UserPayload(**parse_body(body, _FIELDS))
    try:
        create_user(database, request.username, request.password, request.role)
    except CreateError as exc:
        return error(str(exc), 500)
    return ok("")