"""The /feature resource."""

from __future__ import annotations

from dataclasses import dataclass

from .. import records
from ..auth import UserPerms
from ..create import create_feature
from ..errors import CreateError, ReadError
from ..read import read_all_from_features, read_from_feature
from .common import Response, error, group_payload, ok, parse_body, parse_id

_FIELDS = {"name": str, "description": str}


@dataclass(frozen=True)
class FeaturePayload:
    """A room feature as sent over the wire."""

    name: str
    description: str

    @classmethod
    def from_record(cls, record: records.Feature) -> FeaturePayload:
        return cls(name=record.name, description=record.description)


def get(database, user, query, body) -> Response:
    """Read one feature, or all of them with ``scope=all``."""
    user.require_perm(UserPerms.GENERAL)
    match query.consume("scope"):
        case None | "single":
            feature_id = parse_id(query)
            try:
                record = read_from_feature(database, feature_id)
            except ReadError as exc:
                return error(str(exc), 500)
            return ok(FeaturePayload.from_record(record))
        case "all":
            try:
                rows = read_all_from_features(database)
            except ReadError as exc:
                return error(str(exc), 500)
            return ok(group_payload((row.id, FeaturePayload.from_record(row)) for row in rows))
        case _:
            return error("Invalid scope parameter", 400)


def post(database, user, query, body) -> Response:
    """Create a feature."""
    user.require_perm(UserPerms.HIGH)
    request = FeaturePayload(**parse_body(body, _FIELDS))
    try:
        create_feature(database, request.name, request.description)
    except CreateError as exc:
        return error(str(exc), 500)
    return ok("")