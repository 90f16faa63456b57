"""Request and response plumbing shared by the resource endpoints."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class RequestError(Exception):
    """The request could not be understood."""


@dataclass
class Response:
    """An HTTP response: status, text body and extra headers."""

    status: int = 200
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)


def _dump(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def ok(body: Any) -> Response:
    """A 200 response; a dataclass body is sent as compact JSON."""
    if is_dataclass(body) and not isinstance(body, type):
        body = _dump(asdict(body))
    return Response(status=200, body=body)


def error(message: Any, status: int) -> Response:
    """A response carrying ``message`` as its body with the given status."""
    return Response(status=status, body=str(message))


class Query:
    """Query parameters read strictly in the order they were given."""

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        self._pairs: Sequence[tuple[str, str]] = list(pairs)
        self._index = 0

    def consume(self, key: str) -> str | None:
        """Take the next pair if its key is ``key``; otherwise leave it and return None."""
        if self._index >= len(self._pairs):
            return None
        name, value = self._pairs[self._index]
        if name != key:
            return None
        self._index += 1
        return value

    def consume_expect(self, key: str) -> str:
        """Like ``consume`` but raise RequestError when the key is not next."""
        value = self.consume(key)
        if value is None:
            raise RequestError("Query key missing!")
        return value


def parse_id(query: Query) -> int:
    """Take the ``id`` parameter and parse it as a 32-bit signed integer."""
    text = query.consume_expect("id")
    if not _INTEGER.fullmatch(text):
        raise RequestError("Parse Error")
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        raise RequestError("Parse Error")
    return value


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise RequestError(f"duplicate field `{key}`")
        result[key] = value
    return result


def _convert(name: str, value: Any, kind: Any) -> Any:
    if isinstance(kind, Mapping):
        return _extract(value, kind)
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int) or not _I32_MIN <= value <= _I32_MAX:
            raise RequestError(f"invalid type for field `{name}`: expected i32")
        return value
    if kind is str:
        if not isinstance(value, str):
            raise RequestError(f"invalid type for field `{name}`: expected a string")
        return value
    raise TypeError(f"unsupported field type {kind!r}")


def _extract(data: Any, fields: Mapping[str, Any]) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise RequestError("Invalid request body: expected an object")
    result: dict[str, Any] = {}
    for name, kind in fields.items():
        if name not in data:
            raise RequestError(f"missing field `{name}`")
        result[name] = _convert(name, data[name], kind)
    return result


def parse_body(body: str, fields: Mapping[str, Any]) -> dict[str, Any]:
    """Parse a JSON object holding ``fields`` (name to int, str or a nested mapping).

    Unknown keys are ignored; missing or mistyped fields raise RequestError.
    """
    try:
        data = json.loads(body, object_pairs_hook=_reject_duplicates)
    except json.JSONDecodeError as exc:
        raise RequestError(f"Invalid request body: {exc}") from exc
    return _extract(data, fields)


def group_payload(entries: Iterable[tuple[int, Any]]) -> str:
    """JSON listing of ``(id, payload)`` pairs under an ``entries`` key."""
    return _dump({"entries": [{"id": entry_id, "data": asdict(data)} for entry_id, data in entries]})