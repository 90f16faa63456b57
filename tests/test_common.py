import json
from dataclasses import dataclass

import pytest

from classplanner.endpoints.common import (
    Query,
    RequestError,
    error,
    group_payload,
    ok,
    parse_body,
    parse_id,
)


@dataclass
class Sample:
    a: int
    b: str


def test_consume_in_order():
    query = Query([("scope", "all"), ("id", "3")])
    assert query.consume("id") is None
    assert query.consume("scope") == "all"
    assert query.consume("id") == "3"
    assert query.consume("id") is None


def test_consume_expect_missing():
    with pytest.raises(RequestError, match="Query key missing!"):
        Query().consume_expect("id")


def test_parse_id_valid():
    assert parse_id(Query([("id", "42")])) == 42
    assert parse_id(Query([("id", "-7")])) == -7


@pytest.mark.parametrize("text", ["abc", "", "1.5", " 4", "2147483648", "1_0"])
def test_parse_id_invalid(text):
    with pytest.raises(RequestError, match="Parse Error"):
        parse_id(Query([("id", text)]))


def test_parse_id_missing_key():
    with pytest.raises(RequestError, match="Query key missing!"):
        parse_id(Query([("scope", "single")]))


def test_parse_body_round_trip_ignores_unknown():
    body = json.dumps({"a": 5, "b": "x", "extra": True})
    assert parse_body(body, {"a": int, "b": str}) == {"a": 5, "b": "x"}


def test_parse_body_nested():
    body = json.dumps({"start": {"hour": 9, "minute": 30}, "days": "MWF"})
    spec = {"start": {"hour": int, "minute": int}, "days": str}
    assert parse_body(body, spec) == {"start": {"hour": 9, "minute": 30}, "days": "MWF"}


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        "",
        "[1, 2]",
        '{"a": 1}',
        '{"a": "1", "b": "x"}',
        '{"a": true, "b": "x"}',
        '{"a": 1.0, "b": "x"}',
        '{"a": 1, "b": 2}',
        '{"a": 1, "a": 2, "b": "x"}',
        '{"a": 2147483648, "b": "x"}',
    ],
)
def test_parse_body_rejects(body):
    with pytest.raises(RequestError):
        parse_body(body, {"a": int, "b": str})


def test_group_payload_empty():
    assert group_payload([]) == '{"entries":[]}'


def test_group_payload_entries():
    text = group_payload([(1, Sample(1, "x")), (4, Sample(2, "y"))])
    assert json.loads(text) == {
        "entries": [
            {"id": 1, "data": {"a": 1, "b": "x"}},
            {"id": 4, "data": {"a": 2, "b": "y"}},
        ]
    }
    assert " " not in text


def test_ok_with_text_and_dataclass():
    assert ok("").status == 200
    assert ok("").body == ""
    response = ok(Sample(3, "z"))
    assert response.body == '{"a":3,"b":"z"}'


def test_error_response():
    response = error("Invalid path!", 400)
    assert response.status == 400
    assert response.body == "Invalid path!"