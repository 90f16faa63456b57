import json
import sqlite3

import pytest

from classplanner import records
from classplanner.auth import ActiveUser, AuthorizationError, UserPerms
from classplanner.endpoints.common import Query, RequestError
from classplanner.endpoints.preference import PreferencePayload, get, post
from classplanner.schema import define_db

BODY = {"faculty": 4, "kind": "time", "value": "morning"}


@pytest.fixture
def database():
    connection = sqlite3.connect(":memory:")
    define_db(connection)
    yield connection
    connection.close()


def test_post_then_get(database):
    created = post(database, ActiveUser(), Query(), json.dumps(BODY))
    assert created.status == 200
    response = get(database, ActiveUser(), Query([("id", "1")]), "")
    assert json.loads(response.body) == BODY


def test_get_all(database):
    post(database, ActiveUser(), Query(), json.dumps(BODY))
    response = get(database, ActiveUser(), Query([("scope", "all")]), "")
    assert json.loads(response.body) == {"entries": [{"id": 1, "data": BODY}]}


def test_get_missing(database):
    response = get(database, ActiveUser(), Query([("id", "2")]), "")
    assert (response.status, response.body) == (500, "NotFoundError")


def test_invalid_scope(database):
    response = get(database, ActiveUser(), Query([("scope", "x")]), "")
    assert (response.status, response.body) == (400, "Invalid scope parameter")


def test_post_faculty_must_be_integer(database):
    with pytest.raises(RequestError):
        post(database, ActiveUser(), Query(), json.dumps({"faculty": "4", "kind": "time", "value": "x"}))


def test_post_missing_field(database):
    with pytest.raises(RequestError):
        post(database, ActiveUser(), Query(), json.dumps({"faculty": 4, "kind": "time"}))


def test_permissions(database):
    with pytest.raises(AuthorizationError):
        get(database, ActiveUser(perms=UserPerms.NONE), Query([("id", "1")]), "")
    with pytest.raises(AuthorizationError):
        post(database, ActiveUser(perms=UserPerms.GENERAL), Query(), json.dumps(BODY))


def test_payload_from_record():
    record = records.Preference(id=1, faculty_id=7, preference_type="room", value="B12")
    assert PreferencePayload.from_record(record) == PreferencePayload(faculty=7, kind="room", value="B12")