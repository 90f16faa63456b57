import json
import sqlite3

import pytest

from classplanner.auth import ActiveUser, AuthorizationError, UserPerms
from classplanner.endpoints import room as endpoint
from classplanner.endpoints.common import Query, RequestError
from classplanner.read import read_all_from_rooms
from classplanner.schema import define_db

LAB = {"number": "B12", "capacity": 24, "kind": "lab"}
HALL = {"number": "A1", "capacity": 120, "kind": "lecture"}


@pytest.fixture
def db():
    connection = sqlite3.connect(":memory:")
    define_db(connection)
    yield connection
    connection.close()


def test_post_and_get(db):
    assert endpoint.post(db, ActiveUser(), Query(), json.dumps(LAB)).status == 200
    [row] = read_all_from_rooms(db)
    assert (row.room_number, row.capacity, row.room_type) == ("B12", 24, "lab")
    response = endpoint.get(db, ActiveUser(), Query([("scope", "single"), ("id", str(row.id))]), "")
    assert json.loads(response.body) == LAB


def test_get_all(db):
    endpoint.post(db, ActiveUser(), Query(), json.dumps(LAB))
    endpoint.post(db, ActiveUser(), Query(), json.dumps(HALL))
    ids = [row.id for row in read_all_from_rooms(db)]
    response = endpoint.get(db, ActiveUser(), Query([("scope", "all")]), "")
    assert json.loads(response.body) == {
        "entries": [{"id": ids[0], "data": LAB}, {"id": ids[1], "data": HALL}]
    }


def test_get_all_empty(db):
    response = endpoint.get(db, ActiveUser(), Query([("scope", "all")]), "")
    assert json.loads(response.body) == {"entries": []}


def test_get_missing(db):
    response = endpoint.get(db, ActiveUser(), Query([("id", "8")]), "")
    assert (response.status, response.body) == (500, "NotFoundError")


def test_missing_field(db):
    with pytest.raises(RequestError, match="kind"):
        endpoint.post(db, ActiveUser(), Query(), json.dumps({"number": "B12", "capacity": 24}))


def test_get_requires_general(db):
    with pytest.raises(AuthorizationError):
        endpoint.get(db, ActiveUser(name="x", perms=UserPerms.NONE), Query([("scope", "all")]), "")