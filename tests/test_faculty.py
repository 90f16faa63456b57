import json
import sqlite3

import pytest

from classplanner.auth import ActiveUser, AuthorizationError, UserPerms
from classplanner.endpoints import faculty as endpoint
from classplanner.endpoints.common import Query, RequestError
from classplanner.read import read_all_from_faculty
from classplanner.schema import define_db

ADA = {"name": "Ada", "email": "ada@example.com", "department": "Math"}
BOB = {"name": "Bob", "email": "bob@example.com", "department": "Physics"}


@pytest.fixture
def db():
    connection = sqlite3.connect(":memory:")
    define_db(connection)
    yield connection
    connection.close()


def test_post_and_get_single(db):
    assert endpoint.post(db, ActiveUser(), Query(), json.dumps(ADA)).status == 200
    [row] = read_all_from_faculty(db)
    response = endpoint.get(db, ActiveUser(), Query([("scope", "single"), ("id", str(row.id))]), "")
    assert json.loads(response.body) == ADA


def test_get_default_scope_is_single(db):
    endpoint.post(db, ActiveUser(), Query(), json.dumps(ADA))
    [row] = read_all_from_faculty(db)
    response = endpoint.get(db, ActiveUser(), Query([("id", str(row.id))]), "")
    assert json.loads(response.body) == ADA


def test_get_all(db):
    endpoint.post(db, ActiveUser(), Query(), json.dumps(ADA))
    endpoint.post(db, ActiveUser(), Query(), json.dumps(BOB))
    ids = [row.id for row in read_all_from_faculty(db)]
    response = endpoint.get(db, ActiveUser(), Query([("scope", "all")]), "")
    assert json.loads(response.body) == {
        "entries": [{"id": ids[0], "data": ADA}, {"id": ids[1], "data": BOB}]
    }


def test_invalid_scope(db):
    response = endpoint.get(db, ActiveUser(), Query([("scope", "many")]), "")
    assert response.status == 400
    assert response.body == "Invalid scope parameter"


def test_get_not_found(db):
    response = endpoint.get(db, ActiveUser(), Query([("id", "5")]), "")
    assert (response.status, response.body) == (500, "NotFoundError")


def test_permissions(db):
    with pytest.raises(AuthorizationError):
        endpoint.get(db, ActiveUser(name="x", perms=UserPerms.NONE), Query([("id", "1")]), "")
    with pytest.raises(AuthorizationError):
        endpoint.post(db, ActiveUser(name="x", perms=UserPerms.GENERAL), Query(), json.dumps(ADA))


def test_post_wrong_type(db):
    with pytest.raises(RequestError):
        endpoint.post(db, ActiveUser(), Query(), json.dumps({**ADA, "name": 3}))