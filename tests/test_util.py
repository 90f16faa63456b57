import sqlite3

import pytest

from classplanner.util import VALID_TABLES, check_written, to_str_list, validate_names


def test_to_str_list_from_list():
    assert to_str_list(["a", "b", "c"]) == "a,b,c"


def test_to_str_list_from_generator():
    assert to_str_list(s for s in ["a", "b", "c"]) == "a,b,c"


def test_to_str_list_empty():
    assert to_str_list([]) == ""


def test_to_str_list_single():
    assert to_str_list(["only"]) == "only"


@pytest.mark.parametrize("name", VALID_TABLES)
def test_known_tables_valid(name):
    assert validate_names(name) is True


@pytest.mark.parametrize("name", ["", "Users", "users; DROP TABLE users", "teachers"])
def test_unknown_tables_invalid(name):
    assert validate_names(name) is False


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE t (id INTEGER PRIMARY KEY, v TEXT)")
    yield conn
    conn.close()


def test_check_written_after_insert(connection):
    cursor = connection.execute("INSERT INTO t (v) VALUES ('x')")
    assert check_written(cursor) is True


def test_check_written_when_nothing_changed(connection):
    cursor = connection.execute("DELETE FROM t WHERE id = 42")
    assert check_written(cursor) is False


def test_check_written_unknown_for_select(connection):
    cursor = connection.execute("SELECT * FROM t")
    assert check_written(cursor) is None