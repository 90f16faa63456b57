"""Administrative endpoints: table creation and the login self-check."""

from __future__ import annotations

from ..auth import UserPerms
from ..crypto import self_test
from ..errors import SQLError
from ..schema import define_db
from .common import Response, error, ok


def define_post(database, user, query, body) -> Response:
    """Create every table; admins only."""
    user.require_perm(UserPerms.ADMIN)
    try:
        define_db(database)
    except SQLError as exc:
        return error(str(exc), 500)
    return ok("")


def login_get(database, user, query, body) -> Response:
    """Run the cryptography self-check and return its output."""
    return ok(self_test())