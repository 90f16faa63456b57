"""Request routing for the scheduling service, with a WSGI front end."""

from __future__ import annotations

import argparse
import sqlite3
from collections.abc import Callable, Mapping
from http import HTTPStatus
from wsgiref.simple_server import make_server

from .auth import ActiveUser, AuthorizationError, UserPerms, parse_role
from .endpoints import admin, classes, faculty, feature, links, preference, room, schedule
from .endpoints import user as user_endpoint
from .endpoints.common import Query, RequestError, Response, error
from .errors import ReadError
from .read import read_from_user_with_username

ENABLE_AUTH = False

Callback = Callable[[sqlite3.Connection, ActiveUser, Query, str], Response]

_RESOURCES: dict[str, dict[str, Callback]] = {
    "/admin/define": {"POST": admin.define_post},
    "/login": {"GET": admin.login_get},
    "/user": {"GET": user_endpoint.get, "POST": user_endpoint.post},
    "/faculty": {"GET": faculty.get, "POST": faculty.post},
    "/class": {"GET": classes.get, "POST": classes.post},
    "/room": {"GET": room.get, "POST": room.post},
    "/schedule": {"GET": schedule.get, "POST": schedule.post},
    "/feature": {"GET": feature.get, "POST": feature.post},
    "/pref": {"GET": preference.get, "POST": preference.post},
    "/csr": {"GET": links.csr_get, "POST": links.csr_post, "PUT": links.csr_put},
    "/cf": {"GET": links.cf_get, "POST": links.cf_post},
    "/rf": {"GET": links.rf_get, "POST": links.rf_post},
}


def parse_query(query_string: str | None) -> list[tuple[str, str]]:
    """Split a raw query string into ``(key, value)`` pairs, in order.

    ``None`` means no query at all. Every part must contain ``=``,
    otherwise RequestError is raised.
    """
    if query_string is None:
        return []
    pairs = []
    for part in query_string.split("&"):
        key, sep, value = part.partition("=")
        if not sep:
            raise RequestError("Invalid query parameter!")
        pairs.append((key, value))
    return pairs


def _header(headers: Mapping[str, str] | None, name: str) -> str | None:
    if not headers:
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def _authenticate(database: sqlite3.Connection, headers: Mapping[str, str] | None) -> ActiveUser | Response:
    signature = _header(headers, "X-Signature")
    if signature is None:
        return ActiveUser(name="", perms=UserPerms.NONE)
    username, sep, supplied = signature.partition(" ")
    if not sep:
        raise RequestError("Bad Signature Formatting")
    try:
        record = read_from_user_with_username(database, username)
    except ReadError as exc:
        raise RequestError("User Lookup Failure") from exc
    if record.password != supplied:
        return error("Invalid Credentials!", 400)
    return ActiveUser(name=username, perms=parse_role(record.role))


def process_operation(
    database: sqlite3.Connection,
    method: str,
    path: str,
    query_string: str | None = None,
    body: str = "",
    headers: Mapping[str, str] | None = None,
    enable_auth: bool = ENABLE_AUTH,
) -> Response:
    """Route one request to its endpoint.

    Errors raised by endpoints (RequestError, AuthorizationError) propagate.
    """
    methods = _RESOURCES.get(path)
    if methods is None:
        return error("Invalid path!", 400)

    if method == "OPTIONS":
        return Response(
            status=200,
            body="",
            headers={
                "Access-Control-Allow-Methods": ", ".join(methods),
                "Access-Control-Allow-Headers": "Content-Type,X-MsgId,X-Signature",
                "Access-Control-Max-Age": "86400",
            },
        )

    active = ActiveUser(name="", perms=UserPerms.ADMIN)
    if enable_auth:
        outcome = _authenticate(database, headers)
        if isinstance(outcome, Response):
            return outcome
        active = outcome

    try:
        pairs = parse_query(query_string)
    except RequestError:
        return error("Invalid query parameter!", 400)

    callback = methods.get(method)
    if callback is None:
        return error("Invalid method!", 400)
    return callback(database, active, Query(pairs), body)


def handle(
    database: sqlite3.Connection,
    method: str,
    path: str,
    query_string: str | None = None,
    body: bytes | str = b"",
    headers: Mapping[str, str] | None = None,
    enable_auth: bool = ENABLE_AUTH,
) -> Response:
    """Handle a whole request: decode the body, route it, and add the CORS header."""
    if method == "GET":
        text = ""
    elif isinstance(body, str):
        text = body
    else:
        try:
            text = bytes(body).decode("utf-8")
        except UnicodeDecodeError:
            return error("Invalid Body!", 400)

    try:
        response = process_operation(database, method, path, query_string, text, headers, enable_auth)
    except (RequestError, AuthorizationError) as exc:
        return error(str(exc), 500)

    response.headers["Access-Control-Allow-Origin"] = "*"
    return response


def _header_name(environ_key: str) -> str:
    return "-".join(part.capitalize() for part in environ_key[len("HTTP_"):].split("_"))


def make_wsgi_app(database: sqlite3.Connection, enable_auth: bool = ENABLE_AUTH):
    """A WSGI application serving the scheduling resources from ``database``."""

    def application(environ, start_response):
        method = environ.get("REQUEST_METHOD", "GET")
        path = environ.get("PATH_INFO") or "/"
        query_string = environ.get("QUERY_STRING") or None
        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0
        body = environ["wsgi.input"].read(length) if length > 0 else b""
        headers = {_header_name(key): value for key, value in environ.items() if key.startswith("HTTP_")}

        response = handle(database, method, path, query_string, body, headers, enable_auth)

        payload = response.body.encode("utf-8")
        try:
            phrase = HTTPStatus(response.status).phrase
        except ValueError:
            phrase = ""
        header_list = [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("Content-Length", str(len(payload))),
            *response.headers.items(),
        ]
        start_response(f"{response.status} {phrase}".rstrip(), header_list)
        return [payload]

    return application


def main(argv=None) -> int:
    """Serve the scheduling resources over HTTP."""
    parser = argparse.ArgumentParser(prog="classplanner", description="Class scheduling service.")
    parser.add_argument("--database", default="classplanner.sqlite3", help="SQLite database file")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8787)
    parser.add_argument("--enable-auth", action="store_true", help="check the X-Signature header")
    args = parser.parse_args(argv)

    database = sqlite3.connect(args.database, check_same_thread=False)
    try:
        with make_server(args.host, args.port, make_wsgi_app(database, args.enable_auth)) as server:
            server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        database.close()
    return 0