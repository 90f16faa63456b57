# classplanner

A small scheduling back end for a school or department. It keeps users,
faculty members, classes, rooms, room features, time slots (schedules) and
faculty preferences in an SQLite database, together with the links between
them: which class meets in which room at which time, who teaches it, and
what a room is equipped with. The records are reachable through a JSON HTTP
API served as a WSGI application.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running the server

```
classplanner
```

serves the API with the standard library's `wsgiref` server until
interrupted. Options:

| Option          | Default                | Meaning                               |
|-----------------|------------------------|---------------------------------------|
| `--database`    | `classplanner.sqlite3` | SQLite database file                  |
| `--host`        | `127.0.0.1`            | address to listen on                  |
| `--port`        | `8787`                 | port to listen on                     |
| `--enable-auth` | off                    | check the `X-Signature` header        |

A fresh database has no tables; the first request it needs is a `POST` to
`/admin/define`, which creates them.

The application object can also be built directly with
`classplanner.app.make_wsgi_app(database, enable_auth)` and handed to any
WSGI server:

```python
import sqlite3
from wsgiref.simple_server import make_server

from classplanner.app import make_wsgi_app

database = sqlite3.connect("planner.db")
application = make_wsgi_app(database, False)
make_server("127.0.0.1", 8000, application).serve_forever()
```

Without a WSGI server, `classplanner.app.handle(database, method, path,
query_string, body, headers, enable_auth)` handles one request and returns
a `Response` with `status`, `body` and `headers`.

## The API

| Path            | Methods         | Resource                          |
|-----------------|-----------------|-----------------------------------|
| `/admin/define` | POST            | create the database tables        |
| `/login`        | GET             | cryptography self-check           |
| `/user`         | GET, POST       | user accounts                     |
| `/faculty`      | GET, POST       | faculty members                   |
| `/class`        | GET, POST       | classes                           |
| `/room`         | GET, POST       | rooms                             |
| `/schedule`     | GET, POST       | time slots                        |
| `/feature`      | GET, POST       | room features                     |
| `/pref`         | GET, POST       | faculty preferences               |
| `/csr`          | GET, POST, PUT  | class / schedule / room link      |
| `/cf`           | GET, POST       | class / faculty link              |
| `/rf`           | GET, POST       | room / feature link               |

Every path also answers `OPTIONS` with `Access-Control-Allow-Methods`,
`Access-Control-Allow-Headers` and `Access-Control-Max-Age`, and every
response carries `Access-Control-Allow-Origin: *`. Bodies are sent as
`text/plain; charset=utf-8`.

### Reads

Reads take their parameters from the query string, and the parameters are
read strictly in the order given:

- `GET /room?id=3` reads one record.
- `GET /room?scope=all` lists every record as
  `{"entries":[{"id":1,"data":{...}},...]}`.
- `GET /room?scope=single&id=3` is the same as `GET /room?id=3`.

`scope` is accepted by `/faculty`, `/class`, `/room`, `/schedule`,
`/feature` and `/pref`. `/user`, `/csr`, `/cf` and `/rf` read one record by
`id` only.

Records come back without their id, under these field names:

```
/user      {"username": ..., "password": ..., "role": ...}
/faculty   {"name": ..., "email": ..., "department": ...}
/class     {"name", "description", "capacity", "code", "kind", "section", "term"}
/room      {"number": ..., "capacity": ..., "kind": ...}
/schedule  {"start": {"hour", "minute"}, "end": {"hour", "minute"}, "days": ...}
/feature   {"name": ..., "description": ...}
/pref      {"faculty": ..., "kind": ..., "value": ...}
/csr       {"class": ..., "room": ..., "schedule": ...}
/cf        {"class": ..., "faculty": ...}
/rf        {"room": ..., "feature": ...}
```

### Writes

`POST` takes a JSON object with the same fields as a read returns. Integer
fields must be JSON integers in the 32-bit signed range; unknown keys are
ignored. For example:

```
POST /user        {"username": "alice", "password": "password", "role": "faculty"}
POST /room        {"number": "B12", "capacity": 30, "kind": "lab"}
POST /schedule    {"start": {"hour": 9, "minute": 0},
                   "end": {"hour": 10, "minute": 15}, "days": "MWF"}
POST /csr         {"class": 1, "room": 2, "schedule": 3}
PUT  /csr?id=1    {"column": "room_id", "value": "4"}
```

`PUT /csr` sets one column of a class placement; the column name is not
checked against the table.

`GET /login` hashes, encrypts and decrypts the word `hello` with a fresh
AES-256-GCM key and returns three lines: the URL-safe base64 SHA-256 digest,
the URL-safe base64 ciphertext with its tag, and the decrypted text.

### Status codes

- 400: unknown path (`Invalid path!`), unsupported method
  (`Invalid method!`), a query part without `=`
  (`Invalid query parameter!`), an unknown `scope`, a body that is not
  UTF-8 (`Invalid Body!`), or wrong credentials (`Invalid Credentials!`).
- 500: a missing `id` (`Query key missing!`), an `id` that is not an
  integer (`Parse Error`), a malformed JSON body, a failed permission check
  (`Failed Authorization`), or a failed database operation, whose body names
  the error, such as `NotFoundError` or `SqlError(QueryFailure)`.

## Permissions

Authentication is off unless the application is built with `enable_auth`
set (or the server started with `--enable-auth`); with it off every request
acts as an admin. With it on, a request may carry an `X-Signature` header of
the form `<username> <password>`, for example `X-Signature: alice password`.
The password is compared with the one stored for the user, and the user's
role decides the level:

| Role              | Level   |
|-------------------|---------|
| `student`, other  | general |
| `faculty`         | high    |
| `admin`           | admin   |

A request without the header has no permissions. Reading needs general,
creating and updating need high, and `/admin/define` needs admin.
`POST /user` and `GET /login` need no permission. `GET /user` is allowed to
admins, to requests without a name, and to the user being read.

## Using the database layer directly

`classplanner.schema.define_db` creates the tables. The modules
`classplanner.create`, `classplanner.read`, `classplanner.update` and
`classplanner.delete` work on an open `sqlite3` connection, commit after
each write, and raise `CreateError`, `ReadError`, `UpdateError` and
`DeleteError` from `classplanner.errors` on failure. Reads return frozen
dataclasses from `classplanner.records`.

```python
import sqlite3

from classplanner.schema import define_db
from classplanner.create import create_room
from classplanner.read import read_all_from_rooms
from classplanner.delete import delete_room

database = sqlite3.connect(":memory:")
define_db(database)
create_room(database, "B12", 30, "lab")
for room in read_all_from_rooms(database):
    print(room.id, room.room_number, room.capacity)
delete_room(database, 1)
```

`classplanner.crypto` offers `sha_hash`, `generate_aes_gcm_key`,
`import_key`, `encrypt_aes` and `decrypt_aes` (AES-GCM with a 12-byte IV
and a 16-byte tag), raising `CryptoError` on bad input or a failed check.

## What it does not do

- The HTTP API has no delete requests and no updates except `PUT /csr`;
  rows are removed or changed otherwise only through the Python functions.
- Reports have storage functions but no HTTP resource.
- Passwords are stored and compared as plain text, and the server speaks
  plain HTTP only.