"""Errors raised by the storage layer."""

from __future__ import annotations

import enum
from typing import ClassVar


class SQLFailure(enum.Enum):
    """Stage at which a SQL statement failed."""

    BIND_FAILURE = "BindFailure"
    QUERY_FAILURE = "QueryFailure"
    PREPARE_FAILURE = "PrepareFailure"


class SQLError(Exception):
    """A SQL statement could not be bound, prepared or run."""

    def __init__(self, failure: SQLFailure | str) -> None:
        self.failure = SQLFailure(failure)
        super().__init__(self.failure.value)

    def __str__(self) -> str:
        return self.failure.value


SQL_ERROR_KIND = "SqlError"


class _StorageError(Exception):
    """Base for operation errors that either wrap a SQL failure or name a kind."""

    kinds: ClassVar[tuple[str, ...]] = ()

    def __init__(self, kind: str | SQLFailure | SQLError) -> None:
        if isinstance(kind, SQLError):
            kind = kind.failure
        self.failure: SQLFailure | None
        if isinstance(kind, SQLFailure):
            self.kind = SQL_ERROR_KIND
            self.failure = kind
        elif kind in self.kinds:
            self.kind = kind
            self.failure = None
        else:
            raise ValueError(f"unknown {type(self).__name__} kind: {kind!r}")
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.failure is not None:
            return f"{SQL_ERROR_KIND}({self.failure.value})"
        return self.kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class CreateError(_StorageError):
    """An insert failed."""

    kinds = ("InvalidTableName", "DataIntegrityError")


class ReadError(_StorageError):
    """A select failed or found nothing."""

    kinds = ("InvalidTableName", "NotFoundError")


class UpdateError(_StorageError):
    """An update failed."""

    kinds = (
        "InvalidColumnName",
        "InvalidTableName",
        "DataIntegrityError",
        "DeserializationError",
    )


class DeleteError(_StorageError):
    """A delete failed."""

    kinds = ("InvalidTableName", "DataIntegrityError")