"""User permissions and the checks made against them."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class UserPerms(enum.IntEnum):
    """Permission levels, ordered from least to most."""

    NONE = 0
    GENERAL = 1
    HIGH = 2
    ADMIN = 3


_ROLES = {
    "student": UserPerms.GENERAL,
    "faculty": UserPerms.HIGH,
    "admin": UserPerms.ADMIN,
}


def parse_role(role: str) -> UserPerms:
    """Permission level of a stored role; unknown roles get GENERAL."""
    return _ROLES.get(role, UserPerms.GENERAL)


class AuthorizationError(Exception):
    """The active user may not do what was asked."""

    def __init__(self, message: str = "Failed Authorization") -> None:
        super().__init__(message)


@dataclass
class ActiveUser:
    """The user a request is made on behalf of."""

    name: str = ""
    perms: UserPerms = UserPerms.ADMIN

    def require_perm(self, required: UserPerms) -> ActiveUser:
        """Return self if the user has at least ``required``, else raise."""
        if self.perms < required:
            raise AuthorizationError()
        return self

    def require_name(self, name: str) -> ActiveUser:
        """Return self if the user is anonymous, an admin, or named ``name``."""
        if self.name != "" and self.perms != UserPerms.ADMIN and self.name != name:
            raise AuthorizationError()
        return self