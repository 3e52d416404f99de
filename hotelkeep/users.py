"""Staff accounts, their roles and the permissions each role grants."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar


@dataclass
class User(ABC):
    """A member of staff who can log in and perform permitted actions."""

    username: str = ""

    role: ClassVar[str]

    @abstractmethod
    def can(self, action: str) -> bool:
        """Return True when this user may perform the named action."""

    def copy(self) -> User:
        """Return an independent copy of this user."""
        return dataclasses.replace(self)


class Receptionist(User):
    """Front-desk staff: registers guests and handles bookings."""

    role = "Receptionist"

    _ALLOWED: ClassVar[frozenset[str]] = frozenset(
        {
            "add_guest",
            "make_reservation",
            "view_guests",
            "view_rooms",
            "cancel_reservation",
        }
    )

    def can(self, action: str) -> bool:
        return action in self._ALLOWED


class Manager(User):
    """Manager: allowed to do everything."""

    role = "Manager"

    def can(self, action: str) -> bool:
        return True


class Accountant(User):
    """Accountant: views reservations and financial reports."""

    role = "Accountant"

    _ALLOWED: ClassVar[frozenset[str]] = frozenset(
        {"view_reservations", "view_financials"}
    )

    def can(self, action: str) -> bool:
        return action in self._ALLOWED


_ROLES: dict[str, type[User]] = {
    "receptionist": Receptionist,
    "manager": Manager,
    "accountant": Accountant,
}


def create_user(role_name: str, username: str = "") -> User:
    """Build a user for the lower-case role name; raise ValueError if unknown."""
    try:
        cls = _ROLES[role_name]
    except KeyError:
        raise ValueError(f"unknown role: {role_name!r}") from None
    return cls(username)


def default_users() -> list[User]:
    """Return the built-in staff accounts."""
    return [
        create_user("receptionist", "Ivan"),
        create_user("manager", "Maria"),
        create_user("accountant", "Georgi"),
    ]


def login(username: str, users: Iterable[User] | None = None) -> User | None:
    """Return the first user with this username, or None when there is none."""
    candidates = default_users() if users is None else users
    return next((user for user in candidates if user.username == username), None)