"""Hotel guests, their loyalty tiers and the guest register."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

_SEPARATOR = "------------------"


class GuestType(IntEnum):
    """Loyalty tier of a guest; the integer value is what gets stored."""

    REGULAR = 0
    GOLD = 1
    PLATINUM = 2

    @property
    def discount_percent(self) -> float:
        """Discount granted to this tier, in percent."""
        return _DISCOUNTS[self]

    @property
    def label(self) -> str:
        """Human-readable tier name."""
        return self.name.capitalize()


_DISCOUNTS = {
    GuestType.REGULAR: 0.0,
    GuestType.GOLD: 10.0,
    GuestType.PLATINUM: 15.0,
}


@dataclass
class Guest:
    """A registered guest."""

    name: str
    phone: str
    email: str
    id: int
    guest_type: GuestType = GuestType.REGULAR

    @property
    def discount_percent(self) -> float:
        """Discount this guest receives, in percent."""
        return self.guest_type.discount_percent

    def describe(self) -> str:
        """Return a multi-line description of the guest."""
        return (
            f"Guest ID: {self.id}\n"
            f"Name: {self.name}\n"
            f"Phone: {self.phone}\n"
            f"Email: {self.email}\n"
            f"Type: {self.guest_type.label}"
        )


class GuestManager:
    """Register of guests in the order they were added."""

    def __init__(self) -> None:
        self._guests: list[Guest] = []

    def add(self, guest: Guest) -> None:
        """Register a copy of the guest."""
        self._guests.append(dataclasses.replace(guest))

    def get(self, guest_id: int) -> Guest | None:
        """Return the first guest with this id, or None."""
        return next((guest for guest in self._guests if guest.id == guest_id), None)

    def at(self, index: int) -> Guest:
        """Return the guest at the position; raise IndexError when out of range."""
        if not 0 <= index < len(self._guests):
            raise IndexError(f"guest index out of range: {index}")
        return self._guests[index]

    def describe_all(self) -> str:
        """Return the descriptions of all guests, each followed by a separator."""
        return "".join(f"{guest.describe()}\n{_SEPARATOR}\n" for guest in self._guests)

    def print_all(self) -> None:
        """Print every guest's description, each followed by a separator."""
        for guest in self._guests:
            print(guest.describe())
            print(_SEPARATOR)

    def __contains__(self, guest_id: object) -> bool:
        return any(guest.id == guest_id for guest in self._guests)

    def __len__(self) -> int:
        return len(self._guests)

    def __iter__(self) -> Iterator[Guest]:
        return iter(self._guests)