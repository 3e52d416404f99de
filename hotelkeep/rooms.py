"""Room kinds offered by the hotel and the factory that builds them."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class RoomType(IntEnum):
    """Kind of room; the integer value is what gets stored on disk."""

    SINGLE = 0
    DOUBLE = 1
    LUXURY = 2
    CONFERENCE = 3
    APARTMENT = 4


class RoomStatus(IntEnum):
    """Occupancy state of a room."""

    FREE = 0
    RESERVED = 1
    UNDER_MAINTENANCE = 2


@dataclass
class Room(ABC):
    """A bookable room with a base nightly price."""

    id: int
    base_price: float
    status: RoomStatus = RoomStatus.FREE

    room_type: ClassVar[RoomType]
    type_name: ClassVar[str]

    @abstractmethod
    def calculate_price(self) -> float:
        """Return the nightly price for this kind of room."""

    def copy(self) -> Room:
        """Return an independent copy of this room."""
        return dataclasses.replace(self)


class SingleRoom(Room):
    """Single room, charged at its base price."""

    room_type = RoomType.SINGLE
    type_name = "Single"

    def calculate_price(self) -> float:
        return self.base_price


class DoubleRoom(Room):
    """Double room, charged at 1.2 times its base price."""

    room_type = RoomType.DOUBLE
    type_name = "Double"

    def calculate_price(self) -> float:
        return self.base_price * 1.2


class LuxuryRoom(Room):
    """Luxury room, charged at 1.5 times its base price."""

    room_type = RoomType.LUXURY
    type_name = "Luxury"

    def calculate_price(self) -> float:
        return self.base_price * 1.5


class ConferenceRoom(Room):
    """Conference room, charged at twice its base price."""

    room_type = RoomType.CONFERENCE
    type_name = "Conference"

    def calculate_price(self) -> float:
        return self.base_price * 2.0


class ApartmentRoom(Room):
    """Apartment, charged at 1.8 times its base price."""

    room_type = RoomType.APARTMENT
    type_name = "Apartment"

    def calculate_price(self) -> float:
        return self.base_price * 1.8


_ROOM_CLASSES: dict[RoomType, type[Room]] = {
    cls.room_type: cls
    for cls in (SingleRoom, DoubleRoom, LuxuryRoom, ConferenceRoom, ApartmentRoom)
}


def create_room(room_type: RoomType | int, room_id: int, base_price: float) -> Room:
    """Build a room of the given type; raise ValueError for an unknown type."""
    try:
        kind = RoomType(room_type)
    except ValueError:
        raise ValueError(f"unknown room type: {room_type!r}") from None
    return _ROOM_CLASSES[kind](room_id, base_price)