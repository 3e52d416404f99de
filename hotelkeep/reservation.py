"""A booking of a room by a guest over a range of days."""

from __future__ import annotations

from dataclasses import dataclass, field

from hotelkeep.guests import Guest
from hotelkeep.rooms import Room


@dataclass
class Reservation:
    """A room booked by a guest from start_day to end_day, both inclusive."""

    room: Room
    guest: Guest
    start_day: int
    end_day: int
    final_price: float = field(init=False)

    def __post_init__(self) -> None:
        if self.start_day < 0 or self.end_day < 0:
            raise ValueError("days must not be negative")
        if self.end_day < self.start_day:
            raise ValueError("end day comes before start day")
        days = self.end_day - self.start_day + 1
        discount = self.guest.discount_percent
        self.final_price = days * self.room.calculate_price() * (1 - discount / 100.0)

    @property
    def room_id(self) -> int:
        """Id of the booked room."""
        return self.room.id

    @property
    def duration(self) -> int:
        """Distance in days between the start and end day."""
        return self.end_day - self.start_day

    def describe(self) -> str:
        """Return a multi-line description of the reservation."""
        return (
            "Reservation:\n"
            f"Room ID: {self.room.id} ({self.room.type_name})\n"
            f"Guest ID: {self.guest.id}, Name: {self.guest.name}\n"
            f"Period: Day {self.start_day} to Day {self.end_day}\n"
            f"Total Price: {self.final_price:g}"
        )