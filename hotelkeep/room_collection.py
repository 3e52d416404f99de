"""An ordered collection of hotel rooms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from hotelkeep.rooms import Room, RoomType, create_room


class RoomCollection:
    """Holds rooms in the order they were added; owns copies of them."""

    def __init__(self, rooms: Iterable[Room] = ()) -> None:
        self._rooms: list[Room] = [room.copy() for room in rooms]

    def add(self, room: Room) -> None:
        """Store a copy of the given room."""
        self._rooms.append(room.copy())

    def add_new(self, room_type: RoomType | int, room_id: int, base_price: float) -> Room:
        """Create a room of the given type, store it and return it."""
        room = create_room(room_type, room_id, base_price)
        self._rooms.append(room)
        return room

    def room_at(self, index: int) -> Room | None:
        """Return the room at the position, or None when out of range."""
        if 0 <= index < len(self._rooms):
            return self._rooms[index]
        return None

    def format_lines(self) -> list[str]:
        """Return one summary line per room."""
        return [
            f"{room.type_name} | Price: {room.calculate_price():g}" for room in self._rooms
        ]

    def print_all(self) -> None:
        """Print the summary of every room."""
        for line in self.format_lines():
            print(line)

    def copy(self) -> RoomCollection:
        """Return a collection holding copies of every room."""
        return RoomCollection(self._rooms)

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms)