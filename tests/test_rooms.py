import pytest

from hotelkeep.rooms import (
    ApartmentRoom,
    ConferenceRoom,
    DoubleRoom,
    LuxuryRoom,
    Room,
    RoomStatus,
    RoomType,
    SingleRoom,
    create_room,
)

ROOM_KINDS = [
    (SingleRoom, RoomType.SINGLE, "Single", 1.0),
    (DoubleRoom, RoomType.DOUBLE, "Double", 1.2),
    (LuxuryRoom, RoomType.LUXURY, "Luxury", 1.5),
    (ConferenceRoom, RoomType.CONFERENCE, "Conference", 2.0),
    (ApartmentRoom, RoomType.APARTMENT, "Apartment", 1.8),
]


@pytest.mark.parametrize("cls, kind, name, factor", ROOM_KINDS)
def test_price_factor(cls, kind, name, factor):
    room = create_room(kind, 1, 100.0)
    assert room.calculate_price() == pytest.approx(100.0 * factor)


@pytest.mark.parametrize("cls, kind, name, factor", ROOM_KINDS)
def test_factory_builds_each_kind(cls, kind, name, factor):
    room = create_room(kind, 12, 80.0)
    assert type(room) is cls
    assert room.room_type is kind
    assert room.type_name == name
    assert room.id == 12
    assert room.base_price == 80.0
    assert room.status is RoomStatus.FREE


def test_factory_accepts_stored_integer():
    room = create_room(4, 3, 50.0)
    assert room.room_type is RoomType.APARTMENT
    assert room.type_name == "Apartment"
    assert room.id == 3
    assert room.calculate_price() == pytest.approx(90.0)


def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError):
        create_room(99, 1, 10.0)


def test_room_base_is_abstract():
    with pytest.raises(TypeError):
        Room(1, 10.0)


def test_copy_is_independent():
    room = LuxuryRoom(5, 200.0)
    clone = room.copy()
    assert clone == room
    assert clone is not room
    clone.status = RoomStatus.UNDER_MAINTENANCE
    assert room.status is RoomStatus.FREE
    assert type(clone) is LuxuryRoom


def test_status_can_change():
    room = SingleRoom(2, 40.0)
    room.status = RoomStatus.RESERVED
    assert room.status is RoomStatus.RESERVED