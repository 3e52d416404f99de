import pytest

from hotelkeep.guests import Guest, GuestType
from hotelkeep.reservation import Reservation
from hotelkeep.rooms import DoubleRoom, SingleRoom


def make_guest(guest_type=GuestType.REGULAR):
    return Guest("Ana", "phone-1", "ana@example.com", 7, guest_type)


def test_single_day_costs_one_night():
    room = DoubleRoom(1, 80.0)
    res = Reservation(room, make_guest(), 4, 4)
    assert res.final_price == pytest.approx(room.calculate_price())


def test_days_are_inclusive():
    res = Reservation(SingleRoom(1, 100.0), make_guest(), 1, 3)
    assert res.final_price == pytest.approx(300.0)


def test_platinum_discount_ratio():
    room = SingleRoom(1, 100.0)
    regular = Reservation(room, make_guest(), 1, 5)
    platinum = Reservation(room, make_guest(GuestType.PLATINUM), 1, 5)
    assert platinum.final_price / regular.final_price == pytest.approx(0.85)


def test_discount_never_raises_price():
    room = DoubleRoom(2, 90.0)
    prices = [
        Reservation(room, make_guest(kind), 2, 6).final_price
        for kind in (GuestType.REGULAR, GuestType.GOLD, GuestType.PLATINUM)
    ]
    assert prices == sorted(prices, reverse=True)


def test_duration_and_room_id():
    room = SingleRoom(12, 50.0)
    res = Reservation(room, make_guest(), 2, 5)
    assert res.duration == 3
    assert res.room_id == 12
    assert res.room is room


def test_end_before_start_rejected():
    with pytest.raises(ValueError):
        Reservation(SingleRoom(1, 10.0), make_guest(), 5, 4)


def test_negative_day_rejected():
    with pytest.raises(ValueError):
        Reservation(SingleRoom(1, 10.0), make_guest(), -1, 4)


def test_describe():
    res = Reservation(SingleRoom(3, 100.0), make_guest(), 1, 1)
    assert res.describe() == (
        "Reservation:\n"
        "Room ID: 3 (Single)\n"
        "Guest ID: 7, Name: Ana\n"
        "Period: Day 1 to Day 1\n"
        "Total Price: 100"
    )