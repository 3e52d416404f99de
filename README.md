# hotelkeep

A small library of building blocks for a hotel's front desk. It models rooms and their prices, guests and their loyalty discounts, reservations, and the staff roles that decide who may do what. It has no dependencies outside the standard library and needs Python 3.10 or later.

## Installing

```
pip install hotelkeep
```

## Rooms (`hotelkeep.rooms`)

There are five kinds of room, listed in `RoomType`. `calculate_price()` returns the base price times a factor that depends on the kind:

| `RoomType`   | Class            | Factor |
|--------------|------------------|--------|
| `SINGLE`     | `SingleRoom`     | 1.0    |
| `DOUBLE`     | `DoubleRoom`     | 1.2    |
| `LUXURY`     | `LuxuryRoom`     | 1.5    |
| `CONFERENCE` | `ConferenceRoom` | 2.0    |
| `APARTMENT`  | `ApartmentRoom`  | 1.8    |

```python
from hotelkeep.rooms import RoomStatus, RoomType, create_room

room = create_room(RoomType.DOUBLE, 101, 100.0)
room.calculate_price()     # 120.0
room.type_name             # "Double"
room.status                # RoomStatus.FREE
room.status = RoomStatus.UNDER_MAINTENANCE
twin = room.copy()         # an independent copy
```

`create_room` also accepts the integer value of a room type; an unknown type raises `ValueError`. Room statuses are `FREE`, `RESERVED` and `UNDER_MAINTENANCE`; a new room is `FREE`.

## Room collections (`hotelkeep.room_collection`)

`RoomCollection` keeps rooms in the order they were added. `add` stores a copy of the room it is given; `add_new` builds a room, stores it and returns it.

```python
from hotelkeep.room_collection import RoomCollection

rooms = RoomCollection()
rooms.add_new(RoomType.LUXURY, 201, 200.0)
rooms.add(room)
len(rooms)                 # 2
rooms.room_at(0).id        # 201
rooms.room_at(5)           # None
rooms.print_all()
# Luxury | Price: 300
# Double | Price: 120
```

`format_lines()` returns the same lines as a list, `copy()` returns a collection holding copies of every room, and the collection can be iterated.

## Guests (`hotelkeep.guests`)

Each guest has a `GuestType`: `REGULAR` (no discount), `GOLD` (10 % off) or `PLATINUM` (15 % off).

```python
from hotelkeep.guests import Guest, GuestManager, GuestType

guests = GuestManager()
guests.add(Guest("Ana", "ext. 12", "ana@example.com", 1, GuestType.GOLD))
1 in guests                        # True
guests.get(1).discount_percent     # 10.0
guests.get(2)                      # None
guests.at(0).name                  # "Ana"
print(guests.get(1).describe())
guests.print_all()                 # every guest, each followed by a separator line
```

`GuestManager.add` registers a copy of the guest. `at` raises `IndexError` for a position out of range, and `describe_all()` returns as text what `print_all()` prints.

## Reservations (`hotelkeep.reservation`)

A reservation covers the days from its start day to its end day, both included. Its `final_price` is the number of days × the room's price × (1 − the guest's discount / 100). Negative days, or an end day before the start day, raise `ValueError`.

```python
from hotelkeep.reservation import Reservation

booking = Reservation(room, guests.get(1), 3, 5)
booking.room_id            # 101
booking.duration           # 2 (end day minus start day)
print(booking.describe())
# Reservation:
# Room ID: 101 (Double)
# Guest ID: 1, Name: Ana
# Period: Day 3 to Day 5
# Total Price: 324
```

## Staff and permissions (`hotelkeep.users`)

Each user has a `role`, and `can(action)` tells whether the user may carry out an action:

- `Receptionist`: `add_guest`, `make_reservation`, `view_guests`, `view_rooms`, `cancel_reservation`.
- `Accountant`: `view_reservations`, `view_financials`.
- `Manager`: every action.

```python
from hotelkeep.users import create_user, default_users, login

clerk = create_user("receptionist", "Ivan")
clerk.role                          # "Receptionist"
clerk.can("make_reservation")       # True
clerk.can("view_financials")        # False

user = login("Maria")               # searches default_users()
user.role                           # "Manager"
login("Nobody", default_users())    # None
```

`create_user` takes the lower-case role name (`receptionist`, `manager`, `accountant`) and raises `ValueError` for any other. `default_users()` returns the built-in accounts Ivan (receptionist), Maria (manager) and Georgi (accountant). Users have no passwords: `login` matches on the username only.

## What is not included

hotelkeep is a library only. It has no command-line program or interactive menu, no object that ties rooms, guests and reservations together into one hotel (booking a room does not change its status, and there is no cancelling, per-guest or per-room listing, or financial report), and no saving to or loading from files. These are left to the application that uses it.