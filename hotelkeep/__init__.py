"""Rooms, guests, reservations and staff roles for a small hotel."""

__version__ = "0.1.0"