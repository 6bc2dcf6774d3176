"""
Tests for the entity managers and the database
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from database import AccountStatus, Database, Flight, Reservation, Sex, User
from database.types import (
    airport_code_from_string, date_and_time_from_string, date_from_string,
)


def make_user(user_id="JT910", name="Jess", status=AccountStatus.ACTIVE):
    return User(
        id=user_id,
        name=name,
        sex=Sex.F,
        passport="P0",
        country_code="PT",
        birth_date=date_from_string("1990/01/02"),
        account_creation_date=date_and_time_from_string("2020/01/02 10:00:00"),
        account_status=status,
    )


def make_flight(flight_id=1, seats=2, airline="TAP"):
    return Flight(
        id=flight_id,
        airline=airline,
        plane_model="A320",
        total_seats=seats,
        origin=airport_code_from_string("LIS"),
        destination=airport_code_from_string("OPO"),
        schedule_departure_date=date_and_time_from_string("2023/03/10 10:00:00"),
        schedule_arrival_date=date_and_time_from_string("2023/03/10 11:00:00"),
        real_departure_date=date_and_time_from_string("2023/03/10 10:30:00"),
    )


def make_reservation(reservation_id=1, user_id="JT910"):
    return Reservation(
        id=reservation_id,
        user_id=user_id,
        hotel_id="HTL1001",
        hotel_name="Hotel Lisboa",
        hotel_stars=4,
        city_tax=10,
        begin_date=date_from_string("2023/03/12"),
        end_date=date_from_string("2023/03/15"),
        price_per_night=100,
        includes_breakfast=True,
        rating=5,
    )


class TestUserManager:
    """Test user storage and the per-user lists"""

    def test_add_copies_scratch_record(self):
        db = Database()
        scratch = make_user()
        stored = db.add_user(scratch)

        scratch.name = "Changed"
        assert stored is not scratch
        assert db.users.get_by_id("JT910").name == "Jess"

    def test_repeated_id_replaces_and_warns(self, caplog):
        db = Database()
        db.add_user(make_user(name="First"))
        with caplog.at_level(logging.WARNING):
            db.add_user(make_user(name="Second"))

        assert "REPEATED USER ID JT910" in caplog.text
        assert db.users.get_by_id("JT910").name == "Second"
        assert [user.name for user in db.users.iter_users()] == ["Second"]
        assert len(db.users) == 1

    def test_flight_and_reservation_lists(self):
        db = Database()
        db.add_user(make_user())
        db.users.add_user_flight_link("JT910", 1)
        db.users.add_user_flight_link("JT910", 2)
        db.users.add_user_reservation_link("JT910", 7)

        assert list(db.users.get_flights_by_id("JT910")) == [2, 1]
        assert list(db.users.get_reservations_by_id("JT910")) == [7]
        assert db.users.get_flights_by_id("nobody") is None

        user, flights = next(db.users.iter_users_with_flights())
        assert user.id == "JT910"
        assert list(flights) == [2, 1]

    def test_link_to_unknown_user(self):
        db = Database()
        with pytest.raises(KeyError):
            db.users.add_user_flight_link("nobody", 1)


class TestFlightManager:
    """Test flight storage, passenger counts and invalidation"""

    def test_strings_are_deduplicated(self):
        db = Database()
        first = db.add_flight(make_flight(1, airline="".join(["TA", "P"])))
        second = db.add_flight(make_flight(2, airline="".join(["T", "AP"])))
        assert first.airline is second.airline

    def test_invalidate_removes_from_lookups(self):
        db = Database()
        db.add_flight(make_flight(1))
        db.add_flight(make_flight(2))
        db.invalidate_flight(1)

        assert db.flights.get_by_id(1) is None
        assert [flight.id for flight in db.flights.iter_flights()] == [2]
        with pytest.raises(KeyError):
            db.invalidate_flight(1)

    def test_add_passengers_checks_seats(self):
        db = Database()
        db.add_flight(make_flight(1, seats=2))
        db.flights.add_passengers(1, 2)
        with pytest.raises(ValueError):
            db.flights.add_passengers(1, 1)
        with pytest.raises(ValueError):
            db.flights.add_passengers(1, -3)
        assert db.flights.get_by_id(1).number_of_passengers == 2

    def test_delay(self):
        assert make_flight().delay == 1800


class TestDatabase:
    """Test the cross-entity operations"""

    def test_add_passenger(self):
        db = Database()
        db.add_user(make_user())
        db.add_flight(make_flight(1, seats=1))

        db.add_passenger("JT910", 1)
        assert db.flights.get_by_id(1).number_of_passengers == 1
        assert list(db.users.get_flights_by_id("JT910")) == [1]

        with pytest.raises(ValueError):
            db.add_passenger("JT910", 1)
        with pytest.raises(KeyError):
            db.add_passenger("nobody", 1)

    def test_add_reservation_links_user(self):
        db = Database()
        db.add_user(make_user())
        stored = db.add_reservation(make_reservation())

        assert db.reservations.get_by_id(1) is stored
        assert list(db.users.get_reservations_by_id("JT910")) == [1]
        assert stored.nights == 3
        assert stored.price_without_tax == 300
        assert stored.total_price == pytest.approx(330.0)

    def test_add_reservation_requires_user(self):
        db = Database()
        with pytest.raises(KeyError):
            db.add_reservation(make_reservation(user_id="nobody"))
        assert len(db.reservations) == 0

    def test_repeated_reservation_moves_to_new_user(self, caplog):
        db = Database()
        db.add_user(make_user())
        db.add_user(make_user("AB123", "Anna"))
        db.add_reservation(make_reservation(1, "JT910"))

        with caplog.at_level(logging.WARNING):
            db.add_reservation(make_reservation(1, "AB123"))

        assert [r.id for r in db.reservations_of(db.users.get_by_id("JT910"))] == []
        assert [r.id for r in db.reservations_of(db.users.get_by_id("AB123"))] == [1]
        assert "moved from user JT910 to user AB123" in caplog.text

    def test_repeated_reservation_same_user_linked_once(self):
        db = Database()
        db.add_user(make_user())
        db.add_reservation(make_reservation(1))
        db.add_reservation(make_reservation(1))

        assert list(db.users.get_reservations_by_id("JT910")) == [1]
        assert len(list(db.reservations_of(db.users.get_by_id("JT910")))) == 1
