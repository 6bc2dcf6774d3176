"""
Q01: summary of a user, a flight or a reservation
"""
from typing import List, Optional

from config import get_settings
from database import Database, Flight, Reservation, User
from database.types import (
    airport_code_to_string, date_and_time_to_string, date_to_string, flight_id_from_string,
    includes_breakfast_to_string, reservation_id_from_string, split_date,
)

from .query_instance import QueryInstance
from .query_type import QueryType
from .query_writer import QueryWriter


def parse_arguments(arguments: List[str]) -> Optional[str]:
    if len(arguments) != 1:
        return None
    return arguments[0]


def age_at(birth_date: int, reference_date: int) -> int:
    """Whole years between a birth date and a reference date"""
    birth_year, birth_month, birth_day = split_date(birth_date)
    year, month, day = split_date(reference_date)

    age = year - birth_year
    if (month, day) < (birth_month, birth_day):
        age -= 1
    return age


def _write_user(database: Database, user: User, writer: QueryWriter) -> None:
    users = database.users
    reservations = list(database.reservations_of(user))
    total_spent = sum(reservation.price_without_tax for reservation in reservations)

    writer.new_object()
    writer.new_field("name", user.name)
    writer.new_field("sex", user.sex.value)
    writer.new_field("age", str(age_at(user.birth_date, get_settings().reference_date)))
    writer.new_field("country_code", user.country_code)
    writer.new_field("passport", user.passport)
    writer.new_field("number_of_flights", str(users.count_flights(user)))
    writer.new_field("number_of_reservations", str(len(reservations)))
    writer.new_field("total_spent", f"{total_spent:.2f}")


def _write_flight(flight: Flight, writer: QueryWriter) -> None:
    writer.new_object()
    writer.new_field("airline", flight.airline)
    writer.new_field("plane_model", flight.plane_model)
    writer.new_field("origin", airport_code_to_string(flight.origin))
    writer.new_field("destination", airport_code_to_string(flight.destination))
    writer.new_field("schedule_departure_date", date_and_time_to_string(flight.schedule_departure_date))
    writer.new_field("schedule_arrival_date", date_and_time_to_string(flight.schedule_arrival_date))
    writer.new_field("passengers", str(flight.number_of_passengers))
    writer.new_field("delay", str(flight.delay))


def _write_reservation(reservation: Reservation, writer: QueryWriter) -> None:
    writer.new_object()
    writer.new_field("hotel_id", reservation.hotel_id)
    writer.new_field("hotel_name", reservation.hotel_name)
    writer.new_field("hotel_stars", str(reservation.hotel_stars))
    writer.new_field("begin_date", date_to_string(reservation.begin_date))
    writer.new_field("end_date", date_to_string(reservation.end_date))
    writer.new_field("includes_breakfast", includes_breakfast_to_string(reservation.includes_breakfast))
    writer.new_field("nights", str(reservation.nights))
    writer.new_field("total_price", f"{reservation.total_price:.2f}")


def execute(database: Database, statistics: None, instance: QueryInstance,
            writer: QueryWriter) -> None:
    """Look the identifier up as a flight, then as a reservation, then as a user"""
    identifier = instance.arguments

    try:
        flight = database.flights.get_by_id(flight_id_from_string(identifier))
    except ValueError:
        flight = None
    if flight is not None:
        _write_flight(flight, writer)
        return

    try:
        reservation = database.reservations.get_by_id(reservation_id_from_string(identifier))
    except ValueError:
        reservation = None
    if reservation is not None:
        _write_reservation(reservation, writer)
        return

    user = database.users.get_by_id(identifier)
    if user is not None and user.is_active:
        _write_user(database, user, writer)


Q01 = QueryType(number=1, parse_arguments=parse_arguments, execute=execute)
