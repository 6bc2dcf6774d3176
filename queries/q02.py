"""
Q02: flights and reservations of a user, most recent first
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from database import Database
from database.types import (
    date_and_time_from_values, date_and_time_get_date, date_to_string, flight_id_to_string,
    reservation_id_to_string,
)

from .query_instance import QueryInstance
from .query_type import QueryType
from .query_writer import QueryWriter

FILTERS = ("flights", "reservations")


@dataclass(frozen=True)
class Q02Arguments:
    user_id: str
    filter: Optional[str] = None


def parse_arguments(arguments: List[str]) -> Optional[Q02Arguments]:
    if len(arguments) == 1:
        return Q02Arguments(arguments[0])
    if len(arguments) == 2 and arguments[1] in FILTERS:
        return Q02Arguments(arguments[0], arguments[1])
    return None


def _collect(database: Database, arguments: Q02Arguments) -> List[Tuple[int, str, str]]:
    """(timed date, printed ID, kind) of every matching entry"""
    users = database.users
    user = users.get_by_id(arguments.user_id)
    if user is None or not user.is_active:
        return []

    entries = []
    if arguments.filter in (None, "flights"):
        for flight_id in users.flights_of(user):
            flight = database.flights.get_by_id(flight_id)
            if flight is not None:
                entries.append((flight.schedule_departure_date, flight_id_to_string(flight_id), "flight"))

    if arguments.filter in (None, "reservations"):
        for reservation in database.reservations_of(user):
            entries.append((date_and_time_from_values(reservation.begin_date, 0),
                            reservation_id_to_string(reservation.id), "reservation"))

    entries.sort(key=lambda entry: (-entry[0], entry[1]))
    return entries


def execute(database: Database, statistics: None, instance: QueryInstance,
            writer: QueryWriter) -> None:
    arguments = instance.arguments
    for date_and_time, identifier, kind in _collect(database, arguments):
        writer.new_object()
        writer.new_field("id", identifier)
        writer.new_field("date", date_to_string(date_and_time_get_date(date_and_time)))
        if arguments.filter is None:
            writer.new_field("type", kind)


Q02 = QueryType(number=2, parse_arguments=parse_arguments, execute=execute)
