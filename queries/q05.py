"""
Q05: flights departing from an airport within a time range
"""
import bisect
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from database import Database, Flight
from database.types import (
    airport_code_from_string, airport_code_to_string, date_and_time_from_string,
    date_and_time_to_string, flight_id_to_string,
)

from .query_instance import QueryInstance
from .query_type import QueryType
from .query_writer import QueryWriter


@dataclass(frozen=True)
class Q05Arguments:
    origin: int
    begin: int
    end: int


def parse_arguments(arguments: List[str]) -> Optional[Q05Arguments]:
    if len(arguments) != 3:
        return None
    try:
        return Q05Arguments(
            origin=airport_code_from_string(arguments[0]),
            begin=date_and_time_from_string(arguments[1]),
            end=date_and_time_from_string(arguments[2]),
        )
    except ValueError:
        return None


class DeparturesByOrigin:
    """Flights of each origin airport, sorted by scheduled departure then ID"""

    def __init__(self, flights: Dict[int, List[Flight]]):
        self._flights = flights
        self._keys = {
            origin: [(flight.schedule_departure_date, flight.id) for flight in origin_flights]
            for origin, origin_flights in flights.items()
        }

    def between(self, origin: int, begin: int, end: int) -> List[Flight]:
        keys = self._keys.get(origin)
        if not keys:
            return []

        start = bisect.bisect_left(keys, (begin, -1))
        stop = bisect.bisect_right(keys, (end, float("inf")))
        return self._flights[origin][start:stop]


def generate_statistics(database: Database, instances: Sequence[QueryInstance]) -> DeparturesByOrigin:
    origins = {instance.arguments.origin for instance in instances}
    flights: Dict[int, List[Flight]] = defaultdict(list)
    for flight in database.flights.iter_flights():
        if flight.origin in origins:
            flights[flight.origin].append(flight)

    for origin_flights in flights.values():
        origin_flights.sort(key=lambda flight: (flight.schedule_departure_date, flight.id))
    return DeparturesByOrigin(dict(flights))


def execute(database: Database, statistics: DeparturesByOrigin, instance: QueryInstance,
            writer: QueryWriter) -> None:
    arguments = instance.arguments
    for flight in statistics.between(arguments.origin, arguments.begin, arguments.end):
        writer.new_object()
        writer.new_field("id", flight_id_to_string(flight.id))
        writer.new_field("schedule_departure_date", date_and_time_to_string(flight.schedule_departure_date))
        writer.new_field("destination", airport_code_to_string(flight.destination))
        writer.new_field("airline", flight.airline)
        writer.new_field("plane_model", flight.plane_model)


Q05 = QueryType(
    number=5,
    parse_arguments=parse_arguments,
    execute=execute,
    generate_statistics=generate_statistics,
)
