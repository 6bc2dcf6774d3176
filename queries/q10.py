"""
Q10: users, flights, passengers and reservations per year, month or day
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from database import Database
from database.types import (
    date_and_time_get_date, date_get_day, date_get_month, date_get_year, parse_positive_int,
)

from .query_instance import QueryInstance
from .query_type import QueryType
from .query_writer import QueryWriter

FIRST_YEAR = 2000
YEAR_BUCKETS = 65
MONTH_BUCKETS = 13
DAY_BUCKETS = 32

USERS, FLIGHTS, PASSENGERS, UNIQUE_PASSENGERS, RESERVATIONS = range(5)
COUNTER_NAMES = ("users", "flights", "passengers", "unique_passengers", "reservations")


@dataclass(frozen=True)
class Q10Arguments:
    year: Optional[int] = None
    month: Optional[int] = None

    @property
    def bucket_count(self) -> int:
        if self.year is None:
            return YEAR_BUCKETS
        return MONTH_BUCKETS if self.month is None else DAY_BUCKETS

    @property
    def bucket_name(self) -> str:
        if self.year is None:
            return "year"
        return "month" if self.month is None else "day"

    def bucket(self, date: int) -> Optional[int]:
        """Index of the bucket a date falls in, or None when it is filtered out"""
        year = date_get_year(date)
        if self.year is None:
            index = year - FIRST_YEAR
            return index if 0 <= index < YEAR_BUCKETS else None
        if year != self.year:
            return None

        month = date_get_month(date)
        if self.month is None:
            return month
        return date_get_day(date) if month == self.month else None

    def bucket_label(self, index: int) -> int:
        return FIRST_YEAR + index if self.year is None else index


def parse_arguments(arguments: List[str]) -> Optional[Q10Arguments]:
    if len(arguments) > 2:
        return None
    try:
        values = [parse_positive_int(argument) for argument in arguments]
    except ValueError:
        return None

    if len(values) == 2 and not 1 <= values[1] <= 12:
        return None
    return Q10Arguments(*values)


def generate_statistics(database: Database,
                        instances: Sequence[QueryInstance]) -> Dict[Q10Arguments, List[List[int]]]:
    """
    Count events per bucket for every distinct filter

    Args:
        database: Database to read
        instances: Q10 instances; instances with equal filters share their counts

    Returns:
        For each filter, one list of counters per bucket
    """
    counts = {}
    for instance in instances:
        arguments = instance.arguments
        if arguments not in counts:
            counts[arguments] = [[0] * len(COUNTER_NAMES) for _ in range(arguments.bucket_count)]
    filters = list(counts.items())

    flights = database.flights
    for user, flight_ids in database.users.iter_users_with_flights():
        creation = date_and_time_get_date(user.account_creation_date)
        for arguments, buckets in filters:
            index = arguments.bucket(creation)
            if index is not None:
                buckets[index][USERS] += 1

        seen = [0] * len(filters)
        for flight_id in flight_ids:
            flight = flights.get_by_id(flight_id)
            if flight is None:
                continue

            departure = date_and_time_get_date(flight.schedule_departure_date)
            for position, (arguments, buckets) in enumerate(filters):
                index = arguments.bucket(departure)
                if index is None:
                    continue

                buckets[index][PASSENGERS] += 1
                if not seen[position] & (1 << index):
                    seen[position] |= 1 << index
                    buckets[index][UNIQUE_PASSENGERS] += 1

    for flight in flights.iter_flights():
        departure = date_and_time_get_date(flight.schedule_departure_date)
        for arguments, buckets in filters:
            index = arguments.bucket(departure)
            if index is not None:
                buckets[index][FLIGHTS] += 1

    for reservation in database.reservations.iter_reservations():
        for arguments, buckets in filters:
            index = arguments.bucket(reservation.begin_date)
            if index is not None:
                buckets[index][RESERVATIONS] += 1

    return counts


def free_statistics(counts: Dict[Q10Arguments, List[List[int]]]) -> None:
    counts.clear()


def execute(database: Database, statistics: Dict[Q10Arguments, List[List[int]]],
            instance: QueryInstance, writer: QueryWriter) -> None:
    arguments = instance.arguments
    for index, counters in enumerate(statistics[arguments]):
        if not any(counters):
            continue

        writer.new_object()
        writer.new_field(arguments.bucket_name, str(arguments.bucket_label(index)))
        for name, value in zip(COUNTER_NAMES, counters):
            writer.new_field(name, str(value))


Q10 = QueryType(
    number=10,
    parse_arguments=parse_arguments,
    execute=execute,
    generate_statistics=generate_statistics,
    free_statistics=free_statistics,
)
