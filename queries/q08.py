"""
Q08: revenue of a hotel between two dates
"""
from dataclasses import dataclass
from typing import Dict, List, Optional

from database import Database, Reservation
from database.types import date_diff, date_from_string, hotel_id_from_string

from .hotel_statistics import free_hotel_statistics, group_reservations_by_hotel
from .query_instance import QueryInstance
from .query_type import QueryType
from .query_writer import QueryWriter


@dataclass(frozen=True)
class Q08Arguments:
    hotel_id: str
    begin: int
    end: int


def parse_arguments(arguments: List[str]) -> Optional[Q08Arguments]:
    if len(arguments) != 3:
        return None
    try:
        return Q08Arguments(
            hotel_id=hotel_id_from_string(arguments[0]),
            begin=date_from_string(arguments[1]),
            end=date_from_string(arguments[2]),
        )
    except ValueError:
        return None


def nights_within(reservation: Reservation, begin: int, end: int) -> int:
    """
    Nights of a reservation that fall between two dates (both included)

    The night of the end date of a reservation is not part of it.
    """
    first = max(date_diff(reservation.begin_date, begin), 0)
    last = min(date_diff(reservation.end_date, begin) - 1, date_diff(end, begin))
    return max(0, last - first + 1)


def execute(database: Database, statistics: Dict[str, List[Reservation]],
            instance: QueryInstance, writer: QueryWriter) -> None:
    arguments = instance.arguments
    reservations = statistics.get(arguments.hotel_id)
    if reservations is None:
        return

    revenue = sum(reservation.price_per_night * nights_within(reservation, arguments.begin, arguments.end)
                  for reservation in reservations)

    writer.new_object()
    writer.new_field("revenue", str(revenue))


Q08 = QueryType(
    number=8,
    parse_arguments=parse_arguments,
    execute=execute,
    generate_statistics=group_reservations_by_hotel,
    free_statistics=free_hotel_statistics,
)
