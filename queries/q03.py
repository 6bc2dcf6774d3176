"""
Q03: average rating of a hotel
"""
from typing import Dict, List, Optional

from database import Database, Reservation
from database.types import hotel_id_from_string

from .hotel_statistics import free_hotel_statistics, group_reservations_by_hotel
from .query_instance import QueryInstance
from .query_type import QueryType
from .query_writer import QueryWriter


def parse_arguments(arguments: List[str]) -> Optional[str]:
    if len(arguments) != 1:
        return None
    try:
        return hotel_id_from_string(arguments[0])
    except ValueError:
        return None


def execute(database: Database, statistics: Dict[str, List[Reservation]],
            instance: QueryInstance, writer: QueryWriter) -> None:
    ratings = [reservation.rating for reservation in statistics.get(instance.arguments, ())
               if reservation.rating is not None]
    if not ratings:
        return

    writer.new_object()
    writer.new_field("rating", f"{sum(ratings) / len(ratings):.2f}")


Q03 = QueryType(
    number=3,
    parse_arguments=parse_arguments,
    execute=execute,
    generate_statistics=group_reservations_by_hotel,
    free_statistics=free_hotel_statistics,
)
