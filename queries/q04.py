"""
Q04: reservations of a hotel, most recent first
"""
from typing import Dict, List, Optional

from database import Database, Reservation
from database.types import date_to_string, hotel_id_from_string, reservation_id_to_string

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
    reservations = sorted(statistics.get(instance.arguments, ()),
                          key=lambda reservation: (-reservation.begin_date, reservation.id))

    for reservation in reservations:
        writer.new_object()
        writer.new_field("id", reservation_id_to_string(reservation.id))
        writer.new_field("begin_date", date_to_string(reservation.begin_date))
        writer.new_field("end_date", date_to_string(reservation.end_date))
        writer.new_field("user_id", reservation.user_id)
        writer.new_field("rating", "" if reservation.rating is None else str(reservation.rating))
        writer.new_field("total_price", f"{reservation.total_price:.2f}")


Q04 = QueryType(
    number=4,
    parse_arguments=parse_arguments,
    execute=execute,
    generate_statistics=group_reservations_by_hotel,
    free_statistics=free_hotel_statistics,
)
