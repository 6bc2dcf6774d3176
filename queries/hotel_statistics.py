"""
Reservations grouped by hotel, shared by the hotel queries
"""
from collections import defaultdict
from typing import Dict, List, Sequence

from database import Database, Reservation

from .query_instance import QueryInstance


def group_reservations_by_hotel(database: Database,
                                instances: Sequence[QueryInstance]) -> Dict[str, List[Reservation]]:
    """
    Reservations of every hotel asked for by some instance

    Args:
        database: Database to read
        instances: Instances whose first argument is a hotel ID

    Returns:
        Reservations per hotel ID, in insertion order
    """
    wanted = {_hotel_id(instance.arguments) for instance in instances}
    hotels: Dict[str, List[Reservation]] = defaultdict(list)
    for reservation in database.reservations.iter_reservations():
        if reservation.hotel_id in wanted:
            hotels[reservation.hotel_id].append(reservation)
    return dict(hotels)


def _hotel_id(arguments) -> str:
    return arguments if isinstance(arguments, str) else arguments.hotel_id


def free_hotel_statistics(hotels: Dict[str, List[Reservation]]) -> None:
    hotels.clear()
