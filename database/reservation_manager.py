"""
Reservation storage with identifier index
"""
import logging
from typing import Dict, Iterator, Optional

from .models import Reservation
from .pool import ItemPool, StringPool, StringPoolNoDuplicates
from .types import reservation_id_to_string

logger = logging.getLogger(__name__)

RESERVATION_POOL_BLOCK_CAPACITY = 20000
HOTEL_STRING_POOL_BLOCK_CAPACITY = 1 << 14
USER_ID_STRING_POOL_BLOCK_CAPACITY = 1 << 18


class ReservationManager:
    """Owns every reservation record"""

    def __init__(self):
        self._reservations: ItemPool[Reservation] = ItemPool(RESERVATION_POOL_BLOCK_CAPACITY)
        self._hotel_strings = StringPoolNoDuplicates(HOTEL_STRING_POOL_BLOCK_CAPACITY)
        self._user_ids = StringPool(USER_ID_STRING_POOL_BLOCK_CAPACITY)
        self._by_id: Dict[int, Reservation] = {}

    def add_reservation(self, reservation: Reservation) -> Reservation:
        """
        Copy a reservation into the manager

        Args:
            reservation: Scratch reservation, left untouched

        Returns:
            The stored reservation
        """
        stored = Reservation(
            id=reservation.id,
            user_id=self._user_ids.put(reservation.user_id),
            hotel_id=self._hotel_strings.put(reservation.hotel_id),
            hotel_name=self._hotel_strings.put(reservation.hotel_name),
            hotel_stars=reservation.hotel_stars,
            city_tax=reservation.city_tax,
            begin_date=reservation.begin_date,
            end_date=reservation.end_date,
            price_per_night=reservation.price_per_night,
            includes_breakfast=reservation.includes_breakfast,
            rating=reservation.rating,
        )

        if stored.id in self._by_id:
            logger.warning("REPEATED RESERVATION ID %s. Replacing it.",
                           reservation_id_to_string(stored.id))

        self._reservations.put(stored)
        self._by_id[stored.id] = stored
        return stored

    def get_by_id(self, reservation_id: int) -> Optional[Reservation]:
        return self._by_id.get(reservation_id)

    def iter_reservations(self) -> Iterator[Reservation]:
        for reservation in self._reservations:
            if self._by_id.get(reservation.id) is reservation:
                yield reservation

    def __len__(self) -> int:
        return len(self._by_id)
