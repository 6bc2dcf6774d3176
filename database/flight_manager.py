"""
Flight storage with identifier index and soft invalidation
"""
import logging
from typing import Dict, Iterator, Optional

from .models import Flight
from .pool import ItemPool, StringPoolNoDuplicates
from .types import flight_id_to_string

logger = logging.getLogger(__name__)

FLIGHT_POOL_BLOCK_CAPACITY = 1000
FLIGHT_STRING_POOL_BLOCK_CAPACITY = 1 << 14


class FlightManager:
    """Owns every flight record"""

    def __init__(self):
        self._flights: ItemPool[Flight] = ItemPool(FLIGHT_POOL_BLOCK_CAPACITY)
        self._strings = StringPoolNoDuplicates(FLIGHT_STRING_POOL_BLOCK_CAPACITY)
        self._by_id: Dict[int, Flight] = {}

    def add_flight(self, flight: Flight) -> Flight:
        """
        Copy a flight into the manager

        Args:
            flight: Scratch flight, left untouched

        Returns:
            The stored flight
        """
        stored = Flight(
            id=flight.id,
            airline=self._strings.put(flight.airline),
            plane_model=self._strings.put(flight.plane_model),
            total_seats=flight.total_seats,
            origin=flight.origin,
            destination=flight.destination,
            schedule_departure_date=flight.schedule_departure_date,
            schedule_arrival_date=flight.schedule_arrival_date,
            real_departure_date=flight.real_departure_date,
            number_of_passengers=flight.number_of_passengers,
        )

        if stored.id in self._by_id:
            logger.warning("REPEATED FLIGHT ID %s. Replacing it.", flight_id_to_string(stored.id))

        self._flights.put(stored)
        self._by_id[stored.id] = stored
        return stored

    def get_by_id(self, flight_id: int) -> Optional[Flight]:
        return self._by_id.get(flight_id)

    def _require(self, flight_id: int) -> Flight:
        flight = self._by_id.get(flight_id)
        if flight is None:
            raise KeyError(f"Flight {flight_id_to_string(flight_id)} not found")
        return flight

    def invalidate_by_id(self, flight_id: int) -> None:
        """Flag a flight as invalid and remove it from the index"""
        flight = self._by_id.pop(flight_id, None)
        if flight is None:
            raise KeyError(f"Flight {flight_id_to_string(flight_id)} not found")
        flight.valid = False

    def set_passengers(self, flight_id: int, count: int) -> None:
        if count < 0:
            raise ValueError("Passenger count cannot be negative")
        self._require(flight_id).number_of_passengers = count

    def add_passengers(self, flight_id: int, delta: int) -> None:
        """
        Adjust the passenger count of a flight

        Args:
            flight_id: Flight to update
            delta: Passengers to add (may be negative)
        """
        flight = self._require(flight_id)
        count = flight.number_of_passengers + delta
        if count < 0:
            raise ValueError("Passenger count cannot be negative")
        if count > flight.total_seats:
            raise ValueError(
                f"Flight {flight_id_to_string(flight_id)} has only {flight.total_seats} seats"
            )
        flight.number_of_passengers = count

    def iter_flights(self) -> Iterator[Flight]:
        """Valid flights in insertion order"""
        for flight in self._flights:
            if flight.valid and self._by_id.get(flight.id) is flight:
                yield flight

    def __len__(self) -> int:
        return len(self._by_id)
