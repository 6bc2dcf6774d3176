"""
In-memory database composed of the user, flight and reservation managers
"""
import logging
from typing import Iterator

from .flight_manager import FlightManager
from .models import Flight, Reservation, User
from .reservation_manager import ReservationManager
from .types import reservation_id_to_string
from .user_manager import UserManager

logger = logging.getLogger(__name__)


class Database:
    """
    Database holding every entity of a dataset
    """

    def __init__(self):
        self._users = UserManager()
        self._flights = FlightManager()
        self._reservations = ReservationManager()

    @property
    def users(self) -> UserManager:
        return self._users

    @property
    def flights(self) -> FlightManager:
        return self._flights

    @property
    def reservations(self) -> ReservationManager:
        return self._reservations

    def add_user(self, user: User) -> User:
        return self._users.add_user(user)

    def add_flight(self, flight: Flight) -> Flight:
        return self._flights.add_flight(flight)

    def add_reservation(self, reservation: Reservation) -> Reservation:
        """
        Store a reservation and link it to its user

        Args:
            reservation: Scratch reservation whose user must already exist

        Returns:
            The stored reservation
        """
        if self._users.get_by_id(reservation.user_id) is None:
            raise KeyError(f"User {reservation.user_id} not found")

        previous = self._reservations.get_by_id(reservation.id)
        stored = self._reservations.add_reservation(reservation)
        if previous is None or previous.user_id != stored.user_id:
            if previous is not None:
                logger.warning("Reservation %s moved from user %s to user %s",
                               reservation_id_to_string(stored.id), previous.user_id, stored.user_id)
            self._users.add_user_reservation_link(stored.user_id, stored.id)
        return stored

    def reservations_of(self, user: User) -> Iterator[Reservation]:
        """Reservations currently owned by a user, most recently added first"""
        seen = set()
        for reservation_id in self._users.reservations_of(user):
            reservation = self._reservations.get_by_id(reservation_id)
            if reservation is None or reservation.user_id != user.id or reservation_id in seen:
                continue
            seen.add(reservation_id)
            yield reservation

    def invalidate_flight(self, flight_id: int) -> None:
        self._flights.invalidate_by_id(flight_id)

    def add_passenger(self, user_id: str, flight_id: int) -> None:
        """
        Register a user as a passenger of a flight

        Args:
            user_id: Passenger
            flight_id: Flight taken, which must still have a free seat
        """
        if self._users.get_by_id(user_id) is None:
            raise KeyError(f"User {user_id} not found")

        self._flights.add_passengers(flight_id, 1)
        self._users.add_user_flight_link(user_id, flight_id)
