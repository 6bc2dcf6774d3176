"""
User storage with identifier index and per-user flight and reservation lists
"""
import logging
from typing import Dict, Iterator, Optional, Tuple

from .models import User
from .pool import IdLinkedListPool, ItemPool, StringPool

logger = logging.getLogger(__name__)

USER_POOL_BLOCK_CAPACITY = 20000
USER_STRING_POOL_BLOCK_CAPACITY = 1 << 20


class UserManager:
    """Owns every user record and the lists that link users to flights and reservations"""

    def __init__(self):
        self._users: ItemPool[User] = ItemPool(USER_POOL_BLOCK_CAPACITY)
        self._strings = StringPool(USER_STRING_POOL_BLOCK_CAPACITY)
        self._lists = IdLinkedListPool()
        self._by_id: Dict[str, User] = {}

    def add_user(self, user: User) -> User:
        """
        Copy a user into the manager

        Args:
            user: Scratch user, left untouched

        Returns:
            The stored user
        """
        stored = User(
            id=self._strings.put(user.id),
            name=self._strings.put(user.name),
            sex=user.sex,
            passport=self._strings.put(user.passport),
            country_code=self._strings.put(user.country_code),
            birth_date=user.birth_date,
            account_creation_date=user.account_creation_date,
            account_status=user.account_status,
        )

        if stored.id in self._by_id:
            logger.warning("REPEATED USER ID %s. Replacing it.", stored.id)

        self._users.put(stored)
        self._by_id[stored.id] = stored
        return stored

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._by_id.get(user_id)

    def _require(self, user_id: str) -> User:
        user = self._by_id.get(user_id)
        if user is None:
            raise KeyError(f"User {user_id} not found")
        return user

    def add_user_flight_link(self, user_id: str, flight_id: int) -> None:
        user = self._require(user_id)
        user.flights = self._lists.prepend(user.flights, flight_id)

    def add_user_reservation_link(self, user_id: str, reservation_id: int) -> None:
        user = self._require(user_id)
        user.reservations = self._lists.prepend(user.reservations, reservation_id)

    def flights_of(self, user: User) -> Iterator[int]:
        """Flight IDs of a user, most recently added first"""
        return self._lists.iter_list(user.flights)

    def reservations_of(self, user: User) -> Iterator[int]:
        """Reservation IDs of a user, most recently added first"""
        return self._lists.iter_list(user.reservations)

    def count_flights(self, user: User) -> int:
        return self._lists.length(user.flights)

    def get_flights_by_id(self, user_id: str) -> Optional[Iterator[int]]:
        user = self._by_id.get(user_id)
        return None if user is None else self.flights_of(user)

    def get_reservations_by_id(self, user_id: str) -> Optional[Iterator[int]]:
        user = self._by_id.get(user_id)
        return None if user is None else self.reservations_of(user)

    def iter_users(self) -> Iterator[User]:
        """Users in insertion order, skipping entries replaced by a repeated ID"""
        for user in self._users:
            if self._by_id.get(user.id) is user:
                yield user

    def iter_users_with_flights(self) -> Iterator[Tuple[User, Iterator[int]]]:
        for user in self.iter_users():
            yield user, self.flights_of(user)

    def __len__(self) -> int:
        return len(self._by_id)
