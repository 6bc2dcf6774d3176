"""
Entity records for the airline and hotel dataset
Plain Python classes and enums, filled in column by column by the loaders
"""
from dataclasses import dataclass
from typing import Optional
import enum

from .pool import EMPTY_LIST
from .types import (
    airport_code_to_string, date_and_time_diff, date_and_time_to_string, date_diff,
    date_to_string, flight_id_to_string, reservation_id_to_string,
)


class Sex(enum.Enum):
    """Sex enumeration"""
    F = "F"
    M = "M"

    @classmethod
    def from_string(cls, text: str) -> "Sex":
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Invalid sex: {text!r}") from None


class AccountStatus(enum.Enum):
    """Account status enumeration"""
    ACTIVE = "active"
    INACTIVE = "inactive"

    @classmethod
    def from_string(cls, text: str) -> "AccountStatus":
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"Invalid account status: {text!r}") from None


@dataclass
class User:
    """User model with the fields answered by queries"""
    id: Optional[str] = None
    name: Optional[str] = None
    sex: Optional[Sex] = None
    passport: Optional[str] = None
    country_code: Optional[str] = None
    birth_date: Optional[int] = None
    account_creation_date: Optional[int] = None
    account_status: Optional[AccountStatus] = None

    # Heads of the flight and reservation ID lists
    flights: int = EMPTY_LIST
    reservations: int = EMPTY_LIST

    @property
    def is_active(self) -> bool:
        return self.account_status == AccountStatus.ACTIVE

    def __repr__(self):
        return (f"<User(id='{self.id}', name='{self.name}', "
                f"status={self.account_status.value if self.account_status else None})>")


@dataclass
class Flight:
    """Flight model with schedule and capacity information"""
    id: Optional[int] = None
    airline: Optional[str] = None
    plane_model: Optional[str] = None
    total_seats: Optional[int] = None
    origin: Optional[int] = None
    destination: Optional[int] = None
    schedule_departure_date: Optional[int] = None
    schedule_arrival_date: Optional[int] = None
    real_departure_date: Optional[int] = None
    number_of_passengers: int = 0
    valid: bool = True

    @property
    def delay(self) -> int:
        """Seconds between the scheduled and the real departure"""
        return date_and_time_diff(self.real_departure_date, self.schedule_departure_date)

    def __repr__(self):
        origin = airport_code_to_string(self.origin) if self.origin is not None else None
        destination = airport_code_to_string(self.destination) if self.destination is not None else None
        departure = (date_and_time_to_string(self.schedule_departure_date)
                     if self.schedule_departure_date is not None else None)
        return (f"<Flight(id={flight_id_to_string(self.id) if self.id is not None else None}, "
                f"route='{origin}->{destination}', departure='{departure}', valid={self.valid})>")


@dataclass
class Reservation:
    """Hotel reservation model"""
    id: Optional[int] = None
    user_id: Optional[str] = None
    hotel_id: Optional[str] = None
    hotel_name: Optional[str] = None
    hotel_stars: Optional[int] = None
    city_tax: Optional[int] = None
    begin_date: Optional[int] = None
    end_date: Optional[int] = None
    price_per_night: Optional[int] = None
    includes_breakfast: bool = False
    rating: Optional[int] = None

    @property
    def nights(self) -> int:
        return date_diff(self.end_date, self.begin_date)

    @property
    def price_without_tax(self) -> int:
        return self.price_per_night * self.nights

    @property
    def total_price(self) -> float:
        """Price of the stay with the city tax applied"""
        base = self.price_without_tax
        return base + base * self.city_tax / 100

    def __repr__(self):
        begin = date_to_string(self.begin_date) if self.begin_date is not None else None
        return (f"<Reservation(id={reservation_id_to_string(self.id) if self.id is not None else None}, "
                f"hotel='{self.hotel_id}', user='{self.user_id}', begin='{begin}')>")
