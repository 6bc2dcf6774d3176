"""Database package initialization"""
from .models import User, Flight, Reservation, Sex, AccountStatus
from .database import Database
from .flight_manager import FlightManager
from .reservation_manager import ReservationManager
from .user_manager import UserManager

__all__ = [
    'User', 'Flight', 'Reservation', 'Sex', 'AccountStatus',
    'Database', 'FlightManager', 'ReservationManager', 'UserManager',
]
