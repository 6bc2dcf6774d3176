"""
Loader for reservations.csv
"""
import logging
from typing import Optional

from database import Database, Reservation
from database.types import (
    NonNumericIdError, date_from_string, hotel_id_from_string, includes_breakfast_from_string,
    parse_positive_int, reservation_id_from_string,
)

from .error_output import DatasetErrorOutput
from .input import DatasetInput
from .parser import DatasetGrammar, FixedNGrammar, parse_dataset

logger = logging.getLogger(__name__)


class _ReservationsLoaderContext:
    def __init__(self, database: Database, errors: DatasetErrorOutput):
        self.database = database
        self.errors = errors
        self.current_line = ""
        self.reservation = Reservation()


def _parse_id(context: _ReservationsLoaderContext, token: str, index: int) -> None:
    try:
        context.reservation.id = reservation_id_from_string(token)
    except NonNumericIdError:
        logger.warning("Invalid reservation ID: %s", token)
        raise


def _parse_user_id(context: _ReservationsLoaderContext, token: str, index: int) -> None:
    if context.database.users.get_by_id(token) is None:
        raise ValueError(f"Unknown user {token!r}")
    context.reservation.user_id = token


def _parse_hotel_id(context: _ReservationsLoaderContext, token: str, index: int) -> None:
    try:
        context.reservation.hotel_id = hotel_id_from_string(token)
    except NonNumericIdError:
        logger.warning("Invalid hotel ID: %s", token)
        raise


def _parse_hotel_name(context: _ReservationsLoaderContext, token: str, index: int) -> None:
    if not token:
        raise ValueError("Empty hotel name")
    context.reservation.hotel_name = token


def _parse_hotel_stars(context: _ReservationsLoaderContext, token: str, index: int) -> None:
    stars = parse_positive_int(token)
    if not 1 <= stars <= 5:
        raise ValueError(f"Hotel stars out of range: {stars}")
    context.reservation.hotel_stars = stars


def _parse_city_tax(context: _ReservationsLoaderContext, token: str, index: int) -> None:
    context.reservation.city_tax = parse_positive_int(token)


def _parse_address(context: _ReservationsLoaderContext, token: str, index: int) -> None:
    if not token:
        raise ValueError("Empty address")


def _parse_begin_date(context: _ReservationsLoaderContext, token: str, index: int) -> None:
    context.reservation.begin_date = date_from_string(token)


def _parse_end_date(context: _ReservationsLoaderContext, token: str, index: int) -> None:
    end_date = date_from_string(token)
    if end_date <= context.reservation.begin_date:
        raise ValueError("Reservation ends before it begins")
    context.reservation.end_date = end_date


def _parse_price_per_night(context: _ReservationsLoaderContext, token: str, index: int) -> None:
    price = parse_positive_int(token)
    if price == 0:
        raise ValueError("Price per night must be positive")
    context.reservation.price_per_night = price


def _parse_includes_breakfast(context: _ReservationsLoaderContext, token: str, index: int) -> None:
    context.reservation.includes_breakfast = includes_breakfast_from_string(token)


def _parse_rating(context: _ReservationsLoaderContext, token: str, index: int) -> None:
    if not token:
        context.reservation.rating = None
        return

    rating = parse_positive_int(token)
    if not 1 <= rating <= 5:
        raise ValueError(f"Rating out of range: {rating}")
    context.reservation.rating = rating


def _parse_free_text(context: _ReservationsLoaderContext, token: str, index: int) -> None:
    pass


RESERVATIONS_GRAMMAR_COLUMNS = (
    _parse_id,
    _parse_user_id,
    _parse_hotel_id,
    _parse_hotel_name,
    _parse_hotel_stars,
    _parse_city_tax,
    _parse_address,
    _parse_begin_date,
    _parse_end_date,
    _parse_price_per_night,
    _parse_includes_breakfast,
    _parse_free_text,  # room details
    _parse_rating,
    _parse_free_text,  # comment
)


def _before_line(context: _ReservationsLoaderContext, line: str) -> None:
    context.current_line = line
    context.reservation.begin_date = None
    context.reservation.end_date = None


def _after_line(context: _ReservationsLoaderContext, error: Optional[ValueError]) -> None:
    if error is None:
        context.database.add_reservation(context.reservation)
    else:
        context.errors.report_reservation_error(context.current_line)


RESERVATIONS_GRAMMAR = DatasetGrammar(
    line_grammar=FixedNGrammar(";", RESERVATIONS_GRAMMAR_COLUMNS),
    before_line=_before_line,
    after_line=_after_line,
)


def load_reservations(database: Database, dataset_input: DatasetInput,
                      errors: DatasetErrorOutput) -> None:
    """Parse reservations.csv into the database, reporting rejected rows"""
    parse_dataset(dataset_input.reservations, RESERVATIONS_GRAMMAR,
                  _ReservationsLoaderContext(database, errors))
