"""
Loader for flights.csv
"""
import logging
from typing import Optional

from database import Database, Flight
from database.types import (
    NonNumericIdError, airport_code_from_string, date_and_time_from_string, flight_id_from_string,
    parse_positive_int,
)

from .error_output import DatasetErrorOutput
from .input import DatasetInput
from .parser import DatasetGrammar, FixedNGrammar, parse_dataset

logger = logging.getLogger(__name__)


class _FlightsLoaderContext:
    def __init__(self, database: Database, errors: DatasetErrorOutput):
        self.database = database
        self.errors = errors
        self.current_line = ""
        self.flight = Flight()


def _parse_id(context: _FlightsLoaderContext, token: str, index: int) -> None:
    try:
        context.flight.id = flight_id_from_string(token)
    except NonNumericIdError:
        logger.warning("Invalid flight ID: %s", token)
        raise


def _parse_airline(context: _FlightsLoaderContext, token: str, index: int) -> None:
    if not token:
        raise ValueError("Empty airline")
    context.flight.airline = token


def _parse_plane_model(context: _FlightsLoaderContext, token: str, index: int) -> None:
    if not token:
        raise ValueError("Empty plane model")
    context.flight.plane_model = token


def _parse_total_seats(context: _FlightsLoaderContext, token: str, index: int) -> None:
    context.flight.total_seats = parse_positive_int(token)


def _parse_origin(context: _FlightsLoaderContext, token: str, index: int) -> None:
    context.flight.origin = airport_code_from_string(token)


def _parse_destination(context: _FlightsLoaderContext, token: str, index: int) -> None:
    context.flight.destination = airport_code_from_string(token)


def _parse_schedule_departure(context: _FlightsLoaderContext, token: str, index: int) -> None:
    context.flight.schedule_departure_date = date_and_time_from_string(token)


def _parse_schedule_arrival(context: _FlightsLoaderContext, token: str, index: int) -> None:
    arrival = date_and_time_from_string(token)
    if arrival <= context.flight.schedule_departure_date:
        raise ValueError("Scheduled arrival is not after the scheduled departure")
    context.flight.schedule_arrival_date = arrival


def _parse_real_departure(context: _FlightsLoaderContext, token: str, index: int) -> None:
    context.flight.real_departure_date = date_and_time_from_string(token)


def _parse_real_arrival(context: _FlightsLoaderContext, token: str, index: int) -> None:
    # Validated only, flights don't store it
    if date_and_time_from_string(token) < context.flight.real_departure_date:
        raise ValueError("Real arrival is before the real departure")


def _parse_crew_member(context: _FlightsLoaderContext, token: str, index: int) -> None:
    if not token:
        raise ValueError("Empty pilot or copilot")


def _parse_notes(context: _FlightsLoaderContext, token: str, index: int) -> None:
    pass


FLIGHTS_GRAMMAR_COLUMNS = (
    _parse_id,
    _parse_airline,
    _parse_plane_model,
    _parse_total_seats,
    _parse_origin,
    _parse_destination,
    _parse_schedule_departure,
    _parse_schedule_arrival,
    _parse_real_departure,
    _parse_real_arrival,
    _parse_crew_member,  # pilot
    _parse_crew_member,  # copilot
    _parse_notes,
)


def _before_line(context: _FlightsLoaderContext, line: str) -> None:
    context.current_line = line
    context.flight.schedule_departure_date = None
    context.flight.schedule_arrival_date = None
    context.flight.real_departure_date = None


def _after_line(context: _FlightsLoaderContext, error: Optional[ValueError]) -> None:
    if error is None:
        context.database.add_flight(context.flight)
    else:
        context.errors.report_flight_error(context.current_line)


FLIGHTS_GRAMMAR = DatasetGrammar(
    line_grammar=FixedNGrammar(";", FLIGHTS_GRAMMAR_COLUMNS),
    before_line=_before_line,
    after_line=_after_line,
)


def load_flights(database: Database, dataset_input: DatasetInput, errors: DatasetErrorOutput) -> None:
    """Parse flights.csv into the database, reporting rejected rows"""
    parse_dataset(dataset_input.flights, FLIGHTS_GRAMMAR, _FlightsLoaderContext(database, errors))
