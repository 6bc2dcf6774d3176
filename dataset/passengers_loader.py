"""
Loader for passengers.csv

Passenger rows are sorted by flight, so they are committed one flight at a
time. A flight with more passengers than seats is invalidated: its passenger
rows go to the passengers error file and, once the whole file is read, its
original row is copied from flights.csv to the flights error file.
"""
import logging
from typing import List, Optional, Set, Tuple

from database import Database
from database.types import FLIGHT_ID_LENGTH, flight_id_from_string, flight_id_to_string

from .error_output import DatasetErrorOutput
from .input import DatasetInput
from .parser import DatasetGrammar, FixedNGrammar, parse_dataset, tokenize_stream

logger = logging.getLogger(__name__)


class _PassengersLoaderContext:
    def __init__(self, database: Database, errors: DatasetErrorOutput):
        self.database = database
        self.errors = errors
        self.current_line = ""
        self.flight_id: Optional[int] = None
        self.user_id: Optional[str] = None

        # Rows of the flight being batched, as (user ID, original line)
        self.batch_flight_id: Optional[int] = None
        self.batch: List[Tuple[str, str]] = []
        self.invalid_flights: Set[int] = set()


def _parse_flight_id(context: _PassengersLoaderContext, token: str, index: int) -> None:
    flight_id = flight_id_from_string(token)
    if context.database.flights.get_by_id(flight_id) is None:
        raise ValueError(f"Unknown flight {token!r}")
    context.flight_id = flight_id


def _parse_user_id(context: _PassengersLoaderContext, token: str, index: int) -> None:
    if context.database.users.get_by_id(token) is None:
        raise ValueError(f"Unknown user {token!r}")
    context.user_id = token


PASSENGERS_GRAMMAR_COLUMNS = (
    _parse_flight_id,
    _parse_user_id,
)


def _flush_batch(context: _PassengersLoaderContext) -> None:
    """Commit the passengers of the batched flight"""
    flight_id = context.batch_flight_id
    if flight_id is None:
        return

    database = context.database
    flight = database.flights.get_by_id(flight_id)
    count = len(context.batch)
    database.flights.set_passengers(flight_id, count)

    if count > flight.total_seats:
        logger.debug("Flight %s overbooked (%d passengers, %d seats)",
                     flight_id_to_string(flight_id), count, flight.total_seats)
        database.invalidate_flight(flight_id)
        context.invalid_flights.add(flight_id)
        for _, line in context.batch:
            context.errors.report_passenger_error(line)
    else:
        for user_id, _ in context.batch:
            database.users.add_user_flight_link(user_id, flight_id)

    context.batch_flight_id = None
    context.batch = []


def _before_line(context: _PassengersLoaderContext, line: str) -> None:
    context.current_line = line


def _after_line(context: _PassengersLoaderContext, error: Optional[ValueError]) -> None:
    if error is not None:
        context.errors.report_passenger_error(context.current_line)
        return

    if context.flight_id != context.batch_flight_id:
        _flush_batch(context)
        context.batch_flight_id = context.flight_id

    context.batch.append((context.user_id, context.current_line))


PASSENGERS_GRAMMAR = DatasetGrammar(
    line_grammar=FixedNGrammar(";", PASSENGERS_GRAMMAR_COLUMNS),
    before_line=_before_line,
    after_line=_after_line,
)


def _report_invalid_flights(dataset_input: DatasetInput, errors: DatasetErrorOutput,
                            invalid_flights: Set[int]) -> None:
    """Copy the flights.csv rows of invalidated flights to the flights error file"""
    if not invalid_flights:
        return

    prefixes = {flight_id_to_string(flight_id) + ";" for flight_id in invalid_flights}
    dataset_input.rewind_flights()

    lines = tokenize_stream(dataset_input.flights)
    next(lines, None)
    for line in lines:
        prefix = line[:FLIGHT_ID_LENGTH + 1]
        if prefix in prefixes:
            errors.report_flight_error(line)
            prefixes.discard(prefix)
            if not prefixes:
                break


def load_passengers(database: Database, dataset_input: DatasetInput,
                    errors: DatasetErrorOutput) -> None:
    """
    Parse passengers.csv, linking users to flights

    Args:
        database: Database already holding users and flights
        dataset_input: Open dataset files
        errors: Error files
    """
    context = _PassengersLoaderContext(database, errors)
    parse_dataset(dataset_input.passengers, PASSENGERS_GRAMMAR, context)
    _flush_batch(context)

    _report_invalid_flights(dataset_input, errors, context.invalid_flights)
