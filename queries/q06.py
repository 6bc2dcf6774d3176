"""
Q06: airports with the most passengers in a year
"""
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from database import Database
from database.types import (
    airport_code_to_string, date_and_time_get_date, date_get_year, parse_positive_int,
)

from .query_instance import QueryInstance
from .query_type import QueryType
from .query_writer import QueryWriter


@dataclass(frozen=True)
class Q06Arguments:
    year: int
    limit: int


def parse_arguments(arguments: List[str]) -> Optional[Q06Arguments]:
    if len(arguments) != 2 or len(arguments[0]) != 4:
        return None
    try:
        return Q06Arguments(parse_positive_int(arguments[0]), parse_positive_int(arguments[1]))
    except ValueError:
        return None


def generate_statistics(database: Database,
                        instances: Sequence[QueryInstance]) -> Dict[int, List[tuple]]:
    """Airports ranked by passengers, for every year asked for"""
    years = {instance.arguments.year for instance in instances}
    passengers: Dict[int, Counter] = defaultdict(Counter)

    for flight in database.flights.iter_flights():
        year = date_get_year(date_and_time_get_date(flight.schedule_departure_date))
        if year in years:
            airports = passengers[year]
            airports[flight.origin] += flight.number_of_passengers
            airports[flight.destination] += flight.number_of_passengers

    return {
        year: sorted(airports.items(), key=lambda item: (-item[1], item[0]))
        for year, airports in passengers.items()
    }


def execute(database: Database, statistics: Dict[int, List[tuple]], instance: QueryInstance,
            writer: QueryWriter) -> None:
    arguments = instance.arguments
    for airport, count in statistics.get(arguments.year, [])[:arguments.limit]:
        writer.new_object()
        writer.new_field("name", airport_code_to_string(airport))
        writer.new_field("passengers", str(count))


Q06 = QueryType(
    number=6,
    parse_arguments=parse_arguments,
    execute=execute,
    generate_statistics=generate_statistics,
)
