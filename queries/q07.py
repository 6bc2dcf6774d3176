"""
Q07: airports with the highest median departure delay
"""
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from database import Database
from database.types import airport_code_to_string, parse_positive_int

from .query_instance import QueryInstance
from .query_type import QueryType
from .query_writer import QueryWriter


def parse_arguments(arguments: List[str]) -> Optional[int]:
    if len(arguments) != 1:
        return None
    try:
        return parse_positive_int(arguments[0])
    except ValueError:
        return None


def median(values: List[int]) -> int:
    """Median of a non-empty list, averaging the middle pair (rounded down) for even lengths"""
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[middle]
    return (ordered[middle - 1] + ordered[middle]) // 2


def generate_statistics(database: Database,
                        instances: Sequence[QueryInstance]) -> List[Tuple[int, int]]:
    """(airport, median delay) of every origin airport, highest delay first"""
    delays: Dict[int, List[int]] = defaultdict(list)
    for flight in database.flights.iter_flights():
        delays[flight.origin].append(max(0, flight.delay))

    medians = [(airport, median(airport_delays)) for airport, airport_delays in delays.items()]
    medians.sort(key=lambda item: (-item[1], item[0]))
    return medians


def execute(database: Database, statistics: List[Tuple[int, int]], instance: QueryInstance,
            writer: QueryWriter) -> None:
    for airport, delay in statistics[:instance.arguments]:
        writer.new_object()
        writer.new_field("name", airport_code_to_string(airport))
        writer.new_field("median", str(delay))


Q07 = QueryType(
    number=7,
    parse_arguments=parse_arguments,
    execute=execute,
    generate_statistics=generate_statistics,
)
