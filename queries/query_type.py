"""
Operations that define a query type
"""
import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence

if TYPE_CHECKING:
    from database import Database
    from .query_instance import QueryInstance
    from .query_writer import QueryWriter


def _no_op(value: Any) -> None:
    pass


@dataclass(frozen=True)
class QueryType:
    """
    Dispatch record of a query type

    Attributes:
        number: Query number, as written in query files
        parse_arguments: Parses the argument tokens, returning None when they are invalid
        execute: Writes the result of an instance to a writer
        clone_arguments: Copies parsed arguments
        free_arguments: Releases parsed arguments
        generate_statistics: Aggregates data once for every instance of the type
        free_statistics: Releases what generate_statistics returned
    """
    number: int
    parse_arguments: Callable[[List[str]], Optional[Any]]
    execute: Callable[['Database', Any, 'QueryInstance', 'QueryWriter'], None]
    clone_arguments: Callable[[Any], Any] = copy.deepcopy
    free_arguments: Callable[[Any], None] = _no_op
    generate_statistics: Optional[Callable[['Database', Sequence['QueryInstance']], Any]] = None
    free_statistics: Callable[[Any], None] = _no_op
