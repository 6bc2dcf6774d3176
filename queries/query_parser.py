"""
Parsing of query lines and query files
"""
import logging
from typing import List, TextIO

from database.types import parse_positive_int

from .query_instance import QueryInstance
from .query_type_list import get_query_type

logger = logging.getLogger(__name__)


def tokenize_query(line: str) -> List[str]:
    """
    Split a query line on spaces

    Empty tokens are skipped. A token starting with a double quote opens a
    quoted argument, closed by the first token ending with a double quote;
    the quotes are removed and the spaces inside are kept.

    Raises:
        ValueError: A quoted argument is never closed
    """
    tokens = []
    quoted = None
    for piece in line.split(" "):
        if quoted is not None:
            quoted.append(piece)
            if piece.endswith('"'):
                tokens.append(" ".join(quoted)[1:-1])
                quoted = None
        elif not piece:
            continue
        elif piece.startswith('"'):
            if len(piece) > 1 and piece.endswith('"'):
                tokens.append(piece[1:-1])
            else:
                quoted = [piece]
        else:
            tokens.append(piece)

    if quoted is not None:
        raise ValueError("Unterminated quoted argument")
    return tokens


def parse_query(line: str, line_number: int = 0) -> QueryInstance:
    """
    Parse a query line such as ``1F JT910``

    Args:
        line: Line without its terminator
        line_number: 1-based line in the query file

    Returns:
        The query instance, which is not valid when the line was rejected
    """
    instance = QueryInstance(line_number=line_number)
    try:
        tokens = tokenize_query(line)
    except ValueError as e:
        logger.warning("Query on line %d rejected: %s", line_number, e)
        return instance
    if not tokens:
        return instance

    command = tokens[0]
    instance.formatted = command.endswith("F")
    try:
        number = parse_positive_int(command[:-1] if instance.formatted else command)
    except ValueError:
        logger.warning("Query on line %d has an invalid type: %s", line_number, command)
        return instance

    query_type = get_query_type(number)
    if query_type is None:
        logger.warning("Query on line %d has an unknown type: %d", line_number, number)
        return instance

    instance.query_type = query_type
    instance.arguments = query_type.parse_arguments(tokens[1:])
    if instance.arguments is None:
        logger.warning("Query on line %d has invalid arguments", line_number)
    return instance


def parse_query_file(stream: TextIO) -> List[QueryInstance]:
    """Parse every line of a query file, numbering lines from 1"""
    return [parse_query(line.rstrip("\r\n"), line_number)
            for line_number, line in enumerate(stream, start=1)]
