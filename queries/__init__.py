"""Query engine package"""
from .dispatcher import dispatch, run_query
from .query_instance import QueryInstance
from .query_parser import parse_query, parse_query_file, tokenize_query
from .query_type import QueryType
from .query_type_list import QUERY_TYPES, get_query_type
from .query_writer import QueryWriter

__all__ = [
    'dispatch', 'run_query', 'QueryInstance', 'parse_query', 'parse_query_file', 'tokenize_query',
    'QueryType', 'QUERY_TYPES', 'get_query_type', 'QueryWriter',
]
