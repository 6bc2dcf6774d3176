"""
A query read from a query file
"""
from dataclasses import dataclass
from typing import Any, Optional

from .query_type import QueryType


@dataclass
class QueryInstance:
    """Query type, output format, source line and parsed arguments of a query"""
    query_type: Optional[QueryType] = None
    formatted: bool = False
    line_number: int = 0
    arguments: Any = None

    @property
    def is_valid(self) -> bool:
        return self.query_type is not None and self.arguments is not None

    def clone(self) -> "QueryInstance":
        arguments = self.arguments
        if self.is_valid:
            arguments = self.query_type.clone_arguments(arguments)
        return QueryInstance(self.query_type, self.formatted, self.line_number, arguments)

    def free(self) -> None:
        if self.is_valid:
            self.query_type.free_arguments(self.arguments)
        self.arguments = None

    def __repr__(self):
        number = self.query_type.number if self.query_type else None
        return (f"<QueryInstance(type={number}, formatted={self.formatted}, "
                f"line={self.line_number}, arguments={self.arguments!r})>")
