"""
Execution of query instances, grouped by query type
"""
import itertools
import logging
from typing import Callable, Iterable

from database import Database

from .query_instance import QueryInstance
from .query_writer import QueryWriter

logger = logging.getLogger(__name__)

WriterFactory = Callable[[QueryInstance], QueryWriter]


def dispatch(database: Database, instances: Iterable[QueryInstance], open_writer: WriterFactory) -> None:
    """
    Execute query instances

    Instances are grouped by type so that statistics are generated once per
    type. Instances that were rejected while parsing are skipped.

    Args:
        database: Loaded database
        instances: Query instances
        open_writer: Returns the writer for an instance; it is closed after the instance runs
    """
    valid = sorted((instance for instance in instances if instance.is_valid),
                   key=lambda instance: (instance.query_type.number, instance.line_number))

    for _, group in itertools.groupby(valid, key=lambda instance: instance.query_type.number):
        group = list(group)
        query_type = group[0].query_type

        statistics = None
        if query_type.generate_statistics is not None:
            statistics = query_type.generate_statistics(database, group)

        try:
            for instance in group:
                with open_writer(instance) as writer:
                    query_type.execute(database, statistics, instance, writer)
        finally:
            if statistics is not None:
                query_type.free_statistics(statistics)

        logger.debug("Executed %d instances of Q%02d", len(group), query_type.number)


def run_query(database: Database, instance: QueryInstance) -> list:
    """Execute a single instance, returning its output lines"""
    writer = QueryWriter(formatted=instance.formatted)
    dispatch(database, [instance], lambda _: writer)
    return writer.get_lines()
