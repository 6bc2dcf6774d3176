"""
Q09: active users whose name starts with a prefix
"""
import locale
import logging
from contextlib import contextmanager
from typing import List, Optional, Sequence

from database import Database, User

from .query_instance import QueryInstance
from .query_type import QueryType
from .query_writer import QueryWriter

logger = logging.getLogger(__name__)

COLLATION_LOCALE = "en_US.UTF-8"


def parse_arguments(arguments: List[str]) -> Optional[str]:
    if len(arguments) != 1:
        return None
    return arguments[0]


@contextmanager
def collation(name: str = COLLATION_LOCALE):
    """
    Temporarily switch LC_COLLATE, restoring the previous value on exit

    When the locale is not installed the current collation stays in effect.
    """
    previous = locale.setlocale(locale.LC_COLLATE)
    try:
        locale.setlocale(locale.LC_COLLATE, name)
    except locale.Error:
        logger.warning("Locale %s is not available, names are sorted with %s", name, previous)
    try:
        yield
    finally:
        locale.setlocale(locale.LC_COLLATE, previous)


class UsersByName:
    """Active users in collation order of name, then ID"""

    def __init__(self, users: List[User]):
        with collation():
            self.users = sorted(users, key=lambda user: (locale.strxfrm(user.name),
                                                         locale.strxfrm(user.id)))

    def with_prefix(self, prefix: str) -> List[User]:
        return [user for user in self.users if user.name.startswith(prefix)]


def generate_statistics(database: Database, instances: Sequence[QueryInstance]) -> UsersByName:
    return UsersByName([user for user in database.users.iter_users() if user.is_active])


def execute(database: Database, statistics: UsersByName, instance: QueryInstance,
            writer: QueryWriter) -> None:
    for user in statistics.with_prefix(instance.arguments):
        writer.new_object()
        writer.new_field("id", user.id)
        writer.new_field("name", user.name)


Q09 = QueryType(
    number=9,
    parse_arguments=parse_arguments,
    execute=execute,
    generate_statistics=generate_statistics,
)
