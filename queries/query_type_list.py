"""
Every query type, indexed by query number
"""
from typing import Optional

from .q01 import Q01
from .q02 import Q02
from .q03 import Q03
from .q04 import Q04
from .q05 import Q05
from .q06 import Q06
from .q07 import Q07
from .q08 import Q08
from .q09 import Q09
from .q10 import Q10
from .query_type import QueryType

QUERY_TYPES = (Q01, Q02, Q03, Q04, Q05, Q06, Q07, Q08, Q09, Q10)


def get_query_type(number: int) -> Optional[QueryType]:
    if 1 <= number <= len(QUERY_TYPES):
        return QUERY_TYPES[number - 1]
    return None
