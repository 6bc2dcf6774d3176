"""
Arena allocators used by the entity managers
Items are stored in fixed capacity blocks and released all at once
"""
from typing import Dict, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")

EMPTY_LIST = -1


class PoolIterationError(RuntimeError):
    """Raised when iterating over a pool that stores contiguous item runs"""


class ItemPool(Generic[T]):
    """Pool of records, grouped in blocks of a fixed number of items"""

    def __init__(self, block_capacity: int = 4096):
        """
        Initialize the pool with a single empty block

        Args:
            block_capacity: Number of items each block holds
        """
        if block_capacity <= 0:
            raise ValueError("Block capacity must be positive")

        self.block_capacity = block_capacity
        self._blocks: List[List[T]] = [[]]
        self._can_iterate = True

    def put(self, item: T) -> T:
        """Store an item, starting a new block when the top one is full"""
        top = self._blocks[-1]
        if len(top) >= self.block_capacity:
            top = []
            self._blocks.append(top)

        top.append(item)
        return item

    def put_many(self, items: Iterable[T]) -> List[T]:
        """
        Store a contiguous run of items

        The run may not fill whole blocks, so the pool can no longer be iterated.

        Args:
            items: Items to store together

        Returns:
            The stored run
        """
        run = list(items)
        self._can_iterate = False
        if not run:
            return run

        if len(run) > self.block_capacity:
            # Dedicated block below the top, so the top keeps its free space
            self._blocks.insert(len(self._blocks) - 1, run)
            return run

        top = self._blocks[-1]
        if len(top) + len(run) > self.block_capacity:
            top = []
            self._blocks.append(top)

        top.extend(run)
        return run

    @property
    def can_iterate(self) -> bool:
        return self._can_iterate

    def __iter__(self) -> Iterator[T]:
        if not self._can_iterate:
            raise PoolIterationError("Pool holds contiguous runs and cannot be iterated")

        for block in self._blocks:
            yield from block

    def __len__(self) -> int:
        return sum(len(block) for block in self._blocks)

    @property
    def block_count(self) -> int:
        return len(self._blocks)

    def empty(self) -> None:
        """Drop every item, keeping a single empty block"""
        self._blocks = [[]]
        self._can_iterate = True


class StringPool:
    """Pool of strings, with block usage accounted in characters"""

    def __init__(self, block_capacity: int = 1 << 16):
        if block_capacity <= 0:
            raise ValueError("Block capacity must be positive")

        self.block_capacity = block_capacity
        self._blocks: List[List[str]] = [[]]
        self._used = 0

    def put(self, string: str) -> str:
        """Store a string and return the stored copy"""
        length = len(string)
        if length > self.block_capacity:
            self._blocks.insert(len(self._blocks) - 1, [string])
            return string

        if self._used + length > self.block_capacity:
            self._blocks.append([])
            self._used = 0

        self._blocks[-1].append(string)
        self._used += length
        return string

    def __len__(self) -> int:
        return sum(len(block) for block in self._blocks)

    @property
    def block_count(self) -> int:
        return len(self._blocks)

    def empty(self) -> None:
        self._blocks = [[]]
        self._used = 0


class StringPoolNoDuplicates(StringPool):
    """String pool that returns the same stored copy for equal strings"""

    def __init__(self, block_capacity: int = 1 << 16):
        super().__init__(block_capacity)
        self._stored: Dict[str, str] = {}

    def put(self, string: str) -> str:
        stored = self._stored.get(string)
        if stored is None:
            stored = super().put(string)
            self._stored[stored] = stored
        return stored

    def empty(self) -> None:
        super().empty()
        self._stored.clear()


class IdLinkedListPool:
    """
    Node pool for singly linked lists of integer identifiers

    A list is referred to by the index of its head node; EMPTY_LIST is the
    empty list. Nodes are never freed individually.
    """

    def __init__(self):
        self._values: List[int] = []
        self._next: List[int] = []

    def prepend(self, head: int, value: int) -> int:
        """
        Add a value to the start of a list

        Args:
            head: Current head of the list
            value: Identifier to store

        Returns:
            The new head of the list
        """
        self._values.append(value)
        self._next.append(head)
        return len(self._values) - 1

    def iter_list(self, head: int) -> Iterator[int]:
        while head != EMPTY_LIST:
            yield self._values[head]
            head = self._next[head]

    def length(self, head: int) -> int:
        count = 0
        while head != EMPTY_LIST:
            count += 1
            head = self._next[head]
        return count

    def __len__(self) -> int:
        return len(self._values)

    def empty(self) -> None:
        self._values.clear()
        self._next.clear()
