"""
Output of query results, either to a file or to memory
"""
import io
from typing import List, Optional


class QueryWriter:
    """
    Writes the objects of a query result

    Unformatted output puts each object in one line, with its fields joined
    by ``;``. Formatted output opens each object with ``--- N ---`` and
    writes one ``key: value`` line per field, with blank lines between
    objects.
    """

    def __init__(self, path: Optional[str] = None, formatted: bool = False):
        """
        Args:
            path: Output file, or None to keep the output in memory
            formatted: Whether to write formatted output
        """
        self.path = path
        self.formatted = formatted
        self._in_memory = path is None
        self._stream = io.StringIO() if path is None else open(path, "w", encoding="utf-8", newline="")
        self._objects = 0
        self._first_field = True
        self._closed = False

    @property
    def object_count(self) -> int:
        return self._objects

    def new_object(self) -> None:
        if self._objects:
            self._stream.write("\n")

        self._objects += 1
        self._first_field = True
        if self.formatted:
            self._stream.write(f"--- {self._objects} ---\n")

    def new_field(self, key: str, value: str) -> None:
        if not self._objects:
            raise RuntimeError("new_object must be called before new_field")

        if self.formatted:
            self._stream.write(f"{key}: {value}\n")
        else:
            if not self._first_field:
                self._stream.write(";")
            self._stream.write(value)
        self._first_field = False

    def _finish(self) -> None:
        if self._objects and not self.formatted:
            self._stream.write("\n")

    def get_lines(self) -> List[str]:
        """Lines written so far, for writers kept in memory"""
        if not self._in_memory:
            raise RuntimeError("Only in-memory writers keep their lines")

        text = self._stream.getvalue()
        if self._objects and not self.formatted and not self._closed:
            text += "\n"
        return text.splitlines()

    def close(self) -> None:
        if self._closed:
            return

        self._finish()
        self._closed = True
        if not self._in_memory:
            self._stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
