"""
Delimited text parsing: stream tokenizer, fixed column grammar and dataset parser
"""
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Sequence, TextIO

ColumnCallback = Callable[[Any, str, int], None]

READ_CHUNK_SIZE = 1 << 16


class GrammarError(ValueError):
    """Raised when a line does not have the expected number of columns"""


def tokenize_stream(stream: TextIO, delimiter: str = "\n",
                    chunk_size: int = READ_CHUNK_SIZE) -> Iterator[str]:
    """
    Split a stream on a delimiter

    The delimiter is stripped from every token. The text after the last
    delimiter is yielded as a final token when it is not empty.

    Args:
        stream: Text stream to read
        delimiter: Single delimiter character
        chunk_size: Characters read at a time

    Yields:
        Each token in the stream
    """
    pending = ""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break

        pending += chunk
        *tokens, pending = pending.split(delimiter)
        yield from tokens

    if pending:
        yield pending


class FixedNGrammar:
    """Grammar of a line made of a fixed number of delimited columns"""

    def __init__(self, delimiter: str, callbacks: Sequence[ColumnCallback]):
        """
        Args:
            delimiter: Column separator
            callbacks: One callback per column, called with (context, token, index)
        """
        self.delimiter = delimiter
        self.callbacks = tuple(callbacks)

    @property
    def column_count(self) -> int:
        return len(self.callbacks)

    def parse(self, text: str, context: Any) -> None:
        """
        Apply the grammar to a line

        The first callback that raises aborts parsing and its exception propagates.
        """
        tokens = text.split(self.delimiter)
        if len(tokens) != len(self.callbacks):
            raise GrammarError(f"Expected {len(self.callbacks)} columns, got {len(tokens)}")

        for index, (callback, token) in enumerate(zip(self.callbacks, tokens)):
            callback(context, token, index)


@dataclass(frozen=True)
class DatasetGrammar:
    """Outer line delimiter, inner line grammar and the hooks around each line"""
    line_grammar: FixedNGrammar
    after_line: Callable[[Any, Optional[ValueError]], None]
    before_line: Optional[Callable[[Any, str], None]] = None
    delimiter: str = "\n"


def parse_dataset(stream: TextIO, grammar: DatasetGrammar, context: Any) -> None:
    """
    Parse every line of a dataset file, skipping its header

    Args:
        stream: File to parse
        grammar: Grammar and hooks to apply
        context: Value handed to every callback and hook
    """
    lines = tokenize_stream(stream, grammar.delimiter)
    next(lines, None)

    for line in lines:
        if grammar.before_line is not None:
            grammar.before_line(context, line)

        try:
            grammar.line_grammar.parse(line, context)
        except ValueError as error:
            grammar.after_line(context, error)
        else:
            grammar.after_line(context, None)
