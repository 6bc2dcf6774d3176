"""
Tests for the delimited text parsers
"""
from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dataset.parser import DatasetGrammar, FixedNGrammar, GrammarError, parse_dataset, tokenize_stream


def _collect(context, token, index):
    context.append((index, token))


class TestTokenizeStream:
    """Test the stream tokenizer"""

    def test_strips_delimiters(self):
        assert list(tokenize_stream(io.StringIO("a\nb\n"))) == ["a", "b"]

    def test_final_token_without_delimiter(self):
        assert list(tokenize_stream(io.StringIO("a\nb"))) == ["a", "b"]

    def test_keeps_empty_inner_tokens(self):
        assert list(tokenize_stream(io.StringIO("a\n\nb\n"))) == ["a", "", "b"]

    def test_tokens_across_chunks(self):
        text = "first line\nsecond\nthird one here\n"
        tokens = list(tokenize_stream(io.StringIO(text), chunk_size=3))
        assert tokens == ["first line", "second", "third one here"]

    def test_other_delimiter(self):
        assert list(tokenize_stream(io.StringIO("a;b;;c"), ";")) == ["a", "b", "", "c"]

    def test_empty_stream(self):
        assert list(tokenize_stream(io.StringIO(""))) == []


class TestFixedNGrammar:
    """Test the fixed column grammar"""

    def test_calls_each_column_callback(self):
        grammar = FixedNGrammar(";", [_collect, _collect, _collect])
        context = []
        grammar.parse("a;;c", context)
        assert context == [(0, "a"), (1, ""), (2, "c")]

    @pytest.mark.parametrize("line", ["a;b", "a;b;c;d", ""])
    def test_wrong_column_count(self, line):
        grammar = FixedNGrammar(";", [_collect, _collect, _collect])
        with pytest.raises(GrammarError):
            grammar.parse(line, [])

    def test_first_failure_aborts(self):
        def reject(context, token, index):
            raise ValueError("rejected")

        grammar = FixedNGrammar(";", [_collect, reject, _collect])
        context = []
        with pytest.raises(ValueError, match="rejected"):
            grammar.parse("a;b;c", context)
        assert context == [(0, "a")]


class TestParseDataset:
    """Test the two level dataset parser"""

    def _grammar(self, log):
        def before_line(context, line):
            log.append(("before", line))

        def after_line(context, error):
            log.append(("after", error is None))

        return DatasetGrammar(
            line_grammar=FixedNGrammar(";", [_collect, _collect]),
            before_line=before_line,
            after_line=after_line,
        )

    def test_skips_header_and_reports_each_line(self):
        log = []
        context = []
        parse_dataset(io.StringIO("x;y\n1;2\nbad\n3;4"), self._grammar(log), context)

        assert log == [
            ("before", "1;2"), ("after", True),
            ("before", "bad"), ("after", False),
            ("before", "3;4"), ("after", True),
        ]
        assert context == [(0, "1"), (1, "2"), (0, "3"), (1, "4")]

    def test_header_only(self):
        log = []
        parse_dataset(io.StringIO("x;y\n"), self._grammar(log), [])
        assert log == []

    def test_non_value_errors_propagate(self):
        def explode(context, token, index):
            raise MemoryError()

        grammar = DatasetGrammar(
            line_grammar=FixedNGrammar(";", [explode]),
            after_line=lambda context, error: None,
        )
        with pytest.raises(MemoryError):
            parse_dataset(io.StringIO("h\nrow\n"), grammar, None)
