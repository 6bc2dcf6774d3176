"""
Tests for the query writer and the query file parser
"""
from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queries import QueryWriter, get_query_type, parse_query, parse_query_file, tokenize_query


def write_two_objects(writer):
    writer.new_object()
    writer.new_field("name", "LIS")
    writer.new_field("passengers", "2")
    writer.new_object()
    writer.new_field("name", "OPO")
    writer.new_field("passengers", "1")


class TestQueryWriter:
    """Test formatted and unformatted output"""

    def test_unformatted_in_memory(self):
        writer = QueryWriter()
        write_two_objects(writer)
        assert writer.get_lines() == ["LIS;2", "OPO;1"]

    def test_formatted_in_memory(self):
        writer = QueryWriter(formatted=True)
        write_two_objects(writer)
        assert writer.get_lines() == [
            "--- 1 ---", "name: LIS", "passengers: 2", "", "--- 2 ---", "name: OPO", "passengers: 1",
        ]

    def test_unformatted_file(self, tmp_path):
        path = tmp_path / "out.txt"
        with QueryWriter(str(path)) as writer:
            write_two_objects(writer)
        assert path.read_text(encoding="utf-8") == "LIS;2\nOPO;1\n"

    def test_formatted_file(self, tmp_path):
        path = tmp_path / "out.txt"
        with QueryWriter(str(path), formatted=True) as writer:
            write_two_objects(writer)
        assert path.read_text(encoding="utf-8") == (
            "--- 1 ---\nname: LIS\npassengers: 2\n\n--- 2 ---\nname: OPO\npassengers: 1\n"
        )

    def test_no_objects_leaves_empty_file(self, tmp_path):
        path = tmp_path / "out.txt"
        QueryWriter(str(path)).close()
        assert path.read_text(encoding="utf-8") == ""

    def test_field_requires_object(self):
        with pytest.raises(RuntimeError):
            QueryWriter().new_field("name", "LIS")

    def test_file_writer_has_no_lines(self, tmp_path):
        with QueryWriter(str(tmp_path / "out.txt")) as writer:
            with pytest.raises(RuntimeError):
                writer.get_lines()


class TestTokenizeQuery:
    """Test splitting of query lines"""

    def test_skips_empty_tokens(self):
        assert tokenize_query("  9   Anna ") == ["9", "Anna"]

    def test_quoted_arguments(self):
        assert tokenize_query('5 LIS "2023/01/01 00:00:00" "2023/12/31 23:59:59"') == [
            "5", "LIS", "2023/01/01 00:00:00", "2023/12/31 23:59:59",
        ]

    def test_quoted_single_word(self):
        assert tokenize_query('9 "Anna"') == ["9", "Anna"]

    def test_unterminated_quote(self):
        with pytest.raises(ValueError):
            tokenize_query('9 "Anna Bell')


class TestParseQuery:
    """Test query lines and query files"""

    def test_type_and_format(self):
        instance = parse_query("10F 2023", 7)
        assert instance.is_valid
        assert instance.query_type is get_query_type(10)
        assert instance.formatted
        assert instance.line_number == 7

    @pytest.mark.parametrize("line", ["", "11 x", "0 x", "F", "1FF JT910", "abc", '9 "open'])
    def test_rejected_lines(self, line):
        assert not parse_query(line, 1).is_valid

    def test_query_file_numbers_every_line(self):
        stream = io.StringIO('1 JT910\n\n42 nothing\r\n9F "Anna B"\n')
        instances = parse_query_file(stream)

        assert [instance.line_number for instance in instances] == [1, 2, 3, 4]
        assert [instance.is_valid for instance in instances] == [True, False, False, True]
        assert instances[3].arguments == "Anna B"

    def test_query_type_list(self):
        assert get_query_type(0) is None
        assert get_query_type(11) is None
        assert [get_query_type(number).number for number in range(1, 11)] == list(range(1, 11))
