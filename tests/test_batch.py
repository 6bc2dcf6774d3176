"""
Tests for the batch mode command line
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import main as batch
from config import set_settings


@pytest.fixture(scope='function')
def query_file(tmp_path):
    path = tmp_path / "queries.txt"
    path.write_text(
        "1 JT910\n"
        "11 nothing\n"
        "6 2023 10\n"
        "1F Book0000000001\n",
        encoding="utf-8",
    )
    return str(path)


class TestBatchMode:
    """Test a full run from dataset directory to result files"""

    def test_writes_one_file_per_query(self, sample_dataset, query_file, tmp_path):
        output = tmp_path / "out"
        assert batch.main([sample_dataset, query_file, "--output-dir", str(output)]) == 0

        assert (output / "command1_output.txt").read_text(encoding="utf-8") == "Jess;F;33;PT;P0;2;2;450.00\n"
        assert (output / "command2_output.txt").read_text(encoding="utf-8") == ""
        assert (output / "command3_output.txt").read_text(encoding="utf-8") == "LIS;2\nOPO;2\n"
        assert (output / "command4_output.txt").read_text(encoding="utf-8").startswith(
            "--- 1 ---\nhotel_id: HTL1001\n"
        )
        assert (output / "users_errors.csv").exists()
        assert (output / "passengers_errors.csv").exists()

    def test_rerun_is_byte_identical(self, sample_dataset, query_file, tmp_path):
        outputs = []
        for run in ("first", "second"):
            output = tmp_path / run
            assert batch.main([sample_dataset, query_file, "--output-dir", str(output)]) == 0
            outputs.append({path.name: path.read_bytes() for path in output.iterdir()})
        assert outputs[0] == outputs[1]

    def test_missing_dataset(self, query_file, tmp_path):
        assert batch.main([str(tmp_path / "missing"), query_file, "--output-dir", str(tmp_path / "out")]) == 1

    def test_missing_query_file(self, sample_dataset, tmp_path):
        assert batch.main([sample_dataset, str(tmp_path / "missing.txt"),
                           "--output-dir", str(tmp_path / "out")]) == 1

    @pytest.mark.parametrize("argv", [[], ["only-one"], ["a", "b", "c"]])
    def test_wrong_arity(self, argv, capsys):
        with pytest.raises(SystemExit) as info:
            batch.main(argv)
        assert info.value.code == 1
        assert "usage:" in capsys.readouterr().err

    def test_invalid_reference_date(self, sample_dataset, query_file, tmp_path, monkeypatch, caplog):
        monkeypatch.setenv("REFERENCE_DATE", "01-10-2023")
        set_settings(None)
        try:
            assert batch.main([sample_dataset, query_file, "--output-dir", str(tmp_path / "out")]) == 1
        finally:
            set_settings(None)
        assert "Invalid configuration" in caplog.text

    def test_unwritable_output_dir(self, sample_dataset, query_file, tmp_path, caplog):
        output = tmp_path / "out"
        output.write_text("not a directory", encoding="utf-8")

        assert batch.main([sample_dataset, query_file, "--output-dir", str(output)]) == 1
        assert "Failed to write error files" in caplog.text
        assert "Failed to open query file" not in caplog.text
