# tests/utils_tests/test_run_parser.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Test suite for the command-line front end

"""Test suite for run_parser exit codes and output modes."""

import pytest
from galileo import parse
from run_parser import main, summarize


@pytest.fixture
def model_file(tmp_path, complex_model_source):
    path = tmp_path / "station.dft"
    path.write_text(complex_model_source, encoding="utf-8")
    return path


class TestRunParser:
    """Test cases for the run_parser command line."""

    def test_prints_canonical_model(self, model_file, complex_model_source, capsys):
        assert main([str(model_file)]) == 0

        out = capsys.readouterr().out
        assert out == str(parse(complex_model_source))
        assert parse(out) == parse(complex_model_source)

    def test_check_mode(self, model_file, capsys):
        assert main([str(model_file), "--check"]) == 0

        assert capsys.readouterr().out.strip().endswith(": OK")

    def test_summary_mode(self, model_file, capsys):
        assert main([str(model_file), "--summary"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "Or gates: 1",
            "And gates: 1",
            "VotingOf gates: 1",
            "Basic events: 4",
        ]

    def test_summary_counts(self, scenario_a_source):
        assert summarize(parse(scenario_a_source)) == {
            "Or gates": 1,
            "And gates": 0,
            "VotingOf gates": 0,
            "Basic events": 2,
        }

    def test_missing_model_file(self, tmp_path):
        assert main([str(tmp_path / "absent.dft")]) == 1

    def test_empty_model_file(self, tmp_path):
        path = tmp_path / "empty.dft"
        path.write_text("  \n", encoding="utf-8")

        assert main([str(path)]) == 1

    def test_illegal_character_in_model(self, tmp_path):
        path = tmp_path / "illegal.dft"
        path.write_text("toplevel T; T or A & B;", encoding="utf-8")

        assert main([str(path)]) == 2

    def test_malformed_model(self, tmp_path):
        path = tmp_path / "broken.dft"
        path.write_text("toplevel T; T xyz;", encoding="utf-8")

        assert main([str(path)]) == 2

    def test_check_and_summary_are_exclusive(self, model_file):
        with pytest.raises(SystemExit):
            main([str(model_file), "--check", "--summary"])
