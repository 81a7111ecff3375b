# tests/utils_tests/test_model_reader.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Test suite for model file reading

"""Test suite for reading Galileo model files from disk."""

import pytest
from galileo import parse_file
from galileo.ast_nodes import Gate
from utils.model_reader import ModelFileError, read_model_file


class TestModelReader:
    """Test cases for read_model_file and parse_file."""

    def test_reads_file_content(self, tmp_path, scenario_a_source):
        model = tmp_path / "model.dft"
        model.write_text(scenario_a_source, encoding="utf-8")

        assert read_model_file(model) == scenario_a_source
        assert read_model_file(str(model)) == scenario_a_source

    def test_missing_file(self, tmp_path):
        with pytest.raises(ModelFileError, match="not found"):
            read_model_file(tmp_path / "absent.dft")

    def test_directory_is_rejected(self, tmp_path):
        with pytest.raises(ModelFileError, match="not a file"):
            read_model_file(tmp_path)

    @pytest.mark.parametrize("content", ["", "   \n\t\n"])
    def test_empty_file(self, tmp_path, content):
        model = tmp_path / "empty.dft"
        model.write_text(content, encoding="utf-8")

        with pytest.raises(ModelFileError, match="empty"):
            read_model_file(model)

    def test_non_utf8_file(self, tmp_path):
        model = tmp_path / "latin1.dft"
        model.write_bytes(b"toplevel \xe9;")

        with pytest.raises(ModelFileError, match="UTF-8"):
            read_model_file(model)

    def test_parse_file(self, tmp_path, complex_model_source):
        model = tmp_path / "station.dft"
        model.write_text(complex_model_source, encoding="utf-8")

        tree = parse_file(model)

        assert tree.top_event == "System"
        assert isinstance(tree.entities[0], Gate)
        assert len(tree.entities) == 7
