"""Tests for template descriptor loading."""

import json
from pathlib import Path

import pytest

from scaffolding.errors import MetadataError
from scaffolding.metadata import TemplateMetadata, read_metadata


class TestReadMetadata:
    """read_metadata."""

    def test_missing_file_means_no_metadata(self, tmp_path: Path):
        assert read_metadata(tmp_path) is None

    def test_reads_fields(self, tmp_path: Path):
        (tmp_path / "gostrap.json").write_text(
            json.dumps({"description": "HTTP service", "author": "jane"})
        )

        metadata = read_metadata(tmp_path)

        assert metadata == TemplateMetadata(description="HTTP service", author="jane")

    def test_missing_fields_default_to_empty(self, tmp_path: Path):
        (tmp_path / "gostrap.json").write_text("{}")

        metadata = read_metadata(tmp_path)

        assert metadata == TemplateMetadata()

    def test_unknown_fields_ignored(self, tmp_path: Path):
        (tmp_path / "gostrap.json").write_text('{"author": "a", "tags": ["x"]}')

        assert read_metadata(tmp_path).author == "a"

    def test_custom_file_name(self, tmp_path: Path):
        (tmp_path / "template.json").write_text('{"description": "custom"}')

        assert read_metadata(tmp_path, "template.json").description == "custom"
        assert read_metadata(tmp_path) is None

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            "[1, 2, 3]",
            '"just a string"',
            '{"description": 42}',
            '{"author": ["a", "b"]}',
        ],
    )
    def test_malformed_descriptor_raises(self, tmp_path: Path, content: str):
        (tmp_path / "gostrap.json").write_text(content)

        with pytest.raises(MetadataError) as exc_info:
            read_metadata(tmp_path)

        assert exc_info.value.path == tmp_path / "gostrap.json"

    def test_directory_named_like_descriptor_is_ignored(self, tmp_path: Path):
        (tmp_path / "gostrap.json").mkdir()

        assert read_metadata(tmp_path) is None
