"""
Tests for atomic output writing.
"""

from __future__ import annotations

import json

import pytest

from capnp_parse.pipeline.config import OutputFormat
from capnp_parse.pipeline.errors import OutputError
from capnp_parse.pipeline.writer import AtomicWriter

VALID_JSON = json.dumps({"structs": [], "enums": [], "interfaces": [], "unk": []})


class TestAtomicWriter:
    def test_write_creates_file_and_parents(self, tmp_path):
        target = tmp_path / "out" / "nested" / "output.json"

        AtomicWriter().write(target, VALID_JSON, OutputFormat.JSON)

        assert json.loads(target.read_text()) == json.loads(VALID_JSON)

    def test_overwrites_existing(self, tmp_path):
        target = tmp_path / "output.json"
        target.write_text("old")

        AtomicWriter().write(target, VALID_JSON, OutputFormat.JSON)

        assert target.read_text() == VALID_JSON

    def test_invalid_json_leaves_target_untouched(self, tmp_path):
        target = tmp_path / "output.json"
        target.write_text("previous")

        with pytest.raises(OutputError, match="not valid"):
            AtomicWriter().write(target, '{"structs": [', OutputFormat.JSON)

        assert target.read_text() == "previous"
        assert [p.name for p in tmp_path.iterdir()] == ["output.json"]

    def test_json_missing_keys_rejected(self, tmp_path):
        with pytest.raises(OutputError, match="interfaces, unk"):
            AtomicWriter().write(tmp_path / "o.json", '{"structs": [], "enums": []}', OutputFormat.JSON)

        assert not (tmp_path / "o.json").exists()

    def test_validation_can_be_skipped(self, tmp_path):
        target = tmp_path / "o.json"

        AtomicWriter().write(target, "not json", OutputFormat.JSON, validate=False)

        assert target.read_text() == "not json"

    def test_empty_markdown_rejected(self, tmp_path):
        with pytest.raises(OutputError, match="empty"):
            AtomicWriter().write(tmp_path / "o.md", "  \n", OutputFormat.MARKDOWN)

    def test_custom_validator(self, tmp_path):
        seen = []

        AtomicWriter(validate_json=seen.append).write(tmp_path / "o.json", "x", OutputFormat.JSON)

        assert seen == ["x"]

    def test_write_if_not_exists_refuses_existing(self, tmp_path):
        target = tmp_path / "output.json"
        target.write_text("keep")

        with pytest.raises(OutputError, match="already exists"):
            AtomicWriter().write_if_not_exists(target, VALID_JSON, OutputFormat.JSON)

        assert target.read_text() == "keep"

    def test_write_if_not_exists_writes_new(self, tmp_path):
        target = tmp_path / "output.json"

        AtomicWriter().write_if_not_exists(target, VALID_JSON, OutputFormat.JSON)

        assert target.read_text() == VALID_JSON
