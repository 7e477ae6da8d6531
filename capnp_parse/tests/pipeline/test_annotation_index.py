"""
Tests for the annotation index (pass 1).
"""

from __future__ import annotations

import pytest

from capnp_parse.pipeline.analyzer import build_annotation_index
from capnp_parse.pipeline.schema_nodes import NodeKind, SchemaNode


class TestBuildAnnotationIndex:
    def test_indexes_only_annotation_declarations(self, sample_nodes):
        index = build_annotation_index(sample_nodes)

        assert dict(index) == {
            0xA1B2C3D4E5F60708: "MyAnno",
            0xA1B2C3D4E5F60709: "sensitive",
        }

    def test_keys_are_raw_integer_ids(self, sample_nodes):
        index = build_annotation_index(sample_nodes)

        assert all(isinstance(key, int) for key in index)
        assert str(0xA1B2C3D4E5F60708) not in index

    def test_strips_display_name_prefix(self):
        nodes = [SchemaNode(id=7, display_name="foo/bar.capnp:label", display_name_prefix_length=14, kind=NodeKind.ANNOTATION)]

        assert build_annotation_index(nodes)[7] == "label"

    def test_prefix_length_counts_utf8_bytes(self):
        name = "données/a.capnp:label"
        prefix_length = len("données/a.capnp:".encode("utf-8"))
        nodes = [SchemaNode(id=7, display_name=name, display_name_prefix_length=prefix_length, kind=NodeKind.ANNOTATION)]

        assert prefix_length == 17
        assert build_annotation_index(nodes)[7] == "label"

    def test_malformed_prefix_passes_through(self):
        nodes = [SchemaNode(id=7, display_name="abc", display_name_prefix_length=10, kind=NodeKind.ANNOTATION)]

        assert build_annotation_index(nodes)[7] == ""

    def test_empty_stream(self):
        assert len(build_annotation_index([])) == 0

    def test_index_is_read_only(self, sample_nodes):
        index = build_annotation_index(sample_nodes)

        with pytest.raises(TypeError):
            index[1] = "other"  # type: ignore[index]
