from __future__ import annotations

import pytest

from capnp_parse.pipeline.schema_nodes import (
    AnnotationApplication,
    AnnotationValue,
    Member,
    NodeKind,
    SchemaNode,
)

ANNO_ID = 0xA1B2C3D4E5F60708
FLAG_ID = 0xA1B2C3D4E5F60709


@pytest.fixture
def sample_nodes() -> list[SchemaNode]:
    """A small stream where annotation declarations follow their use sites."""
    return [
        SchemaNode(id=1, display_name="Pkg", display_name_prefix_length=0, kind=NodeKind.FILE, tag="file"),
        SchemaNode(
            id=2,
            display_name="Pkg.MyStruct",
            display_name_prefix_length=4,
            kind=NodeKind.STRUCT,
            tag="struct",
            members=(
                Member(
                    name="id",
                    annotations=(AnnotationApplication(id=ANNO_ID, value=AnnotationValue(kind="text", text="v1")),),
                ),
                Member(
                    name="secret",
                    annotations=(AnnotationApplication(id=FLAG_ID, value=AnnotationValue(kind="void")),),
                ),
            ),
        ),
        SchemaNode(
            id=3,
            display_name="Pkg.Color",
            display_name_prefix_length=4,
            kind=NodeKind.ENUM,
            tag="enum",
            members=(Member(name="red"), Member(name="green")),
        ),
        SchemaNode(
            id=4,
            display_name="Pkg.Service",
            display_name_prefix_length=4,
            kind=NodeKind.INTERFACE,
            tag="interface",
            members=(
                Member(
                    name="ping",
                    annotations=(AnnotationApplication(id=ANNO_ID, value=AnnotationValue(kind="int32")),),
                ),
            ),
        ),
        SchemaNode(id=ANNO_ID, display_name="Pkg.MyAnno", display_name_prefix_length=4, kind=NodeKind.ANNOTATION, tag="annotation"),
        SchemaNode(id=FLAG_ID, display_name="Pkg.sensitive", display_name_prefix_length=4, kind=NodeKind.ANNOTATION, tag="annotation"),
        SchemaNode(id=5, display_name="Pkg.limit", display_name_prefix_length=4, kind=NodeKind.CONST, tag="const"),
    ]
