"""
CodeGeneratorRequest reader.

Decodes the compiler output with pycapnp and copies every node into the
immutable SchemaNode model, so the reduction never touches the message.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

import capnp

from .config import ExtractorConfig
from .errors import SchemaDecodeError
from .schema_nodes import TEXT, AnnotationApplication, AnnotationValue, Member, NodeKind, SchemaNode

logger = logging.getLogger(__name__)

SCHEMA_RELATIVE_PATH = Path("capnp") / "schema.capnp"

# Where the capnp tool installs its bundled schemas
DEFAULT_INCLUDE_DIRS = ("/usr/local/include", "/usr/include")

DECODE_ERRORS = (capnp.KjException, ValueError)

# Node kind -> (union group, member list)
MEMBER_LISTS = {
    NodeKind.STRUCT: ("struct", "fields"),
    NodeKind.ENUM: ("enum", "enumerants"),
    NodeKind.INTERFACE: ("interface", "methods"),
}


def find_schema_file(schema_file: str = "", import_paths: Iterable[str] = ()) -> Path:
    """
    Locate capnp/schema.capnp.

    Args:
        schema_file: Explicit location, used as-is when set
        import_paths: Extra include directories searched first

    Returns:
        Path to schema.capnp

    Raises:
        SchemaDecodeError: If the file cannot be found
    """
    if schema_file:
        path = Path(schema_file)
        if not path.is_file():
            raise SchemaDecodeError(f"Schema definition not found: {path}", phase="schema")
        return path

    roots = [Path(p) for p in import_paths]
    roots.extend(Path(p) for p in DEFAULT_INCLUDE_DIRS)
    # pycapnp may ship the schema inside its package directory
    roots.append(Path(capnp.__file__).resolve().parent.parent)

    for root in roots:
        candidate = root / SCHEMA_RELATIVE_PATH
        if candidate.is_file():
            return candidate

    searched = ", ".join(str(r) for r in roots)
    raise SchemaDecodeError(f"Could not find {SCHEMA_RELATIVE_PATH} (searched {searched})", phase="schema")


def _union_tag(reader: Any) -> str:
    # pycapnp exposes `which` as a property; older releases as a method
    which = reader.which
    if callable(which):
        which = which()
    return str(which)


def materialize_annotation(reader: Any) -> AnnotationApplication:
    """Copy one annotation application."""
    annotation_id = int(reader.id)
    value = reader.value
    kind = _union_tag(value)
    text = str(value.text) if kind == TEXT else None
    return AnnotationApplication(id=annotation_id, value=AnnotationValue(kind=kind, text=text))


def materialize_member(reader: Any, node_id: int, node_name: str) -> Member:
    """Copy one field, enumerant or method with its annotations."""
    try:
        name = str(reader.name)
    except DECODE_ERRORS as e:
        raise SchemaDecodeError(f"Unreadable member name: {e}", phase="member", node_id=node_id, node_name=node_name) from e

    try:
        annotations = tuple(materialize_annotation(a) for a in reader.annotations)
    except DECODE_ERRORS as e:
        raise SchemaDecodeError(
            f"Unreadable annotation on '{name}': {e}",
            phase="annotation",
            node_id=node_id,
            node_name=node_name,
        ) from e
    return Member(name=name, annotations=annotations)


def materialize_node(reader: Any) -> SchemaNode:
    """
    Copy one node of the request into a SchemaNode.

    Args:
        reader: A pycapnp Node reader (or anything with the same attributes)

    Returns:
        The immutable node

    Raises:
        SchemaDecodeError: If any part of the node cannot be decoded
    """
    node_id = None
    node_name = None
    try:
        node_id = int(reader.id)
        node_name = str(reader.displayName)
        prefix_length = int(reader.displayNamePrefixLength)
        tag = _union_tag(reader)
    except DECODE_ERRORS as e:
        raise SchemaDecodeError(f"Unreadable node: {e}", phase="node", node_id=node_id, node_name=node_name) from e

    kind = NodeKind.from_tag(tag)
    members: tuple[Member, ...] = ()
    if kind in MEMBER_LISTS:
        group, list_name = MEMBER_LISTS[kind]
        try:
            member_readers = getattr(getattr(reader, group), list_name)
        except DECODE_ERRORS as e:
            raise SchemaDecodeError(f"Unreadable {list_name}: {e}", phase="member", node_id=node_id, node_name=node_name) from e
        members = tuple(materialize_member(m, node_id, node_name) for m in member_readers)

    return SchemaNode(
        id=node_id,
        display_name=node_name,
        display_name_prefix_length=prefix_length,
        kind=kind,
        members=members,
        tag=tag,
    )


class CodeGeneratorRequestReader:
    """Decodes compiler output into SchemaNodes."""

    def __init__(
        self,
        schema_file: str = "",
        import_paths: Sequence[str] = (),
        traversal_limit_in_words: int = 1 << 30,
    ):
        """
        Initialize the reader.

        Args:
            schema_file: Explicit location of capnp/schema.capnp
            import_paths: Extra include directories
            traversal_limit_in_words: Decoding bound passed to pycapnp
        """
        self.schema_file = schema_file
        self.import_paths = list(import_paths)
        self.traversal_limit_in_words = traversal_limit_in_words
        self._schema_module = None

    @staticmethod
    def from_config(config: ExtractorConfig) -> CodeGeneratorRequestReader:
        return CodeGeneratorRequestReader(
            schema_file=config.schema_file,
            import_paths=config.import_paths,
            traversal_limit_in_words=config.traversal_limit_in_words,
        )

    def _load_schema(self) -> Any:
        """Load schema.capnp once."""
        if self._schema_module is None:
            path = find_schema_file(self.schema_file, self.import_paths)
            # schema.capnp imports /capnp/c++.capnp relative to its include root
            imports = [str(path.parent.parent), *self.import_paths]
            logger.debug(f"Loading {path}")
            try:
                self._schema_module = capnp.load(str(path), imports=imports)
            except (capnp.KjException, OSError) as e:
                raise SchemaDecodeError(f"Could not load {path}: {e}", phase="schema") from e
        return self._schema_module

    def read(self, data: bytes) -> list[SchemaNode]:
        """
        Decode a CodeGeneratorRequest message.

        Args:
            data: Raw message as written by ``capnp compile -o -``

        Returns:
            All nodes of the request, in message order

        Raises:
            SchemaDecodeError: If the message or any node cannot be decoded
        """
        if not data:
            raise SchemaDecodeError("Compiler produced no output", phase="message")

        schema = self._load_schema()
        try:
            with schema.CodeGeneratorRequest.from_bytes(
                data,
                traversal_limit_in_words=self.traversal_limit_in_words,
            ) as request:
                nodes = [materialize_node(n) for n in request.nodes]
        except DECODE_ERRORS as e:
            raise SchemaDecodeError(f"Malformed CodeGeneratorRequest: {e}", phase="message") from e

        logger.info(f"Decoded {len(nodes)} schema nodes")
        return nodes
