"""
Schema reducer that turns the node stream into an ExtractionResult.

Pass 2 of the reduction: classify every node, collect its members and
resolve their annotations through the index built in pass 1.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import SchemaDecodeError
from ..schema_nodes import TEXT, VOID, AnnotationApplication, Member, NodeKind, SchemaNode
from .annotation_index import AnnotationIndex
from .result_nodes import EnumDef, ExtractionResult, InterfaceDef, MemberDef, StructDef

logger = logging.getLogger(__name__)

# Value written for presence-only annotations
PRESENT_VALUE = "true"

# Value written for annotation kinds other than void and text
UNHANDLED_VALUE = "unhandled type"


def resolve_annotation(application: AnnotationApplication, index: AnnotationIndex) -> tuple[str, str] | None:
    """
    Resolve one annotation application to a name/value pair.

    Args:
        application: The annotation attached to a member
        index: Annotation id -> name lookup

    Returns:
        (name, value), or None when the declaration is not in the index

    Raises:
        SchemaDecodeError: If a text value has no payload
    """
    name = index.get(application.id)
    if name is None:
        logger.debug(f"Skipping annotation with unknown id {application.id:#x}")
        return None

    value = application.value
    if value.kind == VOID:
        return name, PRESENT_VALUE
    if value.kind == TEXT:
        if value.text is None:
            raise SchemaDecodeError(f"Text annotation '{name}' ({application.id:#x}) has no payload", phase="annotation")
        return name, value.text
    return name, UNHANDLED_VALUE


class SchemaReducer:
    """Reduces a node stream to structs, enums and interfaces."""

    def __init__(self, index: AnnotationIndex):
        """
        Initialize the reducer.

        Args:
            index: Completed annotation index from pass 1
        """
        self.index = index
        self._handlers = {
            NodeKind.STRUCT: self._reduce_struct,
            NodeKind.ENUM: self._reduce_enum,
            NodeKind.INTERFACE: self._reduce_interface,
            NodeKind.ANNOTATION: self._skip,
        }

    def reduce(self, nodes: Iterable[SchemaNode]) -> ExtractionResult:
        """
        Walk the node stream and build the result.

        Args:
            nodes: The full node stream, in compiler order

        Returns:
            ExtractionResult with containers in stream order
        """
        result = ExtractionResult()
        for node in nodes:
            handler = self._handlers.get(node.kind, self._reduce_unknown)
            handler(node, result)

        logger.info(
            f"Reduced schema (structs={len(result.structs)} enums={len(result.enums)} "
            f"interfaces={len(result.interfaces)} unk={len(result.unk)})"
        )
        return result

    def _reduce_struct(self, node: SchemaNode, result: ExtractionResult) -> None:
        logger.debug(f"struct: {node.display_name}")
        result.structs.append(StructDef(name=node.display_name, fields=self._reduce_members(node, "field")))

    def _reduce_enum(self, node: SchemaNode, result: ExtractionResult) -> None:
        logger.debug(f"enum: {node.display_name}")
        result.enums.append(EnumDef(name=node.display_name, enumerants=self._reduce_members(node, "enumerant")))

    def _reduce_interface(self, node: SchemaNode, result: ExtractionResult) -> None:
        logger.debug(f"interface: {node.display_name}")
        result.interfaces.append(InterfaceDef(name=node.display_name, methods=self._reduce_members(node, "method")))

    def _skip(self, node: SchemaNode, result: ExtractionResult) -> None:
        # Annotation declarations were consumed by the index
        pass

    def _reduce_unknown(self, node: SchemaNode, result: ExtractionResult) -> None:
        result.unk.append(node.display_name)

    def _reduce_members(self, node: SchemaNode, label: str) -> list[MemberDef]:
        """Build one MemberDef per member, keeping declaration order."""
        members = []
        for member in node.members:
            logger.debug(f"\t{label}: {member.name}")
            members.append(self._reduce_member(node, member))
        return members

    def _reduce_member(self, node: SchemaNode, member: Member) -> MemberDef:
        member_def = MemberDef(name=member.name)
        for application in member.annotations:
            try:
                resolved = resolve_annotation(application, self.index)
            except SchemaDecodeError as e:
                raise SchemaDecodeError(
                    f"Corrupt annotation on '{member.name}': {e.detail}",
                    phase="annotation",
                    node_id=node.id,
                    node_name=node.display_name,
                ) from e
            if resolved is None:
                continue
            name, value = resolved
            # Later applications of the same annotation win
            member_def.annotations[name] = value
        return member_def
