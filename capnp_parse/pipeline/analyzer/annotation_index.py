"""
Annotation index.

Pass 1 of the reduction: map every annotation declaration id to its local
name so pass 2 can resolve applications that appear before the declaration.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from ..schema_nodes import NodeKind, SchemaNode

logger = logging.getLogger(__name__)

AnnotationIndex = Mapping[int, str]


def build_annotation_index(nodes: Iterable[SchemaNode]) -> AnnotationIndex:
    """
    Build the annotation id -> name lookup.

    Args:
        nodes: The full node stream

    Returns:
        Read-only mapping keyed by the raw numeric id
    """
    names: dict[int, str] = {}
    for node in nodes:
        if node.kind is NodeKind.ANNOTATION:
            names[node.id] = node.local_name
    logger.debug(f"Indexed {len(names)} annotation declarations")
    return MappingProxyType(names)
