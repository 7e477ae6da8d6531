"""
Analyzer module.

Contains the annotation index (pass 1), the schema reducer (pass 2) and
the result nodes they produce.
"""

from __future__ import annotations

from .annotation_index import AnnotationIndex, build_annotation_index
from .reducer import PRESENT_VALUE, UNHANDLED_VALUE, SchemaReducer, resolve_annotation
from .result_nodes import EnumDef, ExtractionResult, InterfaceDef, MemberDef, StructDef

__all__ = [
    "AnnotationIndex",
    "build_annotation_index",
    "SchemaReducer",
    "resolve_annotation",
    "PRESENT_VALUE",
    "UNHANDLED_VALUE",
    "MemberDef",
    "StructDef",
    "EnumDef",
    "InterfaceDef",
    "ExtractionResult",
]
