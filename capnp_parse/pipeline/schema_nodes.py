"""
Node definitions for a compiled schema.

These nodes mirror the parts of the compiler's CodeGeneratorRequest that
the extractor needs. They are built once by the reader and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NodeKind(Enum):
    """Kind of a schema node."""

    FILE = "file"
    STRUCT = "struct"
    ENUM = "enum"
    INTERFACE = "interface"
    CONST = "const"
    ANNOTATION = "annotation"
    OTHER = "other"  # Anything the compiler adds later

    @classmethod
    def from_tag(cls, tag: str) -> NodeKind:
        """Map a union tag from the compiler output to a kind."""
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


# Value union tags the resolver understands
VOID = "void"
TEXT = "text"


@dataclass(frozen=True)
class AnnotationValue:
    """The value carried by an annotation application."""

    kind: str = VOID  # Union tag: "void", "text", "int32", "struct", ...
    text: str | None = None  # Only set when kind == "text"


@dataclass(frozen=True)
class AnnotationApplication:
    """An annotation attached to a field, enumerant or method."""

    id: int = 0  # Id of the annotation declaration node
    value: AnnotationValue = field(default_factory=AnnotationValue)


@dataclass(frozen=True)
class Member:
    """A field, enumerant or method of a node."""

    name: str = ""
    annotations: tuple[AnnotationApplication, ...] = ()


@dataclass(frozen=True)
class SchemaNode:
    """One node of the compiled schema."""

    id: int = 0
    display_name: str = ""
    display_name_prefix_length: int = 0
    kind: NodeKind = NodeKind.OTHER

    # Fields, enumerants or methods depending on kind, in declaration order
    members: tuple[Member, ...] = ()

    # Raw union tag as written by the compiler
    tag: str = ""

    @property
    def local_name(self) -> str:
        """Display name without its scope prefix.

        The prefix length is a UTF-8 byte offset, as written by the compiler.
        """
        encoded = self.display_name.encode("utf-8")
        return encoded[self.display_name_prefix_length :].decode("utf-8", errors="replace")
