"""
Result node definitions.

These nodes hold the reduced schema: one container per struct, enum and
interface, each owning its members in declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MemberDef:
    """A field, enumerant or method with its resolved annotations."""

    name: str = ""  # Local name, not path-qualified
    annotations: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "annotations": {key: self.annotations[key] for key in sorted(self.annotations)},
        }


@dataclass
class StructDef:
    """A struct node."""

    name: str = ""  # Full display name
    fields: list[MemberDef] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"name": self.name, "fields": [m.to_dict() for m in self.fields]}


@dataclass
class EnumDef:
    """An enum node."""

    name: str = ""
    enumerants: list[MemberDef] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"name": self.name, "enumerants": [m.to_dict() for m in self.enumerants]}


@dataclass
class InterfaceDef:
    """An interface node."""

    name: str = ""
    methods: list[MemberDef] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"name": self.name, "methods": [m.to_dict() for m in self.methods]}


@dataclass
class ExtractionResult:
    """The complete reduced schema."""

    structs: list[StructDef] = field(default_factory=list)
    enums: list[EnumDef] = field(default_factory=list)
    interfaces: list[InterfaceDef] = field(default_factory=list)

    # Display names of nodes with no recognised kind
    unk: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to the output document shape."""
        return {
            "structs": [s.to_dict() for s in self.structs],
            "enums": [e.to_dict() for e in self.enums],
            "interfaces": [i.to_dict() for i in self.interfaces],
            "unk": list(self.unk),
        }
