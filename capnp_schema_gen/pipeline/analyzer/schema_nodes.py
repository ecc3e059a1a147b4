"""
Schema model node definitions.

These nodes represent an analyzed host type in a language-neutral form,
ready for schema emission. Nothing here depends on how the host type
was introspected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TypeKind(Enum):
    """Kind of type in the schema model."""

    STRUCT = "struct"
    ENUM = "enum"
    INTERFACE = "interface"
    LIST = "list"  # List(T)
    PRIMITIVE = "primitive"  # Bool, Int8 ... Float64
    TEXT = "text"
    DATA = "data"
    VOID = "void"


@dataclass
class CapnpType:
    """A resolved schema type reference."""

    kind: TypeKind = TypeKind.VOID

    # For LIST
    element_type: CapnpType | None = None

    # For PRIMITIVE (vocabulary name) and STRUCT/ENUM (referenced type name)
    type_name: str | None = None

    # For STRUCT/ENUM: identity of the referenced type
    type_id: int = 0


@dataclass
class FieldDefinition:
    """A struct member or an interface method slot."""

    name: str = ""
    index: int = 0  # Wire ordinal
    type: CapnpType = field(default_factory=CapnpType)
    is_optional: bool = False

    # Reserved, not emitted
    default_value: Any = None


@dataclass
class EnumValue:
    """An enumerant with its source ordinal."""

    name: str = ""
    value: int = 0


@dataclass
class SchemaDefinition:
    """One analyzed type."""

    name: str = ""
    type_id: int = 0
    kind: TypeKind = TypeKind.STRUCT
    namespace: str = ""

    # Struct members or interface methods, in wire order
    fields: list[FieldDefinition] = field(default_factory=list)

    # Enumerants, only for ENUM
    enum_values: list[EnumValue] = field(default_factory=list)

    # Always empty for now
    nested_types: list[SchemaDefinition] = field(default_factory=list)
