"""
Analyzer module.

Contains type analysis, type mapping, identity resolution and the schema model.
"""

from __future__ import annotations

from .analyzer import TypeAnalyzer
from .schema_nodes import (
    CapnpType,
    EnumValue,
    FieldDefinition,
    SchemaDefinition,
    TypeKind,
)
from .type_ids import derive_type_id, resolve_type_id
from .type_mapper import TypeMapper

__all__ = [
    "SchemaDefinition",
    "FieldDefinition",
    "EnumValue",
    "CapnpType",
    "TypeKind",
    "TypeAnalyzer",
    "TypeMapper",
    "derive_type_id",
    "resolve_type_id",
]
