"""
Mapping of host member types to schema types.
"""

from __future__ import annotations

import logging
from typing import Any

from ..providers.base import HostTypeKind, ScalarKind, TypeMetadataProvider
from .schema_nodes import CapnpType, TypeKind
from .type_ids import resolve_type_id

logger = logging.getLogger(__name__)


class TypeMapper:
    """Resolves host types to schema types. Never fails: unknown types become Void."""

    # Scalar shape -> schema primitive name
    PRIMITIVE_MAP: dict[ScalarKind, str] = {
        ScalarKind.BOOL: "Bool",
        ScalarKind.INT8: "Int8",
        ScalarKind.UINT8: "UInt8",
        ScalarKind.INT16: "Int16",
        ScalarKind.UINT16: "UInt16",
        ScalarKind.INT32: "Int32",
        ScalarKind.UINT32: "UInt32",
        ScalarKind.INT64: "Int64",
        ScalarKind.UINT64: "UInt64",
        ScalarKind.FLOAT32: "Float32",
        ScalarKind.FLOAT64: "Float64",
        # Time is carried as a 64-bit count (epoch-relative or elapsed)
        ScalarKind.TIMESTAMP: "Int64",
        ScalarKind.DURATION: "Int64",
    }

    def __init__(self, provider: TypeMetadataProvider):
        self.provider = provider

    def map_type(self, host_type: Any) -> CapnpType:
        """
        Map a host type to a schema type.

        Nullability is stripped here and tracked on the owning field instead.

        Args:
            host_type: Declared type of a member

        Returns:
            The resolved schema type
        """
        underlying = self.provider.unwrap_nullable(host_type)

        element_type = self.provider.list_element_type(underlying)
        if element_type is not None:
            return CapnpType(kind=TypeKind.LIST, element_type=self.map_type(element_type))

        scalar = self.provider.scalar_kind(underlying)
        if scalar is ScalarKind.TEXT:
            return CapnpType(kind=TypeKind.TEXT)
        if scalar is ScalarKind.DATA:
            return CapnpType(kind=TypeKind.DATA)
        if scalar is not None:
            return CapnpType(kind=TypeKind.PRIMITIVE, type_name=self.PRIMITIVE_MAP[scalar])

        if self.provider.kind_of(underlying) is HostTypeKind.ENUM:
            return self._reference(TypeKind.ENUM, underlying)

        if self.provider.is_serializable_record(underlying):
            return self._reference(TypeKind.STRUCT, underlying)

        logger.debug("No schema type for %r, using Void", host_type)
        return CapnpType(kind=TypeKind.VOID)

    def _reference(self, kind: TypeKind, host_type: Any) -> CapnpType:
        """Reference another schema type by name and identity, without analyzing it."""
        return CapnpType(
            kind=kind,
            type_name=self.provider.name_of(host_type),
            type_id=resolve_type_id(self.provider, host_type),
        )
