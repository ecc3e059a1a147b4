"""
Type analyzer that builds the schema model.

Phase 1 of the pipeline: classify a host type and turn its enum members,
interface methods or record members into a SchemaDefinition.
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import SchemaGeneratorConfig
from ..errors import NullInputError, UnsupportedTypeKindError
from ..providers.base import HostTypeKind, TypeMetadataProvider
from ..providers.python_provider import PythonTypeProvider
from .schema_nodes import CapnpType, EnumValue, FieldDefinition, SchemaDefinition, TypeKind
from .type_ids import resolve_type_id
from .type_mapper import TypeMapper

logger = logging.getLogger(__name__)


class TypeAnalyzer:
    """Analyzes a host type and builds its SchemaDefinition."""

    def __init__(
        self,
        provider: TypeMetadataProvider | None = None,
        config: SchemaGeneratorConfig | None = None,
    ):
        """
        Initialize the analyzer.

        Args:
            provider: Source of type metadata (defaults to Python introspection)
            config: Schema generation configuration
        """
        self.provider = provider or PythonTypeProvider()
        self.config = config or SchemaGeneratorConfig()
        self.type_mapper = TypeMapper(self.provider)

    def analyze(self, host_type: Any) -> SchemaDefinition:
        """
        Analyze a host type.

        Args:
            host_type: An enum, an interface shape or a serializable record

        Returns:
            The schema model of the type

        Raises:
            NullInputError: If host_type is None
            UnsupportedTypeKindError: If the type cannot be described as a schema
        """
        if host_type is None:
            raise NullInputError("No type given to analyze")

        definition = SchemaDefinition(
            name=self.provider.name_of(host_type),
            namespace=self.provider.namespace_of(host_type),
            type_id=resolve_type_id(self.provider, host_type),
        )

        kind = self.provider.kind_of(host_type)
        if kind is HostTypeKind.ENUM:
            definition.kind = TypeKind.ENUM
            self._analyze_enum(host_type, definition)
        elif kind is HostTypeKind.INTERFACE:
            definition.kind = TypeKind.INTERFACE
            self._analyze_interface(host_type, definition)
        elif kind is HostTypeKind.RECORD and self.provider.is_serializable_record(host_type):
            definition.kind = TypeKind.STRUCT
            self._analyze_struct(host_type, definition)
        else:
            raise UnsupportedTypeKindError(definition.name)

        logger.debug("Analyzed %s as %s @0x%X", definition.name, definition.kind.value, definition.type_id)
        return definition

    def _analyze_enum(self, host_type: Any, definition: SchemaDefinition) -> None:
        for name, ordinal in self.provider.enum_members_of(host_type):
            definition.enum_values.append(EnumValue(name=name, value=ordinal))

    def _analyze_interface(self, host_type: Any, definition: SchemaDefinition) -> None:
        # Method signatures are not modeled: each method is a nullary, void slot
        for method_name in self.provider.methods_of(host_type):
            definition.fields.append(
                FieldDefinition(
                    name=method_name,
                    index=len(definition.fields),
                    type=CapnpType(kind=TypeKind.VOID),
                )
            )

    def _analyze_struct(self, host_type: Any, definition: SchemaDefinition) -> None:
        ignored = set(self.config.global_ignore_fields)
        field_index = 0

        for member in self.provider.members_of(host_type):
            if member.name in ignored:
                logger.debug("Ignoring %s.%s", definition.name, member.name)
                continue

            logger.debug("%s.%s (%s) @%d", definition.name, member.name, member.origin, field_index)
            definition.fields.append(
                FieldDefinition(
                    name=member.name,
                    index=field_index,
                    type=self.type_mapper.map_type(member.declared_type),
                    is_optional=member.is_nullable,
                )
            )
            field_index += 1
