"""
Cap'n Proto schema backend.

Renders a SchemaDefinition as Cap'n Proto IDL text.
"""

from __future__ import annotations

from typing import Any

from ..analyzer.schema_nodes import CapnpType, SchemaDefinition, TypeKind
from .base import SchemaBackend


class CapnpBackend(SchemaBackend):
    """Cap'n Proto schema backend."""

    TEMPLATE_LANG = "capnp"
    FILE_EXTENSION = "capnp"

    def generate(self, definition: SchemaDefinition, generation_comment: str = "") -> str:
        """Render the definition. The same model always yields the same text."""
        namespace = definition.namespace if self.config.include_namespace else ""
        prefix = self.prefix_template.render(
            generation_comment=generation_comment,
            namespace=namespace,
        )

        template = self.definition_templates.get(definition.kind)
        if template is None:
            return prefix

        body = template.render(self._prepare_definition_context(definition))
        return prefix + body + "\n"

    def translate_type(self, capnp_type: CapnpType | None) -> str:
        """Translate a schema type to Cap'n Proto type syntax."""
        if capnp_type is None:
            return "Void"

        if capnp_type.kind == TypeKind.PRIMITIVE:
            return capnp_type.type_name.lower() if capnp_type.type_name else "void"

        if capnp_type.kind == TypeKind.TEXT:
            return "Text"

        if capnp_type.kind == TypeKind.DATA:
            return "Data"

        if capnp_type.kind == TypeKind.LIST:
            return f"List({self.translate_type(capnp_type.element_type)})"

        if capnp_type.kind in (TypeKind.STRUCT, TypeKind.ENUM):
            # Referenced type names keep their case
            return capnp_type.type_name or "Void"

        return "Void"

    def format_type_id(self, type_id: int) -> str:
        """0x-prefixed upper-case hex, no padding."""
        return f"0x{type_id:X}"

    def _prepare_definition_context(self, definition: SchemaDefinition) -> dict[str, Any]:
        """
        Prepare the template context for a definition.

        Member names are lower-cased, type names are not.
        """
        return {
            "name": definition.name,
            "type_id": self.format_type_id(definition.type_id),
            "fields": [
                {
                    "name": field.name.lower(),
                    "index": field.index,
                    "type_name": self.translate_type(field.type),
                    "optional": "?" if field.is_optional else "",
                }
                for field in definition.fields
            ],
            "enum_values": [{"name": value.name.lower(), "value": value.value} for value in definition.enum_values],
        }
