"""
Base class for schema emission backends.

Defines the interface that all schema backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ..analyzer.schema_nodes import CapnpType, SchemaDefinition, TypeKind
from ..config import SchemaGeneratorConfig


class SchemaBackend(ABC):
    """Abstract base class for schema emission backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    # One template per kind of top-level definition
    DEFINITION_KINDS: tuple[TypeKind, ...] = (TypeKind.STRUCT, TypeKind.ENUM, TypeKind.INTERFACE)

    def __init__(self, config: SchemaGeneratorConfig | None = None):
        """
        Initialize the backend.

        Args:
            config: Schema generation configuration
        """
        self.config = config or SchemaGeneratorConfig()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.definition_templates = {kind: self.jinja_env.get_template(f"{kind.value}.{self.FILE_EXTENSION}.jinja2") for kind in self.DEFINITION_KINDS}

    @abstractmethod
    def generate(self, definition: SchemaDefinition, generation_comment: str = "") -> str:
        """
        Render a schema definition.

        Args:
            definition: The analyzed type
            generation_comment: Optional header comment

        Returns:
            Schema text
        """

    @abstractmethod
    def translate_type(self, capnp_type: CapnpType) -> str:
        """
        Translate a schema type to its textual name.

        Args:
            capnp_type: The type reference

        Returns:
            Type name as written in the schema
        """
