"""
Schema generator tying the pipeline phases together.

1. Phase 1 (Analyzer): host type -> SchemaDefinition
2. Phase 2 (Backend): SchemaDefinition -> schema text
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from ..cli_utils import reconstruct_command_line
from .analyzer.analyzer import TypeAnalyzer
from .analyzer.schema_nodes import SchemaDefinition
from .backends.capnp_backend import CapnpBackend
from .config import SchemaGeneratorConfig
from .errors import SchemaGenerationError
from .providers.base import TypeMetadataProvider
from .providers.python_provider import PythonTypeProvider

logger = logging.getLogger(__name__)


class SchemaGenerator:
    """Generates Cap'n Proto schema text from host types."""

    def __init__(
        self,
        config: SchemaGeneratorConfig | None = None,
        provider: TypeMetadataProvider | None = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Schema generation configuration
            provider: Source of type metadata (defaults to Python introspection)
        """
        self.config = config or SchemaGeneratorConfig()
        self.provider = provider or PythonTypeProvider()
        self.analyzer = TypeAnalyzer(self.provider, self.config)
        self.backend = CapnpBackend(self.config)

    def analyze(self, host_type: Any) -> SchemaDefinition:
        """Build the schema model of a host type."""
        return self.analyzer.analyze(host_type)

    def render(self, definition: SchemaDefinition) -> str:
        """Render a schema model as text."""
        return self.backend.generate(definition, generation_comment=self._generate_command_comment())

    def generate(self, host_type: Any) -> str:
        """Analyze and render a host type."""
        return self.render(self.analyze(host_type))

    def generate_many(
        self,
        host_types: Iterable[Any],
        on_error: Callable[[Any, SchemaGenerationError], None] | None = None,
    ) -> str:
        """
        Render several host types, separated by a blank line.

        Args:
            host_types: Types to render, in output order
            on_error: Called with the type and its error instead of raising;
                the failing type is left out of the output

        Raises:
            SchemaGenerationError: On the first failing type when on_error is None
        """
        blocks = []
        for host_type in host_types:
            logger.info("Generating schema for %r", host_type)
            try:
                blocks.append(self.generate(host_type))
            except SchemaGenerationError as e:
                if on_error is None:
                    raise
                on_error(host_type, e)
        return "\n".join(blocks)

    def _generate_command_comment(self) -> str:
        """Generate the header comment text, empty when disabled."""
        if not self.config.add_generation_comment:
            return ""

        from .. import __version__

        try:
            from ..capnp_schema_gen import capnp_schema_gen as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "capnp_schema_gen"

        return f"Generated by capnp_schema_gen v{__version__} : {command_line}"


def generate_schema(host_type: Any, config: SchemaGeneratorConfig | None = None) -> SchemaDefinition:
    """Build the schema model of a host type with the default provider."""
    return SchemaGenerator(config).analyze(host_type)


def generate_schema_text(source: Any, config: SchemaGeneratorConfig | None = None) -> str:
    """
    Generate schema text.

    Args:
        source: A host type, or an already analyzed SchemaDefinition
        config: Schema generation configuration

    Returns:
        Cap'n Proto schema text
    """
    generator = SchemaGenerator(config)
    if isinstance(source, SchemaDefinition):
        return generator.render(source)
    return generator.generate(source)
