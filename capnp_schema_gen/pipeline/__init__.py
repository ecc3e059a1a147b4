"""
Pipeline - Python types to Cap'n Proto schema generator.

1. Phase 1 (Analyzer): Introspect a type through a metadata provider and
   build the schema model
2. Phase 2 (Backend): Render the schema model as schema text
3. Phase 3 (Writer): Optionally validate and write the text atomically
"""

from __future__ import annotations

from .config import OutputConfig, OutputMode, SchemaGeneratorConfig
from .errors import (
    NullInputError,
    SchemaGenerationError,
    SchemaWriteError,
    TypeLoadError,
    UnsupportedTypeKindError,
)
from .generator import SchemaGenerator, generate_schema, generate_schema_text
from .writer import AtomicWriter

__all__ = [
    "SchemaGenerator",
    "generate_schema",
    "generate_schema_text",
    "SchemaGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "SchemaGenerationError",
    "NullInputError",
    "UnsupportedTypeKindError",
    "SchemaWriteError",
    "TypeLoadError",
    "AtomicWriter",
]
