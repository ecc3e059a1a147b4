"""Python types to Cap'n Proto schema generator

A Python package for deriving Cap'n Proto schema text from enums,
protocols and serializable record classes defined in application code.
"""

import logging

__version__ = "1.0.0"

from .markers import CapnpSerializable, capnp_struct, type_id
from .pipeline import (
    AtomicWriter,
    NullInputError,
    OutputConfig,
    OutputMode,
    SchemaGenerationError,
    SchemaGenerator,
    SchemaGeneratorConfig,
    UnsupportedTypeKindError,
    generate_schema,
    generate_schema_text,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SchemaGenerator",
    "SchemaGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "SchemaGenerationError",
    "NullInputError",
    "UnsupportedTypeKindError",
    "AtomicWriter",
    "CapnpSerializable",
    "capnp_struct",
    "type_id",
    "generate_schema",
    "generate_schema_text",
]
