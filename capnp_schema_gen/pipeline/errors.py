"""
Errors raised by the schema generation pipeline.
"""

from __future__ import annotations


class SchemaGenerationError(Exception):
    """Base class for all schema generation errors."""

    pass


class NullInputError(SchemaGenerationError):
    """Raised when no type is handed to the analyzer."""

    pass


class UnsupportedTypeKindError(SchemaGenerationError):
    """Raised when a type is neither an enum, an interface shape nor a serializable record.

    Attributes:
        type_name: Name of the offending type
    """

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(
            f"Type {type_name} is not supported for capnp schema generation. "
            "Supported types are: enums, protocols, and classes marked as CapnpSerializable."
        )


class SchemaWriteError(SchemaGenerationError):
    """Raised when generated schema text fails validation before being written."""

    pass


class TypeLoadError(SchemaGenerationError):
    """Raised when a ``module:Qualname`` type path cannot be resolved."""

    pass
