"""
Base class for type-metadata providers.

A provider answers every question the analyzer needs to ask about a host
type. The analyzer never introspects types itself, so a provider backed by
something other than live Python classes can be swapped in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any


class HostTypeKind(Enum):
    """Top-level classification of a host type."""

    ENUM = "enum"
    INTERFACE = "interface"
    RECORD = "record"  # Candidate record, serializability checked separately
    OTHER = "other"


class ScalarKind(Enum):
    """Scalar shapes a provider can recognize in a member type."""

    BOOL = "bool"
    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    TEXT = "text"
    DATA = "data"
    TIMESTAMP = "timestamp"
    DURATION = "duration"


@dataclass
class MemberInfo:
    """A record member as reported by a provider."""

    name: str = ""
    declared_type: Any = None
    is_nullable: bool = False
    origin: str = "field"  # "property" or "field"


class TypeMetadataProvider(ABC):
    """Abstract source of type metadata."""

    @abstractmethod
    def kind_of(self, host_type: Any) -> HostTypeKind:
        """
        Classify a host type.

        Args:
            host_type: The type handle

        Returns:
            ENUM, INTERFACE, RECORD for any other class, or OTHER
        """

    @abstractmethod
    def name_of(self, host_type: Any) -> str:
        """Simple name of the type."""

    @abstractmethod
    def namespace_of(self, host_type: Any) -> str:
        """Namespace of the type, empty when there is none."""

    @abstractmethod
    def full_name_of(self, host_type: Any) -> str:
        """Fully-qualified name, the input of identity derivation."""

    @abstractmethod
    def enum_members_of(self, host_type: Any) -> list[tuple[str, int]]:
        """
        List enumeration members.

        Returns:
            (name, ordinal) pairs in declaration order
        """

    @abstractmethod
    def methods_of(self, host_type: Any) -> list[str]:
        """
        List the public methods declared directly on an interface shape.

        Returns:
            Method names in declaration order
        """

    @abstractmethod
    def members_of(self, host_type: Any) -> list[MemberInfo]:
        """
        List the members of a record.

        Returns:
            Read-write properties followed by plain fields, each group in
            declaration order
        """

    @abstractmethod
    def explicit_identity_of(self, host_type: Any) -> int | None:
        """Explicit 64-bit identity attached to the type, if any."""

    @abstractmethod
    def is_serializable_record(self, host_type: Any) -> bool:
        """Whether the type declares itself a serializable record."""

    @abstractmethod
    def unwrap_nullable(self, host_type: Any) -> Any:
        """Return the underlying type of a nullable wrapper, or the type unchanged."""

    @abstractmethod
    def list_element_type(self, host_type: Any) -> Any | None:
        """Return the element type of a single-parameter ordered collection, else None."""

    @abstractmethod
    def scalar_kind(self, host_type: Any) -> ScalarKind | None:
        """Return the scalar shape of an exactly matching type, else None."""
