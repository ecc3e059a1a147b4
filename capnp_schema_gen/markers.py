"""
Markers used to tag Python types for schema generation.

A record type opts into schema generation either by inheriting from
``CapnpSerializable`` or by being decorated with ``@capnp_struct``.
Any type can carry an explicit identity with ``@type_id``.
"""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T", bound=type)

SERIALIZABLE_ATTR = "__capnp_serializable__"
TYPE_ID_ATTR = "__capnp_type_id__"

MAX_TYPE_ID = (1 << 64) - 1


class CapnpSerializable:
    """Base class for records that can be described as a schema struct."""

    __capnp_serializable__ = True


def capnp_struct(cls: T) -> T:
    """Mark a class as a serializable record without changing its bases."""
    setattr(cls, SERIALIZABLE_ATTR, True)
    return cls


def type_id(value: int):
    """
    Attach an explicit 64-bit identity to a type.

    Args:
        value: Unsigned 64-bit identifier, e.g. ``0xDEADBEEF12345678``

    Returns:
        Class decorator storing the identity on the decorated type

    Raises:
        ValueError: If the value is not an unsigned 64-bit integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Type id must be an integer, got {type(value).__name__}")
    if value < 0 or value > MAX_TYPE_ID:
        raise ValueError(f"Type id 0x{value:X} does not fit in 64 unsigned bits")

    def decorator(cls: T) -> T:
        setattr(cls, TYPE_ID_ATTR, value)
        return cls

    return decorator
