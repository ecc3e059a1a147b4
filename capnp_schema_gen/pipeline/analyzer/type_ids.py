"""
Type identity resolution.

An explicit identity always wins. Otherwise the identity is derived from
the fully-qualified type name with a fixed hash, so the same name yields
the same identity in every process and on every interpreter.
"""

from __future__ import annotations

import hashlib
from typing import Any

from ..providers.base import TypeMetadataProvider

# Cap'n Proto identities always have the top bit set
TYPE_ID_HIGH_BIT = 1 << 63


def derive_type_id(full_name: str) -> int:
    """
    Derive a 64-bit identity from a fully-qualified type name.

    The first 8 bytes of a BLAKE2b digest of the UTF-8 name, read big-endian,
    with the top bit forced on. The result is never zero.

    Args:
        full_name: Fully-qualified type name, e.g. "app.models.Person"

    Returns:
        Unsigned 64-bit identity
    """
    digest = hashlib.blake2b(full_name.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "big") | TYPE_ID_HIGH_BIT


def resolve_type_id(provider: TypeMetadataProvider, host_type: Any) -> int:
    """Return the explicit identity of a type, or derive one from its full name."""
    explicit = provider.explicit_identity_of(host_type)
    if explicit is not None:
        return explicit
    return derive_type_id(provider.full_name_of(host_type))
