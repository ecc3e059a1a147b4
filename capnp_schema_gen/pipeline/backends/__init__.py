"""
Schema emission backends.
"""

from __future__ import annotations

from .base import SchemaBackend
from .capnp_backend import CapnpBackend

__all__ = [
    "SchemaBackend",
    "CapnpBackend",
]
