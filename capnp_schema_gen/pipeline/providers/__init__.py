"""
Type-metadata providers.

Supply everything the analyzer needs to know about a host type.
"""

from __future__ import annotations

from .base import HostTypeKind, MemberInfo, ScalarKind, TypeMetadataProvider
from .python_provider import PythonTypeProvider

__all__ = [
    "TypeMetadataProvider",
    "PythonTypeProvider",
    "HostTypeKind",
    "ScalarKind",
    "MemberInfo",
]
