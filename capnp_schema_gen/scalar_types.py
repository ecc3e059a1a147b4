"""
Fixed-width scalar aliases.

Python only has arbitrary-precision ``int`` and double-precision ``float``.
Annotate members with these aliases to select a narrower schema primitive::

    @dataclass
    class Packet(CapnpSerializable):
        flags: UInt8
        ratio: Float32
"""

from __future__ import annotations

from typing import NewType

Int8 = NewType("Int8", int)
UInt8 = NewType("UInt8", int)
Int16 = NewType("Int16", int)
UInt16 = NewType("UInt16", int)
Int32 = NewType("Int32", int)
UInt32 = NewType("UInt32", int)
Int64 = NewType("Int64", int)
UInt64 = NewType("UInt64", int)
Float32 = NewType("Float32", float)
Float64 = NewType("Float64", float)

__all__ = [
    "Int8",
    "UInt8",
    "Int16",
    "UInt16",
    "Int32",
    "UInt32",
    "Int64",
    "UInt64",
    "Float32",
    "Float64",
]
