"""
Type-metadata provider backed by live Python classes.

Enumerations are ``enum.Enum`` subclasses, interface shapes are
``typing.Protocol`` subclasses, and records are classes marked with
``CapnpSerializable`` / ``@capnp_struct``.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import datetime
import enum
import inspect
import logging
import sys
import types
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin, get_type_hints

from ... import scalar_types
from ...markers import SERIALIZABLE_ATTR, TYPE_ID_ATTR
from .base import HostTypeKind, MemberInfo, ScalarKind, TypeMetadataProvider

logger = logging.getLogger(__name__)

NoneType = type(None)

SCALAR_TABLE: dict[Any, ScalarKind] = {
    bool: ScalarKind.BOOL,
    scalar_types.Int8: ScalarKind.INT8,
    scalar_types.UInt8: ScalarKind.UINT8,
    scalar_types.Int16: ScalarKind.INT16,
    scalar_types.UInt16: ScalarKind.UINT16,
    scalar_types.Int32: ScalarKind.INT32,
    scalar_types.UInt32: ScalarKind.UINT32,
    scalar_types.Int64: ScalarKind.INT64,
    scalar_types.UInt64: ScalarKind.UINT64,
    scalar_types.Float32: ScalarKind.FLOAT32,
    scalar_types.Float64: ScalarKind.FLOAT64,
    int: ScalarKind.INT64,
    float: ScalarKind.FLOAT64,
    str: ScalarKind.TEXT,
    bytes: ScalarKind.DATA,
    bytearray: ScalarKind.DATA,
    datetime.datetime: ScalarKind.TIMESTAMP,
    datetime.date: ScalarKind.TIMESTAMP,
    datetime.timedelta: ScalarKind.DURATION,
}

LIST_ORIGINS = (list, collections.abc.Sequence, collections.abc.MutableSequence)

UNION_ORIGINS = (Union, types.UnionType)

# Raised by typing while resolving a bad or dangling annotation
UNRESOLVED_HINT_ERRORS = (NameError, AttributeError, SyntaxError, TypeError)


def _strip_annotated(tp: Any) -> Any:
    """Annotated[T, ...] -> T"""
    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp


def _is_class(tp: Any) -> bool:
    # Parameterized generics such as list[int] are not classes
    return isinstance(tp, type) and get_origin(tp) is None


def _is_class_var(tp: Any) -> bool:
    tp = _strip_annotated(tp)
    return tp is ClassVar or get_origin(tp) is ClassVar


def _raw_annotations(obj: Any) -> dict[str, Any]:
    try:
        return dict(inspect.get_annotations(obj))
    except NameError:
        # Deferred annotations naming something undefined
        return {}


def _evaluate(name: str, annotation: Any, globalns: dict[str, Any], localns: dict[str, Any] | None) -> Any:
    """Resolve a single annotation, leaving it as is when it cannot be resolved."""
    if not isinstance(annotation, str):
        return annotation
    # A class holder keeps ClassVar legal, as it is on the real class
    holder = type("_AnnotationHolder", (), {"__annotations__": {name: annotation}})
    try:
        return get_type_hints(holder, globalns, localns, include_extras=True)[name]
    except UNRESOLVED_HINT_ERRORS:
        return annotation


class PythonTypeProvider(TypeMetadataProvider):
    """Answers metadata queries by introspecting Python classes."""

    def kind_of(self, host_type: Any) -> HostTypeKind:
        if not _is_class(host_type):
            return HostTypeKind.OTHER
        if issubclass(host_type, enum.Enum):
            return HostTypeKind.ENUM
        if getattr(host_type, "_is_protocol", False):
            return HostTypeKind.INTERFACE
        return HostTypeKind.RECORD

    def name_of(self, host_type: Any) -> str:
        return getattr(host_type, "__name__", None) or repr(host_type)

    def namespace_of(self, host_type: Any) -> str:
        return getattr(host_type, "__module__", None) or ""

    def full_name_of(self, host_type: Any) -> str:
        qualname = getattr(host_type, "__qualname__", None) or self.name_of(host_type)
        namespace = self.namespace_of(host_type)
        return f"{namespace}.{qualname}" if namespace else qualname

    def enum_members_of(self, host_type: Any) -> list[tuple[str, int]]:
        members = []
        for position, (name, member) in enumerate(host_type.__members__.items()):
            value = member.value
            if isinstance(value, int) and not isinstance(value, bool):
                ordinal = int(value)
            else:
                # Non-integer enums have no ordinal of their own
                logger.debug("%s.%s has non-integer value %r, using position %d", host_type.__name__, name, value, position)
                ordinal = position
            members.append((name, ordinal))
        return members

    def methods_of(self, host_type: Any) -> list[str]:
        return [name for name, value in vars(host_type).items() if not name.startswith("_") and inspect.isfunction(value)]

    def members_of(self, host_type: Any) -> list[MemberInfo]:
        attributes = self._class_attributes(host_type)
        return self._read_write_properties(host_type, attributes) + self._plain_fields(host_type, attributes)

    def explicit_identity_of(self, host_type: Any) -> int | None:
        if not _is_class(host_type):
            return None
        # Own namespace only: a subclass does not inherit its base's identity
        return vars(host_type).get(TYPE_ID_ATTR)

    def is_serializable_record(self, host_type: Any) -> bool:
        if not _is_class(host_type) or issubclass(host_type, enum.Enum):
            return False
        return bool(getattr(host_type, SERIALIZABLE_ATTR, False))

    def is_nullable(self, host_type: Any) -> bool:
        """Whether the type is ``T | None``."""
        tp = _strip_annotated(host_type)
        return get_origin(tp) in UNION_ORIGINS and NoneType in get_args(tp)

    def unwrap_nullable(self, host_type: Any) -> Any:
        tp = _strip_annotated(host_type)
        if not self.is_nullable(tp):
            return tp
        rest = tuple(arg for arg in get_args(tp) if arg is not NoneType)
        if len(rest) == 1:
            return _strip_annotated(rest[0])
        return Union[rest]

    def list_element_type(self, host_type: Any) -> Any | None:
        tp = _strip_annotated(host_type)
        origin = get_origin(tp)
        args = get_args(tp)
        if origin in LIST_ORIGINS and len(args) == 1:
            return args[0]
        # tuple[T, ...] is a homogeneous sequence
        if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        return None

    def scalar_kind(self, host_type: Any) -> ScalarKind | None:
        try:
            return SCALAR_TABLE.get(_strip_annotated(host_type))
        except TypeError:
            # Unhashable annotation objects are never scalars
            return None

    def _class_attributes(self, host_type: type) -> dict[str, Any]:
        """Merge class namespaces base-first, keeping the first declaration position."""
        attributes: dict[str, Any] = {}
        for klass in reversed(host_type.__mro__):
            if klass is object:
                continue
            attributes.update(vars(klass))
        return attributes

    def _read_write_properties(self, host_type: type, attributes: dict[str, Any]) -> list[MemberInfo]:
        members = []
        for name, value in attributes.items():
            if name.startswith("_") or not isinstance(value, property):
                continue
            if value.fget is None or value.fset is None:
                logger.debug("Skipping %s.%s: property is not read-write", host_type.__name__, name)
                continue
            declared = self._type_hints(value.fget).get("return", Any)
            members.append(MemberInfo(name=name, declared_type=declared, is_nullable=self.is_nullable(declared), origin="property"))
        return members

    def _plain_fields(self, host_type: type, attributes: dict[str, Any]) -> list[MemberInfo]:
        hints = self._type_hints(host_type)
        if dataclasses.is_dataclass(host_type):
            candidates = [(f.name, hints.get(f.name, f.type)) for f in dataclasses.fields(host_type)]
        else:
            candidates = [(name, tp) for name, tp in hints.items() if not _is_class_var(tp)]

        members = []
        for name, declared in candidates:
            if name.startswith("_") or isinstance(attributes.get(name), property):
                continue
            members.append(MemberInfo(name=name, declared_type=declared, is_nullable=self.is_nullable(declared), origin="field"))
        return members

    def _type_hints(self, obj: Any) -> dict[str, Any]:
        """Resolve annotations one by one when a forward reference cannot be resolved."""
        try:
            return get_type_hints(obj, include_extras=True)
        except UNRESOLVED_HINT_ERRORS as e:
            logger.debug("Could not resolve all annotations of %r: %s", obj, e)

        if not isinstance(obj, type):
            globalns = getattr(obj, "__globals__", {})
            return {name: _evaluate(name, annotation, globalns, None) for name, annotation in _raw_annotations(obj).items()}

        hints: dict[str, Any] = {}
        for klass in reversed(obj.__mro__):
            module = sys.modules.get(klass.__module__)
            globalns = vars(module) if module else {}
            localns = dict(vars(klass))
            for name, annotation in _raw_annotations(klass).items():
                hints[name] = _evaluate(name, annotation, globalns, localns)
        return hints
