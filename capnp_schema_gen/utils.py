"""
Utility functions for the schema generator.
"""

import importlib
from typing import Any

from .pipeline.errors import TypeLoadError


def load_type(type_path: str) -> Any:
    """Resolve a "package.module:Qualname" path to the object it names.

    Examples:
        "app.models:Person" -> Person
        "app.models:Outer.Inner" -> Outer.Inner

    Args:
        type_path: Module path and qualified name separated by a colon

    Returns:
        The resolved object

    Raises:
        TypeLoadError: If the module cannot be imported or the name does not exist
    """
    module_name, sep, qualname = type_path.partition(":")
    if not sep or not module_name or not qualname:
        raise TypeLoadError(f"Expected 'module:Qualname', got '{type_path}'")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise TypeLoadError(f"Cannot import module '{module_name}': {e}") from e

    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TypeLoadError(f"'{module_name}' has no attribute '{qualname}'") from e
    return obj
