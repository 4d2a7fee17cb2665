"""
GIR AST module.

Contains the element view over parsed GIR XML and the value nodes
extracted from it.
"""

from __future__ import annotations

from .element import GIR_XMLNS, GirElement, find_namespace, include_versions, parse_gir
from .nodes import ANY_TYPE, NULL_SENTINEL, ClassRecord, Parameter, ReturnType, is_foreign, namespace_of

__all__ = [
    "GIR_XMLNS",
    "GirElement",
    "parse_gir",
    "find_namespace",
    "include_versions",
    "ANY_TYPE",
    "NULL_SENTINEL",
    "Parameter",
    "ReturnType",
    "ClassRecord",
    "is_foreign",
    "namespace_of",
]
