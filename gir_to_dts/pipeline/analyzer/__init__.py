"""
Analyzer module.

Contains identifier sanitization, type mapping and signature extraction.
The class graph lives in `analyzer.class_graph` and is imported directly,
since it depends on the backends.
"""

from __future__ import annotations

from .sanitizer import TS_RESERVED_KEYWORDS, is_reserved_identifier, sanitize_identifier
from .signature import extract_parameters, extract_return_type, extract_signature, get_docstring, resolve_type
from .type_mapper import TYPE_MAP, map_type

__all__ = [
    "TS_RESERVED_KEYWORDS",
    "is_reserved_identifier",
    "sanitize_identifier",
    "TYPE_MAP",
    "map_type",
    "extract_parameters",
    "extract_return_type",
    "extract_signature",
    "get_docstring",
    "resolve_type",
]
