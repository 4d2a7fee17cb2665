"""
Pipeline - GIR to TypeScript declaration generator.

This module provides a multi-phase architecture for turning a GObject
Introspection Repository into a `.d.ts` module:

1. Phase 1 (GIR AST): Parse GIR XML and expose an element view
2. Phase 2 (Analyzer): Map types, sanitize names, extract signatures
3. Phase 3 (Backend): Render declarations through jinja2 templates
4. Phase 4 (Class graph): Order classes so local parents come first
5. Phase 5 (Generator): Assemble imports, functions, constants and classes
"""

from __future__ import annotations

from .config import GeneratorConfig
from .errors import ExtractionSkip, StructuralError
from .generator import CompileResult, NamespaceCompiler, compile_gir, compile_namespace

__all__ = [
    "GeneratorConfig",
    "StructuralError",
    "ExtractionSkip",
    "CompileResult",
    "NamespaceCompiler",
    "compile_gir",
    "compile_namespace",
]
