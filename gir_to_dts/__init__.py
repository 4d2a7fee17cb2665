"""GIR to TypeScript Declaration Generator

A Python package for generating TypeScript declaration modules (`.d.ts`)
from GObject Introspection Repository (GIR) files.
"""

__version__ = "0.1.0"

from .pipeline import (
    CompileResult,
    ExtractionSkip,
    GeneratorConfig,
    NamespaceCompiler,
    StructuralError,
    compile_gir,
    compile_namespace,
)

__all__ = [
    "NamespaceCompiler",
    "GeneratorConfig",
    "CompileResult",
    "StructuralError",
    "ExtractionSkip",
    "compile_gir",
    "compile_namespace",
]
