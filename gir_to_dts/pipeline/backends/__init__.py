"""
Declaration backends.

Contains language-specific declaration emitters.
"""

from __future__ import annotations

from .base import CONSTRUCTOR_NAME, DeclarationBackend, indent
from .typescript_backend import VOID_TYPE, TypeScriptBackend

__all__ = [
    "DeclarationBackend",
    "TypeScriptBackend",
    "CONSTRUCTOR_NAME",
    "VOID_TYPE",
    "indent",
]
