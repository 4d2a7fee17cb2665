"""
Identifier sanitizer.

Decides whether a name can be used as a bare TypeScript binding. Names that
cannot are prefixed with an underscore by the callers.
"""

from __future__ import annotations

import re

# ECMAScript / TypeScript reserved words, strict-mode reserved words and
# literals that cannot be bound with `let <name> = ...`
TS_RESERVED_KEYWORDS = {
    "arguments",
    "await",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "eval",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "implements",
    "import",
    "in",
    "instanceof",
    "interface",
    "let",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "static",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
    "yield",
}

_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_reserved_identifier(word: object) -> bool:
    """
    Check whether a word cannot be used as a local variable name.

    Args:
        word: Candidate identifier

    Returns:
        True for reserved words and malformed identifiers (empty, leading
        digit, punctuation). Never raises; anything that is not a string
        counts as reserved.
    """
    if not isinstance(word, str):
        return True
    if word in TS_RESERVED_KEYWORDS:
        return True
    return _IDENTIFIER_PATTERN.match(word) is None


def sanitize_identifier(word: str) -> str:
    """Prefix a reserved or malformed identifier with an underscore."""
    if is_reserved_identifier(word):
        return "_" + word
    return word
