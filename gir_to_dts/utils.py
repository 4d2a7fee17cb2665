"""
Utility functions for the GIR to TypeScript declaration generator.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text.replace("_", " ").replace("-", " "))


def snake_to_camel_case(text: str) -> str:
    """Convert snake_case or kebab-case text to camelCase.

    Examples:
        "get_label" -> "getLabel"
        "new_with_mnemonic" -> "newWithMnemonic"
        "show" -> "show"
        "get_n_items" -> "getNItems"

    Args:
        text: The text to convert

    Returns:
        camelCase string, or the input unchanged when it has no word characters
    """
    words = _split_into_words(text)
    if not words:
        return text
    head, *tail = words
    return head.lower() + "".join(word.capitalize() for word in tail)


def normalize_doc(text: str) -> str:
    """Turn literal ``\\x`` sequences into ``x`` and keep everything else."""
    return text.replace("\\x", "x")


def collapse_whitespace(text: str) -> str:
    """Join all runs of whitespace (newlines included) into single spaces."""
    return " ".join(text.split())


def escape_literal(value: str) -> str:
    """Escape a value for use inside a single-quoted string literal."""
    return value.replace("\\", "\\\\").replace("'", "\\'")
