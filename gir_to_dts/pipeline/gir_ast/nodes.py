"""
Value nodes extracted from GIR elements.

These are created once per XML node during the extraction pass and are
not modified after they have been added to the class registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Return type meaning "no value"; rendered as the target void type
NULL_SENTINEL = "null"

# Type used for anything the type table does not know
ANY_TYPE = "any"


@dataclass(frozen=True)
class Parameter:
    """A callable parameter."""

    name: str = ""  # Sanitized identifier ("...other" for varargs)
    type: str = ANY_TYPE  # Resolved TypeScript type
    doc: str | None = None


@dataclass(frozen=True)
class ReturnType:
    """A callable return value."""

    type: str = NULL_SENTINEL
    doc: str | None = None

    @property
    def is_void(self) -> bool:
        return self.type == NULL_SENTINEL


@dataclass(frozen=True)
class ClassRecord:
    """A class, interface or enum waiting to be emitted."""

    name: str = ""

    # Native base first, then implemented interfaces / prerequisites.
    # Names containing "." belong to another namespace.
    parents: list[str] = field(default_factory=list)

    # Fully rendered declaration text
    contents: str = ""

    @property
    def local_parents(self) -> list[str]:
        return [parent for parent in self.parents if not is_foreign(parent)]

    @property
    def foreign_parents(self) -> list[str]:
        return [parent for parent in self.parents if is_foreign(parent)]


def is_foreign(type_name: str) -> bool:
    """Whether a type name is qualified with another namespace ("Gtk.Widget")."""
    return "." in type_name


def namespace_of(type_name: str) -> str:
    """Namespace part of a qualified type name ("Gtk.Widget" -> "Gtk")."""
    return type_name.split(".", 1)[0]
