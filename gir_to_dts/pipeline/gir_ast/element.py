"""
Element view over a parsed GIR document.

Phase 1 of the pipeline: parse GIR text with ElementTree and expose the
small element interface the analyzer needs (name, attributes, children,
documentation text).
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from ..errors import ExtractionSkip, StructuralError

GIR_XMLNS = "http://www.gtk.org/introspection/core/1.0"
C_XMLNS = "http://www.gtk.org/introspection/c/1.0"
GLIB_XMLNS = "http://www.gtk.org/introspection/glib/1.0"

# Namespace URI -> prefix used in reported names ("glib:signal", "c:type")
NAMESPACE_PREFIXES = {
    GIR_XMLNS: "",
    C_XMLNS: "c:",
    GLIB_XMLNS: "glib:",
}
_PREFIX_NAMESPACES = {prefix: uri for uri, prefix in NAMESPACE_PREFIXES.items() if prefix}


def _local_name(qualified: str) -> str:
    """Convert an ElementTree "{uri}local" name to "prefix:local"."""
    if not qualified.startswith("{"):
        return qualified
    uri, local = qualified[1:].split("}", 1)
    prefix = NAMESPACE_PREFIXES.get(uri)
    if prefix is None:
        return local
    return prefix + local


def _qualified_attr(name: str) -> str:
    """Convert "prefix:local" to the ElementTree attribute key."""
    prefix, sep, local = name.partition(":")
    if sep and prefix + ":" in _PREFIX_NAMESPACES:
        return f"{{{_PREFIX_NAMESPACES[prefix + ':']}}}{local}"
    return name


class GirElement:
    """Read-only view of one GIR XML element."""

    def __init__(self, element: ET.Element):
        self._element = element

    def __repr__(self) -> str:
        name = self.attr("name")
        return f"<GirElement {self.name()}{' ' + name if name else ''}>"

    def name(self) -> str:
        """Tag name without the core namespace ("class", "glib:signal")."""
        return _local_name(self._element.tag)

    def attr(self, name: str) -> str | None:
        """Value of an attribute, or None when it is absent."""
        return self._element.get(_qualified_attr(name))

    def required_attr(self, name: str) -> str:
        """Value of an attribute the caller cannot do without."""
        value = self.attr(name)
        if value is None:
            raise ExtractionSkip(self.name(), f"missing '{name}' attribute")
        return value

    def attrs(self) -> dict[str, str]:
        """All attributes keyed by their prefixed names."""
        return {_local_name(key): value for key, value in self._element.attrib.items()}

    def child_nodes(self) -> list[GirElement]:
        """Direct child elements in document order."""
        return [GirElement(child) for child in self._element]

    def child(self, name: str) -> GirElement | None:
        """First direct child with the given tag name."""
        for node in self.child_nodes():
            if node.name() == name:
                return node
        return None

    def find(self, tag: str, namespace: str = GIR_XMLNS) -> list[GirElement]:
        """Direct children matching a tag in the given XML namespace."""
        return [GirElement(child) for child in self._element.iterfind(f"{{{namespace}}}{tag}")]

    def text(self) -> str:
        """All text content of the element and its descendants."""
        return "".join(self._element.itertext())


def parse_gir(text: str) -> GirElement:
    """
    Parse GIR text and return its <repository> root.

    Args:
        text: The GIR document

    Returns:
        The repository element

    Raises:
        StructuralError: If the text is not XML or the root is not a repository
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise StructuralError(f"Malformed GIR document: {e}") from e

    repository = GirElement(root)
    if repository.name() != "repository":
        raise StructuralError("Cannot find repository.")
    return repository


def find_namespace(repository: GirElement) -> GirElement:
    """Return the single <namespace> element of a repository."""
    namespaces = repository.find("namespace")
    if not namespaces:
        raise StructuralError("Cannot find namespace.")
    return namespaces[0]


def include_versions(repository: GirElement) -> dict[str, str]:
    """Map each <include>d namespace to its version."""
    versions = {}
    for include in repository.find("include"):
        name = include.attr("name")
        version = include.attr("version")
        if name and version:
            versions[name] = version
    return versions
