"""
Class graph builder and topological emitter.

Classes, interfaces and enums are collected as ClassRecords while the
namespace is walked, then written out so that every class comes after the
locally defined classes and interfaces it derives from. Parents from other
namespaces impose no order and become imports instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...logging import get_logger
from ..backends.base import CONSTRUCTOR_NAME, DeclarationBackend
from ..errors import ExtractionSkip
from ..gir_ast.element import GirElement
from ..gir_ast.nodes import ClassRecord, ReturnType, namespace_of
from .signature import extract_signature, get_docstring, resolve_type

logger = get_logger("class_graph")

CLASS_DEPTH = 1


def _render_constructors(node: GirElement, class_name: str, backend: DeclarationBackend) -> list[str]:
    """
    Render a <constructor> element.

    Only the constructor named "new" becomes the class `constructor(...)`.
    Every constructor is also exposed as a static factory returning the class.
    """
    constructor_name = node.required_attr("name")
    docstring = get_docstring(node)
    params, _ = extract_signature(node)
    return_type = ReturnType(type=class_name, doc=f"Instance of {class_name}.")

    rendered = []
    if constructor_name == "new":
        rendered.append(backend.render_callable(CONSTRUCTOR_NAME, params, return_type, CLASS_DEPTH, docstring))
    rendered.append(backend.render_callable(constructor_name, params, return_type, CLASS_DEPTH, docstring, ["static"]))
    return rendered


def _render_method(node: GirElement, backend: DeclarationBackend, modifiers: list[str] | None = None) -> str:
    params, return_type = extract_signature(node)
    return backend.render_callable(
        node.required_attr("name"),
        params,
        return_type,
        CLASS_DEPTH,
        get_docstring(node),
        modifiers,
    )


def _render_property(node: GirElement, backend: DeclarationBackend) -> str:
    doc = get_docstring(node)
    return backend.render_property(
        node.required_attr("name"),
        resolve_type(node),
        " ".join(doc.split()) or None,
        node.attr("writable") == "1",
        CLASS_DEPTH,
    )


def extract_class(element: GirElement, backend: DeclarationBackend) -> ClassRecord:
    """
    Build the record of a <class> or <interface> element.

    Args:
        element: The class or interface element
        backend: Backend used to render the declaration

    Returns:
        ClassRecord with parents in order: native base, implemented
        interfaces, interface prerequisites

    Raises:
        ExtractionSkip: If the element has no name
    """
    class_name = element.required_attr("name")
    kind = "interface" if element.name() == "interface" else "class"

    base = element.attr("parent")
    interfaces = [name for name in (node.attr("name") for node in element.find("implements")) if name]
    prerequisites = [name for name in (node.attr("name") for node in element.find("prerequisite")) if name]
    parents = ([base] if base else []) + interfaces + prerequisites

    properties: list[str] = []
    constructors: list[str] = []
    functions: list[str] = []
    methods: list[str] = []
    for node in element.child_nodes():
        node_kind = node.name()
        try:
            if node_kind == "property":
                properties.append(_render_property(node, backend))
            elif node_kind in ("method", "virtual-method"):
                methods.append(_render_method(node, backend))
            elif kind == "interface" and node_kind in ("constructor", "function"):
                # TypeScript interfaces cannot declare constructors or static members
                logger.debug("Skipping %r on interface %s", node, class_name)
            elif node_kind == "constructor":
                constructors.extend(_render_constructors(node, class_name, backend))
            elif node_kind == "function":
                functions.append(_render_method(node, backend, ["static"]))
        except ExtractionSkip as e:
            logger.debug("Skipping member of %s: %s", class_name, e)

    contents = backend.render_class(
        class_name,
        kind,
        get_docstring(element),
        properties + constructors + functions + methods,
        base=base,
        interfaces=interfaces,
    )
    return ClassRecord(name=class_name, parents=parents, contents=contents)


def extract_enum(element: GirElement, backend: DeclarationBackend) -> ClassRecord:
    """Build the record of an <enumeration> or <bitfield> element."""
    enum_name = element.required_attr("name")

    members = []
    for member in element.find("member"):
        try:
            members.append((member.required_attr("name"), member.required_attr("value")))
        except ExtractionSkip as e:
            logger.debug("Skipping member of enum %s: %s", enum_name, e)

    contents = backend.render_enum(enum_name, get_docstring(element), members)
    return ClassRecord(name=enum_name, parents=[], contents=contents)


@dataclass
class OrderedClasses:
    """Result of ordering a class registry."""

    # Rendered declarations, parents before children
    blocks: list[str] = field(default_factory=list)

    # Foreign namespaces referenced as parents, in first-use order
    imports: list[str] = field(default_factory=list)

    # Classes that could not be ordered (cycles or undefined local parents)
    stalled: list[str] = field(default_factory=list)


class ClassGraph:
    """Registry of class records, consumed once by order()."""

    def __init__(self):
        self.records: list[ClassRecord] = []

    def __len__(self) -> int:
        return len(self.records)

    def add(self, record: ClassRecord) -> None:
        self.records.append(record)

    def order(self) -> OrderedClasses:
        """
        Order the registry so local parents are always written first.

        Each pass writes every pending record whose local parents are all
        written. A pass that writes nothing means the rest depend on a cycle
        or on a parent this namespace never defines: those records are
        written in registry order and reported in `stalled`.

        Returns:
            OrderedClasses with blocks, imports and stalled class names
        """
        result = OrderedClasses()
        written: set[str] = set()
        imports: dict[str, None] = {}

        def write(record: ClassRecord) -> None:
            result.blocks.append(record.contents)
            written.add(record.name)
            for parent in record.foreign_parents:
                imports.setdefault(namespace_of(parent))

        pending = list(self.records)
        while pending:
            remaining = []
            for record in pending:
                if all(parent in written for parent in record.local_parents):
                    write(record)
                else:
                    remaining.append(record)

            if len(remaining) == len(pending):
                result.stalled = [record.name for record in remaining]
                logger.warning(
                    "Could not order %d class(es), emitting them unordered: %s",
                    len(remaining),
                    ", ".join(result.stalled),
                )
                for record in remaining:
                    write(record)
                break

            pending = remaining

        result.imports = list(imports)
        return result
