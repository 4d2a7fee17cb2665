"""
Namespace compiler.

Walks the children of a GIR <namespace> in document order. Functions and
constants are rendered immediately; classes, interfaces and enums go to
the class graph, which orders them once the walk is done.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .. import __version__
from ..logging import get_logger
from .analyzer.class_graph import ClassGraph, extract_class, extract_enum
from .analyzer.signature import extract_signature, get_docstring, resolve_type
from .backends import TypeScriptBackend
from .config import GeneratorConfig
from .errors import ExtractionSkip
from .gir_ast.element import GirElement, find_namespace, include_versions, parse_gir

logger = get_logger("generator")

CLASS_KINDS = ("class", "interface")
ENUM_KINDS = ("enumeration", "bitfield")
FUNCTION_MODIFIERS = ["export", "function"]


@dataclass
class CompileResult:
    """The compiled declaration module of one namespace."""

    namespace: str = ""
    version: str = ""
    text: str = ""

    # Foreign namespaces imported by the module
    imports: list[str] = field(default_factory=list)

    # Classes emitted without an ordering guarantee
    stalled: list[str] = field(default_factory=list)


class NamespaceCompiler:
    """Compiles one GIR namespace into TypeScript declarations."""

    def __init__(self, config: GeneratorConfig | None = None, include_versions: dict[str, str] | None = None):
        """
        Initialize the compiler.

        Args:
            config: Generation configuration
            include_versions: Versions of included namespaces, used in imports
        """
        self.config = config or GeneratorConfig()
        self.include_versions = include_versions or {}
        self.backend = TypeScriptBackend(self.config)

    def compile(self, namespace: GirElement) -> CompileResult:
        """
        Compile a <namespace> element.

        Args:
            namespace: The namespace element

        Returns:
            CompileResult with the declaration text
        """
        namespace_name = namespace.attr("name") or ""
        namespace_version = namespace.attr("version") or ""

        blocks: list[str] = []
        graph = ClassGraph()

        for element in namespace.child_nodes():
            kind = element.name()
            try:
                if kind in CLASS_KINDS:
                    graph.add(extract_class(element, self.backend))
                elif kind in ENUM_KINDS:
                    graph.add(extract_enum(element, self.backend))
                elif kind == "function":
                    blocks.append(self._compile_function(element))
                elif kind == "constant":
                    blocks.append(self._compile_constant(element))
                else:
                    logger.debug("Ignoring <%s> in namespace %s", kind, namespace_name)
            except ExtractionSkip as e:
                logger.debug("Skipping element of namespace %s: %s", namespace_name, e)

        ordered = graph.order()
        blocks.extend(ordered.blocks)

        imports = [(name, self.include_versions.get(name, self.config.default_import_version)) for name in ordered.imports]
        prefix = self.backend.render_prefix(self._generation_comment(namespace_name, namespace_version), imports)
        if prefix:
            blocks.insert(0, prefix)

        return CompileResult(
            namespace=namespace_name,
            version=namespace_version,
            text="\n\n".join(blocks) + "\n",
            imports=ordered.imports,
            stalled=ordered.stalled,
        )

    def _compile_function(self, element: GirElement) -> str:
        params, return_type = extract_signature(element)
        return self.backend.render_callable(
            element.required_attr("name"),
            params,
            return_type,
            0,
            get_docstring(element),
            FUNCTION_MODIFIERS,
        )

    def _compile_constant(self, element: GirElement) -> str:
        name = element.required_attr("name")
        if name[:1].isdigit():
            name = "_" + name
        return self.backend.render_constant(name, element.attr("value"), resolve_type(element))

    def _generation_comment(self, namespace_name: str, namespace_version: str) -> str:
        if not self.config.add_generation_comment:
            return ""
        return f"Generated by gir_to_dts {__version__} from {namespace_name}-{namespace_version}.gir"


def compile_namespace(namespace: GirElement, config: GeneratorConfig | None = None) -> str:
    """Compile a namespace element and return only the declaration text."""
    return NamespaceCompiler(config).compile(namespace).text


def compile_gir(text: str, config: GeneratorConfig | None = None) -> CompileResult:
    """
    Compile a whole GIR document.

    Args:
        text: GIR XML text
        config: Generation configuration

    Returns:
        CompileResult of the document's namespace

    Raises:
        StructuralError: If the document has no repository or namespace
    """
    repository = parse_gir(text)
    namespace = find_namespace(repository)
    return NamespaceCompiler(config, include_versions(repository)).compile(namespace)
