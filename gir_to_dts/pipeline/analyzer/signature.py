"""
Signature extraction for callable GIR nodes.

Works on <function>, <method>, <virtual-method> and <constructor>
elements and produces the parameter list and return type.
"""

from __future__ import annotations

from ...logging import get_logger
from ...utils import collapse_whitespace, normalize_doc
from ..errors import ExtractionSkip
from ..gir_ast.element import GirElement
from ..gir_ast.nodes import ANY_TYPE, NULL_SENTINEL, Parameter, ReturnType
from .sanitizer import sanitize_identifier
from .type_mapper import map_type

logger = get_logger("signature")

VARARGS_NAME = "..."
SPREAD_NAME = "...other"


def get_docstring(element: GirElement) -> str:
    """Text of the element's <doc> child, or an empty string."""
    doc = element.child("doc")
    if doc is None:
        return ""
    return normalize_doc(doc.text())


def _get_inline_doc(element: GirElement) -> str | None:
    doc = element.child("doc")
    if doc is None:
        return None
    return collapse_whitespace(normalize_doc(doc.text()))


def resolve_type(element: GirElement) -> str:
    """
    Resolve the TypeScript type declared by a parameter-like element.

    Looks at the first <type>, <array> or <varargs> child.
    """
    for node in element.child_nodes():
        kind = node.name()
        if kind == "type":
            native = node.attr("name")
            return map_type(native) if native is not None else ANY_TYPE
        if kind == "array":
            return f"{resolve_type(node)}[]"
        if kind == "varargs":
            return f"{ANY_TYPE}[]"
    return ANY_TYPE


def _extract_parameter(node: GirElement) -> Parameter:
    name = node.required_attr("name")
    if name == VARARGS_NAME:
        return Parameter(name=SPREAD_NAME, type=f"{ANY_TYPE}[]", doc=_get_inline_doc(node))
    return Parameter(
        name=sanitize_identifier(name),
        type=resolve_type(node),
        doc=_get_inline_doc(node),
    )


def extract_parameters(element: GirElement) -> list[Parameter]:
    """
    Extract the explicit parameters of a callable.

    The instance parameter is skipped. Parameters that cannot be read are
    dropped, and a name that was already seen keeps its first definition.

    Args:
        element: The callable element

    Returns:
        Parameters in declaration order
    """
    params: list[Parameter] = []
    seen: set[str] = set()

    parameters = element.child("parameters")
    if parameters is None:
        return params

    for node in parameters.child_nodes():
        if node.name() != "parameter":
            continue
        try:
            param = _extract_parameter(node)
        except ExtractionSkip as e:
            logger.debug("Skipping parameter of %r: %s", element, e)
            continue
        if param.name in seen:
            continue
        seen.add(param.name)
        params.append(param)

    return params


def extract_return_type(element: GirElement) -> ReturnType:
    """Extract the return type and its documentation."""
    return_value = element.child("return-value")
    if return_value is None:
        return ReturnType(type=NULL_SENTINEL, doc=None)

    doc = _get_inline_doc(return_value)
    for node in return_value.child_nodes():
        if node.name() in ("type", "array"):
            return ReturnType(type=resolve_type(return_value), doc=doc)
    return ReturnType(type=NULL_SENTINEL, doc=doc)


def extract_signature(element: GirElement) -> tuple[list[Parameter], ReturnType]:
    """Extract both the parameters and the return type of a callable."""
    return extract_parameters(element), extract_return_type(element)
