"""Helpers for building GIR elements from XML snippets."""

from __future__ import annotations

from pathlib import Path

from gir_to_dts.pipeline.gir_ast.element import C_XMLNS, GIR_XMLNS, GLIB_XMLNS, GirElement, parse_gir

TEST_DATA_DIR = Path(__file__).with_name("test_data")


def repository_xml(body: str, includes: dict[str, str] | None = None) -> str:
    """Wrap XML in a <repository> root declaring the GIR namespaces."""
    include_xml = "".join(f'<include name="{name}" version="{version}"/>' for name, version in (includes or {}).items())
    return (
        f'<repository version="1.2" xmlns="{GIR_XMLNS}" xmlns:c="{C_XMLNS}" xmlns:glib="{GLIB_XMLNS}">'
        f"{include_xml}{body}</repository>"
    )


def namespace_xml(body: str, name: str = "Test", includes: dict[str, str] | None = None) -> str:
    """A complete GIR document with one namespace."""
    return repository_xml(f'<namespace name="{name}" version="1.0">{body}</namespace>', includes)


def element(xml: str) -> GirElement:
    """Parse a single GIR element (plus children) written without namespace declarations."""
    return parse_gir(repository_xml(xml)).child_nodes()[0]
