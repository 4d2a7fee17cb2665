"""
Native GObject type to TypeScript type mapping.
"""

from __future__ import annotations

from ..gir_ast.nodes import ANY_TYPE, NULL_SENTINEL

TYPE_MAP = {
    "gboolean": "boolean",
    "gint": "number",
    "guint": "number",
    "gint8": "number",
    "guint8": "number",
    "gint16": "number",
    "guint16": "number",
    "gint32": "number",
    "guint32": "number",
    "gint64": "number",
    "guint64": "number",
    "gshort": "number",
    "gushort": "number",
    "glong": "number",
    "gulong": "number",
    "glong64": "number",
    "gulong64": "number",
    "gsize": "number",
    "gssize": "number",
    "gfloat": "number",
    "gdouble": "number",
    "gunichar": "number",
    "gchar": "string",
    "guchar": "string",
    "gchar*": "string",
    "guchar*": "string",
    "utf8": "string",
    "filename": "string",
    "string": "string",
    "GString": "string",
    "none": NULL_SENTINEL,
}

_CONST_QUALIFIER = "const "


def map_type(native_type: str) -> str:
    """
    Return the TypeScript type for a native type name.

    A leading "const " qualifier is ignored. Names missing from TYPE_MAP
    map to "any".
    """
    name = native_type.strip()
    if name.startswith(_CONST_QUALIFIER):
        name = name[len(_CONST_QUALIFIER) :].strip()
    return TYPE_MAP.get(name, ANY_TYPE)
