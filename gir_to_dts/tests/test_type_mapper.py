"""Tests for native to TypeScript type mapping."""

from __future__ import annotations

import pytest

from gir_to_dts.pipeline.analyzer.type_mapper import TYPE_MAP, map_type


class TestTypeMapper:
    """Test class for map_type"""

    @pytest.mark.parametrize("native", sorted(TYPE_MAP))
    def test_table_entries_map_to_table_value(self, native):
        assert map_type(native) == TYPE_MAP[native]

    @pytest.mark.parametrize(
        "native, expected",
        [
            ("gboolean", "boolean"),
            ("gint64", "number"),
            ("gdouble", "number"),
            ("utf8", "string"),
            ("gchar*", "string"),
            ("none", "null"),
        ],
    )
    def test_known_types(self, native, expected):
        assert map_type(native) == expected

    @pytest.mark.parametrize("native", ["Gtk.Widget", "gpointer", "GLib.List", "", "GINT", "const"])
    def test_unknown_types_map_to_any(self, native):
        assert map_type(native) == "any"

    def test_const_qualifier_is_stripped(self):
        """A leading const qualifier does not change the mapping"""
        assert map_type("const gchar*") == "string"
        assert map_type("const gint") == "number"
        assert map_type("const Foo") == "any"
