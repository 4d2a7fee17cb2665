"""Tests for parameter and return type extraction."""

from __future__ import annotations

from gir_to_dts.pipeline.analyzer.signature import (
    extract_parameters,
    extract_return_type,
    extract_signature,
    get_docstring,
    resolve_type,
)
from gir_to_dts.pipeline.gir_ast.nodes import Parameter, ReturnType

from .helpers import element


def callable_xml(parameters: str = "", return_value: str = "", name: str = "do_it") -> str:
    return f'<function name="{name}">{return_value}<parameters>{parameters}</parameters></function>'


class TestParameters:
    """Test class for extract_parameters"""

    def test_instance_parameter_is_skipped(self):
        node = element(
            callable_xml(
                '<instance-parameter name="self"><type name="Widget"/></instance-parameter>'
                '<parameter name="width"><type name="gint"/></parameter>'
            )
        )
        assert extract_parameters(node) == [Parameter(name="width", type="number", doc=None)]

    def test_types_and_docs(self):
        node = element(
            callable_xml(
                '<parameter name="label"><doc xml:space="preserve">the  new\n   label\\x20text</doc>'
                '<type name="const gchar*"/></parameter>'
            )
        )
        [param] = extract_parameters(node)
        assert param.type == "string"
        assert param.doc == "the new labelx20text"
        assert "\\x" not in param.doc

    def test_reserved_names_are_prefixed(self):
        node = element(callable_xml('<parameter name="function"><type name="gint"/></parameter>'))
        assert [p.name for p in extract_parameters(node)] == ["_function"]

    def test_varargs_become_spread_parameter(self):
        node = element(
            callable_xml(
                '<parameter name="format"><type name="utf8"/></parameter>'
                '<parameter name="..."><varargs/></parameter>'
            )
        )
        params = extract_parameters(node)
        assert [p.name for p in params] == ["format", "...other"]
        assert params[1].type == "any[]"
        assert params[1].doc is None

    def test_spread_parameter_keeps_doc(self):
        node = element(
            callable_xml(
                '<parameter name="..."><doc xml:space="preserve">the parameters to insert\n  '
                "into the format string</doc><varargs/></parameter>"
            )
        )
        assert extract_parameters(node) == [
            Parameter(name="...other", type="any[]", doc="the parameters to insert into the format string")
        ]

    def test_duplicate_names_keep_first_occurrence(self):
        node = element(
            callable_xml(
                '<parameter name="a"><type name="gint"/></parameter>'
                '<parameter name="b"><type name="utf8"/></parameter>'
                '<parameter name="a"><type name="utf8"/></parameter>'
                '<parameter name="c"><type name="gboolean"/></parameter>'
                '<parameter name="b"><type name="gint"/></parameter>'
            )
        )
        params = extract_parameters(node)
        assert [p.name for p in params] == ["a", "b", "c"]
        assert [p.type for p in params] == ["number", "string", "boolean"]

    def test_malformed_parameter_is_skipped_alone(self):
        node = element(
            callable_xml(
                '<parameter><type name="gint"/></parameter>'
                '<parameter name="ok"><type name="gint"/></parameter>'
            )
        )
        assert [p.name for p in extract_parameters(node)] == ["ok"]

    def test_no_parameters_element(self):
        assert extract_parameters(element('<function name="f"/>')) == []


class TestTypeResolution:
    """Test class for resolve_type"""

    def test_array_of_strings(self):
        node = element('<parameter name="names"><array c:type="gchar**"><type name="utf8"/></array></parameter>')
        assert resolve_type(node) == "string[]"

    def test_type_without_name_is_any(self):
        node = element('<parameter name="data"><type c:type="gpointer"/></parameter>')
        assert resolve_type(node) == "any"

    def test_missing_type_is_any(self):
        assert resolve_type(element('<parameter name="data"/>')) == "any"


class TestReturnType:
    """Test class for extract_return_type"""

    def test_absent_return_value_is_null_sentinel(self):
        assert extract_return_type(element('<function name="f"/>')) == ReturnType(type="null", doc=None)

    def test_return_type_and_doc(self):
        node = element(
            callable_xml(
                return_value='<return-value><doc xml:space="preserve">the\nlabel</doc><type name="utf8"/></return-value>'
            )
        )
        assert extract_return_type(node) == ReturnType(type="string", doc="the label")

    def test_none_return(self):
        node = element(callable_xml(return_value='<return-value><type name="none"/></return-value>'))
        return_type = extract_return_type(node)
        assert return_type.type == "null"
        assert return_type.is_void

    def test_unknown_return_type_is_any(self):
        node = element(callable_xml(return_value='<return-value><type name="Gtk.Widget"/></return-value>'))
        assert extract_return_type(node).type == "any"


class TestSignature:
    """Test class for extract_signature and get_docstring"""

    def test_signature_combines_parameters_and_return(self):
        node = element(
            callable_xml(
                '<parameter name="x"><type name="gdouble"/></parameter>',
                '<return-value><type name="gboolean"/></return-value>',
            )
        )
        params, return_type = extract_signature(node)
        assert params == [Parameter(name="x", type="number", doc=None)]
        assert return_type.type == "boolean"

    def test_docstring_keeps_lines(self):
        node = element('<function name="f"><doc xml:space="preserve">First line.\nSecond \\x41 line.</doc></function>')
        assert get_docstring(node) == "First line.\nSecond x41 line."

    def test_missing_docstring_is_empty(self):
        assert get_docstring(element('<function name="f"/>')) == ""
