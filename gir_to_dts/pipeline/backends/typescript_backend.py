"""
TypeScript declaration backend.

Renders extracted signatures, enums, classes and constants as `.d.ts`
declaration text.
"""

from __future__ import annotations

import re

from ...utils import escape_literal
from ..analyzer.sanitizer import is_reserved_identifier, sanitize_identifier
from ..gir_ast.nodes import Parameter, ReturnType, is_foreign
from .base import CONSTRUCTOR_NAME, DeclarationBackend, indent

VOID_TYPE = "void"

_NUMBER_LITERAL = re.compile(r"^-?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?$")


def _comment_safe(text: str) -> str:
    return text.replace("*/", "*\\/")


def doc_block(lines: list[str]) -> list[str]:
    """Wrap lines in a /** ... */ comment."""
    body = [f" * {_comment_safe(line)}".rstrip() for line in lines]
    return ["/**", *body, " */"]


def reference_name(name: str) -> str:
    """Name used to refer to a class: local names are sanitized like their declarations."""
    return name if is_foreign(name) else sanitize_identifier(name)


def docstring_lines(docstring: str) -> list[str]:
    """Split a docstring into lines, dropping leading and trailing blank lines."""
    text = docstring.strip()
    if not text:
        return []
    return [line.rstrip() for line in text.splitlines()]


class TypeScriptBackend(DeclarationBackend):
    """TypeScript `.d.ts` backend."""

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "d.ts"

    def render_callable(
        self,
        name: str,
        parameters: list[Parameter],
        return_type: ReturnType,
        depth: int = 0,
        docstring: str = "",
        modifiers: list[str] | None = None,
    ) -> str:
        name = self.callable_name(name)
        if is_reserved_identifier(name):
            name = "_" + name
        is_constructor = name == CONSTRUCTOR_NAME
        return_name = VOID_TYPE if return_type.is_void else return_type.type

        arglist = ", ".join(f"{param.name}: {param.type}" for param in parameters)
        signature = f"{name}({arglist})"
        if not is_constructor:
            signature += f": {return_name}"
        signature += ";"
        if modifiers:
            signature = " ".join([*modifiers, signature])

        if not self.config.documentation:
            return indent([signature], depth)[0]

        lines = docstring_lines(docstring)
        for param in parameters:
            lines.append(f"@param {{{param.type}}} {param.name}" + (f" {param.doc}" if param.doc else ""))
        if not is_constructor:
            lines.append(f"@returns {{{return_name}}}" + (f" {return_type.doc}" if return_type.doc else ""))

        content = doc_block(lines) if lines else []
        content.append(signature)
        return "\n".join(indent(content, depth))

    def render_enum(self, name: str, docstring: str, members: list[tuple[str, str]]) -> str:
        rendered = []
        seen: set[str] = set()
        for member_name, value in members:
            identifier = member_name.upper()
            if not identifier or identifier[0].isdigit():
                identifier = "_" + identifier
            if identifier in seen:
                continue
            seen.add(identifier)
            rendered.append({"name": identifier, "value": escape_literal(value)})

        return self.enum_template.render(
            doc_lines=self._doc_lines(docstring_lines(docstring)),
            name=sanitize_identifier(name),
            members=rendered,
        )

    def render_class(
        self,
        name: str,
        kind: str,
        docstring: str,
        members: list[str],
        base: str | None = None,
        interfaces: list[str] | None = None,
    ) -> str:
        lines = docstring_lines(docstring)
        lines.extend(f"@implements {{{reference_name(interface)}}}" for interface in interfaces or [])
        return self.class_template.render(
            doc_lines=self._doc_lines(lines),
            kind=kind,
            name=sanitize_identifier(name),
            base=reference_name(base) if base and kind == "class" else None,
            members=members,
        )

    def render_property(self, name: str, type_name: str, doc: str | None, writable: bool, depth: int = 1) -> str:
        name = sanitize_identifier(name.replace("-", "_"))
        declaration = f"{'' if writable else 'readonly '}{name}: {type_name};"
        content = doc_block([doc]) if self.config.documentation and doc else []
        content.append(declaration)
        return "\n".join(indent(content, depth))

    def render_constant(self, name: str, value: str | None, type_name: str) -> str:
        if value is None:
            literal = "null"
        elif type_name == "number" and _NUMBER_LITERAL.match(value):
            literal = value
        elif type_name == "boolean" and value in ("true", "false"):
            literal = value
        else:
            literal = f"'{escape_literal(value)}'"
        return f"export const {name} = {literal};"

    def render_prefix(self, generation_comment: str, imports: list[tuple[str, str]]) -> str:
        return self.prefix_template.render(generation_comment=generation_comment, imports=imports).rstrip("\n")

    def _doc_lines(self, lines: list[str]) -> list[str]:
        if not self.config.documentation or not lines:
            return []
        return doc_block(lines)
