"""
Base class for declaration backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ...utils import snake_to_camel_case
from ..config import GeneratorConfig
from ..gir_ast.nodes import Parameter, ReturnType

INDENT = "    "
CONSTRUCTOR_NAME = "constructor"


def indent(lines: list[str], depth: int) -> list[str]:
    """Indent lines by `depth` soft tabs of four spaces; blank lines stay blank."""
    prefix = INDENT * depth
    return [prefix + line if line else line for line in lines]


class DeclarationBackend(ABC):
    """Abstract base class for declaration backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension of generated modules
    FILE_EXTENSION: str = ""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")

    def callable_name(self, name: str) -> str:
        """Apply the configured naming convention to a callable name."""
        if self.config.camel_case_methods:
            return snake_to_camel_case(name)
        return name

    @abstractmethod
    def render_callable(
        self,
        name: str,
        parameters: list[Parameter],
        return_type: ReturnType,
        depth: int = 0,
        docstring: str = "",
        modifiers: list[str] | None = None,
    ) -> str:
        """
        Render a function or method declaration.

        Args:
            name: Callable name
            parameters: Extracted parameters
            return_type: Extracted return type
            depth: Indentation depth in soft tabs
            docstring: Callable documentation
            modifiers: Keywords placed before the name (e.g. "static")

        Returns:
            Declaration text
        """

    @abstractmethod
    def render_enum(self, name: str, docstring: str, members: list[tuple[str, str]]) -> str:
        """Render an enum from (member name, literal value) pairs."""

    @abstractmethod
    def render_class(
        self,
        name: str,
        kind: str,
        docstring: str,
        members: list[str],
        base: str | None = None,
        interfaces: list[str] | None = None,
    ) -> str:
        """Render a class or interface shell around already rendered members."""

    @abstractmethod
    def render_property(self, name: str, type_name: str, doc: str | None, writable: bool, depth: int = 1) -> str:
        """Render a property declaration."""

    @abstractmethod
    def render_constant(self, name: str, value: str | None, type_name: str) -> str:
        """Render a module-level constant."""

    @abstractmethod
    def render_prefix(self, generation_comment: str, imports: list[tuple[str, str]]) -> str:
        """Render the file header: generation comment and (namespace, version) imports."""
