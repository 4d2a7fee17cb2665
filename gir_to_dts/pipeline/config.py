"""
Configuration for the GIR declaration pipeline.

A single value object threaded through the backend and the namespace
compiler; nothing reads process-wide state.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GeneratorConfig:
    """Configuration options for declaration generation."""

    # Emit /** ... */ blocks with docstrings, @param and @returns lines
    documentation: bool = True

    # Add a "Generated by" comment at the top of each file
    add_generation_comment: bool = True

    # Version used in imports when the repository has no matching <include>
    default_import_version: str = "3.0"

    # Convert snake_case callable names to camelCase
    camel_case_methods: bool = False

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "documentation": self.documentation,
            "add_generation_comment": self.add_generation_comment,
            "default_import_version": self.default_import_version,
            "camel_case_methods": self.camel_case_methods,
        }
