"""Tests for configuration and text helpers."""

from __future__ import annotations

from gir_to_dts.pipeline.config import GeneratorConfig
from gir_to_dts.utils import collapse_whitespace, escape_literal, normalize_doc, snake_to_camel_case


class TestGeneratorConfig:
    """Test class for GeneratorConfig"""

    def test_defaults(self):
        config = GeneratorConfig()
        assert config.documentation is True
        assert config.add_generation_comment is True
        assert config.default_import_version == "3.0"
        assert config.camel_case_methods is False

    def test_from_dict_ignores_unknown_keys(self):
        config = GeneratorConfig.from_dict({"documentation": False, "unknown": 1})
        assert config.documentation is False
        assert not hasattr(config, "unknown")

    def test_dict_round_trip(self):
        config = GeneratorConfig(documentation=False, default_import_version="4.0")
        assert GeneratorConfig.from_dict(config.to_dict()) == config

    def test_configs_are_independent(self):
        first = GeneratorConfig()
        first.documentation = False
        assert GeneratorConfig().documentation is True


class TestUtils:
    """Test class for text helpers"""

    def test_snake_to_camel_case(self):
        assert snake_to_camel_case("get_label") == "getLabel"
        assert snake_to_camel_case("new_with_mnemonic") == "newWithMnemonic"
        assert snake_to_camel_case("show") == "show"
        assert snake_to_camel_case("get_n_items") == "getNItems"
        assert snake_to_camel_case("...") == "..."

    def test_doc_helpers(self):
        assert normalize_doc("a \\x41 b") == "a x41 b"
        assert collapse_whitespace("  a\n\tb   c ") == "a b c"
        assert escape_literal("it's a\\b") == "it\\'s a\\\\b"
