"""Tests for the template registry."""

import pytest

from promptcore.engine.registry import (
    PROMPT_KIND_DESCRIPTIONS,
    PromptKind,
    TemplateRegistry,
    UnknownPromptKindError,
    default_registry,
)
from promptcore.templates import BUILTIN_TEMPLATES, ENHANCE_TEMPLATE


@pytest.fixture
def registry():
    """Create the default registry."""
    return default_registry()


class TestResolve:
    """Tests for TemplateRegistry.resolve."""

    def test_resolves_builtin_by_string(self, registry):
        """Test a kind name resolves to the built-in template."""
        assert registry.resolve("ENHANCE") == ENHANCE_TEMPLATE

    def test_resolves_builtin_by_enum(self, registry):
        """Test enum members resolve the same as names."""
        assert registry.resolve(PromptKind.DEBUG) == BUILTIN_TEMPLATES["DEBUG"]

    def test_custom_template_wins_verbatim(self, registry):
        """Test an override replaces the built-in outright."""
        custom = {"ENHANCE": "Just do ${userInput}"}
        assert registry.resolve("ENHANCE", custom) == "Just do ${userInput}"

    def test_custom_for_other_kind_ignored(self, registry):
        """Test overrides for other kinds do not apply."""
        custom = {"DEBUG": "custom debug"}
        assert registry.resolve("ANALYZE", custom) == BUILTIN_TEMPLATES["ANALYZE"]

    def test_none_override_falls_back(self, registry):
        """Test a None override is treated as absent."""
        assert registry.resolve("TEST", {"TEST": None}) == BUILTIN_TEMPLATES["TEST"]

    def test_empty_string_override_is_used(self, registry):
        """Test an empty override still replaces the built-in."""
        assert registry.resolve("TEST", {"TEST": ""}) == ""

    def test_custom_only_kind(self, registry):
        """Test a kind known only to the overrides resolves."""
        assert registry.resolve("REVIEW", {"REVIEW": "review ${userInput}"}) == "review ${userInput}"

    def test_unknown_kind_raises(self, registry):
        """Test an unknown kind raises UnknownPromptKindError."""
        with pytest.raises(UnknownPromptKindError) as exc_info:
            registry.resolve("NOT_A_KIND")

        assert exc_info.value.kind == "NOT_A_KIND"
        assert "NOT_A_KIND" in str(exc_info.value)

    def test_kind_names_are_case_sensitive(self, registry):
        """Test lowercase names are not aliases."""
        with pytest.raises(UnknownPromptKindError):
            registry.resolve("enhance")


class TestListAndDescribe:
    """Tests for list_kinds and describe."""

    def test_list_kinds_in_order(self, registry):
        """Test kinds are listed in declaration order."""
        assert registry.list_kinds() == ["ENHANCE", "ANALYZE", "DEBUG", "OPTIMIZE", "DOCUMENT", "TEST"]

    def test_every_kind_has_description(self, registry):
        """Test each kind has a non-empty description."""
        for kind in registry.list_kinds():
            assert registry.describe(kind)

    def test_describe_matches_table(self, registry):
        """Test descriptions come from the static table."""
        assert registry.describe("DEBUG") == PROMPT_KIND_DESCRIPTIONS[PromptKind.DEBUG]

    def test_describe_unknown_raises(self, registry):
        """Test describing an unknown kind raises."""
        with pytest.raises(UnknownPromptKindError):
            registry.describe("NOPE")

    def test_contains(self, registry):
        """Test membership checks built-in kinds."""
        assert "OPTIMIZE" in registry
        assert "NOPE" not in registry


class TestRegistryIsReadOnly:
    """Tests for registry immutability."""

    def test_source_mapping_changes_do_not_leak(self):
        """Test the registry copies the templates it is given."""
        templates = {PromptKind.ENHANCE: "v1"}
        registry = TemplateRegistry(templates)
        templates[PromptKind.ENHANCE] = "v2"

        assert registry.resolve("ENHANCE") == "v1"

    def test_partial_registry_lists_only_its_kinds(self):
        """Test a registry lists only the kinds it holds."""
        registry = TemplateRegistry({PromptKind.TEST: "t"})

        assert registry.list_kinds() == ["TEST"]
        with pytest.raises(UnknownPromptKindError):
            registry.resolve("ENHANCE")
