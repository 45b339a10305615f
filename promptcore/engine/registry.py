"""Lookup of built-in prompt templates by kind."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Optional, Union

from promptcore.templates import BUILTIN_TEMPLATES


class PromptKind(str, Enum):
    """Kinds of prompt the engine can build."""

    ENHANCE = "ENHANCE"
    ANALYZE = "ANALYZE"
    DEBUG = "DEBUG"
    OPTIMIZE = "OPTIMIZE"
    DOCUMENT = "DOCUMENT"
    TEST = "TEST"


PROMPT_KIND_DESCRIPTIONS = {
    PromptKind.ENHANCE: "Transform basic prompts into powerful, structured instructions using advanced prompt engineering techniques",
    PromptKind.ANALYZE: "Get comprehensive code analysis covering security, performance, architecture, and best practices",
    PromptKind.DEBUG: "Systematic debugging with root cause analysis, step-by-step solutions, and prevention strategies",
    PromptKind.OPTIMIZE: "Improve performance, algorithms, and resource efficiency with measurable improvements",
    PromptKind.DOCUMENT: "Generate complete technical documentation with examples, API references, and best practices",
    PromptKind.TEST: "Create thorough test suites with unit tests, integration tests, and comprehensive edge case coverage",
}


class UnknownPromptKindError(KeyError):
    """Raised when a prompt kind has neither an override nor a built-in template."""

    def __init__(self, kind: str):
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"Unknown prompt kind: {self.kind}"


KindLike = Union[PromptKind, str]


def _kind_name(kind: KindLike) -> str:
    return kind.value if isinstance(kind, PromptKind) else str(kind)


class TemplateRegistry:
    """Read-only mapping from prompt kind to template text."""

    def __init__(
        self,
        templates: Mapping[PromptKind, str],
        descriptions: Optional[Mapping[PromptKind, str]] = None,
    ):
        """Initialize the registry.

        Args:
            templates: Template text for each kind.
            descriptions: Human-readable description for each kind.
        """
        self._templates = MappingProxyType({PromptKind(k): v for k, v in templates.items()})
        self._descriptions = MappingProxyType(
            {PromptKind(k): v for k, v in (descriptions or {}).items()}
        )

    def _builtin_kind(self, kind: KindLike) -> PromptKind:
        name = _kind_name(kind)
        try:
            builtin = PromptKind(name)
        except ValueError:
            raise UnknownPromptKindError(name) from None
        if builtin not in self._templates:
            raise UnknownPromptKindError(name)
        return builtin

    def resolve(
        self,
        kind: KindLike,
        custom_templates: Optional[Mapping[str, Optional[str]]] = None,
    ) -> str:
        """Return the template for a kind.

        A custom template for the kind replaces the built-in one outright.

        Raises:
            UnknownPromptKindError: If neither source has the kind.
        """
        name = _kind_name(kind)
        if custom_templates:
            custom = custom_templates.get(name)
            if custom is not None:
                return custom
        return self._templates[self._builtin_kind(name)]

    def list_kinds(self) -> list[str]:
        """List built-in kinds in declaration order."""
        return [k.value for k in PromptKind if k in self._templates]

    def describe(self, kind: KindLike) -> str:
        """Return the description of a built-in kind."""
        return self._descriptions.get(self._builtin_kind(kind), "")

    def __contains__(self, kind: object) -> bool:
        try:
            self._builtin_kind(kind)  # type: ignore[arg-type]
        except UnknownPromptKindError:
            return False
        return True


def default_registry() -> TemplateRegistry:
    """Build a registry of the built-in templates."""
    return TemplateRegistry(
        {PromptKind(name): text for name, text in BUILTIN_TEMPLATES.items()},
        PROMPT_KIND_DESCRIPTIONS,
    )
