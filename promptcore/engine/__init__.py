"""Prompt template engine."""

from promptcore.engine.context import inject_context
from promptcore.engine.enhancer import enhance_template, find_missing_params
from promptcore.engine.pipeline import PromptEngine, build_prompt, get_engine
from promptcore.engine.registry import (
    PromptKind,
    TemplateRegistry,
    UnknownPromptKindError,
    default_registry,
)
from promptcore.engine.substitution import (
    find_placeholders,
    generate_diagnostic_text,
    substitute,
)

__all__ = [
    "PromptEngine",
    "PromptKind",
    "TemplateRegistry",
    "UnknownPromptKindError",
    "build_prompt",
    "default_registry",
    "enhance_template",
    "find_missing_params",
    "find_placeholders",
    "generate_diagnostic_text",
    "get_engine",
    "inject_context",
    "substitute",
]
