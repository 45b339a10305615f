"""promptcore: prompt templates for code-assistant tasks, served over HTTP."""

from promptcore.engine import (
    PromptEngine,
    PromptKind,
    UnknownPromptKindError,
    build_prompt,
)

__version__ = "0.1.0"

__all__ = [
    "PromptEngine",
    "PromptKind",
    "UnknownPromptKindError",
    "build_prompt",
]
