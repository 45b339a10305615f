"""Built-in prompt templates and system prompts."""

from promptcore.templates.analyze import ANALYZE_TEMPLATE
from promptcore.templates.debug import DEBUG_TEMPLATE
from promptcore.templates.document import DOCUMENT_TEMPLATE
from promptcore.templates.enhance import ENHANCE_TEMPLATE
from promptcore.templates.optimize import OPTIMIZE_TEMPLATE
from promptcore.templates.system import DEFAULT_SYSTEM_PROMPT, SYSTEM_PROMPTS
from promptcore.templates.testing import TEST_TEMPLATE

# Keyed by prompt kind name, in display order
BUILTIN_TEMPLATES = {
    "ENHANCE": ENHANCE_TEMPLATE,
    "ANALYZE": ANALYZE_TEMPLATE,
    "DEBUG": DEBUG_TEMPLATE,
    "OPTIMIZE": OPTIMIZE_TEMPLATE,
    "DOCUMENT": DOCUMENT_TEMPLATE,
    "TEST": TEST_TEMPLATE,
}

__all__ = [
    "ANALYZE_TEMPLATE",
    "BUILTIN_TEMPLATES",
    "DEBUG_TEMPLATE",
    "DEFAULT_SYSTEM_PROMPT",
    "DOCUMENT_TEMPLATE",
    "ENHANCE_TEMPLATE",
    "OPTIMIZE_TEMPLATE",
    "SYSTEM_PROMPTS",
    "TEST_TEMPLATE",
]
