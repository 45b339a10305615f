"""Structural enhancement of templates.

Each step checks for its own marker before applying, so enhancing an
already-enhanced template changes nothing.
"""

from collections.abc import Mapping
from typing import Any, Optional

from promptcore.engine.substitution import DIAGNOSTIC_TEXT_KEY, find_placeholders
from promptcore.models.prompt import EnhancementOptions
from promptcore.utils.logger import get_logger

logger = get_logger()

TASK_CONTEXT_OPEN = "<task_context>"
TASK_CONTEXT_CLOSE = "</task_context>"

ERROR_HANDLING_PHRASE = "If you're unsure"
ERROR_HANDLING_FOOTER = (
    "\n\n<error_handling>\n"
    f"{ERROR_HANDLING_PHRASE} about any aspect or need clarification, please ask specific "
    "questions rather than making assumptions.\n"
    "</error_handling>"
)


def find_missing_params(template: str, params: Optional[Mapping[str, Any]]) -> list[str]:
    """List placeholders in a template that have no parameter.

    ``diagnosticText`` is synthesized, so it is never reported. Each name
    appears once, in order of first use.
    """
    params = params or {}
    missing: list[str] = []
    for name in find_placeholders(template):
        if name == DIAGNOSTIC_TEXT_KEY or name in params or name in missing:
            continue
        missing.append(name)
    return missing


def wrap_task_context(template: str) -> str:
    if TASK_CONTEXT_OPEN in template:
        return template
    return f"{TASK_CONTEXT_OPEN}\n{template}\n{TASK_CONTEXT_CLOSE}"


def append_error_handling(template: str) -> str:
    if ERROR_HANDLING_PHRASE in template:
        return template
    return template + ERROR_HANDLING_FOOTER


def enhance_template(
    template: str,
    params: Optional[Mapping[str, Any]] = None,
    options: Optional[EnhancementOptions] = None,
) -> str:
    """Apply the enabled enhancement steps to a template.

    Validation runs against the template as given, before wrapping. It only
    logs a warning; it never blocks.

    Args:
        template: Template text, placeholders unresolved.
        params: The parameters the template will be substituted with.
        options: Which steps to run. All are on by default.

    Returns:
        The enhanced template, placeholders still unresolved.
    """
    opts = options or EnhancementOptions()

    if opts.validate_inputs:
        missing = find_missing_params(template, params)
        if missing:
            logger.warning(f"Missing parameters for prompt: {', '.join(missing)}")

    enhanced = template
    if opts.enhance_structure:
        enhanced = wrap_task_context(enhanced)
    if opts.add_error_handling:
        enhanced = append_error_handling(enhanced)

    return enhanced
