"""End-to-end prompt construction."""

from collections.abc import Mapping
from typing import Any, Optional, Union

from promptcore.engine.context import inject_context
from promptcore.engine.enhancer import enhance_template
from promptcore.engine.registry import KindLike, TemplateRegistry, default_registry
from promptcore.engine.substitution import substitute
from promptcore.models.context import ContextPayload
from promptcore.models.prompt import EnhancementOptions
from promptcore.utils.logger import get_logger

logger = get_logger()


class PromptEngine:
    """Builds finished prompts from a template registry.

    The engine holds no per-request state; one instance can serve any number
    of concurrent callers.
    """

    def __init__(self, registry: Optional[TemplateRegistry] = None):
        """Initialize the engine.

        Args:
            registry: Template registry (defaults to the built-ins).
        """
        self.registry = registry or default_registry()

    def build_prompt(
        self,
        kind: KindLike,
        params: Optional[Mapping[str, Any]] = None,
        custom_templates: Optional[Mapping[str, Optional[str]]] = None,
        enhancement: Optional[EnhancementOptions] = None,
        context: Optional[Union[ContextPayload, dict[str, Any]]] = None,
    ) -> str:
        """Build a prompt ready to send to a model.

        Steps run in a fixed order: resolve the template, enhance it (when
        options are given), append context blocks (when a payload is given),
        then substitute parameters into the result.

        Args:
            kind: Prompt kind.
            params: Placeholder values. ``diagnostics`` feeds ``${diagnosticText}``.
            custom_templates: Per-kind templates that replace the built-ins.
            enhancement: Structural enhancement options.
            context: External context to append.

        Returns:
            The finished prompt.

        Raises:
            UnknownPromptKindError: If the kind cannot be resolved.
        """
        params = params or {}
        template = self.registry.resolve(kind, custom_templates)

        if enhancement is not None:
            template = enhance_template(template, params, enhancement)

        if context is not None:
            template = inject_context(template, context)

        prompt = substitute(template, params)
        logger.debug(f"Built {kind} prompt: template_len={len(template)}, prompt_len={len(prompt)}")
        return prompt


# Shared engine over the built-in templates
_engine: Optional[PromptEngine] = None


def get_engine() -> PromptEngine:
    """Get the shared prompt engine."""
    global _engine
    if _engine is None:
        _engine = PromptEngine()
    return _engine


def build_prompt(
    kind: KindLike,
    params: Optional[Mapping[str, Any]] = None,
    custom_templates: Optional[Mapping[str, Optional[str]]] = None,
    enhancement: Optional[EnhancementOptions] = None,
    context: Optional[Union[ContextPayload, dict[str, Any]]] = None,
) -> str:
    """Build a prompt with the shared engine. See PromptEngine.build_prompt."""
    return get_engine().build_prompt(kind, params, custom_templates, enhancement, context)
