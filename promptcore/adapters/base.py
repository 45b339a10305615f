"""Base adapter for chat-completion models."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from promptcore.utils.logger import get_logger
from promptcore.utils.metrics import TokenUsage


class ModelUnavailableError(Exception):
    """Raised when every model in the chain failed."""

    def __init__(self, message: str, last_exception: Optional[Exception] = None):
        super().__init__(message)
        self.last_exception = last_exception


@dataclass
class AdapterResponse:
    """Response from an adapter including content and usage metrics."""

    content: str
    usage: TokenUsage
    model_used: str
    was_fallback: bool = False


class BaseAdapter(ABC):
    """Abstract base class for model adapters."""

    def __init__(
        self,
        model_name: str,
        api_key: Optional[str] = None,
        fallback_models: Optional[list[str]] = None,
    ):
        """Initialize the adapter.

        Args:
            model_name: Name of the default model to use.
            api_key: API key for authentication.
            fallback_models: Models to try, in order, when the first fails.
        """
        self.model_name = model_name
        self.api_key = api_key
        self.fallback_models = fallback_models or []
        self.logger = get_logger()

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
    ) -> AdapterResponse:
        """Generate a completion for a prompt.

        Args:
            prompt: The user prompt.
            system_prompt: Optional system prompt.
            model: Model to use instead of the adapter default.

        Returns:
            AdapterResponse with content and usage metrics.
        """
        pass

    def get_model_chain(self, model: Optional[str] = None) -> list[str]:
        """Get the models to try in order, without duplicates."""
        chain = []
        for name in [model or self.model_name, *self.fallback_models]:
            if name not in chain:
                chain.append(name)
        return chain

    def _log_request(self, model: str, prompt: str, system_prompt: Optional[str] = None) -> None:
        """Log an API request."""
        self.logger.debug(
            f"[{self.__class__.__name__}] Request to {model}: "
            f"prompt_len={len(prompt)}, system_len={len(system_prompt or '')}"
        )

    def _log_response(self, response: Any, usage: Optional[TokenUsage] = None) -> None:
        """Log an API response with usage metrics."""
        response_len = len(str(response)) if response else 0
        usage_info = ""
        if usage:
            usage_info = f", tokens_in={usage.input_tokens}, tokens_out={usage.output_tokens}"
        self.logger.debug(
            f"[{self.__class__.__name__}] Response: response_len={response_len}{usage_info}"
        )

    def _log_fallback(self, from_model: str, to_model: str, reason: str) -> None:
        """Log a fallback to another model."""
        self.logger.warning(
            f"[{self.__class__.__name__}] Falling back from {from_model} to {to_model}: {reason}"
        )
