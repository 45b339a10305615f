"""OpenAI chat-completion adapter."""

from typing import Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from promptcore.adapters.base import AdapterResponse, BaseAdapter, ModelUnavailableError
from promptcore.utils.config import get_settings
from promptcore.utils.metrics import TokenUsage


class OpenAIAdapter(BaseAdapter):
    """Adapter for OpenAI chat models (gpt-4o, gpt-5, o-series, ...)."""

    def __init__(
        self,
        model_name: Optional[str] = None,
        api_key: Optional[str] = None,
        fallback_models: Optional[list[str]] = None,
    ):
        """Initialize the OpenAI adapter.

        Args:
            model_name: Default model (defaults to settings).
            api_key: API key (defaults to settings).
            fallback_models: Fallback models (defaults to settings).
        """
        settings = get_settings()
        super().__init__(
            model_name=model_name or settings.default_model,
            api_key=api_key or settings.openai_api_key,
            fallback_models=(
                fallback_models if fallback_models is not None else settings.fallback_model_chain()
            ),
        )
        self.timeout = settings.model_timeout
        self.max_retries = settings.retry_max_attempts
        self._clients: dict[str, ChatOpenAI] = {}

    def _get_client(self, model: str) -> ChatOpenAI:
        """Get or create a ChatOpenAI client for a model."""
        if model not in self._clients:
            self._clients[model] = ChatOpenAI(
                model=model,
                api_key=self.api_key,
                timeout=self.timeout,
                max_retries=self.max_retries,
            )
        return self._clients[model]

    def _extract_usage(self, response, model: str) -> TokenUsage:
        """Extract token usage from an OpenAI response."""
        usage = TokenUsage(model=model)

        metadata = getattr(response, "response_metadata", None) or {}
        if "token_usage" in metadata:
            token_usage = metadata["token_usage"] or {}
            usage.input_tokens = token_usage.get("prompt_tokens", 0)
            usage.output_tokens = token_usage.get("completion_tokens", 0)
        elif "usage" in metadata:
            token_usage = metadata["usage"] or {}
            usage.input_tokens = token_usage.get("input_tokens", 0)
            usage.output_tokens = token_usage.get("output_tokens", 0)

        return usage

    async def _complete(self, model: str, prompt: str, system_prompt: Optional[str]) -> tuple[str, TokenUsage]:
        messages = []
        if system_prompt:
            messages.append(SystemMessage(content=system_prompt))
        messages.append(HumanMessage(content=prompt))

        response = await self._get_client(model).ainvoke(messages)
        content = response.content if isinstance(response.content, str) else str(response.content)
        return content, self._extract_usage(response, model)

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
    ) -> AdapterResponse:
        """Generate a completion, falling back through the model chain.

        Raises:
            ModelUnavailableError: If every model in the chain failed.
        """
        models = self.get_model_chain(model)
        last_error: Optional[Exception] = None

        for i, candidate in enumerate(models):
            if i > 0:
                self._log_fallback(models[i - 1], candidate, str(last_error))

            self._log_request(candidate, prompt, system_prompt)
            try:
                content, usage = await self._complete(candidate, prompt, system_prompt)
            except Exception as e:
                last_error = e
                continue

            self._log_response(content, usage)
            return AdapterResponse(
                content=content,
                usage=usage,
                model_used=candidate,
                was_fallback=i > 0,
            )

        self.logger.error(f"OpenAI generate failed: {last_error}")
        raise ModelUnavailableError(f"All models failed: {models}", last_error)
