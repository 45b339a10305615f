"""Model adapters for promptcore."""

from promptcore.adapters.base import AdapterResponse, BaseAdapter, ModelUnavailableError
from promptcore.adapters.openai_adapter import OpenAIAdapter

__all__ = [
    "AdapterResponse",
    "BaseAdapter",
    "ModelUnavailableError",
    "OpenAIAdapter",
]
