"""Utility modules for promptcore."""

from promptcore.utils.config import Settings, get_settings
from promptcore.utils.language import detect_language
from promptcore.utils.logger import get_logger, setup_logging
from promptcore.utils.metrics import TokenUsage, estimate_tokens
from promptcore.utils.sanitization import (
    sanitize_user_input,
    validate_user_input,
    sanitize_and_validate,
    SanitizationError,
    SanitizationResult,
)

__all__ = [
    "Settings",
    "get_settings",
    "detect_language",
    "get_logger",
    "setup_logging",
    "TokenUsage",
    "estimate_tokens",
    "sanitize_user_input",
    "validate_user_input",
    "sanitize_and_validate",
    "SanitizationError",
    "SanitizationResult",
]
