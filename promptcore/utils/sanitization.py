"""Input validation and prompt-injection screening for user text."""

import re
from dataclasses import dataclass
from typing import Optional

from promptcore.utils.logger import get_logger

logger = get_logger()


@dataclass
class SanitizationResult:
    """Result of sanitization with metadata."""

    original: str
    sanitized: str
    was_modified: bool
    warnings: list[str]


# Patterns that may indicate prompt injection attempts
DANGEROUS_PATTERNS = [
    (r"ignore\s+(all\s+)?(previous|prior|above)\s+(instructions?|prompts?|rules?)", "instruction_override"),
    (r"disregard\s+(all\s+)?(previous|prior|above)\s+(instructions?|prompts?|rules?)", "instruction_override"),
    (r"(what|show|reveal|display|print|output)\s+(is\s+)?(your|the)\s+(system\s+)?prompt", "prompt_extraction"),
    (r"you\s+are\s+now\s+(a|an)\s+", "role_manipulation"),
    (r"<\|?(system|assistant|user|im_start|im_end)\|?>", "delimiter_injection"),
    # The engine's own structural and context markers
    (r"</?(task_context|error_handling|code_quality_context|security_context|"
     r"collaboration_context|reasoning_context)>", "marker_injection"),
]

MAX_INPUT_LENGTH = 20000  # characters

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


class SanitizationError(Exception):
    """Raised when input cannot be safely used."""

    pass


def detect_dangerous_patterns(text: str) -> list[tuple[str, str]]:
    """Detect potentially dangerous patterns in text.

    Args:
        text: The text to analyze.

    Returns:
        List of (matched_text, pattern_type) tuples.
    """
    findings = []
    for pattern, pattern_type in DANGEROUS_PATTERNS:
        for match in re.finditer(pattern, text, re.IGNORECASE):
            findings.append((match.group(), pattern_type))
    return findings


def sanitize_user_input(text: str, log_warnings: bool = True) -> SanitizationResult:
    """Strip control characters and screen for injection attempts.

    Suspicious patterns are reported, not rewritten: the text is meant to be
    read by a model as the user wrote it.

    Args:
        text: The raw user input.
        log_warnings: Whether to log warnings for dangerous patterns.

    Returns:
        SanitizationResult with sanitized text and metadata.
    """
    warnings: list[str] = []
    sanitized = _CONTROL_CHARS.sub("", text)

    findings = detect_dangerous_patterns(sanitized)
    if findings:
        pattern_types = sorted({ptype for _, ptype in findings})
        warnings.append(f"Detected potentially dangerous patterns: {', '.join(pattern_types)}")
        if log_warnings:
            logger.warning(f"Potential prompt injection attempt detected: {pattern_types}")

    return SanitizationResult(
        original=text,
        sanitized=sanitized,
        was_modified=sanitized != text,
        warnings=warnings,
    )


def validate_user_input(
    text: Optional[str],
    max_length: int = MAX_INPUT_LENGTH,
) -> tuple[bool, Optional[str]]:
    """Validate user input meets requirements.

    Args:
        text: The user's input text.
        max_length: Maximum allowed length.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not text or not text.strip():
        return False, "Input cannot be empty"

    if len(text) > max_length:
        return False, f"Input must not exceed {max_length} characters"

    return True, None


def sanitize_and_validate(text: Optional[str], max_length: int = MAX_INPUT_LENGTH) -> str:
    """Validate then sanitize user input, raising on invalid input.

    Raises:
        SanitizationError: If input is invalid.
    """
    is_valid, error = validate_user_input(text, max_length)
    if not is_valid:
        raise SanitizationError(error)

    return sanitize_user_input(text).sanitized
