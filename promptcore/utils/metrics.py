"""Token usage tracking."""

from dataclasses import dataclass, field
from datetime import datetime

# Rough characters-per-token ratio for English prose and code
CHARS_PER_TOKEN = 4


@dataclass
class TokenUsage:
    """Token usage for a single API call."""

    input_tokens: int = 0
    output_tokens: int = 0
    model: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def total_tokens(self) -> int:
        """Total tokens used."""
        return self.input_tokens + self.output_tokens

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "model": self.model,
            "input_tokens": self.input_tokens,
            "output_tokens": self.output_tokens,
            "total_tokens": self.total_tokens,
        }


def estimate_tokens(text: str) -> int:
    """Estimate the token count of a piece of text.

    Args:
        text: Text to measure.

    Returns:
        Approximate token count, at least 1 for non-empty text.
    """
    if not text:
        return 0
    return max(1, len(text) // CHARS_PER_TOKEN)
