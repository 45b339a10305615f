"""Best-effort programming language detection for free-form prompts."""

import re
from typing import Optional

# Checked in order; the first matching pattern wins.
LANGUAGE_PATTERNS: list[tuple[str, re.Pattern]] = [
    ("TypeScript", re.compile(r"typescript|\.ts\b|interface\s|type\s+\w+\s*=|export\s+type", re.IGNORECASE)),
    ("JavaScript", re.compile(r"javascript|\.js\b|function\s*\(|const\s+\w+\s*=", re.IGNORECASE)),
    ("React", re.compile(r"react|jsx|usestate|useeffect|component", re.IGNORECASE)),
    ("Next.js", re.compile(r"next\.js|app\s+router|api\s+route|getserversideprops", re.IGNORECASE)),
    ("Python", re.compile(r"python|\.py\b|def\s+\w+|from\s+\w+\s+import", re.IGNORECASE)),
    ("Java", re.compile(r"\bjava\b|public\s+static|@override", re.IGNORECASE)),
    ("C#", re.compile(r"c#|csharp|namespace\s|using\s+system", re.IGNORECASE)),
    ("Go", re.compile(r"\bgolang\b|func\s+\w+\s*\(|package\s+main|import\s+\"", re.IGNORECASE)),
    ("Rust", re.compile(r"\brust\b|fn\s+\w+|let\s+mut|pub\s+struct", re.IGNORECASE)),
]


def detect_language(text: str) -> Optional[str]:
    """Guess the programming language a prompt is about.

    Args:
        text: The user's prompt.

    Returns:
        Language name, or None if nothing matched.
    """
    if not text:
        return None

    for language, pattern in LANGUAGE_PATTERNS:
        if pattern.search(text):
            return language

    return None
