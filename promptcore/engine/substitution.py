"""Placeholder substitution for prompt templates.

Templates mark substitution points with ``${name}`` where ``name`` is made of
ASCII letters, digits and underscores. Substitution is a single left-to-right
pass: text produced by one replacement is never scanned again. Anything that
does not match the token pattern (a stray ``$``, an unclosed ``${``) is left
as-is, so substitution never fails.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from promptcore.models.prompt import Diagnostic

PLACEHOLDER_PATTERN = re.compile(r"\$\{([A-Za-z0-9_]+)\}")

# Synthesized from the "diagnostics" parameter, never looked up directly
DIAGNOSTIC_TEXT_KEY = "diagnosticText"
DIAGNOSTICS_KEY = "diagnostics"


def find_placeholders(template: str) -> list[str]:
    """Return placeholder names in source order, duplicates included."""
    return PLACEHOLDER_PATTERN.findall(template)


def _as_diagnostic(record: Any) -> Diagnostic:
    if isinstance(record, Diagnostic):
        return record
    if isinstance(record, Mapping):
        # Records arrive untyped from request bodies; only truthiness counts
        source = record.get("source")
        code = record.get("code")
        return Diagnostic(
            source=str(source) if source else None,
            message=str(record.get("message") or ""),
            code=str(code) if code else None,
        )
    return Diagnostic(message=str(record))


def generate_diagnostic_text(diagnostics: Optional[Iterable[Any]]) -> str:
    """Render diagnostics as a "Current problems detected" block.

    Args:
        diagnostics: Diagnostic records as models or dicts.

    Returns:
        Empty string when there are none, otherwise a block starting with
        a newline and one ``- [source] message (code)`` line per record.
    """
    records = [_as_diagnostic(d) for d in diagnostics or []]
    if not records:
        return ""

    lines = []
    for d in records:
        line = f"- [{d.source or 'Error'}] {d.message}"
        if d.code:
            line += f" ({d.code})"
        lines.append(line)

    return "\nCurrent problems detected:\n" + "\n".join(lines)


def render_value(value: Any) -> str:
    """Convert a parameter value to its substituted text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return "\n".join(str(item) for item in value)
    return str(value)


def substitute(template: str, params: Optional[Mapping[str, Any]]) -> str:
    """Replace every ``${name}`` in a template.

    Args:
        template: Template text.
        params: Parameter values keyed by placeholder name. Missing keys
            resolve to the empty string.

    Returns:
        The template with all placeholders resolved.
    """
    params = params or {}

    def _replace(match: re.Match) -> str:
        key = match.group(1)
        if key == DIAGNOSTIC_TEXT_KEY:
            return generate_diagnostic_text(params.get(DIAGNOSTICS_KEY))
        if key in params:
            return render_value(params[key])
        return ""

    return PLACEHOLDER_PATTERN.sub(_replace, template)
