"""Render external context as delimited blocks appended to a template.

Blocks are emitted in a fixed order (quality, security, collaboration,
reasoning). A section with nothing to show yields no block at all. Caller
data is rendered in the order given.
"""

from typing import Any, Optional, Union

from promptcore.models.context import (
    CodeQualityContext,
    CollaborationContext,
    ContextPayload,
    QualityMetrics,
    ReasoningTrace,
    SecurityContext,
)

QUALITY_TAG = "code_quality_context"
SECURITY_TAG = "security_context"
COLLABORATION_TAG = "collaboration_context"
REASONING_TAG = "reasoning_context"

MAX_NOTIFICATIONS = 5
MAX_PULL_REQUESTS = 3
MAX_ISSUES = 3


def _block(tag: str, lines: list[str]) -> str:
    body = "\n".join(lines)
    return f"<{tag}>\n{body}\n</{tag}>"


def _number(value: float) -> str:
    return f"{value:g}"


def _metric_lines(metrics: QualityMetrics) -> list[str]:
    lines = []
    if metrics.grade is not None:
        lines.append(f"- Grade: {metrics.grade}")
    if metrics.coverage is not None:
        lines.append(f"- Coverage: {_number(metrics.coverage)}%")
    if metrics.duplication is not None:
        lines.append(f"- Duplication: {_number(metrics.duplication)}%")
    if metrics.complexity is not None:
        lines.append(f"- Complexity: {_number(metrics.complexity)}")
    return lines


def render_quality_block(quality: Optional[CodeQualityContext]) -> Optional[str]:
    if quality is None or not quality.issues:
        return None

    lines = ["## Code Quality Findings"]
    for issue in quality.issues:
        lines.append(f"- **{issue.severity}** ({issue.category}): {issue.message}")
        if issue.file:
            location = issue.file if issue.line is None else f"{issue.file}:{issue.line}"
            lines.append(f"  File: {location}")

    if quality.metrics is not None:
        metric_lines = _metric_lines(quality.metrics)
        if metric_lines:
            lines.append("### Quality Metrics")
            lines.extend(metric_lines)

    return _block(QUALITY_TAG, lines)


def render_security_block(security: Optional[SecurityContext]) -> Optional[str]:
    if security is None or not security.vulnerabilities:
        return None

    lines = ["## Security Findings"]
    for vuln in security.vulnerabilities:
        lines.append(f"- **{vuln.severity}** ({vuln.category}): {vuln.description}")
        if vuln.remediation:
            lines.append(f"  Remediation: {vuln.remediation}")

    return _block(SECURITY_TAG, lines)


def render_collaboration_block(activity: Optional[CollaborationContext]) -> Optional[str]:
    if activity is None:
        return None
    if not (activity.notifications or activity.pull_requests or activity.issues):
        return None

    lines = ["## Recent Collaboration Activity"]

    if activity.notifications:
        lines.append("### Notifications")
        for note in activity.notifications[:MAX_NOTIFICATIONS]:
            line = f"- [{note.type}] {note.subject}"
            if note.repository:
                line += f" ({note.repository})"
            lines.append(line)

    if activity.pull_requests:
        lines.append("### Open Pull Requests")
        for pr in activity.pull_requests[:MAX_PULL_REQUESTS]:
            line = f"- {pr.title}"
            if pr.status:
                line += f" ({pr.status})"
            if pr.url:
                line += f" - {pr.url}"
            lines.append(line)

    if activity.issues:
        lines.append("### Open Issues")
        for issue in activity.issues[:MAX_ISSUES]:
            line = f"- {issue.title}"
            if issue.status:
                line += f" ({issue.status})"
            if issue.labels:
                line += f" [labels: {', '.join(issue.labels)}]"
            lines.append(line)

    return _block(COLLABORATION_TAG, lines)


def render_reasoning_block(reasoning: Optional[ReasoningTrace]) -> Optional[str]:
    if reasoning is None or not reasoning.thinking_process:
        return None

    lines = ["## Reasoning Trace", f"Thinking Process: {reasoning.thinking_process}"]
    if reasoning.hypothesis:
        lines.append(f"Hypothesis: {reasoning.hypothesis}")
    if reasoning.verification:
        lines.append(f"Verification: {reasoning.verification}")
    if reasoning.confidence_level is not None:
        lines.append(f"Confidence: {round(reasoning.confidence_level * 100)}%")

    return _block(REASONING_TAG, lines)


def render_context_blocks(payload: ContextPayload) -> list[tuple[str, str]]:
    """Render the present sections as (tag, block) pairs in output order."""
    rendered = [
        (QUALITY_TAG, render_quality_block(payload.code_quality)),
        (SECURITY_TAG, render_security_block(payload.security)),
        (COLLABORATION_TAG, render_collaboration_block(payload.collaboration)),
        (REASONING_TAG, render_reasoning_block(payload.reasoning)),
    ]
    return [(tag, block) for tag, block in rendered if block is not None]


def inject_context(
    template: str,
    payload: Optional[Union[ContextPayload, dict[str, Any]]],
) -> str:
    """Append context blocks to a template.

    Blocks whose opening tag is already in the template are skipped.

    Args:
        template: Template text.
        payload: Context sections, as a model or a raw dict.

    Returns:
        The template followed by the rendered blocks.
    """
    if payload is None:
        return template
    if not isinstance(payload, ContextPayload):
        payload = ContextPayload.model_validate(payload)

    blocks = [
        block
        for tag, block in render_context_blocks(payload)
        if f"<{tag}>" not in template
    ]
    if not blocks:
        return template

    return template + "\n\n" + "\n\n".join(blocks)
