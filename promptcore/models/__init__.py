"""Pydantic models for promptcore."""

from promptcore.models.context import (
    CodeQualityContext,
    CollaborationContext,
    ContextPayload,
    IssueSummary,
    Notification,
    PullRequestSummary,
    QualityIssue,
    QualityMetrics,
    ReasoningTrace,
    SecurityContext,
    SecurityVulnerability,
)
from promptcore.models.prompt import Diagnostic, EnhancementOptions

__all__ = [
    "CodeQualityContext",
    "CollaborationContext",
    "ContextPayload",
    "Diagnostic",
    "EnhancementOptions",
    "IssueSummary",
    "Notification",
    "PullRequestSummary",
    "QualityIssue",
    "QualityMetrics",
    "ReasoningTrace",
    "SecurityContext",
    "SecurityVulnerability",
]
