"""External context models injected into prompts.

Each section is independently optional. Field aliases accept the camelCase
names used by the MCP integrations that produce this data.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class QualityIssue(BaseModel):
    """A single code-quality finding."""

    category: str = Field(..., description="Issue category (e.g., 'Performance', 'Security')")
    severity: str = Field(..., description="Severity or priority (e.g., 'High', 'Medium')")
    message: str = Field(..., description="Description of the issue")
    file: Optional[str] = Field(default=None, description="File the issue was found in")
    line: Optional[int] = Field(default=None, description="Line number within the file")


class QualityMetrics(BaseModel):
    """Aggregate repository quality metrics."""

    grade: Optional[str] = Field(default=None, description="Overall grade (e.g., 'B+')")
    coverage: Optional[float] = Field(default=None, description="Test coverage percentage")
    duplication: Optional[float] = Field(default=None, description="Duplicated code percentage")
    complexity: Optional[float] = Field(default=None, description="Average cyclomatic complexity")


class CodeQualityContext(BaseModel):
    """Code-quality findings and metrics for a repository."""

    issues: list[QualityIssue] = Field(default_factory=list)
    metrics: Optional[QualityMetrics] = None


class SecurityVulnerability(BaseModel):
    """A single security finding."""

    severity: str = Field(..., description="Severity: 'Low', 'Medium', 'High' or 'Critical'")
    category: str = Field(default="Security", description="Vulnerability category")
    description: str = Field(..., description="Description of the vulnerability")
    remediation: Optional[str] = Field(default=None, description="Suggested fix")


class SecurityContext(BaseModel):
    """Security findings for a repository."""

    vulnerabilities: list[SecurityVulnerability] = Field(default_factory=list)


class Notification(BaseModel):
    """A collaboration notification (review request, assignment, ...)."""

    type: str = Field(default="notification", description="Notification reason")
    subject: str = Field(..., description="Notification subject line")
    repository: Optional[str] = None
    updated_at: Optional[str] = None


class PullRequestSummary(BaseModel):
    """An open change request."""

    title: str
    status: Optional[str] = None
    url: Optional[str] = None


class IssueSummary(BaseModel):
    """An open issue."""

    title: str
    status: Optional[str] = None
    labels: list[str] = Field(default_factory=list)


class CollaborationContext(BaseModel):
    """Recent collaboration activity on a repository."""

    model_config = ConfigDict(populate_by_name=True)

    notifications: list[Notification] = Field(default_factory=list)
    pull_requests: list[PullRequestSummary] = Field(default_factory=list, alias="pullRequests")
    issues: list[IssueSummary] = Field(default_factory=list)


class ReasoningTrace(BaseModel):
    """A structured reasoning trace to steer the model's approach."""

    thinking_process: Optional[str] = None
    hypothesis: Optional[str] = None
    verification: Optional[str] = None
    confidence_level: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class ContextPayload(BaseModel):
    """All external context that can be appended to a prompt."""

    model_config = ConfigDict(populate_by_name=True)

    code_quality: Optional[CodeQualityContext] = Field(default=None, alias="codeQuality")
    security: Optional[SecurityContext] = None
    collaboration: Optional[CollaborationContext] = Field(default=None, alias="github")
    reasoning: Optional[ReasoningTrace] = None
