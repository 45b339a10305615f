"""Shared fixtures."""

from typing import Optional

import pytest
from fastapi.testclient import TestClient

from promptcore.adapters.base import AdapterResponse, BaseAdapter
from promptcore.api.main import app
from promptcore.api.quota import QuotaConfig, TokenQuota
from promptcore.api.routes import get_adapter, get_token_quota
from promptcore.engine import PromptEngine
from promptcore.models import ContextPayload
from promptcore.utils.metrics import TokenUsage


class FakeAdapter(BaseAdapter):
    """Adapter that records calls instead of reaching a model."""

    def __init__(self, api_key: Optional[str] = "test-key", fail: bool = False):
        super().__init__(model_name="gpt-4o-mini", api_key=api_key)
        self.fail = fail
        self.calls: list[dict] = []

    async def generate(self, prompt, system_prompt=None, model=None) -> AdapterResponse:
        self.calls.append({"prompt": prompt, "system_prompt": system_prompt, "model": model})
        if self.fail:
            raise RuntimeError("upstream unavailable")
        return AdapterResponse(
            content="generated output",
            usage=TokenUsage(input_tokens=12, output_tokens=3, model=model or self.model_name),
            model_used=model or self.model_name,
        )


@pytest.fixture
def engine():
    """Create an engine over the built-in templates."""
    return PromptEngine()


@pytest.fixture
def full_context():
    """A context payload with every section populated."""
    return ContextPayload.model_validate({
        "codeQuality": {
            "issues": [
                {
                    "category": "Security",
                    "severity": "High",
                    "message": "SQL injection vulnerability detected in user input handling",
                    "file": "lib/database.ts",
                    "line": 45,
                },
                {
                    "category": "Performance",
                    "severity": "Medium",
                    "message": "N+1 query pattern detected in user data fetching",
                },
            ],
            "metrics": {"grade": "B", "coverage": 78, "duplication": 12, "complexity": 8.2},
        },
        "security": {
            "vulnerabilities": [
                {
                    "severity": "Critical",
                    "category": "Input Validation",
                    "description": "Unsanitized user input passed directly to database query",
                    "remediation": "Use parameterized queries and input validation",
                }
            ]
        },
        "github": {
            "notifications": [
                {
                    "type": "review_requested",
                    "subject": "Review requested for PR #42",
                    "repository": "owner/repo",
                }
            ],
            "pullRequests": [
                {"title": "Implement user authentication", "status": "open", "url": "https://github.com/owner/repo/pull/42"}
            ],
            "issues": [
                {"title": "Optimize database queries", "status": "open", "labels": ["performance", "database"]}
            ],
        },
        "reasoning": {
            "thinking_process": "Hypothesis-driven debugging",
            "hypothesis": "Cookie domain mismatch",
            "verification": "Test auth flow in different browsers",
            "confidence_level": 0.85,
        },
    })


@pytest.fixture
def adapter_factory():
    """Build fake adapters with custom settings."""
    return FakeAdapter


@pytest.fixture
def fake_adapter(adapter_factory):
    """Create a fake adapter."""
    return adapter_factory()


@pytest.fixture
def quota():
    """Create a fresh quota with small limits."""
    return TokenQuota(QuotaConfig(free_daily_tokens=5000, premium_daily_tokens=2000))


@pytest.fixture
def client(fake_adapter, quota):
    """Create a test client wired to the fake adapter and a fresh quota."""
    app.dependency_overrides[get_adapter] = lambda: fake_adapter
    app.dependency_overrides[get_token_quota] = lambda: quota
    yield TestClient(app)
    app.dependency_overrides.clear()
