"""Tests for the FastAPI backend."""

import json

from promptcore.api.auth import AUTH_COOKIE
from promptcore.api.catalog import ALL_MODELS
from promptcore.api.main import app
from promptcore.api.routes import get_adapter
from promptcore.templates import SYSTEM_PROMPTS

SIGNED_IN = {AUTH_COOKIE: json.dumps({"email": "dev@example.com", "sub": "user-123"}, separators=(",", ":"))}


class TestRootEndpoints:
    """Tests for root and health endpoints."""

    def test_root_returns_info(self, client):
        """Test root endpoint returns API info."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "promptcore"
        assert "endpoints" in data

    def test_health_check(self, client):
        """Test health check returns status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_api_health_check(self, client):
        """Test the API health check reports configured keys."""
        response = client.get("/api/health")
        assert response.status_code == 200
        assert "openai" in response.json()["api_keys_configured"]


class TestModelsEndpoint:
    """Tests for the models endpoint."""

    def test_lists_all_models_anonymous(self, client):
        """Test every model is listed and anonymous callers are not authed."""
        data = client.get("/api/models").json()

        assert data["models"] == sorted(ALL_MODELS)
        assert "gpt-4o" in data["premium"]
        assert "gpt-4o-mini" in data["limited"]
        assert data["authed"] is False

    def test_signed_in_caller_is_authed(self, client):
        """Test the sign-in cookie marks the caller authed."""
        client.cookies.update(SIGNED_IN)
        assert client.get("/api/models").json()["authed"] is True


class TestPromptEndpoints:
    """Tests for prompt listing and preview."""

    def test_lists_kinds_with_descriptions(self, client):
        """Test every kind is listed with a description."""
        data = client.get("/api/prompts").json()

        assert [item["kind"] for item in data] == ["ENHANCE", "ANALYZE", "DEBUG", "OPTIMIZE", "DOCUMENT", "TEST"]
        assert all(item["description"] for item in data)

    def test_preview_builds_prompt(self, client):
        """Test preview returns the built prompt without a model call."""
        response = client.post("/api/prompts/preview", json={
            "type": "ENHANCE",
            "params": {"userInput": "Write a function to sort an array", "language": "Python"},
        })

        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "ENHANCE"
        assert "Write a function to sort an array" in data["prompt"]
        assert data["missing_params"] == []

    def test_preview_untyped_diagnostics(self, client):
        """Test diagnostics with non-string fields render instead of failing."""
        response = client.post("/api/prompts/preview", json={
            "type": "DEBUG",
            "params": {
                "userInput": "build fails",
                "diagnostics": [
                    {"source": 5, "message": "bad type", "code": 1.5},
                    {"message": "nested", "code": {"value": "E1"}},
                ],
            },
        })

        assert response.status_code == 200
        prompt = response.json()["prompt"]
        assert "- [5] bad type (1.5)" in prompt
        assert "- [Error] nested (" in prompt

    def test_preview_detects_language(self, client):
        """Test a missing language is detected from the input."""
        response = client.post("/api/prompts/preview", json={
            "type": "DEBUG",
            "params": {"userInput": "def handler(event): returns None"},
        })
        assert "Programming Language: Python" in response.json()["prompt"]

    def test_preview_default_language(self, client):
        """Test undetectable input falls back to the default language."""
        response = client.post("/api/prompts/preview", json={
            "type": "DEBUG",
            "params": {"userInput": "it crashes sometimes"},
        })
        assert "Programming Language: JavaScript" in response.json()["prompt"]

    def test_preview_reports_missing_params(self, client):
        """Test placeholders without values are reported."""
        response = client.post("/api/prompts/preview", json={
            "type": "CUSTOM",
            "params": {},
            "custom_templates": {"CUSTOM": "Do ${task} for ${owner}"},
        })
        data = response.json()
        assert data["prompt"] == "Do  for "
        assert data["missing_params"] == ["task", "owner"]

    def test_preview_with_enhancement_and_context(self, client):
        """Test enhancement and context reach the built prompt."""
        response = client.post("/api/prompts/preview", json={
            "type": "DEBUG",
            "params": {"language": "Go", "userInput": "nil pointer"},
            "enhancement": {},
            "context": {"reasoning": {"thinking_process": "steps", "confidence_level": 0.8}},
        })
        prompt = response.json()["prompt"]
        assert prompt.startswith("<task_context>")
        assert "Confidence: 80%" in prompt

    def test_preview_unknown_kind(self, client):
        """Test an unknown kind is rejected."""
        response = client.post("/api/prompts/preview", json={"type": "NOT_A_KIND", "params": {}})
        assert response.status_code == 400
        assert "NOT_A_KIND" in response.json()["detail"]

    def test_preview_invalid_context(self, client):
        """Test an out-of-range confidence is a validation error."""
        response = client.post("/api/prompts/preview", json={
            "type": "DEBUG",
            "context": {"reasoning": {"thinking_process": "x", "confidence_level": 3}},
        })
        assert response.status_code == 422


class TestGenerateEndpoint:
    """Tests for the generate endpoint."""

    def test_generate_returns_output(self, client, fake_adapter):
        """Test a generation round trip."""
        response = client.post("/api/generate", json={
            "model": "gpt-4o-mini",
            "type": "DEBUG",
            "params": {"language": "Go", "userInput": "nil pointer"},
        })

        assert response.status_code == 200
        data = response.json()
        assert data["output"] == "generated output"
        assert data["type"] == "DEBUG"
        assert data["model"] == "gpt-4o-mini"
        assert "nil pointer" in data["prompt"]
        assert data["usage"]["total_tokens"] == 15
        assert data["quota"]["allowed"] is True

        call = fake_adapter.calls[0]
        assert call["prompt"] == data["prompt"]
        assert call["system_prompt"] == SYSTEM_PROMPTS["DEBUG"]
        assert call["model"] == "gpt-4o-mini"

    def test_default_model_used(self, client, fake_adapter):
        """Test the configured default model is used when none is given."""
        response = client.post("/api/generate", json={"params": {"userInput": "sort a list"}})

        assert response.status_code == 200
        assert fake_adapter.calls[0]["model"] == "gpt-4o-mini"

    def test_unknown_kind_rejected_before_model_call(self, client, fake_adapter, quota):
        """Test an unknown kind never reaches the model or the quota."""
        response = client.post("/api/generate", json={"type": "NOT_A_KIND", "params": {"userInput": "x"}})

        assert response.status_code == 400
        assert fake_adapter.calls == []
        assert quota.counters == {}

    def test_unknown_model_rejected(self, client):
        """Test models outside the catalog are rejected."""
        response = client.post("/api/generate", json={"model": "gpt-0", "params": {"userInput": "x"}})
        assert response.status_code == 400

    def test_premium_model_requires_sign_in(self, client, fake_adapter):
        """Test anonymous callers cannot use premium models."""
        response = client.post("/api/generate", json={"model": "gpt-4o", "params": {"userInput": "x"}})

        assert response.status_code == 403
        assert fake_adapter.calls == []

    def test_premium_model_allowed_when_signed_in(self, client):
        """Test signed-in callers can use premium models."""
        client.cookies.update(SIGNED_IN)
        response = client.post("/api/generate", json={"model": "gpt-4o", "params": {"userInput": "x"}})
        assert response.status_code == 200

    def test_quota_exhausted(self, client, quota):
        """Test a caller over quota gets 429 with limit details."""
        quota.check_and_consume(None, "gpt-4o-mini", quota.config.free_daily_tokens)

        response = client.post("/api/generate", json={"params": {"userInput": "sort a list"}})

        assert response.status_code == 429
        detail = response.json()["detail"]
        assert detail["limit"] == quota.config.free_daily_tokens
        assert detail["remaining"] == 0

    def test_quota_charged_to_signed_in_user(self, client, quota):
        """Test signed-in callers are charged under their own id."""
        client.cookies.update(SIGNED_IN)
        client.post("/api/generate", json={"params": {"userInput": "sort a list"}})

        assert quota.usage("user-123", "gpt-4o-mini") >= 1000
        assert quota.usage(None, "gpt-4o-mini") == 0

    def test_empty_user_input_rejected(self, client):
        """Test blank input is rejected."""
        response = client.post("/api/generate", json={"params": {"userInput": "   "}})
        assert response.status_code == 400

    def test_missing_api_key(self, client, quota, adapter_factory):
        """Test a missing API key is reported without charging quota."""
        app.dependency_overrides[get_adapter] = lambda: adapter_factory(api_key=None)

        response = client.post("/api/generate", json={"params": {"userInput": "sort"}})

        assert response.status_code == 500
        assert "OPENAI_API_KEY" in response.json()["detail"]
        assert quota.counters == {}

    def test_adapter_failure(self, client, adapter_factory, quota):
        """Test model failures surface as 500 and refund the charge."""
        app.dependency_overrides[get_adapter] = lambda: adapter_factory(fail=True)

        response = client.post("/api/generate", json={"params": {"userInput": "sort"}})

        assert response.status_code == 500
        assert "upstream unavailable" in response.json()["detail"]
        assert quota.usage(None, "gpt-4o-mini") == 0

    def test_requires_json_body(self, client):
        """Test a malformed body is a validation error."""
        response = client.post("/api/generate", json={"params": "not-a-dict"})
        assert response.status_code == 422
