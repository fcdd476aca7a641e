import asyncio
import json

import httpx

from app.config import get_config
from app.services.gemini_service import GeminiService, extract_completion_text
from app.utils.exceptions import ConfigurationError, ProviderError


def make_service(handler, api_key="test-key"):
    config = get_config()
    config.gemini_llm.api_key = api_key
    config.gemini_llm.model = "gemini-flash-latest"
    return GeminiService(config, transport=httpx.MockTransport(handler))


def gemini_body(text):
    return {
        "candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}],
        "usageMetadata": {"promptTokenCount": 10, "candidatesTokenCount": 5},
    }


def test_complete_posts_prompt_and_returns_text():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["key"] = request.headers["x-goog-api-key"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=gemini_body('{"ok": true}'))

    text, error = asyncio.run(make_service(handler).complete("Hello Gemini"))

    assert error is None
    assert text == '{"ok": true}'
    assert seen["url"].endswith("/models/gemini-flash-latest:generateContent")
    assert seen["key"] == "test-key"
    assert seen["body"] == {"contents": [{"parts": [{"text": "Hello Gemini"}]}]}


def test_missing_key_is_configuration_error_without_request():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=gemini_body("unused"))

    text, error = asyncio.run(make_service(handler, api_key=None).complete("Hello"))

    assert text is None
    assert isinstance(error, ConfigurationError)
    assert error.status_code == 500
    assert calls == []


def test_invalid_key_is_provider_error():
    def handler(request):
        return httpx.Response(400, json={"error": {"code": 400, "message": "API key not valid."}})

    text, error = asyncio.run(make_service(handler).complete("Hello"))

    assert text is None
    assert isinstance(error, ProviderError)
    assert "API key not valid." in error.message


def test_network_failure_is_provider_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    text, error = asyncio.run(make_service(handler).complete("Hello"))

    assert text is None
    assert isinstance(error, ProviderError)
    assert "connection refused" in error.message


def test_blocked_prompt_is_provider_error():
    def handler(request):
        return httpx.Response(200, json={"promptFeedback": {"blockReason": "SAFETY"}})

    text, error = asyncio.run(make_service(handler).complete("Hello"))

    assert text is None
    assert isinstance(error, ProviderError)
    assert "SAFETY" in error.message


def test_extract_completion_text_joins_parts():
    data = {"candidates": [{"content": {"parts": [{"text": '{"a": '}, {"text": "1}"}]}}]}
    assert extract_completion_text(data) == '{"a": 1}'
    assert extract_completion_text({}) == ""
