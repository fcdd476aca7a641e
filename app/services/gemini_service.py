"""
Gemini Service

Sends a rendered prompt to the Google Gemini generateContent REST API
and returns the raw completion text. Single shot: no retry, no streaming.
"""

from typing import Any, Dict, Optional, Tuple

import httpx

from app.config import Config
from app.utils.logger import get_logger
from app.utils.exceptions import AgentError, ConfigurationError, ProviderError

logger = get_logger(__name__)


def extract_completion_text(data: Dict[str, Any]) -> str:
    """Join the text parts of the first candidate; empty string if there are none."""
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(part.get("text", "") for part in parts)


class GeminiService:
    """Thin async client for the Gemini REST API"""

    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        # Tests pass an httpx.MockTransport here
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.config.gemini_llm.api_key)

    async def complete(self, prompt: str) -> Tuple[Optional[str], Optional[AgentError]]:
        """
        Send one prompt and return the completion text.

        Args:
            prompt: Fully rendered prompt text

        Returns:
            Tuple of (completion_text, error)
        """
        gemini = self.config.gemini_llm
        if not gemini.api_key:
            return None, ConfigurationError(
                "GEMINI_API_KEY is not set. Add it to the .env file or the environment.",
                "gemini",
            )

        url = f"{gemini.base_url}/models/{gemini.model}:generateContent"
        logger.info(f"[GeminiService] Calling {gemini.model} ({len(prompt)} prompt characters)")

        try:
            async with httpx.AsyncClient(timeout=gemini.timeout_seconds, transport=self._transport) as client:
                response = await client.post(
                    url,
                    headers={
                        "x-goog-api-key": gemini.api_key,
                        "Content-Type": "application/json",
                    },
                    json={"contents": [{"parts": [{"text": prompt}]}]},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            detail = _error_detail(e.response)
            logger.error(f"[GeminiService] Gemini returned HTTP {e.response.status_code}: {detail}")
            return None, ProviderError(f"Gemini API error ({e.response.status_code}): {detail}", "gemini")
        except httpx.HTTPError as e:
            logger.error(f"[GeminiService] Request to Gemini failed: {e!r}")
            return None, ProviderError(f"Gemini request failed: {str(e) or type(e).__name__}", "gemini")
        except ValueError as e:
            logger.error(f"[GeminiService] Gemini response body is not JSON: {e}")
            return None, ProviderError("Gemini returned a non-JSON response body", "gemini")

        text = extract_completion_text(data)
        if not text:
            block_reason = (data.get("promptFeedback") or {}).get("blockReason")
            reason = f" (blocked: {block_reason})" if block_reason else ""
            logger.warning(f"[GeminiService] No content in Gemini API response{reason}")
            return None, ProviderError(f"Gemini returned no content{reason}", "gemini")

        usage = data.get("usageMetadata") or {}
        logger.info(
            "[GeminiService] Completion received: %s characters (tokens in=%s out=%s)",
            len(text), usage.get("promptTokenCount", "-"), usage.get("candidatesTokenCount", "-"),
        )
        return text, None


def _error_detail(response: httpx.Response) -> str:
    """Best-effort error message from a Gemini error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:500]
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and err.get("message"):
            return err["message"]
    return response.text[:500]
