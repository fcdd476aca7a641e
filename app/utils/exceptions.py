"""
Error taxonomy for the resume/job-matching pipeline.

Each stage returns ``(value, error)`` where ``error`` is one of the classes
below; the router turns the first error it sees into a JSON response using
the error's ``status_code``. They are still Exceptions so they can be raised
where that reads better (e.g. inside a helper) and caught at the stage edge.
"""

from typing import Any, Dict, Optional


class AgentError(Exception):
    """Base error carrying an HTTP status and a short summary."""

    status_code: int = 500
    error: str = "Internal server error"

    def __init__(self, message: str, component: Optional[str] = None, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.component = component
        if error:
            self.error = error

    def to_response(self) -> Dict[str, Any]:
        return {"error": self.error, "message": self.message}


class ValidationError(AgentError):
    """Bad or missing request input."""

    status_code = 400
    error = "Invalid request"


class ExtractionError(AgentError):
    """An uploaded document could not be turned into text."""

    status_code = 400
    error = "Failed to process uploaded file"


class ConfigurationError(AgentError):
    """Required server configuration (the Gemini API key) is missing."""

    status_code = 500
    error = "GEMINI_API_KEY not configured"


class ProviderError(AgentError):
    """The upstream LLM call failed."""

    status_code = 500
    error = "LLM provider request failed"


class ParseError(AgentError):
    """The completion was not valid JSON; the raw text is kept for diagnosis."""

    status_code = 500
    error = "Failed to parse AI response"

    def __init__(self, message: str, raw_text: str, component: Optional[str] = None):
        super().__init__(message, component)
        self.raw_text = raw_text

    def to_response(self) -> Dict[str, Any]:
        return {"error": self.error, "details": self.raw_text}
