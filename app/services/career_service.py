"""
Career Service

Runs the prompt -> Gemini -> JSON pipeline for both endpoints.
"""

import json
from typing import Any, List, Optional, Tuple

from app.services.gemini_service import GeminiService
from app.services.prompt_service import build_job_match_prompt, build_resume_analysis_prompt
from app.utils.logger import get_logger
from app.utils.exceptions import AgentError, ParseError, ProviderError

logger = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_completion(text: str) -> Tuple[Any, Optional[ParseError]]:
    """
    Parse a completion as JSON, as-is.

    Markdown fences are not stripped; a fenced reply is a parse failure and
    the raw text is handed back for inspection. NaN and Infinity are
    refused too since they cannot be sent back as JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant), None
    except (TypeError, ValueError) as e:
        logger.error(f"[CareerService] Failed to parse Gemini response ({e}): {text[:500]!r}")
        return None, ParseError(str(e), raw_text=text, component="parser")


class CareerService:
    """Resume analysis and job matching backed by Gemini"""

    def __init__(self, gemini_service: GeminiService):
        self.gemini = gemini_service

    async def _run(self, prompt: str, failure_summary: str) -> Tuple[Any, Optional[AgentError]]:
        completion, error = await self.gemini.complete(prompt)
        if error:
            # Provider failures are reported under the endpoint's own summary
            if isinstance(error, ProviderError):
                error.error = failure_summary
            return None, error
        return parse_completion(completion)

    async def analyze_resume(self, resume_text: str) -> Tuple[Any, Optional[AgentError]]:
        """
        Extract candidate attributes and follow-up questions from resume text.

        Returns:
            Tuple of (parsed_json, error)
        """
        logger.info(f"[CareerService] Analyzing resume ({len(resume_text)} characters)")
        return await self._run(build_resume_analysis_prompt(resume_text), "Failed to analyze resume")

    async def match_jobs(self, user_profile: Any, user_answers: List[Any]) -> Tuple[Any, Optional[AgentError]]:
        """
        Recommend jobs from a profile and the answers to the follow-up questions.

        Returns:
            Tuple of (parsed_json, error)
        """
        logger.info(f"[CareerService] Matching jobs for profile with {len(user_answers)} answer(s)")
        return await self._run(build_job_match_prompt(user_profile, user_answers), "Failed to match jobs")
