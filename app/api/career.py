import asyncio
import json
from typing import Any, Optional, Tuple

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.schemas.career import (
    ErrorResponse,
    HealthResponse,
    JobMatchResponse,
    MatchJobsRequest,
    ResumeAnalysisResponse,
    ResumeTextRequest,
)
from app.services.container import (
    career_service,
    resume_service,
)
from app.utils.logger import get_logger
from app.utils.exceptions import AgentError, ValidationError

logger = get_logger(__name__)

# Resume analysis and job matching endpoints
router = APIRouter(prefix="/api", tags=["Career"])

# Room for multipart boundaries and small text fields on top of the file itself
MULTIPART_OVERHEAD = 64 * 1024

_error_responses = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def error_response(request: Request, error: AgentError) -> JSONResponse:
    """Log the failure with its request context and render it as JSON."""
    logger.error(
        f"[API] {request.method} {request.url.path} -> {error.status_code} "
        f"{error.error}: {error.message}"
    )
    return JSONResponse(status_code=error.status_code, content=error.to_response())


async def read_json_body(request: Request) -> Tuple[Any, Optional[AgentError]]:
    """Parse the request body as a JSON object; an empty body reads as {}."""
    raw = await request.body()
    if not raw.strip():
        return {}, None
    try:
        body = json.loads(raw)
    except ValueError as e:
        return None, ValidationError(f"Request body must be valid JSON: {e}", "request", error="Invalid JSON body")
    if not isinstance(body, dict):
        return None, ValidationError("Request body must be a JSON object", "request", error="Invalid JSON body")
    return body, None


async def read_uploaded_resume(upload: UploadFile) -> Tuple[str, Optional[AgentError]]:
    """Upload gate and extraction for the single `file` field."""
    filename = upload.filename or ""
    logger.info(f"[API] Processing uploaded file: {filename}")

    # Reject by extension before reading anything
    type_error = resume_service.validate_extension(filename)
    if type_error:
        return "", type_error

    # Never buffer more than one byte past the limit
    content = await upload.read(resume_service.max_file_size + 1)
    is_valid, error = resume_service.validate_file(content, filename)
    if not is_valid:
        return "", error

    text, error = await asyncio.to_thread(resume_service.extract_text, content, filename)
    if error:
        return "", error
    logger.info(f"[API] Successfully extracted {len(text)} characters from file")
    return text, None


async def read_resume_input(request: Request) -> Tuple[Optional[str], Optional[AgentError]]:
    """
    Resume text from a multipart upload or a JSON body.

    An uploaded file wins over any resumeText sent alongside it.
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith("multipart/form-data"):
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and \
                int(content_length) > resume_service.max_file_size + MULTIPART_OVERHEAD:
            return None, ValidationError(
                f"File size exceeds maximum of {resume_service.max_file_size // 1024 // 1024}MB",
                "upload",
                error="File too large",
            )

        try:
            async with request.form(max_files=1) as form:
                for key, value in form.multi_items():
                    if isinstance(value, UploadFile) and key != "file":
                        return None, ValidationError(
                            f"Unexpected file field '{key}'. Upload the resume as 'file'.",
                            "upload",
                            error="Unexpected file field",
                        )

                upload = form.get("file")
                if isinstance(upload, UploadFile) and upload.filename:
                    return await read_uploaded_resume(upload)

                resume_text = form.get("resumeText")
                if isinstance(resume_text, str) and resume_text:
                    logger.info("[API] Processing resume text from form field")
                    return resume_text, None
                return None, None
        except StarletteHTTPException as e:
            # Multipart parser errors, including more than one file
            return None, ValidationError(str(e.detail), "upload", error="Invalid multipart request")

    body, error = await read_json_body(request)
    if error:
        return None, error
    try:
        payload = ResumeTextRequest.model_validate(body)
    except PydanticValidationError:
        return None, ValidationError("resumeText must be a string", "request", error="Invalid resumeText")
    if payload.resumeText:
        logger.info("[API] Processing resume text from request body")
    return payload.resumeText, None


@router.get("/health", response_model=HealthResponse)
async def health():
    """Liveness probe: returns 200 if the process is running."""
    return {"status": "ok"}


@router.post(
    "/analyze-resume",
    responses={200: {"model": ResumeAnalysisResponse}, **_error_responses},
)
async def analyze_resume(request: Request):
    """
    Analyze a resume with Gemini.

    Accepts a PDF/DOCX/TXT upload in the multipart field `file`, or
    `{"resumeText": "..."}` as JSON. Returns the candidate analysis and
    five follow-up questions.
    """
    try:
        resume_text, error = await read_resume_input(request)
        if error:
            return error_response(request, error)

        if not resume_text or not resume_text.strip():
            return error_response(request, ValidationError(
                "Please provide either a resume file (PDF, DOCX, TXT) or resume text in the request body",
                "request",
                error="Resume text or file is required",
            ))

        result, error = await career_service.analyze_resume(resume_text)
        if error:
            return error_response(request, error)

        logger.info("[API] Resume analysis complete")
        return JSONResponse(content=result)

    except Exception as e:
        logger.error(f"[API] Error analyzing resume: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to analyze resume", "message": str(e)},
        )


@router.post(
    "/match-jobs",
    responses={200: {"model": JobMatchResponse}, **_error_responses},
)
async def match_jobs(request: Request):
    """
    Recommend jobs from the analyzed profile and the candidate's answers.

    Expects `{"userProfile": {...}, "userAnswers": ["...", ...]}`.
    """
    try:
        body, error = await read_json_body(request)
        if error:
            return error_response(request, error)

        try:
            payload = MatchJobsRequest.model_validate(body)
        except PydanticValidationError:
            return error_response(request, ValidationError(
                "userAnswers must be an array of answers",
                "request",
                error="Invalid userAnswers",
            ))

        if payload.userProfile is None or payload.userAnswers is None:
            return error_response(request, ValidationError(
                "Please provide both userProfile and userAnswers in the request body",
                "request",
                error="userProfile and userAnswers are required",
            ))

        result, error = await career_service.match_jobs(payload.userProfile, payload.userAnswers)
        if error:
            return error_response(request, error)

        logger.info("[API] Job matching complete")
        return JSONResponse(content=result)

    except Exception as e:
        logger.error(f"[API] Error matching jobs: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to match jobs", "message": str(e)},
        )
