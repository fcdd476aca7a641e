"""
FastAPI Application

HTTP API server for resume analysis and job matching.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import career as career_api
from app.services.container import config, gemini_service
from app.utils.cors import build_origin_regex
from app.utils.logger import get_logger

logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Job Matcher API",
    description="Resume analysis and job matching backed by Google Gemini",
    version="1.0.0",
)

# CORS middleware: with allow_credentials=True, origins cannot be "*" (must be explicit).
# Browsers get no CORS headers for other origins and block the response themselves.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.allowed_origins,
    allow_origin_regex=build_origin_regex(config.cors),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    expose_headers=["Content-Type"],
)

app.include_router(career_api.router)


@app.on_event("startup")
async def startup_banner():
    """Log where the server listens and warn if Gemini is not configured."""
    base_url = f"http://localhost:{config.server.port}"
    logger.info("[API] Job Matcher Backend is running")
    logger.info(f"[API] Server: {base_url}")
    logger.info(f"[API] Health check: {base_url}/api/health")
    logger.info(f"[API] Analyze resume: POST {base_url}/api/analyze-resume")
    logger.info(f"[API] Match jobs: POST {base_url}/api/match-jobs")

    if not gemini_service.is_configured:
        logger.warning("[API] GEMINI_API_KEY not found in environment or .env file")
        logger.warning("[API] Resume analysis and job matching will return 500 until it is set")
