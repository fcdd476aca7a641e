"""
Configuration Management

Centralized configuration management using environment variables
with proper validation and type safety.
"""

import os
from typing import List, Optional
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv


# Load environment variables from .env in backend directory (resolve to absolute path)
_backend_root = Path(__file__).resolve().parent.parent
_env_path = _backend_root / ".env"
if _env_path.exists():
    load_dotenv(dotenv_path=str(_env_path))
else:
    # Also load from current working directory so "python backend_server.py" picks up .env
    load_dotenv()


@dataclass
class GeminiConfig:
    """Google Gemini LLM configuration"""
    api_key: Optional[str] = None
    model: str = "gemini-flash-latest"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout_seconds: float = 60.0


@dataclass
class UploadConfig:
    """Resume upload limits"""
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    allowed_extensions: tuple = (".pdf", ".docx", ".txt")


@dataclass
class CorsConfig:
    """Cross-origin policy"""
    allowed_origins: List[str] = field(default_factory=lambda: [
        "http://localhost:5173",
        "https://lovable.dev",
        "https://fb974799-ea5e-4d7f-b7d5-59fd6e909e7d.lovableproject.com",
        "https://job-matcher-backend-production-4600.up.railway.app",
    ])
    # Any subdomain of lovable.dev / lovableproject.com over HTTPS
    origin_patterns: List[str] = field(default_factory=lambda: [
        r"^https://[a-zA-Z0-9-]+\.lovable\.dev$",
        r"^https://[a-zA-Z0-9-]+\.lovableproject\.com$",
    ])


@dataclass
class ServerConfig:
    """HTTP server configuration"""
    host: str = "0.0.0.0"
    port: int = 3001


@dataclass
class Config:
    """Main application configuration"""

    gemini_llm: GeminiConfig
    upload: UploadConfig
    cors: CorsConfig
    server: ServerConfig

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create configuration from environment variables.

        GEMINI_API_KEY is optional here: the server still starts without it
        and the LLM endpoints report the missing key per request.

        Returns:
            Configured Config instance

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        cors = CorsConfig()
        # Extra origins from env (comma-separated), e.g. CORS_ORIGINS=https://app.example.com
        _extra_origins = os.getenv("CORS_ORIGINS", "")
        for o in _extra_origins.split(","):
            o = o.strip().rstrip("/")
            if o and o not in cors.allowed_origins:
                cors.allowed_origins.append(o)

        # Railway and similar hosts provide PORT; SERVER_PORT is the local override
        port = os.getenv("PORT") or os.getenv("SERVER_PORT") or "3001"
        try:
            port_number = int(port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port!r}")

        return cls(
            gemini_llm=GeminiConfig(
                api_key=os.getenv("GEMINI_API_KEY") or None,
                model=os.getenv("GEMINI_MODEL", "gemini-flash-latest"),
                base_url=os.getenv(
                    "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
                ).rstrip("/"),
                timeout_seconds=float(os.getenv("GEMINI_TIMEOUT_SECONDS", "60")),
            ),
            upload=UploadConfig(),
            cors=cors,
            server=ServerConfig(
                host=os.getenv("HOST") or os.getenv("SERVER_HOST", "0.0.0.0"),
                port=port_number,
            ),
        )


def get_config() -> Config:
    """
    Get configuration from environment variables.

    Returns:
        Configuration instance
    """
    return Config.from_env()
