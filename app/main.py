"""
Application entrypoint.

Configures logging and re-exports the FastAPI `app` instance from
`app.api.main` so `uvicorn app.main:app` works.
"""

from app.config import get_config
from app.utils.logger import get_logger, setup_logging

config = get_config()
setup_logging(config)
logger = get_logger(__name__)

from app.api.main import app  # noqa: E402,F401
