"""
Run FastAPI HTTP Server

Starts the FastAPI server for resume analysis and job matching.
"""

import uvicorn
from app.config import get_config

if __name__ == "__main__":
    config = get_config()

    # PORT (Railway) / HOST are already folded into config.server
    uvicorn.run(
        "app.main:app",
        host=config.server.host,
        port=config.server.port,
        reload=False,  # Disable reload for production
        log_level="info",
    )
