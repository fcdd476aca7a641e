"""
Origin allow-list for browser clients.
"""

import re
from typing import Optional

from app.config import CorsConfig


def build_origin_regex(cors: CorsConfig) -> str:
    """Merge the subdomain patterns into one regex for CORSMiddleware (matched with fullmatch)."""
    return "|".join(f"(?:{p.lstrip('^').rstrip('$')})" for p in cors.origin_patterns)


def is_origin_allowed(origin: Optional[str], cors: CorsConfig) -> bool:
    """
    Same decision CORSMiddleware makes for a request's Origin header.

    A missing Origin (curl, mobile apps, server-to-server) is always allowed.
    """
    if not origin:
        return True
    if origin in cors.allowed_origins:
        return True
    return any(re.fullmatch(p, origin) for p in cors.origin_patterns)
