from __future__ import annotations

from typing import Any

from resume_analyzer.core.config import Settings, settings

# The API only reads (health) and posts resumes or replies.
_ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]


def cors_options(config: Settings = settings) -> dict[str, Any]:
    """Keyword arguments for CORSMiddleware built from settings."""
    regex = (config.cors_allow_origin_regex or "").strip() or None
    origins = list(config.cors_allowed_origins)
    # Browsers reject a credentialed response with a wildcard origin.
    credentials = config.cors_allow_credentials and "*" not in origins
    return {
        "allow_origins": origins,
        "allow_origin_regex": regex,
        "allow_credentials": credentials,
        "allow_methods": _ALLOWED_METHODS,
        "allow_headers": ["*"],
    }
