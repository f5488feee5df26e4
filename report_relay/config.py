"""
Environment-backed settings for the relay.
Provides load_settings() for the application factory.
"""

import os
from typing import Dict, Any, Optional
from dotenv import load_dotenv

# Load .env variables from the project root
load_dotenv()

DEFAULT_AI_API_URL = "http://ai.sda.changan.com.cn/api/v1/chat/completions"
DEFAULT_AI_MODEL = "321"


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value in (None, ""):
        return None
    return float(value)


def load_settings() -> Dict[str, Any]:
    """
    Read relay settings from the environment.

    The credential is never given a default. When AI_API_KEY is unset the
    upstream call goes out without an Authorization header and the upstream
    reports the authentication failure.

    Returns:
        dict: Keys suitable for Flask's app.config.
    """
    model = os.getenv("AI_MODEL", DEFAULT_AI_MODEL)

    return {
        "AI_API_KEY": os.getenv("AI_API_KEY"),
        "AI_API_URL": os.getenv("AI_API_URL", DEFAULT_AI_API_URL),
        "AI_MODEL": model,
        "AI_VISION_MODEL": os.getenv("AI_VISION_MODEL", model),
        "AI_API_TIMEOUT": _optional_float(os.getenv("AI_API_TIMEOUT")),
        "CORS_ORIGINS": [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ],
    }
