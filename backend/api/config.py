"""API configuration constants.

Single source of truth for settings used across the API layer. Values come
from the environment, with a .env file in the project root loaded first.
"""

import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

# Load .env from project root (find_dotenv searches parent directories)
load_dotenv(find_dotenv())


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    return int(value)


# Logging
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")  # "json" or "text"
LOG_LEVEL = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)

# Template selection: unset means always the first registered template
STORY_RANDOM_SEED = _optional_int(os.getenv("STORY_RANDOM_SEED"))

# CORS
CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]
