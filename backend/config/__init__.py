"""
Configuration module for the Bedtime Story Generator.

Re-exports story constants so callers can import from one place.
"""

from .story import STORY_CONSTANTS, WORDS_PER_MINUTE, PARAGRAPH_DELIMITER

__all__ = [
    "STORY_CONSTANTS",
    "WORDS_PER_MINUTE",
    "PARAGRAPH_DELIMITER",
]
