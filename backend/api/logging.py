"""Structured logging infrastructure for the API layer.

Provides JSON-formatted logging for production and human-readable
logging for development, plus a StoryLogger helper for story generation events.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

# Extra record attributes copied into JSON output when present
EXTRA_FIELDS = (
    "story_id", "stage", "theme", "animal", "template_id",
    "word_count", "duration", "error_type", "failed_at_stage",
)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields if present
        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Create console handler
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


class StoryLogger:
    """Logger for story generation events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("story_generation")

    def generation_started(self, theme: str, animal: str) -> None:
        self.logger.info(
            "Story generation started",
            extra={"stage": "started", "theme": theme, "animal": animal},
        )

    def generation_completed(
        self,
        story_id: int,
        template_id: str,
        word_count: int,
        duration: Optional[float] = None,
    ) -> None:
        extra = {
            "story_id": story_id,
            "stage": "completed",
            "template_id": template_id,
            "word_count": word_count,
        }
        if duration is not None:
            extra["duration"] = round(duration, 4)
        self.logger.info("Story generation completed", extra=extra)

    def generation_failed(self, error: Exception, stage: str = "generate") -> None:
        extra = {"stage": "failed", "error_type": type(error).__name__, "failed_at_stage": stage}
        if isinstance(error, ValueError):
            # Bad input is the caller's problem; no traceback needed
            self.logger.warning(f"Story generation rejected: {error}", extra=extra)
        else:
            self.logger.error(f"Story generation failed: {error}", extra=extra, exc_info=True)


# Global story logger instance
story_logger = StoryLogger()
