"""Centralized logging configuration for the label bot."""

import json
import logging
import os
from datetime import datetime, timezone

# Attributes handlers attach via ``extra=`` that are worth keeping in
# structured output.
CONTEXT_FIELDS = ("repository", "issue", "event", "handler")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for log aggregator compatibility.

    Produces one JSON object per line (NDJSON) with fields:
    timestamp, level, logger, message, any event context passed through
    ``extra`` (repository, issue, event, handler), and optionally exception.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field_name in CONTEXT_FIELDS:
            value = getattr(record, field_name, None)
            if value is not None:
                log_entry[field_name] = value
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


class ActionsFormatter(logging.Formatter):
    """Formatter emitting GitHub Actions workflow commands.

    Warnings and errors become ``::warning::``/``::error::`` annotations so
    they surface on the workflow run page; lower levels are plain lines.
    """

    _COMMANDS = {
        logging.WARNING: "warning",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
    }

    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        command = self._COMMANDS.get(record.levelno)
        if command is None:
            return text
        # Workflow commands are single-line; newlines must be URL-encoded.
        escaped = text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        return f"::{command}::{escaped}"


def configure_logging(level_override: str | None = None) -> None:
    """Configure logging based on environment variables.

    Args:
        level_override: If set, takes precedence over LOG_LEVEL env var.

    Environment variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR).
            Defaults to INFO.
        LOG_FORMAT: Output format. "json" for JSON lines, "actions" for
            GitHub Actions annotations, anything else for human-readable.
            Defaults to "text".
    """
    level_name = (level_override or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    log_format = os.getenv("LOG_FORMAT", "text").lower()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(level)

    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    elif log_format == "actions":
        handler.setFormatter(ActionsFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )

    root_logger.addHandler(handler)

    # PyGithub and its transport log every request at DEBUG
    for name in ("github", "urllib3", "requests"):
        logging.getLogger(name).setLevel(logging.WARNING)
