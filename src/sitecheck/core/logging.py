# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Logging setup for the ``sitecheck`` logger tree.

Both output formats scrub credentials (API keys, bearer tokens, Redis
passwords) from messages before they leave the process.
"""

import json
import logging
import re
import sys
from typing import Any

_REDACTIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(X-API-Key:\s*[\w\-.~+/]{4})[\w\-.~+/]*", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"(Bearer\s+[\w\-.~+/]{10})[\w\-.~+/]*"), r"\1[REDACTED]"),
    (re.compile(r"(rediss?://[^:/@\s]*:)[^@\s]+(@)"), r"\1[REDACTED]\2"),
]

# Record attributes copied into JSON output when a caller passes them via ``extra``.
_EXTRA_FIELDS = ("request_id", "target")

# Third-party loggers that log every outbound request at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore")


def redact_sensitive(text: str) -> str:
    for pattern, replacement in _REDACTIONS:
        text = pattern.sub(replacement, text)
    return text


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_sensitive(record.getMessage()),
        }
        for name in _EXTRA_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                payload[name] = value
        if record.exc_info and record.exc_info[1] is not None:
            payload["exception"] = redact_sensitive(
                f"{type(record.exc_info[1]).__name__}: {record.exc_info[1]}"
            )
        return json.dumps(payload)


class TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return redact_sensitive(super().format(record))


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Send ``sitecheck`` logs to stderr in *fmt* (``json`` or ``text``).

    Replaces any handlers installed by an earlier call.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger("sitecheck")
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(TextFormatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s"))
    logger.addHandler(handler)

    if numeric_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
