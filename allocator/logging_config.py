"""
Logging setup for the allocator console and any embedding application.

- LOG_LEVEL from env (default WARNING, so the questionnaire output stays clean).
- Single-line JSON records when LOG_JSON=1.
- Records go to stderr; stdout belongs to the questionnaire.
- Only enum values and strategy ids are logged, never free-text answers.
"""
import json
import logging
import os
import sys


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S") + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0]:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging() -> None:
    """Configure the root logger from LOG_LEVEL / LOG_JSON. Safe to call twice."""
    level_name = (os.getenv("LOG_LEVEL") or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)

    use_json = os.getenv("LOG_JSON", "").lower() in ("1", "true", "yes")

    root = logging.getLogger()
    root.setLevel(level)
    for h in root.handlers[:]:
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if use_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    root.addHandler(handler)
