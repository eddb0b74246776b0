"""
Process-wide logging setup.

Every module logs through ``logging.getLogger(__name__)``; this module only
decides how records leave the process.  ``configure_logging`` is called once
from the application lifespan (and from ``scripts/seed.py``).
"""
import json
import logging
from datetime import datetime, timezone

# Extra attributes surfaced by the JSON formatter when present on a record.
_EXTRA_FIELDS = (
    "error_code",
    "path",
    "entity",
    "entity_id",
    "organization_id",
    "payroll_id",
    "division_id",
)

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = str(val)
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def configure_logging(level: str = "INFO", fmt: str = "text") -> None:
    """
    Install a single stream handler on the root logger.

    Calling it again replaces the previously installed handler instead of
    stacking a second one.
    """
    global _handler

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler
