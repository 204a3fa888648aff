"""Log Setup — JSON lines for the cluster log shipper, plain text for local runs.

Invariants:
    - Each JSON line carries timestamp (UTC), level, logger and message
    - Request context (IDs, method, path, status, latency, version, pod) is copied
      from LogRecord extras only when a caller attached it
    - setup_logging is idempotent: repeated calls replace, never stack, its handler

Design Decisions:
    - One flat JSON object per line: the mesh's log collector indexes top-level keys
    - The handler is named so lifespan restarts in tests can find and replace it
"""

import logging
import json
from datetime import datetime, timezone

REQUEST_CONTEXT_FIELDS = (
    "request_id", "correlation_id", "method", "path", "status_code",
    "duration_ms", "version", "pod", "experiment_enabled", "error_code",
)

_HANDLER_NAME = "demo_microservice"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _request_context(record: logging.LogRecord) -> dict:
    attrs = vars(record)
    return {
        key: attrs[key] for key in REQUEST_CONTEXT_FIELDS
        if attrs.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_request_context(record),
        }
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Install the service handler on the root logger."""
    formatter = JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
