"""
Structured logging for the quotation PDF service.

Call setup_logging() once at app startup. Render code reports per-document
timing through timed(), which lands in the JSON lines as duration_ms next to
the quotation number, page count and grand total.
"""
import json
import logging
import logging.handlers
import os
import time
from contextlib import contextmanager
from datetime import datetime, timezone

from src.core.paths import LOG_DIR

# Fields callers pass via extra= that are worth keeping in the JSON lines
EXTRA_FIELDS = ("route", "method", "quotation_number", "pages", "grand_total",
                "items", "asset", "duration_ms")
QUIET_LOGGERS = ("urllib3", "werkzeug", "PIL", "reportlab")
LOG_FILE = "quotation.log"


def _extras(record) -> dict:
    return {key: getattr(record, key) for key in EXTRA_FIELDS if hasattr(record, key)}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, quotation context merged in."""
    def format(self, record):
        entry = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        entry.update(_extras(record))
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """Colored console lines; tagged with the quotation number when there is one."""
    COLORS = {
        "DEBUG": "\033[36m", "INFO": "\033[32m",
        "WARNING": "\033[33m", "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.now(timezone.utc).strftime("%H:%M:%S")
        tag = f" [{record.quotation_number}]" if getattr(record, "quotation_number", "") else ""
        line = f"{color}{ts} [{record.levelname[0]}] {record.name}{tag}: {record.getMessage()}{self.RESET}"
        if record.exc_info and record.exc_info[0]:
            line += "\n" + self.formatException(record.exc_info)
        return line


@contextmanager
def timed(logger, message: str, **fields):
    """Log `message` with duration_ms when the block ends.

    Yields the extra dict so the block can add what it learns (page count,
    totals). A block that raises is logged at WARNING and re-raised.
    """
    start = time.perf_counter()
    extra = dict(fields)
    try:
        yield extra
    except Exception:
        extra["duration_ms"] = round((time.perf_counter() - start) * 1000, 1)
        logger.warning("%s failed after %.0fms", message, extra["duration_ms"], extra=extra)
        raise
    extra["duration_ms"] = round((time.perf_counter() - start) * 1000, 1)
    logger.info("%s in %.0fms", message, extra["duration_ms"], extra=extra)


def _file_handler(log_dir: str):
    """Rotating JSON file (5MB × 5), or None when the directory isn't writable."""
    try:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE), maxBytes=5_000_000, backupCount=5)
    except OSError:
        return None
    fh.setFormatter(JSONFormatter())
    return fh


def setup_logging(level=None, json_logs=None, log_dir=None):
    """
    Configure the root logger for the service.

    Args:
        level: log level name (default: LOG_LEVEL env or INFO)
        json_logs: JSON console output (default: True when QUOTE_ENV=production)
        log_dir: rotating file location (default: DATA_DIR/logs)
    """
    level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    if json_logs is None:
        json_logs = os.environ.get("QUOTE_ENV", "").lower() == "production"

    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setFormatter(JSONFormatter() if json_logs else HumanFormatter())
    root.addHandler(console)

    fh = _file_handler(log_dir or LOG_DIR)
    if fh:
        root.addHandler(fh)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("quotation").info(
        "Logging initialized (%s, %s)", level, "json" if json_logs else "console")
