"""Log output for the gateway client.

Every call the dispatcher makes to the gateway gets a short id, held in
``request_id_var`` while the call is in flight, so the log lines for one
call can be picked out of interleaved async traffic::

    2026-01-01 12:00:00 DEBUG    [3f9c2a1b7d40] woprbot.core.client - POST https://api.wopr.bot/v1/chat/completions -> 200 (412 ms)

Nothing is configured on import. Applications opt in with ``setup_logging()``.
"""

import logging
import sys
import uuid
from contextvars import ContextVar

PACKAGE_LOGGER = "woprbot"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(request_id)s] %(name)s - %(message)s"

# Transport libraries whose per-connection chatter is capped at WARNING
TRANSPORT_LOGGERS = ("httpx", "httpcore")

# "-" outside of a gateway call
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIDFilter(logging.Filter):
    """Stamp each record with the id of the gateway call that emitted it."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("-")  # type: ignore[attr-defined]
        return True


def generate_request_id() -> str:
    """Return a fresh 12-hex-digit id for one gateway call."""
    return uuid.uuid4().hex[:12]


def setup_logging(level: str = "INFO") -> None:
    """Send ``woprbot`` log records to stderr, tagged with the call id.

    Only the ``woprbot`` logger is touched; the root logger and the
    application's own handlers are left alone. Calling it again replaces
    the handler rather than adding a second one.

    Args:
        level: Level name such as ``"DEBUG"`` or ``"warning"``. Unknown
            names fall back to INFO.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIDFilter())

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(numeric_level)
    pkg_logger.handlers.clear()
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False

    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
