# =============================================================================
# triggerlines/utils/logger.py - Process-wide logger with structured extras
# =============================================================================
# Usage: logger.info("llm_used", extra={"provider": "gemini", "latency_ms": 12.5})
# Extra fields are rendered as key=value pairs after the event name.
# =============================================================================

import logging
import sys

LOGGER_NAME = "triggerlines"

# Attributes every LogRecord has; anything else came in through `extra=`.
_RESERVED = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class KeyValueFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {k: v for k, v in record.__dict__.items() if k not in _RESERVED}
        if not extras:
            return base
        pairs = " ".join(f"{k}={v!r}" if isinstance(v, str) else f"{k}={v}" for k, v in extras.items())
        return f"{base} {pairs}"


def configure_logging(level: str = "INFO") -> logging.Logger:
    log = logging.getLogger(LOGGER_NAME)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(KeyValueFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        log.addHandler(handler)
    log.setLevel(level.upper())
    return log


logger = logging.getLogger(LOGGER_NAME)
