"""Package logger with a per-process run id stamped on every record."""
from __future__ import annotations

import logging
import sys
import uuid

from csvq.config import settings

_RUN_ID = uuid.uuid4().hex[:12]


def get_run_id() -> str:
    return _RUN_ID


class _RunIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID
        return True


def _build_logger() -> logging.Logger:
    log = logging.getLogger("csvq")
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(run_id)s] %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handler.addFilter(_RunIdFilter())
        log.addHandler(handler)
    log.setLevel(settings.LOG_LEVEL)
    return log


logger = _build_logger()
