from __future__ import annotations

import logging
import os
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None, fmt: str = DEFAULT_FORMAT) -> None:
    """
    Configure root logging for the bootstrap process.

    ``level`` falls back to ``NODESTARTER_LOG_LEVEL`` and then ``INFO``.
    """
    resolved = (level or os.getenv("NODESTARTER_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=resolved, format=fmt)
    logging.getLogger("nodestarter").setLevel(resolved)
