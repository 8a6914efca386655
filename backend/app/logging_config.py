"""
Bills Demo Backend: Logging Setup
=================================

What:  One place that configures the root logger for both programs.
Why:   The server and the CLI share a log format but not a stream: the
       server logs to stdout (container friendly), the CLI logs to stderr
       because its stdout is the user-facing output.
"""

import logging
import sys
from typing import Optional, TextIO

from app.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """
    Configure the root logger.

    Args:
        level:  Level name override; defaults to settings.log_level.
        stream: Output stream; defaults to sys.stdout.
    """
    level_name = (level or settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(stream or sys.stdout)],
        force=True,  # Override any existing logging config
    )

    # These log every request/connection at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
