"""
Bills Demo Backend: Bill File Service
=====================================

What:  Writes a bill rendering to disk.
Who:   Called by the formatter CLI after the operator renames the bill.
How:   Opens the target with O_TRUNC and permission bits 0644 (owner
       read/write, others read; the process umask still applies), so an
       existing file is overwritten in place.

Failures are raised as FileStorageError with the path and OS error in the
context; the caller decides whether they are fatal.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from app.config import settings
from app.exceptions import FileStorageError

logger = logging.getLogger(__name__)

# rw-r--r--
FILE_MODE = 0o644


class BillFileService:
    """
    Persists bill renderings as UTF-8 text files.

    Args:
        output_path: Override the default target (used in tests).
                     If None, uses settings.bill_output_path.
    """

    def __init__(self, output_path: Optional[Union[str, Path]] = None):
        self.output_path = Path(output_path or settings.bill_output_path)

    def write_rendering(self, text: str, path: Optional[Union[str, Path]] = None) -> Path:
        """
        Write `text` to `path` (or the configured output path).

        Returns:
            The path written.

        Raises:
            FileStorageError if the file cannot be opened or written.
        """
        target = Path(path) if path is not None else self.output_path
        data = text.encode("utf-8")

        try:
            fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(data)
        except OSError as e:
            logger.error("Failed to write bill to %s: %s", target, str(e))
            raise FileStorageError(
                message=str(e),
                context={"path": str(target), "os_error": str(e)},
            ) from e

        logger.info("Bill written: %s (%d bytes)", target, len(data))
        return target


file_service = BillFileService()
