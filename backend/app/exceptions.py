"""
Bills Demo Backend: Exception Hierarchy
=======================================

What:  Application-specific exceptions.
How:   Each exception carries a user-facing message and an optional context
       dict. The service maps them to JSON responses in main.py; the CLI
       reports them on stdout.

Exception Hierarchy:
    BillsError (base)          → 500 Internal Server Error
    └── FileStorageError       → bill rendering could not be written
"""

from typing import Any, Dict, Optional


class BillsError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable description (safe to show to users)
        context:  Additional debug info (logged, never returned to clients)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class FileStorageError(BillsError):
    """
    Raised when writing a bill rendering to disk fails.

    When:    Permission denied, target is a directory, disk full, I/O error.
    Context: `path` and the underlying `os_error`.
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
