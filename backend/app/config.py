"""
Bills Demo Backend: Application Configuration
=============================================

What:  Centralized configuration using Pydantic Settings.
Why:   Typed environment variable loading, validated once at import time.
How:   Pydantic Settings reads environment variables (or a .env file) and
       exposes a singleton `settings` object.
Who:   Imported by the server entry point, logging setup, and the CLI.

Every default reproduces the fixed behavior of the demo: the server listens
on port 8080 and the formatter writes `bill.txt` in the working directory.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── Server ────────────────────────────────────────────────────────────
    app_host: str = Field(default="0.0.0.0")
    app_port: int = Field(default=8080, ge=1024, le=65535)

    # What: Verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Bill Formatter ────────────────────────────────────────────────────
    # What: Where the CLI writes its final rendering (relative to CWD)
    bill_output_path: str = Field(default="bill.txt")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


settings = Settings()
