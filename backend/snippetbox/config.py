"""
Snippetbox Backend - Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types and formats, and provides a module-level `settings` object.
Who:   Read by the application factory, the lifespan hook and the CLI.
When:  Loaded once at import time; the CLI builds its own instance from flags.

Settings:
    LISTEN_ADDR   host:port the server binds to (default ":4000", all interfaces)
    STATIC_DIR    directory served under /static/ (default "./ui/static")
    LOG_LEVEL     standard logging level name (default "INFO")
"""

from typing import Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def split_listen_addr(addr: str) -> Tuple[str, int]:
    """
    Split a ``host:port`` listen address into its parts.

    An empty host (``":4000"``) means every interface, IPv4 and IPv6, and is
    returned as ``""``. IPv6 hosts may be bracketed (``"[::1]:4000"``).

    Raises:
        ValueError: If the port is missing, non-numeric or out of range.
    """
    host, sep, port_text = addr.rpartition(":")
    if not sep:
        raise ValueError(f"Invalid listen address '{addr}': expected host:port")
    if not (port_text.isascii() and port_text.isdigit()):
        raise ValueError(f"Invalid listen address '{addr}': port must be a number")
    port = int(port_text)
    if port > 65535:
        raise ValueError(f"Invalid listen address '{addr}': port must be 0-65535")
    host = host.strip("[]")
    return host, port


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development, so the server
    starts with no environment at all.
    """

    # ── Server ────────────────────────────────────────────────────────────
    # Format: host:port, host may be empty ("" = every interface)
    listen_addr: str = Field(
        default=":4000",
        description="TCP network address the HTTP server listens on",
    )

    # ── Static Files ──────────────────────────────────────────────────────
    # Relative paths resolve against the working directory of the process
    static_dir: str = Field(
        default="./ui/static",
        description="Directory served under the /static/ URL prefix",
    )

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("listen_addr")
    @classmethod
    def validate_listen_addr(cls, v: str) -> str:
        """Rejects addresses that cannot be split into host and port."""
        split_listen_addr(v)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        upper = v.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {VALID_LOG_LEVELS}")
        return upper

    @property
    def host(self) -> str:
        return split_listen_addr(self.listen_addr)[0]

    @property
    def port(self) -> int:
        return split_listen_addr(self.listen_addr)[1]

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


settings = Settings()
