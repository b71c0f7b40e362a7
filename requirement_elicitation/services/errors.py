"""
Exception types for the generation and export services.

Only `ServiceUnavailableError` moves the fallback chain on to the next
strategy. Protocol errors are turned into a `status=error` turn result by
the strategy that hit them.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for generation failures."""


class ServiceUnavailableError(GenerationError):
    """The remote call could not complete (no connection, timeout)."""


class GenerationProtocolError(GenerationError):
    """The remote call completed but the reply was not usable."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ExportError(Exception):
    """A tracker rejected or could not receive a requirement."""
