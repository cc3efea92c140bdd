"""
ctxlog.errors

Purpose:
    Exception types raised by the tag helpers.
    Callers catch CtxLogError to handle any library failure.

Created:
    2026-10-17
"""

from __future__ import annotations


class CtxLogError(Exception):
    """Base class for ctxlog errors."""


class RandomSourceError(CtxLogError):
    """The random source failed or returned fewer bytes than requested."""

    error_code = "RANDOM_SOURCE_ERROR"

    def __init__(self, message: str, *, requested: int, received: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.requested = requested
        self.received = received

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"
