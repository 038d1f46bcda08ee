"""Exceptions raised by the toolshed core."""
from __future__ import annotations


class ToolshedError(Exception):
    """Base class for toolshed errors."""


class ValidationError(ToolshedError):
    """Input is malformed or out of range."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
