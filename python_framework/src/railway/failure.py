"""
Failure description — the payload carried on the failure track.

An ErrorCode classifies the failure; the message is the human-readable
signal callers show or log. The originating exception, when there is one,
travels along for diagnostics but never takes part in equality.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, unique
from typing import Optional


@unique
class ErrorCode(Enum):
    """Classification of a failure."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Input is malformed or incomplete (missing attribute, unparseable value)."""

    NOT_FOUND = "NOT_FOUND"
    """The requested resource (file, record) does not exist."""

    TECHNICAL_ERROR = "TECHNICAL_ERROR"
    """I/O or other infrastructure failure."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    """Unclassified failure."""


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    Immutable failure descriptor: code, message, optional exception, timestamp.

    >>> desc = FailureDescription(ErrorCode.VALIDATION_ERROR, "missing issuer attribute")
    >>> desc.message
    'missing issuer attribute'
    """

    code: ErrorCode
    message: str
    exception: Optional[BaseException] = field(default=None, repr=False)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def full_stack_trace(self) -> str:
        """Message followed by the formatted exception chain, if any."""
        if self.exception is None:
            return self.message
        tb = "".join(
            traceback.format_exception(
                type(self.exception), self.exception, self.exception.__traceback__
            )
        )
        return f"{self.message}\n{tb}"

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
