"""
Domain models — immutable values for raw cert info and parsed certificates.

CertInfo is what the TLS layer hands over; Certificate is what a successful
parse produces. Both are frozen dataclasses and carry no behavior beyond
construction and rendering.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeAlias

# lowercase attribute name → raw value (everything after the first colon)
AttributeMap: TypeAlias = dict[str, str]


@dataclass(frozen=True, slots=True)
class CertInfo:
    """
    Raw certificate metadata as an ordered sequence of text lines.

    Each line is nominally `Name:Value`; nothing else is guaranteed.
    Lines without a colon, duplicates and arbitrary ordering are all
    tolerated by the parser.
    """

    data: tuple[str, ...] = ()

    @classmethod
    def of(cls, lines: Iterable[str]) -> CertInfo:
        """Build a CertInfo from any iterable of lines (list, generator, file)."""
        return cls(data=tuple(lines))


@dataclass(frozen=True, slots=True)
class Certificate:
    """
    Descriptive metadata of a peer certificate.

    Dates are timezone-aware UTC instants. No ordering between start_date
    and expire_date is enforced. The serial number is kept in the textual
    form the TLS layer reported.
    """

    subject: str
    issuer: str
    start_date: datetime
    expire_date: datetime
    serial_number: str

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready rendering with ISO-8601 dates."""
        return {
            "subject": self.subject,
            "issuer": self.issuer,
            "start_date": self.start_date.isoformat(),
            "expire_date": self.expire_date.isoformat(),
            "serial_number": self.serial_number,
        }
