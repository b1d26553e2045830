"""
Ports — Protocol-based interfaces between the parser and its collaborators.

  CertInfoSource ──CertInfo──▶ CertificateParser ──▶ Result[Certificate]

The source side (network handshake introspection, a text dump on disk, ...)
is owned by the caller; the parser only depends on the line convention.
Adapters satisfy a port structurally by implementing its method.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from railway.result import Result

from certinfo.domain.models import CertInfo, Certificate


@runtime_checkable
class CertInfoSource(Protocol):
    """
    Port: produce the raw cert info lines for one certificate.

    Returns Result[CertInfo]; I/O problems are reported as failures.
    """

    def read(self) -> Result[CertInfo]: ...


@runtime_checkable
class CertificateParser(Protocol):
    """
    Port: turn raw cert info into a Certificate.

    Returns Result.failure(VALIDATION_ERROR, ...) with the first problem
    found; never a partially-filled record.
    """

    def parse(self, cert_info: CertInfo) -> Result[Certificate]: ...
