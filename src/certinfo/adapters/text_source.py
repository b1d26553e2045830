"""
Text cert info source — adapter for file-based cert info dumps.

Implements the CertInfoSource port for UTF-8 text where each line is one
`Name:Value` attribute, as written by `curl --certinfo`-style tooling.
Line terminators are stripped; nothing else is altered, so values keep
their exact spacing.

All exceptions are caught at this adapter boundary and returned as
Result failures.
"""

from __future__ import annotations

from pathlib import Path

import structlog
from railway import ErrorCode
from railway.result import Result

from certinfo.domain.models import CertInfo

log = structlog.get_logger()


class TextCertInfoSource:
    """
    Read cert info lines from a text file or an in-memory string.

    Exactly one of `path` or `text` must be given; a `text` source never
    touches the filesystem.
    """

    def __init__(
        self,
        path: Path | str | None = None,
        *,
        text: str | None = None,
        encoding: str = "utf-8",
    ) -> None:
        if (path is None) == (text is None):
            raise ValueError("Exactly one of path or text is required")
        self._path = Path(path) if path is not None else None
        self._text = text
        self._encoding = encoding

    @classmethod
    def from_text(cls, text: str) -> TextCertInfoSource:
        return cls(text=text)

    def read(self) -> Result[CertInfo]:
        """
        Return the cert info lines.

        Returns Result.failure(NOT_FOUND, ...) if the file does not exist,
        Result.failure(TECHNICAL_ERROR, ...) for any other read error.
        """
        if self._text is not None:
            return Result.success(CertInfo.of(self._text.splitlines()))

        assert self._path is not None
        if not self._path.is_file():
            log.warning("source.not_found", path=str(self._path))
            return Result.failure(ErrorCode.NOT_FOUND, f"Cert info file not found: {self._path}")

        return Result.from_computation(
            self._read_file,
            ErrorCode.TECHNICAL_ERROR,
            f"Failed to read cert info file {self._path}",
        ).peek(
            lambda cert_info: log.info(
                "source.read", path=str(self._path), lines=len(cert_info.data)
            )
        )

    def _read_file(self) -> CertInfo:
        assert self._path is not None
        return CertInfo.of(self._path.read_text(encoding=self._encoding).splitlines())
