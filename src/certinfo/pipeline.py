"""
Pipeline — read cert info from a source and parse it into a Certificate.

  source.read()
    → parser.parse(cert_info)

Both stages return Result[T]; a failure in reading short-circuits parsing.
All I/O is behind the injected ports.
"""

from __future__ import annotations

import structlog
from railway.result import Result

from certinfo.domain.models import Certificate
from certinfo.domain.ports import CertificateParser, CertInfoSource

log = structlog.get_logger()


def run_pipeline(
    source: CertInfoSource,
    parser: CertificateParser,
) -> Result[Certificate]:
    """
    Read and parse one certificate's cert info.

    Returns Result[Certificate] on success, or the failure from the first
    failing stage.
    """
    return (
        source.read()
        .flat_map(parser.parse)
        .peek(lambda certificate: log.debug("pipeline.completed", **certificate.to_dict()))
        .peek_failure(lambda err: log.error("pipeline.failed", failure=str(err)))
    )
