"""
Composition root — wires settings, logging, source and parser.

This is the only place where concrete adapters are instantiated;
everything else depends on the Protocol ports.

Responsibilities:
  1. Configure structlog (once, by the hosting process)
  2. Load and validate configuration from the environment
  3. Create the parser from settings
  4. Run the pipeline for a cert info dump on disk
"""

from __future__ import annotations

import logging
from pathlib import Path

import structlog
from railway.result import Result

from certinfo.adapters.text_source import TextCertInfoSource
from certinfo.config import AppSettings
from certinfo.domain.certificate import CertInfoParser
from certinfo.domain.models import Certificate
from certinfo.pipeline import run_pipeline


def configure_structlog(log_level: str = "INFO") -> None:
    """
    Configure structlog for structured, human-readable console logging.

    Unknown level names fall back to INFO.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def create_parser(settings: AppSettings) -> CertInfoParser:
    """Build the cert info parser with the configured date formats."""
    return CertInfoParser(date_formats=settings.parser.date_formats)


def parse_file(path: Path | str, settings: AppSettings | None = None) -> Result[Certificate]:
    """
    Parse a cert info text dump into a Certificate.

    Settings are loaded from the environment when not given. Logging is
    left as the caller configured it; call configure_structlog() once at
    process start.
    """
    settings = settings or AppSettings()
    return run_pipeline(
        source=TextCertInfoSource(path),
        parser=create_parser(settings),
    )
