"""
Certificate assembly — attribute map → Certificate, on the railway.

Pipeline:
  CertInfo lines
    → parse_attributes()            (lowercase name → raw value)
    → subject → issuer → start date → expire date → serial number
    → Certificate

Each field extractor returns Result; the first Failure short-circuits the
rest, so a failure always names the earliest missing or malformed field
and no partial Certificate is ever built.

Missing-attribute messages embed the full attribute map to help diagnose
library output changes. The expire date message does not embed the map.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from functools import partial
from typing import Any, TypeAlias

import structlog
from railway.result import Result

from certinfo.domain.attributes import parse_attributes
from certinfo.domain.dates import DEFAULT_DATE_FORMATS, parse_date
from certinfo.domain.models import AttributeMap, CertInfo, Certificate

log = structlog.get_logger()

_Fields: TypeAlias = dict[str, Any]


# ─────────────────────── Field Extractors ───────────────────────


def parse_subject(attributes: AttributeMap) -> Result[str]:
    return Result.from_optional(
        attributes.get("subject"),
        f"missing Subject attribute in {attributes!r}",
    )


def parse_issuer(attributes: AttributeMap) -> Result[str]:
    return Result.from_optional(
        attributes.get("issuer"),
        f"missing issuer attribute in {attributes!r}",
    )


def parse_start_date(
    attributes: AttributeMap,
    formats: Sequence[str] = DEFAULT_DATE_FORMATS,
) -> Result[datetime]:
    return Result.from_optional(
        attributes.get("start date"),
        f"missing start date attribute in {attributes!r}",
    ).flat_map(lambda value: parse_date(value, formats))


def parse_expire_date(
    attributes: AttributeMap,
    formats: Sequence[str] = DEFAULT_DATE_FORMATS,
) -> Result[datetime]:
    return Result.from_optional(
        attributes.get("expire date"),
        "missing expire date attribute",
    ).flat_map(lambda value: parse_date(value, formats))


def parse_serial_number(attributes: AttributeMap) -> Result[str]:
    return Result.from_optional(
        attributes.get("serial number"),
        f"Missing serial number attribute in {attributes!r}",
    )


# ─────────────────────── Record Assembler ───────────────────────


def _collect(
    name: str,
    extractor: Callable[[AttributeMap], Result[Any]],
    attributes: AttributeMap,
) -> Callable[[_Fields], Result[_Fields]]:
    """Railway segment: run one extractor and add its value to the fields collected so far."""
    return lambda fields: extractor(attributes).map(lambda value: {**fields, name: value})


def parse_certificate(
    cert_info: CertInfo,
    date_formats: Sequence[str] = DEFAULT_DATE_FORMATS,
) -> Result[Certificate]:
    """
    Parse raw cert info into a Certificate.

    Supports the known output variants of TLS libraries:
      - attribute names: "Start date" vs "Start Date"
      - dates: "Jan 10 08:29:52 2023 GMT" vs "2023-01-10 08:29:52 GMT"

    Returns Result.failure(VALIDATION_ERROR, ...) for the first field that
    is missing or cannot be parsed.
    """
    attributes = parse_attributes(cert_info.data)
    return (
        Result.success({})
        .flat_map(_collect("subject", parse_subject, attributes))
        .flat_map(_collect("issuer", parse_issuer, attributes))
        .flat_map(
            _collect("start_date", partial(parse_start_date, formats=date_formats), attributes)
        )
        .flat_map(
            _collect("expire_date", partial(parse_expire_date, formats=date_formats), attributes)
        )
        .flat_map(_collect("serial_number", parse_serial_number, attributes))
        .map(lambda fields: Certificate(**fields))
    )


class CertInfoParser:
    """
    Parse cert info lines into a Certificate.

    Implements the CertificateParser port. The date formats are tried in
    the given order; the default covers the two known TLS library outputs.
    """

    def __init__(self, date_formats: Sequence[str] = DEFAULT_DATE_FORMATS) -> None:
        self._date_formats = tuple(date_formats)

    @property
    def date_formats(self) -> tuple[str, ...]:
        return self._date_formats

    def parse(self, cert_info: CertInfo) -> Result[Certificate]:
        return (
            parse_certificate(cert_info, self._date_formats)
            .peek(
                lambda certificate: log.info(
                    "certificate.parsed",
                    subject=certificate.subject,
                    serial_number=certificate.serial_number,
                )
            )
            .peek_failure(
                lambda err: log.warning(
                    "certificate.parse_failed",
                    lines=len(cert_info.data),
                    error=err.message,
                )
            )
        )
