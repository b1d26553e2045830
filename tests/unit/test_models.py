"""
Unit tests for domain models — value objects.

Verifies frozen dataclass behavior, CertInfo construction
and the Certificate dict rendering.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from certinfo.domain.models import CertInfo, Certificate


def _certificate() -> Certificate:
    return Certificate(
        subject="CN=localhost",
        issuer="CN=Test CA",
        start_date=datetime(2023, 1, 10, 8, 29, 52, tzinfo=UTC),
        expire_date=datetime(2025, 10, 30, 8, 29, 52, tzinfo=UTC),
        serial_number="1ee8b1",
    )


class TestCertInfo:
    """Verify CertInfo value object behavior."""

    def test_default_is_empty(self) -> None:
        """
        GIVEN no lines
        WHEN a CertInfo is created
        THEN data is an empty tuple.
        """
        assert CertInfo().data == ()

    def test_of_accepts_any_iterable(self) -> None:
        """
        GIVEN a generator of lines
        WHEN CertInfo.of is called
        THEN the lines are stored in order as a tuple.
        """
        cert_info = CertInfo.of(line for line in ["Subject:a", "Issuer:b"])
        assert cert_info.data == ("Subject:a", "Issuer:b")

    def test_frozen_prevents_mutation(self) -> None:
        """
        GIVEN a CertInfo
        WHEN attempting to replace its data
        THEN an AttributeError is raised.
        """
        cert_info = CertInfo.of(["Subject:a"])
        with pytest.raises(AttributeError):
            cert_info.data = ()  # type: ignore[misc]


class TestCertificate:
    """Verify Certificate value object behavior."""

    def test_frozen_prevents_mutation(self) -> None:
        """
        GIVEN a Certificate
        WHEN attempting to modify a field
        THEN an AttributeError is raised.
        """
        certificate = _certificate()
        with pytest.raises(AttributeError):
            certificate.subject = "CN=other"  # type: ignore[misc]

    def test_equality_is_by_value(self) -> None:
        """
        GIVEN two Certificates built from the same values
        WHEN compared
        THEN they are equal.
        """
        assert _certificate() == _certificate()

    def test_to_dict_renders_iso_dates(self) -> None:
        """
        GIVEN a Certificate
        WHEN to_dict is called
        THEN dates are ISO-8601 strings with a UTC offset.
        """
        assert _certificate().to_dict() == {
            "subject": "CN=localhost",
            "issuer": "CN=Test CA",
            "start_date": "2023-01-10T08:29:52+00:00",
            "expire_date": "2025-10-30T08:29:52+00:00",
            "serial_number": "1ee8b1",
        }
