"""
certinfo — typed certificate records from TLS "cert info" text.

Turns the free-text `Name:Value` lines a TLS layer reports for a peer
certificate (libcurl's CURLINFO_CERTINFO, for instance) into a validated,
immutable Certificate, tolerating the attribute capitalization and date
format differences between library versions.

Built on the Railway-Oriented Programming (ROP) framework: every fallible
step returns a Result instead of raising.
"""

from certinfo.domain.certificate import CertInfoParser, parse_certificate
from certinfo.domain.models import CertInfo, Certificate

__all__ = ["CertInfo", "Certificate", "CertInfoParser", "parse_certificate"]

__version__ = "0.1.0"
