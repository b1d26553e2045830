"""
Attribute tokenizer — cert info lines → case-insensitive attribute map.

Attribute capitalization differs between TLS library versions
("Start date" vs "Start Date"), so names are lowercased before lookup.
Values are kept verbatim: no trimming, since the date formats are matched
exactly.
"""

from __future__ import annotations

from collections.abc import Iterable

from certinfo.domain.models import AttributeMap


def parse_attribute(line: str) -> tuple[str, str] | None:
    """
    Split a line at its first colon into (name, value).

    Returns None for lines without a colon (blank lines, continuations).

        >>> parse_attribute("Start date:Jan 10 08:29:52 2023 GMT")
        ('Start date', 'Jan 10 08:29:52 2023 GMT')
    """
    name, sep, value = line.partition(":")
    if not sep:
        return None
    return name, value


def parse_attributes(lines: Iterable[str]) -> AttributeMap:
    """Build the attribute map; a later line wins over an earlier one with the same name."""
    attributes: AttributeMap = {}
    for line in lines:
        attribute = parse_attribute(line)
        if attribute is not None:
            name, value = attribute
            attributes[name.lower()] = value
    return attributes
