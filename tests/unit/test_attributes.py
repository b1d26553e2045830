"""
Unit tests for the attribute tokenizer.

Test categories:
  - Single line splitting: first colon wins, value kept verbatim
  - Map building: lowercase names, last duplicate wins, colon-less lines dropped
"""

from __future__ import annotations

from certinfo.domain.attributes import parse_attribute, parse_attributes


class TestParseAttribute:
    """Split one cert info line at its first colon."""

    def test_splits_name_and_value(self) -> None:
        """
        GIVEN "Subject:CN=localhost"
        WHEN parsed
        THEN name and value are split at the colon.
        """
        assert parse_attribute("Subject:CN=localhost") == ("Subject", "CN=localhost")

    def test_splits_at_first_colon_only(self) -> None:
        """
        GIVEN a date value that itself contains colons
        WHEN parsed
        THEN only the first colon separates name from value.
        """
        assert parse_attribute("Start date:Jan 10 08:29:52 2023 GMT") == (
            "Start date",
            "Jan 10 08:29:52 2023 GMT",
        )

    def test_value_is_not_trimmed(self) -> None:
        """
        GIVEN whitespace around the colon
        WHEN parsed
        THEN name and value keep their whitespace.
        """
        assert parse_attribute("Issuer : CN=a ") == ("Issuer ", " CN=a ")

    def test_line_without_colon_is_none(self) -> None:
        """
        GIVEN a line with no colon
        WHEN parsed
        THEN None is returned.
        """
        assert parse_attribute("-----BEGIN CERTIFICATE-----") is None
        assert parse_attribute("") is None

    def test_empty_name_and_value(self) -> None:
        """
        GIVEN a lone colon
        WHEN parsed
        THEN both name and value are empty strings.
        """
        assert parse_attribute(":") == ("", "")


class TestParseAttributes:
    """Build the lowercase attribute map from a line sequence."""

    def test_names_are_lowercased(self) -> None:
        """
        GIVEN mixed-case attribute names
        WHEN the map is built
        THEN keys are lowercase and values untouched.
        """
        attributes = parse_attributes(["Serial Number:AbC", "Start Date:x"])
        assert attributes == {"serial number": "AbC", "start date": "x"}

    def test_lines_without_colon_are_dropped(self) -> None:
        """
        GIVEN only colon-less lines
        WHEN the map is built
        THEN it is empty.
        """
        assert parse_attributes(["", "noise", "    continuation"]) == {}

    def test_empty_input_gives_empty_map(self) -> None:
        assert parse_attributes([]) == {}

    def test_last_duplicate_wins_regardless_of_case(self) -> None:
        """
        GIVEN "Start date" and then "START DATE"
        WHEN the map is built
        THEN the later line's value is kept.
        """
        attributes = parse_attributes(
            ["Start date:Jan 10 08:29:52 2023 GMT", "START DATE:2024-02-01 00:00:00 GMT"]
        )
        assert attributes == {"start date": "2024-02-01 00:00:00 GMT"}

    def test_is_deterministic(self, localhost_lines: list[str]) -> None:
        """
        GIVEN the same input twice
        WHEN the map is built each time
        THEN both maps are equal.
        """
        assert parse_attributes(localhost_lines) == parse_attributes(localhost_lines)

    def test_accepts_generator(self) -> None:
        attributes = parse_attributes(line for line in ["Issuer:CN=a"])
        assert attributes == {"issuer": "CN=a"}
