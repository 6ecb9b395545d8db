"""Tests for value-to-text helpers."""

import datetime
import uuid
from decimal import Decimal
from enum import Enum
from xml.etree import ElementTree

import pytest

from procscript.utils.text import bytes_to_hex, format_decimal, quote, to_text


class Shade(Enum):
    DARK = 2


class Named(str, Enum):
    ALPHA = "alpha"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", "plain"),
        (True, "True"),
        (7, "7"),
        (2.5, "2.5"),
        (Decimal("1.10"), "1.10"),
        (b"\x00\xff", "0x00FF"),
        (bytearray(b"\x10"), "0x10"),
        (datetime.datetime(2024, 1, 2, 3, 4, 5), "2024-01-02 03:04:05"),
        (datetime.date(2024, 1, 2), "2024-01-02"),
        (datetime.time(3, 4, 5), "03:04:05"),
        (uuid.UUID("3f2504e0-4f89-11d3-9a0c-0305e82c3301"), "3F2504E0-4F89-11D3-9A0C-0305E82C3301"),
        (Shade.DARK, "DARK"),
        (Named.ALPHA, "alpha"),
    ],
)
def test_to_text(value: object, expected: str) -> None:
    assert to_text(value) == expected


def test_to_text_falls_back_to_str() -> None:
    class Custom:
        def __str__(self) -> str:
            return "custom"

    assert to_text(Custom()) == "custom"


def test_to_text_xml_element() -> None:
    element = ElementTree.Element("item", {"id": "1"})

    assert to_text(element) == '<item id="1" />'


def test_bytes_to_hex_empty() -> None:
    assert bytes_to_hex(b"") == "0x"


def test_format_decimal_avoids_exponent() -> None:
    assert format_decimal(Decimal("1E-7")) == "0.0000001"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("abc", "'abc'"),
        ("O'Brien", "'O''Brien'"),
        ("''", "''''''"),
        ("", "''"),
    ],
)
def test_quote_doubles_single_quotes(text: str, expected: str) -> None:
    assert quote(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("C:\\temp", "'C:\\temp'"),
        ("a\\'b", "'a\\''b'"),
        ("a\nb", "'a\nb'"),
        ("tab\there", "'tab\there'"),
        ("caf\u00e9 \u65e5\u672c", "'caf\u00e9 \u65e5\u672c'"),
    ],
)
def test_quote_keeps_other_characters_verbatim(text: str, expected: str) -> None:
    assert quote(text) == expected
