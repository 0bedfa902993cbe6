"""
Security utilities for the OG image service.

Provides XML escaping for text interpolated into SVG markup and
normalisation of untrusted query values.
"""

import re
import sys
from typing import Optional

_LEADING_INT = re.compile(r"\s*([+-]?)0*([0-9]+)")

# CPython refuses longer decimal strings in int() and str()
MAX_SCORE_DIGITS = getattr(sys, "get_int_max_str_digits", lambda: 4300)() or 4300

# Code points that may not appear in an XML 1.0 document, escaped or not
_INVALID_XML_CHARS = re.compile(
    "[^\t\n\r\x20-%s%s-%s%s-%s]" % (chr(0xD7FF), chr(0xE000), chr(0xFFFD), chr(0x10000), chr(0x10FFFF))
)


def strip_invalid_xml_chars(value: str) -> str:
    """Drop characters XML 1.0 forbids outright, such as NUL and other C0 controls."""
    return _INVALID_XML_CHARS.sub("", value)


def escape_xml(value: str) -> str:
    """
    Escape the XML-significant characters of a text value.

    Args:
        value: Untrusted text to place inside SVG markup

    Returns:
        Text with &, <, > and " replaced by entities; all other characters unchanged
    """
    return (
        value
        .replace('&', '&amp;')
        .replace('<', '&lt;')
        .replace('>', '&gt;')
        .replace('"', '&quot;')
    )


def normalize_country_code(code: Optional[str]) -> str:
    """Upper-case a country code; missing codes become an empty string."""
    return strip_invalid_xml_chars(code or "").upper()


def parse_score(raw: Optional[str]) -> Optional[int]:
    """
    Parse a score query value by its leading integer.

    Leading whitespace and a sign are accepted and trailing garbage is
    ignored, so "78", " 78" and "78abc" all give 78.

    Args:
        raw: The raw query value

    Returns:
        The parsed integer, or None when the value is missing, empty,
        does not start with a number or has too many digits to convert
    """
    if not raw:
        return None
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    sign, digits = match.groups()
    if len(digits) > MAX_SCORE_DIGITS:
        return None
    try:
        return int(sign + digits)
    except ValueError:
        return None
