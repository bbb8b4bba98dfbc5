"""
Sanitizers: normalize raw form input into bounded, tag-free strings.

Sanitizers never judge validity. Tag stripping is a single-pass match of
``<[^>]*>``; it is not an HTML parser and does not handle nested or malformed
markup. contains_dangerous_chars is advisory only and is not applied by the
other sanitizers.
"""

from __future__ import annotations

import re
from typing import List, Pattern

import structlog

from form_validation.models.options import SecurityLimits

logger = structlog.get_logger(__name__)

SECURITY_LIMITS = SecurityLimits()

# \s plus U+FEFF, which form input picks up from pasted text
_WHITESPACE_RUN = re.compile(r"[\s\ufeff]+")
_EDGE_WHITESPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+\Z")
_HTML_TAG = re.compile(r"<[^>]*>")

# Common XSS markers, matched case-insensitively anywhere in the input
_DANGEROUS_PATTERNS: List[Pattern[str]] = [
    re.compile(r"<script", re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"on\w+\s*=", re.IGNORECASE),  # onclick=, onload=, ...
    re.compile(r"<iframe", re.IGNORECASE),
    re.compile(r"eval\(", re.IGNORECASE),
]


def trim(value: str) -> str:
    """Strip leading and trailing whitespace, including U+FEFF."""
    return _EDGE_WHITESPACE.sub("", value)


def sanitize_whitespace(value: str) -> str:
    """Trim and collapse internal whitespace runs to a single space."""
    return _WHITESPACE_RUN.sub(" ", trim(value))


def sanitize_email(email: str) -> str:
    """Trim, lower-case, and bound to EMAIL_MAX_LENGTH."""
    return trim(email).lower()[: SECURITY_LIMITS.EMAIL_MAX_LENGTH]


def sanitize_password(password: str) -> str:
    """
    Bound a password to PASSWORD_MAX_LENGTH.

    Leading/trailing spaces and case are preserved; they may be intentional.
    """
    return password[: SECURITY_LIMITS.PASSWORD_MAX_LENGTH]


def _strip_tags(value: str) -> str:
    return _HTML_TAG.sub("", value)


def sanitize_name(name: str) -> str:
    """Normalize whitespace, strip tags, bound to NAME_MAX_LENGTH."""
    return _strip_tags(sanitize_whitespace(name))[: SECURITY_LIMITS.NAME_MAX_LENGTH]


def sanitize_text(text: str) -> str:
    """Normalize whitespace, strip tags, bound to GENERAL_TEXT_MAX_LENGTH."""
    return _strip_tags(sanitize_whitespace(text))[: SECURITY_LIMITS.GENERAL_TEXT_MAX_LENGTH]


def contains_dangerous_chars(value: str) -> bool:
    """True if value contains a script/iframe tag, javascript: URI, inline handler, or eval(."""
    for pattern in _DANGEROUS_PATTERNS:
        if pattern.search(value):
            logger.debug("dangerous_content_detected", pattern=pattern.pattern)
            return True
    return False


def is_within_length_limit(value: str, max_length: int, min_length: int = 0) -> bool:
    """True if the trimmed length lies in [min_length, max_length]."""
    length = len(trim(value))
    return min_length <= length <= max_length
