"""
Unit tests for sanitizers: whitespace, email, password, name, text,
dangerous-content detection, length bounds, and SECURITY_LIMITS.
"""

import pytest

from form_validation.rules.sanitization import (
    SECURITY_LIMITS,
    contains_dangerous_chars,
    is_within_length_limit,
    sanitize_email,
    sanitize_name,
    sanitize_password,
    sanitize_text,
    sanitize_whitespace,
)


# -----------------------------------------------------------------------------
# SECURITY_LIMITS
# -----------------------------------------------------------------------------


def test_security_limits_values():
    assert SECURITY_LIMITS.EMAIL_MAX_LENGTH == 254
    assert SECURITY_LIMITS.PASSWORD_MIN_LENGTH == 6
    assert SECURITY_LIMITS.PASSWORD_MAX_LENGTH == 128
    assert SECURITY_LIMITS.NAME_MAX_LENGTH == 100
    assert SECURITY_LIMITS.GENERAL_TEXT_MAX_LENGTH == 500


def test_security_limits_frozen():
    with pytest.raises(Exception):
        SECURITY_LIMITS.EMAIL_MAX_LENGTH = 10
    assert SECURITY_LIMITS.EMAIL_MAX_LENGTH == 254


# -----------------------------------------------------------------------------
# sanitize_whitespace
# -----------------------------------------------------------------------------


class TestSanitizeWhitespace:
    def test_trims_and_collapses(self) -> None:
        assert sanitize_whitespace("  hello   big \t\n world  ") == "hello big world"

    def test_whitespace_only_becomes_empty(self) -> None:
        assert sanitize_whitespace(" \t \n ") == ""

    def test_clean_input_unchanged(self) -> None:
        assert sanitize_whitespace("a b c") == "a b c"

    def test_byte_order_marks_treated_as_whitespace(self) -> None:
        assert sanitize_whitespace("a\ufeff\ufeffb") == "a b"
        assert sanitize_whitespace("\ufeff  hi \ufeff") == "hi"


# -----------------------------------------------------------------------------
# sanitize_email
# -----------------------------------------------------------------------------


class TestSanitizeEmail:
    def test_trims_and_lowercases(self) -> None:
        assert sanitize_email("  USER@Example.com ") == "user@example.com"

    def test_trims_byte_order_mark(self) -> None:
        assert sanitize_email("\ufeffUser@Example.com") == "user@example.com"

    def test_idempotent(self) -> None:
        once = sanitize_email("  Mixed.Case@Example.ORG ")
        assert sanitize_email(once) == once

    def test_exact_boundary_not_truncated(self) -> None:
        email = "a" * 242 + "@example.com"
        assert len(email) == 254
        assert sanitize_email(email) == email

    def test_truncates_over_limit(self) -> None:
        email = "b" * 300 + "@example.com"
        assert len(sanitize_email(email)) == 254
        assert sanitize_email(email) == "b" * 254


# -----------------------------------------------------------------------------
# sanitize_password
# -----------------------------------------------------------------------------


class TestSanitizePassword:
    def test_preserves_spaces_and_case(self) -> None:
        assert sanitize_password("  PassWord 1 ") == "  PassWord 1 "

    def test_truncates_to_max(self) -> None:
        assert sanitize_password("x" * 200) == "x" * 128

    def test_exact_boundary(self) -> None:
        assert sanitize_password("y" * 128) == "y" * 128


# -----------------------------------------------------------------------------
# sanitize_name / sanitize_text
# -----------------------------------------------------------------------------


class TestSanitizeName:
    def test_strips_tags_after_whitespace_normalization(self) -> None:
        assert sanitize_name("<b>Jo   hn</b>") == "Jo hn"

    def test_strips_script_tags_but_keeps_inner_text(self) -> None:
        assert sanitize_name("  <script>alert(1)</script>Ann ") == "alert(1)Ann"

    def test_tag_removal_can_leave_edge_spaces(self) -> None:
        # Whitespace is normalized before tags are stripped
        assert sanitize_name("<i>x</i> Smith <br>") == "x Smith "

    def test_unclosed_tag_left_alone(self) -> None:
        assert sanitize_name("a < b") == "a < b"

    def test_truncates_to_name_limit(self) -> None:
        assert sanitize_name("n" * 150) == "n" * 100

    def test_idempotent_on_clean_name(self) -> None:
        once = sanitize_name("  Mary   Jane ")
        assert once == "Mary Jane"
        assert sanitize_name(once) == once


class TestSanitizeText:
    def test_strips_tags_and_collapses(self) -> None:
        assert sanitize_text("Hello   <em>there</em>\n friend") == "Hello there friend"

    def test_truncates_to_general_limit(self) -> None:
        assert len(sanitize_text("t" * 800)) == 500

    def test_exact_boundary(self) -> None:
        assert sanitize_text("t" * 500) == "t" * 500


# -----------------------------------------------------------------------------
# contains_dangerous_chars
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value",
    [
        "<script>alert(1)</script>",
        "<SCRIPT src=x>",
        "javascript:alert(1)",
        "JavaScript:void(0)",
        '<img src=x onerror="x()">',
        "<div onClick = go()>",
        "<iframe src='evil'>",
        "eval(payload)",
        "EVAL(x)",
    ],
)
def test_dangerous_content_detected(value):
    assert contains_dangerous_chars(value) is True


@pytest.mark.parametrize(
    "value",
    ["hello world", "", "John O'Neil", "evaluate (this)", "script kiddie", "score=10"],
)
def test_safe_content_not_flagged(value):
    assert contains_dangerous_chars(value) is False


def test_dangerous_check_is_advisory_only():
    # Sanitizers do not consult the dangerous-content check
    assert sanitize_text("javascript:alert(1)") == "javascript:alert(1)"


# -----------------------------------------------------------------------------
# is_within_length_limit
# -----------------------------------------------------------------------------


class TestIsWithinLengthLimit:
    def test_inclusive_bounds(self) -> None:
        assert is_within_length_limit("abc", 3, 3) is True
        assert is_within_length_limit("abcd", 3) is False
        assert is_within_length_limit("ab", 5, 3) is False

    def test_trims_before_measuring(self) -> None:
        assert is_within_length_limit("   abc   ", 3) is True

    def test_default_min_allows_empty(self) -> None:
        assert is_within_length_limit("   ", 10) is True

    def test_byte_order_mark_trimmed(self) -> None:
        assert is_within_length_limit("\ufeffabc\ufeff", 3, 3) is True
