"""Tests for named format predicates."""

from schemaguard.validators.formats import (
    FORMAT_CHECKS,
    format_checks,
    is_calendar_date,
    is_date,
    is_email,
)


class TestFormats:
    """Test the format table."""

    def test_email(self):
        """email only needs an @."""
        assert is_email("a@b")
        assert is_email("@")
        assert not is_email("no-at-sign")

    def test_date_shape(self):
        """date matches digit groups at the end of the string."""
        assert is_date("2024-01-15")
        assert is_date("due 2024-01-15")
        assert is_date("2024-99-99")
        assert not is_date("2024-01-15 ")
        assert not is_date("2024-01-15\n")
        assert not is_date("24-01-15")

    def test_date_requires_ascii_digits(self):
        """Non-ASCII digits are not accepted."""
        assert not is_date("٢٠٢٤-٠١-١٥")

    def test_calendar_date(self):
        """Strict dates need a real month and day and nothing else."""
        assert is_calendar_date("2024-01-15")
        assert not is_calendar_date("2024-15-01")
        assert not is_calendar_date("due 2024-01-15")

    def test_format_checks(self):
        """Strictness only swaps the date predicate."""
        assert format_checks() == FORMAT_CHECKS
        strict = format_checks(strict_dates=True)
        assert strict["date"] is is_calendar_date
        assert strict["email"] is is_email
        assert FORMAT_CHECKS["date"] is is_date
