"""
Basic functionality tests for passgen.
"""

import pytest

from passgen.charsets import DIGITS, LOWER_CASE_LETTERS, SYMBOLS, UPPER_CASE_LETTERS
from passgen.exceptions import (
    EmptySelectionError,
    InvalidArgumentError,
    LengthTooShortError,
    PassgenException,
    UnknownCharacterSetError,
)
from passgen.utils.validation import (
    MIN_LENGTH,
    check_request,
    normalize_selection,
    validate_length,
)


class TestValidation:
    """Test input validation."""

    def test_valid_lengths(self):
        """Test that valid lengths pass validation."""
        for length in [4, 5, 16, 128, 10_000]:
            assert validate_length(length), f"Length {length} should be valid"

    def test_invalid_lengths(self):
        """Test that invalid lengths fail validation."""
        invalid_lengths = [
            3,
            0,
            -4,
            4.0,  # Not an int
            "8",
            None,
            True,  # bool is not a length
        ]

        for length in invalid_lengths:
            assert not validate_length(length), f"Length {length!r} should be invalid"

    def test_min_length_is_fixed(self):
        """Test that the minimum does not depend on the selection size."""
        assert MIN_LENGTH == 4
        with pytest.raises(LengthTooShortError):
            check_request([DIGITS], 3)

    def test_normalize_selection(self):
        """Test deduplication and canonical ordering."""
        selection = normalize_selection([UPPER_CASE_LETTERS, DIGITS, UPPER_CASE_LETTERS, SYMBOLS])
        assert selection == [DIGITS, SYMBOLS, UPPER_CASE_LETTERS]

        assert normalize_selection({SYMBOLS, LOWER_CASE_LETTERS}) == [LOWER_CASE_LETTERS, SYMBOLS]
        assert normalize_selection([]) == []

    def test_check_request(self):
        """Test a valid request returns the normalized selection."""
        assert check_request({DIGITS, LOWER_CASE_LETTERS}, 8) == [DIGITS, LOWER_CASE_LETTERS]

    def test_check_request_errors(self):
        """Test validation error messages."""
        with pytest.raises(EmptySelectionError, match="At least one character set"):
            check_request([], 8)

        with pytest.raises(LengthTooShortError, match="at least 4"):
            check_request([DIGITS], 2)

    def test_non_integer_length(self):
        """Test that a non-integer length is reported as such."""
        for length in (8.0, "8", None):
            with pytest.raises(InvalidArgumentError, match="must be an integer") as excinfo:
                check_request([DIGITS], length)
            assert not isinstance(excinfo.value, LengthTooShortError)

    def test_non_character_set_items(self):
        """Test that anything but character sets is refused."""
        with pytest.raises(InvalidArgumentError, match="collection of character sets"):
            check_request(DIGITS, 6)

        with pytest.raises(InvalidArgumentError, match="got str"):
            check_request(["digits"], 6)


class TestExceptions:
    """Test the exception hierarchy."""

    def test_hierarchy(self):
        """Test that validation errors share a base."""
        for error in (EmptySelectionError, LengthTooShortError, UnknownCharacterSetError):
            assert issubclass(error, InvalidArgumentError)
            assert issubclass(error, ValueError)
            assert issubclass(error, PassgenException)

    def test_catch_as_base(self):
        """Test catching through the base class."""
        with pytest.raises(PassgenException):
            check_request([], 8)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
