"""Tests for exception hierarchy."""

import pytest

from fuzzy_index.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigValidationError,
    DataError,
    DataFileNotFoundError,
    DataFormatError,
    FuzzyIndexError,
    InvalidFieldError,
    PatternTooLongError,
    SearchError,
)


class TestFuzzyIndexError:
    """Tests for base FuzzyIndexError."""

    def test_default_message(self) -> None:
        """Test default error message."""
        error = FuzzyIndexError()
        assert str(error) == "An error occurred"
        assert error.user_message == "An error occurred"
        assert error.exit_code == 1

    def test_custom_message(self) -> None:
        """Test custom error message."""
        error = FuzzyIndexError("Custom error")
        assert str(error) == "Custom error"

    def test_custom_user_message(self) -> None:
        """Test custom user message."""
        error = FuzzyIndexError("Internal", user_message="User-friendly message")
        assert error.user_message == "User-friendly message"


class TestSearchErrors:
    """Tests for search-related errors."""

    def test_search_error(self) -> None:
        """Test base search error."""
        assert SearchError().exit_code == 30

    def test_pattern_too_long(self) -> None:
        """Test the chunk width error is also an assertion failure."""
        error = PatternTooLongError()
        assert error.exit_code == 31
        assert isinstance(error, AssertionError)
        assert isinstance(error, SearchError)

    def test_invalid_field(self) -> None:
        """Test invalid field error."""
        error = InvalidFieldError()
        assert error.exit_code == 32
        assert "field" in error.user_message.lower()


class TestConfigErrors:
    """Tests for config-related errors."""

    def test_config_error(self) -> None:
        """Test base config error."""
        assert ConfigError().exit_code == 20

    def test_config_not_found(self) -> None:
        """Test config not found error."""
        assert ConfigNotFoundError().exit_code == 21

    def test_config_validation(self) -> None:
        """Test config validation error."""
        assert ConfigValidationError().exit_code == 22


class TestDataErrors:
    """Tests for data loading errors."""

    def test_data_errors(self) -> None:
        """Test data error exit codes."""
        assert DataError().exit_code == 40
        assert DataFileNotFoundError().exit_code == 41
        assert DataFormatError().exit_code == 42


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        ("error_class", "parent"),
        [
            (SearchError, FuzzyIndexError),
            (PatternTooLongError, SearchError),
            (InvalidFieldError, SearchError),
            (ConfigNotFoundError, ConfigError),
            (ConfigValidationError, ConfigError),
            (DataFileNotFoundError, DataError),
            (DataFormatError, DataError),
            (DataError, FuzzyIndexError),
        ],
    )
    def test_inheritance(self, error_class: type, parent: type) -> None:
        """Test subclass relationships."""
        assert issubclass(error_class, parent)

    def test_catch_base(self) -> None:
        """Test catching the base error catches every subclass."""
        with pytest.raises(FuzzyIndexError):
            raise DataFormatError("bad line")
