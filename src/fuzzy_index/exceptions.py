"""Exception hierarchy for fuzzy-index."""


class FuzzyIndexError(Exception):
    """Base exception for all fuzzy-index errors."""

    exit_code: int = 1
    user_message: str = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message


# Search Errors
class SearchError(FuzzyIndexError):
    """Search-related errors."""

    exit_code = 30
    user_message = "Search error"


class PatternTooLongError(SearchError, AssertionError):
    """A subpattern wider than the matcher's bit width reached the matcher.

    Pattern compilation always chunks patterns, so this signals a broken
    internal invariant rather than bad user input.
    """

    exit_code = 31
    user_message = "Search pattern chunk exceeds the matcher bit width"


class InvalidFieldError(SearchError):
    """A field definition is malformed."""

    exit_code = 32
    user_message = "Invalid field definition"


# Config Errors
class ConfigError(FuzzyIndexError):
    """Configuration errors."""

    exit_code = 20
    user_message = "Configuration error"


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    exit_code = 21
    user_message = "Configuration file not found"


class ConfigValidationError(ConfigError):
    """Configuration validation failed."""

    exit_code = 22
    user_message = "Invalid configuration"


# Data Errors
class DataError(FuzzyIndexError):
    """Errors loading objects to index."""

    exit_code = 40
    user_message = "Data error"


class DataFileNotFoundError(DataError):
    """Data file not found."""

    exit_code = 41
    user_message = "Data file not found"


class DataFormatError(DataError):
    """Data file could not be parsed."""

    exit_code = 42
    user_message = "Data file must be a JSON array or JSON Lines of objects"
