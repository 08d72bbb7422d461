#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the highlightwords library.

This module defines the exception classes raised while resolving search
terms, finding chunks and loading configuration. They carry more context
than the generic built-ins they wrap.

Exception Hierarchy
-------------------
- HighlightWordsError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidSearchTermError (uncompilable or unsupported search term)
    - InvalidChunkError (malformed span returned by a custom chunk finder)

  - ConfigurationError (unreadable or malformed configuration file)

  - InputDecodeError (input text that is not valid UTF-8)

"""

from typing import Any


class HighlightWordsError(Exception):
    """Base exception class for all highlightwords-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(HighlightWordsError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidSearchTermError(ValidationError):
    """Exception raised when a search term cannot be turned into a matcher.

    Raised for patterns the regular expression engine rejects and for
    search words of an unsupported type. No partial result is produced.

    Parameters
    ----------
    term : any
        The offending search term
    message : str, optional
        Custom error message. If not provided, one naming the term is generated
    original_error : Exception, optional
        The original exception, typically a ``re.error``

    Attributes
    ----------
    term : any
        The offending search term

    """

    def __init__(self, term: Any, message: str | None = None, original_error: Exception | None = None):
        """Initialize the invalid search term error."""
        if message is None:
            message = f"Invalid search term {term!r}"
            if original_error is not None:
                message = f"{message}: {original_error}"
        super().__init__(
            message, parameter_name="search_words", parameter_value=term, original_error=original_error
        )
        self.term = term


class InvalidChunkError(ValidationError):
    """Exception raised when a custom chunk finder returns a malformed span.

    Parameters
    ----------
    chunk : any
        The span object that could not be interpreted
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, chunk: Any, message: str | None = None, original_error: Exception | None = None):
        """Initialize the invalid chunk error."""
        if message is None:
            message = f"Custom chunk finder returned an invalid span: {chunk!r}"
        super().__init__(message, parameter_name="find_chunks", parameter_value=chunk, original_error=original_error)
        self.chunk = chunk


class ConfigurationError(HighlightWordsError):
    """Exception raised when a configuration file cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path to the problematic configuration file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class InputDecodeError(HighlightWordsError):
    """Exception raised when input text cannot be decoded as UTF-8.

    Parameters
    ----------
    source : str
        Input file path, or ``"<stdin>"``
    message : str, optional
        Custom error message. If not provided, one naming the source is generated
    original_error : Exception, optional
        The ``UnicodeDecodeError`` raised while reading

    """

    def __init__(self, source: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the input decode error."""
        if message is None:
            message = f"Cannot decode input {source} as UTF-8"
            if original_error is not None:
                message = f"{message}: {original_error}"
        super().__init__(message, original_error=original_error)
        self.source = source


__all__ = [
    "HighlightWordsError",
    "ValidationError",
    "InvalidSearchTermError",
    "InvalidChunkError",
    "ConfigurationError",
    "InputDecodeError",
]
