#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the html2jsx library.

This module defines the exception classes raised by the converter, the DOM
provider and the command-line front end. They carry more specific error
information than the generic built-ins.

Exception Hierarchy
-------------------
- Html2JsxError (base exception)

  - ValidationError (parameter/option validation, helper misuse)

  - ParsingError (HTML parser backend failures)

  - DependencyError (missing parser backends)

  - ConfigError (configuration file problems)

Unrecognised DOM node kinds are not errors: the converter logs a warning
and skips them.

"""

from typing import Any


class Html2JsxError(Exception):
    """Base exception class for all html2jsx-specific errors.

    Catching this will catch every error raised by the library.

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


class ValidationError(Html2JsxError):
    """Exception raised for invalid parameters or options.

    This exception covers validation errors such as:
    - Invalid option values (e.g. a non-whitespace indent unit)
    - Unknown parser backend names
    - Helper functions called with impossible arguments (negative repeat counts)

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


class ParsingError(Html2JsxError):
    """Exception raised when the HTML parser backend rejects the input.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class DependencyError(Html2JsxError):
    """Exception raised when a required parser backend is not installed.

    Parameters
    ----------
    component : str
        Name of the component requiring the dependency
    missing_packages : list[str]
        Distribution names of the missing packages
    message : str, optional
        Custom error message. If not provided, generates one with an install hint
    original_error : Exception, optional
        The underlying import/lookup failure

    Attributes
    ----------
    component : str
        Name of the component
    missing_packages : list[str]
        Missing packages

    """

    def __init__(
        self,
        component: str,
        missing_packages: list[str],
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error with missing package information."""
        if message is None:
            packages = " ".join(missing_packages)
            message = (
                f"'{component}' requires the following packages to be installed: {', '.join(missing_packages)}\n"
                f"Install them with: pip install {packages}"
            )
        super().__init__(message, original_error=original_error)
        self.component = component
        self.missing_packages = missing_packages


class ConfigError(Html2JsxError):
    """Exception raised when a configuration file cannot be read or is invalid.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the offending configuration file
    original_error : Exception, optional
        The underlying decoding or I/O error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


__all__ = [
    "Html2JsxError",
    "ValidationError",
    "ParsingError",
    "DependencyError",
    "ConfigError",
]
