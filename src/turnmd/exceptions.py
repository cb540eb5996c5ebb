#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the turnmd library.

This module defines specialized exception classes for the error conditions
that can occur while converting an HTML tree to Markdown. These exceptions
provide more specific error information than generic built-ins.

Exception Hierarchy
-------------------
- TurnmdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidInputError (value passed to ``convert`` is not convertible)

  - ConfigurationError (malformed conversion rule)

  - DependencyError (missing optional tree builder)

"""

from typing import Any


class TurnmdError(Exception):
    """Root of every error turnmd raises.

    ``except TurnmdError`` catches input, option, rule and dependency
    failures alike; the CLI maps it to exit code 1.

    Parameters
    ----------
    message : str
        Text shown to the user
    original_error : Exception, optional
        Lower-level exception this error was raised from

    Attributes
    ----------
    message : str
        Same as ``str(error)``
    original_error : Exception or None
        Lower-level cause, when there is one

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(TurnmdError, ValueError):
    """An option name or option value was rejected.

    Raised for unknown option names (in ``from_dict``, ``create_updated``
    and keyword overrides) and for values outside an option's allowed set,
    such as a heading style other than setext/atx or a fence shorter than
    three characters.

    Parameters
    ----------
    message : str
        What was wrong and what is accepted
    parameter_name : str, optional
        Option name as the caller spelled it
    parameter_value : any, optional
        Rejected value
    original_error : Exception, optional
        Lower-level cause

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidInputError(ValidationError, TypeError):
    """Exception raised when ``convert`` receives a value it cannot convert.

    Only strings and element, document or fragment nodes can be converted.
    Text nodes, comments, ``None`` and arbitrary objects are rejected.

    Parameters
    ----------
    input_value : any
        The rejected input
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    Attributes
    ----------
    input_type : str
        Name of the rejected value's type

    """

    def __init__(self, input_value: Any, message: str | None = None):
        """Initialize the invalid input error."""
        self.input_type = type(input_value).__name__
        if message is None:
            message = f"{input_value!r} is not a string, or an element/document/fragment node."
        super().__init__(message, parameter_name="input", parameter_value=input_value)


class ConfigurationError(TurnmdError, TypeError):
    """Exception raised when a conversion rule is set up incorrectly.

    A rule's ``filter`` must be a tag name, a collection of tag names or a
    predicate. Any other shape is a programming error in rule setup and is
    reported instead of being treated as a silent no-match.

    Parameters
    ----------
    message : str, optional
        Custom error message
    rule_name : str, optional
        Key or name of the offending rule
    filter_value : any, optional
        The unrecognised filter value

    Attributes
    ----------
    rule_name : str or None
        Key or name of the offending rule
    filter_value : any
        The unrecognised filter value

    """

    def __init__(self, message: str | None = None, rule_name: str | None = None, filter_value: Any = None):
        """Initialize the configuration error."""
        if message is None:
            prefix = f"Rule '{rule_name}': " if rule_name else ""
            message = (
                f"{prefix}`filter` needs to be a string, a collection of strings, or a callable "
                f"(got {type(filter_value).__name__})"
            )
        super().__init__(message)
        self.rule_name = rule_name
        self.filter_value = filter_value


class DependencyError(TurnmdError):
    """Exception raised when an optional tree builder is not installed.

    Parameters
    ----------
    message : str
        Description of the missing dependency
    missing_packages : list[str], optional
        Packages that need to be installed
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    missing_packages : list[str]
        Packages that need to be installed
    install_command : str
        Command to install missing dependencies

    """

    def __init__(
        self,
        message: str,
        missing_packages: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error with package details."""
        self.missing_packages = missing_packages or []
        self.install_command = ""
        if self.missing_packages:
            self.install_command = "pip install " + " ".join(self.missing_packages)
            message += f"\nInstall with: {self.install_command}"
        super().__init__(message, original_error=original_error)
