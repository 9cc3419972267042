#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdstream library.

The renderer itself is total over well-formed (balanced) event streams and
never raises on its own. The exceptions below cover misuse of the public
API, missing optional dependencies, and the opt-in balance check.

Exception Hierarchy
-------------------
- MdStreamError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer or parser)

  - RenderingError (output generation failures)
    - UnbalancedEventsError (Start/End mismatch, only with check_balance)

  - DependencyError (missing/incompatible packages)

"""

from __future__ import annotations

from typing import Any


class MdStreamError(Exception):
    """Base exception class for all mdstream-specific errors.

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


class ValidationError(MdStreamError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    For example, passing MarkdownParserOptions to the HTML renderer.

    Parameters
    ----------
    converter_name : str
        Name of the renderer or parser that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(MdStreamError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnbalancedEventsError(RenderingError):
    """Exception raised when an event stream violates the Start/End pairing contract.

    Only raised when the renderer runs with ``check_balance=True``; otherwise
    balanced input is an unchecked precondition.

    Parameters
    ----------
    message : str
        Description of the imbalance
    event : Event or None
        The offending event, or None when the stream ended with open tags
    open_tags : list
        Tags still open at the point of failure, outermost first

    """

    def __init__(self, message: str, event: Any = None, open_tags: list[Any] | None = None):
        """Initialize the imbalance error."""
        super().__init__(message, rendering_stage="balance-check")
        self.event = event
        self.open_tags = list(open_tags or [])


class DependencyError(MdStreamError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the feature requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The import failure that triggered the error

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        if message is None:
            message = self._build_message(converter_name, missing_packages, version_mismatches, install_command)
        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command
        self.original_import_error = original_import_error

    @staticmethod
    def _build_message(
        converter_name: str,
        missing: list[tuple[str, str]],
        mismatched: list[tuple[str, str, str]],
        install_command: str,
    ) -> str:
        lines = []
        if missing:
            names = ", ".join(f"'{name}{spec}'" for name, spec in missing)
            lines.append(f"{converter_name} requires the following packages: {names}")
        for name, required, installed in mismatched:
            lines.append(f"{converter_name} needs '{name}{required}' but {installed} is installed")

        if not install_command:
            requirements = [f'"{name}{spec}"' if spec else name for name, spec in missing]
            requirements += [f'"{name}{required}"' for name, required, _ in mismatched]
            install_command = f"pip install --upgrade {' '.join(requirements)}"
        lines.append(f"Install with: {install_command}")
        return "\n".join(lines)
