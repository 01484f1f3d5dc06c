#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the spdxdiff library.

This module defines the exception classes raised while rendering an SPDX
document comparison into a worksheet. They carry enough context (field,
document index, column) for a failed report build to point at its cause.

Exception Hierarchy
-------------------
- SpdxDiffError (base exception)

  - ValidationError (option and configuration validation)
    - InputConsistencyError (document labels do not match the documents)

  - AnalysisError (reading a value from a document model failed)

  - ComparisonError (a field import failed for one document)

  - VerificationError (worksheet header does not match the field layout)

  - SinkError (tabular sink misuse)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class SpdxDiffError(Exception):
    """Base exception class for all spdxdiff-specific errors.

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


class ValidationError(SpdxDiffError):
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


class InputConsistencyError(ValidationError):
    """Exception raised when the document labels do not match the compared documents.

    Raised before anything is written to the worksheet.

    Parameters
    ----------
    expected : int
        Number of documents held by the comparison source
    actual : int
        Number of document labels supplied by the caller
    message : str, optional
        Custom error message

    """

    def __init__(self, expected: int, actual: int, message: str | None = None):
        """Initialize the error with the two mismatched counts."""
        if message is None:
            message = (
                f"Number of document names ({actual}) does not match the number of SPDX documents ({expected})"
            )
        super().__init__(message, parameter_name="document_labels", parameter_value=actual)
        self.expected = expected
        self.actual = actual


class AnalysisError(SpdxDiffError):
    """Exception raised when a value cannot be read from a document model.

    Parameters
    ----------
    message : str
        Description of the failure
    value_kind : str, optional
        Kind of value being rendered (e.g. "annotation", "checksum")
    original_error : Exception, optional
        The accessor error that caused this failure

    """

    def __init__(self, message: str, value_kind: str | None = None, original_error: Exception | None = None):
        """Initialize the analysis error."""
        super().__init__(message, original_error=original_error)
        self.value_kind = value_kind


class ComparisonError(SpdxDiffError):
    """Exception raised when a field cannot be imported for one document.

    Parameters
    ----------
    field_name : str
        Name of the field whose import failed
    document_index : int or None
        Index of the document whose value failed to render
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The underlying failure

    """

    def __init__(
        self,
        field_name: str,
        document_index: int | None = None,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the comparison error with the failing field and document."""
        if message is None:
            where = f"document {document_index}" if document_index is not None else "comparison row"
            detail = f": {original_error}" if original_error is not None else ""
            message = f"Error importing field '{field_name}' for {where}{detail}"
        super().__init__(message, original_error=original_error)
        self.field_name = field_name
        self.document_index = document_index


class VerificationError(SpdxDiffError):
    """Exception raised when the worksheet header does not match the field layout.

    Parameters
    ----------
    column_name : str
        Expected header label of the first mismatched column
    column_index : int
        Zero-based index of that column
    message : str, optional
        Custom error message

    """

    def __init__(self, column_name: str, column_index: int, message: str | None = None):
        """Initialize the verification error."""
        if message is None:
            message = f"Column {column_name} missing for SPDX Document worksheet"
        super().__init__(message)
        self.column_name = column_name
        self.column_index = column_index


class SinkError(SpdxDiffError):
    """Exception raised when a tabular sink is addressed incorrectly."""


class DependencyError(SpdxDiffError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    component_name : str
        Name of the component requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        component_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{component_name} requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{component_name} has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            if install_command:
                message += f"\nInstall with: {install_command}"
            else:
                all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
                if all_packages:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                    message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_error=original_import_error)
        self.component_name = component_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command
