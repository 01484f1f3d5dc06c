#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/utils/decorators.py
"""Utility decorators for optional dependency checks.

The worksheet sink needs openpyxl, which is an optional extra. The decorator
below turns a missing or outdated package into a :class:`DependencyError`
with an install hint instead of a bare ImportError deep inside a build.
"""

from __future__ import annotations

import importlib
from functools import wraps
from typing import Any, Callable, List, Tuple

from spdxdiff.exceptions import DependencyError
from spdxdiff.utils.packages import check_version_requirement


def requires_dependencies(component_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    component_name : str
        Name of the component (e.g., "xlsx sink"), used in error messages.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "openpyxl")
        - import_name: Module name for import statement (e.g., "openpyxl")
        - version_spec: Version requirement (e.g., ">=3.1" or "" for any version)

    Returns
    -------
    Callable
        Decorated callable that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("xlsx sink", [("openpyxl", "openpyxl", ">=3.1")])
        ... def create(workbook, sheet_name):
        ...     from openpyxl.styles import Font
        ...     # worksheet setup here

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            version_mismatches = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e
                    continue

                if version_spec:
                    meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                    if not meets_requirement:
                        version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

            if missing or version_mismatches:
                raise DependencyError(
                    component_name=component_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator
