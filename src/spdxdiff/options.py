#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/spdxdiff/options.py
"""Configuration for comparison report builds.

Options are immutable dataclasses; use :meth:`CloneFrozenMixin.create_updated`
to derive a modified copy. Options can also be loaded from a JSON, TOML or
YAML file, or from the ``[tool.spdxdiff]`` table of a ``pyproject.toml``.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

if sys.version_info >= (3, 11):
    import tomllib
    from typing import Self
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
    from typing_extensions import Self

import yaml

from spdxdiff.constants import DEFAULT_SHEET_NAME, MAX_CHARACTERS_PER_CELL
from spdxdiff.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ReportOptions(CloneFrozenMixin):
    """Options controlling how a comparison report is built.

    Parameters
    ----------
    max_workers : int or None, default None
        Worker threads used to render documents in parallel. ``None`` lets
        :class:`concurrent.futures.ThreadPoolExecutor` choose.
    max_cell_chars : int, default 32000
        Maximum length of a multi-line cell before trailing lines are elided.
    sheet_name : str, default "Document"
        Name of the worksheet created for the report.
    parallel_fields : bool, default False
        Import fields concurrently as well as documents. Only enable for
        sinks that tolerate concurrent writes to distinct cells.

    """

    max_workers: Optional[int] = field(
        default=None,
        metadata={"help": "Worker threads for parallel document rendering (default: executor default)", "type": int},
    )
    max_cell_chars: int = field(
        default=MAX_CHARACTERS_PER_CELL,
        metadata={"help": "Maximum characters written to a multi-line cell", "type": int},
    )
    sheet_name: str = field(
        default=DEFAULT_SHEET_NAME,
        metadata={"help": "Name of the comparison worksheet"},
    )
    parallel_fields: bool = field(
        default=False,
        metadata={"help": "Import fields concurrently as well as documents"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.max_workers is not None and self.max_workers <= 0:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")
        if self.max_cell_chars <= 0:
            raise ValueError(f"max_cell_chars must be positive, got {self.max_cell_chars}")
        if not self.sheet_name:
            raise ValueError("sheet_name must not be empty")


def options_from_mapping(config: Mapping[str, Any], base: ReportOptions | None = None) -> ReportOptions:
    """Build :class:`ReportOptions` from a configuration mapping.

    Keys may use hyphens or underscores (``max-workers`` or ``max_workers``).

    Parameters
    ----------
    config : mapping
        Configuration values
    base : ReportOptions, optional
        Options to start from; defaults to ``ReportOptions()``

    Raises
    ------
    ValidationError
        If a key is unknown or a value is out of range

    """
    base = base or ReportOptions()
    known = {f.name for f in fields(ReportOptions)}
    updates: Dict[str, Any] = {}
    for key, value in config.items():
        name = str(key).replace("-", "_")
        if name not in known:
            raise ValidationError(f"Unknown report option: {key}", parameter_name=str(key), parameter_value=value)
        updates[name] = value
    try:
        return base.create_updated(**updates)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid report options: {e}", original_error=e) from e


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)
    config = data.get("tool", {}).get("spdxdiff", {})
    if not isinstance(config, dict):
        raise ValidationError(
            f"[tool.spdxdiff] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a configuration dictionary from JSON, TOML, YAML, or pyproject.toml.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary (empty for a pyproject.toml without a
        ``[tool.spdxdiff]`` table)

    Raises
    ------
    ValidationError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ValidationError(f"Configuration file does not exist: {config_path}", parameter_name="config_path")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ValidationError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except ValidationError:
        raise
    except Exception as e:
        raise ValidationError(f"Error reading config file {config_path}: {e}", original_error=e) from e

    if not isinstance(config, dict):
        raise ValidationError(f"Configuration in {config_path} must be a mapping, got {type(config).__name__}")

    logger.debug("Loaded configuration from %s", config_path)
    return config


def load_options_file(config_path: Path | str, base: ReportOptions | None = None) -> ReportOptions:
    """Load :class:`ReportOptions` from a configuration file."""
    return options_from_mapping(load_config_file(config_path), base=base)
