"""Batch constraint checking entrypoints.

This module has no CLI dependencies so it can be used both by the
``semver-ranges`` command and directly from other tools.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from collections.abc import Iterable

from .config import Settings, load_settings
from .models.constraint_entry import ConstraintEntry
from .parsers import get_parser
from .report import INVALID_RANGE, INVALID_VERSION, SATISFIED, UNSATISFIED, aggregate
from .validators.constraints_file import validate_constraints_file
from .versions import try_parse

logger = logging.getLogger(__name__)


def check_constraint(entry: ConstraintEntry, settings: Settings) -> dict[str, Any]:
    """Classify a single constraint, returning a report row."""
    dialect = entry.dialect or settings.default_dialect
    result: dict[str, Any] = {**entry.to_dict(), "dialect": dialect, "interval": None}

    version_range = get_parser(dialect).parse(entry.range)
    if version_range is None:
        logger.warning("Constraint %r: %r is not a valid %s range", entry.name, entry.range, dialect)
        result["status"] = INVALID_RANGE
        return result
    result["interval"] = str(version_range)

    version = try_parse(entry.version)
    if version is None:
        logger.warning("Constraint %r: %r is not a valid version", entry.name, entry.version)
        result["status"] = INVALID_VERSION
        return result

    result["status"] = SATISFIED if version_range.contains(version) else UNSATISFIED
    return result


def check_constraints(
    entries: Iterable[ConstraintEntry],
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Check every constraint and aggregate the results into a report.

    Params:
        entries: constraints to classify
        settings: dialect and failure policy; when None, settings are loaded
            from the environment (see ``config.load_settings``)

    Returns: dict report with per-constraint ``results`` and ``totals``
    """
    if settings is None:
        settings = load_settings()

    results = [check_constraint(entry, settings) for entry in entries]
    return aggregate(results, fail_on_invalid=settings.fail_on_invalid)


def load_constraints(path: Path) -> list[ConstraintEntry]:
    """Load and schema-validate a constraints file."""
    document = validate_constraints_file(path)
    return [ConstraintEntry.from_mapping(item) for item in document["constraints"]]


def check_file(path: Path, settings: Settings | None = None) -> dict[str, Any]:
    """Load the constraints file at ``path`` and check every entry."""
    return check_constraints(load_constraints(path), settings)
