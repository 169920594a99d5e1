"""Schema validation for constraints files.

A constraints file is a JSON document of the form
``{"constraints": [{"name": ..., "range": ..., "version": ..., "dialect": ...}]}``.
Run as ``semver-ranges-validate FILE`` to check one without evaluating it.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

DEFAULT_SCHEMA = Path(__file__).resolve().parents[1] / "schemas" / "constraints.schema.json"

# Failures that can occur while reading and validating a constraints file.
LOAD_ERRORS = (OSError, json.JSONDecodeError, ValueError)


class ConstraintsFileError(ValueError):
    """Raised when a constraints document does not match the schema."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = errors
        lines = []
        for error in errors:
            pointer = "/".join(str(p) for p in error.path) or "<root>"
            lines.append(f"- {pointer}: {error.message}")
        super().__init__("\n" + "\n".join(lines))


def describe_load_error(exc: BaseException) -> str:
    """Return the one-line ``ERROR:`` message for a LOAD_ERRORS failure."""
    if isinstance(exc, json.JSONDecodeError):
        return f"ERROR: Failed to read JSON: {exc}"
    if isinstance(exc, ConstraintsFileError):
        return f"ERROR: Constraints file failed validation:{exc}"
    return f"ERROR: {exc}"


def validate_document(document: object, schema_path: Path = DEFAULT_SCHEMA) -> None:
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    errors = sorted(
        Draft202012Validator(schema).iter_errors(document), key=lambda e: list(e.path)
    )
    if errors:
        raise ConstraintsFileError(errors)


def validate_constraints_file(input_path: Path, schema_path: Path = DEFAULT_SCHEMA) -> dict:
    """Load ``input_path`` and validate it, returning the parsed document."""
    document = json.loads(input_path.read_text(encoding="utf-8"))
    validate_document(document, schema_path)
    return document


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="semver-ranges-validate", description=__doc__.splitlines()[0])
    parser.add_argument("input", type=Path, help="Constraints file to validate")
    parser.add_argument("--schema", type=Path, default=DEFAULT_SCHEMA, help="JSON schema to validate against")
    args = parser.parse_args(argv)

    try:
        document = validate_constraints_file(args.input, args.schema)
    except LOAD_ERRORS as exc:
        print(describe_load_error(exc), file=sys.stderr)
        return 1

    print(f"{args.input}: {len(document['constraints'])} constraint(s), valid")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
