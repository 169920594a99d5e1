from __future__ import annotations

import json
from pathlib import Path

import pytest

from semver_ranges.cli import EXIT_ERROR, EXIT_FAILURES, EXIT_OK, main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("SEMVER_RANGES_CONFIG", "SEMVER_RANGES_DIALECT", "SEMVER_RANGES_WARN_ONLY"):
        monkeypatch.delenv(name, raising=False)


def _constraints(tmp_path: Path, constraints: list[dict]) -> Path:
    path = tmp_path / "constraints.json"
    path.write_text(json.dumps({"constraints": constraints}), encoding="utf-8")
    return path


def test_parse_prints_canonical_forms(capsys):
    assert main(["parse", "(1.0,)"]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["1.0.0 < v", "(1.0.0,)"]


def test_parse_npm_dialect(capsys):
    assert main(["parse", "^1.2.3", "--dialect", "npm"]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["1.2.3 <= v < 2.0.0", "[1.2.3,2.0.0)"]


def test_parse_invalid_range(capsys):
    assert main(["parse", "(1.0.0)"]) == EXIT_ERROR
    assert "is not a valid nuget range" in capsys.readouterr().err


def test_check_contained(capsys):
    assert main(["check", "[1.0,2.0)", "1.5.0"]) == EXIT_OK
    assert "1.5.0 satisfies 1.0.0 <= v < 2.0.0" in capsys.readouterr().out


def test_check_not_contained(capsys):
    assert main(["check", "[1.0,2.0)", "2.0.0"]) == EXIT_FAILURES
    assert "does not satisfy" in capsys.readouterr().out


def test_check_invalid_version(capsys):
    assert main(["check", "[1.0,2.0)", "two"]) == EXIT_ERROR
    assert "is not a valid version" in capsys.readouterr().err


def test_check_uses_configured_dialect(tmp_path, capsys):
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"defaultDialect": "npm"}), encoding="utf-8")
    assert main(["--config", str(config), "check", "~1.2", "1.2.5"]) == EXIT_OK


def test_invalid_config(tmp_path, capsys):
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"defaultDialect": "maven"}), encoding="utf-8")
    assert main(["--config", str(config), "parse", "1.0"]) == EXIT_ERROR
    assert "Unknown dialect" in capsys.readouterr().err


def test_scan_json_report(tmp_path, capsys):
    path = _constraints(tmp_path, [{"name": "a", "range": "[1.0,2.0)", "version": "1.0.0"}])
    assert main(["scan", str(path)]) == EXIT_OK
    report = json.loads(capsys.readouterr().out)
    assert report["hasFailures"] is False
    assert report["totals"]["satisfied"] == 1


def test_scan_failures_exit_code(tmp_path, capsys):
    path = _constraints(tmp_path, [{"name": "a", "range": "[1.0,2.0)", "version": "2.0.0"}])
    assert main(["scan", str(path)]) == EXIT_FAILURES
    assert main(["scan", str(path), "--warn-only"]) == EXIT_OK


def test_scan_warn_only_env(tmp_path, monkeypatch, capsys):
    path = _constraints(tmp_path, [{"name": "a", "range": "[1.0,2.0)", "version": "2.0.0"}])
    monkeypatch.setenv("SEMVER_RANGES_WARN_ONLY", "true")
    assert main(["scan", str(path)]) == EXIT_OK


def test_scan_summary(tmp_path, capsys):
    path = _constraints(tmp_path, [{"name": "a", "range": "[1.0,2.0)", "version": "1.0.0"}])
    assert main(["scan", str(path), "--summary"]) == EXIT_OK
    assert capsys.readouterr().out.startswith("# semver-ranges Summary")


def test_scan_missing_file(tmp_path, capsys):
    assert main(["scan", str(tmp_path / "missing.json")]) == EXIT_ERROR
    assert "ERROR:" in capsys.readouterr().err


def test_scan_schema_violation(tmp_path, capsys):
    path = _constraints(tmp_path, [{"name": "a"}])
    assert main(["scan", str(path)]) == EXIT_ERROR
    assert "failed validation" in capsys.readouterr().err


def test_scan_reports_blank_range_as_invalid(tmp_path, capsys):
    path = _constraints(
        tmp_path,
        [
            {"name": "ok", "range": "[1.0,2.0)", "version": "1.5.0"},
            {"name": "blank", "range": "   ", "version": "1.0.0"},
        ],
    )
    assert main(["scan", str(path)]) == EXIT_FAILURES
    report = json.loads(capsys.readouterr().out)
    assert [r["status"] for r in report["results"]] == ["satisfied", "invalid-range"]
