"""Tests for the DiagnosticReport logic."""

import json
import logging
from pathlib import Path

import pytest

from docinherit.diagnostic_report import (
    INHERIT_DOC_WITHIN_INAPPROPRIATE_TAG,
    DiagnosticReport,
)


def test_diagnostic_report_generation(tmp_path: Path) -> None:
    """Verify that the diagnostics report is generated correctly."""
    report = DiagnosticReport("hash123")
    report.report("A.java: a.A#run()", INHERIT_DOC_WITHIN_INAPPROPRIATE_TAG)
    report.report("B.java: b.B#run()", INHERIT_DOC_WITHIN_INAPPROPRIATE_TAG)
    report.report("C.java: c.C#run()", "doclet.other")

    output_file = tmp_path / "report.json"
    report.generate_report(str(output_file))

    assert output_file.exists()
    content = json.loads(output_file.read_text(encoding="utf-8"))

    assert content["meta"]["config_hash"] == "hash123"
    assert content["meta"]["total_errors"] == 3
    assert content["diagnostics"][0] == {
        "location": "A.java: a.A#run()",
        "code": INHERIT_DOC_WITHIN_INAPPROPRIATE_TAG,
    }
    counts = content["stats"]["code_counts"]
    assert counts[INHERIT_DOC_WITHIN_INAPPROPRIATE_TAG] == 2
    assert counts["doclet.other"] == 1


def test_report_logs_message(caplog: pytest.LogCaptureFixture) -> None:
    """Verify that reported errors are logged with their message text."""
    report = DiagnosticReport(messages={"doclet.x": "Something is wrong"})
    with caplog.at_level(logging.ERROR):
        report.report("A.java: a.A#run()", "doclet.x")
    assert "A.java: a.A#run(): Something is wrong" in caplog.text
    assert report.error_count == 1


def test_suppressed_codes_are_recorded_silently(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Verify that suppressed codes are counted but not logged."""
    report = DiagnosticReport(suppressed=["doclet.x"])
    with caplog.at_level(logging.ERROR):
        report.report("A.java", "doclet.x")
    assert caplog.text == ""
    assert report.error_count == 1


def test_repeated_error_is_recorded_once() -> None:
    """Verify that the same error at the same location is recorded once."""
    report = DiagnosticReport()
    report.report("A.java: a.A#run()", INHERIT_DOC_WITHIN_INAPPROPRIATE_TAG)
    report.report("A.java: a.A#run()", INHERIT_DOC_WITHIN_INAPPROPRIATE_TAG)
    report.report("B.java: b.B#run()", INHERIT_DOC_WITHIN_INAPPROPRIATE_TAG)
    assert report.error_count == 2
