"""Collection and reporting of documentation errors."""

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

INHERIT_DOC_WITHIN_INAPPROPRIATE_TAG = "doclet.inheritDocWithinInappropriateTag"


@dataclass(frozen=True)
class Diagnostic:
    """A documentation error found at a source location."""

    location: str
    code: str


class DiagnosticReport:
    """Error channel passed into resolution calls; records what it is told."""

    def __init__(
        self,
        config_hash: str = "",
        messages: dict[str, str] | None = None,
        suppressed: list[str] | None = None,
    ) -> None:
        """Initialize the report with message texts and suppressed codes."""
        self.config_hash = config_hash
        self.messages = messages or {}
        self.suppressed = set(suppressed or [])
        self.diagnostics: list[Diagnostic] = []
        self.start_time = time.time()

    def report(self, location: str, code: str) -> None:
        """Record one error; it is logged unless its code is suppressed.

        The same error at the same location is recorded once, however many
        pages render the offending tag.
        """
        d = Diagnostic(location, code)
        if d in self.diagnostics:
            return
        self.diagnostics.append(d)
        if code not in self.suppressed:
            logger.error(
                "%s: %s", location or "<unknown>", self.messages.get(code, code)
            )

    @property
    def error_count(self) -> int:
        """Number of recorded errors, suppressed ones included."""
        return len(self.diagnostics)

    def generate_report(self, path: str) -> None:
        """Write the collected diagnostics as JSON."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_errors": self.error_count,
            },
            "diagnostics": [
                {"location": d.location, "code": d.code} for d in self.diagnostics
            ],
            "stats": self._compute_stats(),
        }
        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        code_counts: dict[str, int] = {}
        for d in self.diagnostics:
            code_counts[d.code] = code_counts.get(d.code, 0) + 1
        return {"code_counts": code_counts}
