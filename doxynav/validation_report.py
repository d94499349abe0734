"""Logic for generating reports on navigation index validation."""

import json
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from doxynav.iter_entries import iter_entries
from doxynav.nav_entry import NavEntry
from doxynav.validation_issue import ERROR, WARNING, ValidationIssue

CURRENT_SCHEMA_VERSION = 1


class ValidationReport:
    """Collects and summarizes validation results of several trees."""

    def __init__(
        self, config_hash: str, schema_version: int = CURRENT_SCHEMA_VERSION
    ) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.schema_version = schema_version
        self.issues: list[tuple[str, ValidationIssue]] = []  # (tree, issue)
        self.entry_counts: dict[str, int] = {}
        self.max_depths: dict[str, int] = {}
        self.start_time = time.time()

    def add_tree(
        self,
        tree: str,
        entries: Sequence[NavEntry],
        issues: Sequence[ValidationIssue],
    ) -> None:
        """Add the validation result of a single tree to the report."""
        depths = [step.depth for step in iter_entries(entries)]
        self.entry_counts[tree] = len(depths)
        self.max_depths[tree] = max(depths, default=0)
        self.issues.extend((tree, i) for i in issues)

    @property
    def error_count(self) -> int:
        """Number of error-level issues."""
        return sum(1 for _, i in self.issues if i.severity == ERROR)

    @property
    def warning_count(self) -> int:
        """Number of warning-level issues."""
        return sum(1 for _, i in self.issues if i.severity == WARNING)

    def to_dict(self) -> dict[str, Any]:
        """Return the report as JSON-friendly data."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "schema_version": self.schema_version,
                "total_trees": len(self.entry_counts),
                "total_entries": sum(self.entry_counts.values()),
            },
            "issues": [
                {
                    "tree": tree,
                    "code": i.code,
                    "severity": i.severity,
                    "message": i.message,
                    "path": list(i.path),
                }
                for tree, i in self.issues
            ],
            "stats": self._compute_stats(),
        }

    def generate_report(self, path: str, indent: int = 2) -> None:
        """Write the summary report to a JSON file."""
        text = json.dumps(self.to_dict(), indent=indent)
        Path(path).write_text(text, encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        code_counts: dict[str, int] = {}
        for _, i in self.issues:
            code_counts[i.code] = code_counts.get(i.code, 0) + 1

        return {
            "code_counts": code_counts,
            "severity_counts": {ERROR: self.error_count, WARNING: self.warning_count},
            "entry_counts": dict(self.entry_counts),
            "max_depths": dict(self.max_depths),
            "clean_trees": sorted(set(self.entry_counts) - {t for t, _ in self.issues}),
        }
